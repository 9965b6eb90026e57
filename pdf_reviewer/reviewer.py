#!/usr/bin/env python3
"""
PDF Reviewer Module

This module runs the review pipeline:
1. Let the user pick a file from the PDF directory
2. Extract its text and strip characters outside the whitelist
3. Send the cleaned text to the completion endpoint once per review task
4. Print each result as soon as it arrives
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from colorama import Fore, Style

from .client import CompletionClient, CompletionResponse
from .config import Config, ReviewTask
from .errors import FileSelectionError
from .extractor import estimate_tokens, extract_text_from_bytes, sanitize_text
from .reporter import Reporter
from .utils.console import UserInteraction
from .utils.file_utils import list_directory_files, read_file_bytes

# Get logger
logger = logging.getLogger('pdf_reviewer')

SELECT_PROMPT = "SELECT A FILE:"


@dataclass
class ReviewResult:
    """Outcome of one review task."""

    task: ReviewTask
    response: CompletionResponse

    @property
    def text(self) -> str:
        return self.response.first_content()


class PDFReviewer:
    """Class to pick a PDF, extract its text and review it with a chat model."""

    def __init__(self, config: Config, client: CompletionClient, interaction: UserInteraction,
                 reporter: Optional[Reporter] = None,
                 extractor: Callable[[bytes], str] = extract_text_from_bytes):
        """
        Initialize the reviewer.

        Args:
            config: Settings for this run
            client: Completion client used for every task
            interaction: Menu and progress capability
            reporter: Where results are printed (defaults to stdout)
            extractor: Turns raw file bytes into text
        """
        self.config = config
        self.client = client
        self.interaction = interaction
        self.reporter = reporter or Reporter()
        self.extractor = extractor

    def choose_file(self) -> Path:
        """
        Present the files of the PDF directory and return the chosen path.

        Raises:
            FileSelectionError: The directory is missing, unreadable or empty
        """
        files = list_directory_files(self.config.pdf_dir)
        if not files:
            raise FileSelectionError(f"No files found in {self.config.pdf_dir}")

        index = self.interaction.select_one(SELECT_PROMPT, [f.name for f in files], default=0)
        selected = files[index]
        logger.info(f"{Fore.BLUE}Selected file: {selected.name}{Style.RESET_ALL}")

        if selected.suffix.lower() != '.pdf':
            logger.warning(f"{Fore.YELLOW}{selected.name} does not have a .pdf extension{Style.RESET_ALL}")
        return selected

    def load_text(self, path: Path) -> str:
        """Read a file, extract its text and sanitize it."""
        data = read_file_bytes(path)
        text = self.extractor(data)
        clean_text = sanitize_text(text)
        logger.debug(f"Sanitized text: {len(clean_text)} of {len(text)} characters kept")

        estimated = estimate_tokens(clean_text)
        if estimated > self.config.token_warning_threshold:
            logger.warning(
                f"{Fore.YELLOW}Document is about {estimated} tokens, more than the "
                f"{self.config.token_warning_threshold} the model may accept. Sending it anyway.{Style.RESET_ALL}"
            )
        return clean_text

    def review_text(self, text: str, tasks: Optional[List[ReviewTask]] = None) -> List[ReviewResult]:
        """
        Run each task against the same text, one after another, printing as it goes.

        Returns:
            One result per task, in task order
        """
        tasks = self.config.tasks if tasks is None else tasks
        results = []
        for task in tasks:
            logger.info(f"{Fore.CYAN}Running task: {task.label.lower()}{Style.RESET_ALL}")
            response = self.client.complete(text, task.instruction)
            result = ReviewResult(task=task, response=response)
            self.reporter.report(task.label, result.text)
            results.append(result)
        return results

    def run(self) -> List[ReviewResult]:
        """Run the whole pipeline for one file."""
        path = self.choose_file()
        text = self.load_text(path)

        if self.config.show_original:
            self.reporter.report_original(text)

        return self.review_text(text)
