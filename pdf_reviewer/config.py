#!/usr/bin/env python3
"""
Configuration for the PDF Reviewer package.

All settings are gathered once at startup into a Config object that is
passed to the pipeline. Command-line flags win over environment variables,
which win over the built-in defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from .client.completion_client import DEFAULT_API_HOST, DEFAULT_API_URL, DEFAULT_MODEL
from .errors import ConfigurationError

API_KEY_ENV_VAR = "RAPID_API_KEY"
DEFAULT_PDF_DIR = "pdf"
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_READ_TIMEOUT = 120.0
DEFAULT_MAX_RETRIES = 2
DEFAULT_BACKOFF_FACTOR = 1.0
DEFAULT_TOKEN_WARNING_THRESHOLD = 4096


@dataclass(frozen=True)
class ReviewTask:
    """One pass over the document: a report label and the system instruction sent for it."""

    label: str
    instruction: str


SUMMARY_TASK = ReviewTask("SUMMARY", "Summarize the following: ")
QUIZ_TASK = ReviewTask("QUIZ", "Make a 10 item quiz based on the following: ")

TASKS = {
    'summary': SUMMARY_TASK,
    'quiz': QUIZ_TASK,
}


@dataclass
class Config:
    """Settings for one run of the reviewer."""

    api_key: str
    pdf_dir: Path
    api_url: str = DEFAULT_API_URL
    api_host: str = DEFAULT_API_HOST
    model: str = DEFAULT_MODEL
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    backoff_factor: float = DEFAULT_BACKOFF_FACTOR
    tasks: List[ReviewTask] = field(default_factory=lambda: [SUMMARY_TASK, QUIZ_TASK])
    show_original: bool = False
    token_warning_threshold: int = DEFAULT_TOKEN_WARNING_THRESHOLD

    @property
    def timeout(self) -> Tuple[float, float]:
        return (self.connect_timeout, self.read_timeout)


def load_config(args, environ: Optional[Mapping[str, str]] = None, cwd: Optional[Path] = None) -> Config:
    """
    Build the run configuration from parsed arguments and the environment.

    Args:
        args: Parsed command-line arguments
        environ: Environment mapping (defaults to os.environ, after .env was merged in)
        cwd: Working directory the PDF directory is resolved against (defaults to the current one)

    Returns:
        Config for this run

    Raises:
        ConfigurationError: No API key was given
    """
    environ = os.environ if environ is None else environ
    cwd = Path.cwd() if cwd is None else Path(cwd)

    api_key = getattr(args, 'api_key', None) or environ.get(API_KEY_ENV_VAR)
    if not api_key:
        raise ConfigurationError(
            f"Missing Rapid API key. Set it as the {API_KEY_ENV_VAR} environment variable, "
            f"in a .env file, or pass it with --api-key."
        )

    pdf_dir = Path(getattr(args, 'pdf_dir', None) or DEFAULT_PDF_DIR)
    if not pdf_dir.is_absolute():
        pdf_dir = cwd / pdf_dir

    task_names = getattr(args, 'tasks', None) or ['summary', 'quiz']
    tasks = [TASKS[name] for name in task_names]

    timeout = getattr(args, 'timeout', None)
    retries = getattr(args, 'retries', None)

    return Config(
        api_key=api_key,
        pdf_dir=pdf_dir,
        model=getattr(args, 'model', None) or DEFAULT_MODEL,
        read_timeout=timeout if timeout is not None else DEFAULT_READ_TIMEOUT,
        max_retries=retries if retries is not None else DEFAULT_MAX_RETRIES,
        tasks=tasks,
        show_original=bool(getattr(args, 'show_original', False)),
    )
