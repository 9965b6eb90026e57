#!/usr/bin/env python3
"""
Console interaction for the PDF Reviewer package.

The pipeline only needs two things from the user's terminal: choosing one
entry out of a list, and an indicator while a request is in flight. Both are
behind UserInteraction so the pipeline can run without a terminal.
"""

import sys
import threading
import time
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, TextIO

from colorama import Fore, Style

from ..errors import FileSelectionError


class UserInteraction:
    """Capability the pipeline uses to talk to the user."""

    def select_one(self, prompt: str, items: List[str], default: int = 0) -> int:
        """Let the user pick one of `items`; return its zero-based index."""
        raise NotImplementedError

    def progress(self, message: str):
        """Return a context manager showing an indeterminate indicator while it is active."""
        raise NotImplementedError


class NullInteraction(UserInteraction):
    """Non-interactive fallback: always picks the default and shows no progress."""

    def select_one(self, prompt: str, items: List[str], default: int = 0) -> int:
        return default

    @contextmanager
    def progress(self, message: str) -> Iterator[None]:
        yield


class Spinner:
    """Braille spinner drawn from a daemon thread until stopped."""

    FRAMES = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']

    def __init__(self, message: str, stream: Optional[TextIO] = None, interval: float = 0.1):
        self.message = message
        self.stream = stream or sys.stdout
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread = None

    def _animate(self):
        i = 0
        while not self._stop_event.is_set():
            self.stream.write(f"\r{Fore.BLUE}{self.message} {self.FRAMES[i % len(self.FRAMES)]}{Style.RESET_ALL}")
            self.stream.flush()
            i += 1
            time.sleep(self.interval)
        # Clear the spinner line when done
        self.stream.write("\r" + " " * (len(self.message) + 10) + "\r")
        self.stream.flush()

    def start(self):
        # Only draw on a terminal; piped output would collect the frames
        if not (hasattr(self.stream, "isatty") and self.stream.isatty()):
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._animate, daemon=True)
        self._thread.start()

    def stop(self):
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=1.0)
            self._thread = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.stop()
        return False


class ConsoleInteraction(UserInteraction):
    """Numbered menu and spinner on the terminal."""

    def __init__(self, input_func: Callable[[str], str] = input, stream: Optional[TextIO] = None):
        """
        Args:
            input_func: Reads one line of user input (defaults to the builtin input)
            stream: Where the menu and spinner are written (defaults to stdout)
        """
        self.input_func = input_func
        self.stream = stream or sys.stdout

    def select_one(self, prompt: str, items: List[str], default: int = 0) -> int:
        """
        Print a numbered menu and read the user's choice.

        Pressing Enter accepts the default entry. Invalid input re-prompts.

        Raises:
            FileSelectionError: The list is empty or input ended before a choice was made
        """
        if not items:
            raise FileSelectionError("Nothing to select from")

        self.stream.write(f"{Fore.CYAN}{prompt}{Style.RESET_ALL}\n\n")
        for i, item in enumerate(items):
            marker = ">" if i == default else " "
            self.stream.write(f"{marker} {i + 1:>3}. {item}\n")
        self.stream.write("\n")
        self.stream.flush()

        while True:
            try:
                answer = self.input_func(f"Enter a number [{default + 1}]: ").strip()
            except EOFError:
                raise FileSelectionError("Input ended before a selection was made") from None

            if not answer:
                return default
            try:
                choice = int(answer)
            except ValueError:
                choice = 0
            if 1 <= choice <= len(items):
                return choice - 1
            self.stream.write(f"{Fore.YELLOW}Please enter a number between 1 and {len(items)}.{Style.RESET_ALL}\n")

    @contextmanager
    def progress(self, message: str) -> Iterator[None]:
        with Spinner(message, stream=self.stream):
            yield
