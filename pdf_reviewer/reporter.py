#!/usr/bin/env python3
"""
Reporter: prints labeled result sections to standard output.
"""

import sys
from typing import Optional, TextIO

from colorama import Fore, Style


class Reporter:
    """Writes labeled text blocks in the order they are reported."""

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None):
        self.stream = stream or sys.stdout
        if color is None:
            color = hasattr(self.stream, 'isatty') and self.stream.isatty()
        self.color = color

    def _heading(self, label: str) -> str:
        if self.color:
            return f"{Fore.CYAN}{label}:{Style.RESET_ALL}"
        return f"{label}:"

    def report(self, label: str, text: str):
        """Print one section: a blank line pair, the heading, the text."""
        self.stream.write("\n\n")
        self.stream.write(f"{self._heading(label)}\n\n")
        self.stream.write(f"{text}\n\n")
        self.stream.flush()

    def report_original(self, text: str):
        self.report("ORIGINAL", text)
