#!/usr/bin/env python3
"""
Logging utility functions for the PDF Reviewer package.
"""

import logging
import re
import colorama
from colorama import Fore, Style

# Initialize colorama for cross-platform colored terminal output
colorama.init(autoreset=True)

class ColoredFormatter(logging.Formatter):
    """Custom formatter for colored log messages"""

    COLORS = {
        'DEBUG': Fore.BLUE,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Style.BRIGHT
    }

    def format(self, record):
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{Style.RESET_ALL}"


class PlainFormatter(logging.Formatter):
    """Formatter for log files: drops the color codes embedded in messages"""

    ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

    def format(self, record):
        return self.ANSI_ESCAPE.sub("", super().format(record))


def setup_logging(args):
    """Configure logging based on command-line arguments.

    Args:
        args: Parsed arguments; uses `verbose` and `log_file`

    Returns:
        logging.Logger: The configured package logger
    """
    # Get the logger
    logger = logging.getLogger('pdf_reviewer')

    # Clear existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    # Handlers do the filtering so the log file can keep debug records
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logger.setLevel(logging.DEBUG)

    # Console handler writes to stderr so stdout only carries the report
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(ColoredFormatter('%(message)s'))
    logger.addHandler(console_handler)

    # Plain file handler if requested
    log_file = getattr(args, 'log_file', None)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(PlainFormatter('%(asctime)s %(levelname)s %(message)s'))
        logger.addHandler(file_handler)

    # Log the configuration
    logger.info(f"{Fore.CYAN}PDF Reviewer{Style.RESET_ALL}")
    logger.info(f"{Fore.CYAN}{'='*50}{Style.RESET_ALL}")

    if args.verbose:
        logger.debug("Verbose logging enabled")
    if log_file:
        logger.debug(f"Writing log file: {log_file}")

    return logger
