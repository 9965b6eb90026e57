"""
Utility functions for the PDF Reviewer package.
"""

from .logging_utils import ColoredFormatter, PlainFormatter, setup_logging
from .file_utils import list_directory_files, read_file_bytes
from .console import ConsoleInteraction, NullInteraction, Spinner, UserInteraction

__all__ = ['ColoredFormatter', 'PlainFormatter', 'setup_logging', 'list_directory_files', 'read_file_bytes',
           'ConsoleInteraction', 'NullInteraction', 'Spinner', 'UserInteraction']
