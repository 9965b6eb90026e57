#!/usr/bin/env python3
"""
File utility functions for the PDF Reviewer package.
"""

import logging
from pathlib import Path
from typing import List

from ..errors import FileSelectionError

# Get logger
logger = logging.getLogger('pdf_reviewer')

def list_directory_files(directory: Path) -> List[Path]:
    """
    List the regular files of a directory, non-recursively, sorted by name.

    Args:
        directory: Directory to list

    Returns:
        Paths of the files in the directory

    Raises:
        FileSelectionError: The directory is missing or cannot be read
    """
    path = Path(directory)
    if not path.is_dir():
        raise FileSelectionError(f"PDF directory not found: {path}")

    try:
        entries = sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FileSelectionError(f"Could not read PDF directory {path}: {e}") from e

    files = [entry for entry in entries if entry.is_file()]
    skipped = len(entries) - len(files)
    if skipped:
        logger.debug(f"Skipped {skipped} non-file entries in {path}")
    return files


def read_file_bytes(path: Path) -> bytes:
    """
    Read a whole file into memory.

    Raises:
        FileSelectionError: The file cannot be read
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileSelectionError(f"Could not read {path}: {e}") from e
