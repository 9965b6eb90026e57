#!/usr/bin/env python3
"""
PDF Extractor Module

This module extracts plain text from the raw bytes of a PDF file.
"""

import io
import logging

import PyPDF2
from colorama import Fore, Style

from ..errors import ExtractionError

# Get logger
logger = logging.getLogger('pdf_reviewer')

def extract_text_from_bytes(data: bytes) -> str:
    """
    Extract text from an in-memory PDF.

    Pages are extracted in order and joined with blank lines. Any failure
    aborts the extraction; partial text is never returned.

    Args:
        data: Raw bytes of the PDF file

    Returns:
        Extracted text (may be empty for image-only PDFs)

    Raises:
        ExtractionError: The bytes are not a parseable PDF
    """
    if not data:
        raise ExtractionError("Empty file: nothing to extract")

    try:
        reader = PyPDF2.PdfReader(io.BytesIO(data))
        num_pages = len(reader.pages)
        logger.info(f"Extracting text from PDF: {num_pages} pages")

        page_texts = []
        for i, page in enumerate(reader.pages):
            page_text = page.extract_text()
            if page_text:
                page_texts.append(page_text)
            logger.debug(f"Extracted page {i + 1}/{num_pages}")
    except Exception as e:
        raise ExtractionError(f"Could not extract text from PDF: {e}") from e

    text = "\n\n".join(page_texts)
    if not text.strip():
        logger.warning(f"{Fore.YELLOW}No text could be extracted from the PDF{Style.RESET_ALL}")
    return text
