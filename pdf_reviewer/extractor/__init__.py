"""
Module for turning PDF files into clean text.
"""

from .pdf_extractor import extract_text_from_bytes
from .sanitizer import WHITELIST, estimate_tokens, sanitize_text

__all__ = ['extract_text_from_bytes', 'sanitize_text', 'estimate_tokens', 'WHITELIST']
