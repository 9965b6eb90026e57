#!/usr/bin/env python3
"""
Text sanitizer: keeps ASCII letters, digits, punctuation and spaces only.
"""

import re
import string

WHITELIST = string.ascii_letters + string.digits + string.punctuation + " "

_DISALLOWED = re.compile(f"[^a-zA-Z0-9{re.escape(string.punctuation)} ]")


def sanitize_text(text: str) -> str:
    """Delete every character outside the whitelist in one pass over the whole text."""
    return _DISALLOWED.sub("", text)


def estimate_tokens(text: str) -> int:
    # Rough estimate: ~4 chars per token
    return len(text) // 4
