"""Unit tests for the text sanitizer."""

import string

import pytest
import pytest_check as check

from pdf_reviewer.extractor import WHITELIST, estimate_tokens, sanitize_text

SAMPLES = [
    "",
    "Hello, World! 123",
    "Café naïve résumé",
    "line one\nline two\ttabbed\r\n",
    "emoji \U0001F600 and — dashes ‘quotes’",
    string.punctuation,
    "\x00\x01\x7f control",
    " non-breaking space",
]


class TestSanitizeText:
    """Tests for sanitize_text."""

    def test_keeps_whitelisted_text_unchanged(self) -> None:
        """Text made only of letters, digits, punctuation and spaces passes through."""
        assert sanitize_text("Hello, World! 123") == "Hello, World! 123"

    def test_keeps_all_ascii_punctuation(self) -> None:
        """Every ASCII punctuation symbol, including regex metacharacters, is kept."""
        assert sanitize_text(string.punctuation) == string.punctuation

    def test_strips_non_ascii_letters(self) -> None:
        """Accented letters are removed rather than transliterated."""
        assert sanitize_text("Café au lait") == "Caf au lait"

    def test_strips_newlines_and_tabs(self) -> None:
        """Only the plain space survives; other whitespace is deleted."""
        assert sanitize_text("one\ntwo\tthree\r\nfour") == "onetwothreefour"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_output_only_contains_whitelist(self, text: str) -> None:
        """Every output character belongs to the whitelist."""
        assert set(sanitize_text(text)) <= set(WHITELIST)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_preserves_order_of_kept_characters(self, text: str) -> None:
        """The output equals the input filtered down to whitelist characters."""
        expected = "".join(ch for ch in text if ch in WHITELIST)
        assert sanitize_text(text) == expected

    @pytest.mark.parametrize("text", SAMPLES)
    def test_is_idempotent(self, text: str) -> None:
        """Sanitizing twice gives the same result as sanitizing once."""
        once = sanitize_text(text)
        assert sanitize_text(once) == once


class TestEstimateTokens:
    """Tests for the token estimate used for oversize warnings."""

    def test_four_characters_per_token(self) -> None:
        check.equal(estimate_tokens(""), 0)
        check.equal(estimate_tokens("abcd"), 1)
        check.equal(estimate_tokens("a" * 4000), 1000)
