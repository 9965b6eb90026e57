#!/usr/bin/env python3
"""
Exception types for the PDF Reviewer package.

Every failure the pipeline can hit maps to one of these classes, and each
class carries the process exit code the CLI returns for it.
"""


class ReviewerError(Exception):
    """Base class for all PDF Reviewer errors."""

    exit_code = 1


class ConfigurationError(ReviewerError):
    """Required configuration (the API key) is missing."""

    exit_code = 2


class FileSelectionError(ReviewerError):
    """The PDF directory or the chosen file could not be listed, chosen or read."""

    exit_code = 3


class ExtractionError(ReviewerError):
    """The chosen file is not a parseable PDF."""

    exit_code = 4


class CompletionError(ReviewerError):
    """A chat-completion call failed."""

    exit_code = 5


class TransportError(CompletionError):
    """The request never produced a response (DNS, TLS, timeout, reset)."""


class ApiStatusError(CompletionError):
    """The endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        excerpt = body[:200] + "..." if len(body) > 200 else body
        super().__init__(f"API returned HTTP {status_code}: {excerpt}")


class ResponseSchemaError(CompletionError):
    """The response body does not match the chat-completion schema."""


class EmptyCompletionError(CompletionError):
    """The response contained no choices."""
