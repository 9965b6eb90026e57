#!/usr/bin/env python3
"""
Completion Client Module

This module sends a system instruction and a block of user content to a
RapidAPI-hosted chat-completion endpoint and parses the reply.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..errors import ApiStatusError, TransportError
from ..utils.console import NullInteraction, UserInteraction
from .models import CompletionRequest, CompletionResponse

# Get logger
logger = logging.getLogger('pdf_reviewer')

DEFAULT_API_URL = "https://openai80.p.rapidapi.com/chat/completions"
DEFAULT_API_HOST = "openai80.p.rapidapi.com"
DEFAULT_MODEL = "gpt-3.5-turbo"
PROGRESS_MESSAGE = "\t OpenAI is generating..."


class CompletionClient:
    """Client for the chat-completion endpoint."""

    def __init__(self, api_key: str, api_url: str = DEFAULT_API_URL, api_host: str = DEFAULT_API_HOST,
                 model: str = DEFAULT_MODEL, timeout: Tuple[float, float] = (10.0, 120.0),
                 max_retries: int = 2, backoff_factor: float = 1.0,
                 interaction: Optional[UserInteraction] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the completion client.

        Args:
            api_key: RapidAPI key sent in the X-RapidAPI-Key header
            api_url: Full URL of the chat-completion endpoint
            api_host: Value of the X-RapidAPI-Host header
            model: Model identifier placed in every request body
            timeout: (connect, read) timeouts in seconds
            max_retries: Retries after the first attempt on transport failures and retryable statuses
            backoff_factor: Exponential backoff factor between retries
            interaction: Where the progress indicator is shown (optional)
            session: Pre-built session, mainly for tests (optional)
        """
        self.api_key = api_key
        self.api_url = api_url
        self.api_host = api_host
        self.model = model
        self.timeout = timeout
        self.interaction = interaction or NullInteraction()

        if session is None:
            # Configure session with retry mechanism
            session = requests.Session()
            retry_strategy = Retry(
                total=max_retries,
                connect=max_retries,
                read=max_retries,
                backoff_factor=backoff_factor,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["POST"],
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.api_host,
        }

    def build_request_body(self, content: str, instruction: str) -> Dict[str, Any]:
        """Build the JSON body for one completion request."""
        request = CompletionRequest(system_instruction=instruction, user_content=content, model=self.model)
        return request.to_payload()

    def complete(self, content: str, instruction: str) -> CompletionResponse:
        """
        Send one completion request and parse the reply.

        Args:
            content: User-role message content (the document text)
            instruction: System-role message framing the task

        Returns:
            The parsed completion response

        Raises:
            TransportError: The endpoint could not be reached
            ApiStatusError: The endpoint answered with a non-success status
            ResponseSchemaError: The body does not match the completion schema
        """
        body = self.build_request_body(content, instruction)
        logger.debug(f"Sending request to {self.api_url} (model: {self.model}, {len(content)} characters)")

        with self.interaction.progress(PROGRESS_MESSAGE):
            try:
                response = self.session.post(self.api_url, headers=self.headers, json=body, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                raise TransportError(f"Request to {self.api_url} failed: {e}") from e

        if not response.ok:
            raise ApiStatusError(response.status_code, response.text)

        completion = CompletionResponse.from_json(response.text)
        logger.debug(f"Received completion {completion.id}: {completion.usage.total_tokens} tokens used")
        return completion

    def close(self):
        self.session.close()


def complete(content: str, instruction: str, api_key: str, **kwargs) -> CompletionResponse:
    """Send a single completion request with a one-off client."""
    client = CompletionClient(api_key, **kwargs)
    try:
        return client.complete(content, instruction)
    finally:
        client.close()
