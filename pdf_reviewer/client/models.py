#!/usr/bin/env python3
"""
Request and response models for the chat-completion endpoint.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from ..errors import EmptyCompletionError, ResponseSchemaError


class Message(BaseModel):
    """A role-tagged chat message."""

    role: str
    content: str


class Choice(BaseModel):
    """One candidate reply returned by the endpoint."""

    message: Message
    finish_reason: Optional[str]
    index: int


class Usage(BaseModel):
    """Token accounting reported by the endpoint."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class CompletionResponse(BaseModel):
    """Parsed chat-completion response body.

    Attributes:
        id: Completion identifier assigned by the endpoint.
        object: Object type, normally "chat.completion".
        created: Unix timestamp of creation.
        model: Model that produced the reply.
        usage: Token accounting.
        choices: Candidate replies, in the order returned.
    """

    id: str
    object: str = "chat.completion"
    created: int
    model: str
    usage: Usage
    choices: List[Choice]

    @classmethod
    def from_json(cls, body: str) -> "CompletionResponse":
        """Parse a raw response body, raising ResponseSchemaError on mismatch."""
        try:
            return cls.model_validate_json(body)
        except ValidationError as e:
            raise ResponseSchemaError(f"Unexpected response from completion endpoint: {e}") from e

    def first_content(self) -> str:
        """Return the message content of the first choice."""
        if not self.choices:
            raise EmptyCompletionError("No completion choices returned")
        return self.choices[0].message.content


class CompletionRequest(BaseModel):
    """A single system-instruction + user-content request."""

    system_instruction: str
    user_content: str
    model: str = "gpt-3.5-turbo"

    def to_payload(self) -> Dict[str, Any]:
        """Build the JSON body sent to the endpoint."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_instruction},
                {"role": "user", "content": self.user_content},
            ],
        }
