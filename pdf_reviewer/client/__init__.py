"""
Module for talking to the chat-completion endpoint.
"""

from .completion_client import CompletionClient, complete
from .models import Choice, CompletionRequest, CompletionResponse, Message, Usage

__all__ = ['CompletionClient', 'complete', 'Choice', 'CompletionRequest', 'CompletionResponse', 'Message', 'Usage']
