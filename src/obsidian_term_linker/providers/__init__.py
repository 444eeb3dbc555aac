"""LLM endpoint client and reply parsing."""

from .chat_completion import OpenAICompatibleChatClient
from .response_parser import parse_term_definition

__all__ = [
    "OpenAICompatibleChatClient",
    "parse_term_definition",
]
