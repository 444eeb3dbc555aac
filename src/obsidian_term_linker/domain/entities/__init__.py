"""Domain entities package."""

from .term import (
    ActiveDocument,
    ChatMessage,
    ChatRequest,
    NoteWriteRequest,
    RoutingContext,
    TermDefinition,
)

__all__ = [
    "ActiveDocument",
    "ChatMessage",
    "ChatRequest",
    "NoteWriteRequest",
    "RoutingContext",
    "TermDefinition",
]
