"""Domain layer for the term linker.

Entities describe a single definition run; interfaces describe the host
collaborators (editor, chat endpoint, vault storage, notifications).
"""

from .entities.term import (
    ActiveDocument,
    ChatMessage,
    ChatRequest,
    NoteWriteRequest,
    RoutingContext,
    TermDefinition,
)
from .interfaces.chat_client import IChatClient
from .interfaces.editor import IEditor
from .interfaces.notifier import INotifier
from .interfaces.vault_storage import IVaultStorage

__all__ = [
    "ActiveDocument",
    "ChatMessage",
    "ChatRequest",
    "IChatClient",
    "IEditor",
    "INotifier",
    "IVaultStorage",
    "NoteWriteRequest",
    "RoutingContext",
    "TermDefinition",
]
