"""Domain interfaces package."""

from .chat_client import IChatClient
from .editor import IEditor
from .notifier import INotifier
from .vault_storage import IVaultStorage

__all__ = [
    "IChatClient",
    "IEditor",
    "INotifier",
    "IVaultStorage",
]
