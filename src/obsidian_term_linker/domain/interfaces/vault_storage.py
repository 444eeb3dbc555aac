"""Interface for vault storage operations."""

from abc import ABC, abstractmethod

from ..entities.term import ActiveDocument


class IVaultStorage(ABC):
    """Interface for the document tree notes are written into.

    All paths are vault-relative and '/'-delimited.
    """

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check whether a file or folder exists at path."""

    @abstractmethod
    async def create_folder(self, path: str) -> None:
        """Create a single folder whose parent already exists."""

    @abstractmethod
    async def create_file(self, path: str, content: str) -> None:
        """Create a new file; never overwrites an existing one."""

    @abstractmethod
    def get_active_document(self) -> ActiveDocument | None:
        """Return the document being edited, or None."""
