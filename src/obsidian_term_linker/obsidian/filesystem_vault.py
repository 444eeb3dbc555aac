"""Vault storage backed by a directory on the local filesystem."""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..domain.entities.term import ActiveDocument
from ..domain.interfaces.vault_storage import IVaultStorage
from ..exceptions import FilesystemFailureError, NoteAlreadyExistsError
from ..utils.logging import get_logger
from ..utils.path_validator import resolve_in_vault

logger = get_logger(__name__)


class FilesystemVault(IVaultStorage):
    """Obsidian vault rooted at a directory.

    Paths are vault-relative with '/' separators. Files are created with
    exclusive mode, so two concurrent writers of the same note cannot both
    succeed.
    """

    def __init__(self, vault_path: Path, active_document: str | None = None):
        self.vault_path = vault_path.expanduser().resolve()
        self._active_document = active_document

    def _resolve(self, path: str) -> Path:
        return resolve_in_vault(self.vault_path, path)

    def set_active_document(self, path: str | None) -> None:
        self._active_document = path

    def get_active_document(self) -> ActiveDocument | None:
        if not self._active_document:
            return None
        return ActiveDocument.from_path(self._active_document)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._resolve(path).exists)

    async def create_folder(self, path: str) -> None:
        target = self._resolve(path)
        try:
            await asyncio.to_thread(target.mkdir, exist_ok=True)
        except OSError as e:
            logger.error("vault_create_folder_failed", path=path, error=str(e))
            raise FilesystemFailureError(
                f"Could not create folder: {path}",
                context={"folder": path, "error": str(e)},
            ) from e

    async def create_file(self, path: str, content: str) -> None:
        target = self._resolve(path)
        try:
            await asyncio.to_thread(self._write_new_file, target, content)
        except FileExistsError as e:
            raise NoteAlreadyExistsError(
                f"Note already exists: {path}",
                context={"note_path": path},
            ) from e
        except OSError as e:
            logger.error("vault_create_file_failed", path=path, error=str(e))
            raise FilesystemFailureError(
                f"Could not create note: {path}",
                context={"note_path": path, "error": str(e)},
            ) from e

    @staticmethod
    def _write_new_file(target: Path, content: str) -> None:
        with open(target, "x", encoding="utf-8") as f:
            f.write(content)
