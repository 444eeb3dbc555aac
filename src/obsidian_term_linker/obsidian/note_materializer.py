"""Write definition notes into the vault."""

from __future__ import annotations

from ..domain.entities.term import ActiveDocument, NoteWriteRequest, TermDefinition
from ..domain.interfaces.vault_storage import IVaultStorage
from ..exceptions import FilesystemFailureError, NoteAlreadyExistsError, VaultError
from ..utils.logging import get_logger

logger = get_logger(__name__)


def compose_note_body(
    definition: TermDefinition, source_document: ActiveDocument | None = None
) -> str:
    """Definition text, a blank line, and a back-reference when the source is known."""
    lines = [definition.definition, ""]
    if source_document is not None:
        lines.append(f"- Source: [[{source_document.name}]]")
    return "\n".join(lines)


def split_folder_path(folder_path: str) -> list[str]:
    return [segment for segment in folder_path.split("/") if segment]


class NoteMaterializer:
    """Ensures the destination folder chain exists and creates the note.

    Folder creation is not rolled back when the note write fails.
    """

    def __init__(self, storage: IVaultStorage):
        self.storage = storage

    async def ensure_folder(self, folder_path: str) -> list[str]:
        """Create every missing folder along folder_path, left to right.

        Returns:
            Folders that were created by this call, in creation order
        """
        created: list[str] = []
        current = ""
        for segment in split_folder_path(folder_path):
            current = f"{current}/{segment}" if current else segment
            if await self.storage.exists(current):
                continue
            try:
                await self.storage.create_folder(current)
            except VaultError:
                raise
            except Exception as e:
                raise FilesystemFailureError(
                    f"Could not create folder: {current}",
                    context={"folder": current, "error": str(e)},
                ) from e
            created.append(current)
            logger.debug("folder_created", folder=current)
        return created

    def build_request(
        self,
        folder_path: str,
        definition: TermDefinition,
        source_document: ActiveDocument | None = None,
    ) -> NoteWriteRequest:
        return NoteWriteRequest(
            folder_path="/".join(split_folder_path(folder_path)),
            file_stem=definition.term,
            body=compose_note_body(definition, source_document),
        )

    async def materialize(
        self,
        folder_path: str,
        definition: TermDefinition,
        source_document: ActiveDocument | None = None,
    ) -> str:
        """Create `<folder>/<term>.md`.

        Args:
            folder_path: Destination folder, possibly multi-segment
            definition: Parsed term definition
            source_document: Document the selection came from, if any

        Returns:
            Note identifier (vault path without the .md extension)

        Raises:
            NoteAlreadyExistsError: If a file already occupies the note path
            FilesystemFailureError: If storage rejects a folder or file creation
        """
        request = self.build_request(folder_path, definition, source_document)
        await self.ensure_folder(request.folder_path)

        if await self.storage.exists(request.note_path):
            raise NoteAlreadyExistsError(
                f"Note already exists: {request.note_path}",
                suggestion="Rename or remove the existing note and run the command again",
                context={"note_path": request.note_path},
            )

        try:
            await self.storage.create_file(request.note_path, request.body)
        except VaultError:
            raise
        except Exception as e:
            raise FilesystemFailureError(
                f"Could not create note: {request.note_path}",
                context={"note_path": request.note_path, "error": str(e)},
            ) from e

        logger.info(
            "definition_note_created",
            note_path=request.note_path,
            term=definition.term,
            category=definition.category,
        )
        return request.note_id
