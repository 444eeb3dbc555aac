"""Editor backed by a Markdown file on disk.

The selection is either the first occurrence of a given text or a 1-based
inclusive line range. Replacement rewrites exactly that span atomically.
"""

from __future__ import annotations

from pathlib import Path

from ..domain.interfaces.editor import IEditor
from ..exceptions import FilesystemFailureError
from ..utils.io import atomic_write, read_text
from ..utils.logging import get_logger

logger = get_logger(__name__)


def parse_line_range(value: str) -> tuple[int, int]:
    """Parse 'START:END' (or a single 'LINE') into a 1-based inclusive range."""
    start_str, _, end_str = value.partition(":")
    try:
        start = int(start_str)
        end = int(end_str) if end_str else start
    except ValueError as e:
        msg = f"Line range must look like START:END, got {value!r}"
        raise ValueError(msg) from e
    if start < 1 or end < start:
        msg = f"Invalid line range: {value!r}"
        raise ValueError(msg)
    return start, end


def _line_span(content: str, start: int, end: int) -> tuple[int, int] | None:
    lines = content.splitlines(keepends=True)
    if start > len(lines):
        return None
    end = min(end, len(lines))
    offset = sum(len(line) for line in lines[: start - 1])
    span_text = "".join(lines[start - 1 : end]).rstrip("\r\n")
    return offset, offset + len(span_text)


class FileSelectionEditor(IEditor):
    """Treats a span of a document file as the editor selection."""

    def __init__(
        self,
        document_path: Path,
        text: str | None = None,
        lines: tuple[int, int] | None = None,
    ):
        if (text is None) == (lines is None):
            msg = "Provide exactly one of text or lines"
            raise ValueError(msg)
        self.document_path = document_path
        self.text = text
        self.lines = lines
        self._span: tuple[int, int] | None = None
        self._selected = ""

    def get_selected_text(self) -> str:
        content = read_text(self.document_path)

        if self.lines is not None:
            self._span = _line_span(content, *self.lines)
        else:
            text = self.text or ""
            start = content.find(text) if text else -1
            self._span = (start, start + len(text)) if start >= 0 else None

        if self._span is None:
            logger.warning(
                "selection_not_found",
                document=str(self.document_path),
                text=self.text,
                lines=self.lines,
            )
            self._selected = ""
        else:
            self._selected = content[self._span[0] : self._span[1]]
        return self._selected

    def replace_selected_text(self, text: str) -> None:
        if self._span is None:
            raise FilesystemFailureError(
                "Nothing is selected",
                context={"document": str(self.document_path)},
            )

        content = read_text(self.document_path)
        start, end = self._span
        if content[start:end] != self._selected:
            raise FilesystemFailureError(
                f"Document changed while the definition was created: {self.document_path}",
                suggestion="Run the command again on the current text",
                context={"document": str(self.document_path)},
            )

        try:
            with atomic_write(self.document_path, newline="") as f:
                f.write(content[:start] + text + content[end:])
        except OSError as e:
            raise FilesystemFailureError(
                f"Could not update document: {self.document_path}",
                context={"document": str(self.document_path), "error": str(e)},
            ) from e

        self._span = (start, start + len(text))
        self._selected = text
        logger.debug("selection_replaced", document=str(self.document_path))
