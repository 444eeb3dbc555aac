"""File I/O utilities for safe and atomic operations."""

import os
import tempfile
from collections.abc import Generator
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import Any

from obsidian_term_linker.utils.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def atomic_write(
    path: str | Path,
    mode: str = "w",
    encoding: str | None = "utf-8",
    **kwargs: Any,
) -> Generator[Any]:
    """Context manager for atomic file writing.

    Writes to a temporary file in the same directory, then renames it over
    the target, so an open document is never left half-written.

    Example:
        with atomic_write(note_path) as f:
            f.write(updated_text)
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(
        dir=parent,
        prefix=f".tmp_{path.name}_",
        text="b" not in mode,
    )
    os.close(temp_fd)
    temp_path_obj = Path(temp_path)

    try:
        with open(temp_path, mode, encoding=encoding, **kwargs) as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
        temp_path_obj.replace(path)
    except BaseException as e:
        with suppress(OSError):
            temp_path_obj.unlink()
        if isinstance(e, OSError):
            logger.error("atomic_write_failed", path=str(path), error=str(e))
        raise


def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file, keeping its newlines untouched."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()
