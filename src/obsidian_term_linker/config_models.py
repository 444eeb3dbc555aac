"""Config sub-models for folder routing."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FolderMapping(BaseModel):
    """Route definitions from documents under `source_path` to `target_path`.

    Matching is a plain string-prefix test against the full document path.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source_path: str = Field(default="", alias="sourcePath")
    target_path: str = Field(default="", alias="targetPath")


__all__ = ["FolderMapping"]
