"""Resolve the folder a new definition note is written to."""

from __future__ import annotations

from collections.abc import Sequence

from ..config_models import FolderMapping
from ..domain.entities.term import RoutingContext


def find_mapping(
    document_path: str, mappings: Sequence[FolderMapping]
) -> FolderMapping | None:
    """Return the first mapping whose source path prefixes document_path."""
    for mapping in mappings:
        if not mapping.target_path:
            continue
        if document_path.startswith(mapping.source_path):
            return mapping
    return None


def resolve_target_folder(context: RoutingContext) -> str:
    """Pick the destination folder for a run.

    First matching mapping in list order wins; no active document or no
    match falls back to the default folder. Never fails.
    """
    if not context.active_document_path:
        return context.default_folder

    mapping = find_mapping(context.active_document_path, context.mappings)
    if mapping is None:
        return context.default_folder
    return mapping.target_path
