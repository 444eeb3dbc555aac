"""Path validation utilities for security and safety."""

import re
from pathlib import Path

from ..exceptions import ConfigurationError, FilesystemFailureError

_SEPARATOR_RE = re.compile(r"[/\\]+")
# Invalid on common filesystems, or break Obsidian wikilinks
_FORBIDDEN_RE = re.compile(r'[\0:*?"<>|#^\[\]]')
_WHITESPACE_RE = re.compile(r"\s+")
_WORD_RE = re.compile(r"\w")


def validate_vault_path(vault_path: Path, allow_symlinks: bool = False) -> Path:
    """Validate vault path for security and existence.

    Args:
        vault_path: Path to validate
        allow_symlinks: Whether to allow symlinks (default: False for security)

    Returns:
        Resolved absolute path

    Raises:
        ConfigurationError: If path is invalid or unsafe
    """
    vault_path = vault_path.expanduser()

    if not vault_path.exists():
        raise ConfigurationError(
            f"Vault path does not exist: {vault_path}",
            suggestion="Verify the vault_path in your configuration points to an existing directory",
        )

    if not vault_path.is_dir():
        raise ConfigurationError(
            f"Vault path is not a directory: {vault_path}",
            suggestion="vault_path must point to a directory, not a file",
        )

    if not allow_symlinks and vault_path.is_symlink():
        raise ConfigurationError(
            f"Vault path is a symlink: {vault_path}",
            suggestion="Use the actual directory path or set allow_symlinks=True",
        )

    try:
        return vault_path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise ConfigurationError(
            f"Cannot resolve vault path: {vault_path}", suggestion=f"Error: {e}"
        ) from e


def resolve_in_vault(vault_path: Path, relative_path: str) -> Path:
    """Resolve a vault-relative '/' path to an absolute path inside the vault.

    Args:
        vault_path: Resolved vault root
        relative_path: Vault-relative path (may not exist yet)

    Returns:
        Absolute path

    Raises:
        FilesystemFailureError: If the path escapes the vault
    """
    candidate = vault_path.joinpath(*[p for p in relative_path.split("/") if p])
    resolved = candidate.resolve(strict=False)

    try:
        resolved.relative_to(vault_path)
    except ValueError as e:
        raise FilesystemFailureError(
            f"Path is outside vault: {relative_path}",
            suggestion="Folder mappings and note names must stay inside the vault",
            context={"path": relative_path, "vault": str(vault_path)},
        ) from e

    return resolved


def sanitize_term(term: str, max_length: int = 200) -> str:
    """Make a term safe to use as a note file stem and link target.

    Path separators and characters invalid in file names or inside [[links]]
    become hyphens, so "C#" and "C" stay distinct. A leading dot becomes a
    hyphen (hidden files); trailing dots and spaces are stripped (Windows).
    Returns an empty string when no word character remains.

    Example:
        >>> sanitize_term("C#")
        'C-'
        >>> sanitize_term(".NET")
        '-NET'
    """
    sanitized = _SEPARATOR_RE.sub("-", term)
    sanitized = _FORBIDDEN_RE.sub("-", sanitized)
    sanitized = _WHITESPACE_RE.sub(" ", sanitized).strip()
    if sanitized.startswith("."):
        sanitized = "-" + sanitized[1:]
    sanitized = sanitized[:max_length].rstrip(". ")

    if not _WORD_RE.search(sanitized):
        return ""
    return sanitized
