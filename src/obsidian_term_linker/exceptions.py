"""Centralized exception hierarchy for obsidian-term-linker.

All custom exceptions inherit from TermLinkerError, so the pipeline can catch
every domain failure at a single boundary.

Exception Hierarchy:
    TermLinkerError (base)
     ConfigurationError - Configuration loading/validation errors
     EmptySelectionError - No text selected when the command was invoked
     ProviderError - LLM endpoint communication errors
        NetworkFailureError - Request rejected or no payload returned
     MalformedResponseError - Reply is not JSON or lacks term/definition
     VaultError - Vault storage errors
        NoteAlreadyExistsError - Target note path is already taken
        FilesystemFailureError - Folder/file creation rejected by storage

Usage Examples:
    try:
        definition = parse_term_definition(raw)
    except MalformedResponseError as e:
        logger.error("parse_failed", **e.to_dict())
"""

from typing import Any

from .error_codes import ErrorCode


class TermLinkerError(Exception):
    """Base exception for all term-linker errors.

    Attributes:
        message: Human-readable error message
        suggestion: Optional suggestion for resolving the error
        error_code: Structured error code for machine-readable handling
        context: Additional context for debugging (e.g., paths, model names)
    """

    default_error_code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            suggestion: Optional suggestion for resolving the error
            error_code: Structured error code (e.g., "VLT-EXISTS-001")
            context: Additional context for debugging
        """
        self.message = message
        self.suggestion = suggestion
        if error_code is None and self.default_error_code is not None:
            error_code = self.default_error_code.value
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with error code and suggestion if available."""
        parts = []
        if self.error_code:
            parts.append(f"[{self.error_code}] {self.message}")
        else:
            parts.append(self.message)
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "message": self.message,
            "error_code": self.error_code,
            "suggestion": self.suggestion,
            "context": self.context,
            "type": type(self).__name__,
        }


class ConfigurationError(TermLinkerError):
    """Configuration loading or validation errors.

    Raised when:
    - Config file is missing or malformed
    - Required values (endpoint, model, vault) are missing
    """

    default_error_code = ErrorCode.CFG_INVALID


class EmptySelectionError(TermLinkerError):
    """The command was invoked without any selected text."""

    default_error_code = ErrorCode.SEL_EMPTY


class ProviderError(TermLinkerError):
    """LLM endpoint communication errors."""


class NetworkFailureError(ProviderError):
    """Outbound call rejected or returned no payload.

    Raised when:
    - The endpoint cannot be reached or times out
    - The endpoint answers with a non-2xx status
    - The response envelope has no message content
    """

    default_error_code = ErrorCode.PRV_NETWORK


class MalformedResponseError(TermLinkerError):
    """Model reply could not be decoded into a term definition.

    Raised when:
    - The payload is not valid JSON or not a JSON object
    - `term` or `definition` is missing or empty
    """

    default_error_code = ErrorCode.PRS_MALFORMED


class VaultError(TermLinkerError):
    """Base class for vault storage errors."""


class NoteAlreadyExistsError(VaultError):
    """A file already occupies the computed note path.

    No overwrite and no automatic renaming is attempted.
    """

    default_error_code = ErrorCode.VLT_NOTE_EXISTS


class FilesystemFailureError(VaultError):
    """Folder or file creation rejected by the storage backend."""

    default_error_code = ErrorCode.VLT_FS_FAILURE
