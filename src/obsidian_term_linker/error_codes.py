"""Structured error codes for machine-readable error handling.

Error codes follow the format: {DOMAIN}-{CATEGORY}-{NUMBER}

Error Domains:
    SEL - Selection errors (editor input)
    PRV - Provider errors (LLM endpoint)
    PRS - Parsing errors (model reply)
    VLT - Vault errors (folders, notes)
    CFG - Configuration errors

Usage:
    from obsidian_term_linker.error_codes import ErrorCode

    logger.error("note_write_failed", error_code=ErrorCode.VLT_FS_FAILURE.value)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes.

    All error codes inherit from str for JSON serialization compatibility.
    """

    SEL_EMPTY = "SEL-EMPTY-001"
    """No text was selected."""

    PRV_NETWORK = "PRV-NETWORK-001"
    """LLM request failed or returned no payload."""

    PRS_MALFORMED = "PRS-MALFORMED-001"
    """Model reply is not valid JSON or lacks required fields."""

    VLT_NOTE_EXISTS = "VLT-EXISTS-001"
    """A note with the same name already exists in the target folder."""

    VLT_FS_FAILURE = "VLT-FS-001"
    """Storage rejected folder or file creation."""

    CFG_INVALID = "CFG-INVALID-001"
    """Configuration is missing or invalid."""

    UNEXPECTED = "UNK-UNEXPECTED-001"
    """Unexpected error outside the known taxonomy."""


def get_error_description(code: ErrorCode) -> str:
    """Get human-readable description for an error code."""
    descriptions = {
        ErrorCode.SEL_EMPTY: "No text selected",
        ErrorCode.PRV_NETWORK: "LLM request failed or returned no payload",
        ErrorCode.PRS_MALFORMED: "Model reply is not a valid term definition",
        ErrorCode.VLT_NOTE_EXISTS: "A note with this term already exists",
        ErrorCode.VLT_FS_FAILURE: "Could not create folder or note in the vault",
        ErrorCode.CFG_INVALID: "Configuration is missing or invalid",
        ErrorCode.UNEXPECTED: "Unexpected error",
    }
    return descriptions.get(code, "Unknown error")
