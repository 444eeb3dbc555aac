"""Tests for the exception hierarchy, error codes and log rendering."""

import logging

import pytest

from obsidian_term_linker.error_codes import ErrorCode, get_error_description
from obsidian_term_linker.exceptions import (
    ConfigurationError,
    EmptySelectionError,
    FilesystemFailureError,
    MalformedResponseError,
    NetworkFailureError,
    NoteAlreadyExistsError,
    ProviderError,
    TermLinkerError,
    VaultError,
)
from obsidian_term_linker.utils.logging import (
    UserFacingConsoleFilter,
    UserFriendlyConsoleRenderer,
    _redact_secrets,
)


@pytest.mark.parametrize(
    ("error_class", "parent", "code"),
    [
        (ConfigurationError, TermLinkerError, ErrorCode.CFG_INVALID),
        (EmptySelectionError, TermLinkerError, ErrorCode.SEL_EMPTY),
        (NetworkFailureError, ProviderError, ErrorCode.PRV_NETWORK),
        (MalformedResponseError, TermLinkerError, ErrorCode.PRS_MALFORMED),
        (NoteAlreadyExistsError, VaultError, ErrorCode.VLT_NOTE_EXISTS),
        (FilesystemFailureError, VaultError, ErrorCode.VLT_FS_FAILURE),
    ],
)
def test_default_error_codes(error_class, parent, code):
    error = error_class("boom")
    assert isinstance(error, parent)
    assert error.error_code == code.value


def test_message_includes_code_and_suggestion():
    error = NoteAlreadyExistsError(
        "Note already exists: Glossary/gpu.md",
        suggestion="Rename the existing note",
        context={"note_path": "Glossary/gpu.md"},
    )

    assert str(error) == (
        "[VLT-EXISTS-001] Note already exists: Glossary/gpu.md\n"
        "Suggestion: Rename the existing note"
    )
    assert error.to_dict() == {
        "message": "Note already exists: Glossary/gpu.md",
        "error_code": "VLT-EXISTS-001",
        "suggestion": "Rename the existing note",
        "context": {"note_path": "Glossary/gpu.md"},
        "type": "NoteAlreadyExistsError",
    }


def test_explicit_error_code_wins():
    assert NetworkFailureError("x", error_code="PRV-CUSTOM-002").error_code == "PRV-CUSTOM-002"


def test_base_error_has_no_code():
    error = TermLinkerError("plain")
    assert error.error_code is None
    assert str(error) == "plain"


def test_every_error_code_has_description():
    for code in ErrorCode:
        assert get_error_description(code) != "Unknown error"


def test_secrets_are_redacted():
    event = _redact_secrets(None, "info", {"event": "x", "api_key": "sk-1", "model": "m"})
    assert event["api_key"] == "***REDACTED***"
    assert event["model"] == "m"


def test_renderer_formats_pipeline_outcomes():
    renderer = UserFriendlyConsoleRenderer()

    created = renderer(
        None,
        "info",
        {"event": "term_definition_created", "term": "gpu", "note_id": "Glossary/gpu"},
    )
    failed = renderer(
        None,
        "error",
        {
            "event": "term_definition_failed",
            "failed_at": "parsed",
            "error": "Model reply is not valid JSON",
            "level": "error",
        },
    )

    assert created == "Defined 'gpu' in Glossary/gpu"
    assert failed == "Term definition failed at parsed: Model reply is not valid JSON"


def test_console_filter_passes_user_facing_events_only():
    def record(message, level=logging.INFO):
        return logging.LogRecord("t", level, __file__, 1, message, None, None)

    quiet = UserFacingConsoleFilter(verbose=False)
    assert quiet.filter(record("term_definition_created"))
    assert not quiet.filter(record("chat_completion_request"))
    assert quiet.filter(record("chat_completion_http_error", logging.ERROR))
    assert UserFacingConsoleFilter(verbose=True).filter(record("chat_completion_request"))
