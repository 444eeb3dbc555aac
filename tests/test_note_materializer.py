"""Tests for definition note materialization."""

import pytest

from obsidian_term_linker.domain.entities.term import ActiveDocument, TermDefinition
from obsidian_term_linker.exceptions import FilesystemFailureError, NoteAlreadyExistsError
from obsidian_term_linker.obsidian.note_materializer import (
    NoteMaterializer,
    compose_note_body,
)
from tests.fixtures import InMemoryVault

GPU = TermDefinition(term="gpu", definition="A graphics processor.")


@pytest.mark.asyncio
async def test_creates_missing_folders_in_order_before_file():
    vault = InMemoryVault()
    materializer = NoteMaterializer(vault)

    note_id = await materializer.materialize("A/B/C", GPU)

    assert vault.operations == [
        ("create_folder", "A"),
        ("create_folder", "A/B"),
        ("create_folder", "A/B/C"),
        ("create_file", "A/B/C/gpu.md"),
    ]
    assert note_id == "A/B/C/gpu"


@pytest.mark.asyncio
async def test_existing_folders_are_not_recreated():
    vault = InMemoryVault()
    vault.folders.update({"A", "A/B"})

    created = await NoteMaterializer(vault).ensure_folder("A/B/C")

    assert created == ["A/B/C"]
    assert vault.operations == [("create_folder", "A/B/C")]


@pytest.mark.asyncio
async def test_redundant_slashes_are_ignored():
    vault = InMemoryVault()

    note_id = await NoteMaterializer(vault).materialize("/Glossary//Terms/", GPU)

    assert note_id == "Glossary/Terms/gpu"
    assert "Glossary/Terms/gpu.md" in vault.files


@pytest.mark.asyncio
async def test_existing_note_raises_and_is_not_overwritten():
    vault = InMemoryVault()
    vault.folders.add("Glossary")
    vault.files["Glossary/gpu.md"] = "original"

    with pytest.raises(NoteAlreadyExistsError) as exc_info:
        await NoteMaterializer(vault).materialize("Glossary", GPU)

    assert vault.files["Glossary/gpu.md"] == "original"
    assert exc_info.value.context["note_path"] == "Glossary/gpu.md"
    assert exc_info.value.error_code == "VLT-EXISTS-001"


@pytest.mark.asyncio
async def test_folders_created_before_duplicate_failure_are_kept():
    vault = InMemoryVault()
    vault.files["New/gpu.md"] = "racing writer"

    with pytest.raises(NoteAlreadyExistsError):
        await NoteMaterializer(vault).materialize("New", GPU)

    assert "New" in vault.folders


@pytest.mark.asyncio
async def test_storage_os_error_becomes_filesystem_failure():
    vault = InMemoryVault()
    vault.fail_on_file = True

    with pytest.raises(FilesystemFailureError, match="Could not create note"):
        await NoteMaterializer(vault).materialize("Glossary", GPU)


@pytest.mark.asyncio
async def test_folder_failure_propagates():
    vault = InMemoryVault()
    vault.fail_on_folder = "A/B"

    with pytest.raises(FilesystemFailureError):
        await NoteMaterializer(vault).materialize("A/B/C", GPU)

    assert vault.operations == [("create_folder", "A")]


@pytest.mark.asyncio
async def test_body_contains_back_reference_when_source_known():
    vault = InMemoryVault()
    source = ActiveDocument.from_path("Projects/Notes/Hardware.md")

    await NoteMaterializer(vault).materialize("Glossary", GPU, source)

    assert vault.files["Glossary/gpu.md"] == (
        "A graphics processor.\n\n- Source: [[Hardware]]"
    )


def test_body_without_source_has_no_back_reference():
    body = compose_note_body(GPU)
    assert body == "A graphics processor.\n"
    assert "Source" not in body


def test_body_keeps_embedded_links():
    definition = TermDefinition(term="cuda", definition="Platform for [[gpu]] computing.")
    assert compose_note_body(definition).startswith("Platform for [[gpu]] computing.")
