"""Pytest configuration and fixtures for the test suite."""

import pytest

from obsidian_term_linker.config_models import FolderMapping
from obsidian_term_linker.config_settings import PipelineSettings
from tests.fixtures import (
    FakeChatClient,
    FakeEditor,
    InMemoryVault,
    RecordingNotifier,
)


@pytest.fixture
def gpu_reply():
    """A well-formed model reply for the GPU example."""
    return {
        "term": "gpu",
        "definition": "A graphics processor specialised in parallel [[linear algebra]].",
        "category": "hardware",
    }


@pytest.fixture
def fake_editor():
    """Provide an editor with a selection mentioning GPU."""
    return FakeEditor("A GPU is a graphics processor")


@pytest.fixture
def fake_chat_client(gpu_reply):
    """Provide a chat client returning the GPU reply."""
    return FakeChatClient(gpu_reply)


@pytest.fixture
def in_memory_vault():
    """Provide an empty vault with an active document under Projects/."""
    return InMemoryVault(active_document="Projects/Notes/a.md")


@pytest.fixture
def recording_notifier():
    return RecordingNotifier()


@pytest.fixture
def pipeline_settings():
    """Provide settings routing Projects/ documents to Projects/Glossary."""
    return PipelineSettings(
        llm_model="deepseek-chat",
        default_glossary_path="Glossary",
        folder_mappings=(
            FolderMapping(source_path="Projects", target_path="Projects/Glossary"),
        ),
    )


@pytest.fixture
def vault_dir(tmp_path):
    """Provide an on-disk vault with one source document."""
    vault = tmp_path / "vault"
    (vault / "Projects" / "Notes").mkdir(parents=True)
    (vault / "Projects" / "Notes" / "a.md").write_text(
        "# Hardware\n\nA GPU is a graphics processor.\nGPUs are fast.\n",
        encoding="utf-8",
    )
    return vault
