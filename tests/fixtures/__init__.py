"""Test fixtures package."""

from .fake_chat_client import FakeChatClient
from .fake_editor import FakeEditor
from .in_memory_vault import InMemoryVault
from .recording_notifier import RecordingNotifier

__all__ = [
    "FakeChatClient",
    "FakeEditor",
    "InMemoryVault",
    "RecordingNotifier",
]
