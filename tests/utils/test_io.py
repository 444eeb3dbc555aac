import pytest

from obsidian_term_linker.utils.io import atomic_write, read_text


def test_atomic_write_creates_file(tmp_path):
    """Test that atomic_write creates a file with correct content."""
    target_file = tmp_path / "note.md"

    with atomic_write(target_file) as f:
        f.write("A [[gpu|GPU]] is fast")

    assert target_file.read_text(encoding="utf-8") == "A [[gpu|GPU]] is fast"


def test_atomic_write_overwrites_file(tmp_path):
    target_file = tmp_path / "note.md"
    target_file.write_text("Old content", encoding="utf-8")

    with atomic_write(target_file) as f:
        f.write("New content")

    assert target_file.read_text(encoding="utf-8") == "New content"


def test_atomic_write_failure_cleanup(tmp_path):
    """Test that temp file is cleaned up on failure and target is unchanged."""
    target_file = tmp_path / "note.md"
    target_file.write_text("Original content", encoding="utf-8")

    with pytest.raises(RuntimeError):
        with atomic_write(target_file) as f:
            f.write("New content")
            raise RuntimeError("Simulated failure")

    assert target_file.read_text(encoding="utf-8") == "Original content"
    assert list(tmp_path.glob(".tmp_*")) == []


def test_atomic_write_atomicity(tmp_path):
    """Target does not appear until the context manager exits."""
    target_file = tmp_path / "atomic.md"

    with atomic_write(target_file) as f:
        f.write("Final content")
        f.flush()
        assert not target_file.exists()

    assert target_file.read_text(encoding="utf-8") == "Final content"


def test_crlf_newlines_survive_round_trip(tmp_path):
    target_file = tmp_path / "windows.md"
    target_file.write_bytes(b"line one\r\nline two\r\n")

    content = read_text(target_file)
    with atomic_write(target_file, newline="") as f:
        f.write(content.replace("one", "1"))

    assert content == "line one\r\nline two\r\n"
    assert target_file.read_bytes() == b"line 1\r\nline two\r\n"
