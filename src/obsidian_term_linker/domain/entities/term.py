"""Domain entities for term definitions and their placement in the vault."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...config_models import FolderMapping


@dataclass(frozen=True)
class TermDefinition:
    """A term extracted from selected text together with its definition.

    Produced once per run by the response parser and never mutated.
    `term` is filename-safe and doubles as the note file stem and the link
    target. `raw_term` keeps the term as the model wrote it (e.g. "C#" for
    the stem "C-") and is what gets searched for in the selected text.
    """

    term: str
    definition: str
    category: str | None = None
    raw_term: str | None = None

    def __post_init__(self) -> None:
        """Validate entity invariants."""
        if not self.term or self.term != self.term.strip():
            raise ValueError("Term must be non-empty and trimmed")
        if not self.definition.strip():
            raise ValueError("Definition cannot be empty")

    @property
    def search_term(self) -> str:
        """Surface form to link in the selected text."""
        return self.raw_term or self.term


@dataclass(frozen=True)
class ActiveDocument:
    """The document the selection was taken from."""

    path: str
    name: str

    @classmethod
    def from_path(cls, path: str) -> ActiveDocument:
        """Build from a vault-relative path, deriving the basename."""
        filename = path.rsplit("/", 1)[-1]
        name = filename[: -len(".md")] if filename.endswith(".md") else filename
        return cls(path=path, name=name)


@dataclass(frozen=True)
class RoutingContext:
    """Everything the folder router needs for one run."""

    active_document_path: str | None
    mappings: tuple[FolderMapping, ...] = ()
    default_folder: str = "Glossary"

    def __post_init__(self) -> None:
        if not self.default_folder.strip("/ "):
            raise ValueError("default_folder cannot be empty")


@dataclass(frozen=True)
class NoteWriteRequest:
    """A definition note ready to be written."""

    folder_path: str
    file_stem: str
    body: str

    @property
    def note_path(self) -> str:
        """Vault-relative path of the note file."""
        return f"{self.note_id}.md"

    @property
    def note_id(self) -> str:
        """Note path without the .md extension, used as link target."""
        if not self.folder_path:
            return self.file_stem
        return f"{self.folder_path}/{self.file_stem}"


@dataclass(frozen=True)
class ChatMessage:
    """One message of a chat completion exchange."""

    role: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ChatRequest:
    """Body of the outbound chat completion call."""

    model: str
    messages: tuple[ChatMessage, ...]
    stream: bool = False
    response_format: dict[str, str] = field(
        default_factory=lambda: {"type": "json_object"}
    )

    def to_payload(self) -> dict[str, object]:
        """Serialize to the JSON body expected by OpenAI-compatible endpoints."""
        return {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
            "stream": self.stream,
            "response_format": dict(self.response_format),
        }
