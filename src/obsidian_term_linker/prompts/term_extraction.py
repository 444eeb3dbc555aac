"""Prompt for extracting a single term and its definition from selected text."""

from __future__ import annotations

from ..domain.entities.term import ChatMessage, ChatRequest
from ..exceptions import EmptySelectionError

TERM_EXTRACTION_SYSTEM_PROMPT = """You are a helpful assistant that extracts terms and their definitions from text.
Split the input into a single term and its definition.

Rules:
1. Keep the term lower case, unless it is an acronym.
2. If the input contains text that looks like [[this]], keep it verbatim in the definition. It is a link to another term.
3. If the term contains a slash (/ or \\), substitute it with a hyphen. The term is used as a file name.
4. Optionally add a short "category" for the term (for example "hardware" or "statistics").

Return your response as a single JSON object with "term" and "definition" fields and an optional "category" field.
Return JSON only, no markdown fences and no explanation."""


def build_term_extraction_messages(selected_text: str) -> tuple[ChatMessage, ...]:
    """Build the system and user messages for term extraction.

    Args:
        selected_text: Raw text selected in the editor, sent verbatim

    Returns:
        (system, user) message pair

    Raises:
        EmptySelectionError: If nothing usable was selected
    """
    if not selected_text or not selected_text.strip():
        raise EmptySelectionError(
            "No text selected",
            suggestion="Select the sentence that defines a term before running the command",
        )

    return (
        ChatMessage(role="system", content=TERM_EXTRACTION_SYSTEM_PROMPT),
        ChatMessage(role="user", content=selected_text),
    )


def build_chat_request(selected_text: str, model: str) -> ChatRequest:
    """Wrap the extraction messages into a non-streaming JSON-mode request."""
    return ChatRequest(
        model=model,
        messages=build_term_extraction_messages(selected_text),
        stream=False,
        response_format={"type": "json_object"},
    )
