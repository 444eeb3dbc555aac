"""Decode and validate the model's reply into a TermDefinition."""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from obsidian_term_linker.domain.entities.term import TermDefinition
from obsidian_term_linker.exceptions import MalformedResponseError
from obsidian_term_linker.utils.logging import get_logger
from obsidian_term_linker.utils.path_validator import sanitize_term

logger = get_logger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)\n?```$", re.DOTALL | re.IGNORECASE)


class TermDefinitionPayload(BaseModel):
    """Shape of the JSON object the model is asked to return."""

    term: str
    definition: str
    category: str | None = None

    @field_validator("term", "definition")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "must not be empty"
            raise ValueError(msg)
        return value

    @field_validator("category")
    @classmethod
    def _blank_category_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


def strip_code_fence(text: str) -> str:
    """Remove one enclosing markdown code fence, if present."""
    cleaned = text.strip()
    match = _FENCE_RE.match(cleaned)
    if match:
        return match.group(1).strip()
    return cleaned


def parse_term_definition(raw: str) -> TermDefinition:
    """Parse the model's reply.

    Args:
        raw: Message content returned by the chat endpoint

    Returns:
        Validated TermDefinition with a filename-safe term

    Raises:
        MalformedResponseError: If the reply is not a JSON object with
            non-empty `term` and `definition` strings
    """
    cleaned = strip_code_fence(raw or "")

    try:
        data: Any = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(
            "Model reply is not valid JSON",
            context={"error": str(e), "preview": cleaned[:200]},
        ) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(
            "Model reply is not a JSON object",
            context={"json_type": type(data).__name__},
        )

    try:
        payload = TermDefinitionPayload.model_validate(data)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise MalformedResponseError(
            "Model reply is missing a term or definition",
            context={"fields": fields, "errors": [err["msg"] for err in e.errors()]},
        ) from e

    term = sanitize_term(payload.term)
    if not term:
        raise MalformedResponseError(
            "Term contains no characters usable in a file name",
            context={"term": payload.term},
        )
    if term != payload.term:
        logger.debug("term_sanitized", original=payload.term, sanitized=term)

    return TermDefinition(
        term=term,
        definition=payload.definition,
        category=payload.category,
        raw_term=payload.term,
    )
