"""Turn the first mention of a term into an aliased wikilink."""

from __future__ import annotations

import re


def build_term_pattern(term: str) -> re.Pattern[str]:
    """Case-insensitive whole-word pattern matching term literally.

    Lookarounds stand in for \\b so terms that begin or end with a
    non-word character (C++, .NET) still match as whole words.
    """
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)


def create_smart_link(original_text: str, term: str, target: str | None = None) -> str:
    """Link the first whole-word occurrence of term in original_text.

    The matched text keeps its original casing as the link label:
    "A GPU is" with term "gpu" becomes "A [[gpu|GPU]] is". Text without a
    match is returned unchanged.

    Args:
        original_text: Selected text to rewrite
        term: Canonical term produced by the parser
        target: Link target, defaults to term

    Returns:
        Text with at most one link inserted
    """
    if not term:
        return original_text

    link_target = target or term
    pattern = build_term_pattern(term)
    return pattern.sub(
        lambda match: f"[[{link_target}|{match.group(0)}]]",
        original_text,
        count=1,
    )
