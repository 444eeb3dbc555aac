"""Tests for smart link substitution."""

import pytest

from obsidian_term_linker.obsidian.smart_linker import build_term_pattern, create_smart_link


def test_links_first_occurrence_preserving_case():
    """Label keeps the surface casing, target uses the canonical term."""
    result = create_smart_link("A GPU is a graphics processor", "gpu")
    assert result == "A [[gpu|GPU]] is a graphics processor"


def test_only_first_occurrence_is_linked():
    result = create_smart_link("GPU and gpu and Gpu", "gpu")
    assert result == "[[gpu|GPU]] and gpu and Gpu"


def test_no_match_returns_text_unchanged():
    assert create_smart_link("no match here", "gpu") == "no match here"


def test_partial_word_is_not_matched():
    """'gpus' and 'egpu' do not contain 'gpu' as a whole word."""
    assert create_smart_link("eGPU and GPUs", "gpu") == "eGPU and GPUs"


def test_regex_metacharacters_are_literal():
    """C++ must not be read as 'C' repeated."""
    text = "Modern C++ is a systems language, unlike C."
    assert create_smart_link(text, "C++") == (
        "Modern [[C++|C++]] is a systems language, unlike C."
    )
    assert create_smart_link("CCC is not it", "C++") == "CCC is not it"


@pytest.mark.parametrize(
    ("text", "term", "expected"),
    [
        ("Use .NET here", ".NET", "Use [[.NET|.NET]] here"),
        ("cost is $5 (approx)", "(approx)", "cost is $5 [[(approx)|(approx)]]"),
        ("a.b matches literally, axb does not", "a.b", "[[a.b|a.b]] matches literally, axb does not"),
    ],
)
def test_terms_with_special_characters(text, term, expected):
    assert create_smart_link(text, term) == expected


def test_dot_in_term_does_not_match_any_character():
    assert create_smart_link("axb only", "a.b") == "axb only"


def test_multi_word_term():
    result = create_smart_link("The Central Limit Theorem states", "central limit theorem")
    assert result == "The [[central limit theorem|Central Limit Theorem]] states"


def test_explicit_target_overrides_term():
    result = create_smart_link("A GPU here", "gpu", target="Glossary/gpu")
    assert result == "A [[Glossary/gpu|GPU]] here"


def test_backslash_in_surface_text_is_not_expanded():
    """Replacement is literal even when the matched text contains escapes."""
    assert create_smart_link(r"use \d here", r"\d") == r"use [[\d|\d]] here"


def test_empty_term_leaves_text_unchanged():
    assert create_smart_link("anything", "") == "anything"


def test_pattern_is_case_insensitive():
    assert build_term_pattern("gpu").search("A GpU")
