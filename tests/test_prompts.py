"""Tests for the interpretation prompt builders."""

from vagueparse.constants import ActionTag, Category
from vagueparse.prompts import (
    INTERPRETATION_CATEGORIES,
    build_interpretation_system_prompt,
    build_interpretation_user_prompt,
)


def test_system_prompt_fills_personality() -> None:
    result = build_interpretation_system_prompt(
        "backend", "app/api", 3, "concise"
    )
    assert "Primary area: backend" in result
    assert "Suggested focus: app/api" in result
    assert "Sass level: 3/10" in result
    assert "Verbosity: concise" in result


def test_system_prompt_json_braces_survive_format() -> None:
    result = build_interpretation_system_prompt("unknown", None, 5, "x")
    assert '"interpretations": [' in result
    assert '"clarifyingQuestions"' in result
    assert "{{" not in result


def test_system_prompt_lists_actions_and_categories() -> None:
    result = build_interpretation_system_prompt("unknown", None, 5, "x")
    assert "Suggested focus: unknown" in result
    for action in ActionTag:
        assert action.value in result
    for category in INTERPRETATION_CATEGORIES:
        assert category in result


def test_system_prompt_lists_every_category() -> None:
    result = build_interpretation_system_prompt("unknown", None, 5, "x")
    assert INTERPRETATION_CATEGORIES == tuple(c.value for c in Category)
    assert (
        "one of: debugging, ui, frontend, backend, general, improvement, "
        "testing, config, unclear"
    ) in result


def test_user_prompt_quotes_request() -> None:
    result = build_interpretation_user_prompt(
        "make it pop", "frontend", ["src/App.jsx", "src/index.css"], None
    )
    assert 'The user said: "make it pop"' in result
    assert "Relevant files: src/App.jsx, src/index.css" in result
    assert "Suggested focus: none" in result


def test_user_prompt_without_files() -> None:
    result = build_interpretation_user_prompt("x", "unknown", [], "src")
    assert "Relevant files: none" in result
    assert "Suggested focus: src" in result
