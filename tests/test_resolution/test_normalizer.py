"""Tests for request text normalization."""

from __future__ import annotations

from vagueparse.resolution.normalizer import normalize_text


class TestNormalizeText:
    def test_lowercases(self) -> None:
        assert normalize_text("Fix The ERROR") == "fix the error"

    def test_punctuation_becomes_space(self) -> None:
        assert normalize_text("fix,the-error!") == "fix the error"

    def test_collapses_whitespace(self) -> None:
        assert normalize_text("  make \t the\n\nthing   work ") == (
            "make the thing work"
        )

    def test_underscores_are_word_characters(self) -> None:
        assert normalize_text("call get_user()") == "call get_user"

    def test_empty_and_blank(self) -> None:
        assert normalize_text("") == ""
        assert normalize_text("   ") == ""
        assert normalize_text("?!...") == ""

    def test_idempotent(self) -> None:
        once = normalize_text("Make IT work... ASAP!!")
        assert normalize_text(once) == once
