"""Tests for pattern family extraction and intensity detection."""

from __future__ import annotations

from vagueparse.constants import Intensity, PatternFamily
from vagueparse.resolution.patterns import (
    PATTERN_RULES,
    detect_intensity,
    extract_patterns,
)


class TestPatternRules:
    def test_all_five_families_declared(self) -> None:
        assert set(PATTERN_RULES) == set(PatternFamily)

    def test_every_family_has_rules(self) -> None:
        for rules in PATTERN_RULES.values():
            assert len(rules) >= 2


class TestExtractPatterns:
    def test_error_fix(self) -> None:
        patterns = extract_patterns("fix the error")
        assert patterns.error_fixes == ["fix the error"]
        assert patterns.make_actions == ["fix the"]
        assert patterns.total_matches == 2

    def test_do_stuff_is_only_vague(self) -> None:
        patterns = extract_patterns("do stuff")
        assert patterns.vague_descriptions == ["do stuff"]
        for family in PatternFamily:
            if family != PatternFamily.VAGUE_DESCRIPTIONS:
                assert not patterns.fired(family)

    def test_make_the_thing_work(self) -> None:
        patterns = extract_patterns("make the thing work")
        assert patterns.make_actions == ["make the thing work"]
        assert patterns.thing_references == ["the thing"]
        assert not patterns.fired(PatternFamily.ERROR_FIXES)

    def test_ui_action(self) -> None:
        patterns = extract_patterns("add a dropdown to the header")
        assert patterns.ui_actions == ["add a dropdown"]
        assert patterns.make_actions == ["add a dropdown"]

    def test_pronouns_count_as_thing_references(self) -> None:
        patterns = extract_patterns("make it work and style that")
        assert patterns.thing_references == ["it", "that"]
        assert "make it work" in patterns.make_actions
        assert "make it work" in patterns.vague_descriptions
        assert patterns.ui_actions == ["style that"]

    def test_stop_crashing(self) -> None:
        patterns = extract_patterns("please stop crashing")
        assert patterns.error_fixes == ["stop crashing"]

    def test_no_matches_returns_empty_families(self) -> None:
        patterns = extract_patterns("hello there friend")
        assert patterns.total_matches == 0
        for family in PatternFamily:
            assert patterns.matches(family) == []
        assert patterns.intensity == Intensity.MEDIUM

    def test_empty_text(self) -> None:
        assert extract_patterns("").total_matches == 0

    def test_deterministic(self) -> None:
        text = "fix the bug and make it pretty now"
        assert extract_patterns(text) == extract_patterns(text)


class TestDetectIntensity:
    def test_urgent_words(self) -> None:
        assert detect_intensity("fix it asap") == Intensity.HIGH
        assert detect_intensity("urgent fix") == Intensity.HIGH
        assert detect_intensity("do it now") == Intensity.HIGH

    def test_deferral_words(self) -> None:
        assert detect_intensity("whenever you can") == Intensity.LOW
        assert detect_intensity("maybe add tests") == Intensity.LOW
        assert detect_intensity("do it later") == Intensity.LOW

    def test_urgency_beats_deferral(self) -> None:
        assert detect_intensity("maybe now") == Intensity.HIGH

    def test_whole_words_only(self) -> None:
        """'know' and 'nowhere' do not contain the word 'now'."""
        assert detect_intensity("i know it is nowhere") == Intensity.MEDIUM

    def test_default_medium(self) -> None:
        assert detect_intensity("fix the error") == Intensity.MEDIUM
