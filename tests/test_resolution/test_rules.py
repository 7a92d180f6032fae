"""Tests for the rule-based decision table."""

from __future__ import annotations

import pytest

from vagueparse.constants import (
    ActionTag,
    CandidateSource,
    Category,
    ContextArea,
)
from vagueparse.resolution.patterns import extract_patterns
from vagueparse.resolution.rules import (
    RULE_TABLE,
    fallback_candidate,
    generate_rule_candidates,
)
from vagueparse.resolution.schemas import ContextAnalysis


def _candidates(text: str, area: ContextArea = ContextArea.UNKNOWN):
    return generate_rule_candidates(
        extract_patterns(text), ContextAnalysis(area=area)
    )


class TestRuleTable:
    def test_rule_ids_unique(self) -> None:
        ids = [r.rule_id for r in RULE_TABLE]
        assert len(ids) == len(set(ids))

    def test_base_confidences(self) -> None:
        by_id = {r.rule_id: r.confidence for r in RULE_TABLE}
        assert by_id == {
            "error_fix": 0.8,
            "ui_action": 0.7,
            "make_action_frontend": 0.6,
            "make_action_backend": 0.6,
            "make_action_general": 0.5,
            "vague_description": 0.5,
        }


class TestGenerateRuleCandidates:
    def test_error_fix_first(self) -> None:
        candidates = _candidates("fix the error")
        assert [c.action for c in candidates] == [
            ActionTag.DEBUG_AND_FIX,
            ActionTag.GENERAL_IMPLEMENTATION,
        ]
        top = candidates[0]
        assert top.confidence == 0.8
        assert top.category == Category.DEBUGGING
        assert top.source == CandidateSource.RULE_BASED
        assert top.rule_id == "error_fix"

    def test_ui_action(self) -> None:
        candidates = _candidates("add a modal")
        assert candidates[0].action == ActionTag.CREATE_UI_COMPONENT
        assert candidates[0].confidence == 0.7

    @pytest.mark.parametrize(
        ("area", "action", "confidence"),
        [
            (
                ContextArea.FRONTEND,
                ActionTag.IMPLEMENT_FRONTEND_FEATURE,
                0.6,
            ),
            (
                ContextArea.BACKEND,
                ActionTag.IMPLEMENT_BACKEND_FEATURE,
                0.6,
            ),
            (ContextArea.UNKNOWN, ActionTag.GENERAL_IMPLEMENTATION, 0.5),
            (ContextArea.TESTING, ActionTag.GENERAL_IMPLEMENTATION, 0.5),
            (ContextArea.CONFIG, ActionTag.GENERAL_IMPLEMENTATION, 0.5),
        ],
    )
    def test_make_action_by_area(
        self, area: ContextArea, action: ActionTag, confidence: float
    ) -> None:
        candidates = _candidates("make the thing work", area)
        assert len(candidates) == 1
        assert candidates[0].action == action
        assert candidates[0].confidence == confidence

    def test_vague_description(self) -> None:
        candidates = _candidates("do stuff")
        assert len(candidates) == 1
        assert candidates[0].action == ActionTag.IMPROVE_CODE
        assert candidates[0].confidence == 0.5
        assert candidates[0].category == Category.IMPROVEMENT

    def test_nothing_fired(self) -> None:
        assert _candidates("hello there friend") == []

    def test_thing_references_alone_yield_nothing(self) -> None:
        assert _candidates("that thing") == []

    def test_reproducible(self) -> None:
        text = "fix the bug and make it pretty"
        assert _candidates(text) == _candidates(text)

    def test_every_rule_has_four_suggestions(self) -> None:
        for rule in RULE_TABLE:
            assert len(rule.suggested_actions) == 4


class TestFallbackCandidate:
    def test_shape(self) -> None:
        candidate = fallback_candidate()
        assert candidate.action == ActionTag.CLARIFY_REQUEST
        assert candidate.confidence == 0.1
        assert candidate.category == Category.UNCLEAR
        assert candidate.rule_id == "fallback"
