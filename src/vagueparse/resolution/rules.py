"""Stage 4a: rule-based interpretation producer.

RULE_TABLE is pure data. Rows are evaluated in order and every row
whose pattern family fired (and whose area condition holds) yields
one candidate, so the output is reproducible for a given
(patterns, area) pair.
"""

from __future__ import annotations

from dataclasses import dataclass

from vagueparse.constants import (
    ActionTag,
    CandidateSource,
    Category,
    Confidence,
    ContextArea,
    PatternFamily,
)
from vagueparse.resolution.schemas import (
    Candidate,
    ContextAnalysis,
    PatternMatchSet,
)


@dataclass(frozen=True)
class InterpretationRule:
    """One decision-table row.

    ``areas`` restricts the row to those context areas; ``None``
    means any area. ``exclude_areas`` is the inverse. A row with no
    ``family`` never applies; it is only converted directly.
    """

    rule_id: str
    family: PatternFamily | None
    description: str
    action: ActionTag
    confidence: float
    category: Category
    suggested_actions: tuple[str, ...]
    areas: frozenset[ContextArea] | None = None
    exclude_areas: frozenset[ContextArea] = frozenset()

    def applies(
        self, patterns: PatternMatchSet, area: ContextArea
    ) -> bool:
        if self.family is None or not patterns.fired(self.family):
            return False
        if self.areas is not None and area not in self.areas:
            return False
        return area not in self.exclude_areas

    def to_candidate(self) -> Candidate:
        return Candidate(
            description=self.description,
            action=self.action,
            confidence=self.confidence,
            suggested_actions=list(self.suggested_actions),
            source=CandidateSource.RULE_BASED,
            category=self.category,
            rule_id=self.rule_id,
        )


_AREA_SPECIFIC = frozenset({ContextArea.FRONTEND, ContextArea.BACKEND})

RULE_TABLE: tuple[InterpretationRule, ...] = (
    InterpretationRule(
        rule_id="error_fix",
        family=PatternFamily.ERROR_FIXES,
        description="Fix errors or bugs in the code",
        action=ActionTag.DEBUG_AND_FIX,
        confidence=Confidence.ERROR_FIX,
        category=Category.DEBUGGING,
        suggested_actions=(
            "Review console errors",
            "Check for syntax errors",
            "Validate function calls",
            "Test error handling",
        ),
    ),
    InterpretationRule(
        rule_id="ui_action",
        family=PatternFamily.UI_ACTIONS,
        description="Add or modify user interface elements",
        action=ActionTag.CREATE_UI_COMPONENT,
        confidence=Confidence.UI_ACTION,
        category=Category.UI,
        suggested_actions=(
            "Create new component",
            "Add event handlers",
            "Style with CSS",
            "Implement user interactions",
        ),
    ),
    InterpretationRule(
        rule_id="make_action_frontend",
        family=PatternFamily.MAKE_ACTIONS,
        description="Implement or fix frontend functionality",
        action=ActionTag.IMPLEMENT_FRONTEND_FEATURE,
        confidence=Confidence.AREA_IMPLEMENTATION,
        category=Category.FRONTEND,
        suggested_actions=(
            "Add missing props or state",
            "Implement event handlers",
            "Fix component rendering",
            "Add proper styling",
        ),
        areas=frozenset({ContextArea.FRONTEND}),
    ),
    InterpretationRule(
        rule_id="make_action_backend",
        family=PatternFamily.MAKE_ACTIONS,
        description="Implement or fix backend functionality",
        action=ActionTag.IMPLEMENT_BACKEND_FEATURE,
        confidence=Confidence.AREA_IMPLEMENTATION,
        category=Category.BACKEND,
        suggested_actions=(
            "Add API endpoints",
            "Implement business logic",
            "Fix database queries",
            "Add error handling",
        ),
        areas=frozenset({ContextArea.BACKEND}),
    ),
    InterpretationRule(
        rule_id="make_action_general",
        family=PatternFamily.MAKE_ACTIONS,
        description="Implement missing functionality",
        action=ActionTag.GENERAL_IMPLEMENTATION,
        confidence=Confidence.GENERAL_IMPLEMENTATION,
        category=Category.GENERAL,
        suggested_actions=(
            "Add missing functions",
            "Implement core logic",
            "Fix broken features",
            "Add proper error handling",
        ),
        exclude_areas=_AREA_SPECIFIC,
    ),
    InterpretationRule(
        rule_id="vague_description",
        family=PatternFamily.VAGUE_DESCRIPTIONS,
        description="Improve or refactor existing code",
        action=ActionTag.IMPROVE_CODE,
        confidence=Confidence.VAGUE_DESCRIPTION,
        category=Category.IMPROVEMENT,
        suggested_actions=(
            "Refactor for better readability",
            "Optimize performance",
            "Add error handling",
            "Improve code structure",
        ),
    ),
)

FALLBACK_RULE = InterpretationRule(
    rule_id="fallback",
    family=None,
    description="Unclear request that needs more detail",
    action=ActionTag.CLARIFY_REQUEST,
    confidence=Confidence.FALLBACK,
    category=Category.UNCLEAR,
    suggested_actions=(
        "Describe the expected behavior",
        "Name the file or component involved",
    ),
)


def generate_rule_candidates(
    patterns: PatternMatchSet,
    analysis: ContextAnalysis,
) -> list[Candidate]:
    """Evaluate RULE_TABLE in order; zero or more candidates."""
    return [
        rule.to_candidate()
        for rule in RULE_TABLE
        if rule.applies(patterns, analysis.area)
    ]


def fallback_candidate() -> Candidate:
    """Used only when neither producer yields anything."""
    return FALLBACK_RULE.to_candidate()
