"""Pydantic models flowing through the resolution pipeline.

Wire names are camelCase so the context supplier and the chat
collaborator can exchange JSON as-is; attributes stay snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vagueparse.constants import (
    DEFAULT_SASS_LEVEL,
    DEFAULT_VERBOSITY,
    ActionTag,
    AIStatus,
    CandidateSource,
    ContextArea,
    Intensity,
    PatternFamily,
)


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class _FrozenWireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ── Inputs ───────────────────────────────────────────────


class RelevantFile(_WireModel):
    """A file the context supplier ranked as relevant."""

    path: str
    content: str | None = None


class FocusArea(_WireModel):
    """Where the user has been working recently."""

    directory: str


class ProjectContext(_WireModel):
    """Read-only project snapshot supplied by the file scanner."""

    primary_language: str | None = None
    framework: str | None = None
    focus_area: FocusArea | None = None
    relevant_files: list[RelevantFile] = Field(
        default_factory=lambda: list[RelevantFile]()
    )


class AIPersonality(_WireModel):
    """Only sass_level and verbosity shape the interpretation prompt."""

    sass_level: int = Field(default=DEFAULT_SASS_LEVEL, ge=1, le=10)
    verbosity: str = DEFAULT_VERBOSITY
    explanation_style: str | None = None


class Preferences(_WireModel):
    """Per-user preferences forwarded by the chat collaborator."""

    ai_personality: AIPersonality | None = None


# ── Intermediate stages ──────────────────────────────────


class PatternMatchSet(_FrozenWireModel):
    """Literal matches per pattern family plus an urgency tag."""

    thing_references: list[str] = Field(default_factory=lambda: list[str]())
    make_actions: list[str] = Field(default_factory=lambda: list[str]())
    vague_descriptions: list[str] = Field(
        default_factory=lambda: list[str]()
    )
    error_fixes: list[str] = Field(default_factory=lambda: list[str]())
    ui_actions: list[str] = Field(default_factory=lambda: list[str]())
    intensity: Intensity = Intensity.MEDIUM

    def matches(self, family: PatternFamily) -> list[str]:
        return list(getattr(self, family.value))

    def fired(self, family: PatternFamily) -> bool:
        return bool(getattr(self, family.value))

    @property
    def total_matches(self) -> int:
        return sum(len(self.matches(f)) for f in PatternFamily)


class ContextAnalysis(_FrozenWireModel):
    """Where in the project the request most likely applies."""

    area: ContextArea = ContextArea.UNKNOWN
    relevant_files: list[RelevantFile] = Field(
        default_factory=lambda: list[RelevantFile]()
    )
    suggested_focus: str | None = None
    area_scores: dict[str, int] = Field(
        default_factory=lambda: dict[str, int]()
    )


class Candidate(_FrozenWireModel):
    """One possible reading of the request."""

    description: str
    action: ActionTag
    confidence: float = Field(ge=0.0, le=1.0)
    suggested_actions: list[str] = Field(default_factory=lambda: list[str]())
    source: CandidateSource
    category: str
    rule_id: str | None = None


class RankedCandidate(Candidate):
    """A candidate plus the score the ranker gave it and why."""

    final_score: float
    score_reasons: list[str] = Field(default_factory=lambda: list[str]())


# ── Output ───────────────────────────────────────────────


class ResolutionResult(_FrozenWireModel):
    """The engine's sole output for one request."""

    original_text: str
    interpretation: str
    specific_action: ActionTag
    assumptions: list[str]
    confidence: float = Field(ge=0.0, le=1.0)
    alternative_interpretations: list[RankedCandidate] = Field(
        max_length=2
    )
    needs_more_info: bool
    clarifying_questions: list[str]
    suggested_actions: list[str]
    detected_patterns: PatternMatchSet
    context_analysis: ContextAnalysis
    ai_status: AIStatus
