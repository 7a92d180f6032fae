"""Vague intent resolution pipeline.

normalize → extract patterns → analyze context → generate candidates
(rule table + AI) → rank → confidence → assumptions/questions.
"""

from vagueparse.resolution.engine import VagueIntentResolver, resolve
from vagueparse.resolution.schemas import (
    Candidate,
    ContextAnalysis,
    PatternMatchSet,
    Preferences,
    ProjectContext,
    RankedCandidate,
    ResolutionResult,
)

__all__ = [
    "Candidate",
    "ContextAnalysis",
    "PatternMatchSet",
    "Preferences",
    "ProjectContext",
    "RankedCandidate",
    "ResolutionResult",
    "VagueIntentResolver",
    "resolve",
]
