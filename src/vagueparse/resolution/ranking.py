"""Stages 5-6: rank candidates and derive the overall confidence."""

from __future__ import annotations

from vagueparse.constants import (
    AI_SOURCE_BONUS,
    AREA_MATCH_BONUS,
    FOCUS_AREA_BONUS,
    PATTERN_DENSITY_BONUS,
    PATTERN_DENSITY_MIN_MATCHES,
    SCORE_PRECISION,
    SHORT_TEXT_CHARS,
    SHORT_TEXT_PENALTY,
    SPECIFICITY_BONUS,
    SPECIFICITY_MIN_ACTIONS,
    CandidateSource,
    Confidence,
    ContextArea,
)
from vagueparse.resolution.schemas import (
    Candidate,
    ContextAnalysis,
    PatternMatchSet,
    ProjectContext,
    RankedCandidate,
)


def score_candidate(
    candidate: Candidate, analysis: ContextAnalysis
) -> tuple[float, list[str]]:
    """Return (final_score, reasons) for one candidate.

    final_score = min(1.0, confidence + bonuses):
    - +0.1 AI-sourced
    - +0.2 category matches the context area
    - +0.1 more than 3 suggested actions
    """
    score = candidate.confidence
    reasons = [f"base:{candidate.confidence}"]

    if candidate.source == CandidateSource.AI_ENHANCED:
        score += AI_SOURCE_BONUS
        reasons.append(f"ai_source:+{AI_SOURCE_BONUS}")

    if (
        analysis.area != ContextArea.UNKNOWN
        and candidate.category == analysis.area
    ):
        score += AREA_MATCH_BONUS
        reasons.append(f"area_match:+{AREA_MATCH_BONUS}")

    if len(candidate.suggested_actions) > SPECIFICITY_MIN_ACTIONS:
        score += SPECIFICITY_BONUS
        reasons.append(f"specificity:+{SPECIFICITY_BONUS}")

    return round(min(1.0, score), SCORE_PRECISION), reasons


def rank_candidates(
    candidates: list[Candidate], analysis: ContextAnalysis
) -> list[RankedCandidate]:
    """Score every candidate and sort by final score, descending.

    sorted() is stable, so equal scores keep producer order
    (rule-based rows first, then AI replies).
    """
    ranked: list[RankedCandidate] = []
    for candidate in candidates:
        final_score, reasons = score_candidate(candidate, analysis)
        ranked.append(
            RankedCandidate(
                **candidate.model_dump(),
                final_score=final_score,
                score_reasons=reasons,
            )
        )
    return sorted(ranked, key=lambda c: c.final_score, reverse=True)


def calculate_confidence(
    top: Candidate,
    patterns: PatternMatchSet,
    context: ProjectContext | None,
    original_text: str,
) -> float:
    """Overall confidence for the winning candidate.

    Starts from the candidate's own confidence (not its final score).
    """
    confidence = top.confidence

    if context is not None and context.focus_area is not None:
        confidence += FOCUS_AREA_BONUS

    if patterns.total_matches > PATTERN_DENSITY_MIN_MATCHES:
        confidence += PATTERN_DENSITY_BONUS

    if len(original_text) < SHORT_TEXT_CHARS:
        confidence -= SHORT_TEXT_PENALTY

    clamped = max(Confidence.FLOOR, min(Confidence.CEILING, confidence))
    return round(clamped, SCORE_PRECISION)
