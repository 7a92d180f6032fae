"""Stage 3: map the caller's project context onto a coarse area.

Keyword co-occurrence scoring, same approach as a chat intent router:
no LLM call, instant, deterministic, testable.
"""

from __future__ import annotations

from vagueparse.constants import MAX_RELEVANT_FILES, ContextArea
from vagueparse.resolution.schemas import ContextAnalysis, ProjectContext

# Declaration order is the tie-break order.
AREA_KEYWORDS: dict[ContextArea, list[str]] = {
    ContextArea.FRONTEND: [
        "component",
        "page",
        "view",
        "template",
        "ui",
        "jsx",
        "tsx",
        "vue",
        "html",
        "css",
    ],
    ContextArea.BACKEND: [
        "api",
        "route",
        "controller",
        "service",
        "model",
        "database",
        "server",
    ],
    ContextArea.TESTING: [
        "test",
        "spec",
        "mock",
        "fixture",
    ],
    ContextArea.CONFIG: [
        "config",
        "setting",
        "env",
        "setup",
    ],
}

def score_areas(text: str, file_paths: list[str]) -> dict[str, int]:
    """Count keyword hits per area.

    A keyword scores once if it appears anywhere in the request text
    ("homepage" hits "page") or in a lower-cased relevant file path.
    """
    paths = [p.lower() for p in file_paths]
    scores: dict[str, int] = {}
    for area, keywords in AREA_KEYWORDS.items():
        hits = 0
        for kw in keywords:
            if kw in text or any(
                kw in p for p in paths
            ):
                hits += 1
        scores[area.value] = hits
    return scores


def select_area(scores: dict[str, int]) -> ContextArea:
    """Highest score wins, first-declared area on ties, zero → unknown."""
    best = ContextArea.UNKNOWN
    best_score = 0
    for area in AREA_KEYWORDS:
        score = scores.get(area.value, 0)
        if score > best_score:
            best, best_score = area, score
    return best


def analyze_context(
    text: str, context: ProjectContext | None
) -> ContextAnalysis:
    """Derive the request's area, top files, and focus directory.

    Without a context everything degrades to unknown/empty.
    """
    if context is None:
        return ContextAnalysis()

    file_paths = [f.path for f in context.relevant_files]
    scores = score_areas(text, file_paths)

    return ContextAnalysis(
        area=select_area(scores),
        relevant_files=context.relevant_files[:MAX_RELEVANT_FILES],
        suggested_focus=(
            context.focus_area.directory if context.focus_area else None
        ),
        area_scores=scores,
    )
