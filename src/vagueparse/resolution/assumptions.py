"""Stage 7: assumptions and clarifying questions."""

from __future__ import annotations

from collections.abc import Iterable

from vagueparse.constants import (
    MAX_CLARIFYING_QUESTIONS,
    MAX_MENU_CANDIDATES,
    Category,
)
from vagueparse.resolution.schemas import Candidate, ProjectContext

_CATEGORY_ASSUMPTIONS: dict[str, str] = {
    Category.DEBUGGING: "There are existing errors that need fixing",
    Category.UI: "This involves user interface changes",
    Category.TESTING: "This involves adding or updating tests",
    Category.CONFIG: "This involves configuration changes",
}

MENU_QUESTION = "Which of these interpretations is closest to what you want?"
GENERIC_QUESTIONS = (
    "What specific functionality should be implemented?",
    "Are there any particular files or components I should focus on?",
)


def generate_assumptions(
    top: Candidate, context: ProjectContext | None
) -> list[str]:
    """State what the engine took for granted, context first."""
    assumptions: list[str] = []

    if context is not None:
        if context.primary_language:
            assumptions.append(
                f"You're working in {context.primary_language}"
            )
        if context.framework:
            assumptions.append(
                f"You're using {context.framework} framework"
            )
        if context.focus_area is not None:
            assumptions.append(
                "You're currently focused on "
                f"{context.focus_area.directory}"
            )

    assumptions.append(f"You want to {top.action.replace('_', ' ')}")

    category_assumption = _CATEGORY_ASSUMPTIONS.get(top.category)
    if category_assumption:
        assumptions.append(category_assumption)

    return assumptions


def generate_clarifying_questions(
    ranked: list[Candidate],
    suggested: Iterable[str] = (),
) -> list[str]:
    """Disambiguation menu, generic questions, then suggested ones.

    The menu only appears when there is more than one candidate.
    Duplicates are dropped and the list is capped at 5.
    """
    questions: list[str] = []

    if len(ranked) > 1:
        questions.append(MENU_QUESTION)
        for index, candidate in enumerate(
            ranked[:MAX_MENU_CANDIDATES], start=1
        ):
            questions.append(f"{index}. {candidate.description}")

    questions.extend(GENERIC_QUESTIONS)
    questions.extend(q.strip() for q in suggested if q.strip())

    unique = list(dict.fromkeys(questions))
    return unique[:MAX_CLARIFYING_QUESTIONS]
