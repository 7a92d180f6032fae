"""Deterministic resolution evaluations using pydantic-evals Dataset.

Runs the rule table only (AI disabled) so results are reproducible.

Run with: uv run python -m evals.eval_resolution
"""

from __future__ import annotations

from pydantic_evals import Case, Dataset

from evals.evaluators import (
    ActionIs,
    ConfidenceAbove,
    InvariantsHold,
    NeedsMoreInfoIs,
)
from vagueparse.config import Settings
from vagueparse.resolution.engine import VagueIntentResolver
from vagueparse.resolution.schemas import ResolutionResult

_resolver = VagueIntentResolver(Settings(ai_enabled=False))


async def run_resolution(text: str) -> ResolutionResult:
    """Resolve without context or preferences."""
    return await _resolver.resolve(text)


# ── Dataset ──────────────────────────────────────────────

dataset: Dataset[str, ResolutionResult] = Dataset(
    cases=[
        Case(
            name="fix_the_error_is_debugging",
            inputs="fix the error",
            evaluators=[
                ActionIs(action="debug_and_fix"),
                NeedsMoreInfoIs(expected=False),
                ConfidenceAbove(threshold=0.8),
            ],
            metadata={"family": "error_fixes"},
        ),
        Case(
            name="do_stuff_needs_clarification",
            inputs="do stuff",
            evaluators=[
                ActionIs(action="improve_code"),
                NeedsMoreInfoIs(expected=True),
            ],
            metadata={"family": "vague_descriptions"},
        ),
        Case(
            name="add_a_button_is_ui",
            inputs="add a button to the page please",
            evaluators=[
                ActionIs(action="create_ui_component"),
                NeedsMoreInfoIs(expected=False),
            ],
            metadata={"family": "ui_actions"},
        ),
        Case(
            name="make_it_not_crash_is_debugging",
            inputs="make it not crash ASAP!!",
            evaluators=[ActionIs(action="debug_and_fix")],
            metadata={"family": "error_fixes"},
        ),
        Case(
            name="unrecognized_request_falls_back",
            inputs="hello there friend",
            evaluators=[
                ActionIs(action="clarify_request"),
                NeedsMoreInfoIs(expected=True),
            ],
            metadata={"family": "none"},
        ),
    ],
    evaluators=[InvariantsHold()],
)


def main() -> None:
    """Run all resolution evaluations."""
    print("vagueparse resolution evaluations (pydantic-evals)")
    print("=" * 50)
    report = dataset.evaluate_sync(run_resolution)
    report.print(include_input=True, include_output=False)


if __name__ == "__main__":
    main()
