"""Custom pydantic-evals evaluators for vague intent resolution.

All deterministic (no LLM):
- ActionIs: top interpretation's action tag equals the expected one
- NeedsMoreInfoIs: needs_more_info flag has the expected value
- ConfidenceAbove: overall confidence meets a floor (scored)
- InvariantsHold: structural invariants every result must satisfy
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_evals.evaluators import Evaluator, EvaluatorContext

from vagueparse.constants import Confidence
from vagueparse.resolution.schemas import ResolutionResult


@dataclass
class ActionIs(Evaluator[str, ResolutionResult]):
    """Check the winning action tag."""

    action: str = ""

    def evaluate(
        self, ctx: EvaluatorContext[str, ResolutionResult]
    ) -> bool:
        return ctx.output.specific_action == self.action


@dataclass
class NeedsMoreInfoIs(Evaluator[str, ResolutionResult]):
    """Check whether the engine asked for clarification."""

    expected: bool = True

    def evaluate(
        self, ctx: EvaluatorContext[str, ResolutionResult]
    ) -> bool:
        return ctx.output.needs_more_info is self.expected


@dataclass
class ConfidenceAbove(Evaluator[str, ResolutionResult]):
    """Return the confidence as a score when it meets the threshold."""

    threshold: float = Confidence.MEDIUM

    def evaluate(
        self, ctx: EvaluatorContext[str, ResolutionResult]
    ) -> float:
        value = ctx.output.confidence
        return value if value >= self.threshold else 0.0


@dataclass
class InvariantsHold(Evaluator[str, ResolutionResult]):
    """Bounds, question/flag agreement, alternatives exclude the winner."""

    threshold: float = Confidence.MEDIUM

    def evaluate(
        self, ctx: EvaluatorContext[str, ResolutionResult]
    ) -> bool:
        result = ctx.output
        if not Confidence.FLOOR <= result.confidence <= Confidence.CEILING:
            return False
        if result.needs_more_info != (result.confidence < self.threshold):
            return False
        if bool(result.clarifying_questions) != result.needs_more_info:
            return False
        return len(result.alternative_interpretations) <= 2
