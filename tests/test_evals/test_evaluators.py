"""Tests for pydantic-evals custom evaluators."""

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


def _resolver(settings: Settings) -> VagueIntentResolver:
    return VagueIntentResolver(
        settings.model_copy(update={"ai_enabled": False})
    )


def _single_case(evaluator: object) -> Dataset[str, ResolutionResult]:
    return Dataset(
        cases=[
            Case(
                name="test",
                inputs="fix the error",
                evaluators=[evaluator],  # type: ignore[list-item]
            )
        ]
    )


class TestActionIs:
    def test_match(self, settings: Settings) -> None:
        dataset = _single_case(ActionIs(action="debug_and_fix"))
        report = dataset.evaluate_sync(
            _resolver(settings).resolve, progress=False
        )
        assert report.averages().assertions == 1.0

    def test_mismatch(self, settings: Settings) -> None:
        dataset = _single_case(ActionIs(action="write_tests"))
        report = dataset.evaluate_sync(
            _resolver(settings).resolve, progress=False
        )
        assert report.averages().assertions == 0.0


class TestNeedsMoreInfoIs:
    def test_confident_request(self, settings: Settings) -> None:
        dataset = _single_case(NeedsMoreInfoIs(expected=False))
        report = dataset.evaluate_sync(
            _resolver(settings).resolve, progress=False
        )
        assert report.averages().assertions == 1.0


class TestConfidenceAbove:
    def test_score_is_confidence(self, settings: Settings) -> None:
        dataset = _single_case(ConfidenceAbove(threshold=0.5))
        report = dataset.evaluate_sync(
            _resolver(settings).resolve, progress=False
        )
        result = report.cases[0].scores.get("ConfidenceAbove")
        assert result is not None
        assert result.value == 0.8

    def test_below_threshold_scores_zero(
        self, settings: Settings
    ) -> None:
        dataset = _single_case(ConfidenceAbove(threshold=0.9))
        report = dataset.evaluate_sync(
            _resolver(settings).resolve, progress=False
        )
        result = report.cases[0].scores.get("ConfidenceAbove")
        assert result is not None
        assert result.value == 0.0


class TestInvariantsHold:
    def test_rule_only_results_hold(self, settings: Settings) -> None:
        dataset: Dataset[str, ResolutionResult] = Dataset(
            cases=[
                Case(name=text, inputs=text)
                for text in ("fix the error", "do stuff", "zzz")
            ],
            evaluators=[InvariantsHold()],
        )
        report = dataset.evaluate_sync(
            _resolver(settings).resolve, progress=False
        )
        assert report.averages().assertions == 1.0
