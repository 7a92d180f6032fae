"""Vague intent resolution engine: composes the seven pipeline stages.

The resolver holds no per-request state, so one instance can serve
concurrent requests. The AI-assisted producer is the only suspension
point: it starts before the rule table runs and is awaited with a
hard timeout. Its failures degrade the result (ai_status) but never
change the success/failure contract of resolve().
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from vagueparse.config import Settings
from vagueparse.constants import (
    INPUT_HASH_LENGTH,
    MAX_ALTERNATIVES,
    AIStatus,
)
from vagueparse.resilience.errors import (
    EmptyInputError,
    EngineFailure,
    classify_error,
)
from vagueparse.resolution.ai_producer import AIInterpreter, DecodedReply
from vagueparse.resolution.assumptions import (
    generate_assumptions,
    generate_clarifying_questions,
)
from vagueparse.resolution.context import analyze_context
from vagueparse.resolution.normalizer import normalize_text
from vagueparse.resolution.patterns import extract_patterns
from vagueparse.resolution.ranking import (
    calculate_confidence,
    rank_candidates,
)
from vagueparse.resolution.rules import (
    fallback_candidate,
    generate_rule_candidates,
)
from vagueparse.resolution.schemas import (
    Candidate,
    ContextAnalysis,
    PatternMatchSet,
    Preferences,
    ProjectContext,
    RankedCandidate,
    ResolutionResult,
)

logger = logging.getLogger(__name__)


class InterpretationSource(Protocol):
    """Anything that can produce AI-style candidates for a request."""

    async def interpret(
        self,
        text: str,
        analysis: ContextAnalysis,
        preferences: Preferences | None,
    ) -> DecodedReply: ...


@dataclass(frozen=True)
class AIOutcome:
    """What the AI-assisted producer contributed to one request."""

    status: AIStatus
    candidates: list[Candidate] = field(
        default_factory=lambda: list[Candidate]()
    )
    clarifying_questions: list[str] = field(
        default_factory=lambda: list[str]()
    )


def input_hash(text: str) -> str:
    """Short stable fingerprint for log correlation without raw text."""
    digest = hashlib.sha256(text.encode("utf-8", "replace"))
    return digest.hexdigest()[:INPUT_HASH_LENGTH]


T = TypeVar("T")


def _run_stage(
    stage: str,
    fingerprint: str,
    fn: Callable[..., T],
    *args: Any,
) -> T:
    """Run a deterministic stage; any exception becomes EngineFailure."""
    try:
        return fn(*args)
    except Exception as exc:
        logger.error(
            "event=engine_failure stage=%s input_hash=%s",
            stage,
            fingerprint,
            exc_info=True,
        )
        raise EngineFailure(stage, fingerprint) from exc


class VagueIntentResolver:
    """Turns a colloquial request into a ranked, explained interpretation.

    Pass ``ai`` to inject an interpretation source (tests, other
    providers). When omitted, the configured model chain is used
    unless ``settings.ai_enabled`` is false.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        ai: InterpretationSource | None = None,
    ) -> None:
        self._settings = settings or Settings()
        if not self._settings.ai_enabled:
            self._ai: InterpretationSource | None = None
        else:
            self._ai = ai or AIInterpreter(self._settings)

    @property
    def ai_enabled(self) -> bool:
        return self._ai is not None

    async def resolve(
        self,
        text: str,
        context: ProjectContext | None = None,
        preferences: Preferences | None = None,
    ) -> ResolutionResult:
        """Resolve one request.

        Raises EmptyInputError for blank text and EngineFailure when a
        deterministic stage fails. AI failures are absorbed.
        """
        fingerprint = input_hash(str(text))

        normalized = _run_stage(
            "normalize", fingerprint, normalize_text, text
        )
        if not normalized:
            raise EmptyInputError()

        patterns: PatternMatchSet = _run_stage(
            "extract_patterns", fingerprint, extract_patterns, normalized
        )
        analysis: ContextAnalysis = _run_stage(
            "analyze_context", fingerprint, analyze_context,
            normalized, context,
        )

        ai_task = self._start_ai(normalized, analysis, preferences)
        try:
            rule_candidates: list[Candidate] = _run_stage(
                "rule_candidates", fingerprint, generate_rule_candidates,
                patterns, analysis,
            )
            ai = await self._collect_ai(ai_task, fingerprint)
        finally:
            if ai_task is not None and not ai_task.done():
                ai_task.cancel()

        candidates = rule_candidates + ai.candidates
        if not candidates:
            logger.info(
                "event=no_candidates input_hash=%s action=fallback",
                fingerprint,
            )
            candidates = [fallback_candidate()]

        ranked: list[RankedCandidate] = _run_stage(
            "rank", fingerprint, rank_candidates, candidates, analysis
        )
        top = ranked[0]
        confidence: float = _run_stage(
            "confidence", fingerprint, calculate_confidence,
            top, patterns, context, text,
        )

        result: ResolutionResult = _run_stage(
            "assemble", fingerprint, self._assemble,
            text, ranked, confidence, patterns, analysis, context, ai,
        )
        logger.info(
            "event=resolved input_hash=%s action=%s confidence=%.2f "
            "candidates=%d ai_status=%s needs_more_info=%s",
            fingerprint,
            result.specific_action,
            result.confidence,
            len(ranked),
            result.ai_status,
            result.needs_more_info,
        )
        return result

    def _start_ai(
        self,
        normalized: str,
        analysis: ContextAnalysis,
        preferences: Preferences | None,
    ) -> asyncio.Task[DecodedReply] | None:
        if self._ai is None:
            return None
        return asyncio.ensure_future(
            self._ai.interpret(normalized, analysis, preferences)
        )

    async def _collect_ai(
        self,
        task: asyncio.Task[DecodedReply] | None,
        fingerprint: str,
    ) -> AIOutcome:
        """Await the AI task within the timeout; never raises."""
        if task is None:
            return AIOutcome(status=AIStatus.DISABLED)

        try:
            reply = await asyncio.wait_for(
                task, timeout=self._settings.ai_timeout_seconds
            )
        except TimeoutError:
            logger.warning(
                "event=ai_timeout input_hash=%s timeout_s=%s",
                fingerprint,
                self._settings.ai_timeout_seconds,
            )
            return AIOutcome(status=AIStatus.TIMEOUT)
        except Exception as exc:
            logger.warning(
                "event=ai_failed input_hash=%s error_class=%s",
                fingerprint,
                classify_error(exc).value,
                exc_info=True,
            )
            return AIOutcome(status=AIStatus.FAILED)

        if not reply.ok:
            logger.warning(
                "event=ai_decode_failed input_hash=%s error=%s",
                fingerprint,
                reply.error,
            )
            return AIOutcome(status=AIStatus.DECODE_FAILED)

        return AIOutcome(
            status=AIStatus.OK,
            candidates=list(reply.candidates),
            clarifying_questions=list(reply.clarifying_questions),
        )

    def _assemble(
        self,
        text: str,
        ranked: list[RankedCandidate],
        confidence: float,
        patterns: PatternMatchSet,
        analysis: ContextAnalysis,
        context: ProjectContext | None,
        ai: AIOutcome,
    ) -> ResolutionResult:
        top = ranked[0]
        needs_more_info = (
            confidence < self._settings.medium_confidence_threshold
        )
        questions = (
            generate_clarifying_questions(
                list(ranked), ai.clarifying_questions
            )
            if needs_more_info
            else []
        )
        return ResolutionResult(
            original_text=text,
            interpretation=top.description,
            specific_action=top.action,
            assumptions=generate_assumptions(top, context),
            confidence=confidence,
            alternative_interpretations=ranked[1 : 1 + MAX_ALTERNATIVES],
            needs_more_info=needs_more_info,
            clarifying_questions=questions,
            suggested_actions=list(top.suggested_actions),
            detected_patterns=patterns,
            context_analysis=analysis,
            ai_status=ai.status,
        )


async def resolve(
    text: str,
    context: ProjectContext | None = None,
    preferences: Preferences | None = None,
    *,
    settings: Settings | None = None,
) -> ResolutionResult:
    """Resolve with a resolver built from ``settings`` (or the environment)."""
    return await VagueIntentResolver(settings).resolve(
        text, context, preferences
    )
