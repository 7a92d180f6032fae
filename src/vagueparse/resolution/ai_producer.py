"""Stage 4b: AI-assisted interpretation producer.

Sends a structured prompt to the model chain and decodes the reply into
the same Candidate shape the rule table produces. The decoder is
fallible by contract: a reply that violates the schema yields no
candidates plus an error string, never an exception. Transport failures
of every model raise ExternalServiceError, which the engine absorbs.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from circuitbreaker import CircuitBreakerError
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from vagueparse.config import Settings
from vagueparse.constants import (
    ACTION_CATEGORIES,
    DEFAULT_SASS_LEVEL,
    DEFAULT_VERBOSITY,
    MAX_AI_INTERPRETATIONS,
    ActionTag,
    CandidateSource,
)
from vagueparse.llm import guarded_llm_call
from vagueparse.prompts import (
    build_interpretation_system_prompt,
    build_interpretation_user_prompt,
)
from vagueparse.resilience.errors import (
    ErrorClass,
    ExternalServiceError,
    classify_error,
)
from vagueparse.resolution.schemas import (
    Candidate,
    ContextAnalysis,
    Preferences,
)

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


# ── Reply schema ─────────────────────────────────────────


class _ReplyModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class AIInterpretation(_ReplyModel):
    """One interpretation as the model returns it."""

    description: str = Field(min_length=1)
    action: ActionTag
    confidence: float = Field(allow_inf_nan=False)
    suggested_actions: list[str] = Field(default_factory=lambda: list[str]())
    category: str | None = None
    sassy_comment: str | None = None


class AIReply(_ReplyModel):
    """Top-level JSON object the model must return."""

    interpretations: list[AIInterpretation] = Field(min_length=1)
    clarifying_questions: list[str] = Field(
        default_factory=lambda: list[str]()
    )


@dataclass(frozen=True)
class DecodedReply:
    """Decoder output: candidates, suggested questions, or an error."""

    candidates: list[Candidate] = field(
        default_factory=lambda: list[Candidate]()
    )
    clarifying_questions: list[str] = field(
        default_factory=lambda: list[str]()
    )
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _strip_code_fence(raw: str) -> str:
    text = raw.strip()
    match = _CODE_FENCE.match(text)
    return match.group(1) if match else text


def _to_candidate(item: AIInterpretation) -> Candidate:
    return Candidate(
        description=item.description,
        action=item.action,
        confidence=max(0.0, min(1.0, item.confidence)),
        suggested_actions=item.suggested_actions,
        source=CandidateSource.AI_ENHANCED,
        category=(item.category or ACTION_CATEGORIES[item.action]).lower(),
    )


def decode_interpretations(raw: str) -> DecodedReply:
    """Parse the model's reply; schema violations yield an error, not a raise.

    Confidences are clamped to [0, 1] and at most 3 interpretations
    are kept.
    """
    try:
        reply = AIReply.model_validate_json(_strip_code_fence(raw))
    except ValidationError as exc:
        logger.warning(
            "event=ai_reply_decode_failed errors=%d response_len=%d",
            exc.error_count(),
            len(raw),
        )
        return DecodedReply(
            error=f"invalid reply: {exc.error_count()} schema error(s)"
        )

    return DecodedReply(
        candidates=[
            _to_candidate(item)
            for item in reply.interpretations[:MAX_AI_INTERPRETATIONS]
        ],
        clarifying_questions=reply.clarifying_questions,
    )


# ── Prompting ────────────────────────────────────────────


def build_messages(
    text: str,
    analysis: ContextAnalysis,
    preferences: Preferences | None,
) -> list[dict[str, str]]:
    """System + user prompt pair for one request."""
    personality = preferences.ai_personality if preferences else None
    sass_level = (
        personality.sass_level if personality else DEFAULT_SASS_LEVEL
    )
    verbosity = (
        personality.verbosity if personality else DEFAULT_VERBOSITY
    )

    system_prompt = build_interpretation_system_prompt(
        analysis.area,
        analysis.suggested_focus,
        sass_level,
        verbosity,
    )
    user_prompt = build_interpretation_user_prompt(
        text,
        analysis.area,
        [f.path for f in analysis.relevant_files],
        analysis.suggested_focus,
    )
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]


class AIInterpreter:
    """Interpretation source backed by the configured model chain."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def interpret(
        self,
        text: str,
        analysis: ContextAnalysis,
        preferences: Preferences | None,
    ) -> DecodedReply:
        """Ask the first available model; fall back down the chain.

        Raises ExternalServiceError when no model produced a reply.
        A reply that fails to decode is returned as-is (not retried
        on the next model).
        """
        messages = build_messages(text, analysis, preferences)
        last_error: Exception | None = None

        for model in self._settings.litellm_model_chain:
            try:
                result = await guarded_llm_call(
                    model,
                    messages,
                    self._settings.llm_timeout_seconds,
                    temperature=self._settings.llm_temperature,
                    max_tokens=self._settings.llm_max_tokens,
                )
            except CircuitBreakerError as exc:
                logger.warning(
                    "event=circuit_open model=%s component=interpreter",
                    model,
                )
                last_error = exc
                continue
            except Exception as exc:
                logger.warning(
                    "event=interpretation_call_failed model=%s",
                    model,
                    exc_info=True,
                )
                last_error = exc
                continue
            return decode_interpretations(result.content)

        raise ExternalServiceError(
            "No model in the chain returned an interpretation",
            classify_error(last_error) if last_error else ErrorClass.UNKNOWN,
        )
