"""Shared test fixtures: rule-only resolver, fake AI sources, contexts."""

import os

# Force demo API keys for all tests, no real LLM calls.
os.environ["ANTHROPIC_API_KEY"] = "for-demo-purposes-only"
os.environ["OPENAI_API_KEY"] = "for-demo-purposes-only"

import asyncio
import json
from pathlib import Path
from typing import Any

import pytest
from circuitbreaker import CircuitBreakerMonitor

from vagueparse.config import Settings
from vagueparse.llm._llm_call import _breaker_registry
from vagueparse.resolution.ai_producer import (
    DecodedReply,
    decode_interpretations,
)
from vagueparse.resolution.engine import VagueIntentResolver
from vagueparse.resolution.schemas import (
    ContextAnalysis,
    Preferences,
    ProjectContext,
)


class FakeInterpreter:
    """Interpretation source returning a canned reply (or failing)."""

    def __init__(
        self,
        reply: str | None = None,
        *,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self._reply = reply
        self._error = error
        self._delay = delay
        self.calls: list[tuple[str, ContextAnalysis, Preferences | None]] = []
        self.cancelled = False

    async def interpret(
        self,
        text: str,
        analysis: ContextAnalysis,
        preferences: Preferences | None,
    ) -> DecodedReply:
        self.calls.append((text, analysis, preferences))
        try:
            if self._delay:
                await asyncio.sleep(self._delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self._error is not None:
            raise self._error
        return decode_interpretations(self._reply or "")


def ai_reply(
    interpretations: list[dict[str, Any]] | None = None,
    questions: list[str] | None = None,
) -> str:
    """Build a well-formed AI reply JSON string."""
    if interpretations is None:
        interpretations = [
            {
                "description": "Wire up the submit button handler",
                "action": "implement_frontend_feature",
                "confidence": 0.65,
                "suggestedActions": ["Add onClick", "Call the API"],
                "sassyComment": "Wow. So specific.",
            },
            {
                "description": "Fix the failing fetch call",
                "action": "debug_and_fix",
                "confidence": 0.4,
                "suggestedActions": ["Check the network tab"],
            },
        ]
    return json.dumps({
        "interpretations": interpretations,
        "clarifyingQuestions": questions or [],
    })


def mock_llm_response(content: str) -> Any:
    """Build a mock litellm response with usage metadata."""
    msg = type("Msg", (), {"content": content})()
    choice = type("Choice", (), {"message": msg})()
    usage = type(
        "Usage",
        (),
        {"prompt_tokens": 120, "completion_tokens": 60},
    )()
    return type(
        "Response", (), {"choices": [choice], "usage": usage}
    )()


@pytest.fixture(autouse=True)
def _reset_breakers() -> None:
    """Reset circuit breakers between tests."""
    _breaker_registry.clear()
    for cb in CircuitBreakerMonitor.get_circuits():
        cb.reset()  # type: ignore[union-attr]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        litellm_model_chain=["test/model-a", "test/model-b"],
        log_dir=tmp_path / "logs",
        ai_timeout_seconds=1.0,
    )


@pytest.fixture
def rule_only_resolver(settings: Settings) -> VagueIntentResolver:
    """Resolver with the AI producer disabled."""
    return VagueIntentResolver(
        settings.model_copy(update={"ai_enabled": False})
    )


@pytest.fixture
def frontend_context() -> ProjectContext:
    return ProjectContext.model_validate({
        "primaryLanguage": "javascript",
        "framework": "react",
        "focusArea": {"directory": "src/components"},
        "relevantFiles": [
            {"path": "src/components/LoginForm.jsx"},
            {"path": "src/components/Button.jsx"},
            {"path": "src/pages/Home.tsx"},
        ],
    })


@pytest.fixture
def backend_context() -> ProjectContext:
    return ProjectContext.model_validate({
        "primaryLanguage": "python",
        "framework": "fastapi",
        "relevantFiles": [
            {"path": "app/api/routes/users.py"},
            {"path": "app/services/billing_service.py"},
            {"path": "app/db/database.py"},
        ],
    })
