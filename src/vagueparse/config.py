"""Environment-based configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from vagueparse.constants import Confidence

logger = logging.getLogger(__name__)

# Hard ceiling for the AI-assisted producer's wait.
MAX_AI_TIMEOUT_SECONDS = 10.0


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # LLM Provider
    anthropic_api_key: str = ""
    openai_api_key: str = ""

    # Model chain (first = primary, rest = fallbacks tried in order)
    litellm_model_chain: Annotated[list[str], NoDecode] = [
        "openai/gpt-4.1-mini",
        "openai/gpt-4o-mini",
    ]
    llm_timeout_seconds: int = 10
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000

    # AI-assisted interpretation
    ai_enabled: bool = True
    ai_timeout_seconds: float = MAX_AI_TIMEOUT_SECONDS

    # Resolution
    medium_confidence_threshold: float = Confidence.MEDIUM
    max_request_chars: int = 1000

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("logs")

    # API
    cors_origins: str = "http://localhost:3000"

    @field_validator("litellm_model_chain", mode="before")
    @classmethod
    def _parse_chain(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("litellm_model_chain")
    @classmethod
    def _validate_chain(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError(
                "litellm_model_chain must contain at least one model"
            )
        seen: set[str] = set()
        dupes: list[str] = []
        for m in v:
            if m in seen:
                dupes.append(m)
            seen.add(m)
        if dupes:
            logger.warning(
                "Duplicate models in LITELLM_MODEL_CHAIN: %s",
                ", ".join(dupes),
            )
        return v

    @field_validator("ai_timeout_seconds")
    @classmethod
    def _validate_ai_timeout(cls, v: float) -> float:
        if v <= 0 or v > MAX_AI_TIMEOUT_SECONDS:
            raise ValueError(
                "ai_timeout_seconds must be in (0, "
                f"{MAX_AI_TIMEOUT_SECONDS:g}]"
            )
        return v

    @field_validator("medium_confidence_threshold")
    @classmethod
    def _validate_threshold(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(
                "medium_confidence_threshold must be within [0, 1]"
            )
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
