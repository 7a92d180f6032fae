"""Resolution error taxonomy and collaborator error classification.

Three failure kinds leave (or try to leave) the engine:
- EmptyInputError: caller sent nothing to interpret: re-prompt the user
- ExternalServiceError: the AI collaborator failed: always absorbed
- EngineFailure: a deterministic stage raised: a bug, surfaced generically

Collaborator errors are classified by category for structured logging.
"""

from __future__ import annotations

import asyncio
from enum import Enum


class ResolutionError(Exception):
    """Base class for everything the resolution engine raises."""


class EmptyInputError(ResolutionError):
    """Request text is empty or whitespace-only after normalization."""

    def __init__(self) -> None:
        super().__init__("Text is required for parsing")


class EngineFailure(ResolutionError):
    """Unexpected fault inside a deterministic pipeline stage."""

    def __init__(self, stage: str, input_hash: str) -> None:
        super().__init__(
            f"Resolution failed in stage '{stage}' "
            f"(input {input_hash})"
        )
        self.stage = stage
        self.input_hash = input_hash


class ExternalServiceError(ResolutionError):
    """The text-generation collaborator could not produce a reply."""

    def __init__(
        self, message: str, error_class: ErrorClass | None = None
    ) -> None:
        super().__init__(message)
        self.error_class = error_class or ErrorClass.UNKNOWN


class ErrorClass(Enum):
    TRANSIENT = "transient"  # 429, network errors
    SERVER = "server"  # 500, 502, 503
    TIMEOUT = "timeout"  # deadline exceeded
    CLIENT = "client"  # 400, 401, 403
    UNKNOWN = "unknown"  # unclassified


def classify_error(error: BaseException) -> ErrorClass:
    """Classify an error to determine handling strategy.

    Checks structured attributes first (status_code), falls back
    to string matching for untyped exceptions.
    """
    if isinstance(error, ExternalServiceError):
        return error.error_class

    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int):
        if status_code == 429:
            return ErrorClass.TRANSIENT
        if 400 <= status_code < 500:
            return ErrorClass.CLIENT
        if 500 <= status_code < 600:
            return ErrorClass.SERVER

    if isinstance(error, (TimeoutError, asyncio.TimeoutError)):
        return ErrorClass.TIMEOUT

    msg = str(error).lower()

    if "timeout" in msg or "timed out" in msg:
        return ErrorClass.TIMEOUT
    if "429" in msg or "rate limit" in msg or "rate_limit" in msg:
        return ErrorClass.TRANSIENT
    if any(code in msg for code in ("500", "502", "503", "504")):
        return ErrorClass.SERVER
    if "econnrefused" in msg or "connection" in msg:
        return ErrorClass.TRANSIENT
    if any(code in msg for code in ("400", "401", "403", "404")):
        return ErrorClass.CLIENT

    return ErrorClass.UNKNOWN
