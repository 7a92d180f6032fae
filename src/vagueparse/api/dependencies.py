"""FastAPI dependency injection for app-scoped services."""

from __future__ import annotations

from fastapi import Request

from vagueparse.config import Settings
from vagueparse.logger import ResolutionLogger
from vagueparse.resolution.engine import VagueIntentResolver


def get_settings(request: Request) -> Settings:
    """Settings created once in the app lifespan."""
    return request.app.state.settings  # type: ignore[no-any-return]


def get_resolver(request: Request) -> VagueIntentResolver:
    """Shared resolver: stateless, safe across concurrent requests."""
    return request.app.state.resolver  # type: ignore[no-any-return]


def get_resolution_logger(request: Request) -> ResolutionLogger:
    return request.app.state.resolution_logger  # type: ignore[no-any-return]
