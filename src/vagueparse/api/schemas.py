"""Request/response schemas for the HTTP API."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from vagueparse.resolution.schemas import Preferences, ProjectContext


class APIResponse(BaseModel):
    """Standard response envelope for all API endpoints."""

    success: bool
    data: Any | None = None
    error: str | None = None
    message: str | None = None


class ParseRequest(BaseModel):
    """Request body for POST /api/ai/parse."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    text: str
    context: ProjectContext | None = None
    user_preferences: Preferences | None = None
