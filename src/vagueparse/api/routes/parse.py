"""Vague request parsing endpoint."""

import time
import uuid

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse

from vagueparse.api.dependencies import (
    get_resolution_logger,
    get_resolver,
    get_settings,
)
from vagueparse.api.schemas import APIResponse, ParseRequest
from vagueparse.config import Settings
from vagueparse.constants import FALLBACK_INTERPRETATION
from vagueparse.logger import ResolutionLogger
from vagueparse.resilience.errors import EmptyInputError, EngineFailure
from vagueparse.resolution.engine import VagueIntentResolver

router = APIRouter(prefix="/api/ai", tags=["parse"])


def _respond(status_code: int, body: APIResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=body.model_dump()
    )


@router.post("/parse")
async def parse_vague_request(
    body: ParseRequest,
    settings: Settings = Depends(get_settings),
    resolver: VagueIntentResolver = Depends(get_resolver),
    resolution_logger: ResolutionLogger = Depends(get_resolution_logger),
    x_user_id: str | None = Header(default=None),
) -> JSONResponse:
    """Resolve a vague request into a structured interpretation.

    400 for blank or oversized text, 500 (with a generic fallback
    interpretation) when the engine itself fails.
    """
    request_id = uuid.uuid4().hex[:12]

    if len(body.text.strip()) > settings.max_request_chars:
        return _respond(
            400,
            APIResponse(
                success=False,
                error=(
                    "Text must be between 1 and "
                    f"{settings.max_request_chars} characters"
                ),
            ),
        )

    start = time.monotonic()
    try:
        result = await resolver.resolve(
            body.text, body.context, body.user_preferences
        )
    except EmptyInputError as exc:
        return _respond(400, APIResponse(success=False, error=str(exc)))
    except EngineFailure as exc:
        resolution_logger.log_error(request_id, exc.stage, str(exc))
        return _respond(
            500,
            APIResponse(
                success=False,
                error="Failed to parse request",
                data={
                    "interpretation": FALLBACK_INTERPRETATION,
                    "needsMoreInfo": True,
                },
                message=FALLBACK_INTERPRETATION,
            ),
        )
    duration_ms = (time.monotonic() - start) * 1000

    if x_user_id:
        resolution_logger.log_resolution(
            request_id=request_id,
            user_id=x_user_id,
            text=body.text,
            interpretation=result.interpretation,
            action=result.specific_action,
            confidence=result.confidence,
            ai_status=result.ai_status,
            duration_ms=round(duration_ms, 1),
        )

    return _respond(
        200,
        APIResponse(
            success=True,
            data=result.model_dump(mode="json", by_alias=True),
            message="Request parsed successfully",
        ),
    )
