"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from vagueparse import __version__
from vagueparse.api.dependencies import get_resolver
from vagueparse.resolution.engine import VagueIntentResolver

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health(
    resolver: VagueIntentResolver = Depends(get_resolver),
) -> dict[str, object]:
    """Basic health check for load balancers."""
    return {
        "status": "healthy",
        "version": __version__,
        "ai_enabled": resolver.ai_enabled,
        "timestamp": datetime.now(UTC).isoformat(),
    }
