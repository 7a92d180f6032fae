"""FastAPI application with lifespan startup."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

# Step 1: root logging from LOG_LEVEL, before anything imports litellm
from vagueparse.logging_config import setup_logging

setup_logging()

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from vagueparse import __version__  # noqa: E402
from vagueparse.api.routes import health, parse  # noqa: E402
from vagueparse.config import Settings  # noqa: E402
from vagueparse.logger import ResolutionLogger  # noqa: E402
from vagueparse.logging_config import (  # noqa: E402
    apply_log_level,
    cleanup_third_party_handlers,
)
from vagueparse.resolution.engine import VagueIntentResolver  # noqa: E402

# Step 2: litellm is imported now; drop its duplicate handlers
cleanup_third_party_handlers()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = _settings
    apply_log_level(settings.log_level)

    # One stateless resolver serves every request
    app.state.settings = settings
    app.state.resolver = VagueIntentResolver(settings)
    app.state.resolution_logger = ResolutionLogger(
        log_dir=settings.log_dir, level=settings.log_level
    )

    yield


app = FastAPI(
    title="vagueparse",
    description=(
        "Turns vague programming requests into ranked, "
        "explainable interpretations"
    ),
    version=__version__,
    openapi_url="/api/openapi.json",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    lifespan=lifespan,
)

_settings = Settings()
_cors_origins = [
    o.strip()
    for o in _settings.cors_origins.split(",")
    if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-User-Id"],
    allow_credentials=False,
)

app.include_router(health.router)
app.include_router(parse.router)
