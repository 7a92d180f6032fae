"""Process-wide logging for the API server and the CLI.

litellm wires up its own loggers the first time it is imported, so
setup happens in two steps:

1. ``setup_logging()`` runs before anything imports litellm. It installs
   the root handler, picks the level (argument, else ``LOG_LEVEL``, else
   INFO), defaults ``LITELLM_LOG`` and quiets chatty libraries.
2. ``cleanup_third_party_handlers()`` runs once imports are done and
   drops the handlers litellm attached, so its records reach the root
   handler exactly once.

``Settings`` cannot be loaded before step 1 (it would drag litellm in
through the resolver), so ``apply_log_level()`` re-applies
``settings.log_level`` once configuration is available. That covers a
level set only in ``.env``.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"
DEFAULT_LOG_LEVEL = "INFO"

# Noisy at INFO; per-request detail comes from vagueparse's own loggers.
_QUIET_LOGGERS = (
    "LiteLLM",
    "LiteLLM Router",
    "openai._base_client",
    "httpx",
    "uvicorn.access",
)

# Loggers litellm attaches a StreamHandler to at import time.
_LITELLM_LOGGERS = ("LiteLLM", "LiteLLM Router")

_configured = False
_handlers_cleaned = False


def resolve_level(level: str | None = None) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    name = (level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL)
    return logging.getLevelNamesMapping().get(
        name.strip().upper(), logging.INFO
    )


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once per process.

    ``level`` wins over ``LOG_LEVEL``. Later calls are no-ops; use
    apply_log_level() to change the level afterwards.
    """
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    # litellm._logging reads this at import time
    os.environ.setdefault("LITELLM_LOG", "WARNING")

    root_level = resolve_level(level)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    # basicConfig skips everything when the root already has handlers
    logging.getLogger().setLevel(root_level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def apply_log_level(level: str) -> None:
    """Set the root level from loaded configuration."""
    logging.getLogger().setLevel(resolve_level(level))


def cleanup_third_party_handlers() -> None:
    """Drop litellm's own handlers and let its records propagate to root.

    Runs once; later calls are no-ops.
    """
    global _handlers_cleaned  # noqa: PLW0603
    if _handlers_cleaned:
        return
    _handlers_cleaned = True

    for name in _LITELLM_LOGGERS:
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True
