"""Structured JSON logger for resolution outcomes and failures."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from vagueparse.constants import ERROR_TRUNCATION_CHARS

__all__ = ["ResolutionLogger"]


class ResolutionLogger:
    """JSON-lines logger with request_id correlation.

    One line per resolved request, kept for offline review of how
    vague requests were interpreted.
    """

    def __init__(self, log_dir: Path, level: str = "INFO") -> None:
        self._log_dir = log_dir
        self._log_dir.mkdir(parents=True, exist_ok=True)
        self._logger = logging.getLogger("vagueparse.resolutions")
        self._logger.setLevel(getattr(logging, level.upper()))

        if not self._logger.handlers:
            handler = logging.FileHandler(log_dir / "resolutions.log")
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)

    def log_resolution(
        self,
        request_id: str,
        user_id: str,
        text: str,
        interpretation: str,
        action: str,
        confidence: float,
        ai_status: str,
        duration_ms: float,
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "resolution",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "user_id": user_id,
                "text": text[:ERROR_TRUNCATION_CHARS],
                "interpretation": interpretation,
                "action": action,
                "confidence": confidence,
                "ai_status": ai_status,
                "duration_ms": duration_ms,
            })
        )

    def log_error(
        self,
        request_id: str,
        component: str,
        error: str,
    ) -> None:
        self._logger.error(
            json.dumps({
                "type": "error",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "component": component,
                "error": error[:ERROR_TRUNCATION_CHARS],
            })
        )
