"""Tests for two-step process logging setup."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from vagueparse.logging_config import (
    _QUIET_LOGGERS,
    apply_log_level,
    cleanup_third_party_handlers,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _reset_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset the run-once flags and restore the root level."""
    import vagueparse.logging_config as mod

    monkeypatch.setattr(mod, "_configured", False)
    monkeypatch.setattr(mod, "_handlers_cleaned", False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    root = logging.getLogger()
    original = root.level
    yield
    root.setLevel(original)


class TestResolveLevel:
    def test_explicit_level_wins_over_env(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert resolve_level("debug") == logging.DEBUG

    def test_env_used_without_argument(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", " warning ")
        assert resolve_level() == logging.WARNING

    def test_default_and_unknown_names(self) -> None:
        assert resolve_level() == logging.INFO
        assert resolve_level("chatty") == logging.INFO


class TestSetupLogging:
    def test_log_level_env_reaches_root(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        setup_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_runs_once(self) -> None:
        with patch(
            "vagueparse.logging_config.logging.basicConfig"
        ) as mock_bc:
            setup_logging("ERROR")
            setup_logging("DEBUG")
        mock_bc.assert_called_once()
        assert logging.getLogger().level == logging.ERROR

    def test_litellm_log_default_preserves_existing(self) -> None:
        os.environ["LITELLM_LOG"] = "ERROR"
        try:
            setup_logging()
            assert os.environ["LITELLM_LOG"] == "ERROR"
        finally:
            os.environ.pop("LITELLM_LOG", None)

    def test_quiet_loggers_at_warning(self) -> None:
        setup_logging("DEBUG")
        for name in _QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestApplyLogLevel:
    def test_changes_root_after_setup(self) -> None:
        setup_logging("INFO")
        apply_log_level("DEBUG")
        assert logging.getLogger().level == logging.DEBUG


class TestCleanupThirdPartyHandlers:
    def test_clears_litellm_handlers_once(self) -> None:
        lg = logging.getLogger("LiteLLM Router")
        lg.propagate = False
        lg.addHandler(logging.StreamHandler())

        cleanup_third_party_handlers()
        assert lg.handlers == []
        assert lg.propagate is True

        lg.addHandler(logging.StreamHandler())
        cleanup_third_party_handlers()
        assert len(lg.handlers) == 1
        lg.handlers.clear()
