"""Tests for structured logging helpers."""

from __future__ import annotations

import logging

import structlog
from structlog.testing import capture_logs

from dungeonmind.core.logging import (
    add_app_context,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


class TestContext:
    """Tests for context binding."""

    def test_bind_and_clear(self) -> None:
        bind_context(turn=3, side="enemy")
        assert structlog.contextvars.get_contextvars() == {"turn": 3, "side": "enemy"}

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_app_context_processor(self) -> None:
        event = add_app_context(None, "info", {"event": "hello"})
        assert event["app"] == "dungeonmind"


class TestConfigureLogging:
    """Tests for logging configuration."""

    def test_level_applied(self) -> None:
        configure_logging(level="WARNING")

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_logger_emits_with_kwargs(self) -> None:
        configure_logging(level="DEBUG")
        logger = get_logger("dungeonmind.test")

        with capture_logs() as captured:
            logger.info("Batch applied", side="enemy", applied=2)

        assert captured == [{"event": "Batch applied", "side": "enemy", "applied": 2, "log_level": "info"}]
