"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from isochron import configure_logging
from isochron._internal.logging import PROJECT_LOGGER


@pytest.fixture
def project_logger() -> Iterator[logging.Logger]:
    """Yield the isochron logger and restore its handlers and level."""
    logger = logging.getLogger(PROJECT_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_null_handler_installed(self) -> None:
        """Test importing the package leaves a NullHandler on its logger."""
        handlers = logging.getLogger(PROJECT_LOGGER).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_returns_stream_handler(self, project_logger: logging.Logger) -> None:
        """Test a stderr handler with a structlog formatter is attached."""
        handler = configure_logging()
        assert isinstance(handler, logging.StreamHandler)
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        assert handler in project_logger.handlers
        assert project_logger.level == logging.WARNING

    def test_verbose(self, project_logger: logging.Logger) -> None:
        """Test verbose mode enables debug output."""
        configure_logging(verbose=True)
        assert project_logger.level == logging.DEBUG

    def test_repeated_calls_replace_handler(self, project_logger: logging.Logger) -> None:
        """Test calling twice leaves one stream handler."""
        first = configure_logging()
        second = configure_logging()
        assert first not in project_logger.handlers
        assert second in project_logger.handlers
        assert any(isinstance(h, logging.NullHandler) for h in project_logger.handlers)

    def test_json_output(self, project_logger: logging.Logger) -> None:
        """Test JSON mode renders one JSON object per record."""
        handler = configure_logging(log_json=True)
        record = logging.LogRecord(
            name="isochron.temporal.resolver",
            level=logging.WARNING,
            pathname=__file__,
            lineno=1,
            msg="resolved to %s",
            args=("2024-02-29",),
            exc_info=None,
        )
        payload = json.loads(handler.format(record))
        assert payload["event"] == "resolved to 2024-02-29"
        assert payload["level"] == "warning"
        assert payload["logger"] == "isochron.temporal.resolver"
        assert "timestamp" in payload
