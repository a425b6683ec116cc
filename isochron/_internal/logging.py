"""structlog configuration for isochron.

Library modules log through the standard ``logging`` module under the
``isochron`` logger and never configure output themselves. Applications
that want to see those records call :func:`configure_logging`, which routes
them through structlog.

Two output modes:
- Human (default): colored console output to stderr
- JSON (log_json=True): structured JSON lines to stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

PROJECT_LOGGER = "isochron"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Handler:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output for isochron. When False, only
            WARNING and above.
        log_json: Use JSON renderer instead of console renderer.

    Returns:
        The stderr handler attached to the isochron logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(PROJECT_LOGGER)
    for existing in list(logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


__all__ = ["configure_logging", "PROJECT_LOGGER"]
