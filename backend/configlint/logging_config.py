"""Structured logging setup shared by the HTTP service and the CLI."""

import logging
import sys

import structlog


def _stderr_logger_factory(*args):
    # Resolve sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(sys.stderr)


def configure_logging(debug: bool = False, level: str = "info", to_stderr: bool = False) -> None:
    """Configure structlog processors and the minimum log level.

    Debug mode renders human-readable console lines, otherwise one JSON
    object per event. The CLI logs to stderr so stdout only carries results.
    """
    min_level = logging.getLevelName(level.upper())
    if not isinstance(min_level, int):
        min_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=_stderr_logger_factory if to_stderr else structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
