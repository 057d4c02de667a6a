"""Structured logging configuration (structlog)."""

from __future__ import annotations

import logging
from pathlib import Path

import structlog


def configure_structlog(verbose: bool = False) -> None:
    """Configure structlog for human-readable console output.

    Call once at process startup. With *verbose* every subprocess the
    bootstrap runs is logged at debug level.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_json_file_logger(log_path: Path, **context) -> structlog.BoundLogger:
    """Return a structlog logger that appends JSON lines to *log_path*.

    The logger is independent of the console configuration and every line
    carries *context* (e.g. the workspace and platform ref of the run).
    """
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(str(log_path), mode="a", encoding="utf-8")
    file_handler.setLevel(logging.INFO)

    stdlib_logger = logging.getLogger(f"ai_bootstrap.steps.{log_path}")
    for handler in stdlib_logger.handlers:
        handler.close()
    stdlib_logger.handlers = [file_handler]
    stdlib_logger.setLevel(logging.INFO)
    stdlib_logger.propagate = False

    logger = structlog.wrap_logger(
        stdlib_logger,
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
    )
    return logger.bind(**context)
