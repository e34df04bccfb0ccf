"""Structured logging configuration for testexport.

The CLI configures logging once per invocation: WARNING level by default,
rendered to stderr so stdout stays reserved for dry-run listings and the
final summary. Library modules only call ``get_logger``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog


def configure_logging(
    log_level: str = "WARNING",
    json_format: bool = False,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structured logging with structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output JSON format; otherwise, console format.
        stream: Output stream (defaults to sys.stderr, keeping stdout for results).
    """
    if stream is None:
        stream = sys.stderr

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,  # Reconfigured per CLI invocation and in tests
    )


def get_logger(name: str) -> Any:
    """
    Get a logger instance carrying ``name`` under the ``logger_name`` key.

    The returned proxy resolves the configuration on every call, so
    module-level loggers honour a later ``configure_logging``. Binding
    (``.bind()``) would pin the configuration active at import time.

    Args:
        name: Logger name (typically module name).

    Returns:
        Lazy structlog logger proxy.
    """
    # "logger" is wrap_logger's first parameter and cannot be an initial value
    return structlog.get_logger(logger_name=name)
