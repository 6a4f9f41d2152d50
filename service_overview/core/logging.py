"""Structured logging for the overview poller, built on structlog.

Console rendering is the default; JSON lines can be switched on through
``SWO_LOG_JSON`` when the overview runs behind a log collector.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    *,
    json_output: bool = False,
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Set up structlog with console or JSON rendering.

    Log lines go to stderr by default so that ``main.py render`` can write the
    HTML overview to stdout untouched.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    out = stream or sys.stderr
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=out.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=out),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a bound logger tagged with its component name."""
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(component=name)
    return logger
