"""Structured logging setup using structlog.

The library only emits events (``number_as_string_rejected`` and friends);
applications and the bundled scripts decide where they go by calling
``setup_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys

import structlog

from ..config import get_settings


def setup_logging(log_level: str | None = None, json_output: bool = True):
    """Configure structlog, filtering below *log_level*.

    *log_level* defaults to ``Settings.log_level``. JSON lines go to stdout;
    with ``json_output=False`` a human-readable console renderer writes to
    stderr instead, so it does not mix with a script's own stdout output.
    """
    level = log_level or get_settings().log_level
    if json_output:
        renderer = structlog.processors.JSONRenderer()
        stream = sys.stdout
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
        stream = sys.stderr

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
