"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from currency_format.config import Settings


def setup_logging(log_level: str | None = None, *, json_output: bool = True):
    """Configure structlog for the formatting engine.

    The engine only emits debug events (absorbed deletions, rejected edits,
    skipped caret re-applications, locale registration). *log_level*
    defaults to ``Settings.log_level``; ``json_output=False`` switches to the
    human-readable console renderer.
    """
    level = log_level or Settings().log_level
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given component *name*."""
    return structlog.get_logger(name)
