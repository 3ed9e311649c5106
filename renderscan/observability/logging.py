"""Structured logging configuration using structlog.

Log lines go to stderr so they never mix with whatever the host writes to
stdout. ``json`` output suits log collectors; ``console`` is for reading
along while inspecting a tree interactively.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOG_FORMATS = ("json", "console")


def _renderer(fmt: str) -> structlog.typing.Processor:
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer(sort_keys=True)


def setup_logging(level: str = "info", fmt: str = "json") -> None:
    """Configure structlog for *fmt* output to stderr at *level*."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            _renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def bind_session(session_id: str) -> None:
    """Attach *session_id* to every log line emitted until the next bind."""
    structlog.contextvars.unbind_contextvars("session_id")
    structlog.contextvars.bind_contextvars(session_id=session_id)


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
