from __future__ import annotations

import logging
import sys
from typing import Any

import orjson
import structlog


def _json_serializer(obj: Any, default: Any) -> str:
    return orjson.dumps(obj, default=default).decode("utf-8")


def configure_logging(*, level: str = "INFO", json: bool = False) -> None:
    """
    Configure structured logging for the whole process.

    Call once at startup, before any system runs. Library modules only obtain
    loggers through ``structlog.get_logger()`` and never configure anything
    themselves; without this call structlog falls back to its own defaults
    and prints debug output to stdout.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    renderer: Any
    if json:
        renderer = structlog.processors.JSONRenderer(serializer=_json_serializer)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    processors: list[Any] = [
        # Merge context variables (session number, agent seed, etc.)
        structlog.contextvars.merge_contextvars,

        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),

        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,

        renderer,
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        # Loggers re-resolve the configuration so a later configure_logging call takes effect.
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def bind_context(**values: Any) -> None:
    """Bind contextual information to all future log entries."""
    structlog.contextvars.bind_contextvars(**values)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
