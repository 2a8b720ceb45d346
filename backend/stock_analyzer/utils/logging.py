"""Structured logging setup with structlog and analysis IDs.

Supports two output modes:
- "json": Machine-readable JSON lines (for piping into other tools)
- "console": Human-readable colored output (default for the CLI)

The analysis ID is injected via contextvars into every log entry, so all
events emitted while analyzing one price history can be grouped together.
"""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

import structlog

_analysis_id: ContextVar[str] = ContextVar("analysis_id", default="")


def set_analysis_id(aid: str) -> None:
    """Set the analysis ID for the current context."""
    _analysis_id.set(aid)


def get_analysis_id() -> str:
    """Get the analysis ID for the current context."""
    return _analysis_id.get()


def new_analysis_id() -> str:
    """Short random ID for one analysis run."""
    return uuid.uuid4().hex[:12]


@contextmanager
def analysis_context(aid: str | None = None) -> Iterator[str]:
    """Tag every log entry inside the block with one analysis ID.

    The previous ID is restored on exit.
    """
    token = _analysis_id.set(aid or new_analysis_id())
    try:
        yield _analysis_id.get()
    finally:
        _analysis_id.reset(token)


def _add_analysis_id(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: structlog.types.EventDict,
) -> structlog.types.EventDict:
    aid = get_analysis_id()
    if aid:
        event_dict["analysis_id"] = aid
    return event_dict


def setup_logging(level: str = "INFO", log_format: str = "console") -> None:
    """Configure structlog for the analyzer.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Output format - "json" or "console".
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _add_analysis_id,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structlog logger."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
