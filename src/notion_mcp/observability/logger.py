"""Structured JSON logging for notion_mcp.

Every record is a single-line JSON object written to *stderr*.  The MCP
stdio transport owns *stdout*, so nothing in this package may log there.

Typical output::

    {"ts": "2026-01-01T12:00:00.123456+00:00", "level": "INFO",
     "logger": "notion_mcp.tools", "message": "tool call complete",
     "tool": "get_page", "success": true}

Usage::

    from notion_mcp.observability import get_logger

    log = get_logger("notion_mcp.tools")
    log.info("tool call complete", extra={"extra_fields": {"tool": "search"}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "notion_mcp"


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys: ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Fields passed as ``extra={"extra_fields": {...}}`` are
    merged into the top-level object; ``exception`` and ``stack_info`` are
    added when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields is not None:
            log_entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        return resolved
    return level


_handler_installed = False


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return a logger under the ``notion_mcp`` hierarchy.

    The first call installs a :class:`StructuredFormatter` handler on the
    root ``notion_mcp`` logger writing to *stderr*; child loggers
    (``notion_mcp.transport`` etc.) propagate to it.  Repeated calls never
    add duplicate handlers.
    """
    global _handler_installed
    if not _handler_installed:
        root = logging.getLogger(ROOT_LOGGER)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(StructuredFormatter())
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        # Keep records off the host application's root handlers.
        root.propagate = False
        _handler_installed = True
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.INFO,
    *,
    stream: Any | None = None,
) -> logging.Logger:
    """Set the level (and optionally the output stream) of the root logger.

    Parameters
    ----------
    level:
        An ``int`` such as ``logging.DEBUG`` or a case-insensitive name
        (``"debug"``).
    stream:
        Replacement output stream for the structured handler.  Defaults to
        leaving the current stream (*stderr*) in place.

    Returns
    -------
    logging.Logger
        The root ``notion_mcp`` logger.
    """
    root = get_logger(ROOT_LOGGER)
    root.setLevel(_resolve_level(level))
    if stream is not None:
        for handler in root.handlers:
            if isinstance(handler, logging.StreamHandler) and isinstance(
                handler.formatter, StructuredFormatter
            ):
                handler.setStream(stream)
    return root
