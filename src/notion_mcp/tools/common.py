"""Shared helpers for tool handlers.

Every tool handler is an ``async`` function ``(client, params) -> dict``.
Results always carry ``success``; failures carry an ``error`` string
instead of raising, so that the caller receives a usable payload.
"""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from notion_mcp.errors import NotionMcpError, NotionMcpToolError
from notion_mcp.observability import get_logger

log = get_logger("notion_mcp.tools")

ToolParams = Mapping[str, Any]
ToolResult = dict[str, Any]
ToolHandler = Callable[[Any, ToolParams], Awaitable[ToolResult]]

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100
UNTITLED = "Untitled"


def failure(error: str) -> ToolResult:
    return {"success": False, "error": error}


def tool_handler(default_error: str) -> Callable[[ToolHandler], ToolHandler]:
    """Turn :class:`NotionMcpError` raised by a handler into a failure result.

    *default_error* is used when the error carries no message.
    """

    def decorator(func: ToolHandler) -> ToolHandler:
        @functools.wraps(func)
        async def wrapper(client: Any, params: ToolParams) -> ToolResult:
            try:
                return await func(client, params)
            except NotionMcpError as exc:
                log.info(
                    "tool call failed",
                    extra={
                        "extra_fields": {
                            "tool": func.__name__,
                            "code": str(getattr(exc.code, "value", exc.code)),
                            "error": exc.message,
                        }
                    },
                )
                return failure(exc.message or default_error)

        return wrapper

    return decorator


def require_str(params: ToolParams, name: str) -> str:
    """Return the non-empty string argument *name* or raise."""
    value = params.get(name)
    if not isinstance(value, str) or not value.strip():
        raise NotionMcpToolError(
            f"Missing required argument: {name}",
            context={"argument": name},
        )
    return value


def optional_mapping(params: ToolParams, name: str) -> dict[str, Any] | None:
    value = params.get(name)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise NotionMcpToolError(
            f"Argument {name} must be an object",
            context={"argument": name},
        )
    return dict(value)


def clamp_page_size(value: Any, default: int) -> int:
    """Clamp a requested page size to Notion's accepted range [1, 100]."""
    if value is None:
        return default
    try:
        size = int(value)
    except (TypeError, ValueError) as exc:
        raise NotionMcpToolError(
            f"page_size must be a number, got {value!r}",
            context={"argument": "page_size"},
            cause=exc,
        ) from exc
    return min(max(size, MIN_PAGE_SIZE), MAX_PAGE_SIZE)


def rich_text_plain(items: Any) -> str:
    """Concatenate the plain text of a rich_text array from an API response."""
    if not isinstance(items, list):
        return ""
    parts: list[str] = []
    for item in items:
        if not isinstance(item, Mapping):
            continue
        text = item.get("plain_text")
        if not text:
            text = (item.get("text") or {}).get("content", "")
        parts.append(text or "")
    return "".join(parts)


def page_title(page: Mapping[str, Any]) -> str:
    """Return the text of a page's ``title`` property, or ``"Untitled"``."""
    properties = page.get("properties") or {}
    for prop in properties.values():
        if isinstance(prop, Mapping) and prop.get("type") == "title":
            return rich_text_plain(prop.get("title"))
    return UNTITLED


def database_title(database: Mapping[str, Any]) -> str:
    """Return a database's title text, or ``"Untitled"``."""
    return rich_text_plain(database.get("title")) or UNTITLED


def title_rich_text(title: str) -> list[dict[str, Any]]:
    """Build the rich_text array for a plain title string."""
    return [{"type": "text", "text": {"content": title}}]
