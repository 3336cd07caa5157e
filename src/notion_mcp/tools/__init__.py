"""notion_mcp.tools -- MCP tool handlers over the Notion API.

Each handler takes an :class:`~notion_mcp.async_client.AsyncNotionClient`
and a mapping of tool arguments, and returns a JSON-serialisable result
dict.  :func:`call_tool` dispatches by tool name and serialises the
result for the MCP transport.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any

from notion_mcp.observability import get_logger

from .blocks import append_blocks, delete_block, update_block
from .common import ToolHandler, ToolParams
from .databases import create_database, get_database, query_database
from .pages import create_page, get_page, get_page_content, update_page
from .search import search
from .users import get_user, list_users

log = get_logger("notion_mcp.tools")

TOOL_HANDLERS: dict[str, ToolHandler] = {
    "search": search,
    "get_page": get_page,
    "create_page": create_page,
    "update_page": update_page,
    "get_page_content": get_page_content,
    "append_blocks": append_blocks,
    "update_block": update_block,
    "delete_block": delete_block,
    "get_database": get_database,
    "query_database": query_database,
    "create_database": create_database,
    "list_users": list_users,
    "get_user": get_user,
}


@dataclass(frozen=True)
class ToolCallResult:
    """Serialised outcome of one tool call."""

    text: str
    is_error: bool = False


def _dumps(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


async def call_tool(
    client: Any,
    name: str,
    arguments: ToolParams | None = None,
) -> ToolCallResult:
    """Run the tool *name* with *arguments* and serialise its result.

    Handler failures reported as ``{"success": false, ...}`` are ordinary
    results.  ``is_error`` is set only for unknown tools and unexpected
    exceptions, which are logged with their traceback.
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        log.warning("unknown tool", extra={"extra_fields": {"tool": name}})
        return ToolCallResult(_dumps({"error": f"Unknown tool: {name}"}), is_error=True)

    start = time.monotonic()
    try:
        result = await handler(client, arguments or {})
    except Exception as exc:
        log.exception("tool call raised", extra={"extra_fields": {"tool": name}})
        return ToolCallResult(_dumps({"error": str(exc)}), is_error=True)

    log.info(
        "tool call",
        extra={
            "extra_fields": {
                "tool": name,
                "success": result.get("success"),
                "duration_ms": round((time.monotonic() - start) * 1000, 1),
            }
        },
    )
    return ToolCallResult(_dumps(result))


__all__ = [
    "TOOL_HANDLERS",
    "ToolCallResult",
    "call_tool",
]
