"""The ``search`` tool."""

from __future__ import annotations

from typing import Any

from notion_mcp.errors import NotionMcpToolError

from .common import (
    ToolParams,
    ToolResult,
    clamp_page_size,
    database_title,
    page_title,
    tool_handler,
)

DEFAULT_SEARCH_PAGE_SIZE = 10
_FILTER_TYPES = frozenset({"page", "database"})
_SORT_DIRECTIONS = frozenset({"ascending", "descending"})


def summarize_result(item: dict[str, Any]) -> dict[str, Any]:
    """Reduce a search hit to the fields a caller needs to pick a target."""
    is_page = item.get("object") == "page"
    return {
        "id": item.get("id"),
        "type": item.get("object"),
        "title": page_title(item) if is_page else database_title(item),
        "url": item.get("url"),
        "last_edited_time": item.get("last_edited_time"),
    }


@tool_handler("Failed to search")
async def search(client: Any, params: ToolParams) -> ToolResult:
    """Search pages and databases shared with the integration."""
    query = params.get("query") or ""
    filter_type = params.get("filter_type")
    if filter_type is not None and filter_type not in _FILTER_TYPES:
        raise NotionMcpToolError(
            f"filter_type must be 'page' or 'database', got {filter_type!r}",
            context={"argument": "filter_type"},
        )
    sort_direction = params.get("sort_direction") or "descending"
    if sort_direction not in _SORT_DIRECTIONS:
        raise NotionMcpToolError(
            f"sort_direction must be 'ascending' or 'descending', got {sort_direction!r}",
            context={"argument": "sort_direction"},
        )
    page_size = clamp_page_size(params.get("page_size"), DEFAULT_SEARCH_PAGE_SIZE)

    response = await client.search.search(
        query,
        filter_type=filter_type,
        sort_direction=sort_direction,
        page_size=page_size,
    )
    results = [summarize_result(item) for item in response.get("results", [])]

    result: ToolResult = {
        "success": True,
        "results": results,
        "total_count": len(results),
        "has_more": bool(response.get("has_more")),
    }
    if not results:
        result["suggestion"] = (
            f'No results found for "{query}". Try alternative search terms '
            "or check that the content is shared with the integration."
        )
    return result
