"""Database tools: ``get_database``, ``query_database``, ``create_database``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from notion_mcp.errors import NotionMcpToolError
from notion_mcp.utils import extract_notion_id

from .common import (
    MAX_PAGE_SIZE,
    ToolParams,
    ToolResult,
    clamp_page_size,
    database_title,
    optional_mapping,
    page_title,
    require_str,
    rich_text_plain,
    title_rich_text,
    tool_handler,
)


def simplify_schema(properties: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    """Reduce a database property schema to ``{name: {id, name, type}}``."""
    simplified: dict[str, dict[str, Any]] = {}
    for name, prop in properties.items():
        if not isinstance(prop, Mapping):
            continue
        simplified[name] = {
            "id": prop.get("id"),
            "name": prop.get("name", name),
            "type": prop.get("type"),
        }
    return simplified


def has_title_property(properties: Mapping[str, Any]) -> bool:
    """Whether *properties* declares a title column.

    Both ``{"type": "title", ...}`` and the request form ``{"title": {}}``
    count.
    """
    return any(
        isinstance(prop, Mapping) and (prop.get("type") == "title" or "title" in prop)
        for prop in properties.values()
    )


@tool_handler("Failed to get database")
async def get_database(client: Any, params: ToolParams) -> ToolResult:
    database_id = extract_notion_id(require_str(params, "database_id"))
    db = await client.databases.retrieve(database_id)
    return {
        "success": True,
        "database": {
            "id": db.get("id"),
            "title": database_title(db),
            "description": rich_text_plain(db.get("description")),
            "url": db.get("url"),
            "created_time": db.get("created_time"),
            "last_edited_time": db.get("last_edited_time"),
            "properties": simplify_schema(db.get("properties") or {}),
            "is_inline": bool(db.get("is_inline")),
            "archived": bool(db.get("archived")),
        },
    }


@tool_handler("Failed to query database")
async def query_database(client: Any, params: ToolParams) -> ToolResult:
    """Query one page of database entries.

    Pass the returned ``next_cursor`` back as ``start_cursor`` to continue.
    """
    database_id = extract_notion_id(require_str(params, "database_id"))
    sorts = params.get("sorts")
    if sorts is not None and not isinstance(sorts, list):
        raise NotionMcpToolError(
            "Argument sorts must be an array",
            context={"argument": "sorts"},
        )

    response = await client.databases.query(
        database_id,
        filter=optional_mapping(params, "filter"),
        sorts=sorts or None,
        page_size=clamp_page_size(params.get("page_size"), MAX_PAGE_SIZE),
        start_cursor=params.get("start_cursor"),
    )
    pages = [
        {
            "id": page.get("id"),
            "title": page_title(page),
            "url": page.get("url"),
            "created_time": page.get("created_time"),
            "last_edited_time": page.get("last_edited_time"),
            "properties": page.get("properties") or {},
        }
        for page in response.get("results", [])
    ]
    return {
        "success": True,
        "pages": pages,
        "total_count": len(pages),
        "has_more": bool(response.get("has_more")),
        "next_cursor": response.get("next_cursor"),
    }


@tool_handler("Failed to create database")
async def create_database(client: Any, params: ToolParams) -> ToolResult:
    """Create a database under a page.

    A ``Name`` title column is added when the schema has none, since Notion
    requires exactly one.
    """
    parent_page_id = extract_notion_id(require_str(params, "parent_page_id"))
    title = require_str(params, "title")
    properties = optional_mapping(params, "properties") or {}
    if not has_title_property(properties):
        properties["Name"] = {"title": {}}

    db = await client.databases.create(parent_page_id, title_rich_text(title), properties)
    return {
        "success": True,
        "database": {
            "id": db.get("id"),
            "title": database_title(db),
            "url": db.get("url"),
        },
    }
