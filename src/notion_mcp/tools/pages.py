"""Page tools: ``get_page``, ``create_page``, ``update_page``, ``get_page_content``."""

from __future__ import annotations

from typing import Any

from notion_mcp.converter import (
    MarkdownToNotionConverter,
    blocks_to_markdown,
    blocks_to_plain_text,
)
from notion_mcp.errors import NotionMcpToolError
from notion_mcp.notion_api.blocks import MAX_CHILDREN_PER_REQUEST
from notion_mcp.utils import extract_notion_id

from .common import (
    ToolParams,
    ToolResult,
    optional_mapping,
    page_title,
    require_str,
    title_rich_text,
    tool_handler,
)

PARENT_TYPES = ("database_id", "page_id")
CONTENT_FORMATS = ("markdown", "blocks", "plain_text")
# Property names Notion databases commonly use for their title column.
_DATABASE_TITLE_KEYS = ("Name", "Title", "title")


def _parent_id(parent: dict[str, Any]) -> str | None:
    return parent.get("database_id") or parent.get("page_id")


@tool_handler("Failed to get page")
async def get_page(client: Any, params: ToolParams) -> ToolResult:
    page_id = extract_notion_id(require_str(params, "page_id"))
    page = await client.pages.retrieve(page_id)
    parent = page.get("parent") or {}
    return {
        "success": True,
        "page": {
            "id": page.get("id"),
            "title": page_title(page),
            "url": page.get("url"),
            "created_time": page.get("created_time"),
            "last_edited_time": page.get("last_edited_time"),
            "archived": bool(page.get("archived")),
            "properties": page.get("properties") or {},
            "parent": {"type": parent.get("type"), "id": _parent_id(parent)},
        },
    }


@tool_handler("Failed to create page")
async def create_page(client: Any, params: ToolParams) -> ToolResult:
    """Create a page under a database or page, with optional Markdown content.

    Database parents get the title in a ``Name`` property unless the caller
    already supplied ``Name``, ``Title`` or ``title``.  Page parents always
    get the ``title`` property.  Content beyond the first 100 blocks is
    appended after the page is created.
    """
    parent_id = extract_notion_id(require_str(params, "parent_id"))
    parent_type = params.get("parent_type")
    if parent_type not in PARENT_TYPES:
        raise NotionMcpToolError(
            f"parent_type must be 'database_id' or 'page_id', got {parent_type!r}",
            context={"argument": "parent_type"},
        )
    title = require_str(params, "title")

    properties = optional_mapping(params, "properties") or {}
    title_value = {"title": title_rich_text(title)}
    if parent_type == "database_id":
        if not any(properties.get(key) for key in _DATABASE_TITLE_KEYS):
            properties["Name"] = title_value
    else:
        properties["title"] = title_value

    children: list[dict[str, Any]] = []
    content = params.get("content")
    if content:
        children = MarkdownToNotionConverter().convert(content)

    first, rest = children[:MAX_CHILDREN_PER_REQUEST], children[MAX_CHILDREN_PER_REQUEST:]
    page = await client.pages.create(
        {parent_type: parent_id}, properties, children=first or None
    )
    if rest:
        await client.blocks.append_children(page["id"], rest)

    return {
        "success": True,
        "page": {
            "id": page.get("id"),
            "url": page.get("url"),
            "title": page_title(page),
        },
    }


@tool_handler("Failed to update page")
async def update_page(client: Any, params: ToolParams) -> ToolResult:
    page_id = extract_notion_id(require_str(params, "page_id"))
    properties = optional_mapping(params, "properties") or {}
    archived = params.get("archived")
    page = await client.pages.update(
        page_id,
        properties=properties,
        archived=bool(archived) if archived is not None else None,
    )
    return {
        "success": True,
        "page": {
            "id": page.get("id"),
            "url": page.get("url"),
            "title": page_title(page),
            "last_edited_time": page.get("last_edited_time"),
        },
    }


@tool_handler("Failed to get page content")
async def get_page_content(client: Any, params: ToolParams) -> ToolResult:
    """Read every top-level block of a page as Markdown, plain text or raw blocks.

    Unrecognised formats fall back to Markdown.
    """
    page_id = extract_notion_id(require_str(params, "page_id"))
    fmt = params.get("format") or "markdown"
    blocks = await client.blocks.get_children(page_id)

    content: str | list[dict[str, Any]]
    if fmt == "blocks":
        content = blocks
    elif fmt == "plain_text":
        content = blocks_to_plain_text(blocks)
    else:
        content = blocks_to_markdown(blocks)

    return {
        "success": True,
        "content": content,
        "format": fmt,
        "block_count": len(blocks),
    }
