"""Block tools: ``append_blocks``, ``update_block``, ``delete_block``."""

from __future__ import annotations

from typing import Any

from notion_mcp.converter import MarkdownToNotionConverter, markdown_to_blocks
from notion_mcp.models import BlockType
from notion_mcp.utils import extract_notion_id

from .common import ToolParams, ToolResult, failure, require_str, tool_handler

# Block types whose payload can be replaced wholesale by a converted block
# of the same type.
_REPLACEABLE_TYPES = frozenset(
    {
        BlockType.PARAGRAPH,
        BlockType.HEADING_1,
        BlockType.HEADING_2,
        BlockType.HEADING_3,
        BlockType.BULLETED_LIST_ITEM,
        BlockType.NUMBERED_LIST_ITEM,
        BlockType.TO_DO,
        BlockType.QUOTE,
        BlockType.CODE,
    }
)


def build_update_payload(block_type: str, content: str) -> dict[str, Any] | None:
    """Build the PATCH body that rewrites a block of *block_type* to *content*.

    When the first block converted from *content* has the same type as the
    existing block, its payload is used as is, keeping inline formatting.
    Otherwise *content* is sent as a single unformatted run under the
    existing type.  Returns ``None`` when *content* converts to nothing.
    """
    blocks = markdown_to_blocks(content)
    if not blocks:
        return None

    new_block = blocks[0]
    if new_block.known_type in _REPLACEABLE_TYPES and new_block.known_type.value == block_type:
        return {block_type: new_block.to_dict()[block_type]}
    return {block_type: {"rich_text": [{"type": "text", "text": {"content": content}}]}}


@tool_handler("Failed to append blocks")
async def append_blocks(client: Any, params: ToolParams) -> ToolResult:
    parent_id = extract_notion_id(require_str(params, "parent_id"))
    children = MarkdownToNotionConverter().convert(params.get("content") or "")
    if not children:
        return failure("No valid content to append")

    created = await client.blocks.append_children(parent_id, children)
    return {
        "success": True,
        "blocks": [{"id": block.get("id"), "type": block.get("type")} for block in created],
        "block_count": len(created),
    }


@tool_handler("Failed to update block")
async def update_block(client: Any, params: ToolParams) -> ToolResult:
    block_id = extract_notion_id(require_str(params, "block_id"))
    content = params.get("content") or ""

    current = await client.blocks.retrieve(block_id)
    payload = build_update_payload(current.get("type", ""), content)
    if payload is None:
        return failure("Invalid content provided")

    block = await client.blocks.update(block_id, payload)
    return {
        "success": True,
        "block": {
            "id": block.get("id"),
            "type": block.get("type"),
            "last_edited_time": block.get("last_edited_time"),
        },
    }


@tool_handler("Failed to delete block")
async def delete_block(client: Any, params: ToolParams) -> ToolResult:
    block_id = extract_notion_id(require_str(params, "block_id"))
    await client.blocks.delete(block_id)
    return {"success": True, "deleted_id": block_id}
