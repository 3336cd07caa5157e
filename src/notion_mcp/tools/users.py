"""User tools: ``list_users``, ``get_user``."""

from __future__ import annotations

from typing import Any

from notion_mcp.utils import extract_notion_id

from .common import MAX_PAGE_SIZE, ToolParams, ToolResult, clamp_page_size, require_str, tool_handler


def user_info(user: dict[str, Any]) -> dict[str, Any]:
    person = user.get("person") or {}
    return {
        "id": user.get("id"),
        "type": user.get("type"),
        "name": user.get("name"),
        "avatar_url": user.get("avatar_url"),
        "email": person.get("email"),
    }


@tool_handler("Failed to list users")
async def list_users(client: Any, params: ToolParams) -> ToolResult:
    page_size = clamp_page_size(params.get("page_size"), MAX_PAGE_SIZE)
    response = await client.users.list(page_size=page_size)
    users = [user_info(user) for user in response.get("results", [])]
    return {
        "success": True,
        "users": users,
        "total_count": len(users),
        "has_more": bool(response.get("has_more")),
    }


@tool_handler("Failed to get user")
async def get_user(client: Any, params: ToolParams) -> ToolResult:
    user_id = extract_notion_id(require_str(params, "user_id"))
    user = await client.users.retrieve(user_id)
    return {"success": True, "user": user_info(user)}
