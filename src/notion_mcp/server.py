"""MCP server exposing the Notion tools over stdio.

Run with ``notion-mcp`` (or ``python -m notion_mcp.server``) and
``NOTION_API_KEY`` set in the environment.
"""

from __future__ import annotations

import asyncio
import sys
from typing import Any, Literal

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from notion_mcp.async_client import AsyncNotionClient
from notion_mcp.config import NotionMcpConfig
from notion_mcp.errors import NotionMcpConfigError
from notion_mcp.observability import configure_logging, get_logger
from notion_mcp.tools import call_tool

SERVER_NAME = "notion-mcp"

log = get_logger("notion_mcp.server")


def build_server(client: AsyncNotionClient) -> FastMCP:
    """Create a :class:`FastMCP` server whose tools run against *client*."""
    mcp = FastMCP(SERVER_NAME)

    async def dispatch(name: str, arguments: dict[str, Any]) -> str:
        result = await call_tool(client, name, arguments)
        if result.is_error:
            raise ToolError(result.text)
        return result.text

    @mcp.tool()
    async def search(
        query: str,
        filter_type: Literal["page", "database"] | None = None,
        sort_direction: Literal["ascending", "descending"] = "descending",
        page_size: int = 10,
    ) -> str:
        """Search across all pages and databases in the workspace.

        Use when the user wants to find content by keyword or title.
        ``page_size`` is capped at 100.
        """
        return await dispatch(
            "search",
            {
                "query": query,
                "filter_type": filter_type,
                "sort_direction": sort_direction,
                "page_size": page_size,
            },
        )

    @mcp.tool()
    async def get_page(page_id: str) -> str:
        """Retrieve a page's properties and metadata. Accepts a page ID or URL."""
        return await dispatch("get_page", {"page_id": page_id})

    @mcp.tool()
    async def create_page(
        parent_id: str,
        parent_type: Literal["database_id", "page_id"],
        title: str,
        properties: dict[str, Any] | None = None,
        content: str | None = None,
    ) -> str:
        """Create a new page in a database or as a child of another page.

        ``content`` is Markdown and becomes the page body.  ``properties``
        applies to database parents.
        """
        return await dispatch(
            "create_page",
            {
                "parent_id": parent_id,
                "parent_type": parent_type,
                "title": title,
                "properties": properties,
                "content": content,
            },
        )

    @mcp.tool()
    async def update_page(
        page_id: str,
        properties: dict[str, Any],
        archived: bool | None = None,
    ) -> str:
        """Update a page's properties (not its content blocks), or archive it."""
        return await dispatch(
            "update_page",
            {"page_id": page_id, "properties": properties, "archived": archived},
        )

    @mcp.tool()
    async def get_page_content(
        page_id: str,
        format: Literal["markdown", "blocks", "plain_text"] = "markdown",
    ) -> str:
        """Retrieve all content blocks from a page as Markdown, plain text or raw blocks."""
        return await dispatch("get_page_content", {"page_id": page_id, "format": format})

    @mcp.tool()
    async def append_blocks(parent_id: str, content: str) -> str:
        """Add Markdown content as new blocks at the end of a page or block."""
        return await dispatch("append_blocks", {"parent_id": parent_id, "content": content})

    @mcp.tool()
    async def update_block(block_id: str, content: str) -> str:
        """Replace the text of an existing block, keeping its type."""
        return await dispatch("update_block", {"block_id": block_id, "content": content})

    @mcp.tool()
    async def delete_block(block_id: str) -> str:
        """Delete (archive) a block."""
        return await dispatch("delete_block", {"block_id": block_id})

    @mcp.tool()
    async def get_database(database_id: str) -> str:
        """Retrieve a database's schema and properties."""
        return await dispatch("get_database", {"database_id": database_id})

    @mcp.tool()
    async def query_database(
        database_id: str,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        page_size: int = 100,
        start_cursor: str | None = None,
    ) -> str:
        """Query a database with optional Notion filter and sort objects.

        Pass ``next_cursor`` from a previous result as ``start_cursor`` to
        read the next page.
        """
        return await dispatch(
            "query_database",
            {
                "database_id": database_id,
                "filter": filter,
                "sorts": sorts,
                "page_size": page_size,
                "start_cursor": start_cursor,
            },
        )

    @mcp.tool()
    async def create_database(
        parent_page_id: str,
        title: str,
        properties: dict[str, Any],
    ) -> str:
        """Create a new database as a child of a page.

        A ``Name`` title column is added if the schema has none.
        """
        return await dispatch(
            "create_database",
            {"parent_page_id": parent_page_id, "title": title, "properties": properties},
        )

    @mcp.tool()
    async def list_users(page_size: int = 100) -> str:
        """List users in the workspace."""
        return await dispatch("list_users", {"page_size": page_size})

    @mcp.tool()
    async def get_user(user_id: str) -> str:
        """Get details about a specific user."""
        return await dispatch("get_user", {"user_id": user_id})

    return mcp


async def serve(config: NotionMcpConfig) -> None:
    """Serve the tools over stdio until the client disconnects."""
    async with AsyncNotionClient(config=config) as client:
        server = build_server(client)
        log.info("server starting", extra={"extra_fields": {"server": SERVER_NAME}})
        await server.run_stdio_async()


def main() -> None:
    try:
        config = NotionMcpConfig.from_env()
    except NotionMcpConfigError as exc:
        log.error(exc.message)
        sys.exit(1)

    configure_logging(config.log_level)
    asyncio.run(serve(config))


if __name__ == "__main__":
    main()
