"""Database API wrappers for the Notion API."""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport


class AsyncDatabaseAPI:
    """Asynchronous wrapper for the Notion Databases API.

    Property schemas, filters and sorts are passed through unchanged.

    Parameters
    ----------
    transport:
        A configured :class:`AsyncNotionTransport` instance.
    """

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def retrieve(self, database_id: str) -> dict[str, Any]:
        """Retrieve a database object, including its property schema."""
        return await self._transport.request("GET", f"/databases/{database_id}")

    async def query(
        self,
        database_id: str,
        filter: dict[str, Any] | None = None,
        sorts: list[dict[str, Any]] | None = None,
        page_size: int = 100,
        start_cursor: str | None = None,
    ) -> dict[str, Any]:
        """Query one page of database entries.

        Returns the raw list response (``results``, ``has_more``,
        ``next_cursor``).
        """
        body: dict[str, Any] = {"page_size": page_size}
        if filter:
            body["filter"] = filter
        if sorts:
            body["sorts"] = sorts
        if start_cursor:
            body["start_cursor"] = start_cursor
        return await self._transport.request(
            "POST", f"/databases/{database_id}/query", json=body
        )

    async def create(
        self,
        parent_page_id: str,
        title: list[dict[str, Any]],
        properties: dict[str, Any],
    ) -> dict[str, Any]:
        """Create a database as a child of a page."""
        body = {
            "parent": {"type": "page_id", "page_id": parent_page_id},
            "title": title,
            "properties": properties,
        }
        return await self._transport.request("POST", "/databases", json=body)
