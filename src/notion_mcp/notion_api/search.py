"""Search API wrapper for the Notion API."""

from __future__ import annotations

from typing import Any, Literal

from .transport import AsyncNotionTransport


class AsyncSearchAPI:
    """Asynchronous wrapper for the Notion ``/search`` endpoint."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def search(
        self,
        query: str,
        filter_type: Literal["page", "database"] | None = None,
        sort_direction: Literal["ascending", "descending"] = "descending",
        page_size: int = 10,
    ) -> dict[str, Any]:
        """Search pages and databases shared with the integration.

        Results are sorted by ``last_edited_time`` in *sort_direction*.
        """
        body: dict[str, Any] = {
            "query": query,
            "page_size": page_size,
            "sort": {"direction": sort_direction, "timestamp": "last_edited_time"},
        }
        if filter_type:
            body["filter"] = {"value": filter_type, "property": "object"}
        return await self._transport.request("POST", "/search", json=body)
