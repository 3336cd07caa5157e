"""User API wrappers for the Notion API."""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport


class AsyncUserAPI:
    """Asynchronous wrapper for the Notion Users API."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def list(self, page_size: int = 100) -> dict[str, Any]:
        """List one page of workspace users (raw list response)."""
        return await self._transport.request(
            "GET", "/users", params={"page_size": page_size}
        )

    async def retrieve(self, user_id: str) -> dict[str, Any]:
        """Retrieve a single user."""
        return await self._transport.request("GET", f"/users/{user_id}")
