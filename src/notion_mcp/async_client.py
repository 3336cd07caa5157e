"""Asynchronous Notion API client.

:class:`AsyncNotionClient` bundles one :class:`AsyncNotionTransport` with
the endpoint wrappers that share it, so that every request made through
the client is paced by the same limiter.

Usage::

    import asyncio
    from notion_mcp import AsyncNotionClient

    async def main():
        async with AsyncNotionClient(token="secret_xxx") as client:
            page = await client.pages.retrieve("<page_id>")

    asyncio.run(main())
"""

from __future__ import annotations

from typing import Any

from notion_mcp.config import NotionMcpConfig
from notion_mcp.notion_api import (
    AsyncBlockAPI,
    AsyncDatabaseAPI,
    AsyncNotionTransport,
    AsyncPageAPI,
    AsyncSearchAPI,
    AsyncUserAPI,
)


class AsyncNotionClient:
    """Asynchronous Notion API client.

    Parameters
    ----------
    token:
        Notion integration token.  Ignored when *config* is given.
    config:
        A complete :class:`NotionMcpConfig`.
    **kwargs:
        Forwarded to :class:`NotionMcpConfig` when *config* is not given.
    """

    def __init__(
        self,
        token: str = "",
        *,
        config: NotionMcpConfig | None = None,
        **kwargs: Any,
    ) -> None:
        self.config = config if config is not None else NotionMcpConfig(token=token, **kwargs)
        self._transport = AsyncNotionTransport(self.config)
        self.pages = AsyncPageAPI(self._transport)
        self.blocks = AsyncBlockAPI(self._transport)
        self.databases = AsyncDatabaseAPI(self._transport)
        self.users = AsyncUserAPI(self._transport)
        self.search = AsyncSearchAPI(self._transport)

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._transport.close()

    async def __aenter__(self) -> AsyncNotionClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
