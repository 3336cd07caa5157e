"""Page API wrappers for the Notion API.

:class:`AsyncPageAPI` is a thin wrapper around the ``/pages`` endpoints;
auth, pacing and retries live in the transport.
"""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport


class AsyncPageAPI:
    """Asynchronous wrapper for the Notion Pages API.

    Parameters
    ----------
    transport:
        A configured :class:`AsyncNotionTransport` instance.
    """

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def create(
        self,
        parent: dict[str, Any],
        properties: dict[str, Any],
        children: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Create a new page.

        Parameters
        ----------
        parent:
            Parent object, e.g. ``{"page_id": "..."}`` or
            ``{"database_id": "..."}``.
        properties:
            Page properties, passed through unchanged.
        children:
            Optional block objects to use as page content.  Notion accepts
            up to 100 per create call; callers append the rest.

        Returns
        -------
        dict
            The created page object.
        """
        body: dict[str, Any] = {
            "parent": parent,
            "properties": properties,
        }
        if children:
            body["children"] = children
        return await self._transport.request("POST", "/pages", json=body)

    async def retrieve(self, page_id: str) -> dict[str, Any]:
        """Retrieve a page by its ID."""
        return await self._transport.request("GET", f"/pages/{page_id}")

    async def update(
        self,
        page_id: str,
        properties: dict[str, Any] | None = None,
        archived: bool | None = None,
    ) -> dict[str, Any]:
        """Update a page's properties or archive status.

        Only the properties given are changed.  ``archived=True`` moves the
        page to the trash; ``False`` restores it.
        """
        body: dict[str, Any] = {}
        if properties is not None:
            body["properties"] = properties
        if archived is not None:
            body["archived"] = archived
        return await self._transport.request("PATCH", f"/pages/{page_id}", json=body)
