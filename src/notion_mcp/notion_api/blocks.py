"""Block API wrappers for the Notion API.

:class:`AsyncBlockAPI` wraps the ``/blocks`` endpoints.  ``get_children``
auto-paginates and ``append_children`` batches payloads to Notion's limit
of 100 children per request.
"""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport

MAX_CHILDREN_PER_REQUEST = 100


def batch_children(
    children: list[dict[str, Any]],
    size: int = MAX_CHILDREN_PER_REQUEST,
) -> list[list[dict[str, Any]]]:
    """Split *children* into consecutive batches of at most *size* blocks.

    An empty list yields no batches.
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    return [children[i : i + size] for i in range(0, len(children), size)]


class AsyncBlockAPI:
    """Asynchronous wrapper for the Notion Blocks API.

    Parameters
    ----------
    transport:
        A configured :class:`AsyncNotionTransport` instance.
    """

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def retrieve(self, block_id: str) -> dict[str, Any]:
        """Retrieve a single block by its ID."""
        return await self._transport.request("GET", f"/blocks/{block_id}")

    async def update(self, block_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Update a block's content.

        Parameters
        ----------
        block_id:
            The UUID of the block to update.
        payload:
            Typically ``{block_type: {"rich_text": [...], ...}}``.  Only the
            fields included are modified.
        """
        return await self._transport.request("PATCH", f"/blocks/{block_id}", json=payload)

    async def delete(self, block_id: str) -> dict[str, Any]:
        """Delete (archive) a block."""
        return await self._transport.request("DELETE", f"/blocks/{block_id}")

    async def get_children(self, block_id: str) -> list[dict[str, Any]]:
        """Retrieve all children of a block (or page), in order."""
        return [
            child
            async for child in self._transport.paginate(
                f"/blocks/{block_id}/children", method="GET"
            )
        ]

    async def append_children(
        self,
        block_id: str,
        children: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        """Append child blocks to a parent block or page.

        Issues one ``PATCH /blocks/{id}/children`` per batch of 100 and
        returns the created block objects from every response, in order.
        """
        created: list[dict[str, Any]] = []
        for batch in batch_children(children):
            response = await self._transport.request(
                "PATCH", f"/blocks/{block_id}/children", json={"children": batch}
            )
            created.extend(response.get("results", []))
        return created
