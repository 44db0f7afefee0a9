"""Block endpoint wrappers.

Only ``PATCH /blocks/{id}/children`` is needed: pages are created empty
and filled batch by batch.
"""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport, NotionTransport


def children_path(block_id: str) -> str:
    return f"/blocks/{block_id}/children"


class BlockAPI:
    """Synchronous wrapper for the Notion Blocks API."""

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def append_children(
        self,
        block_id: str,
        children: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Append child blocks to a page or block.

        Notion accepts at most 100 children per call; batch longer lists
        with :func:`mdnotion.utils.chunk_children`.
        """
        return self._transport.request(
            "PATCH", children_path(block_id), json={"children": children},
        )


class AsyncBlockAPI:
    """Asynchronous wrapper for the Notion Blocks API."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def append_children(
        self,
        block_id: str,
        children: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Append child blocks (async).  See :meth:`BlockAPI.append_children`."""
        return await self._transport.request(
            "PATCH", children_path(block_id), json={"children": children},
        )
