"""Page endpoint wrappers.

:class:`PageAPI` and :class:`AsyncPageAPI` build request bodies for
``/pages`` and leave HTTP concerns to the transport.
"""

from __future__ import annotations

from typing import Any

from .transport import AsyncNotionTransport, NotionTransport


def title_properties(title: str) -> dict[str, Any]:
    """Return the minimal ``properties`` dict for a page under another page."""
    return {"title": {"title": [{"text": {"content": title}}]}}


def _create_body(
    parent: dict[str, Any],
    properties: dict[str, Any],
    children: list[dict[str, Any]] | None,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "parent": parent,
        "properties": properties,
    }
    if children is not None:
        body["children"] = children
    return body


class PageAPI:
    """Synchronous wrapper for the Notion Pages API."""

    def __init__(self, transport: NotionTransport) -> None:
        self._transport = transport

    def create(
        self,
        parent: dict[str, Any],
        properties: dict[str, Any],
        children: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Create a new page.

        Parameters
        ----------
        parent:
            Parent object, e.g. ``{"page_id": "..."}``.
        properties:
            Page properties; see :func:`title_properties`.
        children:
            Optional initial blocks (at most 100).  Omitted from the body
            when ``None``.

        Returns
        -------
        dict
            The created page object.
        """
        return self._transport.request(
            "POST", "/pages", json=_create_body(parent, properties, children),
        )


class AsyncPageAPI:
    """Asynchronous wrapper for the Notion Pages API."""

    def __init__(self, transport: AsyncNotionTransport) -> None:
        self._transport = transport

    async def create(
        self,
        parent: dict[str, Any],
        properties: dict[str, Any],
        children: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Create a new page (async).  See :meth:`PageAPI.create`."""
        return await self._transport.request(
            "POST", "/pages", json=_create_body(parent, properties, children),
        )
