"""Asynchronous mdnotion client.

:class:`AsyncMdNotionClient` mirrors :class:`MdNotionClient` with
coroutine methods.  Batches are still appended one after another: Notion
keeps children in the order the requests arrive.
"""

from __future__ import annotations

from typing import Any

import httpx

from mdnotion.config import MdNotionConfig
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter
from mdnotion.models import ConversionResult, PageCreateResult
from mdnotion.notion_api.blocks import AsyncBlockAPI
from mdnotion.notion_api.pages import AsyncPageAPI, title_properties
from mdnotion.notion_api.transport import AsyncNotionTransport
from mdnotion.observability import NoopMetricsHook, get_logger
from mdnotion.utils.chunk import chunk_children

log = get_logger("mdnotion.client")


class AsyncMdNotionClient:
    """Asynchronous counterpart of :class:`~mdnotion.client.MdNotionClient`."""

    def __init__(
        self, token: str, *, http_client: httpx.AsyncClient | None = None, **kwargs: Any,
    ) -> None:
        self._config = MdNotionConfig(token=token, **kwargs)
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )
        self._transport = AsyncNotionTransport(self._config, client=http_client)
        self._pages = AsyncPageAPI(self._transport)
        self._blocks = AsyncBlockAPI(self._transport)
        self._converter = MarkdownToNotionConverter(self._config)

    @property
    def config(self) -> MdNotionConfig:
        return self._config

    def convert(self, markdown: str) -> ConversionResult:
        """Convert *markdown* without touching the network."""
        return self._converter.convert(markdown)

    async def create_page_with_markdown(
        self,
        parent_id: str,
        title: str,
        markdown: str,
    ) -> PageCreateResult:
        """Create a page holding the converted *markdown* (async).

        See :meth:`MdNotionClient.create_page_with_markdown`.
        """
        conversion = self._converter.convert(markdown)

        page = await self._pages.create(
            parent={"page_id": parent_id},
            properties=title_properties(title),
        )
        page_id = page["id"]

        batches = chunk_children(conversion.blocks, self._config.batch_size)
        for batch in batches:
            await self._blocks.append_children(page_id, batch)
            self._metrics.increment("mdnotion.batches_appended_total")

        self._metrics.increment("mdnotion.blocks_created_total", len(conversion.blocks))
        log.info(
            "page created",
            extra={
                "extra_fields": {
                    "op": "create_page_with_markdown",
                    "page_id": page_id,
                    "blocks": len(conversion.blocks),
                    "batches": len(batches),
                }
            },
        )
        return PageCreateResult(
            page_id=page_id,
            url=page.get("url", ""),
            blocks_created=len(conversion.blocks),
            batches=len(batches),
            page=page,
        )

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> AsyncMdNotionClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
