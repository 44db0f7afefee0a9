"""Synchronous mdnotion client.

Usage::

    from mdnotion import MdNotionClient

    with MdNotionClient(token="secret_xxx") as client:
        result = client.create_page_with_markdown(
            parent_id="<page_id>",
            title="Lecture notes",
            markdown="# Energy\\n\\n$$E = mc^2$$",
        )
        print(result.url)
"""

from __future__ import annotations

from typing import Any

import httpx

from mdnotion.config import MdNotionConfig
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter
from mdnotion.models import ConversionResult, PageCreateResult
from mdnotion.notion_api.blocks import BlockAPI
from mdnotion.notion_api.pages import PageAPI, title_properties
from mdnotion.notion_api.transport import NotionTransport
from mdnotion.observability import NoopMetricsHook, get_logger
from mdnotion.utils.chunk import chunk_children

log = get_logger("mdnotion.client")


class MdNotionClient:
    """Convert Markdown and upload it to Notion.

    Parameters
    ----------
    token:
        Notion integration token.
    http_client:
        Optional pre-configured :class:`httpx.Client` handed to the
        transport.
    **kwargs:
        Forwarded to :class:`MdNotionConfig`.
    """

    def __init__(
        self, token: str, *, http_client: httpx.Client | None = None, **kwargs: Any,
    ) -> None:
        self._config = MdNotionConfig(token=token, **kwargs)
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )
        self._transport = NotionTransport(self._config, client=http_client)
        self._pages = PageAPI(self._transport)
        self._blocks = BlockAPI(self._transport)
        self._converter = MarkdownToNotionConverter(self._config)

    @property
    def config(self) -> MdNotionConfig:
        return self._config

    def convert(self, markdown: str) -> ConversionResult:
        """Convert *markdown* without touching the network."""
        return self._converter.convert(markdown)

    def create_page_with_markdown(
        self,
        parent_id: str,
        title: str,
        markdown: str,
    ) -> PageCreateResult:
        """Create a page under *parent_id* holding the converted *markdown*.

        The page is created empty, then the blocks are appended in batches
        of ``config.batch_size``.  The first failing request aborts the
        upload and its error propagates unchanged.

        Raises
        ------
        NotionAPIError
            When Notion rejects the page creation or an append.
        MdNotionNetworkError
            When a request gets no response.
        """
        conversion = self._converter.convert(markdown)

        page = self._pages.create(
            parent={"page_id": parent_id},
            properties=title_properties(title),
        )
        page_id = page["id"]

        batches = chunk_children(conversion.blocks, self._config.batch_size)
        for batch in batches:
            self._blocks.append_children(page_id, batch)
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

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> MdNotionClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
