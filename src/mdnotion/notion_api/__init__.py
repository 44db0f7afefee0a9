"""mdnotion.notion_api -- Notion API transport and endpoint wrappers.

* :mod:`.transport` -- single-attempt HTTP transports (sync and async).
* :mod:`.pages` -- ``/pages`` wrappers.
* :mod:`.blocks` -- ``/blocks/{id}/children`` wrappers.
"""

from __future__ import annotations

from .blocks import AsyncBlockAPI, BlockAPI
from .pages import AsyncPageAPI, PageAPI, title_properties
from .transport import AsyncNotionTransport, NotionTransport

__all__ = [
    "AsyncBlockAPI",
    "AsyncNotionTransport",
    "AsyncPageAPI",
    "BlockAPI",
    "NotionTransport",
    "PageAPI",
    "title_properties",
]
