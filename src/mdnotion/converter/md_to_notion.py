"""Full Markdown-to-Notion conversion pipeline.

:class:`MarkdownToNotionConverter` runs two stages:

1. **Scan** -- :func:`scan` turns the document into typed blocks, calling
   :func:`tokenize` for the text of every text-bearing block.
2. **Serialize** -- :func:`blocks_to_notion` turns the typed blocks into
   Notion API block dicts.

The result is a :class:`ConversionResult` holding both forms.
"""

from __future__ import annotations

import json
import sys

from mdnotion.config import MdNotionConfig
from mdnotion.converter.block_scanner import scan
from mdnotion.converter.serialize import blocks_to_notion
from mdnotion.models import ConversionResult


class MarkdownToNotionConverter:
    """Convert Markdown text to Notion API block payloads.

    Parameters
    ----------
    config:
        Configuration; only ``blank_lines`` and ``debug_dump_blocks`` are
        read here.

    Examples
    --------
    >>> converter = MarkdownToNotionConverter(MdNotionConfig())
    >>> result = converter.convert("# Hello\\nWorld")
    >>> [b["type"] for b in result.blocks]
    ['heading_1', 'paragraph']
    """

    def __init__(self, config: MdNotionConfig) -> None:
        self._config = config

    def convert(self, markdown: str) -> ConversionResult:
        """Scan *markdown* and serialize the resulting blocks.

        Never raises for any input string.
        """
        records = scan(markdown, blank_lines=self._config.blank_lines)
        blocks = blocks_to_notion(records)

        if self._config.debug_dump_blocks:
            print(
                "[mdnotion] Notion blocks payload:",
                json.dumps(blocks, indent=2, ensure_ascii=False),
                file=sys.stderr,
            )

        return ConversionResult(records=records, blocks=blocks)
