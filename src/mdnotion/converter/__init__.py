"""Markdown to Notion conversion.

Public API:

- :func:`scan` -- Markdown document to typed blocks.
- :func:`tokenize` -- one line of inline Markdown to typed segments.
- :func:`blocks_to_notion` -- typed blocks to Notion API block dicts.
- :func:`segments_to_rich_text` -- typed segments to a ``rich_text`` array.
- :func:`render_blocks` -- typed blocks back to Markdown.
- :class:`MarkdownToNotionConverter` -- scan + serialize in one call.
"""

from mdnotion.converter.block_scanner import scan
from mdnotion.converter.inline_tokenizer import tokenize
from mdnotion.converter.md_renderer import render_block, render_blocks, render_segments
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter
from mdnotion.converter.serialize import (
    block_to_notion,
    blocks_to_notion,
    segments_to_rich_text,
)

__all__ = [
    "MarkdownToNotionConverter",
    "block_to_notion",
    "blocks_to_notion",
    "render_block",
    "render_blocks",
    "render_segments",
    "scan",
    "segments_to_rich_text",
    "tokenize",
]
