"""mdnotion -- Markdown with LaTeX math to Notion pages.

Public re-exports
-----------------

* **Core:** :func:`scan`, :func:`tokenize`, :class:`MarkdownToNotionConverter`
* **Clients:** :class:`MdNotionClient`, :class:`AsyncMdNotionClient`
* **Endpoint:** :func:`handle_upload`
* **Configuration:** :class:`MdNotionConfig`
* **Errors:** :class:`MdNotionError` and subclasses, :class:`ErrorCode`
* **Models:** block and segment variants, result records

Usage::

    from mdnotion import scan, blocks_to_notion

    blocks = scan("# Pythagoras\\n\\n$a^2 + b^2 = c^2$ holds for **right** triangles.")
    payload = blocks_to_notion(blocks)
"""

from __future__ import annotations

# ── Clients ────────────────────────────────────────────────────────────
from mdnotion.async_client import AsyncMdNotionClient
from mdnotion.client import MdNotionClient

# ── Configuration ───────────────────────────────────────────────────────
from mdnotion.config import MdNotionConfig

# ── Core ────────────────────────────────────────────────────────────────
from mdnotion.converter import (
    MarkdownToNotionConverter,
    blocks_to_notion,
    render_blocks,
    scan,
    segments_to_rich_text,
    tokenize,
)

# ── Errors ──────────────────────────────────────────────────────────────
from mdnotion.errors import (
    ErrorCode,
    MdNotionError,
    MdNotionNetworkError,
    MdNotionValidationError,
    NotionAPIError,
)

# ── Endpoint ────────────────────────────────────────────────────────────
from mdnotion.handler import handle_upload

# ── Models ──────────────────────────────────────────────────────────────
from mdnotion.models import (
    AnnotatedText,
    Block,
    BulletItemBlock,
    CodeBlock,
    ConversionResult,
    DividerBlock,
    EquationBlock,
    HandlerResponse,
    HeadingBlock,
    InlineEquation,
    Link,
    NumberedItemBlock,
    PageCreateResult,
    ParagraphBlock,
    PlainText,
    QuoteBlock,
    Segment,
)

__all__ = [
    # Core
    "scan",
    "tokenize",
    "blocks_to_notion",
    "segments_to_rich_text",
    "render_blocks",
    "MarkdownToNotionConverter",
    # Clients
    "MdNotionClient",
    "AsyncMdNotionClient",
    # Endpoint
    "handle_upload",
    # Configuration
    "MdNotionConfig",
    # Errors
    "MdNotionError",
    "ErrorCode",
    "MdNotionValidationError",
    "NotionAPIError",
    "MdNotionNetworkError",
    # Models: blocks
    "Block",
    "EquationBlock",
    "CodeBlock",
    "DividerBlock",
    "HeadingBlock",
    "BulletItemBlock",
    "NumberedItemBlock",
    "QuoteBlock",
    "ParagraphBlock",
    # Models: segments
    "Segment",
    "PlainText",
    "InlineEquation",
    "AnnotatedText",
    "Link",
    # Models: results
    "ConversionResult",
    "PageCreateResult",
    "HandlerResponse",
]
