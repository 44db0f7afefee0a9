"""Public data models for mdnotion.

Two closed sum types describe a converted document:

* **Block** -- one structural unit (heading, paragraph, code, ...).
* **Segment** -- one inline run of text inside a text-bearing block.

Each variant is a frozen dataclass; :data:`Block` and :data:`Segment` are
the unions over them.  Code that consumes these types dispatches on the
concrete class and treats anything else as a programming error.

The remaining dataclasses are result records returned by the converter,
the clients, and the request handler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

# ---------------------------------------------------------------------------
# Inline segments
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PlainText:
    """Unformatted text."""

    content: str


@dataclass(frozen=True)
class InlineEquation:
    """An inline math expression (the text between single ``$`` delimiters)."""

    expression: str


@dataclass(frozen=True)
class AnnotatedText:
    """Text carrying bold, italic, or inline-code formatting."""

    content: str
    bold: bool = False
    italic: bool = False
    code: bool = False


@dataclass(frozen=True)
class Link:
    """Link text pointing at *url*.  Neither field is validated."""

    content: str
    url: str


Segment = Union[PlainText, InlineEquation, AnnotatedText, Link]
"""Any inline segment produced by :func:`mdnotion.converter.tokenize`."""


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EquationBlock:
    """A display math expression (``$$ ... $$``)."""

    expression: str


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block.

    Attributes
    ----------
    content:
        The lines between the fences, joined with ``\\n``, verbatim.
    language:
        The fence info string, or ``"plain text"`` when the fence has none.
    """

    content: str
    language: str = "plain text"


@dataclass(frozen=True)
class DividerBlock:
    """A horizontal rule."""


@dataclass(frozen=True)
class HeadingBlock:
    """A heading.  *level* is 1, 2, or 3; deeper Markdown headings clamp to 3."""

    level: int
    text: list[Segment] = field(default_factory=list)


@dataclass(frozen=True)
class BulletItemBlock:
    text: list[Segment] = field(default_factory=list)


@dataclass(frozen=True)
class NumberedItemBlock:
    text: list[Segment] = field(default_factory=list)


@dataclass(frozen=True)
class QuoteBlock:
    text: list[Segment] = field(default_factory=list)


@dataclass(frozen=True)
class ParagraphBlock:
    """A paragraph.  An empty *text* list represents a blank line."""

    text: list[Segment] = field(default_factory=list)


Block = Union[
    EquationBlock,
    CodeBlock,
    DividerBlock,
    HeadingBlock,
    BulletItemBlock,
    NumberedItemBlock,
    QuoteBlock,
    ParagraphBlock,
]
"""Any block produced by :func:`mdnotion.converter.scan`."""


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class ConversionResult:
    """Output of :meth:`MarkdownToNotionConverter.convert`.

    Attributes
    ----------
    records:
        The typed :data:`Block` sequence produced by the scanner.
    blocks:
        The same sequence serialized as Notion API block dicts, ready to be
        sent as ``children``.
    """

    records: list[Block] = field(default_factory=list)
    blocks: list[dict] = field(default_factory=list)


@dataclass
class PageCreateResult:
    """Result of :meth:`MdNotionClient.create_page_with_markdown`.

    Attributes
    ----------
    page_id:
        The Notion ID of the newly created page.
    url:
        The Notion URL of the new page (empty when the API omits it).
    blocks_created:
        Total number of top-level blocks appended to the page.
    batches:
        Number of ``append_children`` calls issued.
    page:
        The raw page object returned by ``POST /pages``.
    """

    page_id: str
    url: str
    blocks_created: int
    batches: int = 0
    page: dict[str, Any] = field(default_factory=dict)


@dataclass
class HandlerResponse:
    """An HTTP response produced by :func:`mdnotion.handler.handle_upload`."""

    status: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)
