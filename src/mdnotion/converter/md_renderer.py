"""Render typed blocks back to Markdown.

The output uses exactly the syntax :func:`~mdnotion.converter.scan`
recognises, so scanning a rendered block gives back an equivalent block.
No escaping is applied: the scanner has no escape syntax either.

Annotation wrapping order (innermost first)::

    code -> bold -> italic
"""

from __future__ import annotations

from collections.abc import Callable as _Callable
from typing import Any

from mdnotion.models import (
    AnnotatedText,
    Block,
    BulletItemBlock,
    CodeBlock,
    DividerBlock,
    EquationBlock,
    HeadingBlock,
    InlineEquation,
    Link,
    NumberedItemBlock,
    ParagraphBlock,
    PlainText,
    QuoteBlock,
    Segment,
)


def render_segment(segment: Segment) -> str:
    if isinstance(segment, PlainText):
        return segment.content
    if isinstance(segment, InlineEquation):
        return f"${segment.expression}$"
    if isinstance(segment, Link):
        return f"[{segment.content}]({segment.url})"
    if isinstance(segment, AnnotatedText):
        text = segment.content
        if segment.code:
            text = f"`{text}`"
        if segment.bold:
            text = f"**{text}**"
        if segment.italic:
            text = f"*{text}*"
        return text
    raise TypeError(f"Not an inline segment: {segment!r}")


def render_segments(segments: list[Segment]) -> str:
    """Render a segment list as one line of inline Markdown."""
    return "".join(render_segment(seg) for seg in segments)


def _render_equation(block: EquationBlock, number: int) -> str:
    return f"$$\n{block.expression}\n$$"


def _render_code(block: CodeBlock, number: int) -> str:
    info = "" if block.language == "plain text" else block.language
    if not block.content:
        return f"```{info}\n```"
    return f"```{info}\n{block.content}\n```"


def _render_divider(block: DividerBlock, number: int) -> str:
    return "---"


def _render_heading(block: HeadingBlock, number: int) -> str:
    return f"{'#' * block.level} {render_segments(block.text)}"


def _render_bullet(block: BulletItemBlock, number: int) -> str:
    return f"- {render_segments(block.text)}"


def _render_numbered(block: NumberedItemBlock, number: int) -> str:
    return f"{number}. {render_segments(block.text)}"


def _render_quote(block: QuoteBlock, number: int) -> str:
    return f"> {render_segments(block.text)}"


def _render_paragraph(block: ParagraphBlock, number: int) -> str:
    return render_segments(block.text)


_BLOCK_RENDERERS: dict[type, _Callable[[Any, int], str]] = {
    EquationBlock: _render_equation,
    CodeBlock: _render_code,
    DividerBlock: _render_divider,
    HeadingBlock: _render_heading,
    BulletItemBlock: _render_bullet,
    NumberedItemBlock: _render_numbered,
    QuoteBlock: _render_quote,
    ParagraphBlock: _render_paragraph,
}


def render_block(block: Block, number: int = 1) -> str:
    """Render one block.  *number* is the prefix used for numbered items.

    Raises
    ------
    TypeError
        If *block* is not one of the :data:`~mdnotion.models.Block` variants.
    """
    renderer = _BLOCK_RENDERERS.get(type(block))
    if renderer is None:
        raise TypeError(f"Not a block: {block!r}")
    return renderer(block, number)


def render_blocks(blocks: list[Block]) -> str:
    """Render a block sequence as a Markdown document, one block per line.

    Consecutive numbered items are numbered 1, 2, 3, ...; any other block
    restarts the count.
    """
    lines: list[str] = []
    number = 0
    for block in blocks:
        number = number + 1 if isinstance(block, NumberedItemBlock) else 0
        lines.append(render_block(block, number or 1))
    return "\n".join(lines)
