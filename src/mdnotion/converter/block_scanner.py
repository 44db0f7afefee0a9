"""Scan a Markdown document line by line into typed blocks.

The scanner keeps one forward cursor over the document's lines.  Each line
is trimmed and tested against the constructs below, in this order; the
first match wins:

========================  ==========================================
construct                 trimmed line
========================  ==========================================
display math              starts with ``$$`` (may span many lines)
fenced code               starts with three backticks (spans lines)
divider                   exactly ``---``, ``***`` or ``___``
heading                   starts with ``#``
bulleted list item        starts with ``- `` or ``* ``
numbered list item        matches ``^\\d+\\.\\s``
quote                     starts with ``> ``
paragraph                 anything else that is not blank
========================  ==========================================

Math and code consume lines until their closing delimiter.  A missing
closer is not an error: the construct simply ends with the document.  No
input makes :func:`scan` raise.

Blank lines follow the *blank_lines* policy: ``"paragraph"`` keeps them as
empty paragraphs (the vertical spacing survives the trip to Notion),
``"skip"`` drops them.
"""

from __future__ import annotations

import re
from typing import Literal

from mdnotion.converter.inline_tokenizer import tokenize
from mdnotion.models import (
    Block,
    BulletItemBlock,
    CodeBlock,
    DividerBlock,
    EquationBlock,
    HeadingBlock,
    NumberedItemBlock,
    ParagraphBlock,
    QuoteBlock,
)

_MATH_FENCE = "$$"
_CODE_FENCE = "```"
_DIVIDERS = frozenset({"---", "***", "___"})

_HEADING_PREFIX_RE = re.compile(r"^#+\s*")
_BULLET_PREFIX_RE = re.compile(r"^[-*]\s+")
_NUMBERED_RE = re.compile(r"^\d+\.\s")
_NUMBERED_PREFIX_RE = re.compile(r"^\d+\.\s+")
_QUOTE_PREFIX_RE = re.compile(r"^>\s+")


def split_lines(document: str) -> list[str]:
    """Split *document* into lines.

    ``\\r\\n`` is treated as ``\\n`` and a single trailing newline does not
    produce an extra empty line, so ``"a\\n"`` and ``"a"`` scan the same.
    """
    lines = document.replace("\r\n", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def scan(
    document: str,
    *,
    blank_lines: Literal["paragraph", "skip"] = "paragraph",
) -> list[Block]:
    """Convert a Markdown document to an ordered list of blocks.

    Parameters
    ----------
    document:
        The full Markdown text.
    blank_lines:
        ``"paragraph"`` to emit an empty :class:`ParagraphBlock` for each
        blank line, ``"skip"`` to drop blank lines.

    Returns
    -------
    list[Block]
        One block per construct, in document order.

    Examples
    --------
    >>> scan("# Title\\n---")
    [HeadingBlock(level=1, text=[PlainText(content='Title')]), DividerBlock()]
    """
    lines = split_lines(document)
    blocks: list[Block] = []
    i = 0

    while i < len(lines):
        stripped = lines[i].strip()

        if stripped.startswith(_MATH_FENCE):
            block, i = _scan_equation(lines, i, stripped)
            if block is not None:
                blocks.append(block)
            continue

        if stripped.startswith(_CODE_FENCE):
            block, i = _scan_code(lines, i, stripped)
            blocks.append(block)
            continue

        blocks.extend(_scan_line(stripped, blank_lines))
        i += 1

    return blocks


# ---------------------------------------------------------------------------
# Multi-line constructs
# ---------------------------------------------------------------------------

def _scan_equation(
    lines: list[str], i: int, stripped: str,
) -> tuple[EquationBlock | None, int]:
    """Consume a display equation starting at line *i*.

    Returns the block (``None`` when the expression is empty) and the index
    of the first line after the equation.
    """
    rest = stripped[len(_MATH_FENCE):]

    # $$ E = mc^2 $$ on a single line
    if rest.endswith(_MATH_FENCE):
        expression = rest[:-len(_MATH_FENCE)].strip()
        return (EquationBlock(expression) if expression else None), i + 1

    rows: list[str] = []
    if rest.strip():
        rows.append(rest.strip())
    i += 1

    while i < len(lines):
        raw = lines[i]
        i += 1
        if raw.strip().endswith(_MATH_FENCE):
            last = raw[:raw.rfind(_MATH_FENCE)].strip()
            if last:
                rows.append(last)
            break
        rows.append(raw)

    expression = "\n".join(rows).strip()
    return (EquationBlock(expression) if expression else None), i


def _scan_code(lines: list[str], i: int, stripped: str) -> tuple[CodeBlock, int]:
    """Consume a fenced code block starting at line *i*."""
    language = stripped[len(_CODE_FENCE):].strip() or "plain text"
    rows: list[str] = []
    i += 1

    while i < len(lines):
        raw = lines[i]
        i += 1
        if raw.strip().startswith(_CODE_FENCE):
            break
        rows.append(raw)

    return CodeBlock(content="\n".join(rows), language=language), i


# ---------------------------------------------------------------------------
# Single-line constructs
# ---------------------------------------------------------------------------

def _scan_line(stripped: str, blank_lines: str) -> list[Block]:
    """Classify one trimmed line that does not open a multi-line construct."""
    if stripped in _DIVIDERS:
        return [DividerBlock()]

    if stripped.startswith("#"):
        level = len(stripped) - len(stripped.lstrip("#"))
        text = _HEADING_PREFIX_RE.sub("", stripped, count=1)
        return [HeadingBlock(level=min(level, 3), text=tokenize(text))]

    if stripped.startswith(("- ", "* ")):
        text = _BULLET_PREFIX_RE.sub("", stripped, count=1)
        return [BulletItemBlock(tokenize(text))]

    if _NUMBERED_RE.match(stripped):
        text = _NUMBERED_PREFIX_RE.sub("", stripped, count=1)
        return [NumberedItemBlock(tokenize(text))]

    if stripped.startswith("> "):
        text = _QUOTE_PREFIX_RE.sub("", stripped, count=1)
        return [QuoteBlock(tokenize(text))]

    if stripped:
        return [ParagraphBlock(tokenize(stripped))]

    if blank_lines == "paragraph":
        return [ParagraphBlock([])]
    return []
