"""Split one line of Markdown text into inline segments.

The tokenizer works in three passes:

1. **Protect math.**  Every ``$...$`` span is swapped for an opaque
   placeholder so that ``*``, backticks and brackets inside LaTeX are never
   read as formatting markers.  Placeholder characters already present in
   the line are protected the same way and come back unchanged.
2. **Find formatting.**  Bold, italic, inline code, and link spans are
   matched independently over the protected text.  The matches are pooled,
   sorted by start offset, and accepted greedily, skipping any match that
   overlaps one already accepted.  The text between accepted spans becomes
   plain text.
3. **Restore math.**  Placeholders inside the resulting segments are
   swapped back for :class:`InlineEquation` segments, keeping the
   formatting of the surrounding fragments.

Nested formatting is not supported: ``**a *b* c**`` is a single bold
segment whose content is ``a *b* c``.
"""

from __future__ import annotations

import dataclasses
import re
from typing import NamedTuple

from mdnotion.models import AnnotatedText, InlineEquation, Link, PlainText, Segment

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_MATH_RE = re.compile(r"\$([^$\n]+?)\$")

# Private-use code points.  A literal _PH_OPEN already in the line is itself
# swapped for a placeholder, so every placeholder match is one of ours.
_PH_OPEN = "\ue000"
_PH_CLOSE = "\ue001"
_PLACEHOLDER_RE = re.compile(f"{_PH_OPEN}(\\d+){_PH_CLOSE}")
_PROTECT_RE = re.compile(f"{_MATH_RE.pattern}|{_PH_OPEN}")

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
# A lone ``*`` on both sides so that bold delimiters are never half-consumed.
_ITALIC_RE = re.compile(r"(?<!\*)\*(?!\*)(.*?)(?<!\*)\*(?!\*)")
_CODE_RE = re.compile(r"`([^`]*)`")
_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)]*)\)")

_DETECTORS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("bold", _BOLD_RE),
    ("italic", _ITALIC_RE),
    ("code", _CODE_RE),
    ("link", _LINK_RE),
)


class _MathSpan(NamedTuple):
    # None marks a literal placeholder character, restored as text.
    expression: str | None
    raw: str


class _Span(NamedTuple):
    start: int
    end: int
    priority: int
    kind: str
    content: str
    url: str


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def tokenize(line: str) -> list[Segment]:
    """Convert a single line of Markdown text to a list of segments.

    Parameters
    ----------
    line:
        The inline text of one block (heading text, list item text, ...).

    Returns
    -------
    list[Segment]
        Segments in left-to-right order.  Blank input yields ``[]``.

    Examples
    --------
    >>> tokenize("$x+y$")
    [InlineEquation(expression='x+y')]
    >>> tokenize("[text](http://x)")
    [Link(content='text', url='http://x')]
    """
    protected, maths = _protect_math(line)
    segments = _split_formatting(protected)
    return _restore_math(segments, maths)


# ---------------------------------------------------------------------------
# Pass 1: math protection
# ---------------------------------------------------------------------------

def _protect_math(text: str) -> tuple[str, list[_MathSpan]]:
    """Replace each ``$...$`` span with a numbered placeholder."""
    maths: list[_MathSpan] = []

    def _swap(match: re.Match[str]) -> str:
        expression = match.group(1)
        if expression is not None:
            expression = expression.strip()
        maths.append(_MathSpan(expression, match.group(0)))
        return f"{_PH_OPEN}{len(maths) - 1}{_PH_CLOSE}"

    return _PROTECT_RE.sub(_swap, text), maths


# ---------------------------------------------------------------------------
# Pass 2: formatting spans
# ---------------------------------------------------------------------------

def _find_spans(text: str) -> list[_Span]:
    """Run every detector over *text* and return all matches sorted by start."""
    spans: list[_Span] = []
    for priority, (kind, pattern) in enumerate(_DETECTORS):
        for match in pattern.finditer(text):
            url = match.group(2) if kind == "link" else ""
            spans.append(_Span(
                match.start(), match.end(), priority, kind, match.group(1), url,
            ))
    spans.sort(key=lambda s: (s.start, s.start - s.end, s.priority))
    return spans


def _select_spans(spans: list[_Span]) -> list[_Span]:
    """Greedy leftmost selection of non-overlapping spans.

    *spans* must be sorted by start offset.  Every accepted span starts at
    or after the end of the previous one, so a single cursor is enough to
    detect intersection with everything accepted so far.
    """
    accepted: list[_Span] = []
    cursor = 0
    for span in spans:
        if span.start < cursor:
            continue
        accepted.append(span)
        cursor = span.end
    return accepted


def _span_segment(span: _Span) -> Segment | None:
    if span.kind == "link":
        return Link(content=span.content, url=span.url)
    if not span.content:
        return None
    return AnnotatedText(content=span.content, **{span.kind: True})


def _split_formatting(text: str) -> list[Segment]:
    accepted = _select_spans(_find_spans(text))
    if not accepted:
        return [PlainText(text)] if text.strip() else []

    segments: list[Segment] = []
    pos = 0
    for span in accepted:
        if span.start > pos:
            segments.append(PlainText(text[pos:span.start]))
        seg = _span_segment(span)
        if seg is not None:
            segments.append(seg)
        pos = span.end
    if pos < len(text):
        segments.append(PlainText(text[pos:]))
    return segments


# ---------------------------------------------------------------------------
# Pass 3: math restoration
# ---------------------------------------------------------------------------

def _restore_math(segments: list[Segment], maths: list[_MathSpan]) -> list[Segment]:
    if not maths:
        return segments

    def _raw(match: re.Match[str]) -> str:
        return maths[int(match.group(1))].raw

    restored: list[Segment] = []
    for seg in segments:
        if isinstance(seg, Link):
            seg = dataclasses.replace(seg, url=_PLACEHOLDER_RE.sub(_raw, seg.url))
        if not _PLACEHOLDER_RE.search(seg.content):
            restored.append(seg)
            continue

        # re.split with one group alternates text, index, text, index, ...
        parts = _PLACEHOLDER_RE.split(seg.content)
        pending = ""
        for i, part in enumerate(parts):
            if i % 2 == 0:
                pending += part
                continue
            span = maths[int(part)]
            if span.expression is None:
                pending += span.raw
                continue
            if pending:
                restored.append(dataclasses.replace(seg, content=pending))
                pending = ""
            if span.expression:
                restored.append(InlineEquation(span.expression))
        if pending:
            restored.append(dataclasses.replace(seg, content=pending))
    return restored
