"""Serialize typed blocks and segments into Notion API JSON.

A rich_text segment is a dict in one of two forms::

    {"type": "text", "text": {"content": "hello", "link": {"url": "..."}},
     "annotations": {"bold": true, ...}}

    {"type": "equation", "equation": {"expression": "E=mc^2"}}

``link`` and ``annotations`` are only present when needed.  Text longer
than Notion's 2 000-character limit is split across several segments.

Every :data:`~mdnotion.models.Block` variant has exactly one serializer in
:data:`_BLOCK_SERIALIZERS`; anything else raises :class:`TypeError`.
"""

from __future__ import annotations

import re
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
from mdnotion.utils.text_split import split_string

TEXT_CHAR_LIMIT: int = 2000
"""Maximum length of ``rich_text[].text.content`` accepted by Notion."""

# ---------------------------------------------------------------------------
# Notion code language mapping
# ---------------------------------------------------------------------------

_NOTION_LANGUAGES: frozenset[str] = frozenset({
    "abap", "arduino", "bash", "basic", "c", "clojure", "coffeescript",
    "c++", "c#", "css", "dart", "diff", "docker", "elixir", "elm",
    "erlang", "flow", "fortran", "f#", "gherkin", "glsl", "go", "graphql",
    "groovy", "haskell", "html", "java", "javascript", "json", "julia",
    "kotlin", "latex", "less", "lisp", "livescript", "lua", "makefile",
    "markdown", "markup", "matlab", "mermaid", "nix", "objective-c",
    "ocaml", "pascal", "perl", "php", "plain text", "powershell",
    "prolog", "protobuf", "python", "r", "reason", "ruby", "rust",
    "sass", "scala", "scheme", "scss", "shell", "sql", "swift",
    "typescript", "vb.net", "verilog", "vhdl", "visual basic",
    "webassembly", "xml", "yaml", "java/c/c++/c#",
})

_LANGUAGE_ALIASES: dict[str, str] = {
    "py": "python",
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "sh": "shell",
    "zsh": "shell",
    "console": "shell",
    "rb": "ruby",
    "rs": "rust",
    "yml": "yaml",
    "md": "markdown",
    "tex": "latex",
    "math": "latex",
    "cpp": "c++",
    "cs": "c#",
    "csharp": "c#",
    "golang": "go",
    "kt": "kotlin",
    "dockerfile": "docker",
    "make": "makefile",
    "htm": "html",
    "jsonc": "json",
    "ps1": "powershell",
    "text": "plain text",
    "txt": "plain text",
    "plaintext": "plain text",
}


def normalize_language(info: str) -> str:
    """Map a code fence info string to a language name Notion accepts.

    Unknown languages fall back to ``"plain text"`` because Notion rejects
    the whole request on an unrecognised value.

    >>> normalize_language("Py")
    'python'
    >>> normalize_language("python3")
    'python'
    >>> normalize_language("brainfuck")
    'plain text'
    """
    lang = info.strip().lower()
    if lang in _NOTION_LANGUAGES:
        return lang
    lang = lang.split()[0] if lang else ""
    for candidate in (lang, re.sub(r"\d+$", "", lang)):
        if candidate in _NOTION_LANGUAGES:
            return candidate
        if candidate in _LANGUAGE_ALIASES:
            return _LANGUAGE_ALIASES[candidate]
    return "plain text"


# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

def _annotations(bold: bool = False, italic: bool = False, code: bool = False) -> dict:
    return {
        "bold": bold,
        "italic": italic,
        "strikethrough": False,
        "underline": False,
        "code": code,
        "color": "default",
    }


def _text_segments(
    content: str,
    *,
    annotations: dict | None = None,
    url: str | None = None,
) -> list[dict]:
    """Build one or more text segments, splitting at :data:`TEXT_CHAR_LIMIT`."""
    segments: list[dict] = []
    for chunk in split_string(content, TEXT_CHAR_LIMIT) or [content]:
        text: dict[str, Any] = {"content": chunk}
        if url:
            text["link"] = {"url": url}
        seg: dict[str, Any] = {"type": "text", "text": text}
        if annotations is not None:
            seg["annotations"] = dict(annotations)
        segments.append(seg)
    return segments


def segment_to_rich_text(segment: Segment) -> list[dict]:
    """Serialize one segment.  May return several dicts for long text."""
    if isinstance(segment, PlainText):
        return _text_segments(segment.content)
    if isinstance(segment, AnnotatedText):
        annots = _annotations(segment.bold, segment.italic, segment.code)
        return _text_segments(segment.content, annotations=annots)
    if isinstance(segment, Link):
        return _text_segments(segment.content, url=segment.url)
    if isinstance(segment, InlineEquation):
        return [{"type": "equation", "equation": {"expression": segment.expression}}]
    raise TypeError(f"Not an inline segment: {segment!r}")


def segments_to_rich_text(segments: list[Segment]) -> list[dict]:
    """Serialize a segment list into a Notion ``rich_text`` array."""
    rich_text: list[dict] = []
    for segment in segments:
        rich_text.extend(segment_to_rich_text(segment))
    return rich_text


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

def _wrap(block_type: str, body: dict) -> dict:
    return {"object": "block", "type": block_type, block_type: body}


def _text_block(block_type: str, segments: list[Segment]) -> dict:
    return _wrap(block_type, {
        "rich_text": segments_to_rich_text(segments),
        "color": "default",
    })


def _serialize_equation(block: EquationBlock) -> dict:
    return _wrap("equation", {"expression": block.expression})


def _serialize_code(block: CodeBlock) -> dict:
    return _wrap("code", {
        "caption": [],
        "rich_text": _text_segments(block.content) if block.content else [],
        "language": normalize_language(block.language),
    })


def _serialize_divider(block: DividerBlock) -> dict:
    return _wrap("divider", {})


def _serialize_heading(block: HeadingBlock) -> dict:
    heading_type = f"heading_{min(max(block.level, 1), 3)}"
    return _wrap(heading_type, {
        "rich_text": segments_to_rich_text(block.text),
        "color": "default",
        "is_toggleable": False,
    })


def _serialize_bullet(block: BulletItemBlock) -> dict:
    return _text_block("bulleted_list_item", block.text)


def _serialize_numbered(block: NumberedItemBlock) -> dict:
    return _text_block("numbered_list_item", block.text)


def _serialize_quote(block: QuoteBlock) -> dict:
    return _text_block("quote", block.text)


def _serialize_paragraph(block: ParagraphBlock) -> dict:
    return _text_block("paragraph", block.text)


_BLOCK_SERIALIZERS: dict[type, _Callable[[Any], dict]] = {
    EquationBlock: _serialize_equation,
    CodeBlock: _serialize_code,
    DividerBlock: _serialize_divider,
    HeadingBlock: _serialize_heading,
    BulletItemBlock: _serialize_bullet,
    NumberedItemBlock: _serialize_numbered,
    QuoteBlock: _serialize_quote,
    ParagraphBlock: _serialize_paragraph,
}


def block_to_notion(block: Block) -> dict:
    """Serialize one block into a Notion API block object.

    Raises
    ------
    TypeError
        If *block* is not one of the :data:`~mdnotion.models.Block` variants.
    """
    serializer = _BLOCK_SERIALIZERS.get(type(block))
    if serializer is None:
        raise TypeError(f"Not a block: {block!r}")
    return serializer(block)


def blocks_to_notion(blocks: list[Block]) -> list[dict]:
    """Serialize a block sequence, preserving order."""
    return [block_to_notion(block) for block in blocks]
