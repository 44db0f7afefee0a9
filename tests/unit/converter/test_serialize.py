"""Tests for serialization of typed blocks/segments into Notion JSON."""

from __future__ import annotations

import pytest

from mdnotion.converter.serialize import (
    TEXT_CHAR_LIMIT,
    block_to_notion,
    blocks_to_notion,
    normalize_language,
    segments_to_rich_text,
)
from mdnotion.models import (
    AnnotatedText,
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
)


def _annotations(**overrides):
    annots = {
        "bold": False, "italic": False, "strikethrough": False,
        "underline": False, "code": False, "color": "default",
    }
    annots.update(overrides)
    return annots


# =========================================================================
# Rich text
# =========================================================================

class TestRichText:
    def test_plain_text(self):
        assert segments_to_rich_text([PlainText("hi")]) == [
            {"type": "text", "text": {"content": "hi"}},
        ]

    @pytest.mark.parametrize("flag", ["bold", "italic", "code"])
    def test_annotated_text(self, flag):
        (seg,) = segments_to_rich_text([AnnotatedText("x", **{flag: True})])
        assert seg == {
            "type": "text",
            "text": {"content": "x"},
            "annotations": _annotations(**{flag: True}),
        }

    def test_link(self):
        assert segments_to_rich_text([Link("docs", "https://d.io")]) == [
            {"type": "text", "text": {"content": "docs", "link": {"url": "https://d.io"}}},
        ]

    def test_link_without_url_has_no_link_object(self):
        assert segments_to_rich_text([Link("docs", "")]) == [
            {"type": "text", "text": {"content": "docs"}},
        ]

    def test_inline_equation(self):
        assert segments_to_rich_text([InlineEquation("x^2")]) == [
            {"type": "equation", "equation": {"expression": "x^2"}},
        ]

    def test_order_preserved(self):
        result = segments_to_rich_text([
            PlainText("a"), InlineEquation("b"), AnnotatedText("c", bold=True),
        ])
        assert [seg["type"] for seg in result] == ["text", "equation", "text"]

    def test_long_text_is_split(self):
        text = "a" * (TEXT_CHAR_LIMIT * 2 + 500)
        result = segments_to_rich_text([PlainText(text)])
        assert [len(seg["text"]["content"]) for seg in result] == [2000, 2000, 500]
        assert "".join(seg["text"]["content"] for seg in result) == text

    def test_split_keeps_annotations_and_link(self):
        result = segments_to_rich_text([
            AnnotatedText("b" * 2500, italic=True),
            Link("l" * 2500, "https://x"),
        ])
        assert len(result) == 4
        assert all(seg["annotations"]["italic"] for seg in result[:2])
        assert all(seg["text"]["link"] == {"url": "https://x"} for seg in result[2:])

    def test_empty_link_text_still_emitted(self):
        assert segments_to_rich_text([Link("", "https://x")]) == [
            {"type": "text", "text": {"content": "", "link": {"url": "https://x"}}},
        ]

    def test_unknown_segment(self):
        with pytest.raises(TypeError):
            segments_to_rich_text(["not a segment"])


# =========================================================================
# Blocks
# =========================================================================

class TestBlocks:
    def test_equation(self):
        assert block_to_notion(EquationBlock("E=mc^2")) == {
            "object": "block",
            "type": "equation",
            "equation": {"expression": "E=mc^2"},
        }

    def test_code(self):
        assert block_to_notion(CodeBlock("x = 1", "py")) == {
            "object": "block",
            "type": "code",
            "code": {
                "caption": [],
                "rich_text": [{"type": "text", "text": {"content": "x = 1"}}],
                "language": "python",
            },
        }

    def test_empty_code(self):
        assert block_to_notion(CodeBlock(""))["code"]["rich_text"] == []

    def test_long_code_is_split(self):
        block = block_to_notion(CodeBlock("z" * 4001))
        assert len(block["code"]["rich_text"]) == 3

    def test_divider(self):
        assert block_to_notion(DividerBlock()) == {
            "object": "block", "type": "divider", "divider": {},
        }

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_heading(self, level):
        block = block_to_notion(HeadingBlock(level, [PlainText("T")]))
        key = f"heading_{level}"
        assert block["type"] == key
        assert block[key] == {
            "rich_text": [{"type": "text", "text": {"content": "T"}}],
            "color": "default",
            "is_toggleable": False,
        }

    def test_heading_level_is_clamped(self):
        assert block_to_notion(HeadingBlock(6, []))["type"] == "heading_3"

    @pytest.mark.parametrize(("block", "block_type"), [
        (BulletItemBlock([PlainText("x")]), "bulleted_list_item"),
        (NumberedItemBlock([PlainText("x")]), "numbered_list_item"),
        (QuoteBlock([PlainText("x")]), "quote"),
        (ParagraphBlock([PlainText("x")]), "paragraph"),
    ])
    def test_text_blocks(self, block, block_type):
        assert block_to_notion(block) == {
            "object": "block",
            "type": block_type,
            block_type: {
                "rich_text": [{"type": "text", "text": {"content": "x"}}],
                "color": "default",
            },
        }

    def test_empty_paragraph(self):
        assert block_to_notion(ParagraphBlock([]))["paragraph"]["rich_text"] == []

    def test_blocks_to_notion_keeps_order(self):
        result = blocks_to_notion([DividerBlock(), EquationBlock("x"), ParagraphBlock([])])
        assert [b["type"] for b in result] == ["divider", "equation", "paragraph"]

    def test_unknown_block(self):
        with pytest.raises(TypeError):
            block_to_notion(PlainText("not a block"))


# =========================================================================
# Language normalization
# =========================================================================

class TestNormalizeLanguage:
    @pytest.mark.parametrize(("info", "expected"), [
        ("python", "python"),
        ("Python", "python"),
        ("py", "python"),
        ("python3", "python"),
        ("js", "javascript"),
        ("sh", "shell"),
        ("tex", "latex"),
        ("c++", "c++"),
        ("plain text", "plain text"),
        ("text", "plain text"),
        ("python title=x", "python"),
        ("klingon", "plain text"),
        ("", "plain text"),
    ])
    def test_mapping(self, info, expected):
        assert normalize_language(info) == expected
