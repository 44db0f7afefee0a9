"""Tests for the line-based block scanner."""

from __future__ import annotations

import pytest

from mdnotion.converter.block_scanner import scan, split_lines
from mdnotion.models import (
    AnnotatedText,
    BulletItemBlock,
    CodeBlock,
    DividerBlock,
    EquationBlock,
    HeadingBlock,
    InlineEquation,
    NumberedItemBlock,
    ParagraphBlock,
    PlainText,
    QuoteBlock,
)


def para(text):
    return ParagraphBlock([PlainText(text)])


# =========================================================================
# Line splitting
# =========================================================================

class TestSplitLines:
    def test_empty_document(self):
        assert split_lines("") == []

    def test_trailing_newline_dropped(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_crlf(self):
        assert split_lines("a\r\nb") == ["a", "b"]

    def test_inner_blank_lines_kept(self):
        assert split_lines("a\n\nb") == ["a", "", "b"]


# =========================================================================
# Paragraphs and blank lines
# =========================================================================

class TestParagraphs:
    def test_one_paragraph_per_line(self):
        assert scan("first\nsecond\nthird") == [para("first"), para("second"), para("third")]

    def test_lines_are_trimmed(self):
        assert scan("   indented text   ") == [para("indented text")]

    def test_empty_document(self):
        assert scan("") == []

    def test_blank_line_becomes_empty_paragraph(self):
        assert scan("a\n\nb") == [para("a"), ParagraphBlock([]), para("b")]

    def test_whitespace_only_line_is_blank(self):
        assert scan("a\n   \nb") == [para("a"), ParagraphBlock([]), para("b")]

    def test_blank_lines_skipped(self):
        assert scan("a\n\n\nb", blank_lines="skip") == [para("a"), para("b")]

    def test_inline_formatting_in_paragraph(self):
        assert scan("**hi** there") == [
            ParagraphBlock([AnnotatedText("hi", bold=True), PlainText(" there")]),
        ]


# =========================================================================
# Headings
# =========================================================================

class TestHeadings:
    @pytest.mark.parametrize(("line", "level"), [
        ("# One", 1),
        ("## Two", 2),
        ("### Three", 3),
        ("#### Four", 3),
        ("###### Six", 3),
    ])
    def test_levels(self, line, level):
        (block,) = scan(line)
        assert isinstance(block, HeadingBlock)
        assert block.level == level
        assert block.text == [PlainText(line.lstrip("# "))]

    def test_no_space_after_hashes(self):
        assert scan("#Title") == [HeadingBlock(1, [PlainText("Title")])]

    def test_heading_with_math(self):
        assert scan("## Area $\\pi r^2$") == [
            HeadingBlock(2, [PlainText("Area "), InlineEquation("\\pi r^2")]),
        ]

    def test_bare_hash(self):
        assert scan("#") == [HeadingBlock(1, [])]


# =========================================================================
# Lists and quotes
# =========================================================================

class TestListsAndQuotes:
    def test_dash_bullet(self):
        assert scan("- item") == [BulletItemBlock([PlainText("item")])]

    def test_star_bullet(self):
        assert scan("* item") == [BulletItemBlock([PlainText("item")])]

    def test_bullet_with_formatting(self):
        assert scan("- **bold** item") == [
            BulletItemBlock([AnnotatedText("bold", bold=True), PlainText(" item")]),
        ]

    def test_numbered_items_drop_their_numbers(self):
        assert scan("1. one\n2. two\n10.  ten") == [
            NumberedItemBlock([PlainText("one")]),
            NumberedItemBlock([PlainText("two")]),
            NumberedItemBlock([PlainText("ten")]),
        ]

    def test_decimal_is_not_a_list(self):
        assert scan("1.5 apples") == [para("1.5 apples")]

    def test_quote(self):
        assert scan("> wise words") == [QuoteBlock([PlainText("wise words")])]

    def test_quote_needs_space(self):
        assert scan(">tight") == [para(">tight")]

    def test_indented_bullet_is_flat(self):
        assert scan("  - nested") == [BulletItemBlock([PlainText("nested")])]


# =========================================================================
# Dividers
# =========================================================================

class TestDividers:
    @pytest.mark.parametrize("line", ["---", "***", "___", "  ---  "])
    def test_divider(self, line):
        assert scan(line) == [DividerBlock()]

    def test_longer_rule_is_paragraph(self):
        assert scan("----") == [para("----")]

    def test_star_divider_is_not_bullet(self):
        assert scan("***\n* x") == [DividerBlock(), BulletItemBlock([PlainText("x")])]


# =========================================================================
# Fenced code
# =========================================================================

class TestCode:
    def test_fenced_python(self):
        assert scan("```python\nx = 1\n```") == [CodeBlock("x = 1", "python")]

    def test_default_language(self):
        assert scan("```\nraw\n```") == [CodeBlock("raw", "plain text")]

    def test_content_is_verbatim(self):
        doc = "```\n# not a heading\n  - not a list\n\n$$\n```"
        assert scan(doc) == [CodeBlock("# not a heading\n  - not a list\n\n$$")]

    def test_unterminated_fence_takes_rest_of_document(self):
        assert scan("```js\na\n  b") == [CodeBlock("a\n  b", "js")]

    def test_empty_fence(self):
        assert scan("```\n```") == [CodeBlock("")]

    def test_closing_fence_is_consumed(self):
        assert scan("```\nx\n```\nafter") == [CodeBlock("x"), para("after")]

    def test_indented_closing_fence(self):
        assert scan("```sh\nls\n   ```") == [CodeBlock("ls", "sh")]


# =========================================================================
# Display math
# =========================================================================

class TestDisplayMath:
    def test_multiline(self):
        assert scan("$$\nE=mc^2\n$$") == [EquationBlock("E=mc^2")]

    def test_single_line(self):
        assert scan("$$E=mc^2$$") == [EquationBlock("E=mc^2")]

    def test_single_line_trimmed(self):
        assert scan("   $$ a + b $$   ") == [EquationBlock("a + b")]

    def test_content_on_fence_lines(self):
        assert scan("$$ a\n+ b\nc $$") == [EquationBlock("a\n+ b\nc")]

    def test_inner_indentation_kept(self):
        assert scan("$$\n  a\n  b\n$$") == [EquationBlock("a\n  b")]

    def test_unterminated_equation(self):
        assert scan("$$\nx\ny") == [EquationBlock("x\ny")]

    def test_empty_equation_emits_nothing(self):
        assert scan("$$$$") == []
        assert scan("$$\n$$") == []

    def test_equation_then_text(self):
        assert scan("$$\nx\n$$\ntext") == [EquationBlock("x"), para("text")]

    def test_math_before_code_in_dispatch_order(self):
        assert scan("$$\n```\n$$") == [EquationBlock("```")]


# =========================================================================
# Whole documents
# =========================================================================

class TestDocument:
    def test_mixed_document(self):
        doc = "\n".join([
            "# Notes",
            "Energy is $E=mc^2$.",
            "",
            "$$",
            "\\int_0^1 x\\,dx = \\frac{1}{2}",
            "$$",
            "- first",
            "1. step",
            "> quoted",
            "---",
            "```python",
            "print('hi')",
            "```",
        ])
        assert scan(doc) == [
            HeadingBlock(1, [PlainText("Notes")]),
            ParagraphBlock([
                PlainText("Energy is "), InlineEquation("E=mc^2"), PlainText("."),
            ]),
            ParagraphBlock([]),
            EquationBlock("\\int_0^1 x\\,dx = \\frac{1}{2}"),
            BulletItemBlock([PlainText("first")]),
            NumberedItemBlock([PlainText("step")]),
            QuoteBlock([PlainText("quoted")]),
            DividerBlock(),
            CodeBlock("print('hi')", "python"),
        ]

    def test_crlf_document(self):
        assert scan("# A\r\nb\r\n") == [HeadingBlock(1, [PlainText("A")]), para("b")]
