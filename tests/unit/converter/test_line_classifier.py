"""Tests for classify_line."""

from __future__ import annotations

import pytest

from notion_mcp.converter.line_classifier import classify_line
from notion_mcp.models import Annotation, Block, BlockType, TextRun


class TestBlankLines:
    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t "])
    def test_blank_line_yields_none(self, line):
        assert classify_line(line) is None


class TestHeadings:
    @pytest.mark.parametrize(
        ("line", "block_type", "text"),
        [
            ("# Title", BlockType.HEADING_1, "Title"),
            ("## Section", BlockType.HEADING_2, "Section"),
            ("### Sub", BlockType.HEADING_3, "Sub"),
        ],
    )
    def test_heading_levels(self, line, block_type, text):
        block = classify_line(line)
        assert block.type is block_type
        assert block.plain_text == text

    def test_level_four_is_paragraph(self):
        block = classify_line("#### Deep")
        assert block.type is BlockType.PARAGRAPH
        assert block.plain_text == "#### Deep"

    def test_hash_without_space_is_paragraph(self):
        block = classify_line("#hashtag")
        assert block.type is BlockType.PARAGRAPH

    def test_heading_text_is_inline_parsed(self):
        block = classify_line("# A **bold** title")
        assert block.rich_text == (
            TextRun("A "),
            TextRun("bold", frozenset({Annotation.BOLD})),
            TextRun(" title"),
        )


class TestListItems:
    def test_dash_bullet(self):
        block = classify_line("- item")
        assert block == Block(BlockType.BULLETED_LIST_ITEM, (TextRun("item"),))

    def test_star_bullet(self):
        assert classify_line("* item").type is BlockType.BULLETED_LIST_ITEM

    def test_numbered_item_discards_number(self):
        block = classify_line("42. answer")
        assert block.type is BlockType.NUMBERED_LIST_ITEM
        assert block.plain_text == "answer"

    def test_number_without_space_is_paragraph(self):
        assert classify_line("3.14").type is BlockType.PARAGRAPH

    def test_indented_item_is_trimmed(self):
        block = classify_line("    - nested")
        assert block.type is BlockType.BULLETED_LIST_ITEM
        assert block.plain_text == "nested"


class TestTodos:
    def test_unchecked(self):
        block = classify_line("- [ ] write tests")
        assert block.type is BlockType.TO_DO
        assert block.checked is False
        assert block.plain_text == "write tests"

    def test_checked_lowercase(self):
        block = classify_line("- [x] done")
        assert block.type is BlockType.TO_DO
        assert block.checked is True

    def test_checked_uppercase(self):
        assert classify_line("- [X] done").checked is True

    def test_todo_takes_precedence_over_bullet(self):
        assert classify_line("- [ ] task").type is not BlockType.BULLETED_LIST_ITEM

    def test_star_checkbox_is_a_bullet(self):
        block = classify_line("* [ ] task")
        assert block.type is BlockType.BULLETED_LIST_ITEM
        assert block.plain_text == "[ ] task"


class TestOtherBlocks:
    def test_quote(self):
        block = classify_line("> wisdom")
        assert block.type is BlockType.QUOTE
        assert block.plain_text == "wisdom"

    @pytest.mark.parametrize("line", ["---", "***", "___", "  ---  "])
    def test_dividers(self, line):
        assert classify_line(line) == Block(BlockType.DIVIDER)

    def test_longer_rule_is_paragraph(self):
        assert classify_line("----").type is BlockType.PARAGRAPH

    def test_paragraph_is_trimmed(self):
        block = classify_line("  hello there  ")
        assert block.type is BlockType.PARAGRAPH
        assert block.plain_text == "hello there"

    def test_quote_without_space_is_paragraph(self):
        assert classify_line(">no space").type is BlockType.PARAGRAPH
