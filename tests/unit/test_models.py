"""Tests for TextRun and Block wire (de)serialisation."""

from __future__ import annotations

from notion_mcp.models import (
    DEFAULT_CODE_LANGUAGE,
    Annotation,
    Block,
    BlockType,
    TextRun,
    runs_to_dicts,
)

# ---------------------------------------------------------------------------
# TextRun
# ---------------------------------------------------------------------------

class TestTextRunToDict:
    def test_plain_run(self):
        assert TextRun("x").to_dict() == {
            "type": "text",
            "text": {"content": "x", "link": None},
        }

    def test_annotated_run_lists_all_annotation_keys(self):
        run = TextRun("x", frozenset({Annotation.ITALIC, Annotation.CODE}))
        assert run.to_dict()["annotations"] == {
            "bold": False,
            "italic": True,
            "strikethrough": False,
            "code": True,
        }

    def test_link(self):
        assert TextRun("x", link="https://a").to_dict()["text"]["link"] == {"url": "https://a"}

    def test_runs_to_dicts(self):
        assert runs_to_dicts([TextRun("a"), TextRun("b")]) == [
            TextRun("a").to_dict(),
            TextRun("b").to_dict(),
        ]


class TestTextRunFromRecord:
    def test_passes_through_run(self):
        run = TextRun("a")
        assert TextRun.from_record(run) is run

    def test_non_mapping_is_none(self):
        assert TextRun.from_record(None) is None
        assert TextRun.from_record(["x"]) is None

    def test_text_content_preferred(self):
        record = {"text": {"content": "local"}, "plain_text": "api"}
        assert TextRun.from_record(record).content == "local"

    def test_plain_text_fallback(self):
        assert TextRun.from_record({"type": "mention", "plain_text": "@Ann"}).content == "@Ann"

    def test_missing_content_is_empty(self):
        assert TextRun.from_record({}) == TextRun("")

    def test_truthy_supported_annotations_only(self):
        record = {
            "plain_text": "x",
            "annotations": {"bold": True, "italic": False, "underline": True, "color": "red"},
        }
        assert TextRun.from_record(record).annotations == frozenset({Annotation.BOLD})

    def test_link_from_text(self):
        record = {"text": {"content": "x", "link": {"url": "https://a"}}}
        assert TextRun.from_record(record).link == "https://a"

    def test_link_from_href(self):
        assert TextRun.from_record({"plain_text": "x", "href": "https://b"}).link == "https://b"

    def test_null_link(self):
        record = {"text": {"content": "x", "link": None}, "href": None}
        assert TextRun.from_record(record).link is None


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------

class TestBlockToDict:
    def test_paragraph(self):
        block = Block(BlockType.PARAGRAPH, (TextRun("p"),))
        assert block.to_dict() == {
            "object": "block",
            "type": "paragraph",
            "paragraph": {"rich_text": [{"type": "text", "text": {"content": "p", "link": None}}]},
        }

    def test_divider(self):
        assert Block(BlockType.DIVIDER).to_dict() == {
            "object": "block",
            "type": "divider",
            "divider": {},
        }

    def test_todo_checked_defaults_false(self):
        block = Block(BlockType.TO_DO, (TextRun("t"),))
        assert block.to_dict()["to_do"]["checked"] is False

    def test_code_language_default(self):
        block = Block(BlockType.CODE, (TextRun("c"),))
        assert block.to_dict()["code"]["language"] == DEFAULT_CODE_LANGUAGE

    def test_unknown_type_string(self):
        block = Block("callout", (TextRun("c"),))
        assert block.to_dict()["type"] == "callout"
        assert block.known_type is None


class TestBlockFromRecord:
    def test_passes_through_block(self):
        block = Block(BlockType.DIVIDER)
        assert Block.from_record(block) is block

    def test_non_mapping_is_none(self):
        assert Block.from_record("paragraph") is None

    def test_missing_or_empty_type_is_none(self):
        assert Block.from_record({}) is None
        assert Block.from_record({"type": ""}) is None
        assert Block.from_record({"type": 3}) is None

    def test_known_type_is_enum(self):
        block = Block.from_record({"type": "quote", "quote": {"rich_text": []}})
        assert block.type is BlockType.QUOTE
        assert block.rich_text == ()

    def test_unknown_type_kept_as_string(self):
        block = Block.from_record({"type": "toggle", "toggle": {"rich_text": []}})
        assert block.type == "toggle"
        assert block.known_type is None

    def test_non_mapping_payload_has_no_text(self):
        assert Block.from_record({"type": "paragraph", "paragraph": None}) == Block(
            BlockType.PARAGRAPH
        )

    def test_non_list_rich_text_is_unset(self):
        block = Block.from_record({"type": "paragraph", "paragraph": {"rich_text": "x"}})
        assert block.rich_text is None

    def test_non_mapping_runs_skipped(self):
        record = {"type": "paragraph", "paragraph": {"rich_text": [1, {"plain_text": "a"}]}}
        assert Block.from_record(record).rich_text == (TextRun("a"),)

    def test_checked_and_language(self):
        todo = Block.from_record({"type": "to_do", "to_do": {"rich_text": [], "checked": 1}})
        code = Block.from_record({"type": "code", "code": {"rich_text": [], "language": "go"}})
        assert todo.checked is True
        assert code.language == "go"

    def test_non_string_language_ignored(self):
        code = Block.from_record({"type": "code", "code": {"rich_text": [], "language": 7}})
        assert code.language is None

    def test_to_dict_round_trip(self):
        block = Block(BlockType.TO_DO, (TextRun("x", frozenset({Annotation.BOLD})),), checked=True)
        assert Block.from_record(block.to_dict()) == block

    def test_plain_text(self):
        block = Block(BlockType.PARAGRAPH, (TextRun("a"), TextRun("b", link="u")))
        assert block.plain_text == "ab"
        assert Block(BlockType.DIVIDER).plain_text == ""
