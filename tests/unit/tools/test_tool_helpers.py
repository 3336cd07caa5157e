"""Tests for tools/common.py helpers."""

from __future__ import annotations

import pytest

from notion_mcp.errors import NotionMcpNotFoundError, NotionMcpToolError
from notion_mcp.tools.common import (
    clamp_page_size,
    database_title,
    failure,
    optional_mapping,
    page_title,
    require_str,
    rich_text_plain,
    tool_handler,
)


class TestClampPageSize:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, 10), (0, 1), (-5, 1), (1, 1), (50, 50), (100, 100), (500, 100), ("20", 20), (7.9, 7)],
    )
    def test_clamping(self, value, expected):
        assert clamp_page_size(value, 10) == expected

    def test_non_numeric_raises(self):
        with pytest.raises(NotionMcpToolError, match="page_size"):
            clamp_page_size("many", 10)


class TestArguments:
    def test_require_str_returns_value(self):
        assert require_str({"page_id": "abc"}, "page_id") == "abc"

    @pytest.mark.parametrize("params", [{}, {"page_id": ""}, {"page_id": "  "}, {"page_id": 5}])
    def test_require_str_rejects_missing(self, params):
        with pytest.raises(NotionMcpToolError) as exc_info:
            require_str(params, "page_id")
        assert exc_info.value.context == {"argument": "page_id"}

    def test_optional_mapping_copies(self):
        original = {"a": 1}
        result = optional_mapping({"properties": original}, "properties")
        assert result == original
        assert result is not original

    def test_optional_mapping_none(self):
        assert optional_mapping({}, "properties") is None

    def test_optional_mapping_rejects_non_object(self):
        with pytest.raises(NotionMcpToolError):
            optional_mapping({"filter": [1]}, "filter")


class TestTitles:
    def test_rich_text_plain_prefers_plain_text(self):
        items = [{"plain_text": "a", "text": {"content": "x"}}, {"text": {"content": "b"}}]
        assert rich_text_plain(items) == "ab"

    def test_rich_text_plain_tolerates_junk(self):
        assert rich_text_plain(None) == ""
        assert rich_text_plain([None, {"plain_text": "ok"}]) == "ok"

    def test_page_title_from_title_property(self):
        page = {
            "properties": {
                "Status": {"type": "select", "select": None},
                "Task": {"type": "title", "title": [{"plain_text": "Write docs"}]},
            }
        }
        assert page_title(page) == "Write docs"

    def test_page_without_title_property(self):
        assert page_title({"properties": {}}) == "Untitled"
        assert page_title({}) == "Untitled"

    def test_database_title(self):
        assert database_title({"title": [{"plain_text": "Tasks"}]}) == "Tasks"
        assert database_title({"title": []}) == "Untitled"


class TestToolHandler:
    async def test_success_passes_through(self):
        @tool_handler("Failed")
        async def handler(client, params):
            return {"success": True}

        assert await handler(None, {}) == {"success": True}

    async def test_error_message_becomes_failure(self):
        @tool_handler("Failed to get page")
        async def handler(client, params):
            raise NotionMcpNotFoundError("Could not find page with ID: x")

        assert await handler(None, {}) == failure("Could not find page with ID: x")

    async def test_empty_message_uses_default(self):
        @tool_handler("Failed to get page")
        async def handler(client, params):
            raise NotionMcpNotFoundError("")

        assert await handler(None, {}) == {"success": False, "error": "Failed to get page"}

    async def test_other_exceptions_propagate(self):
        @tool_handler("Failed")
        async def handler(client, params):
            raise KeyError("bug")

        with pytest.raises(KeyError):
            await handler(None, {})
