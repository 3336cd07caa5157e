"""Unit tests for inline_renderer.py.

Covers annotation wrapping order, link wrapping, and reading raw Notion
rich_text dicts.
"""

from __future__ import annotations

import pytest

from notion_mcp.converter.inline_renderer import render_rich_text, render_run
from notion_mcp.models import Annotation, TextRun


def _run(content: str, *annotations: Annotation, link: str | None = None) -> TextRun:
    return TextRun(content, frozenset(annotations), link)


# =========================================================================
# render_run
# =========================================================================

class TestRenderRun:
    def test_plain(self):
        assert render_run(_run("hi")) == "hi"

    @pytest.mark.parametrize(
        ("annotation", "expected"),
        [
            (Annotation.BOLD, "**x**"),
            (Annotation.ITALIC, "*x*"),
            (Annotation.STRIKETHROUGH, "~~x~~"),
            (Annotation.CODE, "`x`"),
        ],
    )
    def test_single_annotation(self, annotation, expected):
        assert render_run(_run("x", annotation)) == expected

    def test_link(self):
        assert render_run(_run("site", link="https://a.b")) == "[site](https://a.b)"

    def test_bold_italic_nesting_order(self):
        assert render_run(_run("x", Annotation.BOLD, Annotation.ITALIC)) == "***x***"

    def test_code_is_innermost(self):
        assert render_run(_run("x", Annotation.CODE, Annotation.BOLD)) == "**`x`**"

    def test_strikethrough_is_outermost_annotation(self):
        run = _run("x", Annotation.STRIKETHROUGH, Annotation.ITALIC)
        assert render_run(run) == "~~*x*~~"

    def test_link_wraps_annotations(self):
        run = _run("x", Annotation.BOLD, link="https://a.b")
        assert render_run(run) == "[**x**](https://a.b)"

    def test_content_is_not_escaped(self):
        assert render_run(_run("a*b_c[d]")) == "a*b_c[d]"


# =========================================================================
# render_rich_text
# =========================================================================

class TestRenderRichText:
    def test_none_renders_empty(self):
        assert render_rich_text(None) == ""

    def test_empty_list_renders_empty(self):
        assert render_rich_text([]) == ""

    def test_runs_are_concatenated(self):
        runs = [_run("a "), _run("b", Annotation.BOLD), _run(" c")]
        assert render_rich_text(runs) == "a **b** c"

    def test_api_dict_with_plain_text(self):
        segment = {
            "type": "text",
            "plain_text": "hello",
            "annotations": {"bold": False, "italic": True, "underline": True},
            "href": None,
        }
        assert render_rich_text([segment]) == "*hello*"

    def test_api_dict_with_href(self):
        segment = {"type": "mention", "plain_text": "Page", "href": "https://n.so/p"}
        assert render_rich_text([segment]) == "[Page](https://n.so/p)"

    def test_local_payload_dict(self):
        segment = {"type": "text", "text": {"content": "x", "link": {"url": "u"}}}
        assert render_rich_text([segment]) == "[x](u)"

    def test_non_mapping_entries_are_skipped(self):
        assert render_rich_text([None, "junk", {"plain_text": "ok"}]) == "ok"

    def test_unsupported_annotations_ignored(self):
        segment = {"plain_text": "c", "annotations": {"color": "red", "underline": True}}
        assert render_rich_text([segment]) == "c"
