"""Markdown-to-blocks conversion pipeline.

:func:`markdown_to_blocks` runs the two forward stages:

1. **Split** -- :func:`split_fences` separates fenced code from prose.
2. **Classify** -- each prose line goes through :func:`classify_line`;
   each code segment becomes one ``code`` block holding its raw body.

Conversion never fails: unrecognised syntax degrades to paragraphs and an
unterminated fence becomes a code block.
"""

from __future__ import annotations

from typing import Any

from notion_mcp.converter.fences import split_fences
from notion_mcp.converter.line_classifier import classify_line
from notion_mcp.models import DEFAULT_CODE_LANGUAGE, Block, BlockType, TextRun
from notion_mcp.observability import get_logger

log = get_logger("notion_mcp.converter")


def markdown_to_blocks(markdown: str) -> list[Block]:
    """Convert Markdown text to an ordered list of :class:`Block` values.

    Examples
    --------
    >>> [b.type.value for b in markdown_to_blocks("# Title\\n\\n- item")]
    ['heading_1', 'bulleted_list_item']
    """
    blocks: list[Block] = []

    for segment in split_fences(markdown):
        if segment.is_code:
            blocks.append(
                Block(
                    type=BlockType.CODE,
                    rich_text=(TextRun(segment.content),),
                    language=segment.language or DEFAULT_CODE_LANGUAGE,
                )
            )
            continue

        for line in segment.content.split("\n"):
            block = classify_line(line)
            if block is not None:
                blocks.append(block)

    return blocks


class MarkdownToNotionConverter:
    """Convert Markdown to Notion API block payloads.

    Thin wrapper over :func:`markdown_to_blocks` for the API layer, which
    needs wire dicts rather than :class:`Block` values.

    Examples
    --------
    >>> MarkdownToNotionConverter().convert("---")
    [{'object': 'block', 'type': 'divider', 'divider': {}}]
    """

    def convert(self, markdown: str) -> list[dict[str, Any]]:
        """Full pipeline: split fences -> classify lines -> serialise."""
        blocks = markdown_to_blocks(markdown)
        log.debug(
            "markdown converted",
            extra={
                "extra_fields": {
                    "op": "markdown_to_blocks",
                    "chars": len(markdown),
                    "blocks": len(blocks),
                }
            },
        )
        return [block.to_dict() for block in blocks]
