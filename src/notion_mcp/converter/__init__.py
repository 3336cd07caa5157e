"""Markdown <-> Notion block conversion.

Public API:

- :func:`markdown_to_blocks` -- Markdown -> :class:`~notion_mcp.models.Block` list.
- :func:`blocks_to_markdown` -- blocks -> Markdown.
- :func:`blocks_to_plain_text` -- blocks -> plain text.
- :func:`parse_inline_formatting` -- string -> :class:`~notion_mcp.models.TextRun` list.
"""

from notion_mcp.converter.inline import parse_inline_formatting
from notion_mcp.converter.md_to_notion import MarkdownToNotionConverter, markdown_to_blocks
from notion_mcp.converter.notion_to_md import (
    NotionToMarkdownRenderer,
    blocks_to_markdown,
    blocks_to_plain_text,
)

__all__ = [
    "MarkdownToNotionConverter",
    "NotionToMarkdownRenderer",
    "blocks_to_markdown",
    "blocks_to_plain_text",
    "markdown_to_blocks",
    "parse_inline_formatting",
]
