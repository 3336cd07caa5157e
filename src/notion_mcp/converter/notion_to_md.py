"""Block list to Markdown and plain-text rendering.

Input may be :class:`Block` values or loosely-shaped Notion block dicts
as returned by the API.  Every record is first read with
:meth:`Block.from_record`; anything that cannot be read is skipped, so
rendering never raises.

Usage::

    from notion_mcp.converter.notion_to_md import blocks_to_markdown

    md = blocks_to_markdown(api_response["results"])
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from notion_mcp.models import DEFAULT_CODE_LANGUAGE, Block, BlockType

from .inline_renderer import render_rich_text

BLOCK_SEPARATOR = "\n\n"


class NotionToMarkdownRenderer:
    """Render blocks to Markdown, one fragment per block.

    Dispatch goes through :data:`_BLOCK_RENDERERS`, keyed by
    :class:`BlockType`.  Blocks of any other type take the unknown-variant
    arm, which renders their ``rich_text`` payload without a prefix.
    A text-bearing block whose payload could not be read contributes
    nothing.
    """

    def render_blocks(self, blocks: Iterable[Block | dict[str, Any]]) -> str:
        """Render *blocks* to Markdown separated by blank lines."""
        parts: list[str] = []
        for record in blocks or ():
            fragment = self.render_block(record)
            if fragment is not None:
                parts.append(fragment)
        return BLOCK_SEPARATOR.join(parts)

    def render_block(self, record: Block | dict[str, Any]) -> str | None:
        """Render one block, or return ``None`` if it contributes nothing."""
        block = Block.from_record(record)
        if block is None:
            return None

        block_type = block.known_type
        if block_type is None:
            return self._render_unknown(block)
        return _BLOCK_RENDERERS[block_type](self, block)

    # ------------------------------------------------------------------
    # Block type renderers
    # ------------------------------------------------------------------

    def _render_prefixed(self, block: Block, prefix: str) -> str | None:
        if block.rich_text is None:
            return None
        return prefix + render_rich_text(block.rich_text)

    def _render_heading_1(self, block: Block) -> str | None:
        return self._render_prefixed(block, "# ")

    def _render_heading_2(self, block: Block) -> str | None:
        return self._render_prefixed(block, "## ")

    def _render_heading_3(self, block: Block) -> str | None:
        return self._render_prefixed(block, "### ")

    def _render_paragraph(self, block: Block) -> str | None:
        return self._render_prefixed(block, "")

    def _render_bulleted_list_item(self, block: Block) -> str | None:
        return self._render_prefixed(block, "- ")

    def _render_numbered_list_item(self, block: Block) -> str | None:
        # Numbering is not reconstructed from position.
        return self._render_prefixed(block, "1. ")

    def _render_to_do(self, block: Block) -> str | None:
        checkbox = "[x]" if block.checked else "[ ]"
        return self._render_prefixed(block, f"- {checkbox} ")

    def _render_quote(self, block: Block) -> str | None:
        return self._render_prefixed(block, "> ")

    def _render_code(self, block: Block) -> str | None:
        if block.rich_text is None:
            return None
        language = block.language or ""
        # Untagged fences are stored as "plain text"; render those bare so
        # they convert back to the same block.
        if language == DEFAULT_CODE_LANGUAGE:
            language = ""
        return f"```{language}\n{block.plain_text}\n```"

    def _render_divider(self, block: Block) -> str | None:
        return "---"

    def _render_unknown(self, block: Block) -> str | None:
        if block.rich_text is None:
            return None
        return render_rich_text(block.rich_text)


_BLOCK_RENDERERS: dict[BlockType, Callable[[NotionToMarkdownRenderer, Block], str | None]] = {
    BlockType.HEADING_1: NotionToMarkdownRenderer._render_heading_1,
    BlockType.HEADING_2: NotionToMarkdownRenderer._render_heading_2,
    BlockType.HEADING_3: NotionToMarkdownRenderer._render_heading_3,
    BlockType.PARAGRAPH: NotionToMarkdownRenderer._render_paragraph,
    BlockType.BULLETED_LIST_ITEM: NotionToMarkdownRenderer._render_bulleted_list_item,
    BlockType.NUMBERED_LIST_ITEM: NotionToMarkdownRenderer._render_numbered_list_item,
    BlockType.TO_DO: NotionToMarkdownRenderer._render_to_do,
    BlockType.QUOTE: NotionToMarkdownRenderer._render_quote,
    BlockType.CODE: NotionToMarkdownRenderer._render_code,
    BlockType.DIVIDER: NotionToMarkdownRenderer._render_divider,
}


def blocks_to_markdown(blocks: Iterable[Block | dict[str, Any]]) -> str:
    """Render *blocks* to Markdown, separating blocks with a blank line."""
    return NotionToMarkdownRenderer().render_blocks(blocks)


def blocks_to_plain_text(blocks: Iterable[Block | dict[str, Any]]) -> str:
    """Flatten *blocks* to plain text, one line per non-empty block.

    Annotations, links and block semantics are dropped.  Blocks without a
    readable ``rich_text`` payload contribute nothing.
    """
    lines: list[str] = []
    for record in blocks or ():
        block = Block.from_record(record)
        if block is None or block.rich_text is None:
            continue
        text = block.plain_text
        if text:
            lines.append(text)
    return "\n".join(lines)
