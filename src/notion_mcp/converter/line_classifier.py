"""Classify a single prose line into at most one :class:`Block`.

Rules are tried top to bottom and the first match wins.  Longer markers
come before the shorter markers they contain (``###`` before ``##``
before ``#``; checkbox items before plain bullets).
"""

from __future__ import annotations

import re

from notion_mcp.converter.inline import parse_inline_formatting
from notion_mcp.models import Block, BlockType

# (prefix, block type), longest heading marker first.
_PREFIX_RULES: tuple[tuple[str, BlockType], ...] = (
    ("### ", BlockType.HEADING_3),
    ("## ", BlockType.HEADING_2),
    ("# ", BlockType.HEADING_1),
)

_TODO_RE = re.compile(r"^- \[([ xX])\] (.*)$")
_BULLET_PREFIXES = ("- ", "* ")
_NUMBERED_RE = re.compile(r"^\d+\.\s+(.+)$")
_QUOTE_PREFIX = "> "
_DIVIDERS = frozenset({"---", "***", "___"})


def _text_block(block_type: BlockType, content: str) -> Block:
    return Block(type=block_type, rich_text=tuple(parse_inline_formatting(content)))


def classify_line(line: str) -> Block | None:
    """Map one line of prose to a block, or ``None`` for a blank line.

    Leading and trailing whitespace is removed before classification.
    Source numbering of ordered items is discarded.
    """
    trimmed = line.strip()
    if not trimmed:
        return None

    for prefix, block_type in _PREFIX_RULES:
        if trimmed.startswith(prefix):
            return _text_block(block_type, trimmed[len(prefix):])

    todo = _TODO_RE.match(trimmed)
    if todo:
        block = _text_block(BlockType.TO_DO, todo.group(2))
        return Block(type=block.type, rich_text=block.rich_text, checked=todo.group(1) != " ")

    if trimmed.startswith(_BULLET_PREFIXES):
        return _text_block(BlockType.BULLETED_LIST_ITEM, trimmed[2:])

    numbered = _NUMBERED_RE.match(trimmed)
    if numbered:
        return _text_block(BlockType.NUMBERED_LIST_ITEM, numbered.group(1))

    if trimmed.startswith(_QUOTE_PREFIX):
        return _text_block(BlockType.QUOTE, trimmed[len(_QUOTE_PREFIX):])

    if trimmed in _DIVIDERS:
        return Block(type=BlockType.DIVIDER)

    return _text_block(BlockType.PARAGRAPH, trimmed)
