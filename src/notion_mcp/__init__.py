"""notion_mcp — Notion tools for MCP clients, with a Markdown/block converter.

Public re-exports
-----------------

* **Client:** :class:`AsyncNotionClient`
* **Configuration:** :class:`NotionMcpConfig`
* **Converter:** :func:`markdown_to_blocks`, :func:`blocks_to_markdown`,
  :func:`blocks_to_plain_text`, :func:`parse_inline_formatting`
* **Errors:** Every :class:`NotionMcpError` subclass and :class:`ErrorCode`
* **Models:** :class:`Block`, :class:`TextRun` and their enums

Usage::

    from notion_mcp import blocks_to_markdown, markdown_to_blocks

    blocks = markdown_to_blocks("# Hello\\n\\n- **bold** item")
    assert blocks_to_markdown(blocks) == "# Hello\\n\\n- **bold** item"
"""

from __future__ import annotations

# ── Client ──────────────────────────────────────────────────────────────
from notion_mcp.async_client import AsyncNotionClient

# ── Configuration ───────────────────────────────────────────────────────
from notion_mcp.config import NotionMcpConfig

# ── Converter ───────────────────────────────────────────────────────────
from notion_mcp.converter import (
    MarkdownToNotionConverter,
    NotionToMarkdownRenderer,
    blocks_to_markdown,
    blocks_to_plain_text,
    markdown_to_blocks,
    parse_inline_formatting,
)

# ── Errors ──────────────────────────────────────────────────────────────
from notion_mcp.errors import (
    ErrorCode,
    NotionMcpAuthError,
    NotionMcpConfigError,
    NotionMcpConflictError,
    NotionMcpError,
    NotionMcpNetworkError,
    NotionMcpNotFoundError,
    NotionMcpPermissionError,
    NotionMcpRateLimitError,
    NotionMcpRetryExhaustedError,
    NotionMcpToolError,
    NotionMcpValidationError,
)

# ── Models ──────────────────────────────────────────────────────────────
from notion_mcp.models import Annotation, Block, BlockType, TextRun

# ── Utilities ───────────────────────────────────────────────────────────
from notion_mcp.utils import extract_notion_id

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Client
    "AsyncNotionClient",
    # Configuration
    "NotionMcpConfig",
    # Converter
    "MarkdownToNotionConverter",
    "NotionToMarkdownRenderer",
    "markdown_to_blocks",
    "blocks_to_markdown",
    "blocks_to_plain_text",
    "parse_inline_formatting",
    # Error base + code enum
    "NotionMcpError",
    "ErrorCode",
    # API / transport errors
    "NotionMcpValidationError",
    "NotionMcpAuthError",
    "NotionMcpPermissionError",
    "NotionMcpNotFoundError",
    "NotionMcpConflictError",
    "NotionMcpRateLimitError",
    "NotionMcpRetryExhaustedError",
    "NotionMcpNetworkError",
    # Configuration / tool errors
    "NotionMcpConfigError",
    "NotionMcpToolError",
    # Models
    "Annotation",
    "Block",
    "BlockType",
    "TextRun",
    # Utilities
    "extract_notion_id",
]
