"""Shared test fixtures for the notion_mcp test suite."""

from __future__ import annotations

import pytest

from notion_mcp.config import NotionMcpConfig
from notion_mcp.converter.md_to_notion import MarkdownToNotionConverter
from notion_mcp.converter.notion_to_md import NotionToMarkdownRenderer


@pytest.fixture
def config() -> NotionMcpConfig:
    """Test configuration with a dummy token and no pacing or retry delays."""
    return NotionMcpConfig(
        token="test_token_1234",
        min_request_interval=0.0,
        retry_base_delay=0.0,
        retry_max_delay=0.0,
        retry_jitter=False,
    )


@pytest.fixture
def converter() -> MarkdownToNotionConverter:
    """Markdown-to-Notion converter."""
    return MarkdownToNotionConverter()


@pytest.fixture
def renderer() -> NotionToMarkdownRenderer:
    """Notion-to-Markdown renderer."""
    return NotionToMarkdownRenderer()
