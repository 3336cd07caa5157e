"""Fixtures for tool handler tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def client() -> MagicMock:
    """A stand-in for AsyncNotionClient whose endpoint methods are AsyncMocks."""
    c = MagicMock()
    for api, methods in {
        "pages": ("create", "retrieve", "update"),
        "blocks": ("retrieve", "update", "delete", "get_children", "append_children"),
        "databases": ("retrieve", "query", "create"),
        "users": ("list", "retrieve"),
        "search": ("search",),
    }.items():
        for method in methods:
            setattr(getattr(c, api), method, AsyncMock())
    return c
