"""notion_mcp.notion_api -- Notion API transport and endpoint wrappers.

This sub-package provides:

* :mod:`.rate_limit` -- Minimum-interval request pacing.
* :mod:`.retries` -- Retry policy for rate limits, server and network errors.
* :mod:`.transport` -- HTTP transport with auth, retries, and pacing.
* :mod:`.pages` -- Page API wrappers.
* :mod:`.blocks` -- Block API wrappers.
* :mod:`.databases` -- Database API wrappers.
* :mod:`.users` -- User API wrappers.
* :mod:`.search` -- Search API wrapper.
"""

from __future__ import annotations

from .blocks import AsyncBlockAPI, batch_children
from .databases import AsyncDatabaseAPI
from .pages import AsyncPageAPI
from .rate_limit import MinIntervalLimiter
from .retries import RetryPolicy
from .search import AsyncSearchAPI
from .transport import AsyncNotionTransport
from .users import AsyncUserAPI

__all__ = [
    "AsyncBlockAPI",
    "AsyncDatabaseAPI",
    "AsyncNotionTransport",
    "AsyncPageAPI",
    "AsyncSearchAPI",
    "AsyncUserAPI",
    "MinIntervalLimiter",
    "RetryPolicy",
    "batch_children",
]
