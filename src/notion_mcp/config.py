"""Configuration for the notion_mcp server and API client.

:class:`NotionMcpConfig` captures every tuneable knob of the HTTP layer
and the server.  The converter takes no configuration.

Build one directly for library use, or from the process environment for
the server::

    config = NotionMcpConfig.from_env()
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass

from notion_mcp.errors import NotionMcpConfigError

TOKEN_ENV_VAR = "NOTION_API_KEY"
LOG_LEVEL_ENV_VAR = "NOTION_MCP_LOG_LEVEL"
BASE_URL_ENV_VAR = "NOTION_MCP_BASE_URL"
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass
class NotionMcpConfig:
    """Complete configuration for a notion_mcp client.

    Parameters
    ----------
    token:
        Notion integration token.  Never logged.
    notion_version:
        Value of the ``Notion-Version`` header sent with every request.
    base_url:
        API root URL.  Override for proxy or testing environments.
    min_request_interval:
        Minimum delay in seconds between the starts of two consecutive
        requests.  The default paces the client at about three requests
        per second, Notion's documented average limit.
    retry_max_attempts:
        Maximum total attempts per request.  ``429`` and ``5xx`` are
        retried; network failures only when resending cannot duplicate a
        write (see :mod:`notion_mcp.notion_api.retries`).
    retry_base_delay:
        Base delay (seconds) for exponential backoff.
    retry_max_delay:
        Upper cap (seconds) on computed backoff delay.
    retry_jitter:
        Draw exponential backoff uniformly from its upper half.  Waits
        requested by ``Retry-After`` are never jittered.
    timeout_seconds:
        HTTP request timeout in seconds.
    http_proxy:
        Optional HTTP/HTTPS proxy URL.
    log_level:
        Level name for the ``notion_mcp`` logger hierarchy.
    """

    token: str = ""

    notion_version: str = "2022-06-28"

    base_url: str = "https://api.notion.com/v1"

    # ── Pacing & retry ─────────────────────────────────────────────────
    min_request_interval: float = 0.334

    retry_max_attempts: int = 3

    retry_base_delay: float = 1.0

    retry_max_delay: float = 30.0

    retry_jitter: bool = True

    # ── HTTP ────────────────────────────────────────────────────────────
    timeout_seconds: float = 30.0

    http_proxy: str | None = None

    # ── Observability ──────────────────────────────────────────────────
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        from urllib.parse import urlparse

        parsed = urlparse(self.base_url)
        if parsed.scheme == "http" and parsed.hostname not in (
            "localhost",
            "127.0.0.1",
            "::1",
        ):
            raise NotionMcpConfigError(
                f"base_url uses insecure HTTP for non-local host '{parsed.hostname}'. "
                "Use HTTPS to protect your API token, or target localhost for testing.",
                context={"field": "base_url"},
            )

        if self.min_request_interval < 0:
            raise NotionMcpConfigError(
                f"min_request_interval must be >= 0, got {self.min_request_interval}",
                context={"field": "min_request_interval"},
            )
        if self.retry_max_attempts < 1:
            raise NotionMcpConfigError(
                f"retry_max_attempts must be >= 1, got {self.retry_max_attempts}",
                context={"field": "retry_max_attempts"},
            )
        if self.retry_base_delay < 0:
            raise NotionMcpConfigError(
                f"retry_base_delay must be >= 0, got {self.retry_base_delay}",
                context={"field": "retry_base_delay"},
            )
        if self.retry_max_delay < 0:
            raise NotionMcpConfigError(
                f"retry_max_delay must be >= 0, got {self.retry_max_delay}",
                context={"field": "retry_max_delay"},
            )
        if self.timeout_seconds <= 0:
            raise NotionMcpConfigError(
                f"timeout_seconds must be > 0, got {self.timeout_seconds}",
                context={"field": "timeout_seconds"},
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise NotionMcpConfigError(
                f"log_level must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}",
                context={"field": "log_level"},
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> NotionMcpConfig:
        """Build a config from environment variables.

        Reads ``NOTION_API_KEY`` (required), ``NOTION_MCP_LOG_LEVEL`` and
        ``NOTION_MCP_BASE_URL``.

        Raises
        ------
        NotionMcpConfigError
            If ``NOTION_API_KEY`` is missing or empty.
        """
        env = os.environ if environ is None else environ
        token = env.get(TOKEN_ENV_VAR, "").strip()
        if not token:
            raise NotionMcpConfigError(
                f"{TOKEN_ENV_VAR} environment variable is required. "
                "Get your API key from https://www.notion.so/my-integrations",
                context={"field": TOKEN_ENV_VAR},
            )

        overrides: dict[str, str] = {}
        if env.get(LOG_LEVEL_ENV_VAR):
            overrides["log_level"] = env[LOG_LEVEL_ENV_VAR]
        if env.get(BASE_URL_ENV_VAR):
            overrides["base_url"] = env[BASE_URL_ENV_VAR]
        return cls(token=token, **overrides)

    def __repr__(self) -> str:
        """Mask the token to prevent accidental credential leakage."""
        parts: list[str] = []
        for f in dataclasses.fields(self):
            val = getattr(self, f.name)
            if f.name == "token":
                masked = f"...{val[-4:]}" if len(val) >= 4 else "****"
                parts.append(f"token='{masked}'")
            else:
                parts.append(f"{f.name}={val!r}")
        return f"NotionMcpConfig({', '.join(parts)})"
