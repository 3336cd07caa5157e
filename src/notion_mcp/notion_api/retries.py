"""When a failed Notion request is sent again, and after how long.

Tool calls write to a user's workspace, so a resend must never duplicate
a write: network failures are retried only when the request provably
never reached Notion, or when the method is idempotent.  ``429`` waits
exactly as long as Notion's ``Retry-After`` asks; ``5xx`` backs off
exponentially.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

import httpx

from notion_mcp.config import NotionMcpConfig

RATE_LIMITED_STATUS = 429

IDEMPOTENT_METHODS = frozenset({"GET", "DELETE"})

# Failures raised before any byte of the request was sent.
UNSENT_ERRORS: tuple[type[Exception], ...] = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.PoolTimeout,
)

TRANSIENT_ERRORS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
)


def parse_retry_after(value: str | None) -> float | None:
    """Read a ``Retry-After`` header given in seconds; ``None`` if absent or unreadable."""
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return max(seconds, 0.0)


@dataclass(frozen=True)
class RetryPolicy:
    """Retry decisions for one transport.

    Parameters
    ----------
    max_attempts:
        Total attempts per request, the first one included.
    base_delay:
        Backoff before the second attempt; doubles on each further attempt.
    max_delay:
        Upper bound for any single wait, ``Retry-After`` included.
    jitter:
        Draw exponential backoff uniformly from its upper half.
    """

    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    jitter: bool = True

    @classmethod
    def from_config(cls, config: NotionMcpConfig) -> RetryPolicy:
        return cls(
            max_attempts=config.retry_max_attempts,
            base_delay=config.retry_base_delay,
            max_delay=config.retry_max_delay,
            jitter=config.retry_jitter,
        )

    def has_attempts_left(self, attempt: int) -> bool:
        """Whether another try may follow the 0-indexed *attempt*."""
        return attempt + 1 < self.max_attempts

    def retries_status(self, status: int) -> bool:
        return status == RATE_LIMITED_STATUS or status >= 500

    def retries_error(self, method: str, exc: Exception) -> bool:
        if isinstance(exc, UNSENT_ERRORS):
            return True
        return method.upper() in IDEMPOTENT_METHODS and isinstance(exc, TRANSIENT_ERRORS)

    def delay(self, attempt: int, retry_after: float | None = None) -> float:
        """Seconds to wait after the failed 0-indexed *attempt*.

        A ``Retry-After`` value is honoured exactly, capped at
        ``max_delay``.
        """
        if retry_after is not None:
            return min(retry_after, self.max_delay)
        delay = min(self.base_delay * 2 ** attempt, self.max_delay)
        if self.jitter:
            delay = random.uniform(delay / 2, delay)
        return delay
