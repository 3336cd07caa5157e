"""Async HTTP transport for the Notion API.

Request lifecycle:

1. Wait for the pacing limiter (minimum interval between requests).
2. Send the HTTP request with auth and version headers.
3. On ``2xx`` -- return the parsed JSON response.
4. On ``429`` / ``5xx`` / network error -- ask the :class:`RetryPolicy`
   whether and how long to wait, then resend.
5. Otherwise raise the error for the status (:func:`error_for_status`).
   When attempts run out, ``429`` raises :class:`NotionMcpRateLimitError`
   and ``5xx`` raises :class:`NotionMcpRetryExhaustedError`.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

import httpx

from notion_mcp.config import NotionMcpConfig
from notion_mcp.errors import (
    NotionMcpError,
    NotionMcpNetworkError,
    NotionMcpRetryExhaustedError,
    NotionMcpValidationError,
    error_for_status,
)
from notion_mcp.observability import get_logger

from .rate_limit import MinIntervalLimiter
from .retries import RATE_LIMITED_STATUS, RetryPolicy, parse_retry_after

log = get_logger("notion_mcp.transport")

PAGE_SIZE = 100


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error_from_response(
    response: httpx.Response,
    method: str,
    path: str,
    **context: Any,
) -> NotionMcpError:
    """Build the error for a non-2xx *response*.

    The Notion error ``message`` becomes the exception message so that it
    reaches tool callers unchanged; the HTTP status is used when the body
    carries none.
    """
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    status = response.status_code
    message = body.get("message") or f"HTTP {status}: {response.reason_phrase}"
    return error_for_status(
        status,
        message,
        {
            "notion_code": body.get("code", ""),
            "operation": f"{method} {path}",
            "path": path,
            **context,
        },
    )


def _decode_body(response: httpx.Response, method: str, path: str) -> dict[str, Any]:
    if response.status_code == 204 or not response.content:
        return {}
    try:
        data = response.json()
    except ValueError as exc:
        raise NotionMcpValidationError(
            message=f"Invalid JSON in response to {method} {path}",
            context={"status_code": response.status_code},
            cause=exc,
        ) from exc
    return data if isinstance(data, dict) else {"results": data}


# ---------------------------------------------------------------------------
# Async transport
# ---------------------------------------------------------------------------

class AsyncNotionTransport:
    """Asynchronous HTTP transport with auth, pacing, and retries.

    Parameters
    ----------
    config:
        A :class:`NotionMcpConfig` controlling all transport behaviour.
    """

    def __init__(self, config: NotionMcpConfig) -> None:
        self._config = config
        self._limiter = MinIntervalLimiter(config.min_request_interval)
        self._policy = RetryPolicy.from_config(config)

        proxy: httpx.URL | str | None = config.http_proxy
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "Authorization": f"Bearer {config.token}",
                "Notion-Version": config.notion_version,
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(config.timeout_seconds),
            proxy=proxy,
        )

    # -- public API --------------------------------------------------------

    async def request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """Execute an HTTP request against the Notion API.

        Parameters
        ----------
        method:
            HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
        path:
            API path relative to ``base_url`` (e.g. ``/pages``).
        **kwargs:
            Forwarded to :meth:`httpx.AsyncClient.request`; use ``json=``
            for bodies and ``params=`` for query strings.

        Returns
        -------
        dict
            Parsed JSON response body (``{}`` for empty responses).

        Raises
        ------
        NotionMcpError
            The subclass matching the final HTTP status (see
            :func:`~notion_mcp.errors.error_for_status`).
        NotionMcpRetryExhaustedError
            When every attempt ended in a 5xx.
        NotionMcpNetworkError
            On a transport-level failure that is not, or no longer, retried.
        """
        policy = self._policy
        attempt = 0

        while True:
            await self._limiter.acquire()

            try:
                response = await self._client.request(method, path, **kwargs)
            except (httpx.TimeoutException, httpx.NetworkError) as exc:
                log.warning(
                    "Request network error",
                    extra={
                        "extra_fields": {
                            "op": "request",
                            "method": method,
                            "path": path,
                            "attempt": attempt + 1,
                            "error": str(exc),
                        }
                    },
                )
                if not (policy.has_attempts_left(attempt) and policy.retries_error(method, exc)):
                    raise NotionMcpNetworkError(
                        message=f"Network error on {method} {path}: {exc}",
                        context={"url": path, "attempt": attempt + 1},
                        cause=exc,
                    ) from exc
                await asyncio.sleep(policy.delay(attempt))
                attempt += 1
                continue

            status = response.status_code
            log.debug(
                "Request complete",
                extra={
                    "extra_fields": {
                        "op": "request",
                        "method": method,
                        "path": path,
                        "status_code": status,
                        "attempt": attempt + 1,
                    }
                },
            )

            if 200 <= status < 300:
                return _decode_body(response, method, path)

            if not policy.retries_status(status):
                raise _error_from_response(response, method, path)

            retry_after: float | None = None
            if status == RATE_LIMITED_STATUS:
                retry_after = parse_retry_after(response.headers.get("retry-after"))

            if not policy.has_attempts_left(attempt):
                if status == RATE_LIMITED_STATUS:
                    raise _error_from_response(
                        response,
                        method,
                        path,
                        retry_after_seconds=retry_after,
                        attempt=attempt + 1,
                    )
                raise NotionMcpRetryExhaustedError(
                    message=(
                        f"All {policy.max_attempts} attempts failed for {method} {path} "
                        f"(last status: {status})"
                    ),
                    context={"attempts": policy.max_attempts, "last_status_code": status},
                )

            log.warning(
                "Retrying request",
                extra={
                    "extra_fields": {
                        "op": "request",
                        "method": method,
                        "path": path,
                        "status_code": status,
                        "retry_after": retry_after,
                        "attempt": attempt + 1,
                    }
                },
            )
            await asyncio.sleep(policy.delay(attempt, retry_after))
            attempt += 1

    async def paginate(
        self,
        path: str,
        method: str = "GET",
        **kwargs: Any,
    ) -> AsyncIterator[dict[str, Any]]:
        """Auto-paginate a Notion list endpoint, yielding each result item.

        ``start_cursor`` / ``page_size`` go into the JSON body for ``POST``
        endpoints and into the query string otherwise.
        """
        cursor: str | None = None

        while True:
            location = "json" if method.upper() == "POST" else "params"
            paging: dict[str, Any] = dict(kwargs.get(location) or {})
            paging["page_size"] = PAGE_SIZE
            if cursor is not None:
                paging["start_cursor"] = cursor
            kwargs[location] = paging

            data = await self.request(method, path, **kwargs)
            for item in data.get("results", []):
                yield item

            if not data.get("has_more", False):
                break
            cursor = data.get("next_cursor")
            if cursor is None:
                break

    async def close(self) -> None:
        """Close the underlying async HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncNotionTransport:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

