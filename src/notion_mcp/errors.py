"""Errors raised by the Notion client, configuration, and tool layer.

Every error is a :class:`NotionMcpError` carrying a machine-readable
``code``, the ``message`` shown to the MCP caller, a ``context`` dict of
diagnostic fields, and an optional chained ``cause``.  Subclasses differ
only in their ``code``; API failures are built from the HTTP status with
:func:`error_for_status`.

The Markdown converter raises none of these.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes, reported in tool-call logs."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    PERMISSION_ERROR = "PERMISSION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    RATE_LIMITED = "RATE_LIMITED"
    RETRY_EXHAUSTED = "RETRY_EXHAUSTED"
    NETWORK_ERROR = "NETWORK_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
    TOOL_ERROR = "TOOL_ERROR"


class NotionMcpError(Exception):
    """Base exception for all notion_mcp errors.

    Parameters
    ----------
    message:
        Human-readable description; tools return it as their ``error``.
    context:
        Structured diagnostic fields (status code, argument name, ...).
    cause:
        The underlying exception, if this error wraps another.
    """

    code: str = "NOTION_MCP_ERROR"

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Notion API responses
# ---------------------------------------------------------------------------

class NotionMcpValidationError(NotionMcpError):
    """400 or any other 4xx without a dedicated class, or an unreadable body."""

    code = ErrorCode.VALIDATION_ERROR


class NotionMcpAuthError(NotionMcpError):
    """401: the integration token is invalid or revoked."""

    code = ErrorCode.AUTH_ERROR


class NotionMcpPermissionError(NotionMcpError):
    code = ErrorCode.PERMISSION_ERROR


class NotionMcpNotFoundError(NotionMcpError):
    """404: the object does not exist or is not shared with the integration."""

    code = ErrorCode.NOT_FOUND


class NotionMcpConflictError(NotionMcpError):
    code = ErrorCode.CONFLICT


class NotionMcpRateLimitError(NotionMcpError):
    """429 on the final attempt.

    Context keys: ``retry_after_seconds`` (``None`` when Notion sent no
    ``Retry-After``), ``attempt``.
    """

    code = ErrorCode.RATE_LIMITED


class NotionMcpRetryExhaustedError(NotionMcpError):
    """Every attempt ended in a 5xx.  Context keys: ``attempts``, ``last_status_code``."""

    code = ErrorCode.RETRY_EXHAUSTED


class NotionMcpNetworkError(NotionMcpError):
    """The request failed below HTTP and was not, or no longer, retried."""

    code = ErrorCode.NETWORK_ERROR


_ERRORS_BY_STATUS: dict[int, type[NotionMcpError]] = {
    401: NotionMcpAuthError,
    403: NotionMcpPermissionError,
    404: NotionMcpNotFoundError,
    409: NotionMcpConflictError,
    429: NotionMcpRateLimitError,
}


def error_for_status(
    status: int,
    message: str,
    context: dict[str, Any] | None = None,
) -> NotionMcpError:
    """Build the error matching an HTTP *status* from the Notion API.

    Statuses without a dedicated class map to
    :class:`NotionMcpValidationError`.

    Examples
    --------
    >>> error_for_status(404, "Could not find page").code
    <ErrorCode.NOT_FOUND: 'NOT_FOUND'>
    """
    cls = _ERRORS_BY_STATUS.get(status, NotionMcpValidationError)
    return cls(message, context={"status_code": status, **(context or {})})


# ---------------------------------------------------------------------------
# Local errors
# ---------------------------------------------------------------------------

class NotionMcpConfigError(NotionMcpError):
    """Missing or invalid configuration.  Context keys: ``field``."""

    code = ErrorCode.CONFIG_ERROR


class NotionMcpToolError(NotionMcpError):
    """Unusable tool arguments.  Context keys: ``argument``."""

    code = ErrorCode.TOOL_ERROR
