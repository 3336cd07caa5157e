"""Normalise Notion object identifiers.

Notion accepts UUIDs with or without hyphens, and users tend to paste page
URLs rather than bare IDs.  :func:`extract_notion_id` turns either form
into the canonical lowercase, hyphenated UUID.
"""

from __future__ import annotations

import re

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{12}$",
    re.IGNORECASE,
)
# 32 hex chars ending a path segment, e.g. ".../Page-Title-<id>?v=..."
_URL_ID_RE = re.compile(r"[/-]([0-9a-f]{32})(?:[?#]|$)", re.IGNORECASE)
_DASHED_UUID_RE = re.compile(
    r"([0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12})",
    re.IGNORECASE,
)


def format_with_dashes(value: str) -> str:
    """Return *value* as a lowercase 8-4-4-4-12 UUID.

    Input that is not 32 hex digits once hyphens are removed is returned
    lowercased with hyphens stripped.
    """
    clean = value.lower().replace("-", "")
    if len(clean) != 32:
        return clean
    return f"{clean[:8]}-{clean[8:12]}-{clean[12:16]}-{clean[16:20]}-{clean[20:]}"


def extract_notion_id(value: str) -> str:
    """Extract a canonical Notion ID from an ID or a Notion URL.

    Examples
    --------
    >>> extract_notion_id("1234567890abcdef1234567890abcdef")
    '12345678-90ab-cdef-1234-567890abcdef'
    >>> extract_notion_id("https://www.notion.so/ws/Page-1234567890abcdef1234567890abcdef?v=1")
    '12345678-90ab-cdef-1234-567890abcdef'
    >>> extract_notion_id("invalid-id")
    'invalid-id'

    Values that match no known form are returned unchanged; the API will
    reject them with a 4xx.
    """
    if _UUID_RE.match(value):
        return format_with_dashes(value)

    match = _URL_ID_RE.search(value)
    if match:
        return format_with_dashes(match.group(1))

    match = _DASHED_UUID_RE.search(value)
    if match:
        return format_with_dashes(match.group(1))

    return value
