"""Inline rendering: text runs to Markdown strings.

Annotation combination order (innermost first)::

    code -> bold -> italic -> strikethrough -> link

This is the inverse of the inline scanner's recognition order, so a run
carrying a single annotation (or only a link) renders to exactly the
syntax the scanner reads back into the same run.  Content is emitted
verbatim; markup characters are not escaped.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from notion_mcp.models import Annotation, TextRun


def render_run(run: TextRun) -> str:
    """Render one :class:`TextRun` to Markdown."""
    text = run.content
    annotations = run.annotations

    if Annotation.CODE in annotations:
        text = f"`{text}`"
    if Annotation.BOLD in annotations:
        text = f"**{text}**"
    if Annotation.ITALIC in annotations:
        text = f"*{text}*"
    if Annotation.STRIKETHROUGH in annotations:
        text = f"~~{text}~~"

    # Link (outermost wrapping)
    if run.link:
        text = f"[{text}]({run.link})"

    return text


def render_rich_text(runs: Iterable[TextRun | dict[str, Any]] | None) -> str:
    """Render a run sequence to a Markdown string.

    Accepts :class:`TextRun` values or raw Notion rich_text dicts; entries
    that cannot be read as a run are skipped.  ``None`` renders as ``""``.
    """
    if not runs:
        return ""

    parts: list[str] = []
    for item in runs:
        run = TextRun.from_record(item)
        if run is not None:
            parts.append(render_run(run))
    return "".join(parts)
