"""Data models for the notion_mcp document converter.

A document is an ordered list of :class:`Block` values.  Blocks that carry
text hold an ordered tuple of :class:`TextRun` values.  Both types are
frozen dataclasses: they are created once by the converter (or by
:meth:`Block.from_record` when reading API payloads) and never mutated.

The ``to_dict`` / ``from_record`` pairs translate between these values and
the Notion API wire shapes::

    {"object": "block", "type": "paragraph",
     "paragraph": {"rich_text": [{"type": "text",
                                  "text": {"content": "hi", "link": None}}]}}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Annotation(str, Enum):
    """Inline formatting attributes a :class:`TextRun` may carry."""

    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"


class BlockType(str, Enum):
    """The closed set of block variants the converter produces and renders."""

    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    PARAGRAPH = "paragraph"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TO_DO = "to_do"
    QUOTE = "quote"
    CODE = "code"
    DIVIDER = "divider"


DEFAULT_CODE_LANGUAGE = "plain text"
"""Language assigned to fenced code without a language tag."""

_BLOCK_TYPES_BY_VALUE: dict[str, BlockType] = {t.value: t for t in BlockType}


# ---------------------------------------------------------------------------
# TextRun
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TextRun:
    """A contiguous span of text with optional annotations and link.

    Parameters
    ----------
    content:
        The visible text of the run.
    annotations:
        Formatting attributes.  The inline scanner produces at most one,
        but hand-built runs may combine several.
    link:
        Hyperlink target, or ``None``.
    """

    content: str
    annotations: frozenset[Annotation] = field(default_factory=frozenset)
    link: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the Notion rich_text wire representation of this run."""
        text: dict[str, Any] = {"content": self.content}
        text["link"] = {"url": self.link} if self.link else None
        record: dict[str, Any] = {"type": "text", "text": text}
        if self.annotations:
            record["annotations"] = {a.value: a in self.annotations for a in Annotation}
        return record

    @classmethod
    def from_record(cls, record: Any) -> TextRun | None:
        """Read a rich_text record, tolerating missing or malformed fields.

        Content comes from ``text.content`` (locally built payloads) or
        ``plain_text`` (API responses).  Annotations outside the supported
        set (``underline``, ``color``) are ignored.  Returns ``None`` when
        *record* is not a mapping.
        """
        if isinstance(record, TextRun):
            return record
        if not isinstance(record, Mapping):
            return None

        text = record.get("text")
        if not isinstance(text, Mapping):
            text = {}

        content = text.get("content")
        if not isinstance(content, str):
            content = record.get("plain_text")
        if not isinstance(content, str):
            content = ""

        raw_annotations = record.get("annotations")
        annotations: frozenset[Annotation] = frozenset()
        if isinstance(raw_annotations, Mapping):
            annotations = frozenset(a for a in Annotation if raw_annotations.get(a.value))

        link = None
        raw_link = text.get("link")
        if isinstance(raw_link, Mapping) and isinstance(raw_link.get("url"), str):
            link = raw_link["url"] or None
        if link is None and isinstance(record.get("href"), str):
            link = record["href"] or None

        return cls(content=content, annotations=annotations, link=link)


def runs_to_dicts(runs: tuple[TextRun, ...] | list[TextRun]) -> list[dict[str, Any]]:
    """Serialise a run sequence to a Notion rich_text array."""
    return [run.to_dict() for run in runs]


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Block:
    """A single structural unit of a document.

    ``type`` is a :class:`BlockType` for every variant the converter knows;
    blocks read from API payloads with any other type keep the raw string
    so that renderers can fall back to their ``rich_text`` payload.

    Only ``divider`` (and unknown variants with no readable payload) have
    ``rich_text=None``.  ``checked`` is set for ``to_do`` blocks and
    ``language`` for ``code`` blocks.
    """

    type: str
    rich_text: tuple[TextRun, ...] | None = None
    checked: bool | None = None
    language: str | None = None

    @property
    def known_type(self) -> BlockType | None:
        if isinstance(self.type, BlockType):
            return self.type
        return _BLOCK_TYPES_BY_VALUE.get(self.type)

    def to_dict(self) -> dict[str, Any]:
        """Return the Notion block wire representation of this block."""
        block_type = str(getattr(self.type, "value", self.type))
        payload: dict[str, Any] = {}
        if self.rich_text is not None:
            payload["rich_text"] = runs_to_dicts(self.rich_text)
        if self.known_type is BlockType.TO_DO:
            payload["checked"] = bool(self.checked)
        if self.known_type is BlockType.CODE:
            payload["language"] = self.language or DEFAULT_CODE_LANGUAGE
        return {"object": "block", "type": block_type, block_type: payload}

    @classmethod
    def from_record(cls, record: Any) -> Block | None:
        """Read a block record, tolerating partially-shaped input.

        Returns ``None`` when *record* is neither a :class:`Block` nor a
        mapping with a string ``type``.  A payload that is not a mapping,
        or a ``rich_text`` value that is not a list, leaves ``rich_text``
        unset; list entries that are not mappings are skipped.
        """
        if isinstance(record, Block):
            return record
        if not isinstance(record, Mapping):
            return None

        raw_type = record.get("type")
        if not isinstance(raw_type, str) or not raw_type:
            return None
        block_type: str = _BLOCK_TYPES_BY_VALUE.get(raw_type, raw_type)

        payload = record.get(raw_type)
        if not isinstance(payload, Mapping):
            return cls(type=block_type)

        rich_text: tuple[TextRun, ...] | None = None
        raw_runs = payload.get("rich_text")
        if isinstance(raw_runs, (list, tuple)):
            runs = (TextRun.from_record(r) for r in raw_runs)
            rich_text = tuple(r for r in runs if r is not None)

        checked = payload.get("checked")
        language = payload.get("language")
        return cls(
            type=block_type,
            rich_text=rich_text,
            checked=bool(checked) if checked is not None else None,
            language=language if isinstance(language, str) else None,
        )

    @property
    def plain_text(self) -> str:
        """Concatenated run content, ignoring annotations and links."""
        if not self.rich_text:
            return ""
        return "".join(run.content for run in self.rich_text)
