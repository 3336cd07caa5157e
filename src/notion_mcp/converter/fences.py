"""Split raw Markdown into prose and fenced-code segments.

The splitter is a two-state machine over the input lines:

* :class:`_InProse` -- accumulating ordinary lines.
* :class:`_InFence` -- accumulating code lines, remembering the language
  tag given on the opening marker.

A fence marker line (three or more backticks after stripping surrounding
whitespace) flushes the current accumulator and switches state.  Markers
always toggle, so nested fences are not supported.  At end of input the
active accumulator is flushed; an unterminated fence becomes a code
segment instead of an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from notion_mcp.models import DEFAULT_CODE_LANGUAGE

FENCE_MARKER = "```"


@dataclass(frozen=True)
class CodeFenceSegment:
    """A contiguous run of prose lines or fenced-code lines."""

    content: str
    is_code: bool = False
    language: str | None = None


@dataclass
class _InProse:
    lines: list[str] = field(default_factory=list)

    def flush(self) -> CodeFenceSegment | None:
        if not self.lines:
            return None
        return CodeFenceSegment(content="\n".join(self.lines))


@dataclass
class _InFence:
    language: str
    lines: list[str] = field(default_factory=list)

    def flush(self, closing: bool = False) -> CodeFenceSegment | None:
        # A closed fence is emitted even when empty; an unterminated one
        # only when it captured at least one line.
        if not closing and not self.lines:
            return None
        return CodeFenceSegment(
            content="\n".join(self.lines),
            is_code=True,
            language=self.language or DEFAULT_CODE_LANGUAGE,
        )


def _fence_language(line: str) -> str | None:
    """Return the language tag if *line* is a fence marker, else ``None``."""
    stripped = line.strip()
    if not stripped.startswith(FENCE_MARKER):
        return None
    return stripped.lstrip("`").strip()


def split_fences(markdown: str) -> list[CodeFenceSegment]:
    """Split *markdown* into ordered prose and code segments.

    Every input line lands in exactly one segment, in order, apart from
    the fence marker lines themselves.  Empty input yields ``[]``.
    """
    if not markdown:
        return []

    segments: list[CodeFenceSegment] = []
    state: _InProse | _InFence = _InProse()

    for line in markdown.split("\n"):
        language = _fence_language(line)
        if language is None:
            state.lines.append(line)
            continue

        if isinstance(state, _InProse):
            segment, state = state.flush(), _InFence(language)
        else:
            segment, state = state.flush(closing=True), _InProse()
        if segment is not None:
            segments.append(segment)

    segment = state.flush()
    if segment is not None:
        segments.append(segment)
    return segments
