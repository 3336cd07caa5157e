"""Inline scanner: plain string to an ordered list of :class:`TextRun`.

The scanner is single-pass and non-recursive.  On each step it runs every
construct's pattern independently against the unconsumed suffix, collects
the first match of each as a :class:`_Candidate`, and takes the smallest
one under the ordering ``(start, priority)``.  Priority follows the order
of :data:`_CONSTRUCTS`::

    bold  >  italic  >  strikethrough  >  code  >  link

Text captured by a construct becomes the run content verbatim; markup
inside it is not scanned again, so ``**a *b* c**`` yields a single bold
run whose content is ``a *b* c``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from notion_mcp.models import Annotation, TextRun

# (priority, pattern, annotation).  ``None`` annotation marks the link
# construct, whose second group is the URL.
_CONSTRUCTS: tuple[tuple[int, re.Pattern[str], Annotation | None], ...] = (
    (0, re.compile(r"\*\*(.+?)\*\*"), Annotation.BOLD),
    (1, re.compile(r"\*(.+?)\*"), Annotation.ITALIC),
    (2, re.compile(r"~~(.+?)~~"), Annotation.STRIKETHROUGH),
    (3, re.compile(r"`(.+?)`"), Annotation.CODE),
    (4, re.compile(r"\[([^\]]+)\]\(([^)]+)\)"), None),
)


@dataclass(frozen=True, order=True)
class _Candidate:
    """One construct's earliest match in the remaining text.

    Instances compare by ``(start, priority)`` only, giving the total
    order used to pick the winning construct.
    """

    start: int
    priority: int
    end: int = field(compare=False)
    content: str = field(compare=False)
    annotation: Annotation | None = field(compare=False, default=None)
    link: str | None = field(compare=False, default=None)

    def to_run(self) -> TextRun:
        annotations = frozenset({self.annotation}) if self.annotation else frozenset()
        return TextRun(content=self.content, annotations=annotations, link=self.link)


def _candidates(text: str, pos: int) -> list[_Candidate]:
    found: list[_Candidate] = []
    for priority, pattern, annotation in _CONSTRUCTS:
        match = pattern.search(text, pos)
        if match is None:
            continue
        found.append(
            _Candidate(
                start=match.start(),
                priority=priority,
                end=match.end(),
                content=match.group(1),
                annotation=annotation,
                link=match.group(2) if annotation is None else None,
            )
        )
    return found


def parse_inline_formatting(text: str) -> list[TextRun]:
    """Convert *text* into runs, recognising inline markdown constructs.

    Supported constructs: ``**bold**``, ``*italic*``, ``~~strike~~``,
    ```code```, and ``[text](url)``.  Unmatched text becomes plain runs.
    If nothing matches (including the empty string) the result is a
    single plain run holding the whole input.

    Examples
    --------
    >>> [r.content for r in parse_inline_formatting("a **b** c")]
    ['a ', 'b', ' c']
    """
    runs: list[TextRun] = []
    pos = 0

    while pos < len(text):
        found = _candidates(text, pos)
        if not found:
            runs.append(TextRun(text[pos:]))
            break

        best = min(found)
        if best.start > pos:
            runs.append(TextRun(text[pos:best.start]))
        runs.append(best.to_run())
        pos = best.end

    return runs or [TextRun(text)]
