# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : text.py
#   file_relpath : src/docxmlfmt/core/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable source text model.

The engine addresses text by character offsets into a single immutable string.
This module provides the small value types built on top of that addressing:

* `TextSpan`: a half-open ``[start, end)`` offset range.
* `LineBreak`: the trailing line-break kind of a line (none/LF/CRLF).
* `Line`: one physical line of the snapshot, with its break kept verbatim.
* `TextEdit`: a replacement of a span of the *original* text.

It also hosts `split_lines` and `apply_edits`, the two places where offsets are
turned into lines and edits are turned back into text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from docxmlfmt.config.logging import get_logger
from docxmlfmt.core.errors import require

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docxmlfmt.config.logging import DocxmlfmtLogger

logger: DocxmlfmtLogger = get_logger(__name__)


class LineBreak(str, Enum):
    """Line terminator kinds recognized by the engine."""

    NONE = ""
    LF = "\n"
    CRLF = "\r\n"


@dataclass(frozen=True, slots=True)
class TextSpan:
    """Half-open offset range ``[start, end)`` in a source text.

    Attributes:
        start (int): Offset of the first character.
        end (int): Offset one past the last character.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        require(0 <= self.start <= self.end, f"Invalid span [{self.start}, {self.end})")

    @classmethod
    def from_bounds(cls, start: int, end: int) -> TextSpan:
        """Build a span from two offsets."""
        return cls(start, end)

    @classmethod
    def whole(cls, text: str) -> TextSpan:
        """Return the span covering all of ``text``."""
        return cls(0, len(text))

    @property
    def length(self) -> int:
        """Number of characters covered by the span."""
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        """Whether the span is a single insertion point."""
        return self.start == self.end

    def intersects(self, other: TextSpan) -> bool:
        """Return True if the spans touch or overlap.

        Endpoints are inclusive, so an empty span at the edge of another span
        intersects it. This lets a caret placed at the end of a line select the
        block on that line.
        """
        return self.start <= other.end and other.start <= self.end

    def check_within(self, text: str) -> None:
        """Fail fast unless the span lies within ``text``.

        Raises:
            ContractViolationError: If ``end`` is past the end of ``text``.
        """
        require(
            self.end <= len(text),
            f"Span [{self.start}, {self.end}) is outside the text (length {len(text)})",
        )


@dataclass(frozen=True, slots=True)
class Line:
    """One physical line of a source text.

    Attributes:
        number (int): 0-based line number within the text.
        start (int): Offset of the first character of the line.
        text (str): Line content without its line break.
        line_break (LineBreak): The line's trailing break, preserved verbatim.
    """

    number: int
    start: int
    text: str
    line_break: LineBreak

    @property
    def content_end(self) -> int:
        """Offset just past the content (where the line break begins)."""
        return self.start + len(self.text)

    @property
    def end(self) -> int:
        """Offset just past the line break."""
        return self.content_end + len(self.line_break.value)

    @property
    def span(self) -> TextSpan:
        """The content span of the line, excluding its break."""
        return TextSpan(self.start, self.content_end)


@dataclass(frozen=True, slots=True)
class TextEdit:
    """Replace ``span`` of the original text with ``replacement``.

    Attributes:
        span (TextSpan): Range of the original text to replace (may be empty for inserts).
        replacement (str): Replacement text (may be empty for deletions).
    """

    span: TextSpan
    replacement: str

    @property
    def start(self) -> int:
        """Shortcut for ``span.start``."""
        return self.span.start

    @property
    def end(self) -> int:
        """Shortcut for ``span.end``."""
        return self.span.end


def split_lines(text: str) -> list[Line]:
    """Split ``text`` into `Line` records, recording LF/CRLF breaks per line.

    A lone ``\\r`` is not a line break and stays part of the line content.
    An empty text yields a single empty line without a break, and a text ending
    with a break yields a final empty line, matching editor line numbering.

    Args:
        text (str): The source text snapshot.

    Returns:
        list[Line]: Lines in document order; never empty.
    """
    lines: list[Line] = []
    pos: int = 0
    number: int = 0
    while True:
        nl: int = text.find("\n", pos)
        if nl == -1:
            lines.append(Line(number, pos, text[pos:], LineBreak.NONE))
            break
        if nl > pos and text[nl - 1] == "\r":
            lines.append(Line(number, pos, text[pos : nl - 1], LineBreak.CRLF))
        else:
            lines.append(Line(number, pos, text[pos:nl], LineBreak.LF))
        pos = nl + 1
        number += 1
    return lines


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply a sorted, non-overlapping list of edits to ``text``.

    Offsets in the edits refer to the original ``text``; they are never
    re-resolved after an edit is applied.

    Args:
        text (str): The original text snapshot.
        edits (Iterable[TextEdit]): Edits ordered by ascending start offset.

    Returns:
        str: The edited text.

    Raises:
        ContractViolationError: If an edit lies outside ``text`` or if edits
            overlap or are out of order.
    """
    parts: list[str] = []
    cursor: int = 0
    for edit in edits:
        edit.span.check_within(text)
        require(
            edit.start >= cursor,
            f"Edit at [{edit.start}, {edit.end}) overlaps or precedes offset {cursor}",
        )
        parts.append(text[cursor : edit.start])
        parts.append(edit.replacement)
        cursor = edit.end
    parts.append(text[cursor:])
    return "".join(parts)
