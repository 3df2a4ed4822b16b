# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : locator.py
#   file_relpath : src/docxmlfmt/core/locator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate doc-comment blocks in a source text.

A *doc-comment block* is a maximal run of consecutive lines that each start
(after leading spaces/tabs) with the doc-comment marker. A blank line or any
other line ends the block. Only blocks intersecting the requested span are
reported.

Line classification is a closed set (`LineKind`), so callers branch on an enum
value instead of on a type hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from docxmlfmt.config.logging import get_logger
from docxmlfmt.constants import DEFAULT_MARKER
from docxmlfmt.core.errors import require
from docxmlfmt.core.indentation import INDENT_CHARS, leading_whitespace
from docxmlfmt.core.text import TextSpan, split_lines

if TYPE_CHECKING:
    from collections.abc import Iterator

    from docxmlfmt.config.logging import DocxmlfmtLogger
    from docxmlfmt.core.text import Line

logger: DocxmlfmtLogger = get_logger(__name__)


class LineKind(Enum):
    """Classification of a source line."""

    MARKER = "marker"
    BLANK = "blank"
    OTHER = "other"


def classify_line(text: str, marker: str = DEFAULT_MARKER) -> LineKind:
    """Classify one line of text (without its line break).

    A line is a MARKER line when its content after leading spaces/tabs starts with
    ``marker`` and the marker is not immediately followed by its own last
    character again (``////`` is an ordinary comment, not a doc comment).

    Args:
        text (str): Line content.
        marker (str): The doc-comment marker.

    Returns:
        LineKind: MARKER, BLANK or OTHER.
    """
    rest: str = text.lstrip(INDENT_CHARS)
    if not rest:
        return LineKind.BLANK
    if rest.startswith(marker) and not rest.startswith(marker + marker[-1]):
        return LineKind.MARKER
    return LineKind.OTHER


@dataclass(frozen=True, slots=True)
class DocCommentBlock:
    """A maximal run of consecutive doc-comment lines.

    Attributes:
        lines (tuple[Line, ...]): The block's lines in document order (at least one).
        marker (str): The doc-comment marker the block was located with.
    """

    lines: tuple[Line, ...]
    marker: str = DEFAULT_MARKER

    @property
    def first_line(self) -> Line:
        """The line holding the block's reference indentation."""
        return self.lines[0]

    @property
    def reference_indent(self) -> str:
        """Leading whitespace of the first line (never rewritten)."""
        return leading_whitespace(self.first_line.text)

    @property
    def span(self) -> TextSpan:
        """Span from the first line's start to the last line's content end."""
        return TextSpan(self.first_line.start, self.lines[-1].content_end)

    @property
    def line_range(self) -> tuple[int, int]:
        """Inclusive 0-based ``(first, last)`` line numbers."""
        return self.first_line.number, self.lines[-1].number

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True, slots=True)
class BlockSequence:
    """Lazy, restartable sequence of the blocks intersecting ``span``.

    Each iteration rescans ``text``; nothing is cached between iterations.

    Attributes:
        text (str): Source text snapshot.
        span (TextSpan): Span the blocks must intersect.
        marker (str): Doc-comment marker.
    """

    text: str
    span: TextSpan
    marker: str = DEFAULT_MARKER

    def __iter__(self) -> Iterator[DocCommentBlock]:
        run: list[Line] = []
        for line in split_lines(self.text):
            if classify_line(line.text, self.marker) is LineKind.MARKER:
                run.append(line)
                continue
            if run:
                block: DocCommentBlock | None = self._finish(run)
                if block is not None:
                    yield block
                run = []
            if line.start > self.span.end:
                # No later block can intersect the span.
                return
        if run:
            block = self._finish(run)
            if block is not None:
                yield block

    def _finish(self, run: list[Line]) -> DocCommentBlock | None:
        block = DocCommentBlock(lines=tuple(run), marker=self.marker)
        if not block.span.intersects(self.span):
            return None
        logger.trace("Located block at lines %d..%d", *block.line_range)
        return block


def locate(text: str, span: TextSpan, marker: str = DEFAULT_MARKER) -> BlockSequence:
    """Return the doc-comment blocks of ``text`` that intersect ``span``.

    Args:
        text (str): Source text snapshot.
        span (TextSpan): Offset range to format; must lie within ``text``.
        marker (str): Doc-comment marker.

    Returns:
        BlockSequence: A lazy sequence that can be iterated more than once.

    Raises:
        ContractViolationError: If ``span`` lies outside ``text`` or ``marker``
            is empty or contains whitespace.
    """
    require(bool(marker) and not any(ch.isspace() for ch in marker), f"Invalid marker {marker!r}")
    span.check_within(text)
    return BlockSequence(text=text, span=span, marker=marker)
