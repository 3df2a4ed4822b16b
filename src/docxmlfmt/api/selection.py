# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : selection.py
#   file_relpath : src/docxmlfmt/api/selection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Selection helpers for callers of the engine.

The engine only ever formats a concrete offset range. Turning an editor caret or
a line selection into such a range is the caller's job; these helpers implement
the usual conventions so every front end behaves the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxmlfmt.core.errors import require
from docxmlfmt.core.text import TextSpan, split_lines

if TYPE_CHECKING:
    from docxmlfmt.core.text import Line


def line_at(text: str, offset: int) -> Line:
    """Return the line containing ``offset`` (an offset on a break maps to its line).

    Raises:
        ContractViolationError: If ``offset`` is outside ``text``.
    """
    require(0 <= offset <= len(text), f"Offset {offset} is outside the text (length {len(text)})")
    lines: list[Line] = split_lines(text)
    for line in lines:
        if offset < line.end:
            return line
    return lines[-1]


def widen_caret(text: str, offset: int) -> TextSpan:
    """Widen an insertion point into a span.

    The caret is extended by one character on each side, but never past the
    start or the end (before the break) of the line it sits on.

    Args:
        text (str): Source text.
        offset (int): Caret offset.

    Returns:
        TextSpan: The widened span.

    Raises:
        ContractViolationError: If ``offset`` is outside ``text``.
    """
    line: Line = line_at(text, offset)
    start: int = offset - 1 if offset > line.start else offset
    end: int = offset + 1 if offset < line.content_end else offset
    return TextSpan(start, max(start, end))


def span_for_lines(text: str, first: int, last: int) -> TextSpan:
    """Return the span covering 1-based lines ``first`` through ``last`` (inclusive).

    Raises:
        ContractViolationError: If the line numbers are out of range or reversed.
    """
    lines: list[Line] = split_lines(text)
    require(
        1 <= first <= last <= len(lines),
        f"Line range {first}:{last} is outside 1:{len(lines)}",
    )
    return TextSpan(lines[first - 1].start, lines[last - 1].content_end)
