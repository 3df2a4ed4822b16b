# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : indentation.py
#   file_relpath : src/docxmlfmt/core/indentation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Column-width arithmetic for leading indentation.

`render` and `measure` are the single source of truth for converting between a
column width and a concrete whitespace string. Every other computation in the
engine (target indentation, idempotence checks, wrap accounting) is expressed in
terms of them rather than by comparing string lengths.

Invariant:
    ``render(measure(render(w, style), style.tab_size), style) == render(w, style)``
    for every width ``w >= 0``. Measuring arbitrary input and re-rendering it may
    normalize mixed tab/space runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docxmlfmt.core.errors import require

if TYPE_CHECKING:
    from docxmlfmt.config.model import FormattingOptions

SPACE: str = " "
TAB: str = "\t"
INDENT_CHARS: str = SPACE + TAB


@dataclass(frozen=True, slots=True)
class IndentStyle:
    """How a column width is rendered as whitespace.

    Attributes:
        use_tabs (bool): Render with tabs followed by spaces; spaces only when False.
        tab_size (int): Width of a tab stop (positive).
    """

    use_tabs: bool = False
    tab_size: int = 4

    def __post_init__(self) -> None:
        require(self.tab_size >= 1, f"tab_size must be positive, got {self.tab_size}")

    @classmethod
    def from_options(cls, options: FormattingOptions) -> IndentStyle:
        """Derive the indent style from formatting options."""
        return cls(use_tabs=options.use_tabs, tab_size=options.tab_size)


def render(width: int, style: IndentStyle) -> str:
    """Render a column width as leading whitespace.

    Spaces-only styles emit ``width`` spaces. Tab styles emit ``width // tab_size``
    tabs (each advancing to the next tab stop from column 0) followed by
    ``width % tab_size`` spaces.

    Args:
        width (int): Non-negative column width.
        style (IndentStyle): Target indent style.

    Returns:
        str: The whitespace string.
    """
    require(width >= 0, f"width must be non-negative, got {width}")
    if not style.use_tabs:
        return SPACE * width
    tabs, spaces = divmod(width, style.tab_size)
    return TAB * tabs + SPACE * spaces


def measure(whitespace: str, tab_size: int, *, start_column: int = 0) -> int:
    """Measure the column reached after ``whitespace``.

    A space advances one column; a tab advances to the next multiple of
    ``tab_size`` (a full tab stop when already on one). The first character that
    is neither ends the measurement.

    Args:
        whitespace (str): Leading whitespace to measure.
        tab_size (int): Width of a tab stop (positive).
        start_column (int): Column the string starts at; tab stops are absolute.

    Returns:
        int: The column after the whitespace.
    """
    require(tab_size >= 1, f"tab_size must be positive, got {tab_size}")
    column: int = start_column
    for ch in whitespace:
        if ch == SPACE:
            column += 1
        elif ch == TAB:
            column += tab_size - (column % tab_size)
        else:
            break
    return column - start_column


def leading_whitespace(text: str) -> str:
    """Return the run of spaces and tabs at the start of ``text``."""
    return text[: len(text) - len(text.lstrip(INDENT_CHARS))]


def is_rendered_as(existing: str, target: str, style: IndentStyle) -> bool:
    """Return True if ``existing`` already renders to ``target`` under ``style``.

    This is the idempotence check used by the normalizer: a line whose existing
    indentation measures to the target width is left alone even when its literal
    characters differ from the canonical rendering.
    """
    return render(measure(existing, style.tab_size), style) == target
