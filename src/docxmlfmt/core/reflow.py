# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : reflow.py
#   file_relpath : src/docxmlfmt/core/reflow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup-safe reflow of doc-comment text.

Reflow runs only when a wrap column is configured. The content of a block (the
text after each line's marker) is split into paragraphs; each paragraph is
re-broken greedily so that no line's content exceeds the wrap column, counted
from just after the marker's separating space. Markup tags and the words glued
to them are never split.

Paragraph boundaries:
    - Lines with empty content and lines holding only markup are kept verbatim.
    - Lines mentioning a preformatted element (``<code>``) and every line inside
      such an element are kept verbatim.
    - A line starting with a non-inline element tag starts a new paragraph; a
      line ending with one ends its paragraph.

Reflowed lines are re-indented with the block's target indentation, and the
whole result then goes through the outer-indent normalizer, so both passes
compose into one consistent block.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docxmlfmt.config.logging import get_logger
from docxmlfmt.core.errors import ContractViolationError, require
from docxmlfmt.core.indentation import SPACE, leading_whitespace, measure
from docxmlfmt.core.markup import (
    PREFORMATTED_ELEMENTS,
    TokenKind,
    glue,
    is_markup_only,
    tokenize,
)
from docxmlfmt.core.normalizer import normalize_lines, target_indent

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docxmlfmt.config.logging import DocxmlfmtLogger
    from docxmlfmt.config.model import FormattingOptions
    from docxmlfmt.core.locator import DocCommentBlock
    from docxmlfmt.core.markup import Token, Unit

logger: DocxmlfmtLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CommentLine:
    """A doc-comment line split around its marker.

    Attributes:
        indent (str): Leading whitespace before the marker.
        marker (str): The marker itself.
        content (str): Everything after the marker.
    """

    indent: str
    marker: str
    content: str

    @classmethod
    def parse(cls, text: str, marker: str) -> CommentLine:
        """Split a marker line into indent, marker and content."""
        indent: str = leading_whitespace(text)
        rest: str = text[len(indent) :]
        require(rest.startswith(marker), f"Not a doc-comment line: {text!r}")
        return cls(indent=indent, marker=marker, content=rest[len(marker) :])


@dataclass(slots=True)
class _Segment:
    reflowable: bool
    indices: list[int]


def _preformatted_state(tokens: Sequence[Token], inside: bool) -> tuple[bool, bool]:
    """Return ``(mentions_pre, inside_after)`` for one line's tokens."""
    mentions: bool = False
    for token in tokens:
        if token.name.lower() not in PREFORMATTED_ELEMENTS:
            continue
        mentions = True
        if token.kind is TokenKind.OPEN_TAG:
            inside = True
        elif token.kind is TokenKind.CLOSE_TAG:
            inside = False
    return mentions, inside


def segment(lines: Sequence[CommentLine]) -> list[_Segment]:
    """Group a block's lines into verbatim lines and reflowable paragraphs."""
    segments: list[_Segment] = []
    paragraph: list[int] = []

    def flush() -> None:
        nonlocal paragraph
        if paragraph:
            segments.append(_Segment(True, paragraph))
            paragraph = []

    def verbatim(idx: int) -> None:
        flush()
        segments.append(_Segment(False, [idx]))

    inside_pre: bool = False
    for idx, line in enumerate(lines):
        tokens: list[Token] = tokenize(line.content)
        was_inside: bool = inside_pre
        mentions_pre, inside_pre = _preformatted_state(tokens, inside_pre)
        if was_inside or mentions_pre or not tokens or is_markup_only(tokens):
            verbatim(idx)
            continue
        if tokens[0].is_block_tag:
            flush()
        paragraph.append(idx)
        if tokens[-1].is_block_tag:
            flush()
    flush()
    return segments


def pack(units: Sequence[Unit], wrap_column: int, start_column: int = 0) -> list[str]:
    """Greedily pack units into lines of at most ``wrap_column`` columns.

    A unit joins the current line when ``column + 1 + width <= wrap_column``;
    otherwise it starts a new line. A unit wider than the budget is placed alone
    on its own line rather than split.

    Args:
        units (Sequence[Unit]): Units to pack, in order.
        wrap_column (int): Maximum content column.
        start_column (int): Column at which each line's content starts.

    Returns:
        list[str]: The packed line contents.
    """
    out: list[str] = []
    current: list[str] = []
    column: int = start_column
    for unit in units:
        if current and column + 1 + unit.width > wrap_column:
            out.append(SPACE.join(current))
            current = []
            column = start_column
        column += unit.width if not current else 1 + unit.width
        current.append(unit.text)
    if current:
        out.append(SPACE.join(current))
    return out


def _reflow_paragraph(
    lines: Sequence[CommentLine],
    wrap_column: int,
    tab_size: int,
) -> list[str]:
    """Return the reflowed bodies (marker onward) of one paragraph."""
    first: CommentLine = lines[0]
    gap: str = leading_whitespace(first.content)
    # Accounting starts after the marker's separating space.
    inner: str = gap[1:] if gap.startswith(SPACE) else gap
    start_column: int = measure(inner, tab_size)
    joined: str = SPACE.join(line.content.strip() for line in lines)
    packed: list[str] = pack(glue(tokenize(joined)), wrap_column, start_column)
    return [f"{first.marker}{gap}{body}" for body in packed]


def reflow_lines(lines: Sequence[str], options: FormattingOptions) -> tuple[str, ...]:
    """Reflow and re-indent a block given as line texts.

    Args:
        lines (Sequence[str]): Block line texts without line breaks.
        options (FormattingOptions): Formatting options; ``wrap_column`` must be set.

    Returns:
        tuple[str, ...]: The reflowed, normalized line texts. The number of lines
            may differ from the input.
    """
    wrap_column: int | None = options.wrap_column
    if wrap_column is None:
        raise ContractViolationError("reflow requires a wrap column")

    parsed: list[CommentLine] = [CommentLine.parse(text, options.marker) for text in lines]
    target: str = target_indent(lines[0], options) if lines else ""
    out: list[str] = []
    for seg in segment(parsed):
        if not seg.reflowable:
            out.extend(lines[idx] for idx in seg.indices)
            continue
        bodies: list[str] = _reflow_paragraph(
            [parsed[idx] for idx in seg.indices], wrap_column, options.tab_size
        )
        for k, body in enumerate(bodies):
            # Reuse the original indentation line-for-line; new lines get the target.
            indent: str = parsed[seg.indices[k]].indent if k < len(seg.indices) else target
            out.append(indent + body)
    return normalize_lines(out, options)


def reflow(block: DocCommentBlock, options: FormattingOptions) -> tuple[str, ...]:
    """Reflow ``block`` to ``options.wrap_column`` and normalize its indentation.

    Args:
        block (DocCommentBlock): The located block.
        options (FormattingOptions): Formatting options with a wrap column.

    Returns:
        tuple[str, ...]: The block's new line texts.
    """
    result: tuple[str, ...] = reflow_lines([line.text for line in block.lines], options)
    if len(result) != len(block):
        logger.debug(
            "Reflow changed block at lines %d..%d from %d to %d line(s)",
            *block.line_range,
            len(block),
            len(result),
        )
    return result
