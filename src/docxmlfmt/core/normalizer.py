# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : normalizer.py
#   file_relpath : src/docxmlfmt/core/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Outer-indent normalization of doc-comment blocks.

The first line of a block is the reference: its leading whitespace is measured
once and copied through unchanged. Every continuation line gets its leading
whitespace replaced with the canonical rendering of that width, unless its
existing whitespace already renders to the same string. Normalization never looks
at the indentation of the surrounding code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxmlfmt.config.logging import get_logger
from docxmlfmt.core.indentation import (
    IndentStyle,
    is_rendered_as,
    leading_whitespace,
    measure,
    render,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docxmlfmt.config.logging import DocxmlfmtLogger
    from docxmlfmt.config.model import FormattingOptions
    from docxmlfmt.core.locator import DocCommentBlock

logger: DocxmlfmtLogger = get_logger(__name__)


def reference_width(first_line: str, tab_size: int) -> int:
    """Return the column width of the first line's leading whitespace."""
    return measure(leading_whitespace(first_line), tab_size)


def target_indent(first_line: str, options: FormattingOptions) -> str:
    """Return the indentation every continuation line of the block should carry."""
    style = IndentStyle.from_options(options)
    return render(reference_width(first_line, style.tab_size), style)


def reindent_line(text: str, target: str, style: IndentStyle) -> str:
    """Replace the leading whitespace of ``text`` with ``target``.

    The line is returned unchanged when its existing whitespace already renders
    to ``target``. Everything from the marker onward is left untouched.
    """
    existing: str = leading_whitespace(text)
    if is_rendered_as(existing, target, style):
        return text
    return target + text[len(existing) :]


def normalize_lines(lines: Sequence[str], options: FormattingOptions) -> tuple[str, ...]:
    """Normalize the outer indentation of a block given as line texts.

    Args:
        lines (Sequence[str]): Block line texts without line breaks; the first
            entry is the reference line.
        options (FormattingOptions): Formatting options.

    Returns:
        tuple[str, ...]: The normalized line texts (same length as ``lines``).
    """
    if len(lines) <= 1:
        return tuple(lines)
    style = IndentStyle.from_options(options)
    target: str = target_indent(lines[0], options)
    out: list[str] = [lines[0]]
    out.extend(reindent_line(text, target, style) for text in lines[1:])
    return tuple(out)


def normalize(block: DocCommentBlock, options: FormattingOptions) -> tuple[str, ...]:
    """Normalize the outer indentation of ``block``.

    Args:
        block (DocCommentBlock): The located block.
        options (FormattingOptions): Formatting options.

    Returns:
        tuple[str, ...]: The block's line texts after normalization.
    """
    result: tuple[str, ...] = normalize_lines([line.text for line in block.lines], options)
    logger.trace(
        "Normalized block at lines %d..%d (reference width %d)",
        *block.line_range,
        reference_width(block.first_line.text, options.tab_size),
    )
    return result
