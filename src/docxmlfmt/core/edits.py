# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : edits.py
#   file_relpath : src/docxmlfmt/core/edits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compute minimal text edits between a block and its normalized form.

Original and normalized line texts are aligned with `difflib.SequenceMatcher`.
Runs of replaced lines with the same length are edited line by line, trimmed to
the part of each line that actually differs, so an indentation fix only touches
the indentation. Runs whose length changed (reflow) are replaced as whole lines.

Edits are returned in ascending offset order and never overlap, so a caller can
apply them in sequence against the original snapshot.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from docxmlfmt.config.logging import get_logger
from docxmlfmt.core.text import LineBreak, TextEdit, TextSpan

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docxmlfmt.config.logging import DocxmlfmtLogger
    from docxmlfmt.core.locator import DocCommentBlock
    from docxmlfmt.core.text import Line

logger: DocxmlfmtLogger = get_logger(__name__)


def _common_prefix(a: str, b: str) -> int:
    n: int = min(len(a), len(b))
    i: int = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def _common_suffix(a: str, b: str, limit: int) -> int:
    n: int = min(len(a), len(b)) - limit
    i: int = 0
    while i < n and a[len(a) - 1 - i] == b[len(b) - 1 - i]:
        i += 1
    return i


def line_edit(line: Line, new_text: str) -> TextEdit | None:
    """Return the smallest edit turning ``line``'s content into ``new_text``.

    The line break is never touched. Returns None when nothing differs.
    """
    old: str = line.text
    if old == new_text:
        return None
    prefix: int = _common_prefix(old, new_text)
    suffix: int = _common_suffix(old, new_text, prefix)
    return TextEdit(
        TextSpan(line.start + prefix, line.content_end - suffix),
        new_text[prefix : len(new_text) - suffix],
    )


def block_line_break(block: DocCommentBlock) -> LineBreak:
    """Return the break used for lines introduced into ``block`` (LF if none is known)."""
    for line in block.lines:
        if line.line_break is not LineBreak.NONE:
            return line.line_break
    return LineBreak.LF


def diff(block: DocCommentBlock, normalized: Sequence[str]) -> list[TextEdit]:
    """Return the edits that turn ``block`` into ``normalized``.

    Args:
        block (DocCommentBlock): The original block.
        normalized (Sequence[str]): The block's new line texts (without breaks).

    Returns:
        list[TextEdit]: Non-overlapping edits in ascending offset order; empty
            when the block is already normalized.
    """
    original: list[str] = [line.text for line in block.lines]
    if list(normalized) == original:
        return []

    lines: tuple[Line, ...] = block.lines
    last: Line = lines[-1]
    nl: str = block_line_break(block).value
    edits: list[TextEdit] = []

    matcher = difflib.SequenceMatcher(a=original, b=list(normalized), autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        new_lines: Sequence[str] = normalized[j1:j2]
        if tag == "replace" and i2 - i1 == j2 - j1:
            for line, new_text in zip(lines[i1:i2], new_lines):
                edit: TextEdit | None = line_edit(line, new_text)
                if edit is not None:
                    edits.append(edit)
            continue
        if i1 == i2:
            # Pure insertion.
            if i1 < len(lines):
                at: int = lines[i1].start
                edits.append(TextEdit(TextSpan(at, at), "".join(t + nl for t in new_lines)))
            else:
                at = last.content_end
                edits.append(TextEdit(TextSpan(at, at), "".join(nl + t for t in new_lines)))
            continue
        if i2 < len(lines):
            # Whole lines with their breaks; the next kept line starts at lines[i2].
            replacement: str = "".join(t + nl for t in new_lines)
            edits.append(TextEdit(TextSpan(lines[i1].start, lines[i2].start), replacement))
        elif new_lines:
            # Run reaches the block's last line, whose break is kept as-is.
            edits.append(
                TextEdit(TextSpan(lines[i1].start, last.content_end), nl.join(new_lines))
            )
        else:
            # Deleting the tail: remove the preceding break instead of the last one.
            start: int = lines[i1 - 1].content_end
            edits.append(TextEdit(TextSpan(start, last.content_end), ""))

    logger.trace("Block at lines %d..%d: %d edit(s)", *block.line_range, len(edits))
    return edits
