# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : test_edits.py
#   file_relpath : tests/core/test_edits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Edit builder: minimal per-line edits and line insertions/deletions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxmlfmt.core.edits import block_line_break, diff, line_edit
from docxmlfmt.core.text import LineBreak, TextEdit, TextSpan, apply_edits, split_lines
from tests.conftest import only_block

if TYPE_CHECKING:
    from collections.abc import Sequence


def _apply_block(text: str, normalized: Sequence[str]) -> tuple[list[TextEdit], str]:
    edits = diff(only_block(text), normalized)
    starts = [e.start for e in edits]
    assert starts == sorted(starts)
    for prev, nxt in zip(edits, edits[1:]):
        assert prev.end <= nxt.start
    return edits, apply_edits(text, edits)


def test_unchanged_block_has_no_edits() -> None:
    """An identical normalized form yields no edits."""
    edits, _ = _apply_block("  /// a\n  /// b\n", ["  /// a", "  /// b"])
    assert edits == []


def test_indentation_fix_touches_only_whitespace() -> None:
    """Per-line edits are trimmed to the differing characters."""
    edits, result = _apply_block("    /// a\n/// b\n", ["    /// a", "    /// b"])
    assert edits == [TextEdit(TextSpan(10, 10), "    ")]
    assert result == "    /// a\n    /// b\n"


def test_line_edit_replaces_tabs_with_spaces() -> None:
    """Replacing one indentation by another keeps the marker out of the edit."""
    line = split_lines("\t/// x")[0]
    assert line_edit(line, "    /// x") == TextEdit(TextSpan(0, 1), "    ")
    assert line_edit(line, "\t/// x") is None


def test_split_line_into_two() -> None:
    """A line split by reflow is replaced, keeping the original final break."""
    _, result = _apply_block("/// aaa bbb\n", ["/// aaa", "/// bbb"])
    assert result == "/// aaa\n/// bbb\n"


def test_join_lines() -> None:
    """Joined lines replace the whole run."""
    _, result = _apply_block("/// a\n/// b\ncode\n", ["/// a b"])
    assert result == "/// a b\ncode\n"


def test_delete_trailing_line() -> None:
    """Deleting the last line removes the preceding break, not the block's final one."""
    _, result = _apply_block("/// a\n/// b\ncode", ["/// a"])
    assert result == "/// a\ncode"


def test_insert_in_the_middle_uses_block_break() -> None:
    """Introduced lines reuse the CRLF break of the block."""
    _, result = _apply_block("/// a\r\n/// b\r\n", ["/// a", "/// x", "/// b"])
    assert result == "/// a\r\n/// x\r\n/// b\r\n"


def test_insert_after_last_line_without_break() -> None:
    """Appending to a block at the end of the text adds a break before the new line."""
    _, result = _apply_block("/// a", ["/// a", "/// b"])
    assert result == "/// a\n/// b"


def test_block_line_break() -> None:
    """The first real break of the block is used; LF when there is none."""
    assert block_line_break(only_block("x\r\n/// a\r\n")) is LineBreak.CRLF
    assert block_line_break(only_block("/// a")) is LineBreak.LF


def test_mixed_changes_stay_ordered() -> None:
    """Indentation edits and whole-line replacements in one block do not overlap."""
    text = "  /// <summary>\n/// one two three four\n    /// </summary>\n"
    normalized = ["  /// <summary>", "  /// one two", "  /// three four", "  /// </summary>"]
    _, result = _apply_block(text, normalized)
    assert result == "".join(line + "\n" for line in normalized)
