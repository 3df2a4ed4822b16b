# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : test_reflow.py
#   file_relpath : tests/core/test_reflow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content reflow: greedy packing, atomic markup and composition with normalization."""

from __future__ import annotations

import pytest

from docxmlfmt.core.errors import ContractViolationError
from docxmlfmt.core.markup import glue, tokenize
from docxmlfmt.core.reflow import CommentLine, pack, reflow, reflow_lines
from tests.conftest import lines_of, make_options, only_block

LONG = "This is a long line of documentation text that exceeds forty columns."


def test_long_line_splits_at_word_boundary() -> None:
    """A line wider than the wrap column is split into two re-indented lines."""
    block = only_block(lines_of("    /// <summary>", f"    /// {LONG}", "    /// </summary>"))
    assert reflow(block, make_options(wrap_column=40)) == (
        "    /// <summary>",
        "    /// This is a long line of documentation",
        "    /// text that exceeds forty columns.",
        "    /// </summary>",
    )


def test_wrap_column_is_relative_to_the_marker() -> None:
    """Indentation does not count against the wrap column."""
    indent = " " * 20
    result = reflow_lines([f"{indent}/// {LONG}"], make_options(wrap_column=40))
    assert result == (
        f"{indent}/// This is a long line of documentation",
        f"{indent}/// text that exceeds forty columns.",
    )


def test_new_lines_get_the_target_indent() -> None:
    """Lines introduced by reflow and misaligned lines both end up at the block width."""
    lines = ["    /// <summary>", f"  /// {LONG}", "/// </summary>"]
    assert reflow_lines(lines, make_options(wrap_column=40, use_tabs=True)) == (
        "    /// <summary>",
        "\t/// This is a long line of documentation",
        "\t/// text that exceeds forty columns.",
        "\t/// </summary>",
    )


def test_short_lines_are_joined() -> None:
    """Lines of one paragraph are joined when they fit."""
    lines = ["/// <summary>", "/// Short", "/// words here.", "/// </summary>"]
    assert reflow_lines(lines, make_options(wrap_column=40)) == (
        "/// <summary>",
        "/// Short words here.",
        "/// </summary>",
    )


def test_tags_are_never_split() -> None:
    """An oversized tag is placed alone on its line instead of being divided."""
    tag = '<see cref="System.Collections.Generic.Dictionary{TKey,TValue}"/>'
    assert reflow_lines([f"/// Use {tag} here."], make_options(wrap_column=20)) == (
        "/// Use",
        f"/// {tag}",
        "/// here.",
    )


def test_punctuation_stays_glued_to_tags() -> None:
    """No space is ever inserted between a tag and the text touching it."""
    result = reflow_lines(
        ['/// Returns <see langword="true"/>, otherwise <see langword="false"/>.'],
        make_options(wrap_column=34),
    )
    assert result == (
        '/// Returns <see langword="true"/>,',
        '/// otherwise <see langword="false"/>.',
    )


def test_block_tags_delimit_paragraphs() -> None:
    """Each element started at a line start is reflowed on its own."""
    lines = [
        '/// <param name="a">First',
        "/// param.</param>",
        '/// <param name="b">Second.</param>',
    ]
    assert reflow_lines(lines, make_options(wrap_column=80)) == (
        '/// <param name="a">First param.</param>',
        '/// <param name="b">Second.</param>',
    )


def test_code_blocks_are_verbatim() -> None:
    """Lines inside and around code elements are never reflowed."""
    lines = [
        "/// <example>",
        "/// <code>",
        "/// var   x =    1;   var y = 2; var z = 3; var w = 4;",
        "///     Indented();",
        "/// </code>",
        "/// </example>",
    ]
    assert reflow_lines(lines, make_options(wrap_column=20)) == tuple(lines)


def test_empty_comment_lines_separate_paragraphs() -> None:
    """A bare marker line is kept and is not merged into its neighbours."""
    lines = ["/// one", "///", "/// two"]
    assert reflow_lines(lines, make_options(wrap_column=40)) == ("/// one", "///", "/// two")


def test_extra_gap_after_marker_is_kept() -> None:
    """Content indented past the marker space keeps its gap on every line."""
    lines = ["///   alpha beta gamma"]
    assert reflow_lines(lines, make_options(wrap_column=12)) == (
        "///   alpha beta",
        "///   gamma",
    )


def test_reflow_is_idempotent() -> None:
    """Reflowing a reflowed block changes nothing."""
    options = make_options(wrap_column=40)
    once = reflow_lines(["  /// <summary>", f"/// {LONG} {LONG}", "/// </summary>"], options)
    assert reflow_lines(once, options) == once


def test_reflow_requires_a_wrap_column() -> None:
    """Calling reflow without a wrap column is a contract violation."""
    with pytest.raises(ContractViolationError):
        reflow_lines(["/// a"], make_options())


def test_pack_overflow_unit_alone() -> None:
    """A unit wider than the budget gets its own line."""
    units = glue(tokenize("a bbbbbbbbbb c"))
    assert pack(units, 5) == ["a", "bbbbbbbbbb", "c"]


def test_pack_boundary_is_inclusive() -> None:
    """A unit that lands exactly on the wrap column still fits."""
    assert pack(glue(tokenize("aa bb")), 5) == ["aa bb"]
    assert pack(glue(tokenize("aa bbb")), 5) == ["aa", "bbb"]


def test_comment_line_parse() -> None:
    """A marker line splits into indent, marker and content."""
    line = CommentLine.parse("\t /// text", "///")
    assert (line.indent, line.marker, line.content) == ("\t ", "///", " text")
    with pytest.raises(ContractViolationError):
        CommentLine.parse("// text", "///")
