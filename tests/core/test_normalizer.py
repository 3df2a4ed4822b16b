# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : test_normalizer.py
#   file_relpath : tests/core/test_normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Outer-indent normalizer: reference width, tab styles and idempotence."""

from __future__ import annotations

from docxmlfmt.core.edits import diff
from docxmlfmt.core.indentation import leading_whitespace, measure
from docxmlfmt.core.normalizer import normalize, normalize_lines, target_indent
from tests.conftest import lines_of, make_options, only_block


def test_mismatched_spaces_are_aligned_to_first_line() -> None:
    """Continuation lines take the first line's width; the first line is untouched."""
    block = only_block(lines_of("    /// <summary>", "/// Text.", "  /// </summary>"))
    assert normalize(block, make_options()) == (
        "    /// <summary>",
        "    /// Text.",
        "    /// </summary>",
    )


def test_consistent_zero_indent_produces_no_edits() -> None:
    """A block already at column 0 is left alone."""
    block = only_block(lines_of("/// <summary>", "/// Text.", "/// </summary>"))
    assert diff(block, normalize(block, make_options())) == []


def test_enclosing_code_indent_is_ignored() -> None:
    """Normalization works within the block, never against the surrounding code."""
    text = lines_of(
        "    class C",
        "    {",
        "        /// <summary>",
        "        /// Text.",
        "        /// </summary>",
        "    }",
    )
    block = only_block(text)
    assert diff(block, normalize(block, make_options())) == []


def test_tabs_with_tab_size_four() -> None:
    """A width of four renders as one tab; the spaced first line stays as it is."""
    block = only_block(lines_of("    /// a", "/// b", "      /// c"))
    assert normalize(block, make_options(use_tabs=True, tab_size=4)) == (
        "    /// a",
        "\t/// b",
        "\t/// c",
    )


def test_tabs_with_tab_size_three() -> None:
    """A width of four with three-column tabs renders as one tab and one space."""
    block = only_block(lines_of("    /// a", "/// b", "  /// c"))
    assert normalize(block, make_options(use_tabs=True, tab_size=3)) == (
        "    /// a",
        "\t /// b",
        "\t /// c",
    )


def test_tab_first_line_with_spaces_style() -> None:
    """A tab on the first line is measured, and continuations use spaces."""
    block = only_block(lines_of("\t/// a", "/// b"))
    assert normalize(block, make_options(use_tabs=False, tab_size=2)) == ("\t/// a", "  /// b")


def test_single_line_block_is_unchanged() -> None:
    """A block without continuation lines has nothing to normalize."""
    block = only_block(lines_of("         /// lonely"))
    assert normalize(block, make_options()) == ("         /// lonely",)


def test_equivalent_whitespace_is_kept_verbatim() -> None:
    """A line whose whitespace already renders to the target is not rewritten."""
    lines = ["    /// a", "  \t/// b"]
    assert normalize_lines(lines, make_options(tab_size=4)) == ("    /// a", "  \t/// b")


def test_mixed_whitespace_is_rerendered_with_spaces() -> None:
    """Mixed input of the wrong width is rebuilt from the reference width."""
    lines = ["        /// a", "\t /// b"]
    assert normalize_lines(lines, make_options(tab_size=4)) == (
        "        /// a",
        "        /// b",
    )


def test_content_after_marker_is_untouched() -> None:
    """Only the whitespace before the marker changes."""
    lines = ["  ///   <para>", "///\tdeep   text  "]
    assert normalize_lines(lines, make_options()) == ("  ///   <para>", "  ///\tdeep   text  ")


def test_width_correctness_and_idempotence() -> None:
    """Every continuation measures to the reference width and a second pass is a no-op."""
    options = make_options(use_tabs=True, tab_size=4)
    lines = ["      /// a", "/// b", "\t\t/// c", "  \t /// d"]
    once = normalize_lines(lines, options)
    for line in once[1:]:
        assert measure(leading_whitespace(line), 4) == 6
    assert normalize_lines(once, options) == once


def test_target_indent() -> None:
    """The target indent is the rendering of the first line's width."""
    assert target_indent("  \t/// x", make_options(use_tabs=False, tab_size=4)) == "    "
    assert target_indent("  \t/// x", make_options(use_tabs=True, tab_size=4)) == "\t"
