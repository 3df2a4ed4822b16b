# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : test_markup.py
#   file_relpath : tests/core/test_markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup tokenizer: atomic tags, permissive handling of stray ``<`` and gluing."""

from __future__ import annotations

from docxmlfmt.core.markup import (
    TokenKind,
    find_markup_end,
    glue,
    is_markup_only,
    tokenize,
)


def test_tokenize_words_and_tags() -> None:
    """Tags are single tokens; whitespace is recorded on the following token."""
    tokens = tokenize('See <see cref="T"/>.')
    assert [(t.kind, t.text, t.space_before) for t in tokens] == [
        (TokenKind.WORD, "See", False),
        (TokenKind.EMPTY_TAG, '<see cref="T"/>', True),
        (TokenKind.WORD, ".", False),
    ]


def test_attribute_lists_stay_in_one_token() -> None:
    """Whitespace and ``>`` inside quoted attribute values do not end a tag."""
    tokens = tokenize('<param name="a b" note=\'x > y\'>Text</param>')
    assert [t.kind for t in tokens] == [TokenKind.OPEN_TAG, TokenKind.WORD, TokenKind.CLOSE_TAG]
    assert tokens[0].text == '<param name="a b" note=\'x > y\'>'
    assert tokens[0].name == "param"
    assert tokens[2].name == "param"


def test_comments_are_atomic() -> None:
    """An XML comment is one token even when it contains spaces."""
    tokens = tokenize("a <!-- keep me --> b")
    assert [t.kind for t in tokens] == [TokenKind.WORD, TokenKind.COMMENT, TokenKind.WORD]
    assert tokens[1].text == "<!-- keep me -->"


def test_stray_angle_brackets_are_text() -> None:
    """A ``<`` that does not open a complete tag is part of a word."""
    assert [t.text for t in tokenize("a < b")] == ["a", "<", "b"]
    assert [t.text for t in tokenize("x<y")] == ["x<y"]
    tokens = tokenize('<see cref="x')
    assert all(t.kind is TokenKind.WORD for t in tokens)
    assert [t.text for t in tokens] == ["<see", 'cref="x']


def test_find_markup_end() -> None:
    """The end index is exclusive; incomplete markup reports -1."""
    assert find_markup_end("<b>x", 0) == 3
    assert find_markup_end("<b", 0) == -1
    assert find_markup_end("<!-- x", 0) == -1
    assert find_markup_end("< b>", 0) == -1


def test_block_and_inline_tags() -> None:
    """Only non-inline element tags delimit paragraphs."""
    para, see, word = tokenize('<para><see cref="T"/>word')
    assert para.is_block_tag
    assert not see.is_block_tag
    assert not word.is_block_tag


def test_glue_groups_touching_tokens() -> None:
    """Tokens without whitespace between them form a single unit."""
    units = glue(tokenize('Use <c>Foo</c>, then <see cref="Bar"/>.'))
    assert [u.text for u in units] == ["Use", "<c>Foo</c>,", "then", '<see cref="Bar"/>.']
    assert units[1].width == len("<c>Foo</c>,")


def test_is_markup_only() -> None:
    """Lines holding only tags are markup-only; empty lines are not."""
    assert is_markup_only(tokenize("<summary>"))
    assert is_markup_only(tokenize("</para> <para>"))
    assert not is_markup_only(tokenize("<b>x</b>"))
    assert not is_markup_only([])
