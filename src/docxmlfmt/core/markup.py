# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : markup.py
#   file_relpath : src/docxmlfmt/core/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flat tokenizer for the markup embedded in doc comments.

The tokenizer does not build a tree and does not check that tags are balanced.
It only distinguishes atomic markup tokens (tags, comments, declarations) from
plain words, and records whether whitespace preceded each token. Tokens that
touch without whitespace are later glued into a single `Unit` so that reflow
never inserts or removes a space inside e.g. ``<see cref="T"/>.``.

Malformed input is handled permissively: a ``<`` that does not open a tag which
closes on the same text is an ordinary character of a word.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

# Inline elements flow with the surrounding text; any other element tag placed at
# the start or end of a line delimits a paragraph.
INLINE_ELEMENTS: frozenset[str] = frozenset(
    {"a", "b", "c", "em", "i", "paramref", "see", "strong", "tt", "typeparamref", "u"}
)

PREFORMATTED_ELEMENTS: frozenset[str] = frozenset({"code", "pre"})


class TokenKind(Enum):
    """Kinds of markup tokens."""

    WORD = "word"
    OPEN_TAG = "open"
    CLOSE_TAG = "close"
    EMPTY_TAG = "empty"
    COMMENT = "comment"

    @property
    def is_markup(self) -> bool:
        """Whether tokens of this kind are markup (atomic) rather than words."""
        return self is not TokenKind.WORD


@dataclass(frozen=True, slots=True)
class Token:
    """One token of comment content.

    Attributes:
        kind (TokenKind): Token kind.
        text (str): Verbatim token text (tags keep their attribute lists as-is).
        space_before (bool): Whether whitespace separated this token from the previous one.
    """

    kind: TokenKind
    text: str
    space_before: bool

    @property
    def name(self) -> str:
        """Element name for tag tokens, empty for words and comments."""
        if self.kind in (TokenKind.WORD, TokenKind.COMMENT):
            return ""
        start: int = 2 if self.kind is TokenKind.CLOSE_TAG else 1
        end: int = start
        while end < len(self.text) and not (self.text[end].isspace() or self.text[end] in "/>"):
            end += 1
        return self.text[start:end]

    @property
    def is_block_tag(self) -> bool:
        """Whether this is a tag of an element that is not inline."""
        return self.kind in (
            TokenKind.OPEN_TAG,
            TokenKind.CLOSE_TAG,
            TokenKind.EMPTY_TAG,
        ) and self.name.lower() not in INLINE_ELEMENTS


@dataclass(frozen=True, slots=True)
class Unit:
    """Tokens glued together without whitespace; the indivisible packing unit."""

    tokens: tuple[Token, ...]

    @property
    def text(self) -> str:
        """The unit's text as it is emitted."""
        return "".join(token.text for token in self.tokens)

    @property
    def width(self) -> int:
        """The unit's rendered width."""
        return len(self.text)


def _starts_tag(text: str, i: int) -> bool:
    if i + 1 >= len(text):
        return False
    nxt: str = text[i + 1]
    return nxt.isalpha() or nxt in "/!?_:"


def find_markup_end(text: str, i: int) -> int:
    """Return the index one past the markup construct starting at ``text[i] == "<"``.

    Comments (``<!-- ... -->``) end at ``-->``. Tags end at the first ``>`` outside
    a quoted attribute value.

    Args:
        text (str): Content being tokenized.
        i (int): Index of a ``<`` character.

    Returns:
        int: End index (exclusive), or -1 when no complete markup starts at ``i``.
    """
    if not _starts_tag(text, i):
        return -1
    if text.startswith("<!--", i):
        close: int = text.find("-->", i + 4)
        return -1 if close == -1 else close + 3
    quote: str | None = None
    j: int = i + 1
    while j < len(text):
        ch: str = text[j]
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == ">":
            return j + 1
        elif ch == "<":
            return -1
        j += 1
    return -1


def _markup_kind(markup: str) -> TokenKind:
    if markup.startswith(("<!", "<?")):
        return TokenKind.COMMENT
    if markup.startswith("</"):
        return TokenKind.CLOSE_TAG
    if markup.endswith("/>"):
        return TokenKind.EMPTY_TAG
    return TokenKind.OPEN_TAG


def tokenize(text: str) -> list[Token]:
    """Split comment content into markup tokens and words.

    Args:
        text (str): Comment content (no line breaks).

    Returns:
        list[Token]: Tokens in order. Whitespace itself is not a token; it is
            recorded on the following token as ``space_before``.
    """
    tokens: list[Token] = []
    space: bool = False
    i: int = 0
    n: int = len(text)
    while i < n:
        ch: str = text[i]
        if ch.isspace():
            space = True
            i += 1
            continue
        if ch == "<":
            end: int = find_markup_end(text, i)
            if end != -1:
                markup: str = text[i:end]
                tokens.append(Token(_markup_kind(markup), markup, space))
                space = False
                i = end
                continue
        j: int = i + 1
        while j < n and not text[j].isspace():
            if text[j] == "<" and find_markup_end(text, j) != -1:
                break
            j += 1
        tokens.append(Token(TokenKind.WORD, text[i:j], space))
        space = False
        i = j
    return tokens


def glue(tokens: Iterable[Token]) -> list[Unit]:
    """Group tokens that touch without whitespace into packing units."""
    units: list[Unit] = []
    current: list[Token] = []
    for token in tokens:
        if current and token.space_before:
            units.append(Unit(tuple(current)))
            current = []
        current.append(token)
    if current:
        units.append(Unit(tuple(current)))
    return units


def is_markup_only(tokens: Iterable[Token]) -> bool:
    """Return True when every token is markup (and there is at least one)."""
    seen: bool = False
    for token in tokens:
        if not token.kind.is_markup:
            return False
        seen = True
    return seen
