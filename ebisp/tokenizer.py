"""Splitting source text into tokens."""

from __future__ import annotations

from typing import NamedTuple

_WHITESPACE = frozenset(" \t\n\v\f\r")
_FORBIDDEN_SYMBOL_CHARS = frozenset("()\"';.`,")
_SINGLE_CHAR_TOKENS = frozenset("().'`,")


class Token(NamedTuple):
    """A half-open span ``[begin, end)`` of the source text."""

    begin: int
    end: int


def _is_symbol_char(char: str) -> bool:
    return char not in _FORBIDDEN_SYMBOL_CHARS and char not in _WHITESPACE


def _skip_whitespace(source: str, pos: int) -> int:
    while pos < len(source) and source[pos] in _WHITESPACE:
        pos += 1
    return pos


def next_token(source: str, pos: int = 0) -> Token:
    """Return the next token of ``source`` starting at or after ``pos``.

    Whitespace and ``;`` comments are skipped.  At the end of the text an
    empty token positioned at ``len(source)`` is returned.
    """
    size = len(source)
    pos = _skip_whitespace(source, pos)

    while pos < size and source[pos] == ";":
        newline = source.find("\n", pos + 1)
        pos = size if newline < 0 else newline
        pos = _skip_whitespace(source, pos)

    if pos >= size:
        return Token(size, size)

    char = source[pos]
    if char in _SINGLE_CHAR_TOKENS:
        return Token(pos, pos + 1)

    if char == '"':
        closing = source.find('"', pos + 1)
        return Token(pos, size if closing < 0 else closing + 1)

    end = pos + 1
    while end < size and _is_symbol_char(source[end]):
        end += 1
    return Token(pos, end)