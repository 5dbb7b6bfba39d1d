"""Reading expressions from source text and files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

from ebisp.builtins import make_list
from ebisp.expr import NIL, Cons, Expr, Number, String, Symbol
from ebisp.tokenizer import Token, next_token

MAX_FILE_SIZE = 5 * 1000 * 1000

_DIGITS = frozenset("0123456789")
_PREFIXES = {"'": "quote", "`": "quasiquote", ",": "unquote"}


class ParseError(Exception):
    """A failure to read an expression.

    ``position`` is the index into the source text where the error was
    found, or ``None`` when the failure is not tied to a place in the text.
    """

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


def _char_at(source: str, pos: int) -> str:
    return source[pos] if pos < len(source) else ""


def _parse_list_end(source: str, token: Token) -> Tuple[Expr, int]:
    if _char_at(source, token.begin) != ")":
        raise ParseError("Expected )", token.begin)
    return NIL, token.end


def _parse_cdr(source: str, token: Token) -> Tuple[Expr, int]:
    if _char_at(source, token.begin) != ".":
        raise ParseError("Expected .", token.begin)

    cdr, end = read_expr(source, token.end)
    token = next_token(source, end)
    if _char_at(source, token.begin) != ")":
        raise ParseError("Expected )", token.begin)
    return cdr, token.end


def _parse_list(source: str, token: Token) -> Tuple[Expr, int]:
    if _char_at(source, token.begin) != "(":
        raise ParseError("Expected (", token.begin)

    token = next_token(source, token.end)
    if _char_at(source, token.begin) == ")":
        return _parse_list_end(source, token)

    first, end = _parse_expr(source, token)
    head = Cons(first, None)
    last = head
    token = next_token(source, end)

    while _char_at(source, token.begin) not in (".", ")", ""):
        item, end = _parse_expr(source, token)
        cell = Cons(item, None)
        last.cdr = cell
        last = cell
        token = next_token(source, end)

    if _char_at(source, token.begin) == ".":
        tail, end = _parse_cdr(source, token)
    else:
        tail, end = _parse_list_end(source, token)

    last.cdr = tail
    return head, end


def _parse_string(source: str, token: Token) -> Tuple[Expr, int]:
    if _char_at(source, token.begin) != '"':
        raise ParseError('Expected "', token.begin)
    if source[token.end - 1] != '"':
        raise ParseError("Unclosed string", token.begin)
    if token.begin + 1 == token.end:
        return String(""), token.end
    return String(source[token.begin + 1 : token.end - 1]), token.end


def _parse_number(source: str, token: Token) -> Optional[Tuple[Expr, int]]:
    text = source[token.begin : token.end]
    digits = text[1:] if text.startswith("-") else text
    if not digits or any(char not in _DIGITS for char in digits):
        return None
    return Number(int(text)), token.end


def _parse_symbol(source: str, token: Token) -> Tuple[Expr, int]:
    if token.begin >= len(source):
        raise ParseError("EOF", token.begin)
    return Symbol(source[token.begin : token.end]), token.end


def _parse_expr(source: str, token: Token) -> Tuple[Expr, int]:
    if token.begin >= len(source):
        raise ParseError("EOF", token.begin)

    char = source[token.begin]
    if char == "(":
        return _parse_list(source, token)
    if char == '"':
        return _parse_string(source, token)
    if char in _PREFIXES:
        inner, end = _parse_expr(source, next_token(source, token.end))
        return make_list(Symbol(_PREFIXES[char]), inner), end

    if char == "-" or char in _DIGITS:
        number = _parse_number(source, token)
        if number is not None:
            return number

    return _parse_symbol(source, token)


def read_expr(source: str, pos: int = 0) -> Tuple[Expr, int]:
    """Read one expression starting at ``pos``.

    Returns the expression and the index just past it.  Raises ParseError.
    """
    return _parse_expr(source, next_token(source, pos))


def read_all_exprs(source: str) -> Tuple[Expr, int]:
    """Read every expression of ``source`` into a list.

    Returns the list and the index just past the last expression read.
    Reading stops once the next token reaches the very end of the text.
    """
    size = len(source)
    token = next_token(source)
    if token.end >= size:
        return NIL, token.end

    first, end = _parse_expr(source, token)
    head = Cons(first, None)
    last = head

    token = next_token(source, end)
    while token.end < size:
        item, end = _parse_expr(source, token)
        cell = Cons(item, None)
        last.cdr = cell
        last = cell
        token = next_token(source, end)

    last.cdr = NIL
    return head, end


def _read_file(path: Union[str, Path]) -> str:
    try:
        with open(path, "rb") as stream:
            data = stream.read(MAX_FILE_SIZE)
    except OSError as exc:
        raise ParseError(exc.strerror or str(exc)) from exc

    if not data:
        raise ParseError("File is empty")
    if len(data) >= MAX_FILE_SIZE:
        raise ParseError("File is too big")
    return data.decode("utf-8", errors="replace")


def read_expr_from_file(path: Union[str, Path]) -> Expr:
    """Read the first expression of a file."""
    expr, _ = read_expr(_read_file(path))
    return expr


def read_all_exprs_from_file(path: Union[str, Path]) -> Expr:
    """Read every expression of a file into a list."""
    expr, _ = read_all_exprs(_read_file(path))
    return expr


def format_parse_error(source: str, error: ParseError) -> str:
    """Render ``error`` with a caret under its position in ``source``."""
    text = ""
    if error.position is not None:
        text += f"{source}\n{' ' * error.position}^\n"
    return text + f"{error.message}\n"