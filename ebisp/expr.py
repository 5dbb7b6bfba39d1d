"""Expression values of the language."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union


@dataclass(frozen=True)
class Symbol:
    """A named symbol."""

    name: str

    def __str__(self) -> str:
        return to_sexpr(self)


@dataclass(frozen=True)
class Number:
    """An integer number."""

    value: int

    def __str__(self) -> str:
        return to_sexpr(self)


@dataclass(frozen=True)
class String:
    """A string literal."""

    value: str

    def __str__(self) -> str:
        return to_sexpr(self)


@dataclass(eq=False, repr=False)
class Lambda:
    """A user-defined function closed over its environment."""

    args_list: Any
    body: Any
    envir: Any

    def __str__(self) -> str:
        return to_sexpr(self)

    def __repr__(self) -> str:
        return "Lambda(<lambda>)"


@dataclass(eq=False, repr=False)
class Native:
    """A function implemented in Python, called with ``(param, scope, args)``."""

    fun: Callable[..., Any]
    param: Any = None

    def __str__(self) -> str:
        return to_sexpr(self)

    def __repr__(self) -> str:
        name = getattr(self.fun, "__name__", "native")
        return f"Native({name})"


@dataclass(eq=False, repr=False)
class Cons:
    """A mutable pair; chains of pairs ending in ``nil`` form lists."""

    car: Any
    cdr: Any

    def __str__(self) -> str:
        return to_sexpr(self)

    def __repr__(self) -> str:
        return f"Cons({to_sexpr(self)})"


Atom = Union[Symbol, Number, String, Lambda, Native]
Expr = Optional[Union[Atom, Cons]]

NIL = Symbol("nil")
T = Symbol("t")


def _is_nil_symbol(expr: Expr) -> bool:
    return isinstance(expr, Symbol) and expr.name == "nil"


def to_sexpr(expr: Expr) -> str:
    """Render an expression as S-expression text; ``None`` renders as ''."""
    if expr is None:
        return ""
    if isinstance(expr, Symbol):
        return expr.name
    if isinstance(expr, Number):
        return str(expr.value)
    if isinstance(expr, String):
        return f'"{expr.value}"'
    if isinstance(expr, Lambda):
        return "<lambda>"
    if isinstance(expr, Native):
        return "<native>"
    if isinstance(expr, Cons):
        parts = [to_sexpr(expr.car)]
        tail = expr.cdr
        while isinstance(tail, Cons):
            parts.append(to_sexpr(tail.car))
            tail = tail.cdr
        text = " ".join(parts)
        if not _is_nil_symbol(tail):
            text += " . " + to_sexpr(tail)
        return f"({text})"
    raise TypeError(f"not an expression: {expr!r}")