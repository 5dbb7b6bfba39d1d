"""Predicates and helpers over expressions."""

from __future__ import annotations

from typing import Iterator

from ebisp.expr import NIL, T, Cons, Expr, Lambda, Native, Number, String, Symbol

_SPECIALS = frozenset(
    ("set", "quote", "begin", "defun", "lambda", "λ", "when", "quasiquote")
)


def equal(obj1: Expr, obj2: Expr) -> bool:
    """Structural equality; lambdas by identity, natives by function and param."""
    while isinstance(obj1, Cons) and isinstance(obj2, Cons):
        if not equal(obj1.car, obj2.car):
            return False
        obj1, obj2 = obj1.cdr, obj2.cdr

    if type(obj1) is not type(obj2):
        return False
    if obj1 is None:
        return True
    if isinstance(obj1, (Symbol, Number, String)):
        return obj1 == obj2
    if isinstance(obj1, Lambda):
        return obj1 is obj2
    if isinstance(obj1, Native):
        return obj1.fun == obj2.fun and obj1.param is obj2.param
    return False


def is_nil(obj: Expr) -> bool:
    return isinstance(obj, Symbol) and obj.name == "nil"


def is_symbol(obj: Expr) -> bool:
    return isinstance(obj, Symbol)


def is_number(obj: Expr) -> bool:
    return isinstance(obj, Number)


def is_string(obj: Expr) -> bool:
    return isinstance(obj, String)


def is_cons(obj: Expr) -> bool:
    return isinstance(obj, Cons)


def is_lambda(obj: Expr) -> bool:
    return isinstance(obj, Lambda)


def is_list(obj: Expr) -> bool:
    """True for ``nil`` and for chains of pairs ending in ``nil``."""
    while isinstance(obj, Cons):
        obj = obj.cdr
    return is_nil(obj)


def is_list_of_symbols(obj: Expr) -> bool:
    while isinstance(obj, Cons):
        if not isinstance(obj.car, Symbol):
            return False
        obj = obj.cdr
    return is_nil(obj)


def iter_list(obj: Expr) -> Iterator[Expr]:
    """Yield the elements of a proper list; raise TypeError on an improper one."""
    while not is_nil(obj):
        if not isinstance(obj, Cons):
            raise TypeError(f"not a proper list tail: {obj!r}")
        yield obj.car
        obj = obj.cdr


def length_of_list(obj: Expr) -> int:
    return sum(1 for _ in iter_list(obj))


def assoc(key: Expr, alist: Expr) -> Expr:
    """Return the first pair of ``alist`` whose car equals ``key``, else the tail."""
    while isinstance(alist, Cons):
        entry = alist.car
        if isinstance(entry, Cons) and equal(entry.car, key):
            return entry
        alist = alist.cdr
    return alist


def is_special(name: str) -> bool:
    """True if ``name`` is a form whose arguments are passed unevaluated."""
    return name in _SPECIALS


def make_list(*args: Expr) -> Expr:
    """Build a proper list from the given expressions."""
    result: Expr = NIL
    for item in reversed(args):
        result = Cons(item, result)
    return result


def bool_as_expr(condition: bool) -> Expr:
    return T if condition else NIL