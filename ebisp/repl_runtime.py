"""Primitives available only in the interactive loop."""

from __future__ import annotations

import sys
from typing import Any

from ebisp.expr import NIL, Cons, Expr, Lambda, Native, Symbol
from ebisp.interpreter import match_list
from ebisp.scope import Scope


def _count_reachable(root: Expr) -> int:
    seen = set()
    stack = [root]
    while stack:
        expr = stack.pop()
        if expr is None or id(expr) in seen:
            continue
        seen.add(id(expr))
        if isinstance(expr, Cons):
            stack.extend((expr.car, expr.cdr))
        elif isinstance(expr, Lambda):
            stack.extend((expr.args_list, expr.body, expr.envir))
    return len(seen)


def _gc_inspect(param: Any, scope: Scope, args: Expr) -> Expr:
    """Print one ``+`` for every live expression reachable from the scope."""
    sys.stdout.write("+" * _count_reachable(scope.expr) + "\n")
    return NIL


def _quit(param: Any, scope: Scope, args: Expr) -> Expr:
    """Flush pending output and leave the interpreter with status 0."""
    sys.stdout.flush()
    sys.stderr.flush()
    sys.exit(0)


def _get_scope(param: Any, scope: Scope, args: Expr) -> Expr:
    return scope.expr


def _print(param: Any, scope: Scope, args: Expr) -> Expr:
    (text,) = match_list("s", args)
    sys.stdout.write(text + "\n")
    return NIL


def load_repl_runtime(scope: Scope) -> None:
    """Bind ``quit``, ``gc-inspect``, ``scope`` and ``print`` in ``scope``."""
    scope.set(Symbol("quit"), Native(_quit))
    scope.set(Symbol("gc-inspect"), Native(_gc_inspect))
    scope.set(Symbol("scope"), Native(_get_scope))
    scope.set(Symbol("print"), Native(_print))