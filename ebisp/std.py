"""The standard library of primitives and special forms."""

from __future__ import annotations

from typing import Any

from ebisp.builtins import (
    assoc,
    bool_as_expr,
    equal,
    is_cons,
    is_list_of_symbols,
    is_nil,
    is_number,
    make_list,
)
from ebisp.expr import NIL, T, Cons, Expr, Lambda, Native, Number, String, Symbol
from ebisp.interpreter import (
    EvalError,
    car,
    eval_block,
    evaluate,
    match_list,
    read_error,
    wrong_argument_type,
)
from ebisp.parser import ParseError, read_all_exprs_from_file
from ebisp.scope import Scope


def _make_lambda(args_list: Expr, body: Expr, scope: Scope) -> Expr:
    return Lambda(args_list, body, scope.expr)


def _quasiquote(param: Any, scope: Scope, args: Expr) -> Expr:
    (expr,) = match_list("e", args)

    try:
        head, unquoted = match_list("qe", expr)
    except EvalError:
        head = None

    if head == "unquote":
        return evaluate(scope, unquoted)
    if isinstance(expr, Cons):
        left = _quasiquote(param, scope, make_list(expr.car))
        right = _quasiquote(param, scope, make_list(expr.cdr))
        return Cons(left, right)
    return expr


def _unquote(param: Any, scope: Scope, args: Expr) -> Expr:
    raise EvalError(String("Using unquote outside of quasiquote."))


def _greater_than(param: Any, scope: Scope, args: Expr) -> Expr:
    x1, rest = match_list("d*", args)

    ordered = True
    while not is_nil(rest) and ordered:
        x2, _ = match_list("d*", rest)
        ordered = x1 > x2
        x1, rest = match_list("d*", rest)

    return bool_as_expr(ordered)


def _list_op(param: Any, scope: Scope, args: Expr) -> Expr:
    """Build a fresh list of the already evaluated arguments."""
    items = []
    tail = args
    while isinstance(tail, Cons):
        items.append(tail.car)
        tail = tail.cdr

    result = tail
    for item in reversed(items):
        result = Cons(item, result)
    return result


def _numbers(args: Expr):
    while not is_nil(args):
        if not is_cons(args):
            raise wrong_argument_type("consp", args)
        if not is_number(args.car):
            raise wrong_argument_type("numberp", args.car)
        yield args.car.value
        args = args.cdr


def _plus_op(param: Any, scope: Scope, args: Expr) -> Expr:
    return Number(sum(_numbers(args)))


def _mul_op(param: Any, scope: Scope, args: Expr) -> Expr:
    product = 1
    for value in _numbers(args):
        product *= value
    return Number(product)


def _assoc_op(param: Any, scope: Scope, args: Expr) -> Expr:
    key, alist = match_list("ee", args)
    return assoc(key, alist)


def _set(param: Any, scope: Scope, args: Expr) -> Expr:
    name, value_expr = match_list("qe", args)
    value = evaluate(scope, value_expr)
    scope.set(Symbol(name), value)
    return value


def _quote(param: Any, scope: Scope, args: Expr) -> Expr:
    (expr,) = match_list("e", args)
    return expr


def _begin(param: Any, scope: Scope, args: Expr) -> Expr:
    (block,) = match_list("*", args)
    return eval_block(scope, block)


def _defun(param: Any, scope: Scope, args: Expr) -> Expr:
    name, args_list, body = match_list("ee*", args)
    if not is_list_of_symbols(args_list):
        raise wrong_argument_type("list-of-symbolsp", args_list)
    return evaluate(
        scope, make_list(Symbol("set"), name, _make_lambda(args_list, body, scope))
    )


def _when(param: Any, scope: Scope, args: Expr) -> Expr:
    condition, body = match_list("e*", args)
    if not is_nil(evaluate(scope, condition)):
        return eval_block(scope, body)
    return NIL


def _lambda_op(param: Any, scope: Scope, args: Expr) -> Expr:
    args_list, body = match_list("e*", args)
    if not is_list_of_symbols(args_list):
        raise wrong_argument_type("list-of-symbolsp", args_list)
    return _make_lambda(args_list, body, scope)


def _equal_op(param: Any, scope: Scope, args: Expr) -> Expr:
    obj1, obj2 = match_list("ee", args)
    return bool_as_expr(equal(obj1, obj2))


def _load(param: Any, scope: Scope, args: Expr) -> Expr:
    (filename,) = match_list("s", args)
    try:
        block = read_all_exprs_from_file(filename)
    except ParseError as exc:
        raise read_error(exc.message, 0) from exc
    return eval_block(scope, block)


def _append(param: Any, scope: Scope, args: Expr) -> Expr:
    xs, ys = match_list("ee", args)

    items = []
    while not is_nil(xs):
        x, xs = match_list("e*", xs)
        items.append(x)

    result = ys
    for item in reversed(items):
        result = Cons(item, result)
    return result


_LIBRARY = (
    ("car", car),
    (">", _greater_than),
    ("+", _plus_op),
    ("*", _mul_op),
    ("list", _list_op),
    ("t", None),
    ("nil", None),
    ("assoc", _assoc_op),
    ("quasiquote", _quasiquote),
    ("set", _set),
    ("quote", _quote),
    ("begin", _begin),
    ("defun", _defun),
    ("when", _when),
    ("lambda", _lambda_op),
    ("λ", _lambda_op),
    ("unquote", _unquote),
    ("load", _load),
    ("append", _append),
    ("equal", _equal_op),
)


def load_std_library(scope: Scope) -> None:
    """Bind the standard primitives and special forms in ``scope``."""
    for name, function in _LIBRARY:
        if function is None:
            value = T if name == "t" else NIL
        else:
            value = Native(function)
        scope.set(Symbol(name), value)