"""Evaluation of expressions."""

from __future__ import annotations

from typing import Any, Tuple

from ebisp.builtins import (
    is_cons,
    is_list,
    is_nil,
    is_number,
    is_special,
    is_string,
    is_symbol,
    length_of_list,
    make_list,
)
from ebisp.expr import (
    NIL,
    Cons,
    Expr,
    Lambda,
    Native,
    Number,
    String,
    Symbol,
    to_sexpr,
)
from ebisp.scope import Scope


class EvalError(Exception):
    """An evaluation failure carrying the error as an expression."""

    def __init__(self, expr: Expr) -> None:
        super().__init__(to_sexpr(expr))
        self.expr = expr


def wrong_argument_type(type_name: str, obj: Expr) -> EvalError:
    return EvalError(make_list(Symbol("wrong-argument-type"), Symbol(type_name), obj))


def wrong_number_of_arguments(count: int) -> EvalError:
    return EvalError(Cons(Symbol("wrong-number-of-arguments"), Number(count)))


def not_implemented() -> EvalError:
    return EvalError(Symbol("not-implemented"))


def read_error(message: str, character: int) -> EvalError:
    return EvalError(make_list(Symbol("read-error"), String(message), Number(character)))


def _unexpected(expr: Expr) -> EvalError:
    return EvalError(Cons(Symbol("unexpected-expression"), expr))


def _eval_atom(scope: Scope, atom: Expr) -> Expr:
    if isinstance(atom, (Number, String, Lambda, Native)):
        return atom
    if isinstance(atom, Symbol):
        cell = scope.get(atom)
        if is_nil(cell):
            raise EvalError(Cons(Symbol("void-variable"), atom))
        return cell.cdr
    raise _unexpected(atom)


def _eval_all_args(scope: Scope, args: Expr) -> Expr:
    values = []
    while isinstance(args, Cons):
        values.append(evaluate(scope, args.car))
        args = args.cdr
    if args is None or isinstance(args, Cons):
        raise _unexpected(args)
    result = _eval_atom(scope, args)
    for value in reversed(values):
        result = Cons(value, result)
    return result


def _call_lambda(function: Expr, args: Expr) -> Expr:
    if not isinstance(function, Lambda):
        raise EvalError(Cons(Symbol("expected-callable"), function))
    if not is_list(args):
        raise EvalError(Cons(Symbol("expected-list"), args))

    names = function.args_list
    count = length_of_list(args)
    if count != length_of_list(names):
        raise wrong_number_of_arguments(count)

    scope = Scope(function.envir)
    scope.push_frame(names, args)

    result: Expr = NIL
    body = function.body
    while not is_nil(body):
        result = evaluate(scope, body.car)
        body = body.cdr
    return result


def _eval_funcall(scope: Scope, callable_expr: Expr, args_expr: Expr) -> Expr:
    function = evaluate(scope, callable_expr)

    if is_symbol(callable_expr) and is_special(callable_expr.name):
        args = args_expr
    else:
        args = _eval_all_args(scope, args_expr)

    if isinstance(function, Native):
        return function.fun(function.param, scope, args)
    return _call_lambda(function, args)


def evaluate(scope: Scope, expr: Expr) -> Expr:
    """Evaluate ``expr`` in ``scope``; raise EvalError on failure."""
    if isinstance(expr, Cons):
        return _eval_funcall(scope, expr.car, expr.cdr)
    if isinstance(expr, (Symbol, Number, String, Lambda, Native)):
        return _eval_atom(scope, expr)
    raise _unexpected(expr)


def eval_block(scope: Scope, block: Expr) -> Expr:
    """Evaluate each form of a list in turn and return the last value."""
    if not is_list(block):
        raise wrong_argument_type("listp", block)

    result: Expr = NIL
    while isinstance(block, Cons):
        result = evaluate(scope, block.car)
        block = block.cdr
    return result


def match_list(fmt: str, xs: Expr) -> Tuple[Any, ...]:
    """Destructure the list ``xs`` according to ``fmt``.

    Format characters: ``d`` a number (its int), ``s`` a string (its text),
    ``q`` a symbol (its name), ``e`` any expression, ``*`` the rest of the
    list.  Returns the matched values in order.
    """
    values: list = []
    pos = 0
    count = 0
    while pos < len(fmt) and not is_nil(xs):
        if not is_cons(xs):
            raise wrong_argument_type("consp", xs)

        x = xs.car
        kind = fmt[pos]
        if kind == "d":
            if not is_number(x):
                raise wrong_argument_type("numberp", x)
            values.append(x.value)
        elif kind == "s":
            if not is_string(x):
                raise wrong_argument_type("stringp", x)
            values.append(x.value)
        elif kind == "q":
            if not is_symbol(x):
                raise wrong_argument_type("symbolp", x)
            values.append(x.name)
        elif kind == "e":
            values.append(x)
        elif kind == "*":
            values.append(xs)
            xs = NIL

        pos += 1
        if not is_nil(xs):
            xs = xs.cdr
        count += 1

    if pos < len(fmt) and fmt[pos] == "*" and is_nil(xs):
        values.append(NIL)
        pos += 1

    if pos < len(fmt) or not is_nil(xs):
        raise wrong_number_of_arguments(count)

    return tuple(values)


def car(param: Any, scope: Scope, args: Expr) -> Expr:
    """The ``car`` primitive: first element of a pair, ``nil`` for ``nil``."""
    (xs,) = match_list("e", args)
    if is_nil(xs):
        return xs
    if not is_cons(xs):
        raise wrong_argument_type("consp", xs)
    return xs.car