# ebisp

ebisp is a small Lisp dialect: a reader for s-expressions, an evaluator
with lexical closures, a compact standard library and an interactive REPL.

## Installing

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## The REPL

    ebisp

Type expressions at the `> ` prompt. A line may hold several
expressions; they are evaluated in order and each result is printed.
Evaluation of a line stops at the first error. An evaluation error is
written to standard error as `Error:` followed by the error expression;
a parse error is written as the line with a caret under the offending
position, followed by the message. At most 1023 characters of a line
are read at a time. The loop ends when input runs out.

    > (defun sq (x) (* x x))
    <lambda>
    > (sq 7)
    49
    > `(1 ,(+ 1 1) 3)
    (1 2 3)

The REPL adds four functions to the standard library:

- `(quit)` leaves the REPL with status 0.
- `(gc-inspect)` prints one `+` for every expression reachable from the
  current scope.
- `(scope)` returns the current environment as a list of frames.
- `(print "text")` prints a string on its own line.

## The language

- Numbers are integers: `42`, `-7`.
- Strings are written in double quotes: `"hello"`. They have no escape
  sequences.
- Symbols: `foo`, `+`, `λ`.
- Lists are `(a b c)`. A dotted pair is written `(a . b)`.
- `'x` is `(quote x)`, `` `x `` is `(quasiquote x)`, and `,x` is `(unquote x)`.
- A comment runs from `;` to the end of the line.

The special forms, whose arguments are passed unevaluated, are `set`,
`quote`, `begin`, `defun`, `lambda` (also `λ`), `when` and `quasiquote`.
The built-in functions are `car`, `>`, `+`, `*`, `list`, `assoc`,
`append` (of two lists), `equal`, `unquote` (an error outside
`quasiquote`) and `load` (evaluates every expression of a file). The
symbols `t` and `nil` evaluate to themselves.

## Using it from Python

```python
from ebisp.scope import Scope
from ebisp.std import load_std_library
from ebisp.parser import read_expr
from ebisp.interpreter import evaluate, EvalError
from ebisp.expr import to_sexpr

scope = Scope()
load_std_library(scope)

expr, _end = read_expr("(+ 1 2 3)", 0)
print(to_sexpr(evaluate(scope, expr)))   # 6

try:
    evaluate(scope, read_expr("undefined-name", 0)[0])
except EvalError as error:
    print(to_sexpr(error.expr))          # (void-variable . undefined-name)
```

Values are instances of `Symbol`, `Number`, `String`, `Lambda`,
`Native` and `Cons` from `ebisp.expr`. A Python function can be bound
as a primitive with `scope.set(Symbol("name"), Native(fun))`; it is
called as `fun(param, scope, args)` and may use
`ebisp.interpreter.match_list` to destructure its arguments.
`ebisp.builtins` has the predicates and list helpers (`equal`,
`is_list`, `make_list`, `iter_list`, `assoc` and others).

A parse failure raises `ebisp.parser.ParseError`, and
`format_parse_error` renders it with a caret under the offending
position. `read_all_exprs` and `read_all_exprs_from_file` read a whole
program as one list of expressions; files must be non-empty and smaller
than 5,000,000 bytes.

`ebisp.color` holds a small RGBA color type, `Color`, with `hsla` and
`hexstr` to build colors and methods to desaturate, darken, invert,
scale, and convert colors to bytes, hex text and HSLA.

## What it does not do

There is no floating-point arithmetic, no subtraction or division, no
string escapes and no macros beyond `quasiquote`. Memory is left to
Python; `gc-inspect` only reports what is reachable.