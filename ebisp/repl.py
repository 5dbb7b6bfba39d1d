"""The interactive read-eval-print loop."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from ebisp.expr import to_sexpr
from ebisp.interpreter import EvalError, evaluate
from ebisp.parser import ParseError, format_parse_error, read_expr
from ebisp.repl_runtime import load_repl_runtime
from ebisp.scope import Scope
from ebisp.std import load_std_library
from ebisp.tokenizer import next_token

REPL_BUFFER_MAX = 1024


def eval_line(
    scope: Scope,
    line: str,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> None:
    """Evaluate every expression of ``line``, printing each result.

    Stops at the first parse or evaluation error, which goes to ``err``.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    while line:
        try:
            expr, end = read_expr(line)
        except ParseError as exc:
            err.write(format_parse_error(line, exc))
            return

        try:
            value = evaluate(scope, expr)
        except EvalError as exc:
            err.write(f"Error:\t{to_sexpr(exc.expr)}\n")
            return

        out.write(to_sexpr(value) + "\n")
        line = line[next_token(line, end).begin :]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the loop on standard input until end of input."""
    scope = Scope()
    load_std_library(scope)
    load_repl_runtime(scope)

    while True:
        sys.stdout.write("> ")
        sys.stdout.flush()

        line = sys.stdin.readline(REPL_BUFFER_MAX - 1)
        if not line:
            return -1

        eval_line(scope, line)


if __name__ == "__main__":
    sys.exit(main())