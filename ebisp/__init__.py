"""A small Lisp dialect: reader, evaluator, standard library, REPL and colour helpers."""

__version__ = "0.1.0"