"""Lexical environments: a stack of association lists."""

from __future__ import annotations

from dataclasses import dataclass, field

from ebisp.builtins import assoc, is_nil, iter_list, make_list
from ebisp.expr import NIL, Cons, Expr


def _empty_environment() -> Expr:
    return Cons(NIL, NIL)


@dataclass
class Scope:
    """An environment stored as a list of frames, innermost first.

    Each frame is an association list of ``(name . value)`` pairs, e.g.::

        (((y . 20))
         ((x . 10) (name . "Alexey")))
    """

    expr: Expr = field(default_factory=_empty_environment)

    def get(self, name: Expr) -> Expr:
        """Return the ``(name . value)`` binding cell, or ``nil`` if unbound."""
        frames = self.expr
        while isinstance(frames, Cons):
            cell = assoc(name, frames.car)
            if not is_nil(cell):
                return cell
            frames = frames.cdr
        return frames

    def set(self, name: Expr, value: Expr) -> None:
        """Rebind ``name`` where it is bound, or add it to the global frame.

        The frame list itself is kept in place so that closures sharing it
        see new global bindings.
        """
        frames = self.expr
        if not isinstance(frames, Cons):
            self.expr = Cons(make_list(Cons(name, value)), frames)
            return

        while isinstance(frames, Cons):
            cell = assoc(name, frames.car)
            if not is_nil(cell):
                cell.cdr = value
                return
            if is_nil(frames.cdr):
                frames.car = Cons(Cons(name, value), frames.car)
                return
            frames = frames.cdr

    def push_frame(self, names: Expr, values: Expr) -> None:
        """Push a frame binding ``names`` to ``values`` pairwise.

        Extra names or values beyond the shorter list are ignored.
        """
        frame: Expr = NIL
        for name, value in zip(iter_list(names), iter_list(values)):
            frame = Cons(Cons(name, value), frame)
        self.expr = Cons(frame, self.expr)

    def pop_frame(self) -> None:
        """Drop the innermost frame; does nothing on an empty environment."""
        if not is_nil(self.expr):
            self.expr = self.expr.cdr