"""Core evaluator for the Sprig interpreter.

Walks a Cell tree against an Environment. Atoms resolve through the
environment, literals evaluate to themselves, a Quoted cell yields its inner
cell unevaluated, and a non-empty list is a call: the head is evaluated to a
Function, then arguments are either evaluated left to right (NORMAL) or handed
over raw (SPECIAL_FORM, MACRO).

Evaluation is plain recursion with no tail-call elimination; deep user
recursion ends in RecursionError.
"""

from __future__ import annotations

import logging
from typing import Optional

from sprig import LispValue
from sprig.errors import SprigNotCallable, SprigTypeError
from sprig.types.cell import (
    Atom,
    Bool,
    Function,
    ListCell,
    Number,
    Quoted,
    Str,
)
from sprig.types.environment import Environment
from sprig.types.function import FunctionKind


class Evaluator:
    """Callable evaluator carrying an optional, injected trace logger.

    Instances are passed to special forms and closures as their `evaluate_fn`,
    so tracing configuration follows the evaluation without any global state.
    """

    __slots__ = ("logger",)

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger

    def trace(self, msg: str, *args) -> None:
        if self.logger is not None and self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(msg, *args)

    def __call__(self, cell: LispValue, env: Environment) -> LispValue:
        match cell:
            case Atom(name=name):
                self.trace("looking up symbol %s", name)
                return env.lookup(name)
            case Number() | Str() | Bool() | Function():
                return cell
            case Quoted(inner=inner):
                return inner
            case ListCell(items=items) if not items.is_empty():
                head, *tail = items
                return self.call(head, tail, env)
            case ListCell():
                raise SprigTypeError("Cannot evaluate an empty list")
        raise SprigTypeError(f"Cannot evaluate {cell!r}")

    def call(
        self, head: LispValue, tail: list[LispValue], env: Environment
    ) -> LispValue:
        """Evaluate `head` to a function and apply it to `tail`."""
        fn_cell = self(head, env)
        if not isinstance(fn_cell, Function):
            raise SprigNotCallable(f"Cannot apply non-function {fn_cell!r}")
        fn = fn_cell.fn
        if fn.kind is FunctionKind.NORMAL:
            args = [self(arg, env) for arg in tail]
        else:
            # Special forms and macros decide what to evaluate themselves.
            args = list(tail)
        self.trace("calling %s (%s) with %d argument(s)", fn.name, fn.kind.value, len(args))
        result = fn.invoke(env, args, self)
        self.trace("%s returned %r", fn.name, result)
        return result


def evaluate(
    cell: LispValue, env: Environment, logger: Optional[logging.Logger] = None
) -> LispValue:
    """Evaluate `cell` in `env`, tracing to `logger` at DEBUG level if given."""
    return Evaluator(logger)(cell, env)
