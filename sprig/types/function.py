"""Function values: a name, a dispatch kind and an executor.

The kind tells the evaluator whether to evaluate call arguments before handing
them over (NORMAL) or to pass the raw argument expressions (SPECIAL_FORM and
the reserved MACRO kind). The executor is either a native Python operation or
a user-defined closure.
"""

from __future__ import annotations

from enum import Enum
from io import StringIO
from typing import Callable

from sprig import LispValue, EvaluatorFn
from sprig.errors import SprigArityError
from sprig.types.environment import Environment

# Native operations receive (env, args, evaluate_fn) and return a Cell.
NativeOp = Callable[[Environment, list[LispValue], EvaluatorFn], LispValue]


class FunctionKind(Enum):
    NORMAL = "normal"
    SPECIAL_FORM = "special-form"
    # Reserved: no builtin produces macros and there is no expansion phase.
    MACRO = "macro"


class NativeExecutor:
    """Executor wrapping a Python callable."""

    __slots__ = ("op",)

    def __init__(self, op: NativeOp):
        self.op = op

    def invoke(
        self, env: Environment, args: list[LispValue], evaluate_fn: EvaluatorFn
    ) -> LispValue:
        return self.op(env, args, evaluate_fn)

    def __repr__(self) -> str:
        return f"<native {getattr(self.op, '__name__', self.op)}>"


class ClosureExecutor:
    """A user-defined function body closed over a captured environment."""

    __slots__ = ("env", "params", "body")

    def __init__(self, env: Environment, params: list[str], body: LispValue):
        self.env: Environment = env
        self.params: list[str] = params
        self.body: LispValue = body

    def bind(self, args: list[LispValue]) -> Environment:
        """Return a fresh call frame over the captured environment with the
        parameters bound positionally to `args`."""
        if len(args) != len(self.params):
            raise SprigArityError(
                f"Expected {len(self.params)} argument(s) {self.params}, got {len(args)}"
            )
        frame = Environment(outer=self.env)
        for name, value in zip(self.params, args):
            frame.define(name, value)
        return frame

    def invoke(
        self, env: Environment, args: list[LispValue], evaluate_fn: EvaluatorFn
    ) -> LispValue:
        # The call-site env is unused: free variables resolve through self.env.
        return evaluate_fn(self.body, self.bind(args))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(repr(self.body))
            buffer.write(")")
            return buffer.getvalue()

    __repr__ = __str__


class FunctionValue:
    __slots__ = ("name", "kind", "executor")

    def __init__(
        self,
        name: str,
        kind: FunctionKind,
        executor: NativeExecutor | ClosureExecutor,
    ):
        self.name = name
        self.kind = kind
        self.executor = executor

    @classmethod
    def native(cls, name: str, kind: FunctionKind, op: NativeOp) -> FunctionValue:
        return cls(name, kind, NativeExecutor(op))

    def invoke(
        self, env: Environment, args: list[LispValue], evaluate_fn: EvaluatorFn
    ) -> LispValue:
        return self.executor.invoke(env, args, evaluate_fn)

    def __repr__(self) -> str:
        return f"FunctionValue({self.name!r}, {self.kind.value}, {self.executor!r})"
