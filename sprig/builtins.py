from __future__ import annotations

import math
from functools import reduce
from typing import Callable

from sprig import EvaluatorFn, LispValue
from sprig.errors import SprigArityError, SprigNonNumericOperand, SprigNotAList
from sprig.types.cell import Bool, Function, ListCell, Number, empty_list, new_list, push_back
from sprig.types.environment import Environment
from sprig.types.function import FunctionKind, FunctionValue
from sprig.evaluation.special_forms import SPECIAL_FORMS

# -------------------------------
# Arithmetic
# -------------------------------
def _numbers(op: str, args: list[LispValue]) -> list[float]:
    nums = []
    for a in args:
        if not isinstance(a, Number):
            raise SprigNonNumericOperand(f"All arguments to {op} must be numbers, got {a!r}")
        nums.append(a.value)
    return nums

def _divide(a: float, b: float) -> float:
    # IEEE semantics instead of ZeroDivisionError
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b

def _seeded(op: str, fold: Callable[[float, float], float]):
    def seeded(env: Environment, args: list[LispValue], _: EvaluatorFn) -> Number:
        nums = _numbers(op, args)
        if not nums:
            raise SprigArityError(f"{op} requires at least 1 argument")
        return Number(reduce(fold, nums[1:], nums[0]))
    seeded.__name__ = f"op_{op}"
    return seeded

def add(env: Environment, args: list[LispValue], _: EvaluatorFn) -> Number:
    return Number(sum(_numbers("+", args), 0.0))

def mul(env: Environment, args: list[LispValue], _: EvaluatorFn) -> Number:
    return Number(math.prod(_numbers("*", args)))

sub = _seeded("-", lambda acc, x: acc - x)
div = _seeded("/", _divide)

# -------------------------------
# List operations
# -------------------------------
def _list_arg(op: str, args: list[LispValue], arity: int) -> ListCell:
    if len(args) != arity:
        raise SprigArityError(f"{op} requires exactly {arity} argument(s), got {len(args)}")
    target = args[-1]
    if not isinstance(target, ListCell):
        raise SprigNotAList(f"Argument passed to {op} was not a list: {target!r}")
    return target

def list_builtin(env: Environment, args: list[LispValue], _: EvaluatorFn) -> ListCell:
    return new_list(args)

def push(env: Environment, args: list[LispValue], _: EvaluatorFn) -> ListCell:
    """(push value list): append in place and return the same list."""
    target = _list_arg("push", args, 2)
    return push_back(target, args[0])

def car(env: Environment, args: list[LispValue], _: EvaluatorFn) -> LispValue:
    target = _list_arg("car", args, 1)
    if target.items.is_empty():
        return empty_list()
    # The stored cell itself, so mutating it is visible in the outer list.
    return target.items.head.value

def cdr(env: Environment, args: list[LispValue], _: EvaluatorFn) -> ListCell:
    target = _list_arg("cdr", args, 1)
    if target.items.is_empty():
        return empty_list()
    _, rest = target.items.split()
    return ListCell(rest) if rest is not None else empty_list()

# -------------------------------
# Equality
# -------------------------------
def eq(env: Environment, args: list[LispValue], _: EvaluatorFn) -> Bool:
    if len(args) != 2:
        raise SprigArityError(f"eq requires exactly 2 arguments, got {len(args)}")
    a, b = args
    return Bool(a is b or a == b)

# -------------------------------
# Registration
# -------------------------------
NORMAL_BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "list": list_builtin,
    "push": push,
    "car": car,
    "cdr": cdr,
    "eq": eq,
}

def register(env: Environment):
    for name, op in NORMAL_BUILTINS.items():
        env.define(name, Function(FunctionValue.native(name, FunctionKind.NORMAL, op)))
    for name, form in SPECIAL_FORMS.items():
        env.define(name, Function(FunctionValue.native(name, FunctionKind.SPECIAL_FORM, form)))
