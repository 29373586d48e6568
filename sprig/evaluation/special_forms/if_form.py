from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArityError, SprigTypeError
from sprig.types.cell import Bool
from sprig.types.environment import Environment


def if_form(
    env: Environment,
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise SprigArityError("if requires a condition, a then-expression and an else-expression")

    cond_expr, then_expr, else_expr = tail
    cond = evaluate_fn(cond_expr, env)
    # No truthiness: only a Bool may steer the branch.
    if not isinstance(cond, Bool):
        raise SprigTypeError(f"if condition must evaluate to a boolean, got {cond!r}")

    return evaluate_fn(then_expr if cond.flag else else_expr, env)
