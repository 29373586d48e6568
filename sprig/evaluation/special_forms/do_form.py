from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArityError
from sprig.types.environment import Environment


def do_form(
    env: Environment,
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise SprigArityError("do requires at least 1 expression")
    result: LispValue = None
    for e in tail:
        result = evaluate_fn(e, env)
    return result
