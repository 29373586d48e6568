from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArityError, SprigTypeError
from sprig.types.cell import Atom, Function
from sprig.types.environment import Environment
from sprig.types.function import ClosureExecutor, FunctionKind, FunctionValue
from sprig.evaluation.special_forms.lambda_form import param_names


def defn_form(
    env: Environment,
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defn name (params...) body)
    Named functions close over the defining environment itself, so the body
    can refer to the function's own name and to later definitions there.
    """
    if len(tail) != 3:
        raise SprigArityError("defn requires a name, a parameter list and a body")

    name, params, body = tail
    if not isinstance(name, Atom):
        raise SprigTypeError(f"defn expects a symbol to bind, got {name!r}")

    closure = ClosureExecutor(env, param_names(params, "defn"), body)
    fn = Function(FunctionValue(name.name, FunctionKind.NORMAL, closure))
    env.define(name.name, fn)
    return fn
