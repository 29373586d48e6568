from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArityError, SprigNotAList, SprigTypeError
from sprig.types.cell import Atom, Function, ListCell
from sprig.types.environment import Environment
from sprig.types.function import ClosureExecutor, FunctionKind, FunctionValue


def param_names(params: SExpression, form: str) -> list[str]:
    """Validate a parameter list (a List of Atoms) and return the names."""
    if not isinstance(params, ListCell):
        raise SprigNotAList(f"{form} expects a parameter list, got {params!r}")
    names = []
    for p in params.items:
        if not isinstance(p, Atom):
            raise SprigTypeError(f"{form} parameters must be symbols, got {p!r}")
        names.append(p.name)
    return names


def lambda_form(
    env: Environment,
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body)
    The closure captures a child scope of the defining environment.
    """
    if len(tail) != 2:
        raise SprigArityError("lambda requires a parameter list and a body")

    params, body = tail
    closure = ClosureExecutor(env.child(), param_names(params, "lambda"), body)
    return Function(FunctionValue("lambda", FunctionKind.NORMAL, closure))
