from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArityError, SprigTypeError
from sprig.types.cell import Atom
from sprig.types.environment import Environment


def def_form(
    env: Environment,
    tail: list[SExpression],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current scope and returns the name atom itself.
    """
    if len(tail) != 2:
        raise SprigArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Atom):
        raise SprigTypeError(f"def expects a symbol to bind, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name.name, value)
    return name
