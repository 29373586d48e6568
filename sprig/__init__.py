# Core type aliases for Sprig's data model.
# Every runtime and syntactic datum is a Cell (see sprig.types.cell). Code and
# data share the representation, so the aliases below are interchangeable:
# - SExpression: use in reader/printer code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed to special forms and closures so they can
# evaluate sub-expressions themselves.
EvaluatorFn = Callable[..., LispValue]
