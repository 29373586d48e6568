from __future__ import annotations

import logging
from typing import Optional

from sprig import LispValue
from sprig.evaluation.evaluator import Evaluator
from sprig.reader.parser import TokenStream, lex, parse
from sprig.types.cell import empty_list
from sprig.types.environment import Environment


class Interpreter:
    """
    Evaluates Sprig source against one long-lived root environment.
    Definitions persist across calls to eval() until reset().
    """
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.evaluator = Evaluator(logger)
        self.env = Environment()

    def reset(self):
        """Discard every binding and start over with a fresh root environment."""
        self.env = Environment()

    def eval(self, code: str) -> LispValue:
        """Evaluate a single expression; empty input yields the empty list."""
        program = parse(code)
        if program.entry is None:
            return empty_list()
        return self.evaluator(program.entry, self.env)

    def load(self, code: str) -> LispValue:
        """Evaluate every top-level expression in `code`, returning the last."""
        stream = TokenStream(lex(code))
        result: LispValue = empty_list()
        for expr in stream.parse_all():
            result = self.evaluator(expr, self.env)
        return result
