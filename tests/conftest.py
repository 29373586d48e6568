import pytest

from sprig.evaluation.evaluator import evaluate
from sprig.interpreter import Interpreter
from sprig.reader.parser import parse
from sprig.types.environment import Environment


@pytest.fixture
def env():
    """Return a fresh root environment (builtins installed) for each test."""
    return Environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Parse one expression and evaluate it in the test's environment."""
    def _run(code: str):
        return evaluate(parse(code).entry, env)
    return _run
