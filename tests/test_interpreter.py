import io

import pytest

from sprig import errors
from sprig.interpreter import Interpreter
from sprig.printer import print_cell
from sprig.repl import repl
from sprig.types.cell import Number, is_empty_list


def test_definitions_persist_between_evaluations(interp):
    interp.eval("(def x (list 1))")
    interp.eval("(push 2 x)")
    assert print_cell(interp.eval("x")) == "(1 2)"


def test_reset_discards_bindings(interp):
    interp.eval("(def x 1)")
    interp.reset()
    with pytest.raises(errors.SprigUnboundSymbol):
        interp.eval("x")


def test_empty_input_yields_empty_list(interp):
    assert is_empty_list(interp.eval("   "))


def test_load_evaluates_every_form(interp):
    source = """
    ; helpers
    (defn square (x) (* x x))
    (def nine (square 3))
    (+ nine 1)
    """
    assert interp.load(source) == Number(10)
    assert interp.eval("nine") == Number(9)


def test_interpreters_do_not_share_state():
    a, b = Interpreter(), Interpreter()
    a.eval("(def x 1)")
    with pytest.raises(errors.SprigUnboundSymbol):
        b.eval("x")


def test_repl_session():
    stdin = io.StringIO("(def x 2)\n\n(+ x 1)\nfoo\nx\n")
    stdout = io.StringIO()
    repl(stdin, stdout)
    lines = stdout.getvalue().splitlines()
    assert lines[0] == "Welcome to sprig!"
    assert lines[1] == "> x"
    assert lines[2] == "> > 3"
    assert lines[3] == "> error: Cannot lookup unbound symbol foo"
    # The aborted environment was replaced, so x is gone too.
    assert lines[4] == "> error: Cannot lookup unbound symbol x"


def test_repl_survives_a_list_that_contains_itself():
    stdin = io.StringIO("(do (def x (list 1)) (push x x))\n(+ 1 2)\n(car (cdr x))\n")
    stdout = io.StringIO()
    repl(stdin, stdout)
    lines = stdout.getvalue().splitlines()
    assert lines[1] == "> (1 (...))"
    assert lines[2] == "> 3"
    assert lines[3] == "> (1 (...))"
