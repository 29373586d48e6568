import math

import pytest

from sprig.printer import format_number, print_cell, print_program
from sprig.reader.parser import Program
from sprig.types.cell import Atom, Bool, Number, Quoted, Str, new_list


@pytest.mark.parametrize(
    "value, text",
    [(3.0, "3"), (-2.0, "-2"), (0.5, "0.5"), (222.0, "222"), (math.inf, "inf")],
)
def test_format_number(value, text):
    assert format_number(value) == text


def test_print_cells():
    assert print_cell(Atom("foo")) == "foo"
    assert print_cell(Bool(True)) == "#t"
    assert print_cell(Bool(False)) == "#f"
    assert print_cell(Str('say "hi"\\')) == '"say \\"hi\\"\\\\"'
    assert print_cell(Quoted(Quoted(Atom("a")))) == "''a"
    assert print_cell(new_list([])) == "()"
    assert print_cell(new_list([Number(1), new_list([Atom("a"), Number(2.5)])])) == "(1 (a 2.5))"


def test_functions_print_name_only(env):
    assert print_cell(env.lookup("car")) == "#car"
    assert print_cell(env.lookup("if")) == "#if"


def test_print_program_without_entry():
    assert print_program(Program("", None)) == ""


def test_self_containing_list_prints_placeholder(run):
    assert print_cell(run("(do (def x (list 1)) (push x x))")) == "(1 (...))"


def test_cycle_through_shared_tail_prints_placeholder(run):
    result = run("(do (def x (list 1 2)) (def y (cdr x)) (push y x))")
    assert print_cell(result) == "(1 2 (2 (...)))"


def test_repeated_sublist_is_not_a_cycle(run):
    result = run("(do (def y (list 1)) (list y y (list y)))")
    assert print_cell(result) == "((1) (1) ((1)))"
