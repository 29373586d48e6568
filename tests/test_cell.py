from sprig.types.cell import Atom, Bool, Function, Number, Quoted, Str, new_list, push_back
from sprig.types.environment import Environment
from sprig.types.function import ClosureExecutor, FunctionKind, FunctionValue


def test_structural_equality_per_variant():
    assert Atom("a") == Atom("a")
    assert Atom("a") != Atom("b")
    assert Number(1) == Number(1.0)
    assert Str("x") == Str("x")
    assert Bool(True) != Bool(False)
    assert Quoted(Atom("a")) == Quoted(Atom("a"))
    assert new_list([Number(1), new_list([Atom("b")])]) == new_list([Number(1), new_list([Atom("b")])])
    assert new_list([Number(1)]) != new_list([Number(1), Number(2)])


def test_variants_never_compare_equal_across_tags():
    assert Atom("1") != Number(1)
    assert Str("a") != Atom("a")
    assert Quoted(Atom("a")) != Atom("a")
    assert new_list([]) != Bool(False)


def test_functions_compare_by_name_only():
    env = Environment()
    one = Function(FunctionValue("f", FunctionKind.NORMAL, ClosureExecutor(env, ["x"], Number(1))))
    two = Function(FunctionValue("f", FunctionKind.NORMAL, ClosureExecutor(env, [], Number(2))))
    other = Function(FunctionValue("g", FunctionKind.NORMAL, ClosureExecutor(env, [], Number(2))))
    assert one == two
    assert one != other


def test_number_payload_is_float():
    assert isinstance(Number(3).value, float)


def test_repr_of_self_containing_list_terminates():
    cell = new_list([Number(1)])
    push_back(cell, cell)
    assert repr(cell) == "ListCell([Number(1.0), ListCell(...)])"
