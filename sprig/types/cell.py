"""Cell: the tagged value used for every datum and syntactic form.

Variants: Atom, Number, Str, Bool, Quoted, Function and ListCell. Equality is
structural per variant; a Function compares equal to another Function with
the same name, regardless of what the two executors do.
"""

from __future__ import annotations

from reprlib import recursive_repr
from typing import TYPE_CHECKING, Iterable, Optional

from sprig.errors import SprigNotAList
from sprig.types.lisp_list import LispList

if TYPE_CHECKING:
    from sprig.types.function import FunctionValue


class Cell:
    """Base class of all cell variants."""

    __slots__ = ()


class Atom(Cell):
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("atom", self.name))

    def __repr__(self):
        return f"Atom({self.name!r})"


class Number(Cell):
    __slots__ = ("value",)

    def __init__(self, value: float):
        self.value = float(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("number", self.value))

    def __repr__(self):
        return f"Number({self.value!r})"


class Str(Cell):
    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Str) and self.text == other.text

    def __hash__(self) -> int:
        return hash(("str", self.text))

    def __repr__(self):
        return f"Str({self.text!r})"


class Bool(Cell):
    __slots__ = ("flag",)

    def __init__(self, flag: bool):
        self.flag = bool(flag)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Bool) and self.flag == other.flag

    def __hash__(self) -> int:
        return hash(("bool", self.flag))

    def __repr__(self):
        return f"Bool({self.flag!r})"


class Quoted(Cell):
    """One layer of quoting around `inner`; evaluation strips exactly one."""

    __slots__ = ("inner",)

    def __init__(self, inner: Cell):
        self.inner = inner

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Quoted) and self.inner == other.inner

    __hash__ = None

    def __repr__(self):
        return f"Quoted({self.inner!r})"


class Function(Cell):
    __slots__ = ("fn",)

    def __init__(self, fn: FunctionValue):
        self.fn = fn

    # Only the name takes part: two distinct closures sharing a name are equal.
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Function) and self.fn.name == other.fn.name

    def __hash__(self) -> int:
        return hash(("function", self.fn.name))

    def __repr__(self):
        return f"Function({self.fn.name!r})"


class ListCell(Cell):
    """A List cell: a handle on a shared LispList chain."""

    __slots__ = ("items",)

    def __init__(self, items: Optional[LispList] = None):
        self.items: LispList = items if items is not None else LispList()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListCell) and self.items == other.items

    __hash__ = None

    @recursive_repr("ListCell(...)")
    def __repr__(self):
        return f"ListCell({self.items.to_list()!r})"


# --- List helpers ---

def new_list(cells: Iterable[Cell] = ()) -> ListCell:
    """Return a List cell holding `cells` in order (empty when none given)."""
    return ListCell(LispList.from_values(cells))


def empty_list() -> ListCell:
    return ListCell()


def is_empty_list(cell: Cell) -> bool:
    return isinstance(cell, ListCell) and cell.items.is_empty()


def _require_list(cell: Cell, op: str) -> ListCell:
    if not isinstance(cell, ListCell):
        raise SprigNotAList(f"{op} expects a list, got {cell!r}")
    return cell


def push_back(list_cell: Cell, value: Cell) -> ListCell:
    """Append `value` to the chain behind `list_cell`, in place."""
    target = _require_list(list_cell, "push")
    target.items.push_back(value)
    return target


def split(list_cell: Cell) -> tuple[Cell, Optional[ListCell]]:
    """Return (first, remainder); remainder is None for a one-element list.

    The remainder shares its nodes with `list_cell`.
    """
    target = _require_list(list_cell, "split")
    first, rest = target.items.split()
    return first, (ListCell(rest) if rest is not None else None)


def to_sequence(list_cell: Cell) -> list[Cell]:
    return _require_list(list_cell, "to_sequence").items.to_list()
