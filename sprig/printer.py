"""Canonical text rendering of Cells.

`print_cell(parse(s).entry) == s` for canonical source `s` (single spaces,
no comments, integral numbers without a fractional part).
"""

from __future__ import annotations

from io import StringIO

from sprig import LispValue
from sprig.reader.parser import Program
from sprig.types.cell import Atom, Bool, Function, ListCell, Number, Quoted, Str


def format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


CYCLE_PLACEHOLDER = "(...)"


def _write(cell: LispValue, buffer: StringIO, open_heads: set[int]) -> None:
    # open_heads: ids of the first nodes of the lists currently being written.
    # Chains are finite, so endless nesting must re-enter one of them.
    match cell:
        case Atom(name=name):
            buffer.write(name)
        case Number(value=value):
            buffer.write(format_number(value))
        case Bool(flag=flag):
            buffer.write("#t" if flag else "#f")
        case Str(text=text):
            buffer.write(f'"{_escape(text)}"')
        case Quoted(inner=inner):
            buffer.write("'")
            _write(inner, buffer, open_heads)
        case Function(fn=fn):
            # Never the closure contents
            buffer.write(f"#{fn.name}")
        case ListCell(items=items):
            head_id = id(items.head)
            if items.head is not None and head_id in open_heads:
                buffer.write(CYCLE_PLACEHOLDER)
                return
            open_heads.add(head_id)
            buffer.write("(")
            for i, item in enumerate(items):
                if i:
                    buffer.write(" ")
                _write(item, buffer, open_heads)
            buffer.write(")")
            open_heads.discard(head_id)
        case _:
            raise TypeError(f"Cannot print {cell!r}")


def print_cell(cell: LispValue) -> str:
    """Render `cell`; a list nested inside itself prints as `(...)`."""
    with StringIO() as buffer:
        _write(cell, buffer, set())
        return buffer.getvalue()


def print_program(program: Program) -> str:
    if program.entry is None:
        return ""
    return print_cell(program.entry)
