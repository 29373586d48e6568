"""Runtime environment for Sprig.

An Environment maps symbol names to Cells. A root environment (one with no
`outer`) is populated with the builtin operators when it is constructed.

Child environments exist only for closures: a `lambda` captures a child of its
defining scope, and every closure invocation evaluates its body in a fresh
frame whose `outer` is the closure's captured environment. Lookups that miss
in a frame continue through `outer`; a miss at the end of the chain raises
SprigUnboundSymbol.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from sprig import LispValue
from sprig.errors import SprigUnboundSymbol


class Environment:
    """Mapping from symbol names to Cells, optionally over a captured scope."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer
        if outer is None:
            from sprig.builtins import register

            register(self)

    def child(self) -> Environment:
        """Return a new, empty scope over this one."""
        return Environment(outer=self)

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this scope, overwriting any binding here."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> LispValue:
        """Return the Cell bound to `name`.

        Raises SprigUnboundSymbol if no scope in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise SprigUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
