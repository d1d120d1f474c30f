"""Runtime environment for iota.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. The root environment holds the primitives
and the bootstrap library; every closure call gets a fresh child of the
closure's captured environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from iota import LispValue
from iota.errors import IotaSyntaxError, IotaUnboundVariable
from iota.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises IotaSyntaxError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise IotaSyntaxError(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Environment:
        """Find the nearest environment in the chain that binds `name`.

        Raises IotaUnboundVariable if no frame up to the root binds it.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        raise IotaUnboundVariable(f"Unbound variable {name}")

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in whichever frame owns it."""
        self.find(name).vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name` anywhere in the chain."""
        return self.find(name).vars[name]

    def insert(self, bindings: Mapping[Symbol | str, LispValue]) -> None:
        """Bulk-define a mapping of names to values in the current frame."""
        for k, v in bindings.items():
            self.define(Symbol(k) if isinstance(k, str) else k, v)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, str):
            name = Symbol(name)
        return name in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
