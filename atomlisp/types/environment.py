"""Runtime environment for atomlisp.

An Environment is one scope frame: a table of Symbol -> value bindings plus an
optional link to the enclosing (`outer`) frame. Lookup walks the chain outward;
definition only ever writes into the frame it is called on, so a binding in an
inner frame shadows, and never aliases, a same-named binding further out.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from atomlisp import LispValue
from atomlisp.errors import AtomInvalidType, AtomUndefinedSymbol
from atomlisp.types.nil import Nil
from atomlisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any existing binding here.

        Raises AtomInvalidType if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            from atomlisp.printer import pr_str
            raise AtomInvalidType("symbol", pr_str(name))
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, walking outward to the root.

        Raises AtomUndefinedSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise AtomUndefinedSymbol(str(name))
        return env.vars[name]

    def bind(self, params: Iterable[Symbol], args: list[LispValue]) -> None:
        """Positionally define each name; names past the end of `args` get Nil."""
        for i, param in enumerate(params):
            self.define(param, args[i] if i < len(args) else Nil)

    def clear(self) -> None:
        self.vars.clear()

    def __contains__(self, symbol: Symbol) -> bool:
        return self.find(symbol) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer, sorted by name."""
        from atomlisp.printer import pr_str
        buffer.write("{")
        items = sorted(self.vars.items(), key=lambda kv: kv[0].name)
        buffer.write(" ".join(f"{k} {pr_str(v)}" for k, v in items))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
