"""Printed representation of atomlisp values.

The reader accepts the output of pr_str for nil, integers, symbols and lists,
so those round-trip. Builtins and closures print as opaque #<...> markers.
"""

from __future__ import annotations

from io import StringIO

from atomlisp import LispValue
from atomlisp.types.builtin_fn import Builtin
from atomlisp.types.closure import Closure
from atomlisp.types.nil import NilType
from atomlisp.types.symbol import Symbol


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, list):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    elif isinstance(value, NilType):
        buffer.write("nil")
    elif isinstance(value, Symbol):
        buffer.write(value.name)
    elif isinstance(value, int) and not isinstance(value, bool):
        buffer.write(str(value))
    elif isinstance(value, (Builtin, Closure)):
        buffer.write(repr(value))
    else:
        # Host objects should never leak into Lisp values; show them plainly.
        buffer.write(f"#<host {value!r}>")


def pr_str(value: LispValue) -> str:
    """Render `value` the way the shell prints results."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
