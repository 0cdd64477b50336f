"""Typed accessors and predicates over atomlisp values.

Values are plain Python objects (see atomlisp/__init__.py). The accessors
below return the typed value or raise AtomInvalidType naming the expected
kind together with a printed rendering of what was actually found.
"""

from __future__ import annotations

from atomlisp import LispValue
from atomlisp.errors import AtomInvalidType
from atomlisp.printer import pr_str
from atomlisp.types.closure import Closure
from atomlisp.types.nil import NilType
from atomlisp.types.symbol import Symbol

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def is_integer(value: LispValue) -> bool:
    # bool is an int subclass but never a Lisp value
    return isinstance(value, int) and not isinstance(value, bool)


def in_i64_range(n: int) -> bool:
    return I64_MIN <= n <= I64_MAX


def is_truthy(value: LispValue) -> bool:
    """Only Nil is false. Integer 0 and the empty list are true."""
    return not isinstance(value, NilType)


def as_integer(value: LispValue) -> int:
    if not is_integer(value):
        raise AtomInvalidType("integer", pr_str(value))
    return value


def as_list(value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise AtomInvalidType("list", pr_str(value))
    return value


def as_symbol(value: LispValue) -> Symbol:
    if not isinstance(value, Symbol):
        raise AtomInvalidType("symbol", pr_str(value))
    return value


def as_closure(value: LispValue) -> Closure:
    if not isinstance(value, Closure):
        raise AtomInvalidType("function", pr_str(value))
    return value
