"""Built-in functions for the atomlisp root environment.

Integer arithmetic and comparison, list construction and access, type
predicates, higher-order helpers and printing. Every builtin receives the
list of already-evaluated arguments. Predicates and comparisons return 1 for
true and Nil for false, since Nil is the only false value.
"""
from __future__ import annotations

from typing import Callable

from atomlisp import LispValue
from atomlisp.errors import AtomInvalidArgument, AtomInvalidType
from atomlisp.evaluation.apply import apply as apply_engine
from atomlisp.evaluation.evaluator import evaluate
from atomlisp.printer import pr_str
from atomlisp.types.builtin_fn import Builtin
from atomlisp.types.closure import Closure
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.nil import Nil, NilType
from atomlisp.types.symbol import Symbol
from atomlisp.types.value import as_integer, as_list, in_i64_range, is_integer

TRUE = 1


def _bool(flag: bool) -> LispValue:
    return TRUE if flag else Nil


def _arity(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        noun = "argument" if count == 1 else "arguments"
        raise AtomInvalidArgument(f"{name} expects {count} {noun}, got {len(args)}")


def _checked(name: str, n: int) -> int:
    if not in_i64_range(n):
        raise AtomInvalidArgument(f"integer overflow in {name}")
    return n


def _seq(value: LispValue) -> list[LispValue]:
    """A list argument where Nil stands for the empty sequence."""
    if isinstance(value, NilType):
        return []
    return as_list(value)


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    """Sum of all arguments; (+) is 0."""
    result = 0
    for x in args:
        result = _checked("+", result + as_integer(x))
    return result


def sub(args: list[LispValue]) -> LispValue:
    """Subtract the rest from the first; one argument negates; (-) is 0."""
    if not args:
        return 0
    first = as_integer(args[0])
    if len(args) == 1:
        return _checked("-", -first)
    result = first
    for x in args[1:]:
        result = _checked("-", result - as_integer(x))
    return result


def mul(args: list[LispValue]) -> LispValue:
    """Product of all arguments; (*) is 1."""
    result = 1
    for x in args:
        result = _checked("*", result * as_integer(x))
    return result


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def div(args: list[LispValue]) -> LispValue:
    """Divide left to right, truncating toward zero; one argument is returned as is; (/) is 0."""
    if not args:
        return 0
    result = as_integer(args[0])
    for x in args[1:]:
        d = as_integer(x)
        if d == 0:
            raise AtomInvalidArgument("division by zero")
        result = _checked("/", _truncating_div(result, d))
    return result


# -------------------------------
# Comparison
# -------------------------------
def equals(args: list[LispValue]) -> LispValue:
    """Structural equality of all arguments (true for zero or one argument)."""
    return _bool(all(a == b for a, b in zip(args, args[1:])))


def _compare(name: str, op: Callable[[int, int], bool]) -> Callable[[list[LispValue]], LispValue]:
    def compare(args: list[LispValue]) -> LispValue:
        ints = [as_integer(a) for a in args]
        return _bool(all(op(a, b) for a, b in zip(ints, ints[1:])))
    compare.__name__ = name
    return compare


lt = _compare("lt", lambda a, b: a < b)
lte = _compare("lte", lambda a, b: a <= b)
gt = _compare("gt", lambda a, b: a > b)
gte = _compare("gte", lambda a, b: a >= b)


# -------------------------------
# Predicates
# -------------------------------
def is_list(args: list[LispValue]) -> LispValue:
    _arity("list?", args, 1)
    return _bool(isinstance(args[0], list))


def is_symbol(args: list[LispValue]) -> LispValue:
    _arity("symbol?", args, 1)
    return _bool(isinstance(args[0], Symbol))


def is_int(args: list[LispValue]) -> LispValue:
    _arity("integer?", args, 1)
    return _bool(is_integer(args[0]))


def is_nil(args: list[LispValue]) -> LispValue:
    _arity("nil?", args, 1)
    return _bool(args[0] is Nil)


def is_empty(args: list[LispValue]) -> LispValue:
    _arity("empty?", args, 1)
    return _bool(not _seq(args[0]))


# -------------------------------
# List operations
# -------------------------------
def make_list(args: list[LispValue]) -> LispValue:
    return list(args)


def count(args: list[LispValue]) -> LispValue:
    _arity("count", args, 1)
    return len(_seq(args[0]))


def first(args: list[LispValue]) -> LispValue:
    """First element, or Nil for an empty list or Nil."""
    _arity("first", args, 1)
    seq = _seq(args[0])
    return seq[0] if seq else Nil


def rest(args: list[LispValue]) -> LispValue:
    """Everything after the first element, always as a (possibly empty) list."""
    _arity("rest", args, 1)
    return _seq(args[0])[1:]


def nth(args: list[LispValue]) -> LispValue:
    _arity("nth", args, 2)
    seq = _seq(args[0])
    index = as_integer(args[1])
    if not 0 <= index < len(seq):
        raise AtomInvalidArgument(f"nth index {index} out of range for list of length {len(seq)}")
    return seq[index]


def car(args: list[LispValue]) -> LispValue:
    """Head of a list; anything else, including an empty list, gives Nil."""
    seq = args[0] if args else Nil
    if isinstance(seq, list) and seq:
        return seq[0]
    return Nil


def cdr(args: list[LispValue]) -> LispValue:
    """Tail of a list. A two-element list is a pair, so its cdr is the second element."""
    seq = args[0] if args else Nil
    if not isinstance(seq, list) or not seq:
        return Nil
    if len(seq) == 2:
        return seq[1]
    return seq[1:]


def cons(args: list[LispValue]) -> LispValue:
    """(cons x xs) -> new list with x in front of the elements of xs."""
    _arity("cons", args, 2)
    return [args[0], *_seq(args[1])]


def concat(args: list[LispValue]) -> LispValue:
    """Concatenate lists into a new list; Nil contributes nothing."""
    result: list[LispValue] = []
    for a in args:
        result.extend(_seq(a))
    return result


# -------------------------------
# Output
# -------------------------------
def prn(args: list[LispValue]) -> LispValue:
    print(" ".join(pr_str(a) for a in args))
    return Nil


# -------------------------------
# Higher order
# -------------------------------
def _higher_order(macros: MacroExpander) -> dict[str, Callable[[list[LispValue]], LispValue]]:
    """Builtins that call back into Lisp functions; they share the interpreter's expander."""

    def apply_fn(args: list[LispValue]) -> LispValue:
        """(apply f a b xs) calls f with a, b and the elements of xs."""
        if not args:
            raise AtomInvalidArgument("apply expects a function")
        fn, *rest_args = args
        spread = [*rest_args[:-1], *_seq(rest_args[-1])] if rest_args else []
        return apply_engine(fn, spread, macros, evaluate)

    def map_fn(args: list[LispValue]) -> LispValue:
        """(map f xs) -> list of (f x) for each x in xs."""
        _arity("map", args, 2)
        fn, seq = args[0], _seq(args[1])
        if not isinstance(fn, (Builtin, Closure)):
            raise AtomInvalidType("function", pr_str(fn))
        return [apply_engine(fn, [x], macros, evaluate) for x in seq]

    return {"apply": apply_fn, "map": map_fn}


BUILTINS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "list": make_list,
    "list?": is_list,
    "symbol?": is_symbol,
    "integer?": is_int,
    "nil?": is_nil,
    "empty?": is_empty,
    "count": count,
    "first": first,
    "rest": rest,
    "nth": nth,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "concat": concat,
    "prn": prn,
}


def register(env: Environment, macros: MacroExpander | None = None) -> None:
    """Define every builtin in `env` (normally the interpreter's root frame)."""
    functions = dict(BUILTINS)
    functions.update(_higher_order(macros if macros is not None else MacroExpander()))
    for name, fn in functions.items():
        env.define(Symbol(name), Builtin(name, fn))
