from __future__ import annotations

from atomlisp import LispValue, SExpression
from atomlisp.errors import AtomInvalidArgument, AtomInvalidType
from atomlisp.types.environment import Environment
from atomlisp.types.nil import Nil
from atomlisp.types.symbol import Symbol

VARIADIC_MARKER = Symbol("&")


def split_params(params: list[SExpression]) -> tuple[list[Symbol], Symbol | None]:
    """Split a parameter list into its fixed names and the optional rest name.

    Everything before the first `&` is positional; exactly one symbol must
    follow `&` when it is present.
    """
    for p in params:
        if not isinstance(p, Symbol):
            from atomlisp.printer import pr_str
            raise AtomInvalidType("symbol", pr_str(p))
    if VARIADIC_MARKER not in params:
        return list(params), None
    idx = params.index(VARIADIC_MARKER)
    tail = params[idx + 1:]
    if len(tail) != 1:
        raise AtomInvalidArgument("& must be followed by exactly one parameter name")
    return list(params[:idx]), tail[0]


def bind_arguments(
    params: list[SExpression],
    supplied_args: list[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Variadic binding for closure application.

    - Names before `&` bind positionally; missing trailing arguments bind to Nil.
    - The name after `&` binds to a list of the remaining arguments, or to Nil
      (not an empty list) when nothing remains.
    - Surplus arguments with no `&` are ignored.

    Returns a new Environment whose outer is `closure_env`.
    """
    fixed, rest_name = split_params(params)
    local_env = Environment(outer=closure_env)
    local_env.bind(fixed, supplied_args)
    if rest_name is not None:
        remaining = list(supplied_args[len(fixed):])
        local_env.define(rest_name, remaining if remaining else Nil)
    return local_env
