"""Iteration special forms: loop and recur.

(loop (n1 v1 n2 v2 ...) body...) binds the names in one fresh frame and
evaluates the body there in loop-tail mode. A (recur e1 e2 ...) reached in
that mode evaluates its operands and hands them back as a Recur marker; the
loop rebinds the same names in the same frame and goes round again. Any other
result ends the loop.

The iteration runs in a Python while loop, so stack use does not grow with
the number of iterations. The frame is reused across iterations: closures
created in the body observe the latest rebinding, not a per-iteration copy.
"""

from __future__ import annotations

from atomlisp import SExpression, LispValue, EvaluatorFn
from atomlisp.errors import AtomInvalidArgument, AtomInvalidOperation
from atomlisp.evaluation.special_forms import SpecialForm
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.recur import Recur
from atomlisp.types.value import as_list, as_symbol


def loop_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroExpander,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    if len(tail) < 2:
        raise AtomInvalidArgument("loop expects a binding list and a body")

    bindings = as_list(tail[0])
    if len(bindings) % 2 != 0:
        raise AtomInvalidArgument("loop bindings must be name/value pairs")

    names = [as_symbol(n) for n in bindings[0::2]]
    body = tail[1] if len(tail) == 2 else [SpecialForm.DO.symbol, *tail[1:]]

    # Initial values are evaluated once, in the enclosing environment
    loop_env = Environment(outer=env)
    loop_env.bind(names, [evaluate_fn(v, env, macros) for v in bindings[1::2]])

    while True:
        result = evaluate_fn(body, loop_env, macros, True)
        if not isinstance(result, Recur):
            return result
        loop_env.bind(names, result.values)


def recur_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroExpander,
    evaluate_fn: EvaluatorFn,
    is_loop_tail: bool = False,
) -> LispValue:
    if not is_loop_tail:
        raise AtomInvalidOperation("recur")
    return Recur([evaluate_fn(e, env, macros) for e in tail])
