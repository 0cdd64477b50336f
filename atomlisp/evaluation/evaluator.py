"""Core evaluator for the atomlisp interpreter.

One expression at a time: atoms evaluate to themselves, symbols are looked up,
and lists are macro-expanded, then dispatched either to a special form or to
ordinary function application.

`is_loop_tail` marks evaluation positions whose value flows straight back to
the innermost enclosing `loop`; only there may `recur` appear.
"""

from __future__ import annotations

from atomlisp import SExpression, LispValue
from atomlisp.evaluation.apply import apply
from atomlisp.evaluation.special_forms import SPECIAL_FORMS, special_form_for
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.symbol import Symbol


def evaluate(
    expr: SExpression,
    env: Environment,
    macros: MacroExpander | None = None,
    is_loop_tail: bool = False,
) -> LispValue:
    if macros is None:
        macros = MacroExpander()

    if isinstance(expr, Symbol):
        return env.lookup(expr)

    # Integers, Nil, builtins, closures and the empty list are self-evaluating
    if not isinstance(expr, list) or not expr:
        return expr

    expr = macros.macro_expand_head(expr, env, evaluate)
    if not isinstance(expr, list) or not expr:
        return evaluate(expr, env, macros, is_loop_tail)

    head = expr[0]
    form = special_form_for(head)
    if form is not None:
        return SPECIAL_FORMS[form](expr[1:], env, macros, evaluate, is_loop_tail)

    # Operator included, left to right
    evaluated = [evaluate(e, env, macros) for e in expr]
    return apply(evaluated[0], evaluated[1:], macros, evaluate)
