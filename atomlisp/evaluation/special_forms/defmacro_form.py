"""Special form: defmacro.

(defmacro name expr) evaluates `expr` to a closure and binds a macro copy of
it under `name` in the current frame, exactly as `def` would.
"""

from __future__ import annotations

from atomlisp import EvaluatorFn, SExpression, LispValue
from atomlisp.errors import AtomInvalidArgument
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.value import as_closure, as_symbol


def defmacro_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroExpander,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    if len(tail) != 2:
        raise AtomInvalidArgument("defmacro expects a name and a function expression")

    name = as_symbol(tail[0])
    transformer = as_closure(evaluate_fn(tail[1], env, macros))
    env.define(name, transformer.as_macro())
    return name
