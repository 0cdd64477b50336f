from atomlisp import EvaluatorFn
from atomlisp import SExpression, LispValue
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.nil import Nil


def do_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroExpander,
    evaluate_fn: EvaluatorFn,
    is_loop_tail: bool = False,
) -> LispValue:
    if not tail:
        return Nil
    for e in tail[:-1]:
        evaluate_fn(e, env, macros)
    return evaluate_fn(tail[-1], env, macros, is_loop_tail)
