from atomlisp import EvaluatorFn
from atomlisp import SExpression, LispValue
from atomlisp.errors import AtomInvalidArgument
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.nil import Nil
from atomlisp.types.value import is_truthy


def if_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroExpander,
    evaluate_fn: EvaluatorFn,
    is_loop_tail: bool = False,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise AtomInvalidArgument("if expects a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env, macros)
    # Only Nil is false; 0 and () are true
    if is_truthy(cond):
        return evaluate_fn(tail[1], env, macros, is_loop_tail)
    if len(tail) == 3:
        return evaluate_fn(tail[2], env, macros, is_loop_tail)
    return Nil
