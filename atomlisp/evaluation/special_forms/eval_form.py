from atomlisp import EvaluatorFn
from atomlisp import SExpression, LispValue
from atomlisp.errors import AtomInvalidArgument
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander


def eval_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroExpander,
    evaluate_fn: EvaluatorFn,
    is_loop_tail: bool = False,
) -> LispValue:
    if len(tail) != 1:
        raise AtomInvalidArgument("eval expects exactly one argument")
    # First pass produces code, second pass runs it in the same frame
    code = evaluate_fn(tail[0], env, macros)
    return evaluate_fn(code, env, macros, is_loop_tail)
