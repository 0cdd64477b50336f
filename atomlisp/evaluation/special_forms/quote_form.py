from atomlisp import EvaluatorFn, SExpression, LispValue
from atomlisp.errors import AtomInvalidArgument


def quote_form(
    tail: list[SExpression], env, macros, evaluate_fn: EvaluatorFn, _: bool
) -> LispValue:
    if len(tail) != 1:
        raise AtomInvalidArgument("quote expects exactly 1 argument")
    return tail[0]
