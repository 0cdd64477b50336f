from atomlisp import EvaluatorFn
from atomlisp import SExpression, LispValue
from atomlisp.errors import AtomInvalidArgument
from atomlisp.types.bind import split_params
from atomlisp.types.closure import Closure
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.nil import Nil
from atomlisp.types.value import as_list


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroExpander,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    # (fn* (params) body). A missing body makes a function returning nil;
    # several body forms have to be wrapped in (do ...).
    if len(tail) not in (1, 2):
        raise AtomInvalidArgument("fn* expects a parameter list and a single body form")

    params = as_list(tail[0])
    split_params(params)  # reject malformed parameter lists up front
    body = tail[1] if len(tail) == 2 else Nil
    return Closure(params, body, env)
