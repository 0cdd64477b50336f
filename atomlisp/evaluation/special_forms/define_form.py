from atomlisp import EvaluatorFn
from atomlisp import SExpression, LispValue
from atomlisp.errors import AtomInvalidArgument
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.value import as_symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    macros: MacroExpander,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (def name value)
    Binds in the current frame only and returns the symbol, not the value.
    """
    if len(tail) != 2:
        raise AtomInvalidArgument("def expects a name and a value")

    name = as_symbol(tail[0])
    value = evaluate_fn(tail[1], env, macros)
    env.define(name, value)
    return name
