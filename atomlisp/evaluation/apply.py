"""Application engine for atomlisp.

Builtins are called with the evaluated argument list. Closures get a fresh
frame under their captured environment, bound with the variadic binding rules
in atomlisp.types.bind, and their body is evaluated there. This is a direct
recursive call back into the evaluator; only loop/recur iterates without
growing the stack.
"""

from atomlisp import LispValue, EvaluatorFn
from atomlisp.errors import AtomInvalidType
from atomlisp.printer import pr_str
from atomlisp.types.builtin_fn import Builtin
from atomlisp.types.closure import Closure


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    macros,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind `args` to the closure's parameters and evaluate its body."""
    new_env = fn.extend_env(list(args))
    return evaluate_fn(fn.body, new_env, macros)


def apply(
    head: LispValue,
    args: list[LispValue],
    macros,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Builtin; anything else is a type error."""
    if isinstance(head, Builtin):
        return head(args)
    if isinstance(head, Closure):
        return apply_closure(head, args, macros, evaluate_fn)
    raise AtomInvalidType("function", pr_str(head))
