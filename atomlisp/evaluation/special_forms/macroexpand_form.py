"""Special form exposing the macro expander to Lisp code.

(macroexpand form) expands head-position macros in `form` to a fixpoint and
returns the expansion without evaluating it. The argument itself is not
evaluated either; a single leading quote is unwrapped so that both
(macroexpand (m x)) and (macroexpand '(m x)) work.
"""

from atomlisp import SExpression, EvaluatorFn
from atomlisp.errors import AtomInvalidArgument
from atomlisp.evaluation.special_forms import SpecialForm


def macroexpand_form(
    tail: list[SExpression], env, macros, evaluate_fn: EvaluatorFn, _: bool
):
    if len(tail) != 1:
        raise AtomInvalidArgument("macroexpand expects exactly 1 argument")
    form = tail[0]
    if isinstance(form, list) and len(form) == 2 and form[0] == SpecialForm.QUOTE.symbol:
        form = form[1]
    return macros.macro_expand_head(form, env, evaluate_fn)
