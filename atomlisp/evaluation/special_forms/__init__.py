"""Registry of special forms for the atomlisp evaluator.

Special-form names form a closed enumeration. The evaluator resolves a head
symbol to its SpecialForm member with a single lookup on the interned Symbol,
then dispatches through SPECIAL_FORMS.
"""

from __future__ import annotations

from enum import Enum

from atomlisp.types.symbol import Symbol


class SpecialForm(Enum):
    QUOTE = "quote"
    DEF = "def"
    IF = "if"
    FN = "fn*"
    DEFMACRO = "defmacro"
    DO = "do"
    EVAL = "eval"
    MACROEXPAND = "macroexpand"
    LOOP = "loop"
    RECUR = "recur"

    @property
    def symbol(self) -> Symbol:
        return Symbol(self.value)


_BY_SYMBOL: dict[Symbol, SpecialForm] = {Symbol(f.value): f for f in SpecialForm}


def special_form_for(head: object) -> SpecialForm | None:
    if not isinstance(head, Symbol):
        return None
    return _BY_SYMBOL.get(head)


from atomlisp.evaluation.special_forms.quote_form import quote_form  # noqa: E402
from atomlisp.evaluation.special_forms.define_form import define_form  # noqa: E402
from atomlisp.evaluation.special_forms.if_form import if_form  # noqa: E402
from atomlisp.evaluation.special_forms.lambda_form import lambda_form  # noqa: E402
from atomlisp.evaluation.special_forms.defmacro_form import defmacro_form  # noqa: E402
from atomlisp.evaluation.special_forms.do_form import do_form  # noqa: E402
from atomlisp.evaluation.special_forms.eval_form import eval_form  # noqa: E402
from atomlisp.evaluation.special_forms.macroexpand_form import macroexpand_form  # noqa: E402
from atomlisp.evaluation.special_forms.loop_forms import loop_form, recur_form  # noqa: E402

SPECIAL_FORMS = {
    SpecialForm.QUOTE: quote_form,
    SpecialForm.DEF: define_form,
    SpecialForm.IF: if_form,
    SpecialForm.FN: lambda_form,
    SpecialForm.DEFMACRO: defmacro_form,
    SpecialForm.DO: do_form,
    SpecialForm.EVAL: eval_form,
    SpecialForm.MACROEXPAND: macroexpand_form,
    SpecialForm.LOOP: loop_form,
    SpecialForm.RECUR: recur_form,
}
