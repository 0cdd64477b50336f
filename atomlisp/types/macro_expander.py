from __future__ import annotations

import logging

from atomlisp import EvaluatorFn, SExpression
from atomlisp.errors import AtomInvalidOperation
from atomlisp.types.closure import Closure
from atomlisp.types.environment import Environment
from atomlisp.types.symbol import Symbol


class MacroExpander:
    """
    Head-position macro expansion for atomlisp.

    Macros live in ordinary environment frames as Closures flagged `is_macro`.
    A form is a macro call when its head is a Symbol that resolves, somewhere
    in the chain, to such a closure. Expansion binds the *unevaluated* operands
    to the macro's parameters, evaluates the macro body once and substitutes the
    result for the whole form, repeating until the head no longer names a macro.

    The fixpoint is bounded by `max_expansions` so a self-expanding macro is
    reported instead of looping forever.
    """

    def __init__(self, max_expansions: int = 1000):
        self.max_expansions = max_expansions
        self._logger = logging.getLogger("MacroExpander")

    def macro_for(self, form: SExpression, env: Environment) -> Closure | None:
        """Return the macro closure named by the head of `form`, if any.

        An unbound head is not an error here; dispatch reports it later.
        """
        if not isinstance(form, list) or not form:
            return None
        head = form[0]
        if not isinstance(head, Symbol):
            return None
        frame = env.find(head)
        if frame is None:
            return None
        value = frame.vars[head]
        if isinstance(value, Closure) and value.is_macro:
            return value
        return None

    def expand_1(
        self, form: SExpression, env: Environment, evaluator: EvaluatorFn
    ) -> SExpression:
        """Expand the head-position macro once; non-macro forms come back unchanged."""
        macro = self.macro_for(form, env)
        if macro is None:
            return form
        call_env = macro.extend_env(list(form[1:]))
        expansion = evaluator(macro.body, call_env, self)
        self._logger.debug("expanded %s", form[0])
        return expansion

    def macro_expand_head(
        self, form: SExpression, env: Environment, evaluator: EvaluatorFn
    ) -> SExpression:
        """Expand head-position macros until the head no longer names one."""
        expansions = 0
        while self.macro_for(form, env) is not None:
            if expansions >= self.max_expansions:
                raise AtomInvalidOperation(
                    f"macro expansion of {form[0]} exceeded {self.max_expansions} steps"
                )
            form = self.expand_1(form, env, evaluator)
            expansions += 1
        return form
