"""Closure representation for atomlisp functions and macros."""

from __future__ import annotations

from atomlisp import SExpression, LispValue
from atomlisp.types.environment import Environment


class Closure:
    """A user-defined function: parameter list, unevaluated body and captured frame.

    `env` is the frame that was current when the `fn*` form was evaluated. A
    closure with `is_macro` set receives its arguments unevaluated and its
    result replaces the calling form.
    """

    __slots__ = ("params", "body", "env", "is_macro")

    def __init__(
        self,
        params: list[SExpression],
        body: SExpression,
        env: Environment,
        is_macro: bool = False,
    ):
        self.params: list[SExpression] = params
        self.body: SExpression = body
        self.env: Environment = env
        self.is_macro: bool = is_macro

    def as_macro(self) -> Closure:
        """Return a macro copy of this closure; the original is left untouched."""
        return Closure(self.params, self.body, self.env, True)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Return a fresh frame under `env` with `params` bound to `args`."""
        from atomlisp.types.bind import bind_arguments
        return bind_arguments(self.params, args, self.env)

    def __str__(self) -> str:
        from atomlisp.printer import pr_str
        kind = "macro" if self.is_macro else "fn*"
        return f"#<{kind} {pr_str(self.params)} {pr_str(self.body)}>"

    def __repr__(self) -> str:
        return str(self)
