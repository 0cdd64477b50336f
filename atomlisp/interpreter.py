from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from atomlisp import SExpression, LispValue
from atomlisp.builtin.env_builtin import register
from atomlisp.config import Settings, get_settings
from atomlisp.errors import AtomError, AtomInvalidOperation
from atomlisp.evaluation.evaluator import evaluate
from atomlisp.printer import pr_str
from atomlisp.reader.parser import parse_all
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.nil import Nil


class Interpreter:
    """
    Owns one root context: the root Environment (builtins, prelude and every
    top-level definition) plus the macro expander configured for it.

    Instances are independent of each other. `close()` drops the root frame's
    bindings, which breaks the frame <-> closure cycles of top-level
    definitions; the interpreter cannot be used afterwards.
    """

    def __init__(self, prelude: bool | str = True, settings: Settings | None = None):
        self._logger = logging.getLogger("Interpreter")
        self.settings: Settings = settings if settings is not None else get_settings()
        self.env: Environment = Environment()
        self.macros: MacroExpander = MacroExpander(self.settings.max_macro_expansions)
        self._closed = False

        register(self.env, self.macros)

        if prelude is True:
            self.load_prelude(self.settings.prelude_path)
        elif isinstance(prelude, str) and prelude:
            self.eval_prelude(prelude)

    def load_prelude(self, path: Path) -> None:
        self._logger.debug("loading prelude from %s", path)
        self.eval_prelude(Path(path).read_text(encoding="utf-8"))

    def eval_prelude(self, code: str) -> None:
        with self._deep_stack():
            for expr in parse_all(code):
                self.eval_form(expr)

    @contextmanager
    def _deep_stack(self) -> Iterator[None]:
        """Raise the host recursion limit to `settings.recursion_limit` while
        reading, evaluating or printing, and restore it afterwards.

        Hitting the limit anywhere inside is reported as a stack overflow.
        """
        previous = sys.getrecursionlimit()
        if self.settings.recursion_limit > previous:
            sys.setrecursionlimit(self.settings.recursion_limit)
        try:
            yield
        except RecursionError:
            raise AtomInvalidOperation("stack overflow") from None
        finally:
            sys.setrecursionlimit(previous)

    def eval_form(self, expr: SExpression) -> LispValue:
        """Evaluate one already-read form in the root environment."""
        if self._closed:
            raise RuntimeError("Interpreter has been closed")
        with self._deep_stack():
            return evaluate(expr, self.env, self.macros)

    def eval(self, code: str) -> LispValue:
        """Read and evaluate every form in `code`; returns the last value (Nil if none)."""
        result: LispValue = Nil
        with self._deep_stack():
            for expr in parse_all(code):
                result = self.eval_form(expr)
        return result

    def rep(self, code: str) -> str:
        """Read, evaluate and render. User-code errors are rendered, not raised."""
        try:
            with self._deep_stack():
                return pr_str(self.eval(code))
        except AtomError as e:
            self._logger.debug("evaluation failed: %r", e)
            return f"Error: {e}"

    def close(self) -> None:
        if not self._closed:
            self.env.clear()
            self._closed = True

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
