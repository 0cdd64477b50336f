import pytest

from atomlisp.builtin.env_builtin import register
from atomlisp.interpreter import Interpreter
from atomlisp.types.environment import Environment
from atomlisp.types.macro_expander import MacroExpander


@pytest.fixture
def itp():
    """A fresh interpreter with builtins and the bootstrap prelude."""
    with Interpreter() as interpreter:
        yield interpreter


@pytest.fixture
def macros():
    return MacroExpander()


@pytest.fixture
def env(macros):
    """A bare root frame holding only the builtins, no prelude."""
    e = Environment()
    register(e, macros)
    return e
