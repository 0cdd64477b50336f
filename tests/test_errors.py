import pytest

from atomlisp.errors import (
    AtomError,
    AtomInvalidArgument,
    AtomInvalidOperation,
    AtomInvalidType,
    AtomSyntaxError,
    AtomUndefinedSymbol,
)
from atomlisp.types.nil import Nil
from atomlisp.types.symbol import Symbol
from atomlisp.types.value import as_closure, as_integer, as_list, as_symbol, is_truthy


def test_error_messages():
    assert str(AtomInvalidType("integer", "a")) == "Invalid type: expected integer, found a"
    assert str(AtomInvalidOperation("recur")) == "Invalid operation: recur"
    assert str(AtomInvalidArgument("bad")) == "Invalid argument: bad"
    assert str(AtomUndefinedSymbol("foo")) == "Undefined symbol: foo"
    assert str(AtomSyntaxError("oops")) == "Syntax error: oops"


def test_errors_compare_by_type_and_fields():
    assert AtomUndefinedSymbol("a") == AtomUndefinedSymbol("a")
    assert AtomUndefinedSymbol("a") != AtomUndefinedSymbol("b")
    assert AtomInvalidOperation("a") != AtomUndefinedSymbol("a")
    assert issubclass(AtomInvalidType, AtomError)


def test_typed_accessors():
    assert as_integer(3) == 3
    assert as_list([1]) == [1]
    assert as_symbol(Symbol("s")) == Symbol("s")
    with pytest.raises(AtomInvalidType) as exc:
        as_integer(Symbol("a"))
    assert (exc.value.expected, exc.value.actual) == ("integer", "a")
    with pytest.raises(AtomInvalidType) as exc:
        as_list(Nil)
    assert (exc.value.expected, exc.value.actual) == ("list", "nil")
    with pytest.raises(AtomInvalidType):
        as_symbol([Symbol("a")])
    with pytest.raises(AtomInvalidType):
        as_closure(1)
    with pytest.raises(AtomInvalidType):
        as_integer(True)


def test_truthiness():
    assert not is_truthy(Nil)
    assert is_truthy(0)
    assert is_truthy([])


def test_first_error_aborts_the_form(itp):
    with pytest.raises(AtomUndefinedSymbol):
        itp.eval("(do (def before 1) (undefined-fn) (def after 2))")
    assert itp.eval("before") == 1
    assert itp.rep("after") == "Error: Undefined symbol: after"


@pytest.mark.parametrize(
    "code, error",
    [
        ("(quote)", AtomInvalidArgument),
        ("(quote a b)", AtomInvalidArgument),
        ("(def)", AtomInvalidArgument),
        ("(def 1 2)", AtomInvalidType),
        ("(if)", AtomInvalidArgument),
        ("(if 1 2 3 4)", AtomInvalidArgument),
        ("(fn*)", AtomInvalidArgument),
        ("(fn* (x) x x)", AtomInvalidArgument),
        ("(eval)", AtomInvalidArgument),
        ("(defmacro m)", AtomInvalidArgument),
    ],
)
def test_malformed_special_forms(itp, code, error):
    with pytest.raises(error):
        itp.eval(code)
