import pytest

from atomlisp.errors import AtomInvalidType, AtomUndefinedSymbol
from atomlisp.printer import pr_str
from atomlisp.reader.parser import parse
from atomlisp.types.nil import Nil
from atomlisp.types.symbol import Symbol


def test_quote_returns_form_unevaluated(itp):
    assert itp.eval("(quote (a (b 1) nil))") == [Symbol("a"), [Symbol("b"), 1], Nil]
    assert itp.eval("'undefined-symbol") == Symbol("undefined-symbol")
    assert itp.eval("'()") == []


def test_quasiquote_simple(itp):
    assert itp.eval("`(1 2 3)") == [1, 2, 3]
    assert itp.eval("`sym") == Symbol("sym")
    assert itp.eval("`5") == 5
    assert itp.eval("`()") == []


def test_quasiquote_with_unquote(itp):
    itp.eval("(def x 2)")
    assert itp.eval("`(1 ~x 3)") == [1, 2, 3]
    assert itp.eval("`~x") == 2


def test_quasiquote_with_unquote_splicing(itp):
    itp.eval("(def xs (list 2 3))")
    assert itp.eval("`(1 ~@xs 4)") == [1, 2, 3, 4]


def test_splicing_nil_splices_nothing(itp):
    assert itp.eval("`(1 ~@nil 2)") == [1, 2]


def test_eval_str_backquote_splicing(itp):
    assert itp.eval("(eval `(+ ~@(list 1 2 3)))") == 6


def test_nested_template_lists(itp):
    itp.eval("(def x 10)")
    assert itp.eval("`(a (b ~x) (c (d ~@(list x x))))") == parse("(a (b 10) (c (d 10 10)))")


def test_unquote_splicing_requires_a_list(itp):
    with pytest.raises(AtomInvalidType):
        itp.eval("`(1 ~@42)")


def test_lambda_quasiquote_unquote(itp):
    itp.eval("(def f (fn* (x) `(1 ~x 3)))")
    assert itp.eval("(f 10)") == [1, 10, 3]


def test_lambda_quasiquote_unquote_splicing(itp):
    itp.eval("(def f (fn* (& xs) `(1 ~@xs 4)))")
    assert itp.eval("(f 2 3)") == [1, 2, 3, 4]
    assert itp.eval("(f)") == [1, 4]


def test_unquote_outside_backquote_is_unbound(itp):
    with pytest.raises(AtomUndefinedSymbol):
        itp.eval("~x")


def test_qq_expand_produces_construction_code(itp):
    expansion = itp.eval("(qq-expand '(a ~b ~@c))")
    assert expansion == parse("(concat (list (quote a)) (list b) c)")


def test_nested_backquote_is_expanded_by_the_outer_one(itp):
    itp.eval("(def x 10)")
    assert pr_str(itp.eval("`(a `(b ~x))")) == "(a (backquote (b 10)))"
