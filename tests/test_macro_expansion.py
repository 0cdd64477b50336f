import pytest

from atomlisp.errors import AtomInvalidOperation, AtomInvalidType, AtomUndefinedSymbol
from atomlisp.evaluation.evaluator import evaluate
from atomlisp.types.closure import Closure
from atomlisp.types.macro_expander import MacroExpander
from atomlisp.types.nil import Nil
from atomlisp.types.symbol import Symbol

x = Symbol("x")


def _quote_list_macro(env):
    # (fn* (x) (list 'quote x))
    body = [Symbol("list"), [Symbol("quote"), Symbol("quote")], x]
    return Closure([x], body, env, is_macro=True)


# -------------------------
# MacroExpander directly
# -------------------------

def test_simple_macro_expansion(env, macros):
    """(inc x) => (+ x 1)"""
    body = [Symbol("list"), [Symbol("quote"), Symbol("+")], x, 1]
    env.define(Symbol("inc"), Closure([x], body, env, is_macro=True))

    expanded = macros.macro_expand_head([Symbol("inc"), 5], env, evaluate)
    assert expanded == [Symbol("+"), 5, 1]
    assert evaluate([Symbol("inc"), 5], env, macros) == 6


def test_macro_receives_unevaluated_arguments(env, macros):
    env.define(Symbol("ignore"), _quote_list_macro(env))
    result = evaluate([Symbol("ignore"), Symbol("undefined-symbol")], env, macros)
    assert result == Symbol("undefined-symbol")


def test_nested_macro_expansion(env, macros):
    # (twice-inc x) -> (inc (inc x)) -> ...
    inc_body = [Symbol("list"), [Symbol("quote"), Symbol("+")], x, 1]
    env.define(Symbol("inc"), Closure([x], inc_body, env, is_macro=True))
    twice_body = [Symbol("list"), [Symbol("quote"), Symbol("inc")],
                  [Symbol("list"), [Symbol("quote"), Symbol("inc")], x]]
    env.define(Symbol("twice-inc"), Closure([x], twice_body, env, is_macro=True))

    head_only = macros.macro_expand_head([Symbol("twice-inc"), 1], env, evaluate)
    assert head_only == [Symbol("+"), [Symbol("inc"), 1], 1]
    assert evaluate([Symbol("twice-inc"), 1], env, macros) == 3


def test_expand_1_only_steps_once(env, macros):
    env.define(Symbol("m1"), Closure([], [Symbol("quote"), [Symbol("m2")]], env, is_macro=True))
    env.define(Symbol("m2"), Closure([], 7, env, is_macro=True))
    assert macros.expand_1([Symbol("m1")], env, evaluate) == [Symbol("m2")]
    assert macros.macro_expand_head([Symbol("m1")], env, evaluate) == 7


def test_non_macro_forms_are_unchanged(env, macros):
    form = [Symbol("+"), 1, 2]
    assert macros.expand_1(form, env, evaluate) is form
    assert macros.macro_for(form, env) is None
    assert macros.macro_for([Symbol("unbound-head")], env) is None
    assert macros.macro_for([1, 2], env) is None
    assert macros.macro_for(Symbol("x"), env) is None


def test_ordinary_closure_is_not_a_macro(env, macros):
    env.define(Symbol("f"), Closure([x], x, env))
    assert macros.macro_for([Symbol("f"), 1], env) is None


def test_self_expanding_macro_hits_the_limit(env):
    limited = MacroExpander(max_expansions=25)
    # (forever) -> (forever)
    body = [Symbol("quote"), [Symbol("forever")]]
    env.define(Symbol("forever"), Closure([], body, env, is_macro=True))
    with pytest.raises(AtomInvalidOperation) as exc:
        evaluate([Symbol("forever")], env, limited)
    assert "forever" in exc.value.name
    assert "25" in exc.value.name


# -------------------------
# Through the interpreter
# -------------------------

def test_eval_str_macro(itp):
    itp.eval("(defmacro ignore (fn* (x) (list 'quote x)))")
    assert itp.eval("(ignore undefined-symbol)") == Symbol("undefined-symbol")
    with pytest.raises(AtomUndefinedSymbol) as exc:
        itp.eval("undefined-symbol")
    assert exc.value == AtomUndefinedSymbol("undefined-symbol")


def test_defmacro_returns_symbol_and_flags_a_copy(itp):
    assert itp.eval("(def f (fn* (x) x))") == Symbol("f")
    assert itp.eval("(defmacro m f)") == Symbol("m")
    f = itp.env.lookup(Symbol("f"))
    m = itp.env.lookup(Symbol("m"))
    assert isinstance(m, Closure) and m.is_macro
    assert not f.is_macro


def test_defmacro_requires_a_closure(itp):
    with pytest.raises(AtomInvalidType):
        itp.eval("(defmacro bad 1)")
    with pytest.raises(AtomInvalidType):
        itp.eval("(defmacro bad +)")


def test_macro_with_backquote(itp):
    itp.eval("(defmacro unless (fn* (c a b) `(if ~c ~b ~a)))")
    assert itp.eval("(unless nil 1 2)") == 1
    assert itp.eval("(unless 0 1 2)") == 2


def test_variadic_macro(itp):
    itp.eval("(defmacro my-do (fn* (& forms) `(do ~@forms)))")
    assert itp.eval("(my-do (def a 1) (+ a 1))") == 2
    assert itp.eval("(my-do)") is Nil


def test_prelude_defn_and_when(itp):
    itp.eval("(defn sq (n) (* n n))")
    assert itp.eval("(sq 9)") == 81
    assert itp.eval("(when 1 2 3)") == 3
    assert itp.eval("(when nil 2 3)") is Nil


def test_macro_expanding_to_symbol(itp):
    itp.eval("(def target 99)")
    itp.eval("(defmacro target-ref (fn* () 'target))")
    assert itp.eval("(target-ref)") == 99


def test_self_expanding_macro_is_reported_not_looped(itp):
    itp.eval("(defmacro forever (fn* () '(forever)))")
    assert itp.rep("(forever)").startswith("Error: Invalid operation: macro expansion of forever")
