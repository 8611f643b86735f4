import pytest

from shallot.errors import (
    ShallotArityError,
    ShallotNotCallable,
    ShallotTypeError,
    ShallotUnboundSymbol,
)
from shallot.interpreter import evaluate
from shallot.types import BuiltinMacro, Lambda, List, Macro, Number, Symbol


# ------------------ define ------------------

def test_define_returns_and_binds_the_value(env):
    assert evaluate("(define x (+ 1 2))", env) == Number(3)
    assert env.get(Symbol("x")) == Number(3)


def test_define_overwrites(env):
    evaluate("(define x 1)", env)
    evaluate("(define x 2)", env)
    assert evaluate("x", env) == Number(2)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(define x)", ShallotArityError),
        ("(define x 1 2)", ShallotArityError),
        ("(define 1 2)", ShallotTypeError),
        ("(define (x) 2)", ShallotTypeError),
        ("(define x nope)", ShallotUnboundSymbol),
    ],
)
def test_failed_define_leaves_the_environment_untouched(env, source, error):
    before = env.copy()
    with pytest.raises(error):
        evaluate(source, env)
    assert env == before


# ------------------ quote ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote x)", Symbol("x")),
        ("(quote (+ 1 2))", List([Symbol("+"), Number(1), Number(2)])),
        ("(quote ())", List()),
        ("(list ' x)", List([Symbol("x")])),
        ("(list ' (+ 1 2))", List([List([Symbol("+"), Number(1), Number(2)])])),
        ("(list ' a ' b)", List([Symbol("a"), Symbol("b")])),
    ],
)
def test_quote(env, source, expected):
    assert evaluate(source, env) == expected


def test_quote_takes_exactly_one_argument(env):
    with pytest.raises(ShallotArityError):
        evaluate("(quote a b)", env)


def test_a_quoted_form_in_head_position_is_called(env):
    # (' x) reads as ((' x)): the quoted symbol x ends up at the head
    with pytest.raises(ShallotNotCallable):
        evaluate("(' x)", env)


# ------------------ list ------------------

def test_list_evaluates_its_arguments(env):
    assert evaluate("(list 1 (+ 1 1) (list))", env) == List([Number(1), Number(2), List()])


# ------------------ λ and μ ------------------

def test_lambda_builds_a_closure_over_a_copy(env):
    value = evaluate("(λ (a b) (+ a b))", env)
    assert isinstance(value, Lambda)
    assert value.parameters == (Symbol("a"), Symbol("b"))
    assert value.env == env
    assert value.env is not env


def test_ascii_aliases(env):
    assert isinstance(evaluate("(lambda (a) a)", env), Lambda)
    assert isinstance(evaluate("(macro (a) a)", env), Macro)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(λ (a))", ShallotArityError),
        ("(λ a a)", ShallotTypeError),
        ("(λ (a 1) a)", ShallotTypeError),
        ("(μ (a) a a)", ShallotArityError),
        ("(μ x x)", ShallotTypeError),
    ],
)
def test_constructor_errors(env, source, error):
    with pytest.raises(error):
        evaluate(source, env)


# ------------------ cond ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond (list) 1 (list) 2 99)", Number(99)),
        ("(cond (list) 1 (list) 2)", List()),
        ("(cond 1 (+ 1 1) (list) 2)", Number(2)),
        ("(cond (list) 1 (= 1 1) (+ 2 2) 99)", Number(4)),
        ("(cond)", List()),
        ("(cond 5)", Number(5)),
        ("(cond #f 1 #t 2)", Number(2)),
    ],
)
def test_cond(env, source, expected):
    assert evaluate(source, env) == expected


def test_cond_only_evaluates_what_it_needs(env):
    # the unbound symbols are never reached
    assert evaluate("(cond 1 2 nope nope)", env) == Number(2)
    assert evaluate("(cond (list) nope 3)", env) == Number(3)


# ------------------ builtin macros ------------------

def test_builtin_macro_receives_raw_arguments(env):
    seen = []

    def capture(args, env):
        seen.extend(args)
        return List(args)

    env.set(Symbol("capture"), BuiltinMacro("capture", capture))
    assert evaluate("(capture (+ 1 2) x)", env) == List(
        [List([Symbol("+"), Number(1), Number(2)]), Symbol("x")]
    )
    assert seen[1] == Symbol("x")


def test_print(env, capsys):
    assert evaluate("(print 1 ' a (list 1 2))", env) == List()
    assert capsys.readouterr().out == "1\na\n(1 2)\n"
