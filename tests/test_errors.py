import pytest

from shallot.errors import (
    ShallotArityError,
    ShallotError,
    ShallotEvalError,
    ShallotNotCallable,
    ShallotSyntaxError,
    ShallotTypeError,
    ShallotUnboundSymbol,
    error_context,
)
from shallot.interpreter import evaluate
from shallot.types import Symbol


@pytest.mark.parametrize(
    "error",
    [
        ShallotSyntaxError("x"),
        ShallotTypeError("list", "number"),
        ShallotEvalError("x"),
        ShallotUnboundSymbol(Symbol("x")),
        ShallotArityError("x"),
        ShallotNotCallable("number"),
    ],
)
def test_every_error_is_a_shallot_error(error):
    assert isinstance(error, ShallotError)


def test_eval_error_family():
    assert issubclass(ShallotUnboundSymbol, ShallotEvalError)
    assert issubclass(ShallotArityError, ShallotEvalError)
    assert issubclass(ShallotNotCallable, ShallotEvalError)


def test_error_context_keeps_the_error_type():
    with pytest.raises(ShallotArityError) as info:
        with error_context("outer"):
            with error_context("inner"):
                raise ShallotArityError("leaf")
    assert info.value.context == ["inner", "outer"]
    assert str(info.value) == "outer"


def test_error_context_ignores_other_exceptions():
    with pytest.raises(KeyError):
        with error_context("frame"):
            raise KeyError("k")


def test_derivation_without_context_is_the_message():
    assert ShallotEvalError("leaf").derivation() == "leaf"
    assert str(ShallotEvalError("leaf")) == "leaf"


def test_full_derivation(env):
    with pytest.raises(ShallotUnboundSymbol) as info:
        evaluate("(+ 1 nope)", env)
    assert info.value.derivation() == "\n".join(
        [
            "could not evaluate input `(+ 1 nope)`",
            "",
            "Caused by:",
            "    0: argument number 2 of call to +",
            "    1: variable `nope` unbound",
        ]
    )
