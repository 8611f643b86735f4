"""Built-in functions and macros for the Shallot runtime environment.

Builtin functions receive their arguments already evaluated; builtin macros
receive the raw argument expressions and decide what to evaluate, and in which
environment. Both are plain Python callables of the form (arguments, env).
"""
from __future__ import annotations
import math

from shallot import LispValue, SExpression
from shallot.errors import ShallotArityError, error_context
from shallot.evaluation.evaluator import evaluate, is_truthy
from shallot.types.atom import expect
from shallot.types.builtin import BuiltinFunction, BuiltinMacro
from shallot.types.environment import Environment
from shallot.types.lambda_fn import Lambda, Macro
from shallot.types.lisp_list import EMPTY, List
from shallot.types.number import Number
from shallot.types.symbol import Symbol

TRUE = Symbol("#t")


def _truth(value: bool) -> LispValue:
    return TRUE if value else EMPTY


def _numbers(name: str, expr: list[LispValue]) -> list[float]:
    values = []
    for position, value in enumerate(expr, start=1):
        with error_context(f"argument number {position} of {name} is not a number"):
            values.append(expect(value, Number).value)
    return values


def _require(name: str, expr: list, count: int, exact: bool = True) -> None:
    if exact and len(expr) != count:
        raise ShallotArityError(f"{name} requires exactly {count} argument(s), got {len(expr)}")
    if not exact and len(expr) < count:
        raise ShallotArityError(f"{name} requires at least {count} argument(s), got {len(expr)}")


def _divide(numerator: float, denominator: float) -> float:
    """IEEE 754 division: dividing by zero gives an infinity or nan."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# -------------------------------
# Arithmetic
# -------------------------------
def add(expr: list[LispValue], env: Environment) -> LispValue:
    """Return the numeric sum of all arguments; errors if any arg is non-numeric."""
    return Number(sum(_numbers("+", expr)))


def mul(expr: list[LispValue], env: Environment) -> LispValue:
    """Return the product of all arguments; errors if any arg is non-numeric."""
    return Number(math.prod(_numbers("*", expr)))


def sub(expr: list[LispValue], env: Environment) -> LispValue:
    """Subtract the sum of the remaining arguments from the first."""
    _require("-", expr, 1, exact=False)
    first, *rest = _numbers("-", expr)
    return Number(first - sum(rest))


def div(expr: list[LispValue], env: Environment) -> LispValue:
    """Divide the first argument by the product of the remaining ones."""
    _require("/", expr, 1, exact=False)
    first, *rest = _numbers("/", expr)
    return Number(_divide(first, math.prod(rest)))


# -------------------------------
# Comparison
# -------------------------------
def equals(expr: list[LispValue], env: Environment) -> LispValue:
    """Return #t if every adjacent pair of arguments is equal (or zero/one arg), else ()."""
    return _truth(all(a == b for a, b in zip(expr, expr[1:])))


def lte(expr: list[LispValue], env: Environment) -> LispValue:
    """Chainable less-or-equal: returns #t if a0 <= a1 <= a2 ... holds for all pairs."""
    _require("≤", expr, 1, exact=False)
    values = _numbers("≤", expr)
    return _truth(all(a <= b for a, b in zip(values, values[1:])))


# -------------------------------
# Lists and output
# -------------------------------
def list_builtin(expr: list[LispValue], env: Environment) -> LispValue:
    return List(expr)


def print_builtin(expr: list[LispValue], env: Environment) -> LispValue:
    """Print each argument on its own line and return ()."""
    for value in expr:
        print(value)
    return EMPTY


# -------------------------------
# Binding and control
# -------------------------------
def define(args: list[SExpression], env: Environment) -> LispValue:
    """(define name value): bind `name` in the caller's environment and return the value.

    Both arguments are checked before the environment is touched.
    """
    _require("define", args, 2)
    name, value_expr = args
    with error_context("argument number 1 of call to define"):
        symbol = expect(name, Symbol)
    with error_context("argument number 2 of call to define"):
        value = evaluate(value_expr, env)
    env.set(symbol, value)
    return value


def quote(args: list[SExpression], env: Environment) -> LispValue:
    _require("'", args, 1)
    return args[0]


def _parameters(name: str, expr: SExpression) -> list[Symbol]:
    with error_context(f"parameter list of {name}"):
        params = expect(expr, List)
        return [expect(p, Symbol) for p in params]


def lambda_builtin(args: list[SExpression], env: Environment) -> LispValue:
    """(λ (params) body): a Lambda closing over a snapshot of the caller's environment."""
    _require("λ", args, 2)
    params, body = args
    return Lambda(_parameters("λ", params), body, env.copy())


def macro_builtin(args: list[SExpression], env: Environment) -> LispValue:
    """(μ (params) body): a Macro closing over a snapshot of the caller's environment."""
    _require("μ", args, 2)
    params, body = args
    return Macro(_parameters("μ", params), body, env.copy())


def cond(args: list[SExpression], env: Environment) -> LispValue:
    """(cond c1 e1 c2 e2 ... [default])

    Conditions are evaluated left to right; the consequence of the first truthy
    one is evaluated and returned. With an odd argument count the trailing
    default is evaluated when nothing matched, otherwise the result is ().
    """
    for index in range(0, len(args) - 1, 2):
        with error_context(f"condition number {index // 2 + 1} of cond"):
            matched = is_truthy(evaluate(args[index], env))
        if matched:
            return evaluate(args[index + 1], env)
    if len(args) % 2:
        return evaluate(args[-1], env)
    return EMPTY


# -------------------------------
# Registration
# -------------------------------
FUNCTIONS = {
    ("+",): add,
    ("-",): sub,
    ("*",): mul,
    ("/",): div,
    ("=",): equals,
    ("≤", "<="): lte,
    ("list",): list_builtin,
    ("print",): print_builtin,
}

MACROS = {
    ("define",): define,
    ("'", "quote"): quote,
    ("λ", "lambda"): lambda_builtin,
    ("μ", "macro"): macro_builtin,
    ("cond",): cond,
}


def register(env: Environment) -> None:
    """Register all builtin functions, macros and constants into the given environment."""
    for names, fn in FUNCTIONS.items():
        for name in names:
            env.set(Symbol(name), BuiltinFunction(name, fn))
    for names, fn in MACROS.items():
        for name in names:
            env.set(Symbol(name), BuiltinMacro(name, fn))
    env.set(TRUE, TRUE)
    env.set(Symbol("#f"), EMPTY)
