"""Application engine for Shallot.

This module centralizes the calling protocols reached through `Atom.call`:
- Builtin functions receive their arguments evaluated, builtin macros receive
  the raw argument expressions.
- Lambdas evaluate their arguments in the caller's environment, then bind them
  into a private copy of the closure environment.
- Macros bind their arguments unevaluated, evaluate the body to obtain an
  expansion, and evaluate that expansion in the caller's environment.
- Lambdas and macros called with fewer arguments than parameters return a new
  callable of the same kind expecting the rest (currying); more arguments than
  parameters is an error.
"""

from __future__ import annotations

import logging
from typing import Sequence

from shallot import SExpression, LispValue
from shallot.errors import ShallotArityError, error_context
from shallot.evaluation.evaluator import evaluate
from shallot.types.builtin import BuiltinFunction, BuiltinMacro
from shallot.types.environment import Environment
from shallot.types.lambda_fn import Lambda, Macro, _Closure

logger = logging.getLogger(__name__)


def evaluate_arguments(
    arguments: Sequence[SExpression], env: Environment, callee: str
) -> list[LispValue]:
    """Evaluate `arguments` left to right in `env`, tagging failures with their position."""
    values = []
    for number, argument in enumerate(arguments, start=1):
        with error_context(f"argument number {number} of call to {callee}"):
            values.append(evaluate(argument, env))
    return values


def apply_builtin_function(
    fn: BuiltinFunction, arguments: Sequence[SExpression], env: Environment
) -> LispValue:
    values = evaluate_arguments(arguments, env, fn.name)
    return fn.function(values, env)


def apply_builtin_macro(
    fn: BuiltinMacro, arguments: Sequence[SExpression], env: Environment
) -> LispValue:
    return fn.function(list(arguments), env)


def bind_arguments(
    fn: _Closure, arguments: Sequence[LispValue]
) -> tuple[Environment, tuple]:
    """Bind `arguments` to the leading parameters of `fn` in a copy of its closure.

    Returns the new environment and the parameters still unbound.
    Raises ShallotArityError when there are more arguments than parameters.
    """
    provided = len(arguments)
    if provided > fn.arity:
        extra = " ".join(str(a) for a in arguments[fn.arity:])
        raise ShallotArityError(
            f"too many arguments to {fn.kind}: expected {fn.arity}, got {provided} (extra: {extra})"
        )
    scope = fn.env.copy()
    for parameter, argument in zip(fn.parameters, arguments):
        scope.set(parameter, argument)
    return scope, fn.parameters[provided:]


def apply_lambda(
    fn: Lambda, arguments: Sequence[SExpression], env: Environment
) -> LispValue:
    values = evaluate_arguments(arguments, env, fn.kind)
    scope, remaining = bind_arguments(fn, values)
    if remaining:
        logger.debug("partial application of %s, %d parameter(s) left", fn, len(remaining))
        return Lambda(remaining, fn.body, scope)
    return evaluate(fn.body, scope)


def apply_macro(
    fn: Macro, arguments: Sequence[SExpression], env: Environment
) -> LispValue:
    scope, remaining = bind_arguments(fn, list(arguments))
    if remaining:
        logger.debug("partial application of %s, %d parameter(s) left", fn, len(remaining))
        return Macro(remaining, fn.body, scope)
    with error_context(f"expanding macro {fn}"):
        expansion = evaluate(fn.body, scope)
    logger.debug("macro %s expanded to %s", fn, expansion)
    with error_context(f"evaluating macro expansion {expansion}"):
        return evaluate(expansion, env)
