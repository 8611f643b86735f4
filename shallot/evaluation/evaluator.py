"""Core evaluator for the Shallot interpreter.

Lists are calls: the head is evaluated and the resulting value decides, through
its `call`, what happens to the remaining elements. Symbols are looked up.
Everything else evaluates to itself.
"""

from __future__ import annotations

from shallot import SExpression, LispValue
from shallot.errors import ShallotEvalError, ShallotUnboundSymbol, error_context
from shallot.types.environment import Environment
from shallot.types.lisp_list import List
from shallot.types.symbol import Symbol

HEAD_CONTEXT = "evaluating head of list"


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Reduce `expr` to a value in `env`.

    Evaluation is direct recursion: nesting depth in the expression is nesting
    depth on the Python stack.
    """
    match expr:
        case List(()):
            raise ShallotEvalError("empty list is not callable").add_context(HEAD_CONTEXT)
        case List((head, *arguments)):
            with error_context(HEAD_CONTEXT):
                operator = evaluate(head, env)
            return operator.call(arguments, env)
        case Symbol():
            value = env.get(expr)
            if value is None:
                raise ShallotUnboundSymbol(expr)
            return value

    # --- Atoms return as-is ---
    return expr


def is_truthy(expr: LispValue) -> bool:
    """Only the empty list is false."""
    return not (isinstance(expr, List) and not expr.elements)
