# Core type aliases for Shallot's data model.
# Every value is an instance of shallot.types.Atom; code and data share the
# same representation, so the aliases below only document intent.
#
# Naming guidance:
# - SExpression: Use in reader/parser/macro code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Native builtin signature: (arguments, env) -> value
NativeFn = Callable[..., LispValue]

from shallot.interpreter import Interpreter, evaluate  # noqa: E402

__all__ = ["LispValue", "SExpression", "NativeFn", "Interpreter", "evaluate"]
