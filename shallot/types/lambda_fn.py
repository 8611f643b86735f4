"""User-defined callables: Lambda and Macro.

Both carry formal parameters, a body and a private snapshot of the environment
that was active when they were built. They differ only in how a call treats
its arguments; see shallot.evaluation.apply.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Sequence

from shallot import SExpression
from shallot.types.atom import Atom
from shallot.types.environment import Environment
from shallot.types.symbol import Symbol


class _Closure(Atom):
    __slots__ = ("parameters", "body", "env")

    glyph = "?"

    def __init__(
        self, parameters: Iterable[Symbol], body: SExpression, env: Environment | None = None
    ):
        object.__setattr__(self, "parameters", tuple(parameters))
        object.__setattr__(self, "body", body)
        # Avoid shared default Environment across instances
        object.__setattr__(self, "env", env if env is not None else Environment())

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def __eq__(self, other) -> bool:
        return (
            type(other) is type(self)
            and self.parameters == other.parameters
            and self.body == other.body
            and self.env == other.env
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.parameters, self.body))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"({self.glyph} (")
            buffer.write(" ".join(str(p) for p in self.parameters))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the callable."""
        return str(self)


class Lambda(_Closure):
    """A first-class function; arguments are evaluated in the caller's scope."""

    __slots__ = ()
    kind = "lambda"
    glyph = "λ"

    def call(self, arguments: Sequence[Atom], env: Environment) -> Atom:
        from shallot.evaluation.apply import apply_lambda
        return apply_lambda(self, arguments, env)


class Macro(_Closure):
    """A code transformer; arguments are bound unevaluated and the
    expansion its body produces is evaluated again in the caller's scope."""

    __slots__ = ()
    kind = "macro"
    glyph = "μ"

    def call(self, arguments: Sequence[Atom], env: Environment) -> Atom:
        from shallot.evaluation.apply import apply_macro
        return apply_macro(self, arguments, env)
