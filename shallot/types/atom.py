"""The capability contract shared by every Shallot value.

Each expression kind subclasses Atom and answers three questions: what it is
called in diagnostics, what happens when it sits at the head of a list, and
whether it can be read directly from a source token. The evaluator only ever
talks to values through this contract.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Sequence, TypeVar

from shallot.errors import ShallotNotCallable, ShallotTypeError

if TYPE_CHECKING:
    from shallot.reader.lexer import Token
    from shallot.types.environment import Environment

A = TypeVar("A", bound="Atom")


class Atom:
    __slots__ = ()

    kind: ClassVar[str] = "atom"

    def kind_name(self) -> str:
        return self.kind

    def call(self, arguments: Sequence[Atom], env: Environment) -> Atom:
        raise ShallotNotCallable(self.kind_name())

    @classmethod
    def parse_from_token(cls, token: Token) -> Atom | None:
        return None

    def __setattr__(self, name, value):
        # Values are immutable once built; constructors go through object.__setattr__
        raise AttributeError(f"{self.kind} values are immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


def expect(value: Atom, kind: type[A]) -> A:
    """Return `value` as a `kind`, or raise a type error naming both kinds."""
    if isinstance(value, kind):
        return value
    got = value.kind_name() if isinstance(value, Atom) else type(value).__name__
    raise ShallotTypeError(kind.kind, got)
