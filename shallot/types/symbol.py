from __future__ import annotations
import sys
from functools import total_ordering

from shallot.types.atom import Atom


@total_ordering
class Symbol(Atom):
    __slots__ = ("name",)
    __match_args__ = ("name",)

    kind = "symbol"

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "name", sys.intern(name))

    @classmethod
    def parse_from_token(cls, token) -> Symbol:
        return cls(token.text)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __lt__(self, other: Symbol) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
