"""Runtime environment for Shallot.

An Environment is a flat mapping from Symbols to values. There is no `outer`
chain: closures and per-call scopes are realised by copying, so a copy never
observes later changes to the scope it was taken from, and vice versa.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Optional

from shallot import LispValue
from shallot.errors import ShallotTypeError
from shallot.types.symbol import Symbol


class Environment:
    """Mapping from Symbols to Lisp values, copied by value."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[Mapping[Symbol, LispValue]] = None):
        self.vars: dict[Symbol, LispValue] = {}
        if bindings:
            self.update(bindings)

    def get(self, name: Symbol) -> Optional[LispValue]:
        """Return the value bound to `name`, or None."""
        return self.vars.get(name)

    def set(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this environment, overwriting any binding."""
        if not isinstance(name, Symbol):
            raise ShallotTypeError(Symbol.kind, getattr(name, "kind", type(name).__name__))
        self.vars[name] = value

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-set a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.set(k, v)

    def copy(self) -> Environment:
        """Return an independent environment holding the same bindings.

        Values are immutable, so copying the mapping is enough.
        """
        clone = Environment()
        clone.vars = dict(self.vars)
        return clone

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(sorted(self.vars))

    def __eq__(self, other) -> bool:
        return isinstance(other, Environment) and self.vars == other.vars

    __hash__ = None

    def __str__(self) -> str:
        """One binding per line, sorted by name, names right-aligned."""
        names = sorted(self.vars)
        width = max((len(n.name) for n in names), default=0)
        return "\n".join(f"{n.name:>{width}} -> {self.vars[n]}" for n in names)

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"
