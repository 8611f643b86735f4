"""Native callables wrapped as first-class values."""

from __future__ import annotations

from typing import Sequence

from shallot import NativeFn
from shallot.types.atom import Atom


class _Builtin(Atom):
    __slots__ = ("name", "function")

    def __init__(self, name: str, function: NativeFn):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "function", function)

    # Two builtins are the same value when they have the same name; code is never compared
    def __eq__(self, other) -> bool:
        return type(other) is type(self) and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.kind, self.name))

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"

    def __str__(self):
        return f"«{self.kind} {self.name}»"


class BuiltinFunction(_Builtin):
    """A native function: arguments are evaluated before it sees them."""

    __slots__ = ()
    kind = "builtin function"

    def call(self, arguments: Sequence[Atom], env) -> Atom:
        from shallot.evaluation.apply import apply_builtin_function
        return apply_builtin_function(self, arguments, env)


class BuiltinMacro(_Builtin):
    """A native macro: receives its argument expressions unevaluated."""

    __slots__ = ()
    kind = "builtin macro"

    def call(self, arguments: Sequence[Atom], env) -> Atom:
        from shallot.evaluation.apply import apply_builtin_macro
        return apply_builtin_macro(self, arguments, env)
