from __future__ import annotations
import math

from shallot.types.atom import Atom


class Number(Atom):
    """A 64-bit floating point number."""

    __slots__ = ("value",)
    __match_args__ = ("value",)

    kind = "number"

    def __init__(self, value: float):
        object.__setattr__(self, "value", float(value))

    @classmethod
    def parse_from_token(cls, token) -> Number | None:
        # float() also accepts digit-group underscores, which are not number syntax here
        if "_" in token.text:
            return None
        try:
            return cls(float(token.text))
        except ValueError:
            return None

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __float__(self) -> float:
        return self.value

    def __repr__(self):
        return f"Number({self.value!r})"

    def __str__(self):
        if math.isfinite(self.value) and self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)
