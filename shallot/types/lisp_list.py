from __future__ import annotations

from typing import Iterable, Iterator

from shallot.types.atom import Atom


class List(Atom):
    """An ordered, immutable sequence of expressions.

    The empty list is the only falsy value in the language, which is why
    ``bool()`` of a List reflects whether it has elements.
    """

    __slots__ = ("elements",)
    __match_args__ = ("elements",)

    kind = "list"

    def __init__(self, elements: Iterable[Atom] = ()):
        object.__setattr__(self, "elements", tuple(elements))

    def __eq__(self, other) -> bool:
        return isinstance(other, List) and self.elements == other.elements

    def __hash__(self) -> int:
        return hash(self.elements)

    def __bool__(self) -> bool:
        return bool(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Atom]:
        return iter(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    def __repr__(self):
        return f"List({list(self.elements)!r})"

    def __str__(self):
        return "(" + " ".join(str(e) for e in self.elements) + ")"


EMPTY = List()
