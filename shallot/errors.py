"""Error taxonomy for Shallot.

Every error is a leaf cause plus a stack of context frames added while it
propagates outward, so a full derivation can be printed by the REPL.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator


class ShallotError(Exception):
    """ Base class for all Shallot errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # innermost first
        self.context: list[str] = []

    def add_context(self, frame: str) -> ShallotError:
        self.context.append(frame)
        return self

    def derivation(self) -> str:
        """Render the outermost frame followed by every cause down to the leaf."""
        chain = [*reversed(self.context), self.message]
        if len(chain) == 1:
            return self.message
        with StringIO() as buffer:
            buffer.write(chain[0])
            buffer.write("\n\nCaused by:")
            for number, cause in enumerate(chain[1:]):
                buffer.write(f"\n    {number}: {cause}")
            return buffer.getvalue()

    def __str__(self) -> str:
        return self.context[-1] if self.context else self.message


class ShallotSyntaxError(ShallotError):
    """ Raised when the token stream does not form an expression"""


class ShallotTypeError(ShallotError):
    """ Raised when an atom is accessed as a kind it does not match"""

    def __init__(self, expected: str, got: str):
        super().__init__(f"type error: expected {expected} and got {got}")
        self.expected = expected
        self.got = got


class ShallotEvalError(ShallotError):
    """ Raised when an expression cannot be evaluated"""


class ShallotUnboundSymbol(ShallotEvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, symbol):
        super().__init__(f"variable `{symbol}` unbound")
        self.symbol = symbol


class ShallotArityError(ShallotEvalError):
    """ Raised when the number of arguments passed to a callable is incorrect"""


class ShallotNotCallable(ShallotEvalError):
    """ Raised when the head of a list evaluates to something that cannot be called"""

    def __init__(self, kind: str):
        super().__init__(f"cannot call {kind} as a function")
        self.kind = kind


@contextmanager
def error_context(frame: str) -> Iterator[None]:
    """Append `frame` to any ShallotError escaping the block."""
    try:
        yield
    except ShallotError as err:
        err.add_context(frame)
        raise
