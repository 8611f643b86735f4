"""
  Shallot reader

Recursive-descent parser over a Token stream:

    expr := atom | "(" expr* ")"

After a list's elements are read, every quote symbol (') in it is spliced
together with the element that follows into a two-element list, so that
(f 'x) reads as (f (' x)) without any dedicated grammar.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from shallot import SExpression
from shallot.errors import ShallotSyntaxError, error_context
from shallot.reader.lexer import Token, tokenize
from shallot.types import TOKEN_ATOMS
from shallot.types.lisp_list import List
from shallot.types.symbol import Symbol

QUOTE = Symbol("'")


def parse_atom(token: Token) -> SExpression:
    """Read a bare token as the first atom kind that accepts it."""
    for kind in TOKEN_ATOMS:
        atom = kind.parse_from_token(token)
        if atom is not None:
            return atom
    raise ShallotSyntaxError(f"unreadable token {token.text!r} at {token.offset}")


def rewrite_quotes(elements: Iterable[SExpression]) -> list[SExpression]:
    """Splice each quote symbol with the following element into (' element)."""
    result = []
    it = iter(elements)
    for expr in it:
        if expr == QUOTE:
            nxt = next(it, None)
            if nxt is None:
                raise ShallotSyntaxError("trailing quote in input")
            result.append(List((expr, nxt)))
        else:
            result.append(expr)
    return result


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    @classmethod
    def from_source(cls, source: str) -> TokenStream:
        return cls(tokenize(source))

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_expr(self) -> SExpression:
        token = self.advance()
        if token is None:
            raise ShallotSyntaxError("ran out of tokens")

        if token.text == ")":
            raise ShallotSyntaxError(f"unexpected close bracket at {token.offset}")

        if token.text == "(":
            items = []
            with error_context(f"while parsing list that began at offset {token.offset}"):
                while True:
                    nxt = self.peek()
                    if nxt is not None and nxt.text == ")":
                        self.advance()
                        break
                    items.append(self.parse_expr())
                return List(rewrite_quotes(items))

        return parse_atom(token)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Iterable[Token] | TokenStream) -> SExpression:
    """Parse one expression from the front of `tokens`."""
    stream = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)
    return stream.parse_expr()
