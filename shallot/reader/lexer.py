"""
  Shallot lexer

Splits source text into Tokens carrying the token text and the character
offset where it starts:

    - ( and ) are always single-character tokens
    - ; at the start of a token begins a comment running to end of line
    - a double-quoted run is one token, including escaped \\" and \\\\
    - anything else is a maximal run of non-whitespace, non-parenthesis characters
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

WORD_RE = re.compile(r"[^\s()]+")
BRACKETS = "()"


@dataclass(frozen=True)
class Token:
    text: str
    offset: int

    @property
    def is_comment(self) -> bool:
        return self.text.startswith(";")


def _read_string(source: str, pos: int) -> tuple[str, int]:
    """Read a double-quoted token starting at `pos`; returns (text, end)."""
    n = len(source)
    chars = ['"']
    pos += 1
    while pos < n:
        c = source[pos]
        if c == "\\":
            if pos + 1 >= n:
                chars.append("\\")
                pos += 1
                continue
            nxt = source[pos + 1]
            # \" and \\ collapse to the escaped character; other pairs are kept
            if nxt in '"\\':
                chars.append(nxt)
            else:
                chars.append("\\" + nxt)
            pos += 2
        elif c == '"':
            chars.append('"')
            pos += 1
            break
        else:
            chars.append(c)
            pos += 1
    return "".join(chars), pos


def lex(source: str, keep_comments: bool = False) -> Iterator[Token]:
    """Token generator over `source`."""
    pos = 0
    n = len(source)
    while pos < n:
        c = source[pos]
        if c.isspace():
            pos += 1
            continue

        start = pos
        if c in BRACKETS:
            pos += 1
            yield Token(c, start)
        elif c == ";":
            end = source.find("\n", pos)
            pos = n if end == -1 else end
            if keep_comments:
                yield Token(source[start:pos], start)
        elif c == '"':
            text, pos = _read_string(source, pos)
            yield Token(text, start)
        else:
            m = WORD_RE.match(source, pos)
            pos = m.end()
            yield Token(m.group(), start)


def tokenize(source: str) -> Iterator[Token]:
    """The token stream the parser consumes: `lex` without comments."""
    return lex(source, keep_comments=False)
