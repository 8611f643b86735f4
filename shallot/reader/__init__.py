from shallot.reader.lexer import Token, lex, tokenize
from shallot.reader.parser import TokenStream, parse, QUOTE

__all__ = ["Token", "lex", "tokenize", "TokenStream", "parse", "QUOTE"]
