from shallot.types.atom import Atom, expect
from shallot.types.symbol import Symbol
from shallot.types.number import Number
from shallot.types.lisp_list import List, EMPTY
from shallot.types.environment import Environment
from shallot.types.builtin import BuiltinFunction, BuiltinMacro
from shallot.types.lambda_fn import Lambda, Macro

# Atom kinds that can be read straight from a source token, tried in order.
TOKEN_ATOMS: tuple[type[Atom], ...] = (Number, Symbol)

__all__ = [
    "Atom",
    "expect",
    "Symbol",
    "Number",
    "List",
    "EMPTY",
    "Environment",
    "BuiltinFunction",
    "BuiltinMacro",
    "Lambda",
    "Macro",
    "TOKEN_ATOMS",
]
