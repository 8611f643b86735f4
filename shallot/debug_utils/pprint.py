from __future__ import annotations

from shallot import LispValue
from shallot.types.builtin import BuiltinFunction, BuiltinMacro
from shallot.types.environment import Environment
from shallot.types.lambda_fn import Lambda, Macro
from shallot.types.lisp_list import List
from shallot.types.number import Number
from shallot.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[0;32m"
COLOR_NUMBER = "\033[94m"
COLOR_BUILTIN = "\033[95m"
COLOR_LAMBDA = "\033[92m"
COLOR_MACRO = "\033[96m"
COLOR_QUOTE = "\033[93m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "color": True,
}

QUOTE_NAMES = {"'", "quote"}


# ----------------- Colorize utility -----------------
def colorize(obj: LispValue, options: dict = DEFAULT_OPTIONS) -> str:
    """Render a single non-list value, wrapped in its color when enabled."""
    text = str(obj)
    if not options.get("color", True):
        return text
    if isinstance(obj, Symbol):
        color = COLOR_QUOTE if obj.name in QUOTE_NAMES else COLOR_SYMBOL
    elif isinstance(obj, Number):
        color = COLOR_NUMBER
    elif isinstance(obj, (BuiltinFunction, BuiltinMacro)):
        color = COLOR_BUILTIN
    elif isinstance(obj, Lambda):
        color = COLOR_LAMBDA
    elif isinstance(obj, Macro):
        color = COLOR_MACRO
    else:
        return text
    return f"{color}{text}{RESET}"


# ----------------- Pretty printer -----------------
def pprint_expr(expr: LispValue, indent: int = 0, options: dict = DEFAULT_OPTIONS) -> str:
    """Render `expr`, breaking lists that do not fit on one line.

    Wrapped lists put each element after the head on its own line, aligned one
    level deeper than the opening bracket.
    """
    if not isinstance(expr, List):
        return colorize(expr, options)
    if not expr:
        return "()"

    parts = [pprint_expr(e, indent + 1, options) for e in expr]
    plain = str(expr)
    if len(plain) + indent * 2 <= options.get("max_line_length", 80):
        return "(" + " ".join(parts) + ")"

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append("  " * (indent + 1) + part)
    aligned_lines[-1] += ")"
    return "\n".join(aligned_lines)


def pprint_environment(env: Environment, options: dict = DEFAULT_OPTIONS) -> str:
    """The environment listing (sorted, right-aligned names) with colored values."""
    names = list(env)
    width = max((len(n.name) for n in names), default=0)
    return "\n".join(
        f"{' ' * (width - len(n.name))}{colorize(n, options)} -> {pprint_expr(env.get(n), 0, options)}"
        for n in names
    )
