from __future__ import annotations
import logging
from pathlib import Path
from typing import Literal

from shallot import LispValue
from shallot.builtin.env_builtin import register
from shallot.errors import ShallotError, ShallotSyntaxError, error_context
from shallot.evaluation.evaluator import evaluate as evaluate_expr
from shallot.reader.parser import TokenStream
from shallot.types.environment import Environment
from shallot.types.lisp_list import EMPTY

logger = logging.getLogger(__name__)


def evaluate(text: str, env: Environment) -> LispValue:
    """Read exactly one expression from `text` and evaluate it in `env`.

    Raises ShallotError; parse and evaluation failures carry the input as
    their outermost context frame.
    """
    stream = TokenStream.from_source(text)
    with error_context(f"could not parse input `{text}`"):
        expr = stream.parse_expr()
        if not stream.at_end():
            raise ShallotSyntaxError(f"extra tokens in input at {stream.peek().offset}")
    with error_context(f"could not evaluate input `{text}`"):
        return evaluate_expr(expr, env)


class Interpreter:
    """
    Owns a root Environment with the builtins registered, and evaluates
    Shallot source against it. Definitions persist across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude == 'auto':
            from shallot.config import get_prelude_files
            for path in get_prelude_files():
                self.load_file(path)
        elif prelude:
            self.eval(prelude)

    def load_file(self, path: str | Path) -> LispValue:
        """Evaluate every expression in the file at `path`."""
        path = Path(path)
        logger.debug("loading %s", path)
        with error_context(f"while loading {path}"):
            return self.eval(path.read_text(encoding="utf-8"))

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level expression in `code` and return the last result."""
        stream = TokenStream.from_source(code)
        result = EMPTY
        try:
            for expr in stream.parse_all():
                with error_context(f"could not evaluate input `{expr}`"):
                    result = evaluate_expr(expr, self.env)
        except ShallotError as err:
            logger.debug("evaluation failed: %s", err.derivation())
            raise
        return result

    def evaluate(self, text: str) -> LispValue:
        """Evaluate exactly one expression; see `shallot.interpreter.evaluate`."""
        return evaluate(text, self.env)

    def environment_listing(self) -> str:
        return str(self.env)
