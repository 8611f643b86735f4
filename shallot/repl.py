"""
Command-line front end for Shallot.

    shallot [-i] [PATH]

With PATH, the file (or stdin for "-") is evaluated and its result printed.
With -i, or when no PATH is given, an interactive loop follows: each line is
one expression, `#env` lists the current bindings, and end of input exits.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from shallot import config
from shallot.debug_utils.pprint import DEFAULT_OPTIONS, pprint_environment, pprint_expr
from shallot.errors import ShallotError
from shallot.interpreter import Interpreter

logger = logging.getLogger(__name__)

PROMPT = "🧅 "
ENV_COMMAND = "#env"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shallot", description="Evaluate Shallot programs.")
    parser.add_argument("path", nargs="?", help='source file to evaluate, "-" for stdin')
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="start the REPL (after running PATH, if given)"
    )
    return parser


def read_source(path: str, stdin: TextIO) -> str:
    if path == "-":
        return stdin.read()
    return Path(path).read_text(encoding="utf-8")


class Repl:
    """The read-eval-print loop around one Interpreter."""

    def __init__(
        self,
        interp: Interpreter,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        options: dict | None = None,
    ):
        self.interp = interp
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.options = options if options is not None else {**DEFAULT_OPTIONS, "color": config.use_color(self.stdout)}

    def write(self, text: str) -> None:
        print(text, file=self.stdout)

    def handle(self, line: str) -> None:
        if line.strip() == ENV_COMMAND:
            self.write(pprint_environment(self.interp.env, self.options))
            return
        try:
            result = self.interp.evaluate(line.strip())
        except ShallotError as err:
            self.write(err.derivation())
        except RecursionError:
            self.write("recursion too deep while evaluating input")
        else:
            self.write(pprint_expr(result, 0, self.options))

    def run(self) -> None:
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            if line.isspace():
                continue
            self.handle(line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    try:
        interp = Interpreter()
    except OSError as err:
        print(f"could not load prelude: {err}", file=sys.stderr)
        return 1
    except ShallotError as err:
        print(err.derivation(), file=sys.stderr)
        return 1
    repl = Repl(interp)

    if args.path is not None:
        logger.debug("evaluating %s", args.path)
        try:
            source = read_source(args.path, sys.stdin)
            result = interp.eval(source)
        except OSError as err:
            print(f"could not read from {args.path}: {err}", file=sys.stderr)
            return 1
        except ShallotError as err:
            print(err.derivation(), file=sys.stderr)
            return 1
        repl.write(pprint_expr(result, 0, repl.options))

    if args.interactive or args.path is None:
        repl.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
