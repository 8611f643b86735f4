import io
import logging

import pytest

from shallot import config
from shallot.repl import PROMPT, Repl, build_parser, main


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.setenv("SHALLOT_COLOR", "never")
    monkeypatch.delenv("SHALLOT_PRELUDE_PATH", raising=False)


def _session(interp, text):
    stdout = io.StringIO()
    Repl(interp, stdin=io.StringIO(text), stdout=stdout).run()
    return stdout.getvalue()


def test_repl_prints_results(interp):
    out = _session(interp, "(+ 1 2)\n(define f (λ (a b) (+ a b)))\n(f 1)\n")
    assert out.split(PROMPT)[1:] == [
        "3\n",
        "(λ (a b) (+ a b))\n",
        "(λ (b) (+ a b))\n",
        "",
    ]


def test_repl_skips_blank_lines(interp):
    out = _session(interp, "\n   \n1\n")
    assert out == PROMPT * 3 + "1\n" + PROMPT


def test_repl_reports_errors_and_continues(interp):
    out = _session(interp, "(nope)\n(+ 1 1)\n")
    assert "variable `nope` unbound" in out
    assert "Caused by:" in out
    assert out.endswith("2\n" + PROMPT)


def test_repl_env_command(interp):
    out = _session(interp, "(define zz 1)\n#env\n")
    assert str(interp.env) in out
    assert "zz -> 1" in out


def test_repl_reports_runaway_recursion(interp):
    interp.eval("(define loop (λ (self) (self self)))")
    out = _session(interp, "(loop loop)\n")
    assert "recursion too deep" in out


def test_parser_arguments():
    args = build_parser().parse_args(["-i", "prog.shl"])
    assert args.interactive and args.path == "prog.shl"
    args = build_parser().parse_args([])
    assert not args.interactive and args.path is None


def test_main_runs_a_file(tmp_path, capsys):
    program = tmp_path / "prog.shl"
    program.write_text("(define sq (λ (x) (* x x)))\n(sq 12)\n")
    assert main([str(program)]) == 0
    assert capsys.readouterr().out == "144\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(list 1 2)"))
    assert main(["-"]) == 0
    assert capsys.readouterr().out == "(1 2)\n"


def test_main_reports_failures(tmp_path, capsys):
    program = tmp_path / "bad.shl"
    program.write_text("(+ 1 nope)")
    assert main([str(program)]) == 1
    assert "variable `nope` unbound" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.shl")]) == 1
    assert "could not read from" in capsys.readouterr().err


def test_main_interactive_after_file(tmp_path, monkeypatch, capsys):
    program = tmp_path / "prog.shl"
    program.write_text("(define x 5)")
    monkeypatch.setattr("sys.stdin", io.StringIO("(+ x 1)\n"))
    assert main(["-i", str(program)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("5\n")
    assert "6\n" in out


@pytest.mark.parametrize(
    "value,expected",
    [("debug", logging.DEBUG), ("ERROR", logging.ERROR), ("bogus", logging.WARNING)],
)
def test_log_level_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv("SHALLOT_LOG_LEVEL", value)
    assert config.get_log_level() == expected


@pytest.mark.parametrize(
    "mode,expected",
    [("always", True), ("never", False), ("auto", False), ("rainbow", False)],
)
def test_color_mode(monkeypatch, mode, expected):
    monkeypatch.setenv("SHALLOT_COLOR", mode)
    # StringIO is not a terminal, so auto means no color
    assert config.use_color(io.StringIO()) is expected
