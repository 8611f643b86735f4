import pytest

from shallot.builtin.env_builtin import register
from shallot.interpreter import Interpreter
from shallot.types import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp(monkeypatch):
    """Interpreter with no prelude, isolated from SHALLOT_PRELUDE_PATH."""
    monkeypatch.delenv("SHALLOT_PRELUDE_PATH", raising=False)
    return Interpreter(prelude=None)
