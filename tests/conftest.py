import pytest

from iota.builtin.env_builtin import register
from iota.interpreter import Interpreter
from iota.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with the primitives loaded (no bootstrap library)."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter session with primitives and the bootstrap library."""
    return Interpreter()


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    # Tests that need other settings set them explicitly
    monkeypatch.delenv("IOTA_STRICT_ARITY", raising=False)
    monkeypatch.delenv("IOTA_PRELUDE_PATH", raising=False)
