import pytest

from asa.interpreter import Interpreter
from asa.types import Runtime


@pytest.fixture
def interp():
    """Interpreter with a fresh runtime."""
    return Interpreter()


@pytest.fixture
def runtime():
    """Runtime with one frame pushed, for evaluating nodes by hand."""
    rt = Runtime()
    rt.stack.push()
    return rt
