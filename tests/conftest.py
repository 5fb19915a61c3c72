import pytest

from blisp.builtin.env_builtin import create_base_env
from blisp.diagnostics import CollectingSink
from blisp.runtime_context import set_diagnostics


# Every test gets its own collecting diagnostic sink so reported errors can be
# asserted on without leaking between tests.
@pytest.fixture(autouse=True)
def diagnostics():
    sink = CollectingSink()
    previous = set_diagnostics(sink)
    yield sink
    set_diagnostics(previous)


@pytest.fixture
def env():
    """Fresh base environment with nil and the arithmetic builtins."""
    return create_base_env()
