import pytest

from pcapblocks import strictness


@pytest.fixture(autouse=True)
def restore_strictness():
    level = strictness.get_strictness()
    yield
    strictness.set_strictness(level)
