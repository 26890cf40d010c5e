import pytest

from fakes import FixedClock


@pytest.fixture
def clock():
    return FixedClock()
