import pytest

from fakes import CountingLimiter


@pytest.fixture
def limiter():
    return CountingLimiter()
