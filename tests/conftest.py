import pytest

from passwordhasher import Hasher, ParameterProfile


@pytest.fixture
def fast_profile():
    return ParameterProfile(memory_cost=1024, iterations=1, parallelism=1)


@pytest.fixture
def hasher(fast_profile):
    return Hasher(fast_profile)
