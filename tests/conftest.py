"""Pytest configuration for crudcache tests."""

import pytest

from crudcache import CacheConfig, InMemoryCacheBackend, RemoteCache


class FakeClock:
    """Manually advanced clock for expiring in-memory entries."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def memory_backend(clock: FakeClock) -> InMemoryCacheBackend:
    """Create an in-memory backend driven by the fake clock."""
    return InMemoryCacheBackend(maxsize=100, timer=clock)


@pytest.fixture
def cache(memory_backend: InMemoryCacheBackend) -> RemoteCache:
    """Create a prefixed cache over the in-memory backend."""
    return RemoteCache(memory_backend, CacheConfig(key_prefix="app:"))
