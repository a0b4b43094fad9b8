"""Shared fixtures for the test suite."""

import pytest

from app.repositories.common import CacheStore, InMemoryKeyValueStore

NOW = 1_718_445_600.0  # 2024-06-15 10:00 UTC


class FakeClock:
    """Settable epoch-seconds clock."""

    def __init__(self, now: float = NOW):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def cache(store, clock):
    return CacheStore(store, clock=clock)
