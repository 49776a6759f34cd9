"""
Shared fixtures for the federal workday calculator tests.
"""

import pytest

from federal_workdays.core.cache import ObservanceCache, reset_default_cache


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def fresh_default_cache():
    """Start every test with an empty process-wide cache."""
    reset_default_cache()
    yield
    reset_default_cache()


@pytest.fixture
def clock():
    """Create a FakeClock starting at 0."""
    return FakeClock()


@pytest.fixture
def cache(clock):
    """Create an ObservanceCache driven by the fake clock."""
    return ObservanceCache(clock=clock)
