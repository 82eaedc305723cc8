"""Shared pytest configuration.

The database URL is pinned to in-memory SQLite before any SmartRecipe module
is imported, so the engine is never bound to a real server during tests.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_TIMEZONE"] = "Asia/Kolkata"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402


class StubRandom:
    """randrange() source that always picks the lowest or highest index and records each draw."""

    def __init__(self, pick="low"):
        self.pick = pick
        self.draws = []

    def randrange(self, n):
        self.draws.append(n)
        return 0 if self.pick == "low" else n - 1


@pytest.fixture
def low_rng():
    return StubRandom("low")


@pytest.fixture
def high_rng():
    return StubRandom("high")
