"""
Pytest fixtures for guessing game tests.
"""

import io

import pytest

from ..config import GameConfig
from ..session import GuessSession


class FixedRandom:
    """Random source that always draws the same value and counts draws."""

    def __init__(self, value: int):
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def output() -> io.StringIO:
    """Captured output channel."""
    return io.StringIO()


@pytest.fixture
def fixed_rng():
    """Factory for fixed-value random sources."""
    return FixedRandom


@pytest.fixture
def make_session(output):
    """Factory for sessions with a known target."""

    def _make(target: int = 42, config: GameConfig | None = None) -> GuessSession:
        return GuessSession(rng=FixedRandom(target), config=config, output=output)

    return _make
