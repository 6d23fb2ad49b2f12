"""
Session Module - A single-player guessing session.

A session owns the secret target for its whole lifetime. Nothing is
shared between sessions and nothing outlives one.
"""

from .guess_session import (
    GuessSession,
    GuessResult,
    Outcome,
    SessionState,
    RandomSource,
    compare,
    parse_guess,
)
from .line_source import LineSource, StreamLineSource, IterableLineSource

__all__ = [
    "GuessSession",
    "GuessResult",
    "Outcome",
    "SessionState",
    "RandomSource",
    "compare",
    "parse_guess",
    "LineSource",
    "StreamLineSource",
    "IterableLineSource",
]
