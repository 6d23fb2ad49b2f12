"""
Guessing Game - Terminal number-guessing session.

One run of the program is one session:
- A secret target is drawn once from an inclusive range
- Guesses are read line by line and validated
- Each accepted guess is compared and reported
- The session ends on a correct guess or when input runs out
"""

from .config import GameConfig
from .errors import (
    GuessingGameError,
    InputError,
    InputExhaustedError,
    InputReadError,
    SessionClosedError,
    ConfigError,
)
from .session import GuessSession, Outcome, SessionState, GuessResult

__version__ = "0.1.0"

__all__ = [
    "GameConfig",
    "GuessSession",
    "Outcome",
    "SessionState",
    "GuessResult",
    "GuessingGameError",
    "InputError",
    "InputExhaustedError",
    "InputReadError",
    "SessionClosedError",
    "ConfigError",
]
