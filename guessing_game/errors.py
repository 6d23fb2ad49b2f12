"""
Exceptions for the guessing game.

Malformed guesses are not errors and never appear here: they are
discarded inside the session loop. Only conditions that end a session
abnormally are modeled as exceptions.
"""

from typing import Optional, Any, Dict


class GuessingGameError(Exception):
    """Base exception for all guessing game errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class InputError(GuessingGameError):
    """Raised when the line source cannot supply another line."""
    pass


class InputExhaustedError(InputError):
    """Raised when the line source reaches end-of-stream."""
    pass


class InputReadError(InputError):
    """Raised when reading from the line source fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.cause = cause


class SessionClosedError(GuessingGameError):
    """Raised when a guess is submitted to a session that already ended."""

    def __init__(self, message: str, state: str):
        super().__init__(message, {"state": state})
        self.state = state


class ConfigError(GuessingGameError):
    """Raised when game configuration is invalid."""
    pass
