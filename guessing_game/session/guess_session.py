"""
Guess Session - One complete game from secret draw to correct guess.

The loop:
1. Prompt for a guess
2. Block on the line source for one line
3. Trim and parse the line as an unsigned integer
4. Malformed line -> discard silently, back to 1
5. Compare guess with target, report the outcome
6. Correct -> session finished; otherwise back to 1

End-of-input or a read failure ends the session abnormally.
There is no limit on attempts: the loop is the retry mechanism.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, TextIO
import logging
import random
import re
import sys

from ..config import GameConfig, MAX_VALUE
from ..errors import InputError, SessionClosedError
from .line_source import LineSource


logger = logging.getLogger("guessing_game.session")

_GUESS_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_DIGITS = len(str(MAX_VALUE))


class Outcome(str, Enum):
    """Result of comparing one guess with the target."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"

    @property
    def message(self) -> str:
        return _OUTCOME_MESSAGES[self]


_OUTCOME_MESSAGES = {
    Outcome.TOO_LOW: "Too small!",
    Outcome.TOO_HIGH: "Too big!",
    Outcome.CORRECT: "You win!",
}


class SessionState(Enum):
    """Lifecycle of a session."""
    ACTIVE = "active"  # Waiting for guesses
    FINISHED = "finished"  # Correct guess made
    FAILED = "failed"  # Input ran out or broke


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from a closed range."""

    def randint(self, a: int, b: int) -> int:
        ...


@dataclass
class GuessResult:
    """
    Result of feeding one raw line to the session.

    A malformed line produces a result with no guess and no outcome;
    the session state is unchanged.
    """
    raw: str
    state: SessionState
    attempt: int

    guess: int | None = None
    outcome: Outcome | None = None

    @property
    def accepted(self) -> bool:
        return self.guess is not None

    @property
    def is_correct(self) -> bool:
        return self.outcome is Outcome.CORRECT


def parse_guess(raw: str) -> int | None:
    """
    Parse one line of input as a guess.

    Surrounding whitespace and line terminators are ignored. Accepts
    ASCII decimal digits with an optional leading '+', and the value
    must fit in an unsigned 32-bit integer. Returns None for anything
    else.
    """
    text = raw.strip()
    if not _GUESS_PATTERN.fullmatch(text):
        return None

    digits = text.lstrip("+").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return None

    value = int(digits)
    if value > MAX_VALUE:
        return None
    return value


def compare(guess: int, target: int) -> Outcome:
    """Three-way comparison of a guess against the target."""
    if guess < target:
        return Outcome.TOO_LOW
    if guess > target:
        return Outcome.TOO_HIGH
    return Outcome.CORRECT


class GuessSession:
    """
    Drives one guessing game.

    Usage:
        session = GuessSession()
        session.run(StreamLineSource())

    Or step by step:
        session = GuessSession(rng=random.Random(7))
        result = session.submit("50")
        if result.is_correct:
            ...
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        config: Optional[GameConfig] = None,
        output: Optional[TextIO] = None,
    ):
        self.config = config or GameConfig()
        self.output = output if output is not None else sys.stdout
        self.state = SessionState.ACTIVE
        self.attempts = 0
        self.history: list[tuple[int, Outcome]] = []

        rng = rng if rng is not None else random.Random()
        self._target = rng.randint(self.config.low, self.config.high)
        logger.debug(
            f"Target drawn from [{self.config.low}, {self.config.high}]: {self._target}"
        )

    @property
    def target(self) -> int:
        return self._target

    @property
    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def submit(self, raw: str) -> GuessResult:
        """
        Process one raw line of input.

        Malformed input is dropped without output. A parsed guess is
        echoed, compared, and its outcome reported; a correct guess
        finishes the session.
        """
        if not self.is_active:
            raise SessionClosedError(
                f"Session is {self.state.value}, no more guesses accepted",
                state=self.state.value,
            )

        guess = parse_guess(raw)
        if guess is None:
            logger.debug(f"Discarding malformed guess: {raw!r}")
            return GuessResult(raw=raw, state=self.state, attempt=self.attempts)

        self.attempts += 1
        outcome = compare(guess, self._target)
        self.history.append((guess, outcome))

        self._emit(f"You guessed: {guess}")
        self._emit(outcome.message)

        if outcome is Outcome.CORRECT:
            self.state = SessionState.FINISHED
            logger.info(f"Session finished after {self.attempts} guess(es)")

        return GuessResult(
            raw=raw,
            state=self.state,
            attempt=self.attempts,
            guess=guess,
            outcome=outcome,
        )

    def run(self, source: LineSource) -> int:
        """
        Run the blocking loop until the target is guessed.

        Args:
            source: Where lines come from

        Returns:
            Number of accepted guesses

        Raises:
            InputExhaustedError: Input ended before a correct guess
            InputReadError: Reading input failed
        """
        if self.config.reveal_secret:
            self._emit(f"The secret number is {self._target}")

        while self.is_active:
            self._emit(self.config.prompt)
            try:
                raw = source.read_line()
            except InputError as e:
                self.state = SessionState.FAILED
                logger.error(f"Session aborted after {self.attempts} guess(es): {e}")
                raise
            self.submit(raw)

        return self.attempts

    def _emit(self, line: str):
        print(line, file=self.output)
