"""
Line sources - where guesses come from.

A line source hands the session one line of text per call and blocks
until it has one. It signals the two ways input can stop:
- end-of-stream -> InputExhaustedError
- transport failure -> InputReadError

The session treats both as fatal.
"""

from __future__ import annotations
import sys
from typing import Iterable, Iterator, Protocol, TextIO, Optional

from ..errors import InputExhaustedError, InputReadError


class LineSource(Protocol):
    """Anything that can supply successive lines of text."""

    def read_line(self) -> str:
        ...


class StreamLineSource:
    """
    Reads lines from a text stream (stdin by default).

    readline() returning an empty string is end-of-stream; a blank line
    typed by the user still carries its line terminator.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self) -> str:
        try:
            line = self.stream.readline()
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise InputReadError(
                f"Failed to read line: {e}",
                cause=e,
                details={"stream": getattr(self.stream, "name", repr(self.stream))},
            ) from e

        if line == "":
            raise InputExhaustedError("Failed to read line: end of input")
        return line


class IterableLineSource:
    """Feeds a fixed sequence of lines, then reports end-of-stream."""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self.lines_read = 0

    def read_line(self) -> str:
        try:
            line = next(self._lines)
        except StopIteration:
            raise InputExhaustedError(
                "Failed to read line: end of input",
                details={"lines_read": self.lines_read},
            ) from None
        self.lines_read += 1
        return line
