"""Whitespace-separated token reader for interactive input.

Tokens may be split across lines or share one line, so ``10 + 5``,
``10+5`` and one token per line are all read the same way. Every read
returns a :class:`ReadResult` instead of raising.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)

INVALID_NUMBER_MESSAGE = "Invalid number input"
END_OF_INPUT_MESSAGE = "Unexpected end of input"
INVALID_ENCODING_MESSAGE = "Invalid input encoding"

# Whitespace skipped between tokens; other Unicode spaces are token text
TOKEN_SEPARATORS = " \t\n\r\v\f"

# Longest decimal literal at the start of the buffer
NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ReadResult:
    """Outcome of a single read: a value, or an error message."""

    value: float | str | None = None
    error: str = ""

    @classmethod
    def success(cls, value: float | str) -> ReadResult:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> ReadResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return not self.error


class InputScanner:
    """
    Read numbers and operator characters from a text stream.

    Lines are pulled from the stream only when the buffered text runs
    out, so prompts written between reads appear before the user types.

    Example:
        >>> import io
        >>> scanner = InputScanner(io.StringIO("10 +\\n5\\n"))
        >>> scanner.read_number().value, scanner.read_operator().value
        (10.0, '+')
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _skip_whitespace(self) -> str:
        """Drop leading whitespace. Returns an error message, or "" once a token is buffered."""
        while True:
            self._buffer = self._buffer.lstrip(TOKEN_SEPARATORS)
            if self._buffer:
                return ""
            try:
                line = self._stream.readline()
            except UnicodeDecodeError as e:
                logger.debug("Undecodable input: %s", e)
                return INVALID_ENCODING_MESSAGE
            if not line:
                return END_OF_INPUT_MESSAGE
            self._buffer = line

    def read_number(self) -> ReadResult:
        """
        Read the next floating-point operand.

        Returns:
            A successful ReadResult holding a float, or a failed one if the
            next token does not start with a number, input is exhausted or
            cannot be decoded.
            Nothing is consumed on failure.
        """
        error = self._skip_whitespace()
        if error:
            return ReadResult.failure(error)

        match = NUMBER_PATTERN.match(self._buffer)
        if match is None:
            logger.debug("No number at start of %r", self._buffer.rstrip("\n"))
            return ReadResult.failure(INVALID_NUMBER_MESSAGE)

        self._buffer = self._buffer[match.end() :]
        return ReadResult.success(float(match.group()))

    def read_operator(self) -> ReadResult:
        """Read the next non-whitespace character."""
        error = self._skip_whitespace()
        if error:
            return ReadResult.failure(error)

        operator, self._buffer = self._buffer[0], self._buffer[1:]
        return ReadResult.success(operator)
