"""Reading whitespace-separated tokens from a text stream."""

from __future__ import annotations

import re
from typing import TextIO

_WORD = re.compile(r"\S+")
_INT = re.compile(r"[+-]?\d+")
_REAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class EndOfInput(EOFError):
    """The stream ended before a token could be read."""


class InputError(ValueError):
    """The next token does not have the expected form."""


class TokenReader:
    """Reads words, numbers and single characters from a text stream.

    Leading whitespace, newlines included, is skipped before every token.
    A token that cannot be parsed raises InputError and is left unread.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._line = ""
        self._pos = 0
        self._eof = False

    def _available(self) -> bool:
        while self._pos >= len(self._line):
            if self._eof:
                return False
            self._line = self._stream.readline()
            self._pos = 0
            if not self._line:
                self._eof = True
                return False
        return True

    def _skip_space(self) -> None:
        while self._available():
            rest = self._line[self._pos:]
            stripped = rest.lstrip()
            self._pos += len(rest) - len(stripped)
            if stripped:
                return
        raise EndOfInput("unexpected end of input")

    def _match(self, pattern: re.Pattern[str], what: str) -> str:
        self._skip_space()
        found = pattern.match(self._line, self._pos)
        if found is None:
            token = _WORD.match(self._line, self._pos)
            shown = token.group() if token else ""
            raise InputError(f"expected {what}, got {shown!r}")
        self._pos = found.end()
        return found.group()

    def word(self) -> str:
        """Return the next run of non-whitespace characters."""
        return self._match(_WORD, "a word")

    def integer(self) -> int:
        """Return the next integer; it must fit in 32 signed bits."""
        value = int(self._match(_INT, "an integer"))
        if not _INT_MIN <= value <= _INT_MAX:
            raise InputError(f"integer out of range: {value}")
        return value

    def real(self) -> float:
        """Return the next decimal number."""
        return float(self._match(_REAL, "a number"))

    def char(self) -> str:
        """Return the next non-whitespace character."""
        self._skip_space()
        ch = self._line[self._pos]
        self._pos += 1
        return ch

    def discard_line(self) -> None:
        """Drop everything up to and including the next newline."""
        if self._available():
            self._pos = len(self._line)