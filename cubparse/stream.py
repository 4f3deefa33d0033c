"""Character and line reading over the contents of a scene file."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

_WHITESPACE = (" ", "\t", "\n", "\v", "\f", "\r")


class ParseError(Exception):
    """Raised when a scene description is malformed.

    ``partial`` holds whatever had been parsed before the failure, if known.
    """

    def __init__(self, message: str, partial: object = None) -> None:
        super().__init__(message)
        self.message = message
        self.partial = partial


class CharStream:
    """A forward-only reader that hands out single characters or whole lines."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @classmethod
    def from_path(cls, path: str | Path) -> CharStream:
        """Load a stream from a file; raises OSError if it cannot be read."""
        with open(path, encoding="latin-1", newline="") as handle:
            return cls(handle.read())

    def read_char(self) -> str:
        """Return the next character, or an empty string at end of input."""
        if self._pos >= len(self._text):
            return ""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def skip_whitespace(self) -> str:
        """Consume whitespace and return the first other character (consumed too)."""
        ch = self.read_char()
        while ch in _WHITESPACE:
            ch = self.read_char()
        return ch

    def read_line(self) -> str | None:
        """Return the next line with its newline, or None at end of input."""
        if self._pos >= len(self._text):
            return None
        end = self._text.find("\n", self._pos)
        end = len(self._text) if end == -1 else end + 1
        line = self._text[self._pos:end]
        self._pos = end
        return line

    def lines(self) -> Iterator[str]:
        """Yield the remaining lines until the input is exhausted."""
        while (line := self.read_line()) is not None:
            yield line