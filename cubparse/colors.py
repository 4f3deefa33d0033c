"""Floor and ceiling colour parsing."""

from __future__ import annotations

from dataclasses import dataclass

from .stream import CharStream, ParseError

_DIGITS = "0123456789"
_MAX_COMPONENT = 255
_INVALID = "invalid color input"


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..255."""

    red: int
    green: int
    blue: int

    def __str__(self) -> str:
        return f"{self.red}.{self.green}.{self.blue}"


def _is_digit(ch: str) -> bool:
    return ch != "" and ch in _DIGITS


def _read_component(stream: CharStream, index: int) -> int:
    ch = stream.read_char()
    if index == 0:
        while ch in (" ", "\t"):
            ch = stream.read_char()
    if not _is_digit(ch):
        raise ParseError(_INVALID)
    value = 0
    while _is_digit(ch):
        value = value * 10 + int(ch)
        if value > _MAX_COMPONENT:
            raise ParseError(_INVALID)
        ch = stream.read_char()
    # The character after the last component is consumed whatever it is.
    if index < 2 and ch != ",":
        raise ParseError(_INVALID)
    return value


def read_color(stream: CharStream) -> Color:
    """Read ``R,G,B`` from the stream, allowing blanks only before the first number."""
    return Color(*(_read_component(stream, index) for index in range(3)))