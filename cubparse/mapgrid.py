"""Reading and validating the grid that follows the header elements."""

from __future__ import annotations

from itertools import dropwhile

from .stream import CharStream, ParseError

MAP_CHARS = "10NWES \n"
PLAYER_CHARS = "NWES"
_SOLID = "\n 1"


def is_blank(line: str) -> bool:
    """True if the line holds only spaces and tabs before its end or newline."""
    rest = line.lstrip(" \t")
    return rest == "" or rest.startswith("\n")


def check_map(lines: list[str]) -> int:
    """Check the characters of the grid and return the length of its last line."""
    if not lines:
        raise ParseError("no map")
    for line in lines:
        if any(ch not in MAP_CHARS for ch in line):
            raise ParseError("forbidden character in map")
    return len(lines[-1])


def pad_lines(lines: list[str], width: int) -> list[str]:
    """Pad every line whose length differs from width with spaces, ending in a newline."""
    return [
        line if len(line) == width else line.split("\n", 1)[0].ljust(width - 1) + "\n"
        for line in lines
    ]


def _cell(lines: list[str], i: int, j: int) -> str:
    if 0 <= i < len(lines) and 0 <= j < len(lines[i]):
        return lines[i][j]
    return ""


def _at_wall(lines: list[str], i: int, j: int) -> bool:
    if i == 0 or j == 0:
        return True
    if i + 1 >= len(lines) or _cell(lines, i, j + 1) == "\n":
        return True
    neighbours = ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1))
    return any(_cell(lines, y, x) in (" ", "") for y, x in neighbours)


def validate_map(lines: list[str]) -> None:
    """Require exactly one player and walls around every open cell."""
    players = 0
    for i, line in enumerate(lines):
        for j, ch in enumerate(line):
            if ch in PLAYER_CHARS:
                players += 1
            if players > 1:
                raise ParseError("multiple players")
            if ch not in _SOLID and _at_wall(lines, i, j):
                raise ParseError("missing wall at map edge")
    if not players:
        raise ParseError("no player")


def read_map(stream: CharStream) -> list[str]:
    """Read the remaining lines as a grid, skipping leading blank lines, and validate it."""
    lines = list(dropwhile(is_blank, stream.lines()))
    width = check_map(lines)
    grid = pad_lines(lines, width)
    validate_map(grid)
    return grid