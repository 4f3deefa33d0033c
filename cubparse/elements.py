"""Parsing of the six header elements: four textures and two colours."""

from __future__ import annotations

from dataclasses import dataclass

from .colors import Color, read_color
from .stream import CharStream, ParseError

ELEMENT_COUNT = 6

_TEXTURE_FIELDS = {
    ("S", "O"): "south",
    ("N", "O"): "north",
    ("E", "A"): "east",
    ("W", "E"): "west",
}
_COLOR_FIELDS = {"F": "floor", "C": "ceiling"}
_BLANKS = (" ", "\t")
_PATH_END = ("", "\n", " ", "\t")

_INVALID_NAME = "invalid element name"
_MISSING = "missing elements of parsing"


@dataclass
class SceneConfig:
    """Texture paths and colours declared at the top of a scene file."""

    north: str | None = None
    south: str | None = None
    east: str | None = None
    west: str | None = None
    floor: Color | None = None
    ceiling: Color | None = None

    def describe(self) -> str:
        """Summarise the elements that are set, one per line."""
        lines = [
            f"{label} texture :: {path}"
            for label, path in (
                ("south", self.south),
                ("east", self.east),
                ("west", self.west),
                ("north", self.north),
            )
            if path
        ]
        lines.extend(
            f"{label} color : {color}"
            for label, color in (("floor", self.floor), ("ceiling", self.ceiling))
            if color is not None
        )
        return "\n".join(lines)


def _read_texture(first: str, stream: CharStream, config: SceneConfig) -> None:
    field = _TEXTURE_FIELDS.get((first, stream.read_char()))
    if field is None or getattr(config, field) is not None:
        raise ParseError(_INVALID_NAME)
    ch = stream.read_char()
    if ch not in _BLANKS:
        raise ParseError(_INVALID_NAME)
    while ch in _BLANKS:
        ch = stream.read_char()
    chars = []
    while ch not in _PATH_END:
        chars.append(ch)
        ch = stream.read_char()
    if chars:
        setattr(config, field, "".join(chars))


def _read_color(first: str, stream: CharStream, config: SceneConfig) -> None:
    field = _COLOR_FIELDS[first]
    if getattr(config, field) is not None:
        raise ParseError(_INVALID_NAME)
    setattr(config, field, read_color(stream))


def _read_element(first: str, stream: CharStream, config: SceneConfig) -> None:
    if first in ("S", "N", "W", "E"):
        _read_texture(first, stream, config)
    elif first in _COLOR_FIELDS:
        _read_color(first, stream, config)
    else:
        raise ParseError(_INVALID_NAME)


def parse_elements(stream: CharStream) -> SceneConfig:
    """Read the six header elements; on failure the ParseError holds the partial config."""
    config = SceneConfig()
    try:
        for _ in range(ELEMENT_COUNT):
            first = stream.skip_whitespace()
            if first in ("", "1"):
                raise ParseError(_MISSING)
            _read_element(first, stream, config)
    except ParseError as exc:
        raise ParseError(exc.message, config) from None
    return config