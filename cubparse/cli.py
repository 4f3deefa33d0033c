"""Command that parses a scene file and prints what it found."""

from __future__ import annotations

import argparse
import sys

from .elements import SceneConfig, parse_elements
from .mapgrid import read_map
from .stream import CharStream, ParseError

DEFAULT_SCENE = "texte.cub"


def is_cub(name: str) -> bool:
    """True if the file name carries the .cub extension."""
    return name.endswith(".cub")


def _report(exc: ParseError) -> None:
    print("Error", file=sys.stderr)
    print(exc.message)


def _print_summary(config: SceneConfig | None) -> None:
    if config is None:
        return
    summary = config.describe()
    if summary:
        print(summary)


def main(argv: list[str] | None = None) -> int:
    """Parse a scene file, printing its map and elements or the first error."""
    parser = argparse.ArgumentParser(
        prog="cubparse", description="Parse and check a .cub scene file."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_SCENE)
    args = parser.parse_args(argv)

    try:
        stream = CharStream.from_path(args.path)
    except OSError as exc:
        print(f"{args.path}: {exc.strerror}", file=sys.stderr)
        return 0

    try:
        config = parse_elements(stream)
    except ParseError as exc:
        _report(exc)
        _print_summary(exc.partial)
        return 0

    try:
        grid = read_map(stream)
    except ParseError as exc:
        _report(exc)
    else:
        sys.stdout.write("".join(grid))
    _print_summary(config)
    return 0