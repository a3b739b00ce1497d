"""Reading ``.ber`` map files into a rectangular grid of rows."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator


class MapFileError(Exception):
    """Raised when a map file cannot be opened or holds no map."""


def read_lines(path: str | os.PathLike[str]) -> Iterator[str]:
    """Yield the lines of ``path``, each keeping its trailing newline.

    Only ``\\n`` separates lines; every other byte is kept as one character.
    """
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise MapFileError("ERROR OPENING MAP FILE") from exc
    text = data.decode("latin-1")
    *full, last = text.split("\n")
    for piece in full:
        yield piece + "\n"
    if last:
        yield last


def map_dimensions(lines: Iterable[str]) -> tuple[int, int]:
    """Return ``(width, height)``: the longest line and the line count."""
    width = 0
    height = 0
    for line in lines:
        width = max(width, len(line.rstrip("\n")))
        height += 1
    if width <= 0 or height <= 0:
        raise MapFileError("Failed to read map file")
    return width, height


def read_grid(path: str | os.PathLike[str]) -> list[str]:
    """Read ``path`` into rows all padded with spaces to the map width."""
    lines = list(read_lines(path))
    width, _height = map_dimensions(lines)
    return [line.rstrip("\n")[:width].ljust(width) for line in lines]