"""Height maps read from text grids of whitespace-separated integers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from fdfview.chars import atoi
from fdfview.linereader import read_lines
from fdfview.strings import split

PathLike = Union[str, "os.PathLike[str]"]


class MapError(Exception):
    """Raised when a map file cannot be read."""


def count_words(text: str, delimiter: str) -> int:
    """Number of words in ``text`` separated by ``delimiter`` or newlines."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    count = 0
    in_word = False
    for ch in text:
        if ch == delimiter or ch == "\n":
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def _read_map_lines(path: PathLike) -> list[str]:
    try:
        return read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(f"cannot read map file {os.fspath(path)!r}") from exc


def get_map_dimensions(path: PathLike) -> tuple[int, int]:
    """Return ``(width, height)``: the widest row's word count and the line count."""
    lines = _read_map_lines(path)
    width = max((count_words(line, " ") for line in lines), default=0)
    return width, len(lines)


def is_valid_file(path: PathLike) -> bool:
    """True when the file at ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


@dataclass
class HeightMap:
    """A grid of heights, ``z_matrix[y][x]``, with its height statistics."""

    width: int
    height: int
    z_matrix: list[list[int]]
    z_min: int = 0
    z_max: int = 0
    z_range: int = 0

    @classmethod
    def allocate(cls, width: int, height: int) -> "HeightMap":
        """A ``width`` by ``height`` map with every height set to 0."""
        if width < 0 or height < 0:
            raise ValueError("map dimensions must not be negative")
        return cls(width, height, [[0] * width for _ in range(height)])

    def load(self, path: PathLike) -> "HeightMap":
        """Fill the grid from the file at ``path`` and return the map.

        Lines past the map's height and numbers past its width are ignored;
        cells a short row does not reach keep their value.
        """
        lines = _read_map_lines(path)
        for row, line in zip(self.z_matrix, lines):
            for x, word in enumerate(split(line, " ")[: self.width]):
                row[x] = atoi(word)
        return self

    def compute_stats(self) -> None:
        """Set ``z_min``, ``z_max`` and ``z_range``; an empty map is left as is."""
        if self.height <= 0 or self.width <= 0:
            return
        values = [value for row in self.z_matrix for value in row]
        self.z_min = min(values)
        self.z_max = max(values)
        self.z_range = self.z_max - self.z_min


def load_map(path: PathLike) -> HeightMap:
    """Measure, allocate, fill and measure the statistics of a map file."""
    width, height = get_map_dimensions(path)
    height_map = HeightMap.allocate(width, height).load(path)
    height_map.compute_stats()
    return height_map