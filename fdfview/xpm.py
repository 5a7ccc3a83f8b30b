"""Reading XPM pixmaps into 32-bit pixel arrays."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from fdfview.chars import atoi
from fdfview.colors import lookup_color
from fdfview.wordtab import find_substring, find_unquoted, split_words

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: pixels are 32-bit values, row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """The pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _blank(text: str, start: int, end: int) -> str:
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    The text keeps its length; a line comment's newline is blanked too, and
    an unterminated comment is blanked to the end of the text.
    """
    while (begin := find_unquoted(text, "/*")) is not None:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end < 0 else end + 2)
    while (begin := find_unquoted(text, "//")) is not None:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end < 0 else end + 1)
    return text


def extract_strings(text: str) -> list[str]:
    """The contents of every double-quoted string in ``text``, in order."""
    found: list[str] = []
    pos = 0
    while True:
        opening = find_substring(text[pos:], '"')
        if opening is None:
            return found
        start = pos + opening + 1
        closing = find_substring(text[start:], '"')
        if closing is None:
            return found
        found.append(text[start:start + closing])
        pos = start + closing + 1


def _wrap_int(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def text_to_rgb(name: str, suffix: Optional[str] = None) -> int:
    """Colour value of an XPM colour spec.

    ``#hex`` is read as a hexadecimal number. Otherwise ``name`` (joined to
    ``suffix`` with a space when given) is looked up among named colours;
    unknown names give 0 and "none" gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        digits = match.group(2) if match else ""
        value = int(digits, 16) if digits else 0
        if match and match.group(1) == "-":
            value = -value
        return _wrap_int(value)
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    values = tuple(atoi(word) for word in words[:4])
    if not all(values):
        raise XpmError(f"invalid header: {line!r}")
    width, height, ncolors, cpp = values
    if min(values) < 0:
        raise XpmError(f"invalid header: {line!r}")
    return width, height, ncolors, cpp


def _color_entry(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], suffix)


def parse_xpm(lines: Sequence[str]) -> XpmImage:
    """Decode XPM string data: header, colour lines, then pixel rows.

    Transparent pixels get the value 0xFF000000; characters with no colour
    definition give 0.
    """
    rows = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError(f"data ends before the {what}") from None

    width, height, ncolors, cpp = _header(next_line("header"))
    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    table: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _color_entry(next_line("colour table end"), cpp)
        if cpp <= 2:
            table[key] = color
        else:
            table.setdefault(key, color)

    pixels: list[int] = []
    for _ in range(height):
        row = next_line("last pixel row")
        for x in range(width):
            color = table.get(row[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def load_xpm(path: Union[str, Path]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(extract_strings(strip_comments(text)))