"""String helpers: length, search, comparison, slicing, joining and splitting.

Positions are returned as indices, with None where nothing is found. Searching
for the NUL character finds the end of the text, so it returns ``len(text)``.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _as_char(c: Char) -> str:
    """Return ``c`` as a one-character string; ints are code points."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int code point")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError("expected a one-character string or an int code point")


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative")


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``text``; NUL gives ``len(text)``; None if absent."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``text``; NUL gives ``len(text)``; None if absent."""
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when the compared parts are equal, otherwise the code-point
    difference of the first pair that differs. The end of a string counts
    as a zero character, so a prefix compares lower.
    """
    _check_size(n, "n")
    for a, b in zip(first[:n].ljust(n, _NUL), second[:n].ljust(n, _NUL)):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0; otherwise None when absent.
    """
    _check_size(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def split(text: str, delimiter: Char) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces."""
    delim = _as_char(delimiter)
    if delim == _NUL:
        return [text] if text else []
    return [piece for piece in text.split(delim) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> Optional[MutableSequence[str]]:
    """Call ``func(index, char)`` on each element of ``chars``.

    A non-None result replaces the element in place. Returns ``chars``;
    nothing happens when either argument is None.
    """
    if chars is None or func is None:
        return chars
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the resulting destination text and ``len(src)``. With a size of
    0 the destination is left as it was.
    """
    _check_size(size, "size")
    if size == 0:
        return dest, len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting destination text and the length the full
    concatenation would have needed. When ``dest`` already fills the
    buffer nothing is appended and ``size + len(src)`` is returned.
    """
    _check_size(size, "size")
    dest_len = min(len(dest), size)
    if dest_len == size:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)