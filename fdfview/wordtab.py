"""Substring search, quote-aware search and whitespace word splitting."""

from __future__ import annotations

import re
from typing import Optional

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _check_find(find: str) -> None:
    if not find:
        raise ValueError("search text must not be empty")


def find_substring(text: str, find: str) -> Optional[int]:
    """Index of the first occurrence of ``find`` in ``text``, or None."""
    _check_find(find)
    index = text.find(find)
    return None if index < 0 else index


def find_unquoted(text: str, find: str) -> Optional[int]:
    """Index of the first ``find`` lying outside double-quoted text, or None.

    Each double quote met while scanning toggles the quoted state.
    """
    _check_find(find)
    quoted = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return None


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty pieces."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]