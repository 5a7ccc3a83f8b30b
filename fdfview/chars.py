"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

# Characters skipped before a number: \t \n \v \f \r and space.
_LEADING_SPACE = frozenset(range(9, 14)) | {32}

_ORD_LOWER_A, _ORD_LOWER_Z = ord("a"), ord("z")
_ORD_UPPER_A, _ORD_UPPER_Z = ord("A"), ord("Z")
_ORD_0, _ORD_9 = ord("0"), ord("9")
_CASE_SHIFT = _ORD_LOWER_A - _ORD_UPPER_A


def _code(c: str | int) -> int:
    """Return the code point of a one-character string or pass an int through."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int code point")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError("expected a one-character string or an int code point")


def isalpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _ORD_LOWER_A <= code <= _ORD_LOWER_Z or _ORD_UPPER_A <= code <= _ORD_UPPER_Z


def isdigit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return _ORD_0 <= _code(c) <= _ORD_9


def isalnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for a code point in the range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def _shift_case(c: str | int, low: int, high: int, delta: int) -> str | int:
    code = _code(c)
    if low <= code <= high:
        code += delta
    return chr(code) if isinstance(c, str) else code


def toupper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; other values come back unchanged, same type."""
    return _shift_case(c, _ORD_LOWER_A, _ORD_LOWER_Z, -_CASE_SHIFT)


def tolower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; other values come back unchanged, same type."""
    return _shift_case(c, _ORD_UPPER_A, _ORD_UPPER_Z, _CASE_SHIFT)


def _wrap_int(value: int) -> int:
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and reading
    stops at the first non-digit. Text without digits gives 0. The result
    wraps around like a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _LEADING_SPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("itoa expects an int")
    return f"{n:d}"