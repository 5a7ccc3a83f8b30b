"""Byte-buffer operations: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_count(n: int, *buffers: Bytes) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value & 0xFF``; return it."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``; return it."""
    return memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the product would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count > 0 and size > SIZE_MAX // count:
        raise OverflowError("requested size overflows")
    return bytearray(count * size)


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value & 0xFF`` within ``n`` bytes, or None."""
    _check_count(n, data)
    target = value & 0xFF
    return next((i for i, byte in enumerate(bytes(data[:n])) if byte == target), None)


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Compare ``n`` bytes as unsigned values.

    Returns 0 when equal, otherwise the difference of the first pair that differs.
    """
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(n, dest, src)
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if max(dest, src) + n > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    if n and dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer