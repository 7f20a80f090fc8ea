"""Byte-buffer filling, copying, searching and comparison with C-library semantics.

Buffers are ``bytearray`` objects (or other mutable byte sequences). Byte
values given as integers are reduced to their low eight bits, as in C. A
count that reaches past the end of a buffer raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _count(n: int, *lengths: int) -> int:
    """Check that ``n`` is a valid byte count for buffers of the given lengths."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"byte count must be an integer, not {type(n).__name__}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")
    return n


def _byte(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"byte value must be an integer, not {type(c).__name__}")
    return c & 0xFF


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``c`` and return ``buffer``."""
    _count(n, len(buffer))
    buffer[:n] = bytes([_byte(c)]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were first
    copied aside. Returns ``buffer``.
    """
    _count(n)
    for name, offset in (("dest", dest), ("src", src)):
        if offset < 0:
            raise ValueError(f"{name} offset must not be negative, got {offset}")
        if offset + n > len(buffer):
            raise ValueError(f"{name} region [{offset}, {offset + n}) lies outside the buffer")
    if dest == src or n == 0:
        return buffer
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes, or ``None``."""
    _count(n, len(data))
    index = bytes(data[:n]).find(_byte(c))
    return None if index == -1 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; the difference of the first unequal pair, or 0."""
    _count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total size would not fit in a 64-bit
    size.
    """
    _count(count)
    _count(size)
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the maximum allocation size")
    return bytearray(count * size)