"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import Optional, TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character to ``stream``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` to ``stream``; ``None`` writes nothing."""
    if s is None:
        return
    stream.write(s)


def put_endl(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` followed by a newline; ``None`` writes nothing at all."""
    if s is None:
        return
    stream.write(s)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write an integer to ``stream`` in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    stream.write(str(n))