"""String search, comparison, slicing and building with C-library semantics.

Positions are returned as indices into the string, and ``None`` stands for
"not found". Comparisons return the difference between the first pair of
differing code points, with the end of a string counting as code point 0.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _target(c: CharLike) -> str:
    """Turn a character or an integer code into the character searched for."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer, not bool")
    if isinstance(c, int):
        if c >= 256:
            c %= 256
        if c < 0:
            raise ValueError(f"character code must not be negative, got {c}")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer, not {type(c).__name__}")


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    target = _target(c)
    index = s.find(target)
    if index != -1:
        return index
    return len(s) if target == _NUL else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for the NUL character finds the end of the string.
    """
    target = _target(c)
    if target == _NUL:
        return len(s)
    index = s.rfind(target)
    return None if index == -1 else index


def _compare(s1: str, s2: str, limit: Optional[int]) -> int:
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), limit):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; negative, zero or positive like C."""
    return _compare(s1, s2, _non_negative(n, "n"))


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; negative, zero or positive like C."""
    return _compare(s1, s2, None)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in the first ``length`` characters of ``big``, or ``None``.

    An empty ``little`` is found at index 0. The match must lie wholly
    within the first ``length`` characters.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index == -1 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives the empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("both arguments must be strings")
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    sep = _target(sep)
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` for each item of ``s``, in place.

    A non-``None`` result replaces the character at that index.
    """
    for index, ch in enumerate(list(s)):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``. A size of 0 copies nothing.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had. When ``size`` is 0 the length of ``src`` is returned; when ``size``
    is not larger than ``dst``, ``dst`` is left unchanged and
    ``size + len(src)`` is returned.
    """
    _non_negative(size, "size")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)