"""Integer parsing and formatting with C-style leniency."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse_leading_int(text: str) -> int:
    """Parse optional whitespace, one optional sign and leading ASCII digits."""
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits))


def atoi(text: str) -> int:
    """Parse the leading integer of ``text`` as a 32-bit signed value.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0. Values outside the 32-bit
    range wrap around.
    """
    return _wrap(_parse_leading_int(text), 32)


def atoll(text: str) -> int:
    """Parse the leading integer of ``text`` as a 64-bit signed value."""
    return _wrap(_parse_leading_int(text), 64)


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, not {type(n).__name__}")
    return str(n)