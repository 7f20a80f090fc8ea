"""Parsing of RGB colour specifications and packing into RGBA pixels."""

from __future__ import annotations

from typing import Tuple

from cubraycast.conversions import atoi
from cubraycast.game import Colors
from cubraycast.strings import split

_ALPHA = 0xFF


def parse_rgb_color(color_str: str) -> Tuple[int, int, int]:
    """Parse ``"R,G,B"`` into three integers.

    Empty fields between commas are skipped and fields past the third are
    ignored. Fewer than three fields raise ``ValueError``.
    """
    fields = split(color_str, ",")
    if len(fields) < 3:
        raise ValueError(f"expected three comma-separated components in {color_str!r}")
    red, green, blue = (atoi(part) for part in fields[:3])
    return red, green, blue


def _pack(red: int, green: int, blue: int) -> int:
    return ((red << 24) | (green << 16) | (blue << 8) | _ALPHA) & 0xFFFFFFFF


def floor_color(colors: Colors) -> int:
    """The floor colour as a 32-bit RGBA value with full opacity."""
    return _pack(colors.floor_r, colors.floor_g, colors.floor_b)


def ceiling_color(colors: Colors) -> int:
    """The ceiling colour as a 32-bit RGBA value with full opacity."""
    return _pack(colors.ceiling_r, colors.ceiling_g, colors.ceiling_b)