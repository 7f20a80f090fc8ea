"""Reading and validating ``.cub`` level descriptions."""

from __future__ import annotations

import logging
from typing import List, Sequence

from cubraycast.colors import parse_rgb_color
from cubraycast.game import Colors, Game, Textures

logger = logging.getLogger(__name__)

MAX_FILE_BYTES = 999
EXTENSION = ".cub"

_HEADER_STARTS = frozenset("NSWEFC")
_MAP_CHARACTERS = frozenset("01 NSEW")
_DIRECTIONS = {"N": 270.0, "S": 90.0, "E": 0.0, "W": 180.0}


class MapError(ValueError):
    """A level file that cannot be read or does not describe a valid map."""


def parse_texture_line(line: str, textures: Textures, colors: Colors) -> bool:
    """Store the texture path or colour a header line describes.

    Returns ``True`` when the line was recognised, ``False`` otherwise.
    A colour line with fewer than three components raises ``MapError``.
    """
    prefix = line[:2]
    texture_fields = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
    if prefix in texture_fields:
        path = line[3:]
        logger.debug("found %s texture: %s", texture_fields[prefix], path)
        setattr(textures, texture_fields[prefix], path)
        return True
    if prefix in ("F ", "C "):
        try:
            red, green, blue = parse_rgb_color(line[2:])
        except ValueError as exc:
            raise MapError(str(exc)) from exc
        if prefix == "F ":
            colors.floor_r, colors.floor_g, colors.floor_b = red, green, blue
        else:
            colors.ceiling_r, colors.ceiling_g, colors.ceiling_b = red, green, blue
        logger.debug("found %s colour: %d,%d,%d", prefix[0], red, green, blue)
        return True
    return False


def split_map_lines(text: str) -> List[str]:
    """Split the map section into rows; a final newline adds no empty row."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def parse_cub_text(text: str, game: Game) -> None:
    """Fill ``game`` from the contents of a level file.

    Header lines set textures and colours; the map section starts at the
    first non-empty line that neither begins with a header letter nor with a
    space, and runs to the end of the text.
    """
    map_start = None
    offset = 0
    for line in text.split("\n"):
        if line and line[0] in _HEADER_STARTS:
            parse_texture_line(line, game.textures, game.colors)
        elif line and line[0] != " " and map_start is None:
            map_start = offset
            logger.debug("map section starts at position %d", map_start)
        offset += len(line) + 1
    if map_start is None:
        raise MapError("No map found in file")
    game.map = split_map_lines(text[map_start:])
    logger.debug("found %d map lines", len(game.map))


def parse_cub_file(filename: str, game: Game) -> None:
    """Read at most the first 999 bytes of ``filename`` and parse them into ``game``."""
    try:
        with open(filename, "rb") as handle:
            data = handle.read(MAX_FILE_BYTES)
    except OSError as exc:
        raise MapError(f"Cannot open file {filename}") from exc
    parse_cub_text(data.decode("utf-8", errors="replace"), game)


def find_player_position(game: Game) -> None:
    """Place the player on the first N, S, E or W cell and turn that cell into floor."""
    for row, text in enumerate(game.map):
        for col, ch in enumerate(text):
            if ch in _DIRECTIONS:
                game.player.x = col + 0.5
                game.player.y = row + 0.5
                game.player.angle = _DIRECTIONS[ch]
                game.map[row] = text[:col] + "0" + text[col + 1:]
                logger.debug("player found at map[%d][%d] = %r", row, col, ch)
                return
    raise MapError("No player position found in map")


def validate_top_bottom_walls(grid: Sequence[str]) -> None:
    """Require the first and last rows to be walls across the first row's width."""
    if not grid:
        return
    width = len(grid[0])
    for label, row in (("top", grid[0]), ("bottom", grid[-1])):
        for col in range(width):
            if col >= len(row) or row[col] != "1":
                raise MapError(f"Map not closed - {label} wall missing at position {col}")


def validate_left_right_walls(grid: Sequence[str]) -> None:
    """Require every row to start and end with a wall."""
    for row, text in enumerate(grid):
        if not text or text[0] != "1":
            raise MapError(f"Map not closed - left wall missing at row {row}")
        if text[-1] != "1":
            raise MapError(f"Map not closed - right wall missing at row {row}")


def validate_map_characters(grid: Sequence[str]) -> None:
    """Allow only 0, 1, space and the four direction letters."""
    for row, text in enumerate(grid):
        for col, ch in enumerate(text):
            if ch not in _MAP_CHARACTERS:
                raise MapError(f"Invalid character {ch!r} in map at [{row}][{col}]")


def validate_map_walls(game: Game) -> None:
    """Check walls on all four sides and the characters of the map."""
    logger.debug("map size: %d x %d", game.map_width(), game.map_height())
    validate_top_bottom_walls(game.map)
    validate_left_right_walls(game.map)
    validate_map_characters(game.map)


def check_file_extension(filename: str) -> None:
    """Require ``filename`` to end in ``.cub``."""
    if len(filename) < len(EXTENSION) or not filename.endswith(EXTENSION):
        raise MapError("File must have .cub extension")


def parse_and_validate_cub_file(filename: str, game: Game) -> None:
    """Check the name, parse the file, place the player and validate the map."""
    check_file_extension(filename)
    parse_cub_file(filename, game)
    find_player_position(game)
    validate_map_walls(game)