"""Player rotation and collision-checked movement on the map grid."""

from __future__ import annotations

import math
from typing import Sequence

from cubraycast.game import MOVE_SPEED, Game

_WALKABLE = frozenset("0NSEW")


def is_walkable(grid: Sequence[str], x: int, y: int) -> bool:
    """True if the cell at column ``x`` of row ``y`` is open floor.

    Cells outside the map are never walkable.
    """
    if x < 0 or y < 0 or y >= len(grid) or x >= len(grid[y]):
        return False
    return grid[y][x] in _WALKABLE


def rotate_player(game: Game, angle: float) -> None:
    """Turn the player by ``angle`` degrees, keeping the angle in [0, 360)."""
    player = game.player
    player.angle += angle
    if player.angle < 0:
        player.angle += 360.0
    if player.angle >= 360.0:
        player.angle -= 360.0


def _step(game: Game, heading: float, distance: float) -> None:
    player = game.player
    radians = math.radians(heading)
    new_x = player.x + math.cos(radians) * distance
    new_y = player.y + math.sin(radians) * distance
    if is_walkable(game.map, int(new_x), int(player.y)):
        player.x = new_x
    if is_walkable(game.map, int(player.x), int(new_y)):
        player.y = new_y


def move_forward_backward(game: Game, direction: int) -> None:
    """Step along the view direction: 1 forwards, -1 backwards."""
    _step(game, game.player.angle, MOVE_SPEED * direction)


def move_left_right(game: Game, direction: int) -> None:
    """Strafe at right angles to the view: 1 to the right, -1 to the left."""
    _step(game, game.player.angle + direction * 90.0, MOVE_SPEED)