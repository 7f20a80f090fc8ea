"""Game state: textures, colours, player and map, plus engine constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

WIN_WIDTH = 800
WIN_HEIGHT = 600
MOVE_SPEED = 0.1
ROT_SPEED = 0.05
TILE_SIZE = 32
MAP_OFFSET_X = 20
MAP_OFFSET_Y = 20
FOV = 60.0
NUM_RAYS = WIN_WIDTH
WINDOW_TITLE = "cub3D - Movement Test!"


@dataclass
class Textures:
    """Paths of the four wall textures."""

    north: Optional[str] = None
    south: Optional[str] = None
    west: Optional[str] = None
    east: Optional[str] = None


@dataclass
class Colors:
    """Floor and ceiling RGB components."""

    floor_r: int = 0
    floor_g: int = 0
    floor_b: int = 0
    ceiling_r: int = 0
    ceiling_g: int = 0
    ceiling_b: int = 0


@dataclass
class Player:
    """Player position in map cells and view angle in degrees."""

    x: float = 5.0
    y: float = 5.0
    angle: float = 0.0


@dataclass
class Game:
    """Everything the engine needs to simulate and draw a level."""

    player: Player = field(default_factory=Player)
    textures: Textures = field(default_factory=Textures)
    colors: Colors = field(default_factory=Colors)
    map: List[str] = field(default_factory=list)

    def map_height(self) -> int:
        """Number of map rows."""
        return len(self.map)

    def map_width(self) -> int:
        """Length of the first map row, or 0 for an empty map."""
        return len(self.map[0]) if self.map else 0

    def cell(self, x: int, y: int) -> str:
        """The map character at column ``x`` of row ``y``."""
        if x < 0 or y < 0:
            raise IndexError(f"cell ({x}, {y}) lies outside the map")
        return self.map[y][x]