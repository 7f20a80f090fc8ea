"""Software rendering: a pixel buffer, the ray-cast view and the minimap."""

from __future__ import annotations

import math
from typing import Tuple

from cubraycast.colors import ceiling_color, floor_color
from cubraycast.game import FOV, MAP_OFFSET_X, MAP_OFFSET_Y, NUM_RAYS, TILE_SIZE, Game

WALL_COLOR = 0xFF888888
MINIMAP_WALL_COLOR = 0xFF444444
MINIMAP_FLOOR_COLOR = 0xFFCCCCCC
PLAYER_COLOR = 0xFFFF0000
RAY_STEP = 0.01

_CELL = TILE_SIZE // 2
_MARKER = TILE_SIZE // 3


class Image:
    """A width by height grid of 32-bit RGBA pixels, initially all zero."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"image size must not be negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x`` of row ``y``."""
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """The pixel at column ``x`` of row ``y``."""
        return self.pixels[self._index(x, y)]

    def to_rgba_bytes(self) -> bytes:
        """The pixels row by row, four bytes each in R, G, B, A order."""
        return b"".join(pixel.to_bytes(4, "big") for pixel in self.pixels)


def clear_image(image: Image, ceiling: int, floor: int) -> None:
    """Paint the upper half with ``ceiling`` and the lower half with ``floor``."""
    split = (image.height // 2) * image.width
    image.pixels[:split] = [ceiling & 0xFFFFFFFF] * split
    image.pixels[split:] = [floor & 0xFFFFFFFF] * (len(image.pixels) - split)


def draw_vertical_line(image: Image, x: int, start: int, end: int) -> None:
    """Paint rows ``start`` up to ``end`` of column ``x``, clipped to the image."""
    if not 0 <= x < image.width:
        return
    for y in range(max(start, 0), min(end, image.height)):
        image.put_pixel(x, y, WALL_COLOR)


def cast_ray(game: Game, angle: float) -> float:
    """Distance from the player to the first wall or map edge along ``angle`` degrees."""
    start_x, start_y = game.player.x, game.player.y
    radians = math.radians(angle)
    step_x, step_y = math.cos(radians) * RAY_STEP, math.sin(radians) * RAY_STEP
    width, height = game.map_width(), game.map_height()
    x, y = start_x, start_y
    while 0 <= x < width and 0 <= y < height:
        row = game.map[int(y)]
        col = int(x)
        if col < len(row) and row[col] == "1":
            break
        x += step_x
        y += step_y
    return math.hypot(x - start_x, y - start_y)


def _wall_span(image: Image, distance: float) -> Tuple[int, int]:
    wall_height = int(image.height / (distance + 0.0001))
    start = image.height // 2 - int(wall_height / 2)
    return start, start + wall_height


def raycast_and_render(game: Game, image: Image) -> None:
    """Cast one ray per screen column and draw the wall slice it hits."""
    view = game.player.angle
    for ray in range(NUM_RAYS):
        angle = view - FOV / 2.0 + (ray / NUM_RAYS) * FOV
        distance = cast_ray(game, angle) * math.cos(math.radians(angle - view))
        start, end = _wall_span(image, distance)
        draw_vertical_line(image, ray, start, end)


def _put_clipped(image: Image, x: int, y: int, color: int) -> None:
    if 0 <= x < image.width and 0 <= y < image.height:
        image.put_pixel(x, y, color)


def draw_minimap(game: Game, image: Image) -> None:
    """Repaint the background and draw the map grid and the player on top."""
    clear_image(image, ceiling_color(game.colors), floor_color(game.colors))
    width = game.map_width()
    for map_y, row in enumerate(game.map):
        for map_x in range(width):
            is_wall = map_x < len(row) and row[map_x] == "1"
            color = MINIMAP_WALL_COLOR if is_wall else MINIMAP_FLOOR_COLOR
            left = MAP_OFFSET_X + map_x * _CELL
            top = MAP_OFFSET_Y + map_y * _CELL
            for dx in range(_CELL):
                for dy in range(_CELL):
                    _put_clipped(image, left + dx, top + dy, color)
    px = MAP_OFFSET_X + int(game.player.x * TILE_SIZE / 2) - TILE_SIZE // 4
    py = MAP_OFFSET_Y + int(game.player.y * TILE_SIZE / 2) - TILE_SIZE // 4
    for dx in range(_MARKER):
        for dy in range(_MARKER):
            _put_clipped(image, px + dx, py + dy, PLAYER_COLOR)


def render_frame(game: Game, image: Image) -> None:
    """Draw one complete frame: background, minimap and walls."""
    clear_image(image, ceiling_color(game.colors), floor_color(game.colors))
    draw_minimap(game, image)
    raycast_and_render(game, image)