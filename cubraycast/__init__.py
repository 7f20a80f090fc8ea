"""Grid-map raycasting engine: .cub level parsing, movement, software rendering and a pygame window."""

__version__ = "0.1.0"