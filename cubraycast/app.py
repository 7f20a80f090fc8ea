"""Command-line entry point, keyboard handling and the interactive game window."""

from __future__ import annotations

import math
import sys
from enum import Enum
from typing import Optional, Sequence

from cubraycast.game import ROT_SPEED, WIN_HEIGHT, WIN_WIDTH, WINDOW_TITLE, Game
from cubraycast.movements import move_forward_backward, move_left_right, rotate_player
from cubraycast.parsing import MapError, parse_and_validate_cub_file
from cubraycast.render import Image, render_frame

PROGRAM_NAME = "cubraycast"
FRAMES_PER_SECOND = 60


class Action(Enum):
    """What a key press asks the game to do."""

    QUIT = "quit"
    FORWARD = "forward"
    BACKWARD = "backward"
    STRAFE_LEFT = "strafe_left"
    STRAFE_RIGHT = "strafe_right"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"


_KEY_ACTIONS = {
    "escape": Action.QUIT,
    "w": Action.FORWARD,
    "s": Action.BACKWARD,
    "a": Action.STRAFE_LEFT,
    "d": Action.STRAFE_RIGHT,
    "left": Action.TURN_LEFT,
    "right": Action.TURN_RIGHT,
}

_TURN_DEGREES = math.degrees(ROT_SPEED)


def key_action(key: str) -> Optional[Action]:
    """The action bound to the key with this name, or ``None`` if it is unbound."""
    return _KEY_ACTIONS.get(key.lower())


def apply_action(game: Game, action: Action) -> bool:
    """Carry out ``action`` on ``game``; returns ``False`` when the game should stop."""
    if action is Action.QUIT:
        return False
    if action is Action.FORWARD:
        move_forward_backward(game, 1)
    elif action is Action.BACKWARD:
        move_forward_backward(game, -1)
    elif action is Action.STRAFE_LEFT:
        move_left_right(game, -1)
    elif action is Action.STRAFE_RIGHT:
        move_left_right(game, 1)
    elif action is Action.TURN_LEFT:
        rotate_player(game, -_TURN_DEGREES)
    elif action is Action.TURN_RIGHT:
        rotate_player(game, _TURN_DEGREES)
    return True


def format_parsed_data(game: Game) -> str:
    """A summary of the textures and colours read from the level file."""
    textures = game.textures
    colors = game.colors
    lines = ["", "=== STORED DATA VERIFICATION ==="]
    for label, path in (
        ("North", textures.north),
        ("South", textures.south),
        ("West", textures.west),
        ("East", textures.east),
    ):
        lines.append(f"{label} texture: {path if path is not None else 'NULL'}")
    lines.append(f"Floor color: RGB({colors.floor_r}, {colors.floor_g}, {colors.floor_b})")
    lines.append(
        f"Ceiling color: RGB({colors.ceiling_r}, {colors.ceiling_g}, {colors.ceiling_b})"
    )
    lines.append("=== END VERIFICATION ===")
    return "\n".join(lines) + "\n\n"


def run(game: Game) -> None:
    """Open the game window and run until it is closed or Escape is pressed.

    Raises ``RuntimeError`` when no window can be opened.
    """
    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
    except pygame.error as exc:
        pygame.quit()
        raise RuntimeError(f"display initialisation failed: {exc}") from exc
    pygame.display.set_caption(WINDOW_TITLE)
    image = Image(WIN_WIDTH, WIN_HEIGHT)
    clock = pygame.time.Clock()
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    action = key_action(pygame.key.name(event.key))
                    if action is not None and not apply_action(game, action):
                        running = False
            if not running:
                break
            render_frame(game, image)
            surface = pygame.image.frombuffer(
                image.to_rgba_bytes(), (image.width, image.height), "RGBA"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the level named on the command line and play it; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {PROGRAM_NAME} <map.cub>")
        return 1
    game = Game()
    try:
        parse_and_validate_cub_file(args[0], game)
    except MapError as exc:
        print(f"Error\n{exc}")
        return 1
    print(format_parsed_data(game), end="")
    print("SUCCESS! Use WASD to move, arrows to turn, ESC to quit.")
    player = game.player
    print(f"Starting position: ({player.x:.1f}, {player.y:.1f}) angle: {player.angle:.1f}")
    try:
        run(game)
    except RuntimeError as exc:
        print(f"Error: {exc}")
        return 1
    return 0