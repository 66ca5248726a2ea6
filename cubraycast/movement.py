"""Player movement and turning in response to keys."""

from __future__ import annotations

import enum
import math

from .config import (
    A_KEY,
    D_KEY,
    DBG_PRINT_MAP,
    ESC,
    LEFT_ARROW,
    RIGHT_ARROW,
    S_KEY,
    W_KEY,
    Game,
)


class Key(enum.IntEnum):
    """Key codes the game reacts to."""

    ESC = ESC
    W = W_KEY
    A = A_KEY
    S = S_KEY
    D = D_KEY
    LEFT = LEFT_ARROW
    RIGHT = RIGHT_ARROW


def is_walkable(game: Game, x: float, y: float) -> bool:
    """Tell whether the map cell holding point (x, y) is open floor."""
    maze_x = int(x)
    maze_y = int(y)
    game_map = game.map
    if maze_x < 0 or maze_y < 0 or maze_x >= game_map.width or maze_y >= game_map.height:
        return False
    row = game_map.grid[maze_y]
    return maze_x < len(row) and row[maze_x] == "0"


def _try_move(game: Game, new_x: float, new_y: float, label: str) -> None:
    player = game.player
    if (
        is_walkable(game, new_x, player.y)
        and is_walkable(game, player.x, new_y)
        and is_walkable(game, new_x, new_y)
    ):
        player.x = new_x
        player.y = new_y
    if game.opts.debug_output_level & DBG_PRINT_MAP:
        print(f"{label}: moved to: x = {player.x:f}, y = {player.y:f}")


def move_forward(game: Game) -> None:
    """Step along the view direction if the way is open."""
    p = game.player
    _try_move(game, p.x + p.dir_x * p.move_speed, p.y + p.dir_y * p.move_speed, "W")


def move_backward(game: Game) -> None:
    """Step against the view direction if the way is open."""
    p = game.player
    _try_move(game, p.x - p.dir_x * p.move_speed, p.y - p.dir_y * p.move_speed, "S")


def strafe_left(game: Game) -> None:
    """Step sideways to the left if the way is open."""
    p = game.player
    _try_move(game, p.x + p.dir_y * p.move_speed, p.y - p.dir_x * p.move_speed, "A")


def strafe_right(game: Game) -> None:
    """Step sideways to the right if the way is open."""
    p = game.player
    _try_move(game, p.x - p.dir_y * p.move_speed, p.y + p.dir_x * p.move_speed, "D")


def _rotate(game: Game, angle: float) -> None:
    p = game.player
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    p.dir_x, p.dir_y = (
        p.dir_x * cos_a - p.dir_y * sin_a,
        p.dir_x * sin_a + p.dir_y * cos_a,
    )
    p.plane_x, p.plane_y = (
        p.plane_x * cos_a - p.plane_y * sin_a,
        p.plane_x * sin_a + p.plane_y * cos_a,
    )


def turn_right(game: Game) -> None:
    """Rotate the view direction and camera plane clockwise."""
    _rotate(game, game.player.rot_speed)
    if game.opts.debug_output_level & DBG_PRINT_MAP:
        p = game.player
        print(f"Turn right: new direction = ({p.dir_x:f}, {p.dir_y:f})")


def turn_left(game: Game) -> None:
    """Rotate the view direction and camera plane counter-clockwise."""
    _rotate(game, -game.player.rot_speed)
    if game.opts.debug_output_level & DBG_PRINT_MAP:
        p = game.player
        print(f"Turn left: new direction = ({p.dir_x:f}, {p.dir_y:f})")


_ACTIONS = {
    Key.W: move_forward,
    Key.S: move_backward,
    Key.A: strafe_left,
    Key.D: strafe_right,
    Key.LEFT: turn_left,
    Key.RIGHT: turn_right,
}


def apply_key(game: Game, key: int) -> bool:
    """Apply a movement or turning key.

    Returns True when the key moved or turned the player's view, so the
    scene must be drawn again; False for any other key.
    """
    try:
        action = _ACTIONS.get(Key(key))
    except ValueError:
        return False
    if action is None:
        return False
    action(game)
    return True