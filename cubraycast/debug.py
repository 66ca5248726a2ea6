"""Human-readable dumps of the game state for debug output."""

from __future__ import annotations

import sys
from typing import TextIO

from .config import Game, GameMap, Player, Ray, Texture


def format_map(game_map: GameMap) -> str:
    """Describe the map: its size and every row."""
    lines = [
        "Map:",
        f"  Width: {game_map.width}",
        f"  Height: {game_map.height}",
    ]
    lines.extend(f"  Row {index}: {row}" for index, row in enumerate(game_map.grid))
    return "\n".join(lines) + "\n"


def format_player(player: Player) -> str:
    """Describe the player's position, direction, camera plane and speed."""
    return (
        "Player:\n"
        f"  x: {player.x:.2f}, y: {player.y:.2f}\n"
        f"  dir_x: {player.dir_x:.2f}, dir_y: {player.dir_y:.2f}\n"
        f"  plane_x: {player.plane_x:.2f}, plane_y: {player.plane_y:.2f}\n"
        f"  move_speed: {player.move_speed:.2f}\n"
    )


def format_ray(ray: Ray) -> str:
    """Describe the state of the last ray cast."""
    return (
        "Ray:\n"
        f"  camera_x: {ray.camera_x:.2f}\n"
        f"  ray_dir_x: {ray.ray_dir_x:.2f}, ray_dir_y: {ray.ray_dir_y:.2f}\n"
        f"  map_x: {ray.map_x}, map_y: {ray.map_y}\n"
        f"  side_dist_x: {ray.side_dist_x:.2f}, side_dist_y: {ray.side_dist_y:.2f}\n"
        f"  delta_dist_x: {ray.delta_dist_x:.2f}, "
        f"delta_dist_y: {ray.delta_dist_y:.2f}\n"
        f"  perp_wall_dist: {ray.perp_wall_dist:.2f}\n"
        f"  step_x: {ray.step_x}, step_y: {ray.step_y}\n"
        f"  hit: {int(ray.hit)}, side: {ray.side}\n"
    )


def format_texture(texture: Texture | None, name: str) -> str:
    """Describe one wall texture, or say that it is missing."""
    lines = [f"Texture ({name}):"]
    if texture is None:
        lines.append("  Image: (null)")
        lines.append("  Width: 0, Height: 0")
    else:
        lines.append(f"  Pixels: {len(texture.pixels)}")
        lines.append(f"  Width: {texture.width}, Height: {texture.height}")
    return "\n".join(lines) + "\n"


def format_game(game: Game | None) -> str:
    """Describe the whole game state."""
    if game is None:
        return "Game struct is NULL\n"
    parts = [
        "##### GAME STRUCTS ###\n",
        "Game:\n",
        format_map(game.map),
        format_player(game.player),
        format_ray(game.ray),
        format_texture(game.no_texture, "NO"),
        format_texture(game.so_texture, "SO"),
        format_texture(game.we_texture, "WE"),
        format_texture(game.ea_texture, "EA"),
        f"Floor color: {game.floor_color}\n Ceiling color: {game.ceiling_color}\n",
    ]
    return "".join(parts)


def print_game(game: Game | None, file: TextIO | None = None) -> None:
    """Write the description of the game to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_game(game))