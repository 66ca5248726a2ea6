"""Game state, its defaults and the constants the whole game shares."""

from __future__ import annotations

from dataclasses import dataclass, field

WIDTH = 800
HEIGHT = 600
PLAYER_COLOR = 0xFFFFFF
PLAYER_SPEED = 0.2
ROT_SPEED = 0.05

ESC = 65307
W_KEY = 119
A_KEY = 97
S_KEY = 115
D_KEY = 100
LEFT_ARROW = 65361
RIGHT_ARROW = 65363

USAGE_MESSAGE = "Usage: <program> <map> <--debug> (optional)\n"

DBG_PRINT_MAP = 2

UNSET_COLOR = -1


class ParseError(Exception):
    """Raised when a scene description cannot be read or is invalid."""


@dataclass
class Options:
    """Run-time options chosen on the command line."""

    debug_output_level: int = 0


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    x: float = 0.0
    y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    move_speed: float = PLAYER_SPEED
    rot_speed: float = ROT_SPEED


@dataclass
class Texture:
    """A wall texture: its size and its pixels as 0xRRGGBB, row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texture pixel ({x}, {y}) out of range")
        return self.pixels[y * self.width + x]


@dataclass
class GameMap:
    """The map grid; ``width`` is the length of its longest row."""

    grid: list[str] = field(default_factory=list)
    width: int = 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def cell(self, x: int, y: int) -> str:
        """Return the character at column ``x`` and row ``y``."""
        if y < 0 or x < 0:
            raise IndexError(f"map cell ({x}, {y}) out of range")
        return self.grid[y][x]


@dataclass
class Ray:
    """State of the ray cast for one screen column."""

    camera_x: float = 0.0
    ray_dir_x: float = 0.0
    ray_dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    perp_wall_dist: float = 0.0
    step_x: int = 0
    step_y: int = 0
    hit: bool = False
    side: int = 0
    tex_x: int = 0
    texture: Texture | None = None


@dataclass
class Game:
    """Everything the game knows: map, player, textures, colours, options."""

    map: GameMap = field(default_factory=GameMap)
    player: Player = field(default_factory=Player)
    ray: Ray = field(default_factory=Ray)
    no_texture: Texture | None = None
    so_texture: Texture | None = None
    we_texture: Texture | None = None
    ea_texture: Texture | None = None
    floor_color: int = UNSET_COLOR
    ceiling_color: int = UNSET_COLOR
    opts: Options = field(default_factory=Options)


def new_game(debug_level: int = 0) -> Game:
    """Return a fresh game with an empty map and colours not yet set."""
    return Game(opts=Options(debug_output_level=debug_level))