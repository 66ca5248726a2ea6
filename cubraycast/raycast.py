"""Ray casting of the player's view into a frame of 0xRRGGBB pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .config import DBG_PRINT_MAP, HEIGHT, WIDTH, Game, Texture

NO_HIT_DISTANCE = 1e30


@dataclass
class Frame:
    """A picture of ``width`` by ``height`` pixels stored row by row."""

    width: int = WIDTH
    height: int = HEIGHT
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match the frame size")

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"frame pixel ({x}, {y}) out of range")
        return y * self.width + x

    def put(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x`` and row ``y``."""
        self.pixels[self._index(x, y)] = color

    def get(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        return self.pixels[self._index(x, y)]


@dataclass
class Wall:
    """Vertical extent of one wall slice and how the texture runs along it."""

    height: int
    draw_start: int
    draw_end: int
    tex_step: float
    tex_pos: float


def _debug(game: Game) -> bool:
    return bool(game.opts.debug_output_level & DBG_PRINT_MAP)


def setup_ray(game: Game, x: int) -> None:
    """Prepare the ray for screen column ``x``: direction, steps and distances."""
    ray = game.ray
    player = game.player
    ray.camera_x = 2 * x / float(WIDTH) - 1
    ray.ray_dir_x = player.dir_x + player.plane_x * ray.camera_x
    ray.ray_dir_y = player.dir_y + player.plane_y * ray.camera_x
    ray.map_x = int(player.x)
    ray.map_y = int(player.y)
    ray.delta_dist_x = NO_HIT_DISTANCE if ray.ray_dir_x == 0 else abs(1 / ray.ray_dir_x)
    ray.delta_dist_y = NO_HIT_DISTANCE if ray.ray_dir_y == 0 else abs(1 / ray.ray_dir_y)
    if ray.ray_dir_x < 0:
        ray.step_x = -1
        ray.side_dist_x = (player.x - ray.map_x) * ray.delta_dist_x
    else:
        ray.step_x = 1
        ray.side_dist_x = (ray.map_x + 1.0 - player.x) * ray.delta_dist_x
    if ray.ray_dir_y < 0:
        ray.step_y = -1
        ray.side_dist_y = (player.y - ray.map_y) * ray.delta_dist_y
    else:
        ray.step_y = 1
        ray.side_dist_y = (ray.map_y + 1.0 - player.y) * ray.delta_dist_y


def perform_dda(game: Game) -> None:
    """Step the ray from cell to cell until it enters a wall.

    Raises ``IndexError`` if the ray leaves the map without meeting a wall.
    """
    ray = game.ray
    ray.hit = False
    while not ray.hit:
        if ray.side_dist_x < ray.side_dist_y:
            ray.side_dist_x += ray.delta_dist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.side_dist_y += ray.delta_dist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if game.map.cell(ray.map_x, ray.map_y) == "1":
            ray.hit = True


def select_texture(game: Game) -> Texture:
    """Choose the wall texture for the face the ray hit and remember it."""
    ray = game.ray
    if ray.side == 0:
        texture, name = (
            (game.ea_texture, "EA") if ray.ray_dir_x > 0 else (game.we_texture, "WE")
        )
    else:
        texture, name = (
            (game.so_texture, "SO") if ray.ray_dir_y > 0 else (game.no_texture, "NO")
        )
    if texture is None:
        raise ValueError(f"missing {name} texture")
    ray.texture = texture
    return texture


def texture_x(game: Game, texture: Texture) -> int:
    """Return the texture column for the point where the ray met the wall."""
    ray = game.ray
    player = game.player
    if ray.side == 0:
        wall_x = player.y + ray.perp_wall_dist * ray.ray_dir_y
    else:
        wall_x = player.x + ray.perp_wall_dist * ray.ray_dir_x
    wall_x -= math.floor(wall_x)
    tex_x = min(int(wall_x * float(texture.width)), texture.width - 1)
    if (ray.side == 0 and ray.ray_dir_x > 0) or (ray.side == 1 and ray.ray_dir_y < 0):
        tex_x = texture.width - tex_x - 1
    if _debug(game):
        print(f"Wall_X: {wall_x:f}, Tex_X: {tex_x}, Texture Width: {texture.width}")
    return tex_x


def compute_wall_texture(game: Game) -> None:
    """Select the texture of the wall hit and the column to sample from it."""
    texture = select_texture(game)
    game.ray.tex_x = texture_x(game, texture)
    if _debug(game):
        print(f"Tex_X: {game.ray.tex_x}")


def wall_distance(game: Game) -> float:
    """Return the distance from the camera plane to the wall hit."""
    ray = game.ray
    player = game.player
    if ray.side == 0:
        return (ray.map_x - player.x + (1 - ray.step_x) / 2.0) / ray.ray_dir_x
    return (ray.map_y - player.y + (1 - ray.step_y) / 2.0) / ray.ray_dir_y


def wall_properties(game: Game) -> Wall:
    """Work out where on screen the current wall slice lies."""
    ray = game.ray
    if ray.texture is None:
        raise ValueError("no texture selected for the ray")
    height = int(HEIGHT / ray.perp_wall_dist)
    half = height // 2
    draw_start = max(-half + HEIGHT // 2, 0)
    draw_end = min(half + HEIGHT // 2, HEIGHT - 1)
    tex_step = ray.texture.height / height if height else math.inf
    tex_pos = (draw_start - HEIGHT / 2 + height / 2) * tex_step
    if game.opts.debug_output_level:
        print(
            f"calculate_wall_properties: tex_step={tex_step:f}, tex_pos={tex_pos:f}"
        )
    return Wall(height, draw_start, draw_end, tex_step, tex_pos)


def draw_wall_column(game: Game, frame: Frame, x: int) -> Wall:
    """Draw the textured wall slice for screen column ``x`` into ``frame``."""
    ray = game.ray
    ray.perp_wall_dist = wall_distance(game)
    wall = wall_properties(game)
    if _debug(game):
        print(f"Ray wall distance is {ray.perp_wall_dist:f}")
        print(f"draw start: {wall.draw_start}, draw end: {wall.draw_end}")
    texture = ray.texture
    assert texture is not None
    modulus = texture.height - 1
    for y in range(wall.draw_start, wall.draw_end):
        tex_y = int(math.fmod(int(wall.tex_pos), modulus))
        wall.tex_pos += wall.tex_step
        frame.put(x, y, texture.pixel(ray.tex_x, tex_y))
    return wall


def fill_ceiling_and_floor(game: Game, frame: Frame) -> None:
    """Paint the upper half with the ceiling colour and the lower with the floor."""
    upper = frame.height // 2
    frame.pixels = [game.ceiling_color] * (frame.width * upper) + [
        game.floor_color
    ] * (frame.width * (frame.height - upper))


def render_view(game: Game, frame: Frame | None = None) -> Frame:
    """Draw the player's whole view into ``frame`` (a new one by default)."""
    if frame is None:
        frame = Frame()
    fill_ceiling_and_floor(game, frame)
    for x in range(WIDTH):
        setup_ray(game, x)
        perform_dda(game)
        compute_wall_texture(game)
        draw_wall_column(game, frame, x)
    texture = game.ray.texture
    if _debug(game) and texture is not None:
        print(f"Selected texture: Width: {texture.width}, Height: {texture.height}")
    return frame