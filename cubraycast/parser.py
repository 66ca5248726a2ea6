"""Reading a whole scene description file into a game."""

from __future__ import annotations

from collections.abc import Iterable

from .colors import parse_color_line
from .config import UNSET_COLOR, Game, ParseError, new_game
from .lines import (
    LineType,
    identify_line_type,
    invalid_line_message,
    is_valid_cub_file,
)
from .mapgrid import (
    append_row,
    find_and_set_player,
    normalize_map_width,
    validate_enclosed,
    validate_single_player,
)
from .textures import parse_texture


def _strip_newline(line: str) -> str:
    """Cut the line at its first newline."""
    return line.split("\n", 1)[0]


def process_lines(lines: Iterable[str], game: Game) -> None:
    """Read the settings and map rows of a scene into ``game``.

    Settings must all come before the map; the map ends the file.
    """
    map_started = False
    seen_any = False
    for raw in lines:
        seen_any = True
        line = _strip_newline(raw)
        result = identify_line_type(line, map_started)
        if result.type is LineType.EMPTY:
            continue
        if result.type is LineType.MAP:
            map_started = True
            append_row(game.map, line)
            continue
        if result.type is LineType.INVALID:
            raise ParseError(invalid_line_message(map_started, result))
        if map_started:
            raise ParseError("Invalid order. The map must be at the end of the file.")
        if result.type is LineType.TEXTURE:
            parse_texture(line, game)
        else:
            parse_color_line(line, game)
    if not seen_any:
        raise ParseError("File is empty.")


def check_game_assets(game: Game) -> None:
    """Raise ``ParseError`` if a wall texture or a colour is missing."""
    textures = (game.no_texture, game.so_texture, game.we_texture, game.ea_texture)
    if any(texture is None for texture in textures):
        raise ParseError("Missing one or more wall textures.")
    if game.floor_color == UNSET_COLOR or game.ceiling_color == UNSET_COLOR:
        raise ParseError("Missing floor or ceiling color.")


def parse_file(filename: str, game: Game | None = None) -> Game:
    """Read and validate a ``.cub`` file, filling ``game`` (or a new one)."""
    if game is None:
        game = new_game()
    if not is_valid_cub_file(filename):
        raise ParseError("Invalid file type. Use a .cub file.")
    try:
        handle = open(filename, encoding="utf-8", errors="replace", newline="\n")
    except OSError as exc:
        raise ParseError("Opening file") from exc
    with handle:
        process_lines(handle, game)
    normalize_map_width(game.map)
    validate_single_player(game.map)
    find_and_set_player(game.map, game.player)
    validate_enclosed(game.map, game.player)
    check_game_assets(game)
    return game