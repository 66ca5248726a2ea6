"""Map grid handling: building rows, padding, player lookup and enclosure checks."""

from __future__ import annotations

from .config import GameMap, ParseError, Player

PLAYER_CHARS = "NSEW"
WALL = "1"
FLOOR = "0"
PAD = " "
PLANE_LENGTH = 0.66

# Direction and camera plane for each spawn character: (dir_x, dir_y, plane_x, plane_y).
_ORIENTATIONS = {
    "N": (0.0, -1.0, PLANE_LENGTH, 0.0),
    "S": (0.0, 1.0, -PLANE_LENGTH, 0.0),
    "E": (1.0, 0.0, 0.0, PLANE_LENGTH),
    "W": (-1.0, 0.0, 0.0, -PLANE_LENGTH),
}


def append_row(game_map: GameMap, line: str) -> None:
    """Add a row to the map, widening the map if the row is its longest."""
    game_map.grid.append(line)
    game_map.width = max(game_map.width, len(line))


def normalize_map_width(game_map: GameMap) -> None:
    """Pad every row with spaces so that all rows have the map's width."""
    game_map.grid = [row.ljust(game_map.width, PAD) for row in game_map.grid]


def count_players(game_map: GameMap) -> int:
    """Count the player spawn characters in the whole map."""
    return sum(row.count(char) for row in game_map.grid for char in PLAYER_CHARS)


def validate_single_player(game_map: GameMap) -> None:
    """Raise ``ParseError`` unless the map holds exactly one player."""
    count = count_players(game_map)
    if count == 0:
        raise ParseError("No player found in the map.")
    if count > 1:
        raise ParseError("Multiple players found in the map.")


def flood_fill_enclosed(
    grid: list[str], width: int, height: int, start: tuple[int, int]
) -> bool:
    """Tell whether every cell reachable from ``start`` is closed in by walls.

    Only walls stop the fill; reaching any cell outside the grid means the
    map is open.
    """
    visited: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if not (0 <= x < width and 0 <= y < height):
            return False
        row = grid[y]
        cell = row[x] if x < len(row) else PAD
        if cell == WALL or (x, y) in visited:
            continue
        visited.add((x, y))
        pending.extend(((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)))
    return True


def validate_enclosed(game_map: GameMap, player: Player) -> None:
    """Raise ``ParseError`` if the player's area is not closed in by walls."""
    start = (int(player.x), int(player.y))
    if not flood_fill_enclosed(game_map.grid, game_map.width, game_map.height, start):
        raise ParseError("Map is not valid.")


def find_and_set_player(game_map: GameMap, player: Player) -> str | None:
    """Place the player on the first spawn character and clear that cell.

    Sets the player's position to the cell's centre and its direction and
    camera plane from the character. Returns the character found, or None.
    """
    for y, row in enumerate(game_map.grid):
        for x, cell in enumerate(row[: game_map.width]):
            if cell not in PLAYER_CHARS:
                continue
            player.x = x + 0.5
            player.y = y + 0.5
            player.dir_x, player.dir_y, player.plane_x, player.plane_y = _ORIENTATIONS[
                cell
            ]
            game_map.grid[y] = row[:x] + FLOOR + row[x + 1 :]
            return cell
    return None