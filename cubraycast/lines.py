"""Classification of the lines of a scene description file."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_SPACES = " \t\v\f\r"
_MAP_CHARS = "01NSEW"
_TEXTURE_IDS = ("NO", "SO", "WE", "EA")
_COLOR_IDS = ("F", "C")


class LineType(enum.Enum):
    """What a line of the file holds."""

    TEXTURE = enum.auto()
    FC_COLOR = enum.auto()
    MAP = enum.auto()
    EMPTY = enum.auto()
    INVALID = enum.auto()


class LineError(enum.Enum):
    """Why a line was found invalid."""

    NONE = 0
    INVALID_MAP_CHAR = 1
    MAP_OUT_OF_ORDER = 2
    INVALID_LINE = 3


@dataclass(frozen=True)
class LineResult:
    """The type of a line and the error found in it, if any."""

    type: LineType
    error: LineError = LineError.NONE


def is_space(char: str) -> bool:
    """Tell whether ``char`` is a blank other than a newline."""
    return len(char) == 1 and char in _SPACES


def is_valid_cub_file(filename: str) -> bool:
    """Tell whether the file name ends in ``.cub``."""
    return len(filename) >= 4 and filename.endswith(".cub")


def tidy_line(line: str) -> str:
    """Drop one trailing newline and any leading blanks."""
    if line.endswith("\n"):
        line = line[:-1]
    return line.lstrip(_SPACES)


def check_map_line_validity(line: str) -> LineError:
    """Check that a line is made only of map characters and spaces.

    A line of spaces alone, or an empty line, is not a map line.
    """
    if not line:
        return LineError.INVALID_LINE
    has_valid_char = False
    for char in line:
        if char in _MAP_CHARS:
            has_valid_char = True
        elif char != " ":
            return LineError.INVALID_MAP_CHAR
    return LineError.NONE if has_valid_char else LineError.INVALID_LINE


def process_map_mode(line: str) -> LineResult:
    """Classify a line read once the map section has begun."""
    error = check_map_line_validity(line)
    if error is LineError.NONE:
        return LineResult(LineType.MAP)
    if error is LineError.INVALID_MAP_CHAR:
        return LineResult(LineType.INVALID, LineError.INVALID_MAP_CHAR)
    return LineResult(LineType.INVALID, LineError.MAP_OUT_OF_ORDER)


def process_config_line(line: str) -> LineResult:
    """Classify a tidied line from the settings before the map."""
    if not line:
        return LineResult(LineType.EMPTY)
    if line[:2] in _TEXTURE_IDS and is_space(line[2:3]):
        return LineResult(LineType.TEXTURE)
    if line[:1] in _COLOR_IDS and is_space(line[1:2]):
        return LineResult(LineType.FC_COLOR)
    return LineResult(LineType.INVALID, LineError.INVALID_LINE)


def identify_line_type(line: str, map_started: bool) -> LineResult:
    """Classify a line given whether the map section has already begun.

    The map section begins with the first line classified as ``MAP``.
    """
    if map_started:
        return process_map_mode(line)
    if check_map_line_validity(line) is LineError.NONE:
        return LineResult(LineType.MAP)
    return process_config_line(tidy_line(line))


def invalid_line_message(map_started: bool, result: LineResult) -> str:
    """Return the error message for an invalid line."""
    if map_started:
        if result.error is LineError.MAP_OUT_OF_ORDER:
            return "Invalid file content order."
        if result.error is LineError.INVALID_MAP_CHAR:
            return "Invalid character in map."
    return "Invalid input line."