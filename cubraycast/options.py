"""Command-line option handling."""

from __future__ import annotations

from collections.abc import Sequence

from .config import DBG_PRINT_MAP, Options

USAGE = "cub3d usage: <map>, <--debug> for debugging level (optional)"


class UsageError(Exception):
    """Raised when the command line has the wrong number of arguments."""


def is_debug_flag(text: str) -> bool:
    """Tell whether an argument asks for debug output."""
    return text.startswith("--debug")


def parse_options(argv: Sequence[str]) -> tuple[str, Options]:
    """Read the arguments after the program name.

    Returns the map file name and the chosen options.
    """
    if not argv or len(argv) > 2:
        raise UsageError(USAGE)
    options = Options()
    if len(argv) == 2 and is_debug_flag(argv[1]):
        options.debug_output_level = DBG_PRINT_MAP
        print("Debug mode enabled")
    return argv[0], options