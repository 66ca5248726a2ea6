"""Floor and ceiling colour lines: ``F R G B`` and ``C R G B``."""

from __future__ import annotations

from collections.abc import Sequence

from .config import Game, ParseError

_LEADING_SPACE = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Read a leading integer the lenient way: spaces, one sign, digits."""
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits += char
    return sign * int(digits) if digits else 0


def is_valid_number(text: str) -> bool:
    """Tell whether ``text`` is an optional sign followed by digits only."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all("0" <= char <= "9" for char in body)


def color_from_tokens(tokens: Sequence[str]) -> int:
    """Combine tokens 1 to 3 (red, green, blue) into 0xRRGGBB."""
    red, green, blue = (atoi(token) for token in tokens[1:4])
    if any(not 0 <= value <= 255 for value in (red, green, blue)):
        raise ParseError("Color values must be between 0 and 255.")
    return (red << 16) | (green << 8) | blue


def parse_color_line(line: str, game: Game) -> int:
    """Parse a colour line, store it as floor or ceiling colour, return it."""
    tokens = [token for token in line.split(" ") if token]
    if len(tokens) != 4:
        raise ParseError("Color line must contain exactly 3 numeric values.")
    if not all(is_valid_number(token) for token in tokens[1:]):
        raise ParseError("Invalid numeric value in color line.")
    color = color_from_tokens(tokens)
    prefix = tokens[0][0]
    if prefix == "F":
        game.floor_color = color
    elif prefix == "C":
        game.ceiling_color = color
    else:
        raise ParseError("Color line prefix expected F or C")
    return color