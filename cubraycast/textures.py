"""Wall texture lines: ``NO path``, ``SO path``, ``WE path`` and ``EA path``."""

from __future__ import annotations

from PIL import Image

from .config import Game, ParseError, Texture

_SPACES = " \t\v\f\r"
_PATH_TRIM = " \t\n"

_TEXTURE_SLOTS = {
    "NO": "no_texture",
    "SO": "so_texture",
    "WE": "we_texture",
    "EA": "ea_texture",
}


def extract_texture_info(line: str) -> tuple[str, str]:
    """Split a texture line into its two-letter identifier and file path."""
    rest = line.lstrip(_SPACES)
    identifier = rest[:2]
    path = rest[2:].lstrip(_SPACES).strip(_PATH_TRIM)
    return identifier, path


def load_texture(path: str, name: str) -> Texture:
    """Load an image file as a texture of 0xRRGGBB pixels."""
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
    except (OSError, ValueError) as exc:
        raise ParseError(f"Failed to load {name} texture from file.") from exc
    data = iter(rgb.tobytes())
    pixels = [(red << 16) | (green << 8) | blue for red, green, blue in zip(data, data, data)]
    return Texture(width=rgb.width, height=rgb.height, pixels=pixels)


def parse_texture(line: str, game: Game) -> Texture | None:
    """Load the texture a line names and store it in its slot of the game.

    Returns the loaded texture, or None when the identifier is not one of
    NO, SO, WE or EA.
    """
    identifier, path = extract_texture_info(line)
    slot = _TEXTURE_SLOTS.get(identifier)
    if slot is None:
        return None
    if getattr(game, slot) is not None:
        raise ParseError(f"Duplicate texture for {identifier}.")
    texture = load_texture(path, identifier)
    setattr(game, slot, texture)
    return texture