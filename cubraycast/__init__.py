"""Textured raycasting maze explorer: .cub scene parsing, movement, rendering and a pygame window."""

__version__ = "0.1.0"