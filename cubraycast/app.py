"""The game window: start-up, drawing and the keyboard loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .config import DBG_PRINT_MAP, HEIGHT, WIDTH, Game, ParseError, new_game
from .debug import print_game
from .movement import Key, apply_key
from .options import UsageError, parse_options
from .parser import parse_file
from .raycast import Frame, render_view

TITLE = "cubraycast"
FRAMES_PER_SECOND = 60

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_PARSE = 3
EXIT_SETUP = 4
EXIT_RENDER = 5

_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


class _SetupError(Exception):
    """The window could not be opened."""


class _RenderError(Exception):
    """The scene could not be drawn."""


def key_from_event(event: pygame.event.Event) -> Key | None:
    """Return the game key a key-press event stands for, or None."""
    if event.type != pygame.KEYDOWN:
        return None
    return _KEYS.get(event.key)


def frame_to_surface(frame: Frame) -> pygame.Surface:
    """Turn a frame of 0xRRGGBB pixels into a pygame surface."""
    data = bytes(
        channel
        for pixel in frame.pixels
        for channel in ((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF)
    )
    return pygame.image.frombuffer(data, (frame.width, frame.height), "RGB").copy()


def _draw(game: Game, screen: pygame.Surface) -> None:
    try:
        frame = render_view(game)
    except (IndexError, ValueError, ZeroDivisionError) as exc:
        raise _RenderError(str(exc)) from exc
    screen.blit(frame_to_surface(frame), (0, 0))
    pygame.display.flip()


def run(game: Game) -> None:
    """Open the window, draw the view and react to keys until the player quits."""
    try:
        pygame.display.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
    except pygame.error as exc:
        pygame.display.quit()
        raise _SetupError(str(exc)) from exc
    try:
        _draw(game, screen)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                key = key_from_event(event)
                if key is Key.ESC:
                    return
                if key is not None and apply_key(game, key):
                    _draw(game, screen)
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.display.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named in ``argv``; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        filename, options = parse_options(args)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return EXIT_USAGE
    game = new_game(options.debug_output_level)
    try:
        parse_file(filename, game)
    except ParseError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        print("Parser error")
        return EXIT_PARSE
    if game.opts.debug_output_level & DBG_PRINT_MAP:
        print_game(game)
    try:
        run(game)
    except _SetupError:
        print("Display setup error")
        return EXIT_SETUP
    except _RenderError:
        print("Render error")
        return EXIT_RENDER
    return EXIT_OK