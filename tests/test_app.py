from unittest import mock

import pygame
import pytest
from PIL import Image

from cubraycast.app import frame_to_surface, key_from_event, main, run
from cubraycast.config import new_game
from cubraycast.movement import Key
from cubraycast.parser import parse_file
from cubraycast.raycast import Frame

MAP_ROWS = [
    "111111",
    "100001",
    "100001",
    "100N01",
    "100001",
    "111111",
]


def _write_scene(tmp_path):
    colors = {"no": (255, 0, 0), "so": (0, 255, 0), "we": (0, 0, 255), "ea": (9, 9, 9)}
    for name, color in colors.items():
        Image.new("RGB", (4, 4), color).save(tmp_path / f"{name}.png")
    lines = [
        f"NO {tmp_path / 'no.png'}",
        f"SO {tmp_path / 'so.png'}",
        f"WE {tmp_path / 'we.png'}",
        f"EA {tmp_path / 'ea.png'}",
        "F 10 20 30",
        "C 40 50 60",
        "",
        *MAP_ROWS,
    ]
    path = tmp_path / "scene.cub"
    path.write_text("\n".join(lines) + "\n")
    return str(path)


@pytest.mark.parametrize(
    "pg_key, expected",
    [
        (pygame.K_w, Key.W),
        (pygame.K_a, Key.A),
        (pygame.K_s, Key.S),
        (pygame.K_d, Key.D),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_RIGHT, Key.RIGHT),
        (pygame.K_ESCAPE, Key.ESC),
    ],
)
def test_key_from_event_maps_game_keys(pg_key, expected):
    event = pygame.event.Event(pygame.KEYDOWN, key=pg_key)
    assert key_from_event(event) is expected


def test_key_from_event_ignores_other_keys():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q)
    assert key_from_event(event) is None


def test_key_from_event_ignores_other_events():
    assert key_from_event(pygame.event.Event(pygame.QUIT)) is None


def test_frame_to_surface_keeps_size_and_pixels():
    frame = Frame(width=3, height=2)
    frame.put(1, 0, 0x123456)
    frame.put(2, 1, 0xFF00FF)
    surface = frame_to_surface(frame)
    assert surface.get_size() == (3, 2)
    assert tuple(surface.get_at((1, 0)))[:3] == (0x12, 0x34, 0x56)
    assert tuple(surface.get_at((2, 1)))[:3] == (0xFF, 0x00, 0xFF)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_main_without_arguments_is_usage_error(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().err


def test_main_with_too_many_arguments_is_usage_error():
    assert main(["a.cub", "--debug", "extra"]) == 2


def test_main_rejects_wrong_extension(tmp_path, capsys):
    path = tmp_path / "scene.txt"
    path.write_text("NO x\n")
    assert main([str(path)]) == 3
    captured = capsys.readouterr()
    assert "Parser error" in captured.out
    assert "Invalid file type. Use a .cub file." in captured.err


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 3
    assert "Parser error" in capsys.readouterr().out


def test_main_reports_display_setup_failure(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scene = _write_scene(tmp_path)
    with mock.patch("pygame.display.set_mode", side_effect=pygame.error("no display")):
        assert main([scene]) == 4


def test_main_ends_when_window_closed(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scene = _write_scene(tmp_path)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main([scene]) == 0
    assert "error" not in capsys.readouterr().out


def test_main_debug_prints_game(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scene = _write_scene(tmp_path)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main([scene, "--debug"]) == 0
    out = capsys.readouterr().out
    assert "Debug mode enabled" in out
    assert "##### GAME STRUCTS ###" in out
    assert "  Row 0: 111111" in out


def test_run_moves_player_then_stops_on_escape(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    game = parse_file(_write_scene(tmp_path), new_game())
    start_x, start_y = game.player.x, game.player.y
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE),
    ]
    with mock.patch("pygame.event.get", return_value=events):
        run(game)
    assert game.player.x == pytest.approx(start_x)
    assert game.player.y < start_y