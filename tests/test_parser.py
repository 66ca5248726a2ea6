import pytest
from PIL import Image

from cubraycast.colors import color_from_tokens
from cubraycast.config import UNSET_COLOR, ParseError, Texture, new_game
from cubraycast.parser import check_game_assets, parse_file, process_lines

CLOSED_MAP = ["111111", "100001", "10N001", "111111"]
OPEN_MAP = ["111111", "100001", "10N000", "111111"]


def _make_texture(path):
    Image.new("RGB", (4, 4), (10, 20, 30)).save(path)
    return str(path)


def _write_scene(tmp_path, map_rows, name="scene.cub", textures=True):
    lines = []
    if textures:
        for ident in ("NO", "SO", "WE", "EA"):
            lines.append(f"{ident} {_make_texture(tmp_path / (ident + '.png'))}")
    lines += ["F 220 100 0", "C 225 30 0", ""]
    lines += map_rows
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8", newline="\n")
    return str(path)


def _full_game():
    game = new_game()
    for slot in ("no_texture", "so_texture", "we_texture", "ea_texture"):
        setattr(game, slot, Texture(1, 1, [0]))
    game.floor_color = 1
    game.ceiling_color = 2
    return game


def test_parse_file_success(tmp_path):
    game = parse_file(_write_scene(tmp_path, CLOSED_MAP))
    assert game.floor_color == color_from_tokens(["F", "220", "100", "0"])
    assert game.ceiling_color == color_from_tokens(["C", "225", "30", "0"])
    assert (game.player.x, game.player.y) == (2.5, 2.5)
    assert game.map.grid[2] == "100001"
    assert game.no_texture.width == 4


def test_parse_file_fills_given_game(tmp_path):
    game = new_game()
    result = parse_file(_write_scene(tmp_path, CLOSED_MAP), game)
    assert result is game
    assert game.map.height == len(CLOSED_MAP)


def test_parse_file_wrong_extension(tmp_path):
    with pytest.raises(ParseError, match="Invalid file type"):
        parse_file(_write_scene(tmp_path, CLOSED_MAP, name="scene.txt"))


def test_parse_file_missing_file(tmp_path):
    with pytest.raises(ParseError, match="Opening file"):
        parse_file(str(tmp_path / "absent.cub"))


def test_parse_file_empty(tmp_path):
    path = tmp_path / "empty.cub"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ParseError, match="File is empty"):
        parse_file(str(path))


def test_parse_file_open_map(tmp_path):
    with pytest.raises(ParseError, match="Map is not valid"):
        parse_file(_write_scene(tmp_path, OPEN_MAP))


def test_parse_file_missing_textures(tmp_path):
    with pytest.raises(ParseError, match="Missing one or more wall textures"):
        parse_file(_write_scene(tmp_path, CLOSED_MAP, textures=False))


def test_parse_file_two_players(tmp_path):
    rows = ["111111", "1N0001", "10N001", "111111"]
    with pytest.raises(ParseError, match="Multiple players"):
        parse_file(_write_scene(tmp_path, rows))


def test_process_lines_builds_map_and_color():
    game = new_game()
    process_lines(["F 1 2 3\n", "\n", "  111\n", "101\n"], game)
    assert game.map.grid == ["  111", "101"]
    assert game.floor_color == color_from_tokens(["F", "1", "2", "3"])


def test_process_lines_empty():
    with pytest.raises(ParseError, match="File is empty"):
        process_lines([], new_game())


def test_process_lines_invalid_line_before_map():
    with pytest.raises(ParseError, match="Invalid input line"):
        process_lines(["XX foo\n"], new_game())


def test_process_lines_setting_after_map():
    with pytest.raises(ParseError, match="Invalid character in map"):
        process_lines(["111\n", "F 1 2 3\n"], new_game())


def test_process_lines_empty_line_inside_map():
    with pytest.raises(ParseError, match="Invalid file content order"):
        process_lines(["111\n", "\n", "111\n"], new_game())


def test_check_game_assets_complete():
    game = _full_game()
    check_game_assets(game)
    assert game.floor_color == 1


def test_check_game_assets_missing_color():
    game = _full_game()
    game.ceiling_color = UNSET_COLOR
    with pytest.raises(ParseError, match="Missing floor or ceiling color"):
        check_game_assets(game)


def test_check_game_assets_missing_texture():
    game = _full_game()
    game.we_texture = None
    with pytest.raises(ParseError, match="Missing one or more wall textures"):
        check_game_assets(game)