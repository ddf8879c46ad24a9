import io

import pytest

from so_long.board import TILE, MoveResult
from so_long.game import (
    CLOSED_MESSAGE,
    KEY_ESCAPE,
    WON_MESSAGE,
    Game,
    GameClosed,
    load_game,
    main,
    strlen_char,
)
from so_long.mapfile import MapError

MAP = ["11111\n", "1PCE1\n", "11111\n"]


def test_strlen_char():
    assert strlen_char("1111\n", "\n") == 4
    assert strlen_char("abc", "x") == 3


def test_window_size():
    game = Game(MAP)
    assert game.window_size() == (TILE * 5, TILE * len(MAP))


def test_escape_closes():
    game = Game(MAP)
    with pytest.raises(GameClosed) as info:
        game.handle_key(KEY_ESCAPE)
    assert info.value.text == CLOSED_MESSAGE


def test_player_closed_marker():
    assert GameClosed().text == CLOSED_MESSAGE


def test_move_then_win():
    game = Game(MAP)
    assert game.handle_key(100) is MoveResult.COLLECTED
    with pytest.raises(GameClosed) as info:
        game.handle_key(65363)
    assert info.value.text == WON_MESSAGE


def test_other_key_ignored():
    game = Game(MAP)
    assert game.handle_key(120) is None
    assert game.board.moves == 0


def test_invalid_element():
    with pytest.raises(MapError, match="Invalid element"):
        Game(["11111\n", "1PXE1\n", "11111\n"])


def test_status_lines():
    game = Game(MAP)
    lines = game.status_lines()
    assert "Moves: 0" in lines
    assert f"Player X: {TILE}" in lines
    assert "Collectables: 1" in lines


def test_tick_prints_every_update():
    out = io.StringIO()
    game = Game(MAP, update=2, stream=out)
    assert game.tick() == []
    report = game.tick()
    assert report == game.status_lines()
    assert out.getvalue() == "".join(line + "\n" for line in report)
    assert game.icnt == 0


def test_load_game(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("".join(MAP))
    game = load_game(path)
    assert (game.board.x, game.board.y) == (1, 1)


def test_load_game_invalid(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1P0E1\n11111\n")
    with pytest.raises(MapError, match="Invalid map"):
        load_game(path)


def test_main_wrong_arguments(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Error: Invalid number of arguments.\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 0
    assert capsys.readouterr().out == "Error: Couldn't read the map.\n"