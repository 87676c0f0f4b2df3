import io
import random

import pytest

from bejewel.puzzle import Jewel
from bejewel.text_ui import PREDEFINED_PUZZLES, TextPuzzle, main, render_board

LETTERS = "@#*%$&!"


def chainless_board():
    return "".join(LETTERS[(r + 2 * c) % 7] for r in range(8) for c in range(8))


def make_game(text, seed=0):
    out = io.StringIO()
    game = TextPuzzle(8, 8, io.StringIO(text), out, random.Random(seed))
    return game, out


def has_run_of_three(game):
    grid = [[game.get_jewel((r, c)) for c in range(8)] for r in range(8)]
    for r in range(8):
        for c in range(6):
            if grid[r][c] == grid[r][c + 1] == grid[r][c + 2]:
                return True
    for c in range(8):
        for r in range(6):
            if grid[r][c] == grid[r + 1][c] == grid[r + 2][c]:
                return True
    return False


def test_render_board_layout():
    board = chainless_board()
    game, _ = make_game("")
    game.initialize(board)
    lines = render_board(game).split("\n")
    assert lines[0] == "   0 1 2 3 4 5 6 7"
    assert lines[1] == "  +---------------"
    for r in range(8):
        expected = f"{r} |" + "".join(ch + " " for ch in board[r * 8:(r + 1) * 8])
        assert lines[2 + r] == expected
    assert lines[10:] == ["", ""]


def test_print_board_writes_render():
    game, out = make_game("")
    game.initialize(chainless_board())
    game.print_board()
    assert out.getvalue() == render_board(game)


def test_initial_screen_exit():
    game, out = make_game("3\n")
    assert game.initial_screen(PREDEFINED_PUZZLES) == 3
    assert "<<< BEJEWELED >>>" in out.getvalue()


def test_initial_screen_out_of_range_retries():
    game, out = make_game("5\n3\n")
    assert game.initial_screen(PREDEFINED_PUZZLES) == 3
    assert out.getvalue().count("<<< BEJEWELED >>>") == 2


def test_initial_screen_non_integer_retries():
    game, out = make_game("abc more\n3\n")
    assert game.initial_screen(PREDEFINED_PUZZLES) == 3
    assert "An integer value must be entered." in out.getvalue()


def test_initial_screen_random_settles():
    game, out = make_game("1\n", seed=11)
    assert game.initial_screen(PREDEFINED_PUZZLES) == 1
    assert not has_run_of_three(game)
    assert all(game.get_jewel((r, c)) is not Jewel.NONE for r in range(8) for c in range(8))


def test_initial_screen_predefined_puzzle():
    game, out = make_game("2\n0\n", seed=5)
    assert game.initial_screen(PREDEFINED_PUZZLES) == 2
    assert ">Choose a puzzle option (0~3): " in out.getvalue()
    assert not has_run_of_three(game)


def test_initial_screen_predefined_out_of_range():
    game, out = make_game("2\n7\n3\n")
    assert game.initial_screen(PREDEFINED_PUZZLES) == 3
    assert "between 0 and 3" in out.getvalue()


def test_initial_screen_eof():
    game, _ = make_game("")
    with pytest.raises(EOFError):
        game.initial_screen(PREDEFINED_PUZZLES)


def test_swap_screen_all_zero_stops():
    game, _ = make_game("0 0\n0 0\n")
    game.initialize(chainless_board())
    assert game.swap_screen() is False


def test_swap_screen_swaps_column_then_row():
    game, _ = make_game("0 0\n1 0\n")
    game.initialize(chainless_board())
    a, b = game.get_jewel((0, 0)), game.get_jewel((0, 1))
    assert game.swap_screen() is True
    assert game.get_jewel((0, 0)) is b
    assert game.get_jewel((0, 1)) is a


def test_swap_screen_bad_move_retries():
    game, out = make_game("0 0\n1 1\n0 0\n0 0\n")
    game.initialize(chainless_board())
    before = [[game.get_jewel((r, c)) for c in range(8)] for r in range(8)]
    assert game.swap_screen() is False
    assert "That is not a valid move." in out.getvalue()
    assert [[game.get_jewel((r, c)) for c in range(8)] for r in range(8)] == before


def test_main_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    assert "[3] Exit" in capsys.readouterr().out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 0
    assert "input the first swap position (row, col):" in capsys.readouterr().out