import random

import pytest

from bejewel.puzzle import (
    Jewel,
    Puzzle,
    PuzzleError,
    jewel_from_letter,
    jewel_letter,
)

LETTERS = "@#*%$&!"


def chainless_board():
    """An 8x8 board in which no two neighbours are equal."""
    return "".join(LETTERS[(r + 2 * c) % 7] for r in range(8) for c in range(8))


def cells(puzzle):
    return [
        [puzzle.get_jewel((r, c)) for c in range(puzzle.num_columns)]
        for r in range(puzzle.num_rows)
    ]


def make_puzzle(seed=1):
    puzzle = Puzzle(8, 8, random.Random(seed))
    puzzle.initialize(chainless_board())
    return puzzle


def test_letters_fixed_by_format():
    assert jewel_letter(Jewel.RED) == "@"
    assert jewel_letter(Jewel.WHITE) == "!"
    assert jewel_letter(Jewel.NONE) == " "


@pytest.mark.parametrize("jewel", list(Jewel))
def test_letter_round_trip(jewel):
    assert jewel_from_letter(jewel_letter(jewel)) is jewel


def test_unknown_letter_is_none():
    assert jewel_from_letter("x") is Jewel.NONE


def test_initialize_wrong_length():
    puzzle = Puzzle(8, 8)
    with pytest.raises(PuzzleError):
        puzzle.initialize("@#*")


def test_initialize_row_major():
    board = chainless_board()
    puzzle = make_puzzle()
    for r in range(8):
        for c in range(8):
            assert jewel_letter(puzzle.get_jewel((r, c))) == board[r * 8 + c]


def test_get_jewel_off_board_is_none():
    puzzle = make_puzzle()
    assert puzzle.get_jewel((8, 0)) is Jewel.NONE
    assert puzzle.get_jewel((0, -1)) is Jewel.NONE


def test_is_valid():
    puzzle = Puzzle(8, 8)
    assert puzzle.is_valid((0, 0))
    assert puzzle.is_valid((7, 7))
    assert not puzzle.is_valid((8, 7))
    assert not puzzle.is_valid((-1, 0))


def test_set_jewel():
    puzzle = make_puzzle()
    puzzle.set_jewel((2, 3), Jewel.PURPLE)
    assert puzzle.get_jewel((2, 3)) is Jewel.PURPLE


def test_set_jewel_off_board():
    puzzle = make_puzzle()
    with pytest.raises(PuzzleError):
        puzzle.set_jewel((0, 8), Jewel.RED)


def test_swap_adjacent():
    puzzle = make_puzzle()
    a, b = puzzle.get_jewel((4, 4)), puzzle.get_jewel((4, 5))
    puzzle.swap_jewels((4, 4), (4, 5))
    assert puzzle.get_jewel((4, 4)) is b
    assert puzzle.get_jewel((4, 5)) is a


@pytest.mark.parametrize(
    "prev, nxt",
    [((0, 0), (1, 1)), ((0, 0), (0, 2)), ((0, 0), (0, 0)), ((7, 7), (8, 7))],
)
def test_swap_rejected(prev, nxt):
    puzzle = make_puzzle()
    before = cells(puzzle)
    with pytest.raises(PuzzleError):
        puzzle.swap_jewels(prev, nxt)
    assert cells(puzzle) == before


def test_update_without_chains_changes_nothing():
    puzzle = make_puzzle()
    before = cells(puzzle)
    assert puzzle.update() is False
    assert cells(puzzle) == before


def test_horizontal_chain_cleared_then_refilled():
    puzzle = make_puzzle()
    for c in range(3):
        puzzle.set_jewel((3, c), Jewel.RED)
    before = cells(puzzle)

    assert puzzle.update() is True
    cleared = cells(puzzle)
    empties = [(r, c) for r in range(8) for c in range(8) if cleared[r][c] is Jewel.NONE]
    assert empties == [(3, 0), (3, 1), (3, 2)]

    assert puzzle.update() is True
    filled = cells(puzzle)
    assert all(j is not Jewel.NONE for row in filled for j in row)
    for c in range(3):
        for r in range(3):
            assert filled[r + 1][c] is before[r][c]
        for r in range(4, 8):
            assert filled[r][c] is before[r][c]
    for c in range(3, 8):
        assert [filled[r][c] for r in range(8)] == [before[r][c] for r in range(8)]


def test_vertical_chain_cleared():
    puzzle = make_puzzle()
    for r in range(5, 8):
        puzzle.set_jewel((r, 6), Jewel.GREEN)
    assert puzzle.update() is True
    assert [puzzle.get_jewel((r, 6)) for r in range(5, 8)] == [Jewel.NONE] * 3


def test_cascade_terminates_with_full_board():
    puzzle = Puzzle(8, 8, random.Random(7))
    puzzle.randomize()
    steps = 0
    while puzzle.update():
        steps += 1
        assert steps < 10_000
    assert puzzle.update() is False
    board = cells(puzzle)
    assert all(j is not Jewel.NONE for row in board for j in row)
    for r in range(8):
        for c in range(6):
            assert not (board[r][c] == board[r][c + 1] == board[r][c + 2])
    for c in range(8):
        for r in range(6):
            assert not (board[r][c] == board[r + 1][c] == board[r + 2][c])


def test_randomize_is_seeded_and_full():
    first = Puzzle(8, 8, random.Random(3))
    second = Puzzle(8, 8, random.Random(3))
    first.randomize()
    second.randomize()
    assert cells(first) == cells(second)
    assert all(j is not Jewel.NONE for row in cells(first) for j in row)