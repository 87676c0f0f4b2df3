"""Board model for a match-three jewel puzzle."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

Location = tuple[int, int]


class Jewel(IntEnum):
    """Kinds of jewel that can sit in a board cell."""

    NONE = -1
    RED = 0
    ORANGE = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    PURPLE = 5
    WHITE = 6


_JEWEL_KINDS = 7

_LETTERS = {
    Jewel.NONE: " ",
    Jewel.RED: "@",
    Jewel.ORANGE: "#",
    Jewel.YELLOW: "*",
    Jewel.GREEN: "%",
    Jewel.BLUE: "$",
    Jewel.PURPLE: "&",
    Jewel.WHITE: "!",
}

_FROM_LETTER = {letter: jewel for jewel, letter in _LETTERS.items()}


def jewel_letter(jewel: Jewel) -> str:
    """Return the single character that represents ``jewel`` in text form."""
    return _LETTERS[Jewel(jewel)]


def jewel_from_letter(letter: str) -> Jewel:
    """Return the jewel drawn as ``letter``; unknown letters give ``Jewel.NONE``."""
    return _FROM_LETTER.get(letter, Jewel.NONE)


class PuzzleError(ValueError):
    """Raised when a board operation is given an invalid argument."""


@dataclass(frozen=True)
class Chain:
    """A straight run of three or more equal jewels.

    ``start`` and ``end`` are ``(column, row)`` pairs, both inclusive.
    """

    jewel: Jewel
    start: tuple[int, int]
    end: tuple[int, int]


class Puzzle:
    """A grid of jewels that clears runs of three and drops new jewels in."""

    def __init__(self, num_rows: int, num_columns: int, rng: random.Random | None = None):
        self.num_rows = num_rows
        self.num_columns = num_columns
        self._rng = rng if rng is not None else random.Random()
        self._grid = [[Jewel.NONE] * num_columns for _ in range(num_rows)]
        self._clear_phase = True
        self._chains: list[Chain] = []

    def initialize(self, jewel_list: str) -> None:
        """Fill the board row by row from a string of jewel letters."""
        expected = self.num_rows * self.num_columns
        if len(jewel_list) != expected:
            raise PuzzleError(
                f"jewel list must hold {expected} letters, got {len(jewel_list)}"
            )
        letters = iter(jewel_list)
        for row in self._grid:
            for x in range(self.num_columns):
                row[x] = jewel_from_letter(next(letters))

    def randomize(self) -> None:
        """Fill every cell with a random jewel."""
        for row in self._grid:
            for x in range(self.num_columns):
                row[x] = self._random_jewel()

    def update(self) -> bool:
        """Advance one step: alternately clear chains and refill the board.

        Returns True while something on the board changed.
        """
        if self._clear_phase:
            self._identify_chains()
            if self._clear_chains():
                self._clear_phase = False
                return True
            return False

        changed = self._fill_jewels()
        if changed:
            self._clear_phase = True
        self._chains.clear()
        return changed

    def is_valid(self, loc: Location) -> bool:
        """Tell whether ``(row, column)`` lies on the board."""
        row, column = loc
        return 0 <= row < self.num_rows and 0 <= column < self.num_columns

    def swap_jewels(self, prev_loc: Location, next_loc: Location) -> None:
        """Swap two orthogonally adjacent jewels given as ``(row, column)``."""
        if not self.is_valid(prev_loc) or not self.is_valid(next_loc):
            raise PuzzleError("swap position is off the board")
        dr = abs(next_loc[0] - prev_loc[0])
        dc = abs(next_loc[1] - prev_loc[1])
        if (dr, dc) not in ((1, 0), (0, 1)):
            raise PuzzleError("jewels to swap must be adjacent")
        (r1, c1), (r2, c2) = prev_loc, next_loc
        self._grid[r1][c1], self._grid[r2][c2] = self._grid[r2][c2], self._grid[r1][c1]

    def set_jewel(self, loc: Location, jewel: Jewel) -> None:
        """Put ``jewel`` at ``(row, column)``."""
        if not self.is_valid(loc):
            raise PuzzleError(f"location {loc} is off the board")
        row, column = loc
        self._grid[row][column] = Jewel(jewel)

    def get_jewel(self, loc: Location) -> Jewel:
        """Return the jewel at ``(row, column)``, or ``Jewel.NONE`` off the board."""
        if not self.is_valid(loc):
            return Jewel.NONE
        row, column = loc
        return self._grid[row][column]

    def _random_jewel(self) -> Jewel:
        return Jewel(self._rng.randrange(_JEWEL_KINDS))

    def _on_board(self, x: int, y: int) -> bool:
        return 0 <= x < self.num_columns and 0 <= y < self.num_rows

    def _identify_chains(self) -> None:
        for y, row in enumerate(self._grid):
            for x, jewel in enumerate(row):
                if jewel != Jewel.NONE:
                    self._create_chains(x, y, jewel)

    def _create_chains(self, x: int, y: int, jewel: Jewel) -> None:
        across = self._count_run(x, y, jewel, 1, 0)
        if across >= 3:
            self._chains.append(Chain(jewel, (x, y), (x + across - 1, y)))
        down = self._count_run(x, y, jewel, 0, 1)
        if down >= 3:
            self._chains.append(Chain(jewel, (x, y), (x, y + down - 1)))

    def _count_run(self, x: int, y: int, jewel: Jewel, dx: int, dy: int) -> int:
        count = 1
        nx, ny = x + dx, y + dy
        while self._on_board(nx, ny) and self._grid[ny][nx] == jewel:
            count += 1
            nx += dx
            ny += dy
        return count

    def _clear_chains(self) -> bool:
        for chain in self._chains:
            (start_x, start_y), (end_x, end_y) = chain.start, chain.end
            for y in range(start_y, end_y + 1):
                for x in range(start_x, end_x + 1):
                    self._grid[y][x] = Jewel.NONE
        return bool(self._chains)

    def _fill_jewels(self) -> bool:
        changed = False
        for x in range(self.num_columns):
            empty = 0
            for y in reversed(range(self.num_rows)):
                if self._grid[y][x] == Jewel.NONE:
                    empty += 1
                    changed = True
                elif empty:
                    self._grid[y + empty][x] = self._grid[y][x]
            for y in range(empty):
                self._grid[y][x] = self._random_jewel()
        return changed