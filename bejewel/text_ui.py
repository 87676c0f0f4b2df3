"""Text console front end for the jewel puzzle."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from typing import Sequence, TextIO

from bejewel.puzzle import Puzzle, PuzzleError, jewel_letter

PREDEFINED_PUZZLES = [
    "!#!&%*&@&!@&!!@#!@$$**%!&!&&!##&#*@$&@$%%$$*&*@$##$#@$%@#$&#%$@#",
    "#!%%@%!&@*%!&@&!#*$$%%%&#*$#@$@!$%$@%@&!%$&%&@*%*$&&*&#!$$&*$#*!",
    "*@&*@#%%&%%&!$!*%#%*!*##*$$###*$$!#&&@*$$@#&#$&$$#!!!**@##@@@!!!",
    "$#@!%@$#$&$&!!*@@!$$@$!&*@**&$&@$!#*@&*@&###!@@%&@&!%&&%##$#@@&$",
]

NEW_RANDOM = 1
PREDEFINED = 2
EXIT = 3

_NOT_AN_INTEGER = "An integer value must be entered."
_BAD_SWAP = "That is not a valid move."


def render_board(puzzle: Puzzle) -> str:
    """Return the board as text with column numbers on top and row numbers down the side."""
    columns = puzzle.num_columns
    lines = [
        "   " + " ".join(str(c) for c in range(columns)),
        "  +" + "-" * (2 * columns - 1),
    ]
    for r in range(puzzle.num_rows):
        row = "".join(jewel_letter(puzzle.get_jewel((r, c))) + " " for c in range(columns))
        lines.append(f"{r} |{row}")
    return "\n".join(lines) + "\n\n"


class TextPuzzle(Puzzle):
    """A puzzle played through menus and coordinates typed on a console."""

    def __init__(
        self,
        num_rows: int = 8,
        num_columns: int = 8,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
    ):
        super().__init__(num_rows, num_columns, rng)
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens: deque[str] = deque()

    def print_board(self) -> None:
        """Write the current board to the output stream."""
        self._out.write(render_board(self))

    def initial_screen(self, predefined_puzzles: Sequence[str]) -> int:
        """Show the main menu until a valid choice is made, act on it and return it."""
        while True:
            try:
                return self._main_menu(predefined_puzzles)
            except PuzzleError as exc:
                self._write(f"{exc}\n\n")

    def swap_screen(self) -> bool:
        """Ask for two positions and swap them; return False when all four are zero."""
        while True:
            try:
                return self._swap_once()
            except PuzzleError as exc:
                self._write(f"{exc}\n\n")

    def _main_menu(self, predefined_puzzles: Sequence[str]) -> int:
        self._write("<<< BEJEWELED >>>\n\n")
        self._write("[1] Start a new random puzzle\n")
        self._write("[2] Start a pre-defined random puzzle\n")
        self._write("[3] Exit\n\n")
        self._write("> Choose a menu option (1~3): ")
        choice = self._read_int(newline_after=True)
        if choice not in (NEW_RANDOM, PREDEFINED, EXIT):
            raise PuzzleError("An integer between 1 and 3 must be entered.")

        if choice == NEW_RANDOM:
            self.randomize()
            self._show_cascade()
        elif choice == PREDEFINED:
            last = len(predefined_puzzles) - 1
            self._write(f">Choose a puzzle option (0~{last}): ")
            index = self._read_int(newline_after=True)
            if not 0 <= index <= last:
                raise PuzzleError(f"An integer between 0 and {last} must be entered.")
            self.initialize(predefined_puzzles[index])
            self._show_cascade()
        return choice

    def _swap_once(self) -> bool:
        self._write("input the first swap position (row, col):")
        first_x, first_y = self._read_int(), self._read_int()
        self._write("\n")
        self._write("input the second swap position (row, col):")
        second_x, second_y = self._read_int(), self._read_int(newline_after=True)

        if first_x == first_y == second_x == second_y == 0:
            return False
        try:
            self.swap_jewels((first_y, first_x), (second_y, second_x))
        except PuzzleError as exc:
            raise PuzzleError(_BAD_SWAP) from exc
        self._show_cascade()
        return True

    def _show_cascade(self) -> None:
        self.print_board()
        while self.update():
            self.print_board()

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _next_token(self) -> str:
        while not self._tokens:
            line = self._in.readline()
            if not line:
                raise EOFError("input ended")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def _read_int(self, newline_after: bool = False) -> int:
        token = self._next_token()
        try:
            value = int(token)
        except ValueError:
            self._tokens.clear()
            if newline_after:
                self._write("\n")
            raise PuzzleError(_NOT_AN_INTEGER) from None
        if newline_after:
            self._write("\n")
        return value


def main(argv: Sequence[str] | None = None) -> int:
    """Run the console game until the player picks Exit or input ends."""
    parser = argparse.ArgumentParser(prog="bejewel", description="Play the jewel puzzle on a console.")
    parser.parse_args(argv)

    game = TextPuzzle(8, 8)
    try:
        choice = game.initial_screen(PREDEFINED_PUZZLES)
        while choice != EXIT:
            while game.swap_screen():
                pass
            choice = game.initial_screen(PREDEFINED_PUZZLES)
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())