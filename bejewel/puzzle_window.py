"""Graphical front end: a grid of jewel image buttons driven by timers."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

from bejewel.geometry import Point
from bejewel.puzzle import Jewel, Puzzle, PuzzleError
from bejewel.widgets import ImageButton, Widget
from bejewel.window import Window, add_timeout, gui_main, remove_timeout

_IMAGE_FILES = {
    Jewel.RED: "Bejeweled_Red_Gem.jpg",
    Jewel.ORANGE: "Bejeweled_Orange_Gem.jpg",
    Jewel.YELLOW: "Bejeweled_Yellow_Gem.jpg",
    Jewel.GREEN: "Bejeweled_Green_Gem.jpg",
    Jewel.BLUE: "Bejeweled_Blue_Gem.jpg",
    Jewel.PURPLE: "Bejeweled_Purple_Gem.jpg",
    Jewel.WHITE: "Bejeweled_White_Gem.jpg",
}

TICK_SECONDS = 0.5


def image_path_for(jewel: Jewel) -> str | None:
    """Return the image file name for ``jewel``, or None for an empty cell."""
    return _IMAGE_FILES.get(Jewel(jewel))


def button_location(index: int, num_columns: int, num_buttons: int) -> tuple[int, int]:
    """Return the ``(row, column)`` of the button at ``index``."""
    if not 0 <= index < num_buttons:
        raise IndexError(f"button index {index} out of range")
    return divmod(index, num_columns)


class PuzzleController:
    """Turns button presses and timer ticks into puzzle moves."""

    def __init__(self, puzzle: Puzzle):
        self.puzzle = puzzle
        self.num_buttons = puzzle.num_rows * puzzle.num_columns
        self.pressed: list[tuple[int, int]] = []

    def press(self, index: int) -> bool:
        """Record a press; on every second press try the swap and return True."""
        self.pressed.append(button_location(index, self.puzzle.num_columns, self.num_buttons))
        if len(self.pressed) < 2:
            return False
        prev_loc, next_loc = self.pressed
        self.pressed.clear()
        try:
            self.puzzle.swap_jewels(prev_loc, next_loc)
        except PuzzleError:
            pass
        return True

    def tick(self) -> bool:
        """Advance the board one step; False once it has settled."""
        return self.puzzle.update()

    def image_paths(self) -> list[str | None]:
        """Return the image file of each button, in button order."""
        columns = self.puzzle.num_columns
        return [
            image_path_for(self.puzzle.get_jewel(button_location(i, columns, self.num_buttons)))
            for i in range(self.num_buttons)
        ]


class PuzzleWindow(Window):
    """A window showing the puzzle as a grid of jewel image buttons.

    The directory of the jewel images and the timer interval are taken from
    the class attributes ``image_dir`` and ``tick_interval``.
    """

    image_dir: str = "."
    tick_interval: float = TICK_SECONDS

    def __init__(
        self,
        xy: Point,
        width: int,
        height: int,
        num_rows: int,
        num_columns: int,
        title: str,
    ):
        super().__init__(width, height, title, xy=xy)
        puzzle = Puzzle(num_rows, num_columns)
        puzzle.randomize()
        self.controller = PuzzleController(puzzle)

        size = max(width / num_columns, height / num_rows)
        self.buttons: list[ImageButton] = []
        for index, name in enumerate(self.controller.image_paths()):
            row, column = divmod(index, num_columns)
            x = int(width / 2 - (size * num_columns) / 2 + column * size)
            y = int(row * size)
            button = ImageButton(Point(x, y), self._full_path(name), self._on_jewel)
            self.attach(button)
            self.buttons.append(button)

        add_timeout(self.tick_interval, self._on_timer)

    def _full_path(self, name: str | None) -> str:
        return os.path.join(self.image_dir, name) if name else ""

    def _on_jewel(self, widget: Widget, window: object) -> None:
        index = next(i for i, b in enumerate(self.buttons) if b is widget)
        if self.controller.press(index):
            self._refresh()
            remove_timeout(self._on_timer)
            add_timeout(self.tick_interval, self._on_timer)

    def _on_timer(self) -> None:
        if self.controller.tick():
            self._refresh()
            add_timeout(self.tick_interval, self._on_timer)

    def _refresh(self) -> None:
        for button, name in zip(self.buttons, self.controller.image_paths()):
            button.update_image(self._full_path(name))

    def close(self) -> None:
        """Stop the timer and take the buttons off the window."""
        remove_timeout(self._on_timer)
        for button in list(self.buttons):
            self.detach(button)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the puzzle window and run the event loop."""
    parser = argparse.ArgumentParser(prog="bejewel-gui", description="Jewel puzzle window.")
    parser.add_argument("--image-dir", default=".", help="directory holding the jewel images")
    args = parser.parse_args(argv)

    class _ConfiguredWindow(PuzzleWindow):
        image_dir = args.image_dir

    _ConfiguredWindow(Point(150, 150), 400, 400, 8, 8, "Bejeweled")
    return gui_main()


if __name__ == "__main__":
    sys.exit(main())