# bejewel

A small match-three jewel puzzle. Jewels sit on a grid; three or more of the
same colour in a row or column form a chain. Chains are cleared, the jewels
above fall down and new random jewels drop in from the top, step by step,
until the board settles.

The package holds the puzzle engine, a game played in the terminal, and a
headless model of a graphical board (windows, shapes and widgets that keep
their state but draw nothing on screen).

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing in the terminal

```
bejewel
```

The menu offers three choices:

1. Start a new random puzzle.
2. Start one of the four pre-defined puzzles (choose 0 to 3).
3. Exit.

After a choice the board is printed, and printed again after every step of
clearing and refilling until it settles. You are then asked for two
positions to swap, each as two numbers separated by spaces. The first number
is the column (numbered along the top of the board) and the second the row
(numbered down the left side). Only neighbouring jewels, one step apart
horizontally or vertically, can be swapped. Entering `0 0` for both
positions returns to the menu. Input that is not a number, a menu choice out
of range, or a swap that is not allowed is reported and asked for again.
The game ends on Exit or when input runs out.

Jewels are shown as letters:

| Jewel  | Letter |
|--------|--------|
| red    | `@`    |
| orange | `#`    |
| yellow | `*`    |
| green  | `%`    |
| blue   | `$`    |
| purple | `&`    |
| white  | `!`    |
| empty  | space  |

## The board command

```
bejewel-gui [--image-dir DIR]
```

This builds an 8 × 8 `bejewel.puzzle_window.PuzzleWindow` of image buttons,
one per jewel, looking up the pictures `Bejeweled_Red_Gem.jpg`,
`Bejeweled_Orange_Gem.jpg`, `Bejeweled_Yellow_Gem.jpg`,
`Bejeweled_Green_Gem.jpg`, `Bejeweled_Blue_Gem.jpg`,
`Bejeweled_Purple_Gem.jpg` and `Bejeweled_White_Gem.jpg` in `DIR` (the
current directory by default). It then runs the timer loop, one board step
every half second, until the board has settled, and exits.

### What it does not do

The windows are not drawn on screen and take no mouse input: there is no
display back end. Clicks can only be made from Python, by calling
`press()` on a button, and `bejewel-gui` returns as soon as no timers are
left. To play interactively, use `bejewel`.

## Using the engine from Python

```python
import random

from bejewel.puzzle import Jewel, Puzzle, PuzzleError
from bejewel.text_ui import render_board

puzzle = Puzzle(8, 8, random.Random(1))
puzzle.randomize()

# Each call to update() performs one step: either clearing the chains
# found on the board or letting jewels fall and refilling the gaps.
# It returns False once nothing more happens.
while puzzle.update():
    pass

print(render_board(puzzle))

# Locations are (row, column).
puzzle.swap_jewels((0, 0), (0, 1))
try:
    puzzle.swap_jewels((0, 0), (1, 1))      # diagonal: not allowed
except PuzzleError as exc:
    print(exc)
```

- `Puzzle.initialize(jewel_list)` fills the board row by row from a string
  of jewel letters, one per cell, and raises `PuzzleError` if the length is
  wrong.
- `Puzzle.set_jewel` and `Puzzle.get_jewel` write and read a cell;
  `get_jewel` returns `Jewel.NONE` off the board, `set_jewel` raises
  `PuzzleError`.
- `jewel_letter` and `jewel_from_letter` convert between a `Jewel` and its
  letter; unknown letters give `Jewel.NONE`.

`bejewel.puzzle_window.PuzzleController` pairs button presses into swaps
(`press(index)`), advances the board (`tick()`) and lists the image file of
each cell (`image_paths()`), independent of any window.

## Shapes and widgets

`bejewel.geometry` has an integer `Point` and line and segment intersection.
`bejewel.shapes` describes drawable shapes — `Line`, `Rectangle`,
`OpenPolyline`, `ClosedPolyline`, `Polygon` (which refuses repeated,
collinear or crossing sides), `Lines`, `Text`, `Axis`, `Circle`, `Ellipse`,
`MarkedPolyline`, `Marks`, `Mark`, `Function` and `Image` — each giving the
line segments it would draw through `segments()`. `bejewel.widgets` has
`Button`, `ImageButton`, `InBox`, `OutBox` and `Menu`, and `bejewel.window`
has `Window`, `SimpleWindow`, `ShapeStack` and the timer loop `gui_main()`.