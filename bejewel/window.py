"""Headless windows holding shapes and widgets, and a timer event loop."""

from __future__ import annotations

import heapq
import itertools
import time
from typing import Callable, Iterator

from bejewel.geometry import Point
from bejewel.shapes import Shape
from bejewel.widgets import Button, Widget


class _EventLoop:
    """Timers that run callbacks in due-time order."""

    def __init__(self) -> None:
        self._timers: list[tuple[float, int, Callable[[], None]]] = []
        self._order = itertools.count()

    def add(self, delay: float, callback: Callable[[], None]) -> None:
        due = time.monotonic() + delay
        heapq.heappush(self._timers, (due, next(self._order), callback))

    def remove(self, callback: Callable[[], None]) -> None:
        self._timers = [t for t in self._timers if t[2] != callback]
        heapq.heapify(self._timers)

    def run_once(self) -> bool:
        if not self._timers:
            return False
        due, _, callback = heapq.heappop(self._timers)
        pause = due - time.monotonic()
        if pause > 0:
            time.sleep(pause)
        callback()
        return True


_loop = _EventLoop()


def add_timeout(delay: float, callback: Callable[[], None]) -> None:
    """Run ``callback`` once, ``delay`` seconds from now, inside the event loop."""
    _loop.add(delay, callback)


def remove_timeout(callback: Callable[[], None]) -> None:
    """Cancel every pending run of ``callback``."""
    _loop.remove(callback)


def gui_main() -> int:
    """Run the event loop until no timers are left."""
    while _loop.run_once():
        pass
    return 0


class ShapeStack:
    """Shapes in drawing order; the last one is drawn on top."""

    def __init__(self) -> None:
        self._shapes: list[Shape] = []

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def attach(self, shape: Shape) -> None:
        """Add ``shape`` on top."""
        self._shapes.append(shape)

    def detach(self, shape: Shape) -> None:
        """Remove every occurrence of ``shape``."""
        self._shapes = [s for s in self._shapes if s is not shape]

    def put_on_top(self, shape: Shape) -> None:
        """Move ``shape`` to the top if it is present."""
        for i, s in enumerate(self._shapes):
            if s is shape:
                del self._shapes[i]
                self._shapes.append(shape)
                return


class Window:
    """A window of a given size holding shapes and widgets."""

    def __init__(self, width: int, height: int, title: str = "", *, xy: Point | None = None):
        self.width = width
        self.height = height
        self.title = title
        self.xy = xy
        self.shapes = ShapeStack()
        self.widgets: list[Widget] = []

    @property
    def x_max(self) -> int:
        return self.width

    @property
    def y_max(self) -> int:
        return self.height

    def resize(self, width: int, height: int) -> None:
        """Change the window size."""
        self.width = width
        self.height = height

    def attach(self, item: Shape | Widget) -> None:
        """Show a shape or a widget in this window."""
        if isinstance(item, Widget):
            item.attach(self)
            self.widgets.append(item)
        else:
            self.shapes.attach(item)

    def detach(self, item: Shape | Widget) -> None:
        """Remove a shape, or hide a widget and stop tracking it."""
        if isinstance(item, Widget):
            item.hide()
            self.widgets = [w for w in self.widgets if w is not item]
        else:
            self.shapes.detach(item)

    def put_on_top(self, shape: Shape) -> None:
        """Draw ``shape`` above all other shapes."""
        self.shapes.put_on_top(shape)


class SimpleWindow(Window):
    """A window with a single "Next" button to step through a drawing."""

    def __init__(self, xy: Point, width: int, height: int, title: str = ""):
        super().__init__(width, height, title, xy=xy)
        self.button_pushed = False
        self.next_button = Button(Point(self.x_max - 70, 0), 70, 20, "Next", self._on_next)
        self.attach(self.next_button)

    def _on_next(self, widget: Widget, window: object) -> None:
        self.button_pushed = True

    def wait_for_button(self) -> None:
        """Process events until the "Next" button has been pressed."""
        while not self.button_pushed:
            if not _loop.run_once():
                raise RuntimeError("no events left while waiting for the button")
        self.button_pushed = False