"""Window widgets: buttons, image buttons, text boxes and button menus."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from PIL import Image as PILImage

from bejewel.geometry import Point

if TYPE_CHECKING:
    from bejewel.window import Window

Callback = Callable[["Widget", Any], None]

_DIGITS = "0123456789"


def parse_int(text: str) -> int:
    """Read the run of decimal digits that ``text`` starts with.

    Raises ValueError when the text does not start with a digit.
    """
    digits = ""
    for char in text:
        if char not in _DIGITS:
            break
        digits += char
    if not digits:
        raise ValueError(f"not a number: {text!r}")
    return int(digits)


def _image_size(path: str) -> tuple[int, int]:
    try:
        with PILImage.open(path) as picture:
            return picture.size
    except OSError:
        return 0, 0


class Widget:
    """An interactive element placed in a window."""

    def __init__(
        self,
        loc: Point,
        width: int,
        height: int,
        label: str = "",
        callback: Callback | None = None,
    ):
        self.loc = loc
        self.width = width
        self.height = height
        self.label = label
        self.callback = callback
        self.owner: Window | None = None
        self.visible = False

    def _require_attached(self) -> None:
        if self.owner is None:
            raise RuntimeError("widget is not attached to a window")

    def move(self, dx: int, dy: int) -> None:
        """Shift the widget by (dx, dy)."""
        self.hide()
        self.loc = self.loc + Point(dx, dy)
        self.show()

    def hide(self) -> None:
        """Make the widget invisible."""
        self._require_attached()
        self.visible = False

    def show(self) -> None:
        """Make the widget visible."""
        self._require_attached()
        self.visible = True

    def attach(self, window: Window) -> None:
        """Place the widget in ``window`` and show it."""
        self.owner = window
        self.visible = True


class Button(Widget):
    """A labelled push button."""

    def press(self) -> None:
        """Act as if the user clicked the button."""
        self._require_attached()
        if self.callback is not None:
            self.callback(self, self.owner)


class ImageButton(Button):
    """A push button showing a picture; its size is the picture's size."""

    def __init__(self, loc: Point, image_path: str, callback: Callback | None = None):
        width, height = _image_size(image_path)
        super().__init__(loc, width, height, image_path, callback)
        self.image_path = image_path

    def update_image(self, image_path: str) -> None:
        """Show another picture, resizing the button to fit it."""
        if image_path == self.image_path:
            return
        self.width, self.height = _image_size(image_path)
        self.image_path = image_path


class InBox(Widget):
    """A one-line text entry field."""

    def __init__(self, loc: Point, width: int, height: int, label: str = ""):
        super().__init__(loc, width, height, label)
        self.value = ""

    def get_int(self) -> int:
        """Return the leading number typed in the box."""
        return parse_int(self.value)

    def get_string(self) -> str:
        """Return the text typed in the box."""
        return self.value


class OutBox(Widget):
    """A one-line read-only text field."""

    def __init__(self, loc: Point, width: int, height: int, label: str = ""):
        super().__init__(loc, width, height, label)
        self.value = ""

    def put(self, value: int | str) -> None:
        """Display ``value``."""
        self.value = str(value)


class Menu(Widget):
    """A row or column of equally sized buttons."""

    class Kind(Enum):
        HORIZONTAL = "horizontal"
        VERTICAL = "vertical"

    def __init__(self, loc: Point, width: int, height: int, kind: Menu.Kind, label: str = ""):
        super().__init__(loc, width, height, label)
        self.kind = Menu.Kind(kind)
        self.offset = 0
        self.selection: list[Button] = []

    def add_button(self, button: Button) -> int:
        """Size and place ``button`` after the others; return its index."""
        button.width = self.width
        button.height = self.height
        if self.kind is Menu.Kind.HORIZONTAL:
            button.loc = Point(self.loc.x + self.offset, self.loc.y)
            self.offset += button.width
        else:
            button.loc = Point(self.loc.x, self.loc.y + self.offset)
            self.offset += button.height
        self.selection.append(button)
        return len(self.selection) - 1

    def show(self) -> None:
        for button in self.selection:
            button.show()

    def hide(self) -> None:
        for button in self.selection:
            button.hide()

    def move(self, dx: int, dy: int) -> None:
        for button in self.selection:
            button.move(dx, dy)

    def attach(self, window: Window) -> None:
        """Attach every button of the menu to ``window``."""
        for button in self.selection:
            window.attach(button)
        self.owner = window