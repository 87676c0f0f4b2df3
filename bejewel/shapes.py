"""Drawable shape descriptions: points, colours, styles and line segments."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from itertools import pairwise
from typing import Callable, Iterable

from PIL import Image as PILImage

from bejewel.geometry import Point, line_intersect, line_segment_intersect

Segment = tuple[Point, Point]

_COLOR_NAMES = frozenset({
    "red", "blue", "green", "yellow", "white", "black", "magenta", "cyan",
    "dark_red", "dark_green", "dark_yellow", "dark_blue", "dark_magenta", "dark_cyan",
})

_LINE_STYLES = frozenset({"solid", "dash", "dot", "dashdot", "dashdotdot"})

_FONT_NAMES = frozenset({
    "helvetica", "helvetica_bold", "helvetica_italic", "helvetica_bold_italic",
    "courier", "courier_bold", "courier_italic", "courier_bold_italic",
    "times", "times_bold", "times_italic", "times_bold_italic",
    "symbol", "screen", "screen_bold", "zapf_dingbats",
})

_BAD_IMAGE_SIZE = (30, 20)
_MIN_FONT_SIZE = 14


class ShapeError(ValueError):
    """Raised when a shape is given points or parameters it cannot hold."""


@dataclass(frozen=True)
class Color:
    """A named or indexed colour together with its visibility."""

    value: str | int = "black"
    visible: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.value, str) and self.value not in _COLOR_NAMES:
            raise ShapeError(f"unknown colour {self.value!r}")

    @classmethod
    def invisible(cls) -> Color:
        """Return a colour that draws nothing."""
        return cls(visible=False)

    def with_visibility(self, visible: bool) -> Color:
        """Return this colour with its visibility changed."""
        return replace(self, visible=visible)


@dataclass(frozen=True)
class LineStyle:
    """Dash pattern and width of drawn lines; width 0 means the default."""

    style: str = "solid"
    width: int = 0

    def __post_init__(self) -> None:
        if self.style not in _LINE_STYLES:
            raise ShapeError(f"unknown line style {self.style!r}")


@dataclass(frozen=True)
class Font:
    """A typeface by name."""

    name: str = "helvetica"

    def __post_init__(self) -> None:
        if self.name not in _FONT_NAMES:
            raise ShapeError(f"unknown font {self.name!r}")


class Encoding(Enum):
    """Image file encodings recognised from a file name."""

    NONE = "none"
    JPG = "jpg"
    GIF = "gif"
    BMP = "bmp"


_SUFFIXES = {
    "jpg": Encoding.JPG, "JPG": Encoding.JPG,
    "jpeg": Encoding.JPG, "JPEG": Encoding.JPG,
    "gif": Encoding.GIF, "GIF": Encoding.GIF,
    "bmp": Encoding.BMP, "BMP": Encoding.BMP,
}


def get_encoding(name: str) -> Encoding:
    """Guess the encoding from everything after the first '.' in ``name``."""
    _, dot, suffix = name.partition(".")
    if not dot:
        return Encoding.NONE
    return _SUFFIXES.get(suffix, Encoding.NONE)


class Shape:
    """A sequence of points with line colour, line style and fill colour."""

    def __init__(self, points: Iterable[Point] = ()):
        self.points: list[Point] = list(points)
        self.color = Color()
        self.style = LineStyle()
        self.fill_color = Color.invisible()

    def add(self, point: Point) -> None:
        """Append a point."""
        self.points.append(point)

    def move(self, dx: int, dy: int) -> None:
        """Shift every point by (dx, dy)."""
        offset = Point(dx, dy)
        self.points = [p + offset for p in self.points]

    def segments(self) -> list[Segment]:
        """Return the line segments this shape draws, joining consecutive points."""
        if not self.color.visible:
            return []
        return list(pairwise(self.points))


class Line(Shape):
    """A single line between two points."""

    def __init__(self, p1: Point, p2: Point):
        super().__init__([p1, p2])


class Rectangle(Shape):
    """An axis-aligned rectangle given by its top-left corner and size."""

    def __init__(self, xy: Point, width: int | Point, height: int | None = None):
        super().__init__([xy])
        if isinstance(width, Point):
            corner = width
            self.width, self.height = corner.x - xy.x, corner.y - xy.y
            if self.width <= 0 or self.height <= 0:
                raise ShapeError("Bad rectangle: first point is not top left")
        else:
            if height is None:
                raise ShapeError("Bad rectangle: missing height")
            self.width, self.height = width, height
            if self.width <= 0 or self.height <= 0:
                raise ShapeError("Bad rectangle: non-positive side")

    def segments(self) -> list[Segment]:
        if not self.color.visible:
            return []
        tl = self.points[0]
        tr = tl + Point(self.width, 0)
        br = tl + Point(self.width, self.height)
        bl = tl + Point(0, self.height)
        return [(tl, tr), (tr, br), (br, bl), (bl, tl)]


class OpenPolyline(Shape):
    """An open sequence of connected lines."""


class ClosedPolyline(OpenPolyline):
    """A sequence of connected lines whose last point joins the first."""

    def segments(self) -> list[Segment]:
        result = super().segments()
        if self.color.visible and self.points:
            result.append((self.points[-1], self.points[0]))
        return result


class Polygon(ClosedPolyline):
    """A closed polyline whose sides never cross."""

    def __init__(self, points: Iterable[Point] = ()):
        super().__init__()
        for point in points:
            self.add(point)

    def add(self, point: Point) -> None:
        """Append a point, refusing repeated, collinear or crossing sides."""
        points = self.points
        if len(points) > 1:
            if point == points[-1]:
                raise ShapeError("polygon point equal to previous point")
            if line_intersect(points[-1], point, points[-2], points[-1]) is None:
                raise ShapeError("two polygon points lie in a straight line")
        for a, b in pairwise(points[:-1]):
            if line_segment_intersect(points[-1], point, a, b) is not None:
                raise ShapeError("intersect in polygon")
        super().add(point)

    def segments(self) -> list[Segment]:
        if len(self.points) < 3:
            raise ShapeError("less than 3 points in a Polygon")
        return super().segments()


class Lines(Shape):
    """Independent lines, each given by a pair of points."""

    def __init__(self, points: Iterable[Point] = ()):
        points = list(points)
        if len(points) % 2:
            raise ShapeError("odd number of points for Lines")
        super().__init__(points)

    def add(self, p1: Point, p2: Point) -> None:
        """Append one line from p1 to p2."""
        self.points.extend((p1, p2))

    def segments(self) -> list[Segment]:
        if not self.color.visible:
            return []
        return list(zip(self.points[0::2], self.points[1::2]))


class Text(Shape):
    """A label whose point is the bottom left of its first letter."""

    def __init__(self, xy: Point, label: str):
        super().__init__([xy])
        self.label = label
        self.font = Font()
        self.font_size = _MIN_FONT_SIZE

    def segments(self) -> list[Segment]:
        return []


class Axis(Shape):
    """A horizontal or vertical axis with evenly spaced notches and a label."""

    class Orientation(Enum):
        X = "x"
        Y = "y"
        Z = "z"

    def __init__(
        self,
        orientation: Axis.Orientation,
        xy: Point,
        length: int,
        number_of_notches: int = 0,
        label: str = "",
    ):
        self.label = Text(Point(0, 0), label)
        self.notches = Lines()
        super().__init__()
        if length < 0:
            raise ShapeError("bad axis length")
        orientation = Axis.Orientation(orientation)
        n = number_of_notches
        if orientation is Axis.Orientation.X:
            self.add(xy)
            self.add(Point(xy.x + length, xy.y))
            if n > 1:
                dist = length // n
                for i in range(1, n + 1):
                    x = xy.x + i * dist
                    self.notches.add(Point(x, xy.y), Point(x, xy.y - 5))
            self.label.move(length // 3, xy.y + 20)
        elif orientation is Axis.Orientation.Y:
            self.add(xy)
            self.add(Point(xy.x, xy.y - length))
            if n > 1:
                dist = length // n
                for i in range(1, n + 1):
                    y = xy.y - i * dist
                    self.notches.add(Point(xy.x, y), Point(xy.x + 5, y))
            self.label.move(xy.x - 10, xy.y - length - 10)
        else:
            raise ShapeError("z axis not implemented")

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        self._color = value
        self.notches.color = value
        self.label.color = value

    def move(self, dx: int, dy: int) -> None:
        super().move(dx, dy)
        self.notches.move(dx, dy)
        self.label.move(dx, dy)

    def segments(self) -> list[Segment]:
        return super().segments() + self.notches.segments()


class Circle(Shape):
    """A circle stored by the top-left corner of its bounding box."""

    def __init__(self, center: Point, radius: int):
        super().__init__([Point(center.x - radius, center.y - radius)])
        self.radius = radius

    def center(self) -> Point:
        """Return the centre of the circle."""
        corner = self.points[0]
        return Point(corner.x + self.radius, corner.y + self.radius)


class Ellipse(Shape):
    """An ellipse with horizontal major and vertical minor half-axes."""

    def __init__(self, center: Point, major: int, minor: int):
        super().__init__([Point(center.x - major, center.y - minor)])
        self.major = major
        self.minor = minor

    def center(self) -> Point:
        """Return the centre of the ellipse."""
        corner = self.points[0]
        return Point(corner.x + self.major, corner.y + self.minor)

    def _focal_distance(self) -> int:
        squared = self.major * self.major - self.minor * self.minor
        if squared < 0:
            raise ShapeError("minor axis is longer than major axis")
        return int(math.sqrt(squared))

    def focus1(self) -> Point:
        """Return the focus to the right of the centre."""
        c = self.center()
        return Point(c.x + self._focal_distance(), c.y)

    def focus2(self) -> Point:
        """Return the focus to the left of the centre."""
        c = self.center()
        return Point(c.x - self._focal_distance(), c.y)


class MarkedPolyline(OpenPolyline):
    """An open polyline with a character drawn at each point."""

    def __init__(self, mark: str, points: Iterable[Point] = ()):
        if not mark:
            raise ShapeError("mark must hold at least one character")
        super().__init__(points)
        self.mark = mark

    def marks(self) -> list[tuple[Point, str]]:
        """Return each point with its mark character, cycling through ``mark``."""
        return [(p, self.mark[i % len(self.mark)]) for i, p in enumerate(self.points)]


class Marks(MarkedPolyline):
    """Marked points without connecting lines."""

    def __init__(self, mark: str, points: Iterable[Point] = ()):
        super().__init__(mark, points)
        self.color = Color.invisible()


class Mark(Marks):
    """A single character placed at a single point."""

    def __init__(self, xy: Point, mark: str):
        if len(mark) != 1:
            raise ShapeError("a mark is a single character")
        super().__init__(mark, [xy])


class Function(Shape):
    """Points of f(x) for x in [r1, r2), with (0, 0) shown at ``orig``."""

    def __init__(
        self,
        f: Callable[[float], float],
        r1: float,
        r2: float,
        orig: Point,
        count: int = 100,
        xscale: float = 25,
        yscale: float = 25,
    ):
        super().__init__()
        if r2 - r1 <= 0:
            raise ShapeError("bad graphing range")
        if count <= 0:
            raise ShapeError("non-positive graphing count")
        dist = (r2 - r1) / count
        r = r1
        for _ in range(count):
            self.add(Point(orig.x + int(r * xscale), orig.y - int(f(r) * yscale)))
            r += dist


def _can_open(path: str) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


class Image(Shape):
    """A picture file placed at a point; failures show as a caption."""

    def __init__(self, xy: Point, path: str, encoding: Encoding = Encoding.NONE):
        super().__init__([xy])
        self.path = str(path)
        self.caption = Text(xy, "")
        self.size = _BAD_IMAGE_SIZE
        self.mask: tuple[Point, int, int] | None = None

        if not _can_open(self.path):
            self.caption.label = f'cannot open "{self.path}"'
            return
        if encoding is Encoding.NONE:
            encoding = get_encoding(self.path)
        if encoding not in (Encoding.JPG, Encoding.GIF):
            self.caption.label = f'unsupported file type "{self.path}"'
            return
        try:
            with PILImage.open(self.path) as picture:
                self.size = picture.size
        except OSError:
            self.caption.label = f'cannot read "{self.path}"'
        self.encoding = encoding

    def set_mask(self, xy: Point, width: int, height: int) -> None:
        """Show only the ``width`` x ``height`` part of the picture starting at ``xy``."""
        self.mask = (xy, width, height)

    def segments(self) -> list[Segment]:
        return []