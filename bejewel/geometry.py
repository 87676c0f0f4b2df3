"""Integer points and line intersection helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point with integer screen coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)


def line_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> tuple[float, float] | None:
    """Intersect the lines through (p1, p2) and (p3, p4).

    Returns the intersection as fractions along each line (1.0 is the second
    point of that line), or None when the lines are parallel.
    """
    x1, y1, x2, y2 = float(p1.x), float(p1.y), float(p2.x), float(p2.y)
    x3, y3, x4, y4 = float(p3.x), float(p3.y), float(p4.x), float(p4.y)
    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denom == 0:
        return None
    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom
    return ua, ub


def line_segment_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> Point | None:
    """Return where segment p1-p2 meets segment p3-p4, or None if they do not meet."""
    fractions = line_intersect(p1, p2, p3, p4)
    if fractions is None:
        return None
    ua, ub = fractions
    if not (0 <= ua <= 1 and 0 <= ub <= 1):
        return None
    return Point(int(p1.x + ua * (p2.x - p1.x)), int(p1.y + ua * (p2.y - p1.y)))