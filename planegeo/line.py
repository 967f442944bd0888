"""Line: a finite segment between two Points."""
import math

from .point import Point, as_point
from .errors import UnsupportedGeometry
from .constants import PARAM_TOLERANCE, PARAM_MIN, PARAM_MAX


class Line:
    """A closed segment from start to end. start may equal end."""

    __slots__ = ("start", "end")

    def __init__(self, start: Point, end: Point):
        self.start = as_point(start)
        self.end = as_point(end)

    def __repr__(self) -> str:
        return f"Line({self.start!r}, {self.end!r})"

    def set_start(self, start: Point) -> "Line":
        self.start = as_point(start)
        return self

    def set_end(self, end: Point) -> "Line":
        self.end = as_point(end)
        return self

    def points(self) -> list[Point]:
        return [self.start, self.end]

    # ============================================================
    # Derived scalars
    # ============================================================
    def dx(self) -> float:
        return self.end.x - self.start.x

    def dy(self) -> float:
        return self.end.y - self.start.y

    def determinant(self) -> float:
        """start.x*end.y - start.y*end.x"""
        return self.start.x*self.end.y - self.start.y*self.end.x

    def slope(self) -> float:
        """dy/dx, or +inf for a vertical (or zero-length) segment."""
        dx = self.dx()
        return self.dy()/dx if dx != 0 else math.inf

    def length(self) -> float:
        return self.start.euclidean_distance(self.end)

    # ============================================================
    # Intersection predicates
    # ============================================================
    def intersects_point(self, point: Point) -> bool:
        """True if point lies on the segment.

        The point is located parametrically as start + t*(dx, dy), with
        tx and ty computed per axis (0 where that axis has no extent).
        Horizontal and vertical segments are checked on their one axis;
        slanted segments need tx and ty to agree.
        """
        dx = self.dx(); dy = self.dy()
        tx = (point.x - self.start.x)/dx if dx != 0 else 0.0
        ty = (point.y - self.start.y)/dy if dy != 0 else 0.0

        if tx == 0 and ty == 0:
            return point.is_equal(self.start)
        if dy == 0:
            return point.y == self.start.y and PARAM_MIN <= tx <= PARAM_MAX
        if dx == 0:
            return point.x == self.start.x and PARAM_MIN <= ty <= PARAM_MAX
        return abs(tx - ty) <= PARAM_TOLERANCE and PARAM_MIN <= tx <= PARAM_MAX

    def intersect_line(self, other: "Line") -> bool:
        """Segment/segment intersection via Cramer's rule.

        Parallel and collinear segments (zero determinant) intersect when
        any endpoint of one lies on the other.
        """
        a1 = self.dx(); a2 = self.dy()
        b1 = -other.dx(); b2 = -other.dy()
        c1 = other.start.x - self.start.x
        c2 = other.start.y - self.start.y

        d = a1*b2 - a2*b1
        if d == 0:
            return (self.start.intersects(other)
                    or self.end.intersects(other)
                    or other.start.intersects(self)
                    or other.end.intersects(self))

        s = (c1*b2 - c2*b1)/d
        t = (a1*c2 - a2*c1)/d
        return PARAM_MIN <= s <= PARAM_MAX and PARAM_MIN <= t <= PARAM_MAX

    # ============================================================
    # Geometry capability
    # ============================================================
    def area(self) -> float:
        return 0.0

    def intersects(self, other) -> bool:
        """Dispatch on Point or Line.

        Polygons are not handled here; ask the Polygon instead.
        """
        if isinstance(other, Point):
            return self.intersects_point(other)
        if isinstance(other, Line):
            return self.intersect_line(other)
        raise UnsupportedGeometry(f"Line cannot intersect {type(other).__name__}")
