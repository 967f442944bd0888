"""Polygon: a closed ring of Points, validated once at construction."""
import numpy as np

from .point import Point, as_point
from .line import Line
from .errors import NotEnoughPoints, RingNotClosed, UnsupportedGeometry
from .constants import MIN_POLYGON_POINTS


class Polygon:
    """Closed ring whose first and last points are equal.

    Raises NotEnoughPoints for fewer than MIN_POLYGON_POINTS points and
    RingNotClosed when the ring is open. Accepts Points or (x, y) pairs;
    Points are copied so later caller mutation cannot open the ring.
    """

    __slots__ = ("points",)

    def __init__(self, points):
        pts = [as_point(p).copy() for p in points]
        if len(pts) < MIN_POLYGON_POINTS:
            raise NotEnoughPoints(
                f"Polygon needs at least {MIN_POLYGON_POINTS} points, got {len(pts)}")
        if not pts[0].is_equal(pts[-1]):
            raise RingNotClosed(
                f"First and last points differ: {pts[0]!r} != {pts[-1]!r}")
        self.points = pts

    def __repr__(self) -> str:
        return f"Polygon({self.points!r})"

    def lines(self) -> list[Line]:
        """Boundary edges between consecutive ring points."""
        return [Line(self.points[i], self.points[i+1]) for i in range(len(self.points) - 1)]

    def as_array(self) -> np.ndarray:
        """Ring vertices (closing point included) as an (n, 2) float array."""
        return np.array([p.get_x_and_y() for p in self.points], dtype=float)

    # ============================================================
    # Measures
    # ============================================================
    def area(self) -> float:
        """Area via the shoelace formula. Works for either winding order."""
        v = self.as_array(); x = v[:, 0]; y = v[:, 1]
        a = np.dot(x[:-1], y[1:]) - np.dot(x[1:], y[:-1])
        return float(abs(a))/2

    def perimeter(self) -> float:
        return sum(edge.length() for edge in self.lines())

    # ============================================================
    # Containment and intersection
    # ============================================================
    def contains_point(self, point: Point) -> bool:
        """Point-in-polygon, boundary inclusive.

        Boundary points are detected with the segment test; everything else
        is decided by even-odd ray casting toward +x.
        """
        edges = self.lines()
        if any(edge.intersects_point(point) for edge in edges):
            return True
        inside = False
        for edge in edges:
            x1, y1 = edge.start.get_x_and_y(); x2, y2 = edge.end.get_x_and_y()
            if (y1 <= point.y < y2) or (y2 <= point.y < y1):
                t = (point.y - y1)/(y2 - y1)
                if x1 + t*(x2 - x1) > point.x:
                    inside = not inside
        return inside

    def intersects_line(self, line: Line) -> bool:
        """True if line crosses the boundary or lies wholly inside."""
        if any(edge.intersect_line(line) for edge in self.lines()):
            return True
        return self.contains_point(line.start)

    def intersects_polygon(self, other: "Polygon") -> bool:
        """True if the boundaries cross or either polygon contains the other."""
        others = other.lines()
        for edge in self.lines():
            if any(edge.intersect_line(o) for o in others):
                return True
        # no crossings: one ring is either wholly inside the other or disjoint
        return self.contains_point(other.points[0]) or other.contains_point(self.points[0])

    def intersects(self, other) -> bool:
        if isinstance(other, Point):
            return self.contains_point(other)
        if isinstance(other, Line):
            return self.intersects_line(other)
        if isinstance(other, Polygon):
            return self.intersects_polygon(other)
        raise UnsupportedGeometry(f"Polygon cannot intersect {type(other).__name__}")
