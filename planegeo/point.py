"""Point: a 2D coordinate with vector-style operations."""
import math

from .types import Coord
from .errors import GeometryError, UnsupportedGeometry, UndefinedAngle


class Point:
    """A single point in 2D space.

    Coordinates are stored as floats so that equality is exact and does
    not depend on whether the caller passed ints or floats.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.is_equal(other)

    __hash__ = None  # mutable via set_x / set_y

    def __iter__(self):
        yield self.x
        yield self.y

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def set_x(self, x: float) -> "Point":
        self.x = float(x)
        return self

    def set_y(self, y: float) -> "Point":
        self.y = float(y)
        return self

    def get_x_and_y(self) -> Coord:
        return (self.x, self.y)

    # ============================================================
    # Comparison and vector measures
    # ============================================================
    def is_equal(self, other: "Point") -> bool:
        """Exact coordinate equality, no tolerance."""
        return self.x == other.x and self.y == other.y

    def magnitude(self) -> float:
        """Length of the vector from the origin to this point."""
        return math.sqrt(self.x**2 + self.y**2)

    def dot_product(self, other: "Point") -> float:
        return self.x*other.x + self.y*other.y

    def cross_product(self, p2: "Point", p3: "Point") -> float:
        """Signed doubled area of the triangle self -> p2 -> p3.

        Positive for a counter-clockwise turn, negative for clockwise,
        zero when the three points are collinear.
        """
        return ((p2.x - self.x)*(p3.y - self.y)
                - (p2.y - self.y)*(p3.x - self.x))

    def euclidean_distance(self, other: "Point") -> float:
        return math.sqrt((other.x - self.x)**2 + (other.y - self.y)**2)

    def get_angle(self, other: "Point", in_degrees: bool = True) -> float:
        """Angle between the two position vectors, in [0, 180] degrees.

        Raises UndefinedAngle if either vector has zero magnitude.
        """
        m1 = self.magnitude(); m2 = other.magnitude()
        if m1 == 0 or m2 == 0:
            raise UndefinedAngle(f"Angle undefined for zero vector: {self!r}, {other!r}")
        cos_a = self.dot_product(other) / (m1*m2)
        # rounding can push parallel vectors just past +/-1
        rad = math.acos(max(-1.0, min(1.0, cos_a)))
        return math.degrees(rad) if in_degrees else rad

    def to_radians(self) -> "Point":
        """Treat both components as degrees and convert them to radians."""
        return Point(math.radians(self.x), math.radians(self.y))

    def to_degrees(self) -> "Point":
        """Treat both components as radians and convert them to degrees."""
        return Point(math.degrees(self.x), math.degrees(self.y))

    # ============================================================
    # Geometry capability
    # ============================================================
    def area(self) -> float:
        return 0.0

    def intersects_point(self, other: "Point") -> bool:
        return self.is_equal(other)

    def intersects_line(self, line) -> bool:
        return line.intersects_point(self)

    def intersects(self, other) -> bool:
        """Point/Point equality or Point/Line containment.

        Raises UnsupportedGeometry for any other operand, Polygon included.
        """
        from .line import Line

        if isinstance(other, Point):
            return self.intersects_point(other)
        if isinstance(other, Line):
            return self.intersects_line(other)
        raise UnsupportedGeometry(f"Point cannot intersect {type(other).__name__}")


def as_point(p) -> Point:
    """Return p unchanged if it is a Point, else build one from an (x, y) pair."""
    if isinstance(p, Point):
        return p
    if isinstance(p, str):
        raise GeometryError(f"Not a point: {p!r}")
    try:
        x, y = p
        return Point(x, y)
    except (TypeError, ValueError) as e:
        raise GeometryError(f"Not a point: {p!r}") from e
