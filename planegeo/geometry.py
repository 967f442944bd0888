"""The Geometry union and a symmetric intersection helper."""
from .point import Point
from .line import Line
from .polygon import Polygon
from .errors import UnsupportedGeometry

Geometry = Point | Line | Polygon
GEOMETRY_TYPES = (Point, Line, Polygon)


def intersects(a: Geometry, b: Geometry) -> bool:
    """Intersection test for any pair of geometries, in either order.

    Point and Line do not handle Polygon operands themselves, so a Polygon
    operand always drives the test.
    """
    for g in (a, b):
        if not isinstance(g, GEOMETRY_TYPES):
            raise UnsupportedGeometry(f"Not a geometry: {type(g).__name__}")
    if isinstance(b, Polygon) and not isinstance(a, Polygon):
        return b.intersects(a)
    return a.intersects(b)
