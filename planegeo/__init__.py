"""2D geometry primitives: points, segments, closed polygons."""

from .types import Coord
from .errors import (
    GeometryError, NotEnoughPoints, RingNotClosed,
    UnsupportedGeometry, UndefinedAngle,
)
from .point import Point, as_point
from .line import Line
from .polygon import Polygon
from .geometry import Geometry, GEOMETRY_TYPES, intersects
