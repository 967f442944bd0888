"""Print area, perimeter and edge summary for a polygon given on the command line.

Usage:
    python -m planegeo.report 0,0 4,0 4,3 0,0

The ring must be closed explicitly: the last coordinate repeats the first.
"""
import sys
import math

from .point import Point
from .polygon import Polygon
from .errors import GeometryError


def parse_coords(args: list[str]) -> list[Point]:
    """Parse "x,y" strings into Points. Raises GeometryError on bad input."""
    pts = []
    for arg in args:
        parts = arg.split(",")
        if len(parts) != 2:
            raise GeometryError(f"Expected x,y but got {arg!r}")
        try:
            pts.append(Point(float(parts[0]), float(parts[1])))
        except ValueError as e:
            raise GeometryError(f"Bad coordinate {arg!r}: {e}") from e
    return pts


def _fmt_slope(m: float) -> str:
    return "vertical" if math.isinf(m) else f"{m:.4f}"


def polygon_report(poly: Polygon) -> list[str]:
    """Human-readable summary lines for poly."""
    out = [
        f"Vertices:  {len(poly.points) - 1}",
        f"Area:      {poly.area():.4f}",
        f"Perimeter: {poly.perimeter():.4f}",
    ]
    for i, edge in enumerate(poly.lines()):
        s = edge.start; e = edge.end
        out.append(f"  E{i:<3d} ({s.x:8.4f}, {s.y:8.4f}) -> ({e.x:8.4f}, {e.y:8.4f})"
                   f"  len {edge.length():8.4f}  slope {_fmt_slope(edge.slope())}")
    return out


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        poly = Polygon(parse_coords(args))
    except GeometryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    for line in polygon_report(poly):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
