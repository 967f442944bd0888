"""Error types raised by geometry construction and predicates."""


class GeometryError(ValueError):
    """Raised for invalid or impossible geometry operations."""


class NotEnoughPoints(GeometryError):
    """A polygon was given fewer points than a closed ring needs."""


class RingNotClosed(GeometryError):
    """A polygon's first and last points are not equal."""


class UnsupportedGeometry(GeometryError, TypeError):
    """An intersection was requested against a type that is not handled."""


class UndefinedAngle(GeometryError):
    """An angle was requested against a zero-length vector."""
