"""Named numeric constants for the geometry predicates.

Tolerances are unitless unless noted.
"""

# Parametric positions along a segment
PARAM_TOLERANCE = 1e-6            # max |tx - ty| for a point to lie on a slanted segment
PARAM_MIN = 0.0                   # segment start
PARAM_MAX = 1.0                   # segment end

# Polygon validation
MIN_POLYGON_POINTS = 3            # closed ring incl. repeated first point
