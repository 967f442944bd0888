"""Shared polygon fixtures for planegeo tests."""
import pytest
from planegeo import Polygon


@pytest.fixture(scope="session")
def unit_square():
    """CCW unit square with the closing point repeated."""
    return Polygon([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])


@pytest.fixture(scope="session")
def triangle():
    """3-4-5 right triangle, area 6."""
    return Polygon([(0, 0), (4, 0), (0, 3), (0, 0)])


@pytest.fixture(scope="session")
def l_shape():
    """Concave L: 2x2 square with the NE unit square removed, area 3."""
    return Polygon([(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2), (0, 0)])


@pytest.fixture(scope="session")
def big_square():
    return Polygon([(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)])
