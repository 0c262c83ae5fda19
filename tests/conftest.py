import pytest

from differentia import Point


@pytest.fixture
def square_points():
    """y = x² sampled at x = 0..4."""
    return [Point(float(x), float(x * x)) for x in range(5)]


@pytest.fixture
def zigzag_points():
    """Five points with no polynomial pattern below degree 4."""
    return [(0, 1), (1, 3), (2, 2), (3, 5), (4, 4)]


@pytest.fixture
def doubling_points():
    """y = 2^x sampled at x = 0..3."""
    return [(0, 1), (1, 2), (2, 4), (3, 8)]
