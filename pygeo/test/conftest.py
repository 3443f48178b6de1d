"""Pytest configuration and fixtures for PyGeo tests."""

import pytest

from pygeo import BoundingBox, Point2d


@pytest.fixture
def box():
    """A 10 x 5 box anchored at the origin."""
    return BoundingBox(0.0, 10.0, 0.0, 5.0)


@pytest.fixture
def scatter():
    """A handful of points with no particular order."""
    return [
        Point2d(3.0, -1.0),
        Point2d(-2.5, 4.0),
        Point2d(7.0, 7.5),
        Point2d(0.0, 0.0),
        Point2d(4.25, -3.0),
    ]
