"""
PyGeo - axis-aligned 2D bounding boxes
"""

__version__ = "0.1.0"

import logging

# Library loggers stay silent unless the host application configures logging
logging.getLogger("Geo").addHandler(logging.NullHandler())

from pygeo.src.geomath import Vector2r, Vector4r, Real, INF, NAN, ROUGH_TOLERANCE
from pygeo.src.Point2d import Point2d, Point2dArray
from pygeo.src.BoundingBox import (
    BoundingBox,
    BoundingBoxError,
    BoundingBoxIndexError,
    BoundingBoxConfigError,
)
from pygeo.src.GeoLogging import GEO_LOGGER, GeoLogger, setup_logging

# Export common symbols
__all__ = [
    "Vector2r",
    "Vector4r",
    "Real",
    "INF",
    "NAN",
    "ROUGH_TOLERANCE",
    "Point2d",
    "Point2dArray",
    "BoundingBox",
    "BoundingBoxError",
    "BoundingBoxIndexError",
    "BoundingBoxConfigError",
    "GEO_LOGGER",
    "GeoLogger",
    "setup_logging",
]


def version():
    """Return PyGeo version."""
    return __version__
