#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import numpy as np

# Define precision
Real = np.float64

# Mathematical constants
NAN = float("nan")
INF = float("inf")

# Slack used by roughContains, absorbs reprojection noise (lat/lon to meter)
ROUGH_TOLERANCE = 0.01


def Vector2r(x=0.0, y=0.0):
    """Create a 2D real vector."""
    return np.array([x, y], dtype=Real)


def Vector4r(a=0.0, b=0.0, c=0.0, d=0.0):
    """Create a 4D real vector."""
    return np.array([a, b, c, d], dtype=Real)


def asPoint2r(point):
    """
    Convert a point-like value to a Vector2r.

    Accepts anything exposing getX()/getY() (Point2d), objects with x/y
    attributes, or any sequence of two numbers.
    """
    if hasattr(point, "getX") and hasattr(point, "getY"):
        return Vector2r(point.getX(), point.getY())
    if hasattr(point, "x") and hasattr(point, "y"):
        return Vector2r(point.x, point.y)
    try:
        arr = np.asarray(point, dtype=Real)
    except (TypeError, ValueError):
        raise TypeError(f"Cannot interpret {type(point).__name__} as a 2D point")
    if arr.shape != (2,):
        raise TypeError(f"Expected a 2D point, got shape {arr.shape}")
    return arr


def asPoints2r(points):
    """Convert a sequence of point-like values to an (N, 2) real array."""
    if isinstance(points, np.ndarray):
        if points.size == 0:
            return np.empty((0, 2), dtype=Real)
        if points.ndim != 2 or points.shape[1] != 2:
            raise TypeError(f"Expected an (N, 2) point array, got shape {points.shape}")
        return points.astype(Real, copy=False)

    rows = [asPoint2r(p) for p in points]
    if not rows:
        return np.empty((0, 2), dtype=Real)
    return np.vstack(rows)
