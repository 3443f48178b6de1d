#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from collections.abc import Mapping

import numpy as np

from .GeoLogging import GEO_LOGGER
from .Point2d import Point2d
from .geomath import INF, ROUGH_TOLERANCE, Vector4r, asPoint2r, asPoints2r


class BoundingBoxError(Exception):
    """Base class for bounding box errors."""


class BoundingBoxIndexError(BoundingBoxError, IndexError):
    """Raised when a bounding box is indexed outside 0..3."""


class BoundingBoxConfigError(BoundingBoxError, ValueError):
    """Raised when a configuration tree cannot be loaded into a bounding box."""


INDEX_ERROR_MESSAGE = (
    "index out of range, index 0: MinX, index 1: MinY, index 2: MaxX, index 3: MaxY"
)


@GEO_LOGGER
class BoundingBox:
    """
    Axis-aligned 2D bounding box, [minX, maxX] x [minY, maxY].

    The box is valid when minX <= maxX and minY <= maxY. Validity is never
    enforced: constructors and setters store what they are given, and callers
    that care must check valid(). A default-constructed box is the empty box
    (+inf, -inf, +inf, -inf), so the first point added always widens it.

    Construction:
        BoundingBox()                          empty box
        BoundingBox(minx, maxx, miny, maxy)    bounds stored verbatim
        BoundingBox(leftBottom, rightTop)      from two point-likes, no reordering
        BoundingBox(other)                     copy
    """

    def __init__(self, *args):
        if len(args) == 0:
            self._minX, self._maxX = INF, -INF
            self._minY, self._maxY = INF, -INF
        elif len(args) == 1 and isinstance(args[0], BoundingBox):
            self.assign(args[0])
        elif len(args) == 2:
            lb = asPoint2r(args[0])
            rt = asPoint2r(args[1])
            self._minX, self._maxX = float(lb[0]), float(rt[0])
            self._minY, self._maxY = float(lb[1]), float(rt[1])
        elif len(args) == 4:
            self._minX, self._maxX, self._minY, self._maxY = (float(v) for v in args)
        else:
            raise TypeError(
                "BoundingBox() takes no arguments, a BoundingBox, "
                f"two points or four bounds ({len(args)} given)"
            )

    @classmethod
    def fromPoints(cls, points):
        """Create the smallest box enclosing all the points."""
        box = cls()
        box.addPoints(points)
        return box

    @classmethod
    def fromConfig(cls, tree):
        """Create a box hydrated from a configuration tree, see load()."""
        return cls().load(tree)

    def copy(self):
        return BoundingBox(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    # Accessors

    def getMinX(self) -> float:
        return self._minX

    def getMaxX(self) -> float:
        return self._maxX

    def getMinY(self) -> float:
        return self._minY

    def getMaxY(self) -> float:
        return self._maxY

    def setMinX(self, minx):
        self._minX = float(minx)

    def setMaxX(self, maxx):
        self._maxX = float(maxx)

    def setMinY(self, miny):
        self._minY = float(miny)

    def setMaxY(self, maxy):
        self._maxY = float(maxy)

    minX = property(getMinX, setMinX)
    maxX = property(getMaxX, setMaxX)
    minY = property(getMinY, setMinY)
    maxY = property(getMaxY, setMaxY)

    # Boundary and control points

    def leftBottomPoint(self) -> Point2d:
        return Point2d(self._minX, self._minY)

    def leftMidPoint(self) -> Point2d:
        return Point2d(self._minX, (self._maxY + self._minY) / 2.0)

    def leftTopPoint(self) -> Point2d:
        return Point2d(self._minX, self._maxY)

    def midTopPoint(self) -> Point2d:
        return Point2d((self._maxX + self._minX) / 2.0, self._maxY)

    def rightTopPoint(self) -> Point2d:
        return Point2d(self._maxX, self._maxY)

    def rightMidPoint(self) -> Point2d:
        return Point2d(self._maxX, (self._maxY + self._minY) / 2.0)

    def rightBottomPoint(self) -> Point2d:
        return Point2d(self._maxX, self._minY)

    def midBottomPoint(self) -> Point2d:
        return Point2d((self._maxX + self._minX) / 2.0, self._minY)

    def corners(self):
        """Return the 4 corners: left-bottom, left-top, right-top, right-bottom."""
        return [
            self.leftBottomPoint(),
            self.leftTopPoint(),
            self.rightTopPoint(),
            self.rightBottomPoint(),
        ]

    def controls(self):
        """Return the 8 control points, clockwise from the left-bottom corner."""
        return [
            self.leftBottomPoint(),
            self.leftMidPoint(),
            self.leftTopPoint(),
            self.midTopPoint(),
            self.rightTopPoint(),
            self.rightMidPoint(),
            self.rightBottomPoint(),
            self.midBottomPoint(),
        ]

    def setLeftBottomPoint(self, point):
        p = asPoint2r(point)
        self._minX, self._minY = float(p[0]), float(p[1])

    def setRightTopPoint(self, point):
        p = asPoint2r(point)
        self._maxX, self._maxY = float(p[0]), float(p[1])

    def valid(self) -> bool:
        return self._minX <= self._maxX and self._minY <= self._maxY

    # Growth

    def addPoint(self, point) -> bool:
        """
        Grow the box to enclose the point.

        Each bound is extended independently.
        Returns True if any bound was moved.
        """
        x, y = (float(v) for v in asPoint2r(point))
        changed = False
        if x < self._minX:
            self._minX = x
            changed = True
        if x > self._maxX:
            self._maxX = x
            changed = True
        if y < self._minY:
            self._minY = y
            changed = True
        if y > self._maxY:
            self._maxY = y
            changed = True
        return changed

    def addPoints(self, points) -> bool:
        """
        Grow the box to enclose every point.

        Accepts a sequence of point-likes or an (N, 2) array. The result does
        not depend on the order of the points.
        Returns True if any bound was moved.
        """
        pts = asPoints2r(points)
        if len(pts) == 0:
            return False
        # fmin/fmax skip NaN coordinates, the same way the scalar compares in addPoint do
        lo = np.fmin.reduce(pts, axis=0)
        hi = np.fmax.reduce(pts, axis=0)
        changed = self.addPoint(lo)
        changed = self.addPoint(hi) or changed
        return changed

    def add(self, other) -> bool:
        """
        Grow the box to enclose the other box.

        Returns False without touching the box when both the left-bottom and
        right-top corners of other are already inside.
        """
        lb = other.leftBottomPoint()
        rt = other.rightTopPoint()
        if self.contains(lb) and self.contains(rt):
            return False
        self.addPoint(lb)
        self.addPoint(rt)
        return True

    def unionWith(self, other):
        """Grow the box to enclose other and return self for chaining."""
        self.add(other)
        return self

    def __iadd__(self, other):
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.unionWith(other)

    def __add__(self, other):
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.copy().unionWith(other)

    # Predicates

    def contains(self, other) -> bool:
        """
        Test whether a point or a box lies inside this box, bounds included.

        A BoundingBox argument is contained when all four of its bounds lie
        within this box. Anything else is treated as a point.
        """
        if isinstance(other, BoundingBox):
            return (
                other._minX >= self._minX
                and other._maxX <= self._maxX
                and other._minY >= self._minY
                and other._maxY <= self._maxY
            )
        x, y = asPoint2r(other)
        return not (
            x > self._maxX or x < self._minX or y > self._maxY or y < self._minY
        )

    def __contains__(self, item):
        return self.contains(item)

    def roughContains(self, point) -> bool:
        """
        Test whether the box roughly contains a point.

        Every bound is relaxed outward by ROUGH_TOLERANCE (0.01), which absorbs
        the error left by projecting coordinates (lat/lon to meter).
        """
        x, y = asPoint2r(point)
        rough = ROUGH_TOLERANCE
        return not (
            x > self._maxX + rough
            or x < self._minX - rough
            or y > self._maxY + rough
            or y < self._minY - rough
        )

    def intersects(self, other) -> bool:
        """Test whether the X ranges and the Y ranges of both boxes overlap."""
        return not (
            other._minX > self._maxX
            or other._maxX < self._minX
            or other._minY > self._maxY
            or other._maxY < self._minY
        )

    # Derived quantities

    def width(self) -> float:
        return self._maxX - self._minX

    def height(self) -> float:
        return self._maxY - self._minY

    def center(self) -> Point2d:
        return Point2d(0.5 * (self._minX + self._maxX), 0.5 * (self._minY + self._maxY))

    # Arithmetic

    def assign(self, other):
        """Copy the bounds of other into this box."""
        self._minX = other._minX
        self._maxX = other._maxX
        self._minY = other._minY
        self._maxY = other._maxY
        return self

    def _resize(self, sx, sy):
        ctr = self.center()
        self._minX = float(ctr.x - sx)
        self._maxX = float(ctr.x + sx)
        self._minY = float(ctr.y - sy)
        self._maxY = float(ctr.y + sy)

    def scaleBy(self, ratio):
        """
        Scale the box about its center, in place.

        A ratio below 1 shrinks the box. A negative ratio mirrors the bounds
        about the center and leaves an invalid box; it is not rejected.
        """
        self._resize(0.5 * self.width() * ratio, 0.5 * self.height() * ratio)
        return self

    def divideBy(self, ratio):
        """
        Divide the extents of the box by ratio about its center, in place.

        A Python int/float ratio of 0 raises ZeroDivisionError. A numpy scalar
        ratio (e.g. Real(0)) follows IEEE semantics instead: the bounds become
        infinite and numpy emits a RuntimeWarning.
        """
        self._resize(0.5 * self.width() / ratio, 0.5 * self.height() / ratio)
        return self

    def scaledBy(self, ratio):
        """Return a copy of the box scaled about its center."""
        return self.copy().scaleBy(ratio)

    def __imul__(self, ratio):
        return self.scaleBy(ratio)

    def __itruediv__(self, ratio):
        return self.divideBy(ratio)

    def __mul__(self, ratio):
        return self.scaledBy(ratio)

    __rmul__ = __mul__

    def __truediv__(self, ratio):
        return self.copy().divideBy(ratio)

    def __eq__(self, other):
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return (
            self._minX == other._minX
            and self._maxX == other._maxX
            and self._minY == other._minY
            and self._maxY == other._maxY
        )

    # Mutable value, equality is not stable
    __hash__ = None

    def __getitem__(self, index):
        """Return minX, minY, maxX, maxY for index 0, 1, 2, 3."""
        if index == 0:
            return self._minX
        elif index == 1:
            return self._minY
        elif index == 2:
            return self._maxX
        elif index == 3:
            return self._maxY
        else:
            raise BoundingBoxIndexError(INDEX_ERROR_MESSAGE)

    def __len__(self):
        return 4

    def __iter__(self):
        return iter((self._minX, self._minY, self._maxX, self._maxY))

    def toArray(self):
        """Return the bounds as a Vector4r in index order."""
        return Vector4r(self._minX, self._minY, self._maxX, self._maxY)

    # Formatting

    def __str__(self):
        return (
            f"m_minX = {self._minX}; m_maxX = {self._maxX}; "
            f"m_minY = {self._minY}; m_maxY = {self._maxY}"
        )

    def __repr__(self):
        return (
            f"BoundingBox(minX={self._minX}, maxX={self._maxX}, "
            f"minY={self._minY}, maxY={self._maxY})"
        )

    def toString(self) -> str:
        return str(self)

    # Configuration

    def load(self, tree):
        """
        Populate the bounds from a configuration tree.

        tree is a mapping, typically parsed from JSON or YAML. It may hold
        "leftBottom" and/or "rightTop" corners (a mapping with "x" and "y", or
        a pair of numbers) and any of the flat keys "minX", "maxX", "minY",
        "maxY". Flat keys are applied after the corners. Missing keys leave the
        current bound untouched. The box is only updated once every key has
        parsed, so a BoundingBoxConfigError leaves it as it was.
        """
        if not isinstance(tree, Mapping):
            raise BoundingBoxConfigError(
                f"Expected a mapping to load a BoundingBox, got {type(tree).__name__}"
            )

        loaded = {
            "minX": self._minX,
            "maxX": self._maxX,
            "minY": self._minY,
            "maxY": self._maxY,
        }
        if "leftBottom" in tree:
            loaded["minX"], loaded["minY"] = _configPoint(tree, "leftBottom")
        if "rightTop" in tree:
            loaded["maxX"], loaded["maxY"] = _configPoint(tree, "rightTop")

        for key in ("minX", "maxX", "minY", "maxY"):
            if key in tree:
                loaded[key] = _configFloat(tree[key], key)

        self._minX, self._maxX = loaded["minX"], loaded["maxX"]
        self._minY, self._maxY = loaded["minY"], loaded["maxY"]

        self.debug(f"Loaded {self!r}")
        if not self.valid():
            self.warning(f"Loaded bounding box is invalid: {self}")
        return self


def _configFloat(value, key):
    # JSON true/false would otherwise pass as 1.0/0.0
    if isinstance(value, (bool, np.bool_)):
        raise BoundingBoxConfigError(f"Bad value for '{key}': {value!r} is not a number")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise BoundingBoxConfigError(
            f"Bad value for '{key}': {value!r} is not a number"
        ) from e


def _configPoint(tree, key):
    """Parse a corner entry into an (x, y) pair of floats."""
    value = tree[key]
    if isinstance(value, Mapping):
        if "x" not in value or "y" not in value:
            raise BoundingBoxConfigError(f"'{key}' needs both 'x' and 'y'")
        return (
            _configFloat(value["x"], f"{key}.x"),
            _configFloat(value["y"], f"{key}.y"),
        )
    if isinstance(value, (str, bytes)):
        raise BoundingBoxConfigError(f"Bad value for '{key}': {value!r} is not a point")
    try:
        x, y = value
    except (TypeError, ValueError) as e:
        raise BoundingBoxConfigError(
            f"Bad value for '{key}': {value!r} is not a point"
        ) from e
    return _configFloat(x, f"{key}.x"), _configFloat(y, f"{key}.y")
