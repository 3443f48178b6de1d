#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from typing import List

from .geomath import Vector2r


class Point2d:
    """A mutable 2D coordinate."""

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def getX(self) -> float:
        return self.x

    def getY(self) -> float:
        return self.y

    def setX(self, x):
        self.x = float(x)

    def setY(self, y):
        self.y = float(y)

    def toArray(self):
        """Return the point as a Vector2r."""
        return Vector2r(self.x, self.y)

    def copy(self):
        return Point2d(self.x, self.y)

    def __eq__(self, other):
        if not isinstance(other, Point2d):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None

    def __getitem__(self, index):
        """Allow indexing into point components."""
        if index == 0:
            return self.x
        elif index == 1:
            return self.y
        else:
            raise IndexError("Point2d index out of range")

    def __len__(self):
        return 2

    def __str__(self):
        return f"Point2d({self.x}, {self.y})"

    def __repr__(self):
        return f"Point2d(x={self.x}, y={self.y})"


Point2dArray = List[Point2d]
