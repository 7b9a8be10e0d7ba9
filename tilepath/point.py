"""Integer 2D grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """An immutable 2D point on a tile grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    @staticmethod
    def delta(v1: Point, v2: Point) -> Point:
        """Return the absolute per-axis difference between two points."""
        return Point(abs(v1.x - v2.x), abs(v1.y - v2.y))