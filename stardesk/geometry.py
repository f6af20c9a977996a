"""Screen layout and 2D point types."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Layout:
    """A drawing area of given size with an optional offset."""

    width: int
    height: int
    x_offs: int = 0
    y_offs: int = 0

    def min(self) -> int:
        """The smaller of width and height."""
        return min(self.width, self.height)


@dataclass
class Point2D:
    """A mutable point in the plane."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Point2D) -> None:
        """Shift this point by the coordinates of another."""
        self.x += other.x
        self.y += other.y

    def length(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def dist(self, other: Point2D) -> float:
        """Distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass
class MagPoint(Point2D):
    """A point carrying the visual magnitude of the object drawn there."""

    vmagnitude: float = 0.0


@dataclass(init=False)
class NamedPoint:
    """One or more magnitude points collected under a combined name."""

    _points: list[MagPoint] = field(default_factory=list)
    _name: str = ""

    def __init__(self, point: MagPoint, name: str) -> None:
        self._points = [point]
        self._name = name

    def point(self) -> Point2D:
        """Position of the first point."""
        first = self.mag_point()
        return Point2D(first.x, first.y)

    def mag_point(self) -> MagPoint:
        """The first collected point."""
        return self._points[0]

    def mag_points(self) -> list[MagPoint]:
        """All collected points (the live list)."""
        return self._points

    def name(self) -> str:
        """The combined name."""
        return self._name

    def add(self, other: NamedPoint) -> None:
        """Merge another named point: join its name, append its first point."""
        if self._name:
            self._name += ", "
        self._name += other.name()
        self._points.append(other.mag_point())