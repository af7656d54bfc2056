"""Plane coordinates for the turtle canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dragonsim.unit import Angle, Radian


@dataclass
class Point:
    """Represents a 2D location on the canvas with x, y coordinates.

    Headings follow the usual turtle convention: 0 points along +x and angles
    grow counterclockwise.
    """

    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: Point) -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def forward(self, heading: Angle, distance: float) -> Point:
        """Project this point ``distance`` units along ``heading``."""
        theta = heading.to(Radian)
        return Point(self.x + distance * math.cos(theta), self.y + distance * math.sin(theta))

    def copy(self) -> Point:
        return Point(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point({self.x:.2f}, {self.y:.2f})"
