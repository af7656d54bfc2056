"""Dry-run geometry of a segment sequence.

Replays the turtle arithmetic over a whole curve at once with numpy, without a
canvas, to find where a drawing will end up. The executor uses this to pick a
starting offset that leaves the finished curve roughly centred on the canvas.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from dragonsim.geo import Point
from dragonsim.unit import Angle, Degree

from .segment import Segment


def trace_path(
    segments: Sequence[Segment],
    start: Point | None = None,
    heading: Angle = Degree(0),
    scale: float = 1.0,
) -> np.ndarray:
    """Vertices visited by a turtle replaying ``segments``.

    Args:
        segments: Curve in drawing order.
        start: Starting position, the origin by default.
        heading: Starting heading; positive turns are counterclockwise.
        scale: Canvas units per curve unit.

    Returns:
        np.ndarray: Array of shape ``(len(segments) + 1, 2)``; row 0 is the start.
    """
    start = start or Point()
    turns = np.array([segment.turn_delta.to(Degree) for segment in segments], dtype=float)
    distances = np.array([segment.distance for segment in segments], dtype=float) * scale

    headings = np.radians(heading.to(Degree) + np.cumsum(turns))
    steps = np.column_stack((distances * np.cos(headings), distances * np.sin(headings)))
    origin = np.array([[start.x, start.y]], dtype=float)
    return np.vstack((origin, origin + np.cumsum(steps, axis=0)))


def path_bounds(vertices: np.ndarray) -> tuple[float, float, float, float]:
    """Bounding box ``(min_x, min_y, max_x, max_y)`` of traced vertices."""
    min_x, min_y = vertices.min(axis=0)
    max_x, max_y = vertices.max(axis=0)
    return float(min_x), float(min_y), float(max_x), float(max_y)


def centering_offset(
    segments: Sequence[Segment],
    heading: Angle = Degree(0),
    scale: float = 1.0,
) -> Point:
    """Starting point that puts the centre of the curve's bounding box at the origin."""
    min_x, min_y, max_x, max_y = path_bounds(trace_path(segments, Point(), heading, scale))
    return Point(-(min_x + max_x) / 2, -(min_y + max_y) / 2)
