"""Plane geometry utilities for the turtle canvas.

Components:
    Point: Canvas location with x/y coordinates in canvas units

Typical Usage:
    >>> from dragonsim.geo import Point
    >>> from dragonsim.unit import Degree
    >>>
    >>> origin = Point(0.0, 0.0)
    >>> origin.forward(Degree(90), 10.0)
    Point(0.00, 10.00)
"""

from .point import Point

__all__ = ["Point"]
