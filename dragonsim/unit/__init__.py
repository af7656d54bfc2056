"""Tagged unit types for angles.

This package provides the angle value type used by the curve generator for its
turn parameters and by the turtle for its heading.

    - unit_base: Foundation Unit class with family management system
    - unit_angle: Angular units (Degree, Radian), parsing and DMS decomposition

Example:
    >>> from dragonsim.unit import Angle, Degree, Radian
    >>>
    >>> turn = Degree(-90)
    >>> turn.to_radians()
    Radian(-1.5707963267948966)
    >>> Angle.parse("0.7853981633974483 rad.").to_degrees()
    Degree(45.0)
"""

from .unit_angle import (
    Angle,
    Degree,
    ParseAngleError,
    ParseFloatError,
    Radian,
    UnrecognizedUnitError,
)
from .unit_base import Unit

__all__ = [
    # Base classes
    "Unit",
    # Angular units
    "Angle",
    "Degree",
    "Radian",
    # Errors
    "ParseAngleError",
    "ParseFloatError",
    "UnrecognizedUnitError",
]
