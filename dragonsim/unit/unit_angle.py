"""Angular unit definitions for turtle headings and turn parameters.

This module provides the tagged angle type used throughout the drawing system.
Unlike a bare float, an angle always carries the unit it was constructed or last
converted into, so functions that need degrees (turtle rotations) and functions
that need radians (trigonometry) can each ask for what they require regardless
of what the caller passed in.

Angles are plain values: there is no arithmetic defined on them, only unit
conversion, degrees-minutes-seconds decomposition, parsing and formatting.
Every operation returns a new value.

Classes:
    Angle: Base angular unit, root of the angle family.
    Radian: Angle measured in radians (2π per revolution).
    Degree: Angle measured in degrees (360 per revolution).
    ParseAngleError: Base error for textual angle parsing.
    UnrecognizedUnitError: The text carries neither a degree nor a radian marker.
    ParseFloatError: The numeric part of the text is not a finite float.

Text Format:
    Degrees end with a degree glyph (``º`` or ``°``), radians end with the
    literal ``rad.``; whitespace between the number and the marker is ignored.

Example:
    >>> heading = Angle.parse("45º")
    >>> print(heading)  # "45.0°"
    >>> print(heading.to_radians())  # "0.7853981633974483 rad."
    >>> Degree(10.5).to_dms()
    (10, 30, 0)
"""

from __future__ import annotations

import math
from typing import ClassVar

from .unit_base import Number, Unit

DEGREE_MARKERS = ("º", "°")
RADIAN_MARKER = "rad."


class ParseAngleError(ValueError):
    """Base class for errors raised while parsing an angle from text."""


class UnrecognizedUnitError(ParseAngleError):
    """Raised when the text ends with neither a degree nor a radian marker."""

    def __init__(self, msg: str = "Could not determine if the angle is in degrees or radians"):
        super().__init__(msg)


class ParseFloatError(ParseAngleError):
    """Raised when the numeric prefix of an angle is not a valid finite float.

    The underlying ``float()`` failure, when there is one, is chained as
    ``__cause__``.
    """


class Angle(Unit):
    """Angular unit family root.

    Concrete angles are always either :class:`Degree` or :class:`Radian`; the
    class itself is the family root used for unit compatibility checks and
    hosts the shared conversion, decomposition and parsing logic.

    Attributes:
        IS_FAMILY_ROOT (bool): True, every angle unit shares this ROOT.
        SCALE_TO_RADIANS (float): Factor converting the native magnitude to radians.
        FULL_TURN (float): Magnitude of one revolution in the native unit.
        SEPARATOR (str): Text placed between the magnitude and SYMBOL on display.
    """

    __slots__ = ("_value",)

    IS_FAMILY_ROOT = True
    SCALE_TO_RADIANS: ClassVar[float] = 1.0
    FULL_TURN: ClassVar[float] = 2 * math.pi
    SEPARATOR: ClassVar[str] = ""

    def __init__(self, value: Number):
        if type(self) is Angle:
            msg = "Angle is a unit family; construct a Degree or a Radian"
            raise TypeError(msg)
        object.__setattr__(self, "_value", float(value))

    def __setattr__(self, name, value):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name):
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    @property
    def value(self) -> float:
        """The magnitude in the unit this angle is tagged with."""
        return self._value

    @property
    def is_degrees(self) -> bool:
        return isinstance(self, Degree)

    @property
    def is_radians(self) -> bool:
        return isinstance(self, Radian)

    # -------------------------------- Conversions --------------------------------
    def to(self, unit_type: type[Angle]) -> float:
        """Convert to another unit of the angle family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Magnitude in the target unit's scale.

        Raises:
            TypeError: If unit_type is not an angle unit.
        """
        self._check_same_root(unit_type)
        if unit_type is type(self):
            return self._value
        return self._value * type(self).SCALE_TO_RADIANS / unit_type.SCALE_TO_RADIANS

    def as_unit(self, unit_type: type[Angle]) -> Angle:
        """Convert to another unit while preserving the unit tag.

        Returns this angle unchanged when it is already tagged with unit_type.
        """
        self._check_same_root(unit_type)
        if unit_type is type(self):
            return self
        return unit_type(self.to(unit_type))

    def to_degrees(self) -> Degree:
        return self.as_unit(Degree)

    def to_radians(self) -> Radian:
        return self.as_unit(Radian)

    def normalized(self) -> Angle:
        """Return the same direction with a magnitude in ``[0, FULL_TURN)``."""
        full = type(self).FULL_TURN
        wrapped = math.fmod(self._value, full)
        if wrapped < 0.0:
            wrapped += full
        # fmod of a tiny negative value can round up to a full turn
        if wrapped >= full:
            wrapped = 0.0
        return type(self)(wrapped)

    def isclose(self, other: Angle, *, abs_tol: float = 1e-9) -> bool:
        """Compare two angles in degrees regardless of their unit tags."""
        return math.isclose(self.to(Degree), other.to(Degree), rel_tol=1e-12, abs_tol=abs_tol)

    # -------------------------------- Degrees, minutes, seconds --------------------------------
    def to_dms(self) -> tuple[int, int, int]:
        """Decompose the angle into whole degrees, minutes and seconds.

        The degrees are signed while minutes and seconds are always in
        ``[0, 60)``; each component is truncated toward zero. A minute is 1/60
        of a degree and a second is 1/60 of a minute.

        The decomposition is carried out on whole arc-seconds so that a value
        produced by :meth:`from_dms` decomposes back into the same triple even
        when the composed float lands a few ulps below the exact second.

        Returns:
            tuple[int, int, int]: ``(degrees, minutes, seconds)``.

        Raises:
            ValueError: If the angle is not finite.
        """
        degrees = self.to(Degree)
        if not math.isfinite(degrees):
            msg = f"Cannot decompose non-finite angle {self}"
            raise ValueError(msg)

        sign = -1 if degrees < 0 else 1
        total = abs(degrees) * 3600.0
        nearest = round(total)
        if math.isclose(total, nearest, rel_tol=1e-14, abs_tol=1e-9):
            arcseconds = int(nearest)
        else:
            arcseconds = math.floor(total)

        whole_degrees, remainder = divmod(arcseconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        return sign * whole_degrees, minutes, seconds

    @classmethod
    def from_dms(cls, degrees: int, minutes: int, seconds: int) -> Degree:
        """Compose a Degree angle from whole degrees, minutes and seconds.

        This is the inverse of :meth:`to_dms`. For negative degrees the minutes
        and seconds extend the magnitude away from zero, so ``-10, 30, 0`` is
        -10.5 degrees.

        Raises:
            ValueError: If minutes or seconds are negative.
        """
        if minutes < 0 or seconds < 0:
            msg = f"Minutes and seconds must not be negative: ({degrees}, {minutes}, {seconds})"
            raise ValueError(msg)

        magnitude = abs(degrees) + minutes / 60.0 + seconds / 3600.0
        return Degree(-magnitude if degrees < 0 else magnitude)

    # -------------------------------- Text --------------------------------
    @classmethod
    def parse(cls, text: str) -> Angle:
        """Parse an angle such as ``"45º"``, ``"45.0°"`` or ``"0.785 rad."``.

        Raises:
            UnrecognizedUnitError: If text ends with no known unit marker.
            ParseFloatError: If the number before the marker is malformed.
        """
        for marker in DEGREE_MARKERS:
            if text.endswith(marker):
                return Degree(_parse_magnitude(_strip_marker(text, marker)))
        if text.endswith(RADIAN_MARKER):
            return Radian(_parse_magnitude(_strip_marker(text, RADIAN_MARKER)))
        raise UnrecognizedUnitError()

    def __str__(self) -> str:
        return f"{self._value}{type(self).SEPARATOR}{type(self).SYMBOL}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))


class Radian(Angle):
    """Angular unit: Radian.

    Preferred for trigonometric calculations; one full revolution is 2π.

    Example:
        >>> angle = Radian(math.pi / 2)
        >>> print(angle.to_degrees())  # "90.0°"
    """

    __slots__ = ()

    SCALE_TO_RADIANS = 1.0
    FULL_TURN = 2 * math.pi
    SYMBOL = RADIAN_MARKER
    SEPARATOR = " "


class Degree(Angle):
    """Angular unit: Degree (1/360 of a full rotation).

    Used for turtle rotations and headings.

    Example:
        >>> bearing = Degree(90)
        >>> print(bearing)  # "90.0°"
        >>> print(bearing.to(Radian))  # 1.5707963267948966
    """

    __slots__ = ()

    SCALE_TO_RADIANS = math.pi / 180
    FULL_TURN = 360.0
    SYMBOL = "°"


def _strip_marker(text: str, marker: str) -> str:
    # A repeated marker ("45ºº") is stripped as a whole.
    while text.endswith(marker):
        text = text[: -len(marker)]
    return text


def _parse_magnitude(text: str) -> float:
    number = text.rstrip()
    # float() also accepts leading whitespace and digit separators, a number
    # literal does not.
    if number != number.lstrip() or "_" in number:
        msg = f"invalid float literal: {number!r}"
        raise ParseFloatError(msg)
    try:
        value = float(number)
    except ValueError as exc:
        msg = f"invalid float literal: {number!r}"
        raise ParseFloatError(msg) from exc
    if not math.isfinite(value):
        msg = f"angle magnitude must be finite, got {number!r}"
        raise ParseFloatError(msg)
    return value
