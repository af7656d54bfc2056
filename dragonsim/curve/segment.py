"""Draw instructions produced by the curve generator.

A curve is an ordered list of :class:`Segment` values. Each segment is one
atomic turtle instruction: set the stroke color, turn by ``turn_delta``, then
move forward by ``distance``. Order is significant because every segment starts
from the heading and position left by the ones before it.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum, auto

from dragonsim.unit import Angle

from .color import Color

UNIT_DISTANCE = 1.0


class SegmentKind(Enum):
    """Role of a segment within a subdivided curve.

    LEAF: A base-case segment that draws a stroke of unit length.
    TURN: A turn-only segment joining the two halves of a subdivision.
    """

    LEAF = auto()
    TURN = auto()


@dataclass(frozen=True)
class Segment:
    """Atomic draw instruction: a turn followed by a forward move, tagged with a color.

    Attributes:
        turn_delta (Angle): Relative turn applied before moving; positive turns
            counterclockwise.
        distance (float): Distance moved after turning, in curve units.
        color (Color): Stroke color for the move.
        kind (SegmentKind): Whether the segment is a leaf stroke or a joining turn.
    """

    turn_delta: Angle
    distance: float
    color: Color
    kind: SegmentKind = SegmentKind.LEAF

    @property
    def is_turn(self) -> bool:
        return self.kind is SegmentKind.TURN


class CurveOrder(int):
    """Recursion depth of a curve, a non-negative integer.

    Order 0 is a single straight segment; each increment doubles the number of
    leaf segments.

    Raises:
        TypeError: If the value is not an integer.
        ValueError: If the value is negative.
    """

    def __new__(cls, value: int):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            msg = f"Curve order must be an integer, got {value!r}"
            raise TypeError(msg)
        if value < 0:
            msg = f"Curve order must not be negative, got {value}"
            raise ValueError(msg)
        return int.__new__(cls, value)

    def lower(self) -> CurveOrder:
        """The order of the two halves of a subdivision."""
        if self == 0:
            msg = "Order 0 has no lower order"
            raise ValueError(msg)
        return CurveOrder(int(self) - 1)

    def __repr__(self) -> str:
        return f"CurveOrder({int(self)})"
