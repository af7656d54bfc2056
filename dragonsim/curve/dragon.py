"""Dragon curve generator.

The curve is built by recursive two-way subdivision. At every level the color
range is split at its midpoint; the left half is generated with a +45° sub-turn,
the two halves are joined by a turn-only segment carrying the outer turn, and the
right half is generated with a -45° sub-turn::

    dragon(n, turn, [start, end]) =
        dragon(n - 1, +45°, [start, mid]) + [TURN(outer)] + dragon(n - 1, -45°, [mid, end])
    dragon(0, turn, [start, end]) = [LEAF(turn, 1, start)]

The outer turn supplied to the top-level call is threaded unchanged through
every level, so each joining segment carries exactly that angle. An order-n
curve therefore has ``2**n`` leaf segments and ``2**n - 1`` turn segments.

Two equivalent front ends are provided: :func:`generate_dragon` recurses and
returns a list, :func:`iter_dragon` walks an explicit work stack and yields the
same segments lazily without growing the call stack.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from dragonsim.unit import Angle, Degree

from .color import Color
from .segment import UNIT_DISTANCE, CurveOrder, Segment, SegmentKind

_LOGGER = logging.getLogger(__name__)

LEFT_SUB_TURN = Degree(45)
RIGHT_SUB_TURN = Degree(-45)


def segment_count(order: int) -> int:
    """Total number of segments in a curve of the given order."""
    order = CurveOrder(order)
    return 2 ** (order + 1) - 1


def generate_dragon(
    order: int,
    outer_turn: Angle,
    start_color: Color,
    end_color: Color,
    distance: float = UNIT_DISTANCE,
) -> list[Segment]:
    """Generate the ordered segment list of a Dragon curve.

    Args:
        order: Recursion depth, a non-negative integer.
        outer_turn: Turn joining the halves of every subdivision. For order 0 it is
            also the turn of the single leaf segment.
        start_color: Color of the first leaf segment.
        end_color: Color the gradient heads toward along the curve.
        distance: Length of a leaf segment.

    Returns:
        list[Segment]: The segments in drawing order.

    Raises:
        ValueError: If order is negative.
    """
    order = CurveOrder(order)
    segments: list[Segment] = []
    _subdivide(order, outer_turn, outer_turn, start_color, end_color, distance, segments)
    _LOGGER.debug("Generated %d segments for a dragon of order %d", len(segments), order)
    return segments


def _subdivide(
    order: CurveOrder,
    turn: Angle,
    outer_turn: Angle,
    start: Color,
    end: Color,
    distance: float,
    out: list[Segment],
) -> None:
    if order == 0:
        out.append(Segment(turn, distance, start, SegmentKind.LEAF))
        return

    mid = start.midpoint(end)
    lower = order.lower()
    _subdivide(lower, LEFT_SUB_TURN, outer_turn, start, mid, distance, out)
    out.append(Segment(outer_turn, 0.0, mid, SegmentKind.TURN))
    _subdivide(lower, RIGHT_SUB_TURN, outer_turn, mid, end, distance, out)


def iter_dragon(
    order: int,
    outer_turn: Angle,
    start_color: Color,
    end_color: Color,
    distance: float = UNIT_DISTANCE,
) -> Iterator[Segment]:
    """Yield the segments of :func:`generate_dragon` without recursion.

    Raises:
        ValueError: If order is negative, raised on the call rather than on the
            first iteration.
    """
    order = CurveOrder(order)
    return _walk(order, outer_turn, start_color, end_color, distance)


def _walk(
    order: CurveOrder,
    outer_turn: Angle,
    start_color: Color,
    end_color: Color,
    distance: float,
) -> Iterator[Segment]:
    # Frames are pending sub-curves or ready segments, pushed right-to-left so
    # they pop in drawing order.
    stack: list[tuple[CurveOrder, Angle, Color, Color] | Segment] = [
        (order, outer_turn, start_color, end_color)
    ]
    while stack:
        frame = stack.pop()
        if isinstance(frame, Segment):
            yield frame
            continue

        frame_order, turn, start, end = frame
        if frame_order == 0:
            yield Segment(turn, distance, start, SegmentKind.LEAF)
            continue

        mid = start.midpoint(end)
        lower = frame_order.lower()
        stack.append((lower, RIGHT_SUB_TURN, mid, end))
        stack.append(Segment(outer_turn, 0.0, mid, SegmentKind.TURN))
        stack.append((lower, LEFT_SUB_TURN, start, mid))
