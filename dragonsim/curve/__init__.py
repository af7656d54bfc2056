"""Dragon curve generation.

Components:
    Color: RGB stroke color with linear interpolation
    Segment: Atomic draw instruction (turn, distance, color)
    SegmentKind: LEAF stroke or TURN joining two halves
    CurveOrder: Non-negative recursion depth
    generate_dragon / iter_dragon: Recursive and explicit-stack generators
    trace_path / path_bounds / centering_offset: numpy dry run of a curve

Typical Usage:
    >>> from dragonsim.curve import Color, generate_dragon
    >>> from dragonsim.unit import Degree
    >>>
    >>> segments = generate_dragon(1, Degree(-90), Color.gray(0), Color.gray(255))
    >>> [str(s.turn_delta) for s in segments]
    ['45.0°', '-90.0°', '-45.0°']
"""

from .bounds import centering_offset, path_bounds, trace_path
from .color import Color
from .dragon import generate_dragon, iter_dragon, segment_count
from .segment import UNIT_DISTANCE, CurveOrder, Segment, SegmentKind

__all__ = [
    "Color",
    "CurveOrder",
    "Segment",
    "SegmentKind",
    "UNIT_DISTANCE",
    "generate_dragon",
    "iter_dragon",
    "segment_count",
    "trace_path",
    "path_bounds",
    "centering_offset",
]
