"""Turtle execution against an injected rendering surface.

Components:
    Canvas: Abstract capability set of a rendering surface
    RecordingCanvas: In-memory canvas capturing the command sequence
    Speed: Categorical drawing speed
    TurtleState / PenState / TurtleStatus: Single-owner pen state
    TurtleExecutor / SessionState: Segment replay and session lifecycle

The concrete surfaces live in ``dragonsim.pen.screen`` (standard library turtle)
and ``dragonsim.pen.plot`` (matplotlib) and are imported on demand, so the rest
of the package works without a display.
"""

from .canvas import Canvas, Command, RecordingCanvas, Speed
from .executor import SessionState, TurtleExecutor
from .turtle_state import PenState, TurtleState, TurtleStatus

__all__ = [
    "Canvas",
    "Command",
    "RecordingCanvas",
    "Speed",
    "PenState",
    "TurtleState",
    "TurtleStatus",
    "SessionState",
    "TurtleExecutor",
]
