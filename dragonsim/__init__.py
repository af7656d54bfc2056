"""Dragon curve turtle drawing with a tagged angle type.

dragonsim is a small command-line demo bundling a text transformation utility,
a degrees/radians angle type and a turtle-graphics drawing of a Dragon curve.

Framework Components:
    Units (dragonsim.unit):
        • Angle, Degree, Radian: tagged angle values with conversion, DMS
          decomposition, parsing and formatting

    Curve Generation (dragonsim.curve):
        • generate_dragon / iter_dragon: recursive and explicit-stack generators
          producing an ordered list of Segment draw instructions
        • Color: RGB gradient along the curve
        • trace_path / centering_offset: numpy dry run of a curve

    Turtle Execution (dragonsim.pen):
        • TurtleExecutor: replays segments against an injected Canvas
        • TurtleState: single-owner position, heading, pen, speed and color
        • RecordingCanvas, ScreenCanvas, PlotCanvas: rendering surfaces

    Support:
        • dragonsim.state: validated finite state machine
        • dragonsim.geo: plane points
        • dragonsim.text: phrase transformations
        • dragonsim.cli: click command line

Example:
    >>> from dragonsim import Color, Degree, RecordingCanvas, TurtleExecutor, generate_dragon
    >>> segments = generate_dragon(4, Degree(-90), Color.gray(0), Color.gray(255))
    >>> canvas = RecordingCanvas()
    >>> status = TurtleExecutor(canvas, scale=10.0).draw(segments)
"""

from .curve import Color, CurveOrder, Segment, SegmentKind, generate_dragon, iter_dragon
from .geo import Point
from .pen import Canvas, RecordingCanvas, Speed, TurtleExecutor, TurtleState
from .unit import Angle, Degree, ParseAngleError, Radian

__version__ = "0.1.0"

__all__ = [
    "Angle",
    "Degree",
    "Radian",
    "ParseAngleError",
    "Point",
    "Color",
    "CurveOrder",
    "Segment",
    "SegmentKind",
    "generate_dragon",
    "iter_dragon",
    "Canvas",
    "RecordingCanvas",
    "Speed",
    "TurtleState",
    "TurtleExecutor",
]
