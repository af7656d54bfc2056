"""Turtle executor: replays a segment sequence on a canvas.

The executor owns a :class:`TurtleState` for one drawing session and translates
every segment into primitive pen operations, updating its own state and
forwarding the same operation to the injected :class:`Canvas`.

Session Lifecycle:
    IDLE → READY (setup) → DRAWING (execute) → FINISHED (teardown)

    • setup: raise the pen, travel to the starting offset, lower the pen and
      optionally set the drawing speed
    • execute: for each segment, strictly in order, set the color, turn by the
      segment's delta, then move forward by its distance
    • teardown: hide the cursor so only the finished curve remains

Segments are replayed one at a time in sequence order because each one starts
from the heading and position left by all the previous ones. Any error raised
by the canvas propagates to the caller unchanged; there is no retry.

Example:
    >>> canvas = RecordingCanvas()
    >>> executor = TurtleExecutor(canvas, scale=10.0)
    >>> executor.draw(generate_dragon(3, Degree(-90), start, end), speed=Speed.FASTER)
    >>> canvas.done()
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence, Sized
from enum import Enum, auto

from rich.progress import Progress

from dragonsim.curve import Color, Segment, centering_offset
from dragonsim.geo import Point
from dragonsim.state import Action, StateMachine
from dragonsim.unit import Angle, Degree

from .canvas import Canvas, Speed
from .turtle_state import TurtleState, TurtleStatus

_LOGGER = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle of a drawing session.

    IDLE: Created, the pen has not been positioned yet.
    READY: Positioned with the pen down, no segment drawn yet.
    DRAWING: At least one batch of segments has been executed.
    FINISHED: The cursor is hidden; no further drawing is accepted.
    """

    IDLE = auto()
    READY = auto()
    DRAWING = auto()
    FINISHED = auto()


class TurtleExecutor:
    """Drive a canvas from a segment sequence through a single-owner turtle state.

    Attributes:
        canvas (Canvas): Rendering surface receiving primitive commands.
        state (TurtleState): Turtle state owned by this executor.
        scale (float): Canvas units per curve unit applied to segment distances.
    """

    def __init__(self, canvas: Canvas, state: TurtleState | None = None, scale: float = 1.0):
        if scale <= 0.0:
            msg = f"Scale must be positive, got {scale}"
            raise ValueError(msg)

        self.canvas = canvas
        self.state = state or TurtleState()
        self.scale = scale
        self._session = StateMachine(
            SessionState.IDLE,
            {
                SessionState.IDLE: [Action(SessionState.READY)],
                SessionState.READY: [
                    Action(SessionState.DRAWING),
                    Action(SessionState.FINISHED),
                ],
                SessionState.DRAWING: [
                    Action(SessionState.DRAWING),
                    Action(SessionState.FINISHED),
                ],
            },
        )

    @property
    def session(self) -> SessionState:
        return self._session.current

    def configure_window(
        self,
        background: str | None = None,
        title: str | None = None,
        fullscreen: bool = False,
    ) -> None:
        """Apply window-level settings before drawing."""
        if background is not None:
            self.canvas.set_background_color(background)
        if title is not None:
            self.canvas.set_title(title)
        if fullscreen:
            self.canvas.enter_fullscreen()

    def setup(self, offset: Point | None = None, speed: Speed | None = None) -> None:
        """Position the pen at ``offset`` without drawing, then lower it.

        Args:
            offset: Starting position; the current position when omitted.
            speed: Drawing speed to switch to once the pen is down.

        Raises:
            ValueError: If the session has already been set up.
        """
        self._session.request_transition(SessionState.READY)

        if self.state.is_pen_down:
            self._pen_up()
        if offset is not None:
            self._travel_to(offset)
        self._pen_down()
        if speed is not None:
            self.state.set_speed(speed)
            self.canvas.set_speed(speed)

        _LOGGER.debug("Pen ready at %s heading %s", self.state.position, self.state.heading)

    def execute(self, segments: Iterable[Segment], progress: Progress | None = None) -> int:
        """Replay ``segments`` in order and return how many were executed.

        Args:
            segments: Curve in drawing order.
            progress: Progress display advanced once per executed segment.

        Raises:
            ValueError: If called before :meth:`setup` or after :meth:`teardown`.
        """
        self._session.request_transition(SessionState.DRAWING)

        task = None
        if progress is not None:
            total = len(segments) if isinstance(segments, Sized) else None
            task = progress.add_task("Drawing", total=total)

        count = 0
        for segment in segments:
            self._set_color(segment.color)
            self._turn(segment.turn_delta)
            self._forward(segment.distance * self.scale)
            count += 1
            if task is not None:
                progress.advance(task)

        _LOGGER.debug("Executed %d segments, turtle now at %s", count, self.state.position)
        return count

    def teardown(self) -> None:
        """Hide the cursor and close the session."""
        self._session.request_transition(SessionState.FINISHED)
        self.state.hide()
        self.canvas.hide()

    def draw(
        self,
        segments: Iterable[Segment],
        speed: Speed | None = None,
        center: bool = True,
        progress: Progress | None = None,
    ) -> TurtleStatus:
        """Run a whole session: setup, execute and teardown.

        Args:
            segments: Curve in drawing order; lazy iterables are read once and
                held in memory when centering.
            speed: Optional drawing speed.
            center: Start from the offset that centres the curve's bounding box
                on the current position.
            progress: Progress display advanced while segments are replayed.

        Returns:
            TurtleStatus: State of the turtle after the last segment.
        """
        offset = None
        if center:
            if not isinstance(segments, Sequence):
                segments = list(segments)
            shift = centering_offset(segments, self.state.heading, self.scale)
            offset = Point(self.state.position.x + shift.x, self.state.position.y + shift.y)

        if isinstance(segments, Sized):
            _LOGGER.info("Drawing %d segments", len(segments))
        else:
            _LOGGER.info("Drawing a lazy segment stream")
        self.setup(offset, speed)
        self.execute(segments, progress)
        self.teardown()
        return self.state.get_status()

    # -------------------------------- Primitives --------------------------------
    def _pen_up(self) -> None:
        self.state.pen_up()
        self.canvas.pen_up()

    def _pen_down(self) -> None:
        self.state.pen_down()
        self.canvas.pen_down()

    def _set_color(self, color: Color) -> None:
        self.state.set_color(color)
        self.canvas.set_pen_color(color)

    def _turn(self, delta: Angle) -> None:
        degrees = delta.to(Degree)
        self.state.turn(delta)
        if degrees >= 0.0:
            self.canvas.left(degrees)
        else:
            self.canvas.right(-degrees)

    def _forward(self, distance: float) -> None:
        self.state.advance(distance)
        self.canvas.forward(distance)

    def _travel_to(self, target: Point) -> None:
        # Turn toward the target, move there, then restore the heading.
        dx = target.x - self.state.position.x
        dy = target.y - self.state.position.y
        distance = self.state.position.distance_to(target)
        if distance == 0.0:
            return

        bearing = math.degrees(math.atan2(dy, dx))
        rotation = bearing - self.state.heading.value
        self._turn(Degree(rotation))
        self._forward(distance)
        self._turn(Degree(-rotation))
