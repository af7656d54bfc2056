"""Mutable pen-and-canvas state of a turtle.

A :class:`TurtleState` is owned by exactly one executor for the duration of a
drawing session. It tracks where the pen is, where it is facing, whether it is
drawing, and how it draws, and it is updated deterministically by every turn and
move the executor performs.

State Machine:
    PenState.UP ⇄ PenState.DOWN; lowering a lowered pen (or raising a raised
    one) is an illegal transition and raises ``ValueError``.

Coordinates:
    Positions are canvas units with the origin at the canvas centre. The
    heading is a Degree normalized to ``[0, 360)``, 0 pointing along +x and
    positive turns going counterclockwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from dragonsim.curve import Color
from dragonsim.geo import Point
from dragonsim.state import Action, StateMachine
from dragonsim.unit import Angle, Degree

from .canvas import Speed

DEFAULT_SPEED = Speed.NORMAL
DEFAULT_COLOR = Color(0.0, 0.0, 0.0)


class PenState(Enum):
    """Whether moving the turtle leaves a stroke.

    UP: Moves reposition the turtle without drawing.
    DOWN: Moves draw a line in the current color.
    """

    UP = auto()
    DOWN = auto()


@dataclass(frozen=True)
class TurtleStatus:
    """Immutable snapshot of a turtle's state, used for logging and assertions."""

    position: Point
    heading: Degree
    pen: PenState
    speed: Speed
    color: Color
    visible: bool


class TurtleState:
    """Position, heading, pen, speed and color of a turtle.

    Attributes:
        position (Point): Current location in canvas units.
        heading (Degree): Current facing direction, normalized to [0, 360).
        speed (Speed): Current categorical drawing speed.
        color (Color): Current stroke color.
        visible (bool): Whether the cursor indicator is shown.
    """

    def __init__(
        self,
        position: Point | None = None,
        heading: Angle = Degree(0),
        pen: PenState = PenState.DOWN,
        speed: Speed = DEFAULT_SPEED,
        color: Color = DEFAULT_COLOR,
    ):
        self.position = position.copy() if position else Point()
        self.heading = heading.to_degrees().normalized()
        self.speed = speed
        self.color = color
        self.visible = True
        self._state_machine = StateMachine(
            pen,
            {
                PenState.UP: [Action(PenState.DOWN)],
                PenState.DOWN: [Action(PenState.UP)],
            },
        )

    @property
    def pen(self) -> PenState:
        return self._state_machine.current

    @property
    def is_pen_down(self) -> bool:
        return self.pen is PenState.DOWN

    def pen_up(self) -> None:
        """Raise the pen.

        Raises:
            ValueError: If the pen is already up.
        """
        self._state_machine.request_transition(PenState.UP)

    def pen_down(self) -> None:
        """Lower the pen.

        Raises:
            ValueError: If the pen is already down.
        """
        self._state_machine.request_transition(PenState.DOWN)

    def turn(self, delta: Angle) -> Degree:
        """Rotate by ``delta`` (counterclockwise when positive) and return the new heading."""
        self.heading = Degree(self.heading.value + delta.to(Degree)).normalized()
        return self.heading

    def advance(self, distance: float) -> Point:
        """Move ``distance`` units along the heading and return the new position.

        Negative distances move backwards.
        """
        self.position = self.position.forward(self.heading, distance)
        return self.position

    def set_speed(self, speed: Speed) -> None:
        self.speed = speed

    def set_color(self, color: Color) -> None:
        self.color = color

    def hide(self) -> None:
        self.visible = False

    def get_status(self) -> TurtleStatus:
        return TurtleStatus(
            position=self.position.copy(),
            heading=self.heading,
            pen=self.pen,
            speed=self.speed,
            color=self.color,
            visible=self.visible,
        )

    def __repr__(self) -> str:
        return f"TurtleState(position={self.position}, heading={self.heading}, pen={self.pen.name})"
