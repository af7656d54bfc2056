"""Rendering surface interface driven by the turtle executor.

The executor never talks to a graphics library directly. It issues primitive
commands to a :class:`Canvas`, an abstract capability set that concrete
rendering surfaces implement:

    • ScreenCanvas (dragonsim.pen.screen): the standard library turtle window
    • PlotCanvas (dragonsim.pen.plot): a matplotlib figure
    • RecordingCanvas (this module): captures the command sequence in memory

The canvas keeps its own cursor; the executor tells it about every turn and move
in order so that both stay in step. Failures raised by a canvas are not caught
by the executor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, NamedTuple

from dragonsim.curve import Color


class Speed(Enum):
    """Categorical drawing speed.

    The value is the matching standard library turtle speed, where 0 disables
    animation and 1..10 run from slowest to fastest.
    """

    SLOWEST = 1
    SLOWER = 2
    SLOW = 3
    NORMAL = 6
    FAST = 8
    FASTER = 10
    INSTANT = 0

    @classmethod
    def parse(cls, name: str) -> Speed:
        """Look up a speed by case-insensitive name, e.g. ``"faster"``.

        Raises:
            ValueError: If the name is not a known speed.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in cls)
            msg = f"Unknown speed {name!r}, expected one of: {choices}"
            raise ValueError(msg) from None


class Canvas(ABC):
    """Abstract rendering surface for turtle commands.

    Angles are in degrees and distances in canvas units. Turning left is
    counterclockwise.
    """

    @abstractmethod
    def set_background_color(self, color: str) -> None:
        pass

    @abstractmethod
    def set_title(self, title: str) -> None:
        pass

    @abstractmethod
    def enter_fullscreen(self) -> None:
        pass

    @abstractmethod
    def pen_up(self) -> None:
        pass

    @abstractmethod
    def pen_down(self) -> None:
        pass

    @abstractmethod
    def forward(self, distance: float) -> None:
        pass

    @abstractmethod
    def backward(self, distance: float) -> None:
        pass

    @abstractmethod
    def left(self, degrees: float) -> None:
        pass

    @abstractmethod
    def right(self, degrees: float) -> None:
        pass

    @abstractmethod
    def set_speed(self, speed: Speed) -> None:
        pass

    @abstractmethod
    def set_pen_color(self, color: Color) -> None:
        pass

    @abstractmethod
    def hide(self) -> None:
        """Hide the cursor indicator so only the drawing remains."""

    def done(self) -> None:
        """Hand control to the surface once drawing is finished.

        Interactive surfaces block here until their window is closed.
        """


class Command(NamedTuple):
    """One primitive call captured by :class:`RecordingCanvas`."""

    name: str
    args: tuple[Any, ...] = ()


class RecordingCanvas(Canvas):
    """Canvas that records every command instead of drawing.

    Example:
        >>> canvas = RecordingCanvas()
        >>> canvas.forward(10.0)
        >>> canvas.commands
        [Command(name='forward', args=(10.0,))]
    """

    def __init__(self):
        self.commands: list[Command] = []

    def _record(self, name: str, *args) -> None:
        self.commands.append(Command(name, args))

    def names(self) -> list[str]:
        return [command.name for command in self.commands]

    def set_background_color(self, color: str) -> None:
        self._record("set_background_color", color)

    def set_title(self, title: str) -> None:
        self._record("set_title", title)

    def enter_fullscreen(self) -> None:
        self._record("enter_fullscreen")

    def pen_up(self) -> None:
        self._record("pen_up")

    def pen_down(self) -> None:
        self._record("pen_down")

    def forward(self, distance: float) -> None:
        self._record("forward", distance)

    def backward(self, distance: float) -> None:
        self._record("backward", distance)

    def left(self, degrees: float) -> None:
        self._record("left", degrees)

    def right(self, degrees: float) -> None:
        self._record("right", degrees)

    def set_speed(self, speed: Speed) -> None:
        self._record("set_speed", speed)

    def set_pen_color(self, color: Color) -> None:
        self._record("set_pen_color", color)

    def hide(self) -> None:
        self._record("hide")

    def done(self) -> None:
        self._record("done")
