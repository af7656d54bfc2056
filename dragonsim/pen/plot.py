"""Canvas backed by a matplotlib figure.

Strokes are collected while the executor runs and rendered in one go as a
colored line collection when :meth:`PlotCanvas.done` is called. The canvas keeps
its own cursor, updated from the relative turn and move commands it receives.
"""

from __future__ import annotations

import logging

import numpy as np

from dragonsim.curve import Color
from dragonsim.geo import Point
from dragonsim.unit import Degree

from .canvas import Canvas, Speed

_LOGGER = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "white"
DEFAULT_FIGSIZE = (8, 8)


class PlotCanvas(Canvas):
    """Collects strokes and shows them in a matplotlib window.

    Attributes:
        strokes (list[tuple[Point, Point, Color]]): Lines drawn so far.
    """

    def __init__(self, figsize: tuple[float, float] = DEFAULT_FIGSIZE):
        self.figsize = figsize
        self.background = DEFAULT_BACKGROUND
        self.title: str | None = None
        self.fullscreen = False
        self.speed = Speed.NORMAL
        self.strokes: list[tuple[Point, Point, Color]] = []

        self._position = Point()
        self._heading = Degree(0)
        self._pen_down = True
        self._color = Color(0.0, 0.0, 0.0)
        self._visible = True

    def set_background_color(self, color: str) -> None:
        self.background = color

    def set_title(self, title: str) -> None:
        self.title = title

    def enter_fullscreen(self) -> None:
        self.fullscreen = True

    def pen_up(self) -> None:
        self._pen_down = False

    def pen_down(self) -> None:
        self._pen_down = True

    def forward(self, distance: float) -> None:
        target = self._position.forward(self._heading, distance)
        if self._pen_down and distance != 0.0:
            self.strokes.append((self._position, target, self._color))
        self._position = target

    def backward(self, distance: float) -> None:
        self.forward(-distance)

    def left(self, degrees: float) -> None:
        self._heading = Degree(self._heading.value + degrees).normalized()

    def right(self, degrees: float) -> None:
        self.left(-degrees)

    def set_speed(self, speed: Speed) -> None:
        # Strokes are rendered all at once, speed is kept for inspection only
        self.speed = speed

    def set_pen_color(self, color: Color) -> None:
        self._color = color

    def hide(self) -> None:
        self._visible = False

    def build_figure(self):
        """Render the collected strokes into a new matplotlib figure.

        Returns:
            matplotlib.figure.Figure: The figure, not yet shown.
        """
        import matplotlib.pyplot as plt
        from matplotlib.collections import LineCollection

        fig, ax = plt.subplots(figsize=self.figsize)
        fig.patch.set_facecolor(self.background)
        ax.set_facecolor(self.background)

        if self.strokes:
            lines = np.array([[tuple(start), tuple(end)] for start, end, _ in self.strokes])
            colors = np.array([color.to_unit_rgb() for _, _, color in self.strokes])
            ax.add_collection(LineCollection(lines, colors=colors, linewidths=1.0))
            ax.autoscale()

        if self._visible:
            ax.plot([self._position.x], [self._position.y], marker=">", color="black")

        ax.set_aspect("equal")
        ax.axis("off")
        if self.title:
            ax.set_title(self.title)
        _LOGGER.debug("Built figure with %d strokes", len(self.strokes))
        return fig

    def done(self) -> None:
        import matplotlib.pyplot as plt

        fig = self.build_figure()
        manager = fig.canvas.manager
        if manager is not None:
            if self.title:
                manager.set_window_title(self.title)
            if self.fullscreen:
                manager.full_screen_toggle()
        plt.show()
