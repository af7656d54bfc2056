"""Canvas backed by the standard library turtle window."""

from __future__ import annotations

import turtle

from dragonsim.curve import Color

from .canvas import Canvas, Speed


class ScreenCanvas(Canvas):
    """Draws in a Tk turtle window.

    Opening the window fails without a display; that error is not handled here.
    """

    def __init__(self):
        self._screen = turtle.Screen()
        self._screen.colormode(255)
        self._turtle = turtle.Turtle()

    def set_background_color(self, color: str) -> None:
        self._screen.bgcolor(color)

    def set_title(self, title: str) -> None:
        self._screen.title(title)

    def enter_fullscreen(self) -> None:
        self._screen.setup(width=1.0, height=1.0)

    def pen_up(self) -> None:
        self._turtle.penup()

    def pen_down(self) -> None:
        self._turtle.pendown()

    def forward(self, distance: float) -> None:
        self._turtle.forward(distance)

    def backward(self, distance: float) -> None:
        self._turtle.backward(distance)

    def left(self, degrees: float) -> None:
        self._turtle.left(degrees)

    def right(self, degrees: float) -> None:
        self._turtle.right(degrees)

    def set_speed(self, speed: Speed) -> None:
        self._turtle.speed(speed.value)

    def set_pen_color(self, color: Color) -> None:
        self._turtle.pencolor(color.to_rgb255())

    def hide(self) -> None:
        self._turtle.hideturtle()

    def done(self) -> None:
        self._screen.mainloop()
