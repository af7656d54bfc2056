"""Stroke colors and linear interpolation between them."""

from __future__ import annotations

import math
from dataclasses import dataclass

CHANNEL_MAX = 255.0


@dataclass(frozen=True)
class Color:
    """An RGB stroke color with float channels in ``[0, 255]``.

    Colors only give the rendered curve a gradient along its length; they play
    no part in the geometry.
    """

    red: float
    green: float
    blue: float

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            channel = getattr(self, name)
            if not math.isfinite(channel) or not 0.0 <= channel <= CHANNEL_MAX:
                msg = f"Color channel {name} out of range [0, {CHANNEL_MAX:g}]: {channel}"
                raise ValueError(msg)

    @classmethod
    def gray(cls, level: float) -> Color:
        """Build a gray from a single scalar level."""
        return cls(level, level, level)

    def lerp(self, other: Color, t: float) -> Color:
        """Linear interpolation, ``t = 0`` gives self and ``t = 1`` gives other."""
        return Color(
            self.red + (other.red - self.red) * t,
            self.green + (other.green - self.green) * t,
            self.blue + (other.blue - self.blue) * t,
        )

    def midpoint(self, other: Color) -> Color:
        """Per-channel ``start + (end - start) / 2``."""
        return self.lerp(other, 0.5)

    def to_rgb255(self) -> tuple[int, int, int]:
        return (round(self.red), round(self.green), round(self.blue))

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.to_rgb255())

    def to_unit_rgb(self) -> tuple[float, float, float]:
        """Channels scaled to ``[0, 1]`` as expected by matplotlib."""
        return (self.red / CHANNEL_MAX, self.green / CHANNEL_MAX, self.blue / CHANNEL_MAX)

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue
