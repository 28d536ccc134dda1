"""Immutable two-dimensional value objects: positions, velocities and sizes."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A point in world space. Positive y points down."""

    x: float
    y: float

    def translate(self, dx: float, dy: float) -> Position:
        """Return a new position moved by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class Velocity:
    """A velocity vector in world units per second."""

    vx: float
    vy: float

    def reflect_horizontal(self) -> Velocity:
        """Bounce off a left or right surface by negating ``vx``."""
        return Velocity(-self.vx, self.vy)

    def reflect_vertical(self) -> Velocity:
        """Bounce off a top or bottom surface by negating ``vy``."""
        return Velocity(self.vx, -self.vy)

    def speed(self) -> float:
        """Magnitude of the vector."""
        return math.hypot(self.vx, self.vy)

    def scale(self, factor: float) -> Velocity:
        """Return the vector with both components multiplied by ``factor``."""
        return Velocity(self.vx * factor, self.vy * factor)

    def is_moving_down(self) -> bool:
        """True when the vertical component points down the screen."""
        return self.vy > 0.0


@dataclass(frozen=True, slots=True)
class Dimensions:
    """A width and height, both strictly positive."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if not self.width > 0.0:
            raise ValueError(f"width must be positive, got {self.width}")
        if not self.height > 0.0:
            raise ValueError(f"height must be positive, got {self.height}")

    def half_width(self) -> float:
        return self.width / 2.0

    def half_height(self) -> float:
        return self.height / 2.0