"""Game entities: the ball, the bricks and the paddle.

Every state change returns a new object; entities are never mutated.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from brickbreak.geometry import Dimensions, Position, Velocity

_INDESTRUCTIBLE_HITS = 255


@dataclass(frozen=True, slots=True)
class Ball:
    """The ball. ``position`` is its centre."""

    position: Position
    velocity: Velocity
    radius: float

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError(f"ball radius must be positive, got {self.radius}")

    def advance(self, dt: float) -> Ball:
        """Move the ball along its velocity for ``dt`` seconds."""
        moved = self.position.translate(self.velocity.vx * dt, self.velocity.vy * dt)
        return dataclasses.replace(self, position=moved)

    def with_velocity(self, velocity: Velocity) -> Ball:
        return dataclasses.replace(self, velocity=velocity)

    def with_position(self, position: Position) -> Ball:
        return dataclasses.replace(self, position=position)

    def left(self) -> float:
        return self.position.x - self.radius

    def right(self) -> float:
        return self.position.x + self.radius

    def top(self) -> float:
        return self.position.y - self.radius

    def bottom(self) -> float:
        return self.position.y + self.radius


class BrickKind(Enum):
    """Brick type, which fixes durability and point value."""

    NORMAL = (1, 10)
    TOUGH = (2, 25)
    INDESTRUCTIBLE = (_INDESTRUCTIBLE_HITS, 0)

    @property
    def durability(self) -> int:
        return self.value[0]

    @property
    def points(self) -> int:
        return self.value[1]


@dataclass(frozen=True, slots=True)
class Brick:
    """A brick. ``position`` is its top-left corner.

    ``hits_remaining`` and ``points`` default to the values of ``kind``.
    """

    position: Position
    dimensions: Dimensions
    kind: BrickKind
    hits_remaining: Optional[int] = None
    points: Optional[int] = None

    def __post_init__(self) -> None:
        if self.hits_remaining is None:
            object.__setattr__(self, "hits_remaining", self.kind.durability)
        if self.points is None:
            object.__setattr__(self, "points", self.kind.points)

    def hit(self) -> Brick:
        """Apply one hit; indestructible bricks are returned unchanged."""
        if self.kind is BrickKind.INDESTRUCTIBLE:
            return self
        return dataclasses.replace(self, hits_remaining=max(self.hits_remaining - 1, 0))

    def is_destroyed(self) -> bool:
        return self.kind is not BrickKind.INDESTRUCTIBLE and self.hits_remaining == 0

    def left(self) -> float:
        return self.position.x

    def right(self) -> float:
        return self.position.x + self.dimensions.width

    def top(self) -> float:
        return self.position.y

    def bottom(self) -> float:
        return self.position.y + self.dimensions.height


@dataclass(frozen=True, slots=True)
class Paddle:
    """The player's paddle. ``position`` is its centre."""

    position: Position
    dimensions: Dimensions
    speed: float

    def move_left(self, dt: float, world_width: float) -> Paddle:
        """Move left for ``dt`` seconds, stopping at the left wall."""
        new_x = max(self.position.x - self.speed * dt, self.dimensions.half_width())
        return dataclasses.replace(self, position=Position(new_x, self.position.y))

    def move_right(self, dt: float, world_width: float) -> Paddle:
        """Move right for ``dt`` seconds, stopping at the right wall."""
        limit = world_width - self.dimensions.half_width()
        new_x = min(self.position.x + self.speed * dt, limit)
        return dataclasses.replace(self, position=Position(new_x, self.position.y))

    def left(self) -> float:
        return self.position.x - self.dimensions.half_width()

    def right(self) -> float:
        return self.position.x + self.dimensions.half_width()

    def top(self) -> float:
        return self.position.y - self.dimensions.half_height()

    def bottom(self) -> float:
        return self.position.y + self.dimensions.half_height()