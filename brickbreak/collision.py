"""Axis-aligned collision detection between the ball, walls, paddle and bricks."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol

from brickbreak.entities import Ball, Brick, Paddle

# Tolerance used to decide which overlap was the smallest one.
_EPSILON = 1.1920929e-07


class WallCollision(Enum):
    """Which world boundary the ball touched. ``BOTTOM`` means the ball was lost."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class CollisionSide(Enum):
    """The face of a brick through which the ball entered it."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class CollisionDetector(Protocol):
    """Side-effect-free collision queries used by the game loop."""

    def ball_hits_wall(
        self, ball: Ball, world_width: float, world_height: float
    ) -> WallCollision: ...

    def ball_hits_paddle(self, ball: Ball, paddle: Paddle) -> bool: ...

    def ball_hits_brick(self, ball: Ball, brick: Brick) -> Optional[CollisionSide]: ...


class CollisionService:
    """Bounding-box collision detection with no state of its own."""

    def ball_hits_wall(
        self, ball: Ball, world_width: float, world_height: float
    ) -> WallCollision:
        """Return the first wall the ball touches, checked left, right, top, bottom."""
        if ball.left() <= 0.0:
            return WallCollision.LEFT
        if ball.right() >= world_width:
            return WallCollision.RIGHT
        if ball.top() <= 0.0:
            return WallCollision.TOP
        if ball.bottom() >= world_height:
            return WallCollision.BOTTOM
        return WallCollision.NONE

    def ball_hits_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        """True when a downward-moving ball overlaps the paddle."""
        return (
            ball.velocity.is_moving_down()
            and ball.right() >= paddle.left()
            and ball.left() <= paddle.right()
            and ball.bottom() >= paddle.top()
            and ball.top() <= paddle.bottom()
        )

    def ball_hits_brick(self, ball: Ball, brick: Brick) -> Optional[CollisionSide]:
        """Return the face of ``brick`` the ball entered, or None if they do not touch."""
        if brick.is_destroyed():
            return None
        if (
            ball.right() < brick.left()
            or ball.left() > brick.right()
            or ball.bottom() < brick.top()
            or ball.top() > brick.bottom()
        ):
            return None

        overlaps = {
            CollisionSide.TOP: ball.bottom() - brick.top(),
            CollisionSide.BOTTOM: brick.bottom() - ball.top(),
            CollisionSide.LEFT: ball.right() - brick.left(),
            CollisionSide.RIGHT: brick.right() - ball.left(),
        }
        smallest = min(overlaps.values())
        for side in (CollisionSide.TOP, CollisionSide.BOTTOM, CollisionSide.LEFT):
            if abs(smallest - overlaps[side]) < _EPSILON:
                return side
        return CollisionSide.RIGHT