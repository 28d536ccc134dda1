"""Per-frame game logic: the status machine, movement and collision response."""

from __future__ import annotations

import math

from brickbreak.collision import CollisionDetector, CollisionSide, WallCollision
from brickbreak.geometry import Position, Velocity
from brickbreak.scoring import Scorer
from brickbreak.state import GameState, GameStatus, InputSnapshot

_LAUNCH_VELOCITY = Velocity(180.0, -320.0)
_MIN_SPEED = 320.0
_MAX_BOUNCE_ANGLE = math.radians(75.0)


class GameService:
    """Advances a :class:`GameState` by one frame using injected collision and scoring."""

    def __init__(self, collision: CollisionDetector, scorer: Scorer) -> None:
        self._collision = collision
        self._scorer = scorer

    def update(self, state: GameState, snapshot: InputSnapshot, dt: float) -> None:
        """Update ``state`` in place for a frame lasting ``dt`` seconds."""
        if state.status is GameStatus.WAITING_TO_LAUNCH:
            self._handle_waiting(state, snapshot, dt)
        elif state.status is GameStatus.PLAYING:
            self._handle_playing(state, snapshot, dt)
        elif state.status is GameStatus.PAUSED:
            if snapshot.pause:
                state.status = GameStatus.PLAYING

    def _handle_waiting(self, state: GameState, snapshot: InputSnapshot, dt: float) -> None:
        self._move_paddle(state, snapshot, dt)
        state.ball = state.ball.with_position(
            Position(state.paddle.position.x, state.paddle.top() - state.ball.radius - 1.0)
        )
        if snapshot.launch:
            state.status = GameStatus.PLAYING
            state.ball = state.ball.with_velocity(_LAUNCH_VELOCITY)
        if snapshot.quit:
            state.status = GameStatus.GAME_OVER

    def _handle_playing(self, state: GameState, snapshot: InputSnapshot, dt: float) -> None:
        if snapshot.pause:
            state.status = GameStatus.PAUSED
            return
        if snapshot.quit:
            state.status = GameStatus.GAME_OVER
            return
        self._move_paddle(state, snapshot, dt)
        state.ball = state.ball.advance(dt)
        self._resolve_collisions(state)
        if state.status is GameStatus.PLAYING and state.all_destroyable_bricks_gone():
            state.status = GameStatus.LEVEL_COMPLETE

    @staticmethod
    def _move_paddle(state: GameState, snapshot: InputSnapshot, dt: float) -> None:
        if snapshot.move_left:
            state.paddle = state.paddle.move_left(dt, state.world_width)
        if snapshot.move_right:
            state.paddle = state.paddle.move_right(dt, state.world_width)

    def _resolve_collisions(self, state: GameState) -> None:
        self._resolve_wall(state)
        if state.status is not GameStatus.PLAYING:
            return
        self._resolve_paddle(state)
        self._resolve_bricks(state)

    def _resolve_wall(self, state: GameState) -> None:
        wall = self._collision.ball_hits_wall(state.ball, state.world_width, state.world_height)
        if wall in (WallCollision.LEFT, WallCollision.RIGHT):
            state.ball = state.ball.with_velocity(state.ball.velocity.reflect_horizontal())
            state.combo = 0
        elif wall is WallCollision.TOP:
            state.ball = state.ball.with_velocity(state.ball.velocity.reflect_vertical())
            state.combo = 0
        elif wall is WallCollision.BOTTOM:
            state.lives = max(state.lives - 1, 0)
            state.combo = 0
            if state.lives == 0:
                state.status = GameStatus.GAME_OVER
            else:
                state.status = GameStatus.WAITING_TO_LAUNCH
                state.ball = state.ball.with_velocity(Velocity(0.0, 0.0))

    def _resolve_paddle(self, state: GameState) -> None:
        if not self._collision.ball_hits_paddle(state.ball, state.paddle):
            return
        current = state.ball.velocity.speed()
        if 0.0 < current < _MIN_SPEED:
            state.ball = state.ball.with_velocity(
                state.ball.velocity.scale(_MIN_SPEED / current)
            )
        # The farther from the paddle centre, the steeper the outgoing angle.
        half_width = state.paddle.dimensions.half_width()
        rel_x = (state.ball.position.x - state.paddle.position.x) / half_width
        rel_x = min(max(rel_x, -1.0), 1.0)
        speed = max(state.ball.velocity.speed(), _MIN_SPEED)
        angle = rel_x * _MAX_BOUNCE_ANGLE
        state.ball = state.ball.with_velocity(
            Velocity(speed * math.sin(angle), -(speed * math.cos(angle)))
        )
        state.combo = 0

    def _resolve_bricks(self, state: GameState) -> None:
        # Only the first brick hit counts, one per frame.
        hit = next(
            (
                (index, side)
                for index, brick in enumerate(state.bricks)
                if (side := self._collision.ball_hits_brick(state.ball, brick)) is not None
            ),
            None,
        )
        if hit is None:
            return
        index, side = hit
        points = self._scorer.score_for_brick(state.bricks[index], state.combo)
        state.bricks[index] = state.bricks[index].hit()
        if state.bricks[index].is_destroyed():
            state.score += points
            state.combo += 1
        if side in (CollisionSide.TOP, CollisionSide.BOTTOM):
            velocity = state.ball.velocity.reflect_vertical()
        else:
            velocity = state.ball.velocity.reflect_horizontal()
        state.ball = state.ball.with_velocity(velocity)