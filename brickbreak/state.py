"""Game state for one level, the status machine, and the per-frame input snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Protocol

from brickbreak.entities import Ball, Brick, BrickKind, Paddle


class GameStatus(Enum):
    """Screens and behaviours of the game loop."""

    WAITING_TO_LAUNCH = auto()
    PLAYING = auto()
    PAUSED = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()
    VICTORY = auto()


@dataclass(frozen=True)
class InputSnapshot:
    """Player input for a single frame."""

    move_left: bool = False
    move_right: bool = False
    pause: bool = False
    launch: bool = False
    quit: bool = False


class InputProvider(Protocol):
    """Source of the player's input for the current frame."""

    def snapshot(self) -> InputSnapshot: ...


@dataclass
class GameState:
    """All mutable state of a level, updated once per frame."""

    ball: Ball
    paddle: Paddle
    bricks: List[Brick]
    world_width: float
    world_height: float
    score: int = 0
    lives: int = 3
    status: GameStatus = GameStatus.WAITING_TO_LAUNCH
    level: int = 1
    combo: int = 0

    def active_bricks(self) -> Iterator[Brick]:
        """Yield the bricks that have not been destroyed."""
        return (brick for brick in self.bricks if not brick.is_destroyed())

    def all_destroyable_bricks_gone(self) -> bool:
        """True when every brick is destroyed or indestructible."""
        return all(
            brick.is_destroyed() or brick.kind is BrickKind.INDESTRUCTIBLE
            for brick in self.bricks
        )

    def is_active(self) -> bool:
        """True while waiting to launch or playing."""
        return self.status in (GameStatus.PLAYING, GameStatus.WAITING_TO_LAUNCH)