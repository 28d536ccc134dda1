"""Points awarded for destroying bricks."""

from __future__ import annotations

from typing import Protocol

from brickbreak.entities import Brick

_COMBO_STEP = 5


class Scorer(Protocol):
    """Computes the score for a destroyed brick given the current combo."""

    def score_for_brick(self, brick: Brick, combo: int) -> int: ...


class ScoringService:
    """Brick points times a multiplier that grows by one every five combo hits."""

    def score_for_brick(self, brick: Brick, combo: int) -> int:
        multiplier = 1 + combo // _COMBO_STEP
        return brick.points * multiplier