"""Brick layouts for each level."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from brickbreak.entities import Brick, BrickKind
from brickbreak.geometry import Dimensions, Position

MAX_LEVEL = 3
"""Number of levels that must be cleared to win."""

_COLUMNS = 10
_PADDING = 2.0
_BRICK_HEIGHT = 20.0
_START_Y = 60.0
_MAX_ENDLESS_ROWS = 10

KindRule = Callable[[int, int], BrickKind]


@dataclass
class Level:
    """The initial brick layout of a level."""

    bricks: List[Brick] = field(default_factory=list)


def _level_1_kind(row: int, col: int) -> BrickKind:
    return BrickKind.NORMAL


def _level_2_kind(row: int, col: int) -> BrickKind:
    if row == 0:
        return BrickKind.INDESTRUCTIBLE
    if row in (1, 2):
        return BrickKind.TOUGH
    return BrickKind.NORMAL


def _level_3_kind(row: int, col: int) -> BrickKind:
    return BrickKind.TOUGH if (row + col) % 2 == 0 else BrickKind.NORMAL


def _endless_kind(row: int, col: int) -> BrickKind:
    if row == 0:
        return BrickKind.INDESTRUCTIBLE
    if row < 3:
        return BrickKind.TOUGH
    return BrickKind.NORMAL


def _grid(rows: int, brick_width: float, kind_of: KindRule) -> List[Brick]:
    size = Dimensions(brick_width, _BRICK_HEIGHT)
    return [
        Brick(
            Position(
                _PADDING + col * (brick_width + _PADDING),
                _START_Y + row * (_BRICK_HEIGHT + _PADDING),
            ),
            size,
            kind_of(row, col),
        )
        for row in range(rows)
        for col in range(_COLUMNS)
    ]


def create_level(level_num: int, world_width: float) -> Level:
    """Build the brick layout for ``level_num`` in a world ``world_width`` wide.

    Levels beyond the third use a growing endless layout of up to ten rows.
    """
    brick_width = (world_width - _PADDING * (_COLUMNS + 1)) / _COLUMNS
    if level_num == 1:
        rows, rule = 4, _level_1_kind
    elif level_num == 2:
        rows, rule = 5, _level_2_kind
    elif level_num == 3:
        rows, rule = 6, _level_3_kind
    else:
        rows, rule = min(level_num + 2, _MAX_ENDLESS_ROWS), _endless_kind
    return Level(_grid(rows, brick_width, rule))