"""The game window and its main loop."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from brickbreak.collision import CollisionService
from brickbreak.controls import PygameInput
from brickbreak.entities import Ball, Paddle
from brickbreak.geometry import Dimensions, Position, Velocity
from brickbreak.level import MAX_LEVEL, create_level
from brickbreak.renderer import PygameRenderer
from brickbreak.scoring import ScoringService
from brickbreak.service import GameService
from brickbreak.state import GameState, GameStatus, InputSnapshot

WORLD_W = 800.0
WORLD_H = 600.0
BALL_RADIUS = 8.0
PADDLE_W = 100.0
PADDLE_H = 14.0
PADDLE_SPEED = 420.0

_TITLE = "Brickbreak"
_MAX_DT = 0.05
_FPS = 60


def make_state(level: int, lives: int, score: int) -> GameState:
    """Create a fresh state for ``level`` carrying over ``lives`` and ``score``."""
    paddle = Paddle(
        Position(WORLD_W / 2.0, WORLD_H - 40.0),
        Dimensions(PADDLE_W, PADDLE_H),
        PADDLE_SPEED,
    )
    ball = Ball(Position(WORLD_W / 2.0, WORLD_H - 60.0), Velocity(0.0, 0.0), BALL_RADIUS)
    state = GameState(ball, paddle, create_level(level, WORLD_W).bricks, WORLD_W, WORLD_H)
    state.level = level
    state.lives = lives
    state.score = score
    return state


def step(
    service: GameService,
    state: GameState,
    snapshot: InputSnapshot,
    restart: bool,
    dt: float,
) -> GameState:
    """Run one frame of the game loop and return the state to continue with.

    Handles restarting after the game ends and moving on after a level is
    cleared; otherwise hands the frame to ``service``.
    """
    status = state.status
    if status in (GameStatus.GAME_OVER, GameStatus.VICTORY) and restart:
        return make_state(1, 3, 0)
    if status is GameStatus.LEVEL_COMPLETE and snapshot.launch:
        if state.level >= MAX_LEVEL:
            state.status = GameStatus.VICTORY
            return state
        return make_state(state.level + 1, state.lives, state.score)
    if state.is_active() or status is GameStatus.PAUSED:
        service.update(state, snapshot, dt)
    return state


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="brickbreak",
        description="Break all the bricks. Arrows or A/D move, SPACE launches, "
        "P pauses, ESC gives up, R restarts.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(WORLD_W), int(WORLD_H)))
        pygame.display.set_caption(_TITLE)
        service = GameService(CollisionService(), ScoringService())
        renderer = PygameRenderer(screen)
        controls = PygameInput()
        clock = pygame.time.Clock()
        state = make_state(1, 3, 0)
        while True:
            # Cap dt so a stalled window does not let the ball tunnel through walls.
            dt = min(clock.tick(_FPS) / 1000.0, _MAX_DT)
            snap = controls.snapshot()
            if controls.closed:
                break
            state = step(service, state, snap, pygame.K_r in controls.pressed, dt)
            renderer.draw(state)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0