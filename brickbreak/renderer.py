"""Drawing the game state onto a pygame surface."""

from __future__ import annotations

from typing import Dict, Protocol, Tuple

import pygame

from brickbreak.entities import Brick, BrickKind
from brickbreak.state import GameState, GameStatus

Colour = Tuple[int, int, int, int]


def _rgba(r: float, g: float, b: float, a: float = 1.0) -> Colour:
    return (round(r * 255), round(g * 255), round(b * 255), round(a * 255))


_BG = _rgba(0.06, 0.06, 0.12)
_PADDLE = _rgba(0.31, 0.86, 0.63)
_PADDLE_HIGHLIGHT = _rgba(1.0, 1.0, 1.0, 0.35)
_BALL = _rgba(1.0, 0.94, 0.39)
_BALL_HIGHLIGHT = _rgba(1.0, 1.0, 1.0, 0.5)
_BRICK_NORMAL = _rgba(0.31, 0.63, 0.94)
_BRICK_TOUGH_2 = _rgba(0.94, 0.47, 0.24)
_BRICK_TOUGH_1 = _rgba(0.94, 0.78, 0.24)
_BRICK_SOLID = _rgba(0.39, 0.39, 0.47)
_BRICK_BORDER = _rgba(1.0, 1.0, 1.0, 0.15)
_HUD = _rgba(1.0, 1.0, 1.0)
_WHITE = _rgba(1.0, 1.0, 1.0)
_OVERLAY_BG = _rgba(0.0, 0.0, 0.0, 0.63)
_SUBTITLE = _rgba(0.71, 0.71, 1.0)

_HUD_SIZE = 22
_TITLE_SIZE = 48
_LIFE_RADIUS = 5
_LIFE_SPACING = 18


class Renderer(Protocol):
    """Shows a game state on some visual surface."""

    def draw(self, state: GameState) -> None: ...


def _rect(x: float, y: float, width: float, height: float) -> pygame.Rect:
    return pygame.Rect(round(x), round(y), round(width), round(height))


class PygameRenderer:
    """Draws the play field, overlays and HUD onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        pygame.font.init()
        self._fonts: Dict[int, pygame.font.Font] = {}

    def draw(self, state: GameState) -> None:
        """Draw one complete frame for ``state``."""
        self._surface.fill(_BG)
        status = state.status
        if status is GameStatus.WAITING_TO_LAUNCH:
            self._draw_play_field(state)
            self._draw_hint(state, "Press SPACE to launch", state.world_height * 0.70)
        elif status is GameStatus.PLAYING:
            self._draw_play_field(state)
        elif status is GameStatus.PAUSED:
            self._draw_play_field(state)
            self._draw_overlay(state, "PAUSED", "Press P to resume")
        elif status is GameStatus.LEVEL_COMPLETE:
            self._draw_overlay(
                state, f"LEVEL {state.level} COMPLETE", "Press SPACE for next level"
            )
        elif status is GameStatus.GAME_OVER:
            self._draw_overlay(
                state, "GAME OVER", f"Score: {state.score}  \u00b7  Press R to restart"
            )
        elif status is GameStatus.VICTORY:
            self._draw_overlay(state, "YOU WIN!", f"Final score: {state.score}")
        self._draw_hud(state)

    # ── primitives ───────────────────────────────────────────────────────────

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def _fill_rect(self, rect: pygame.Rect, colour: Colour, width: int = 0) -> None:
        if colour[3] == 255:
            pygame.draw.rect(self._surface, colour, rect, width)
            return
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(layer, colour, layer.get_rect(), width)
        self._surface.blit(layer, rect.topleft)

    def _fill_circle(self, x: float, y: float, radius: float, colour: Colour) -> None:
        if colour[3] == 255:
            pygame.draw.circle(self._surface, colour, (x, y), radius)
            return
        r = max(round(radius), 1)
        layer = pygame.Surface((2 * r, 2 * r), pygame.SRCALPHA)
        pygame.draw.circle(layer, colour, (r, r), r)
        self._surface.blit(layer, (round(x) - r, round(y) - r))

    def _draw_text(self, text: str, x: float, baseline: float, size: int, colour: Colour) -> None:
        font = self._font(size)
        image = font.render(text, True, colour[:3])
        self._surface.blit(image, (round(x), round(baseline - font.get_ascent())))

    def _text_width(self, text: str, size: int) -> int:
        return self._font(size).size(text)[0]

    # ── play field ───────────────────────────────────────────────────────────

    def _draw_play_field(self, state: GameState) -> None:
        for brick in state.active_bricks():
            self._draw_brick(brick)
        self._draw_paddle(state)
        self._draw_ball(state)

    def _draw_brick(self, brick: Brick) -> None:
        if brick.kind is BrickKind.NORMAL:
            colour = _BRICK_NORMAL
        elif brick.kind is BrickKind.TOUGH:
            colour = _BRICK_TOUGH_2 if brick.hits_remaining == 2 else _BRICK_TOUGH_1
        else:
            colour = _BRICK_SOLID
        rect = _rect(brick.left(), brick.top(), brick.dimensions.width, brick.dimensions.height)
        self._fill_rect(rect, colour)
        self._fill_rect(rect, _BRICK_BORDER, width=1)

    def _draw_paddle(self, state: GameState) -> None:
        paddle = state.paddle
        width = paddle.dimensions.width
        self._fill_rect(_rect(paddle.left(), paddle.top(), width, paddle.dimensions.height), _PADDLE)
        self._fill_rect(_rect(paddle.left(), paddle.top(), width, 3.0), _PADDLE_HIGHLIGHT)

    def _draw_ball(self, state: GameState) -> None:
        ball = state.ball
        x, y, r = ball.position.x, ball.position.y, ball.radius
        self._fill_circle(x, y, r, _BALL)
        self._fill_circle(x - r * 0.3, y - r * 0.3, r * 0.3, _BALL_HIGHLIGHT)

    # ── HUD and overlays ─────────────────────────────────────────────────────

    def _draw_hud(self, state: GameState) -> None:
        width = state.world_width
        self._draw_text(f"SCORE  {state.score}", 12.0, 24.0, _HUD_SIZE, _HUD)
        self._draw_text(f"LEVEL  {state.level}", width / 2.0 - 40.0, 24.0, _HUD_SIZE, _HUD)
        for life in range(state.lives):
            self._fill_circle(
                width - 100.0 + _LIFE_RADIUS + life * _LIFE_SPACING,
                24.0 - 7.0,
                _LIFE_RADIUS,
                _BALL,
            )

    def _draw_overlay(self, state: GameState, title: str, subtitle: str) -> None:
        self._fill_rect(_rect(0.0, 0.0, state.world_width, state.world_height), _OVERLAY_BG)
        cx = state.world_width / 2.0
        cy = state.world_height / 2.0
        title_w = self._text_width(title, _TITLE_SIZE)
        self._draw_text(title, cx - title_w / 2.0, cy - 20.0, _TITLE_SIZE, _WHITE)
        sub_w = self._text_width(subtitle, _HUD_SIZE)
        self._draw_text(subtitle, cx - sub_w / 2.0, cy + 34.0, _HUD_SIZE, _SUBTITLE)

    def _draw_hint(self, state: GameState, text: str, baseline: float) -> None:
        text_w = self._text_width(text, _HUD_SIZE)
        self._draw_text(text, state.world_width / 2.0 - text_w / 2.0, baseline, _HUD_SIZE, _SUBTITLE)