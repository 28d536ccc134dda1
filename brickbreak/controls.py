"""Keyboard input read through pygame."""

from __future__ import annotations

from typing import Collection, FrozenSet

import pygame

from brickbreak.state import InputSnapshot

_LEFT_KEYS = frozenset({pygame.K_LEFT, pygame.K_a})
_RIGHT_KEYS = frozenset({pygame.K_RIGHT, pygame.K_d})
_HELD_KEYS = _LEFT_KEYS | _RIGHT_KEYS


def snapshot_from_keys(held: Collection[int], pressed: Collection[int]) -> InputSnapshot:
    """Build an input snapshot from held keys and keys pressed this frame.

    Held keys drive movement; pressed keys drive one-shot actions.
    """
    held_set = set(held)
    pressed_set = set(pressed)
    return InputSnapshot(
        move_left=not held_set.isdisjoint(_LEFT_KEYS),
        move_right=not held_set.isdisjoint(_RIGHT_KEYS),
        pause=pygame.K_p in pressed_set,
        launch=pygame.K_SPACE in pressed_set,
        quit=pygame.K_ESCAPE in pressed_set,
    )


class PygameInput:
    """Reads the keyboard once per frame.

    ``snapshot`` drains the pygame event queue; afterwards ``pressed`` holds
    the keys pressed during the frame and ``closed`` tells whether the window
    was asked to close.
    """

    def __init__(self) -> None:
        self.pressed: FrozenSet[int] = frozenset()
        self.closed = False

    def snapshot(self) -> InputSnapshot:
        pressed = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.closed = True
            elif event.type == pygame.KEYDOWN:
                pressed.add(event.key)
        self.pressed = frozenset(pressed)
        keys = pygame.key.get_pressed()
        held = {key for key in _HELD_KEYS if keys[key]}
        return snapshot_from_keys(held, self.pressed)