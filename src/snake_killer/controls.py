"""Keyboard to heading translation."""

from __future__ import annotations

import pygame

from .engine import Engine
from .geometry import Direction

KEY_TO_DIRECTION = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
}


def handle_key(engine: Engine, key: int) -> bool:
    """Forward an arrow key to the player; returns False for any other key."""
    direction = KEY_TO_DIRECTION.get(key)
    if direction is None:
        return False
    engine.request_player_heading(direction)
    return True
