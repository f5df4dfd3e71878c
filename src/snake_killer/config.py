"""Centralized configuration and palette definitions for Snake Killer."""

from __future__ import annotations

import os

import pygame

LOG_LEVEL: str = os.getenv("SNAKE_KILLER_LOG_LEVEL", "INFO").upper()

GRID_COLUMNS: int = 40
GRID_ROWS: int = 30
BLOCK: int = 16  # 40 * 16 => 640 px wide board
HUD_HEIGHT: int = 32
FONT_NAME: str = "consolas"
FONT_SIZE: int = 24
FPS: int = 60

TRAIL_LENGTH: int = 5
PLAYER_SPAWN: tuple[int, int] = (20, 15)

TICK_INTERVAL_MS: int = 80
SPAWN_INTERVAL_MS: int = 500
TURN_ODDS: int = 10  # adversaries turn with probability 1 / TURN_ODDS per tick

PALETTE = {
    "background": pygame.Color(0, 0, 0),
    "player_head": pygame.Color(255, 0, 0),
    "player_trail": pygame.Color(0, 0, 255),
    "adversary_head": pygame.Color(255, 165, 0),
    "adversary_trail": pygame.Color(0, 128, 0),
    "text": pygame.Color(216, 239, 255),
    "hud": pygame.Color(10, 10, 10),
    "overlay": pygame.Color(0, 0, 0, 170),
}


class ConfigError(ValueError):
    """Raised at startup when the game constants cannot describe a playable board."""


def validate_config(
    columns: int = GRID_COLUMNS,
    rows: int = GRID_ROWS,
    *,
    trail_length: int = TRAIL_LENGTH,
    player_spawn: tuple[int, int] = PLAYER_SPAWN,
    tick_interval_ms: int = TICK_INTERVAL_MS,
    spawn_interval_ms: int = SPAWN_INTERVAL_MS,
    turn_odds: int = TURN_ODDS,
) -> None:
    for name, value in (
        ("columns", columns),
        ("rows", rows),
        ("trail_length", trail_length),
        ("tick_interval_ms", tick_interval_ms),
        ("spawn_interval_ms", spawn_interval_ms),
        ("turn_odds", turn_odds),
    ):
        if value <= 0:
            raise ConfigError(f"{name} must be positive, got {value}")

    x, y = player_spawn
    if not (0 <= x < columns and 0 <= y < rows):
        raise ConfigError(
            f"player spawn {player_spawn} is outside the {columns}x{rows} grid"
        )
