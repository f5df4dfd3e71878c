"""Snake Killer window: event pump, fixed-interval clock, and board drawing."""

from __future__ import annotations

import logging
import random

import pygame

from .config import (
    BLOCK,
    FONT_NAME,
    FONT_SIZE,
    FPS,
    GRID_COLUMNS,
    GRID_ROWS,
    HUD_HEIGHT,
    PALETTE,
    SPAWN_INTERVAL_MS,
    TICK_INTERVAL_MS,
    validate_config,
)
from .controls import handle_key
from .engine import Engine
from .render import BoardRenderer, ScoreBoard
from .scheduler import GameClock

logger = logging.getLogger(__name__)


class SnakeKiller:
    """Wires the engine to pygame input, timers and rendering."""

    def __init__(self, seed: int | None = None) -> None:
        validate_config()
        pygame.init()
        self.width = GRID_COLUMNS * BLOCK
        self.height = GRID_ROWS * BLOCK + HUD_HEIGHT
        self.window = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Snake Killer")
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)

        self.engine = Engine(GRID_COLUMNS, GRID_ROWS, rng=random.Random(seed))
        self.clock = GameClock(self.engine, TICK_INTERVAL_MS, SPAWN_INTERVAL_MS)
        self.renderer = BoardRenderer(GRID_COLUMNS, GRID_ROWS, BLOCK)
        self.score_board = ScoreBoard()

        self.engine.on_render(self.renderer.update)
        self.engine.on_score(self.score_board.increment)
        self.engine.on_game_over(self._announce_game_over)

    def _announce_game_over(self, reason: str) -> None:
        pygame.display.set_caption(f"Snake Killer [Game Over: {reason}]")

    # --- Input ---------------------------------------------------------

    def handle_events(self) -> bool:
        """Handle window/keyboard events; returns False when the player quits."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                handle_key(self.engine, event.key)
        return True

    # --- Draw ----------------------------------------------------------

    def _draw_overlay(self, lines: list[str]) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill(PALETTE["overlay"])
        for idx, text in enumerate(lines):
            surf = self.font.render(text, True, PALETTE["text"])
            rect = surf.get_rect()
            rect.center = (self.width // 2, self.height // 2 + idx * (FONT_SIZE + 8))
            overlay.blit(surf, rect)
        self.window.blit(overlay, (0, 0))

    def draw(self) -> None:
        """Render the board, the score HUD, and the game over overlay."""
        self.window.fill(PALETTE["hud"])
        self.score_board.draw(self.window, self.font)
        self.renderer.draw(self.window, offset=(0, HUD_HEIGHT))
        if self.engine.game_over:
            self._draw_overlay(
                ["Game Over", f"Score: {self.score_board.value}", "ESC to quit"]
            )

    # --- Main loop -----------------------------------------------------

    def start(self) -> None:
        """Run the loop: handle events, feed elapsed time to the clock, then draw."""
        logger.info("Starting Snake Killer on a %dx%d grid", GRID_COLUMNS, GRID_ROWS)
        frame_clock = pygame.time.Clock()
        running = True

        while running:
            elapsed_ms = frame_clock.tick(FPS)
            running = self.handle_events()
            if self.clock.running:
                self.clock.advance(elapsed_ms)
            self.draw()
            pygame.display.update()

        logger.info("Shutting down with score %d", self.engine.score)
        pygame.quit()
