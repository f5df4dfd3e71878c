"""Tick-based simulation: moves every snake, resolves bites and escapes."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, List

from .config import GRID_COLUMNS, GRID_ROWS, PLAYER_SPAWN, TURN_ODDS
from .geometry import Direction, Position, in_bounds, random_direction
from .snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SnakeView:
    head: Position
    trail: tuple[Position, ...]


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only copy of the board handed to the render adapter."""

    player: SnakeView
    adversaries: tuple[SnakeView, ...]
    score: int
    game_over: bool


@dataclass(frozen=True, slots=True)
class TickReport:
    escaped: int = 0
    eliminated: int = 0
    game_over: bool = False


def _view(snake: Snake) -> SnakeView:
    return SnakeView(head=snake.head, trail=tuple(snake.trail))


class Engine:
    """Owns the grid, the player snake, and the adversary swarm."""

    def __init__(
        self,
        columns: int = GRID_COLUMNS,
        rows: int = GRID_ROWS,
        *,
        player: Snake | None = None,
        rng: random.Random | None = None,
        turn_odds: int = TURN_ODDS,
    ) -> None:
        self.columns = columns
        self.rows = rows
        self.rng = rng or random.Random()
        self.turn_odds = turn_odds
        self.player = player or Snake.spawn(PLAYER_SPAWN, self.rng)
        self.adversaries: List[Snake] = []
        self.score: int = 0
        self.ticks: int = 0
        self.game_over: bool = False
        self.death_reason: str | None = None

        self._render_listeners: list[Callable[[Snapshot], None]] = []
        self._score_listeners: list[Callable[[int], None]] = []
        self._game_over_listeners: list[Callable[[str], None]] = []

    # --- Listeners -----------------------------------------------------

    def on_render(self, callback: Callable[[Snapshot], None]) -> None:
        self._render_listeners.append(callback)

    def on_score(self, callback: Callable[[int], None]) -> None:
        self._score_listeners.append(callback)

    def on_game_over(self, callback: Callable[[str], None]) -> None:
        self._game_over_listeners.append(callback)

    # --- Commands ------------------------------------------------------

    def request_player_heading(self, direction: Direction) -> None:
        if self.game_over:
            return
        self.player.set_heading(direction)

    def spawn_adversary(self, position: Position | None = None) -> Snake | None:
        """Drop a new adversary on ``position`` (or a random cell)."""
        if self.game_over:
            return None
        if position is None:
            position = (
                self.rng.randrange(self.columns),
                self.rng.randrange(self.rows),
            )
        adversary = Snake.spawn(position, self.rng)
        self.adversaries.append(adversary)
        logger.debug(
            "Spawned adversary at %s heading %s (%d on board)",
            adversary.head,
            adversary.heading.name,
            len(self.adversaries),
        )
        return adversary

    # --- Simulation ----------------------------------------------------

    def tick(self) -> TickReport:
        """Advance the game by exactly one grid cell."""
        if self.game_over:
            return TickReport(game_over=True)
        self.ticks += 1

        self.player.advance()
        for adversary in self.adversaries:
            if self.rng.randrange(self.turn_odds) == 0:
                adversary.set_heading(random_direction(self.rng))
            adversary.advance()

        reason = self._death_reason()
        if reason is not None:
            self._finish(reason)
            return TickReport(game_over=True)

        survivors = [
            snake
            for snake in self.adversaries
            if in_bounds(snake.head, self.columns, self.rows)
        ]
        escaped = len(self.adversaries) - len(survivors)

        self.adversaries = []
        eliminated = 0
        for adversary in survivors:
            if self.player.bites(adversary):
                eliminated += 1
                self.score += 1
                logger.debug("Player bit adversary at %s", adversary.head)
                for callback in self._score_listeners:
                    callback(self.score)
            else:
                self.adversaries.append(adversary)

        snapshot = self.snapshot()
        for callback in self._render_listeners:
            callback(snapshot)
        return TickReport(escaped=escaped, eliminated=eliminated)

    def _death_reason(self) -> str | None:
        if not in_bounds(self.player.head, self.columns, self.rows):
            return "wall"
        for adversary in self.adversaries:
            if adversary.bites(self.player):
                return "bitten"
        return None

    def _finish(self, reason: str) -> None:
        self.game_over = True
        self.death_reason = reason
        logger.info(
            "Game over (%s) after %d ticks, score %d", reason, self.ticks, self.score
        )
        for callback in self._game_over_listeners:
            callback(reason)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            player=_view(self.player),
            adversaries=tuple(_view(snake) for snake in self.adversaries),
            score=self.score,
            game_over=self.game_over,
        )
