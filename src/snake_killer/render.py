"""Board painting and score display for Snake Killer."""

from __future__ import annotations

from typing import Iterable, List

import pygame

from .config import BLOCK, PALETTE
from .engine import SnakeView, Snapshot
from .geometry import Position, in_bounds

ColorGrid = List[List[pygame.Color]]


def cell_colors(snapshot: Snapshot, columns: int, rows: int) -> ColorGrid:
    """Return the color of every cell, indexed ``[x][y]``.

    Empty cells get the background color. The player is painted first and
    adversaries on top; within a snake the head is painted before the trail.
    """

    grid = [[PALETTE["background"] for _ in range(rows)] for _ in range(columns)]

    def paint(
        snake: SnakeView, head_color: pygame.Color, trail_color: pygame.Color
    ) -> None:
        _paint_cells(grid, [snake.head], head_color, columns, rows)
        _paint_cells(grid, snake.trail, trail_color, columns, rows)

    paint(snapshot.player, PALETTE["player_head"], PALETTE["player_trail"])
    for adversary in snapshot.adversaries:
        paint(adversary, PALETTE["adversary_head"], PALETTE["adversary_trail"])
    return grid


def _paint_cells(
    grid: ColorGrid,
    cells: Iterable[Position],
    color: pygame.Color,
    columns: int,
    rows: int,
) -> None:
    for x, y in cells:
        if in_bounds((x, y), columns, rows):
            grid[x][y] = color


class BoardRenderer:
    """Keeps the latest engine snapshot and paints it cell by cell."""

    def __init__(self, columns: int, rows: int, block: int = BLOCK) -> None:
        self.columns = columns
        self.rows = rows
        self.block = block
        self.snapshot: Snapshot | None = None
        self.frames: int = 0

    def update(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot
        self.frames += 1

    def draw(self, surface: pygame.Surface, offset: tuple[int, int] = (0, 0)) -> None:
        if self.snapshot is None:
            surface.fill(PALETTE["background"])
            return
        ox, oy = offset
        grid = cell_colors(self.snapshot, self.columns, self.rows)
        for x, column in enumerate(grid):
            for y, color in enumerate(column):
                rect = pygame.Rect(
                    ox + x * self.block, oy + y * self.block, self.block, self.block
                )
                pygame.draw.rect(surface, color, rect)


class ScoreBoard:
    """Plain integer counter bumped once per eliminated adversary."""

    def __init__(self) -> None:
        self.value: int = 0

    def increment(self, _total: int | None = None) -> None:
        self.value += 1

    def text(self) -> str:
        return f"Score: {self.value}"

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        pos: tuple[int, int] = (10, 4),
    ) -> None:
        label = font.render(self.text(), True, PALETTE["text"])
        surface.blit(label, pos)
