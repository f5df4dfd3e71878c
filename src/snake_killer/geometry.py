"""Directions and grid helpers shared by every snake."""

from __future__ import annotations

import random
from enum import Enum

Position = tuple[int, int]


class Direction(Enum):
    LEFT = (-1, 0)
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        return OPPOSITE[self]


OPPOSITE: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
}


def are_opposite(first: Direction, second: Direction) -> bool:
    return OPPOSITE[first] is second


def random_direction(rng: random.Random | None = None) -> Direction:
    """Pick one of the four directions uniformly."""

    return (rng or random).choice(list(Direction))


def step(position: Position, direction: Direction) -> Position:
    dx, dy = direction.delta
    return position[0] + dx, position[1] + dy


def in_bounds(position: Position, columns: int, rows: int) -> bool:
    """Half-open check against ``[0, columns) x [0, rows)``."""

    x, y = position
    return 0 <= x < columns and 0 <= y < rows
