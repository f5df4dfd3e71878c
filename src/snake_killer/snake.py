"""Snake entity: a head dragging a fixed-length trail."""

from __future__ import annotations

import random

from .config import TRAIL_LENGTH
from .geometry import Direction, Position, are_opposite, random_direction, step


class Snake:
    """A head, its trail (most recently vacated cell first), and a guarded heading."""

    __slots__ = ("head", "trail", "_heading")

    def __init__(
        self, head: Position, heading: Direction, length: int = TRAIL_LENGTH
    ) -> None:
        self.head: Position = (int(head[0]), int(head[1]))
        self.trail: list[Position] = [self.head] * length
        self._heading = heading

    @classmethod
    def spawn(cls, position: Position, rng: random.Random | None = None) -> Snake:
        """Create a snake coiled on ``position`` facing a random direction."""
        return cls(position, random_direction(rng))

    @property
    def heading(self) -> Direction:
        return self._heading

    def set_heading(self, requested: Direction) -> None:
        """Turn towards ``requested`` unless it would reverse the snake."""
        if not are_opposite(self._heading, requested):
            self._heading = requested

    def advance(self) -> None:
        """Move one cell: the trail follows the head, the oldest cell drops off."""
        self.trail = [self.head] + self.trail[:-1]
        self.head = step(self.head, self._heading)

    def bites(self, other: Snake) -> bool:
        return self.head in other.trail

    def cells(self) -> list[Position]:
        return [self.head, *self.trail]

    def __repr__(self) -> str:
        return f"<Snake head={self.head} heading={self._heading.name}>"
