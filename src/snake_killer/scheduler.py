"""Fixed-interval triggers that drive the engine from a single loop."""

from __future__ import annotations

from dataclasses import dataclass, field

from .config import SPAWN_INTERVAL_MS, TICK_INTERVAL_MS
from .engine import Engine


@dataclass(slots=True)
class PeriodicTimer:
    interval_ms: float
    next_due: float = field(init=False)
    active: bool = True

    def __post_init__(self) -> None:
        if self.interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {self.interval_ms}")
        self.next_due = self.interval_ms

    def due(self, now: float) -> bool:
        return self.active and self.next_due <= now

    def fire(self) -> None:
        self.next_due += self.interval_ms

    def cancel(self) -> None:
        self.active = False


class GameClock:
    """Feeds elapsed wall time into ticks and spawns, one event at a time.

    Events fire in chronological order; when a tick and a spawn fall due on
    the same millisecond the tick goes first. Game over cancels both
    triggers for good.
    """

    def __init__(
        self,
        engine: Engine,
        tick_interval_ms: float = TICK_INTERVAL_MS,
        spawn_interval_ms: float = SPAWN_INTERVAL_MS,
    ) -> None:
        self.engine = engine
        self.now: float = 0.0
        self.tick_timer = PeriodicTimer(tick_interval_ms)
        self.spawn_timer = PeriodicTimer(spawn_interval_ms)

    @property
    def running(self) -> bool:
        return self.tick_timer.active

    def advance(self, elapsed_ms: float) -> None:
        if elapsed_ms < 0:
            raise ValueError(f"elapsed time cannot be negative, got {elapsed_ms}")
        target = self.now + elapsed_ms

        while True:
            pending = [
                timer
                for timer in (self.tick_timer, self.spawn_timer)
                if timer.due(target)
            ]
            if not pending:
                break
            timer = min(pending, key=lambda t: t.next_due)
            self.now = timer.next_due
            timer.fire()
            if timer is self.tick_timer:
                self.engine.tick()
            else:
                self.engine.spawn_adversary()
            if self.engine.game_over:
                self.tick_timer.cancel()
                self.spawn_timer.cancel()
                break

        self.now = target
