"""Entry point for the Snake Killer game."""

from __future__ import annotations

import logging

from snake_killer.config import LOG_LEVEL
from snake_killer.game import SnakeKiller


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    game = SnakeKiller()
    game.start()


if __name__ == "__main__":
    main()
