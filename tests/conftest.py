import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


class NeverTurnRandom(random.Random):
    """randrange never yields 0, so adversaries keep their heading."""

    def randrange(self, start, stop=None, step=1):
        return 1


class ScriptedTurnRandom(random.Random):
    """Every adversary turns every tick, towards ``direction``."""

    def __init__(self, direction):
        super().__init__(0)
        self.direction = direction

    def randrange(self, start, stop=None, step=1):
        return 0

    def choice(self, seq):
        return self.direction


@pytest.fixture
def never_turn():
    return NeverTurnRandom()


@pytest.fixture
def always_turn():
    return ScriptedTurnRandom
