import pygame

from snake_killer.controls import KEY_TO_DIRECTION, handle_key
from snake_killer.engine import Engine
from snake_killer.geometry import Direction
from snake_killer.snake import Snake


def make_engine(rng):
    return Engine(40, 30, player=Snake((20, 15), Direction.RIGHT), rng=rng)


class TestKeyMapping:
    """Tests for arrow key handling."""

    def test_only_arrow_keys_are_bound(self):
        assert KEY_TO_DIRECTION == {
            pygame.K_LEFT: Direction.LEFT,
            pygame.K_UP: Direction.UP,
            pygame.K_RIGHT: Direction.RIGHT,
            pygame.K_DOWN: Direction.DOWN,
        }

    def test_arrow_key_turns_player(self, never_turn):
        engine = make_engine(never_turn)
        assert handle_key(engine, pygame.K_UP)
        assert engine.player.heading is Direction.UP

    def test_reverse_key_is_recognized_but_ignored(self, never_turn):
        engine = make_engine(never_turn)
        assert handle_key(engine, pygame.K_LEFT)
        assert engine.player.heading is Direction.RIGHT

    def test_other_keys_are_ignored(self, never_turn):
        engine = make_engine(never_turn)
        assert not handle_key(engine, pygame.K_a)
        assert not handle_key(engine, pygame.K_SPACE)
        assert engine.player.heading is Direction.RIGHT
