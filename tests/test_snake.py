import random

import pytest

from snake_killer.geometry import Direction
from snake_killer.snake import Snake


class TestSnakeCreation:
    """Tests for spawning snakes."""

    def test_spawn_coils_trail_on_spawn_cell(self):
        """Head and all five trail slots start on the spawn cell."""
        snake = Snake.spawn((7, 3), random.Random(1))
        assert snake.head == (7, 3)
        assert snake.trail == [(7, 3)] * 5
        assert snake.heading in set(Direction)

    def test_spawn_uses_supplied_generator(self):
        """Same seed, same initial heading."""
        first = Snake.spawn((0, 0), random.Random(42))
        second = Snake.spawn((0, 0), random.Random(42))
        assert first.heading is second.heading


class TestHeading:
    """Tests for the guarded heading setter."""

    @pytest.mark.parametrize("current", list(Direction))
    def test_reverse_request_is_ignored(self, current):
        snake = Snake((5, 5), current)
        snake.set_heading(current.opposite)
        assert snake.heading is current

    @pytest.mark.parametrize("current", list(Direction))
    def test_other_requests_are_applied(self, current):
        """Same and perpendicular directions are accepted."""
        for requested in Direction:
            if requested is current.opposite:
                continue
            snake = Snake((5, 5), current)
            snake.set_heading(requested)
            assert snake.heading is requested

    def test_heading_has_no_public_setter(self):
        snake = Snake((5, 5), Direction.UP)
        with pytest.raises(AttributeError):
            snake.heading = Direction.DOWN


class TestAdvance:
    """Tests for one movement step."""

    @pytest.mark.parametrize(
        "heading, expected",
        [
            (Direction.LEFT, (4, 5)),
            (Direction.UP, (5, 4)),
            (Direction.RIGHT, (6, 5)),
            (Direction.DOWN, (5, 6)),
        ],
    )
    def test_head_moves_one_cell(self, heading, expected):
        snake = Snake((5, 5), heading)
        snake.advance()
        assert snake.head == expected

    def test_trail_follows_head(self):
        """Slot 0 takes the old head; the oldest cell drops off."""
        snake = Snake((5, 5), Direction.RIGHT)
        for _ in range(7):
            old_head = snake.head
            snake.advance()
            assert len(snake.trail) == 5
            assert snake.trail[0] == old_head
        assert snake.head == (12, 5)
        assert snake.trail == [(11, 5), (10, 5), (9, 5), (8, 5), (7, 5)]

    def test_advance_may_leave_the_grid(self):
        """No wraparound: coordinates simply go negative."""
        snake = Snake((0, 0), Direction.LEFT)
        snake.advance()
        assert snake.head == (-1, 0)


class TestBites:
    """Tests for head-on-trail detection."""

    def test_head_on_trail_bites(self):
        prey = Snake((3, 3), Direction.DOWN)
        prey.advance()
        hunter = Snake((3, 3), Direction.UP)
        assert hunter.bites(prey)

    def test_head_on_head_does_not_bite(self):
        """Only trail cells count."""
        prey = Snake((3, 3), Direction.DOWN)
        for _ in range(6):
            prey.advance()
        hunter = Snake(prey.head, Direction.UP)
        assert not hunter.bites(prey)

    def test_cells_lists_head_first(self):
        snake = Snake((1, 1), Direction.RIGHT)
        snake.advance()
        assert snake.cells() == [(2, 1)] + [(1, 1)] * 5
