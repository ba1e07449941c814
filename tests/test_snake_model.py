"""
Tests for snake_model.py - movement, growth, speed and collision rules.
"""

import pytest

from snake_model import (
    DIRECTIONS,
    DOWN,
    INITIAL_INTERVAL_MS,
    LEFT,
    MIN_INTERVAL_MS,
    RIGHT,
    START_POSITION,
    UP,
    Snake,
    interval_for_length,
    is_reverse,
)


class TestReset:
    def test_reset_puts_single_segment_at_origin(self):
        """A fresh snake is one segment at the origin heading right."""
        snake = Snake()
        assert snake.body == [START_POSITION]
        assert snake.heading == RIGHT
        assert snake.pending_heading == RIGHT
        assert snake.growing is False
        assert snake.interval_ms == INITIAL_INTERVAL_MS

    def test_reset_discards_previous_game(self):
        """reset() restores the initial state after play."""
        snake = Snake([(3, 3), (2, 3), (1, 3), (0, 3), (0, 4)], heading=UP)
        snake.grow()
        snake.reset()
        assert snake.body == [START_POSITION]
        assert snake.heading == RIGHT
        assert snake.interval_ms == INITIAL_INTERVAL_MS

    def test_empty_body_is_rejected(self):
        with pytest.raises(ValueError):
            Snake([])


class TestHeading:
    @pytest.mark.parametrize("direction", [UP, DOWN, RIGHT])
    def test_non_reversal_applies_on_next_advance(self, direction):
        """Any heading except the reverse is used by the next advance."""
        snake = Snake([(10, 10)], heading=RIGHT)
        snake.set_heading(direction)
        assert snake.heading == RIGHT
        snake.advance()
        assert snake.heading == direction
        assert snake.head == (10 + direction[0], 10 + direction[1])

    @pytest.mark.parametrize("current", DIRECTIONS)
    def test_reversal_is_ignored(self, current):
        """Requesting the exact opposite heading changes nothing."""
        snake = Snake([(10, 10)], heading=current)
        snake.set_heading((-current[0], -current[1]))
        snake.advance()
        assert snake.heading == current

    def test_reversal_checked_against_current_not_pending(self):
        """Moving right, up then down within one tick leaves down pending."""
        snake = Snake([(10, 10)], heading=RIGHT)
        snake.set_heading(UP)
        snake.set_heading(DOWN)
        assert snake.pending_heading == DOWN
        snake.set_heading(LEFT)
        assert snake.pending_heading == DOWN

    def test_reversal_request_keeps_moving_forward(self):
        """[(0,5),(1,5)] moving right ignores a left request."""
        snake = Snake([(0, 5), (1, 5)], heading=RIGHT)
        snake.set_heading(LEFT)
        snake.advance()
        assert snake.heading == RIGHT
        assert snake.head == (1, 5)

    @pytest.mark.parametrize("bad", [(0, 0), (1, 1), (2, 0), (-1, -1)])
    def test_malformed_heading_is_ignored(self, bad):
        snake = Snake()
        snake.set_heading(bad)
        assert snake.pending_heading == RIGHT

    def test_is_reverse(self):
        assert is_reverse(LEFT, RIGHT)
        assert is_reverse(UP, DOWN)
        assert not is_reverse(UP, LEFT)


class TestAdvance:
    def test_single_segment_moves_right(self):
        """[(10,10)] heading right advances to [(11,10)]."""
        snake = Snake([(10, 10)], heading=RIGHT)
        assert snake.advance() == (11, 10)
        assert snake.body == [(11, 10)]

    def test_length_constant_without_food(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)], heading=RIGHT)
        for _ in range(4):
            snake.advance()
        assert snake.body == [(9, 5), (8, 5), (7, 5)]
        assert len(snake.body) == 3


class TestGrow:
    def test_grow_after_advance_restores_tail(self):
        """Eating right after an advance adds the dropped tail back at once."""
        snake = Snake([(5, 5), (4, 5), (3, 5)], heading=RIGHT)
        snake.advance()
        snake.grow()
        assert snake.body == [(6, 5), (5, 5), (4, 5), (3, 5)]
        assert snake.growing is False

    def test_grow_before_any_advance_is_pending(self):
        """Without a dropped tail the next advance keeps its tail instead."""
        snake = Snake([(5, 5)], heading=RIGHT)
        snake.grow()
        assert snake.growing is True
        assert snake.length == 2
        snake.advance()
        assert snake.body == [(6, 5), (5, 5)]
        assert snake.growing is False
        snake.advance()
        assert snake.body == [(7, 5), (6, 5)]

    def test_speed_up_when_length_reaches_multiple_of_five(self):
        snake = Snake([(5, 5), (4, 5), (3, 5), (2, 5)], heading=RIGHT)
        snake.advance()
        snake.grow()
        assert len(snake.body) == 5
        assert snake.interval_ms == INITIAL_INTERVAL_MS - 10

    def test_no_speed_up_between_multiples(self):
        snake = Snake([(5, 5), (4, 5)], heading=RIGHT)
        snake.advance()
        snake.grow()
        assert snake.interval_ms == INITIAL_INTERVAL_MS


class TestIntervalForLength:
    @pytest.mark.parametrize(
        "length,expected",
        [(1, 150), (4, 150), (5, 140), (9, 140), (10, 130), (49, 60), (50, 50), (400, 50)],
    )
    def test_steps(self, length, expected):
        assert interval_for_length(length) == expected

    def test_non_increasing_and_floored(self):
        values = [interval_for_length(n) for n in range(1, 200)]
        assert all(a >= b for a, b in zip(values, values[1:]))
        assert min(values) == MIN_INTERVAL_MS


class TestCollision:
    def test_head_past_right_wall(self):
        """Head at (10,4) on a 10x10 grid is out of bounds."""
        snake = Snake([(10, 4)])
        assert snake.check_collision(10, 10) is True
        assert snake.collision_kind(10, 10) == "wall"

    @pytest.mark.parametrize("head", [(-1, 0), (0, -1), (0, 10), (9, 10)])
    def test_other_walls(self, head):
        assert Snake([head]).check_collision(10, 10)

    def test_corners_are_inside(self):
        for head in [(0, 0), (9, 0), (0, 9), (9, 9)]:
            assert not Snake([head]).check_collision(10, 10)

    def test_head_on_body_is_self_collision(self):
        snake = Snake([(2, 2), (3, 2), (3, 3), (2, 3), (2, 2)])
        assert snake.check_collision(10, 10)
        assert snake.collision_kind(10, 10) == "self"

    def test_running_into_own_body(self):
        snake = Snake([(5, 5), (4, 5), (4, 6), (5, 6), (6, 6)], heading=UP)
        snake.set_heading(DOWN)  # reversal, ignored
        snake.set_heading(LEFT)
        snake.advance()
        assert snake.head == (4, 5)
        assert snake.collision_kind(10, 10) == "self"

    def test_no_collision_is_pure(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        before = list(snake.body)
        assert snake.check_collision(10, 10) is False
        assert snake.body == before
