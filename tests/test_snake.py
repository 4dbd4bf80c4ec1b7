"""Tests for the path history buffer and snake movement."""

import pytest

from src.snake.enums import Direction, Orientation
from src.snake.path import PathEntry, PathHistory
from src.snake.snake import BodySegment, Snake


class TestPathHistory:
    def test_record_prepends_newest_first(self):
        path = PathHistory([PathEntry((0, 0), Orientation.VERTICAL)])
        path.record_head_departure((0, 1), Orientation.HORIZONTAL)
        assert path.cells() == [(0, 1), (0, 0)]
        assert path[0].orientation is Orientation.HORIZONTAL

    def test_position_for_indexes_entries(self):
        path = PathHistory([PathEntry((i, 0), Orientation.HORIZONTAL) for i in range(3)])
        assert path.position_for(0) == (0, 0)
        assert path.position_for(2) == (2, 0)

    def test_position_for_out_of_range_fails_fast(self):
        path = PathHistory([PathEntry((0, 0), Orientation.VERTICAL)])
        with pytest.raises(AssertionError):
            path.position_for(1)
        with pytest.raises(AssertionError):
            path.position_for(-1)

    def test_trim_keeps_prefix(self):
        path = PathHistory([PathEntry((i, 0), Orientation.HORIZONTAL) for i in range(5)])
        path.trim(3)
        assert path.cells() == [(0, 0), (1, 0), (2, 0)]
        path.trim(10)
        assert len(path) == 3


class TestSnakeInitial:
    def test_initial_layout(self):
        snake = Snake.initial()
        assert snake.head == (0, 3)
        assert snake.direction is Direction.DOWN
        assert snake.segments == [BodySegment(0), BodySegment(1), BodySegment(2)]
        assert snake.positions == [(0, 2), (0, 1), (0, 0)]
        assert len(snake.path) == 3

    def test_initial_snakes_do_not_share_history(self):
        a, b = Snake.initial(), Snake.initial()
        a.move()
        assert len(b.path) == 3
        assert b.head == (0, 3)


class TestDirectionRule:
    def test_reverse_rejected(self):
        snake = Snake((5, 5), Direction.UP, PathHistory([PathEntry((5, 6), Orientation.VERTICAL)]), 1)
        assert snake.turn(Direction.DOWN) is False
        assert snake.pending is Direction.UP
        snake.move()
        assert snake.direction is Direction.UP

    @pytest.mark.parametrize("turn", [Direction.LEFT, Direction.RIGHT])
    def test_perpendicular_accepted(self, turn):
        snake = Snake((5, 5), Direction.UP, PathHistory([PathEntry((5, 6), Orientation.VERTICAL)]), 1)
        assert snake.turn(turn) is True
        assert snake.pending is turn
        # latched, applied on the next move
        assert snake.direction is Direction.UP
        snake.move()
        assert snake.direction is turn

    def test_two_turns_in_one_tick_cannot_reverse(self):
        snake = Snake.initial()  # heading down
        snake.turn(Direction.LEFT)
        assert snake.turn(Direction.UP) is False
        assert snake.pending is Direction.LEFT


class TestMovement:
    def test_one_tick_from_start(self):
        snake = Snake.initial()
        snake.move()
        snake.trim_path()
        assert snake.head == (0, 4)
        assert snake.path.cells() == [(0, 3), (0, 2), (0, 1)]
        assert snake.path[0].orientation is Orientation.VERTICAL
        assert snake.positions == [(0, 3), (0, 2), (0, 1)]

    def test_turn_records_horizontal_departure(self):
        snake = Snake.initial()
        snake.turn(Direction.RIGHT)
        snake.move()
        assert snake.head == (1, 3)
        assert snake.path[0] == PathEntry((0, 3), Orientation.HORIZONTAL)

    def test_history_never_shorter_than_body(self):
        snake = Snake.initial()
        for i in range(10):
            snake.move()
            if i % 3 == 0:
                snake.grow()
            snake.trim_path()
            assert len(snake.path) >= len(snake.segments)


class TestGrowth:
    def test_grow_appends_tail_and_keeps_existing_positions(self):
        snake = Snake.initial()
        snake.move()
        before = list(snake.positions)
        segment = snake.grow()
        assert segment == BodySegment(3)
        assert len(snake.segments) == 4
        assert snake.positions[:3] == before
        assert snake.positions[3] == (0, 0)

    def test_grown_tail_follows_on_next_move(self):
        snake = Snake.initial()
        snake.move()
        snake.grow()
        snake.trim_path()
        snake.move()
        assert snake.positions == [(0, 4), (0, 3), (0, 2), (0, 1)]

    def test_occupied_cells_include_head(self):
        snake = Snake.initial()
        assert snake.occupied_cells() == [(0, 3), (0, 2), (0, 1), (0, 0)]
