import pytest

from snake_game.models import Direction, Position, lighten
from snake_game.snake import Snake


def positions(snake):
    return list(snake.positions())


def test_new_snake_is_three_long_heading_right():
    snake = Snake(5, 5)
    assert positions(snake) == [Position(5, 5), Position(4, 5), Position(3, 5)]
    assert snake.direction == Direction.RIGHT
    assert snake.segments[0].color == snake.head_color
    assert all(s.color == snake.body_color for s in snake.segments[1:])


def test_move_prepends_head_and_recolors_old_head():
    snake = Snake(5, 5)
    assert snake.move(10, 10)
    assert snake.head == Position(6, 5)
    assert snake.length == 4
    assert snake.segments[0].color == snake.head_color
    assert snake.segments[1].color == snake.body_color


@pytest.mark.parametrize("start, direction, expected", [
    (Position(9, 5), Direction.RIGHT, Position(0, 5)),
    (Position(0, 5), Direction.LEFT, Position(9, 5)),
    (Position(5, 0), Direction.UP, Position(5, 9)),
    (Position(5, 9), Direction.DOWN, Position(5, 0)),
])
def test_move_wraps_around_edges(start, direction, expected):
    snake = Snake.from_positions([start], direction)
    assert snake.move(10, 10)
    assert snake.head == expected


def test_reverse_direction_is_ignored():
    snake = Snake(5, 5)
    snake.change_direction(Direction.LEFT)
    assert snake.direction == Direction.RIGHT
    snake.change_direction(Direction.UP)
    assert snake.direction == Direction.UP
    snake.change_direction(Direction.DOWN)
    assert snake.direction == Direction.UP


def test_collision_with_body_fails_and_leaves_snake_alone():
    # Head at (1,1) heading down into (1,2), which is not the tail
    coil = [Position(1, 1), Position(2, 1), Position(2, 2), Position(1, 2), Position(0, 2)]
    snake = Snake.from_positions(coil, Direction.DOWN)
    colors = [s.color for s in snake.segments]

    assert snake.move(10, 10) is False
    assert positions(snake) == coil
    assert [s.color for s in snake.segments] == colors


def test_moving_into_the_tail_cell_is_allowed():
    ring = [Position(1, 1), Position(2, 1), Position(2, 2), Position(1, 2)]
    snake = Snake.from_positions(ring, Direction.DOWN)
    assert snake.move(10, 10)
    snake.shrink_tail()
    assert positions(snake) == [Position(1, 2), Position(1, 1), Position(2, 1), Position(2, 2)]


def test_shrink_tail():
    snake = Snake(5, 5)
    snake.shrink_tail()
    assert positions(snake) == [Position(5, 5), Position(4, 5)]

    empty = Snake.from_positions([])
    empty.shrink_tail()
    assert empty.length == 0


def test_contains():
    snake = Snake(5, 5)
    assert snake.contains(Position(3, 5))
    assert not snake.contains(Position(6, 5))


def test_recolor_repaints_all_segments():
    snake = Snake(5, 5)
    body = (10, 20, 30)
    snake.recolor(body, lighten(body))
    assert snake.segments[0].color == (60, 70, 80)
    assert all(s.color == body for s in snake.segments[1:])
    snake.move(10, 10)
    assert snake.segments[1].color == body


def test_lighten_clamps_at_255():
    assert lighten((0, 220, 255)) == (50, 255, 255)
