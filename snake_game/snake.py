from __future__ import annotations

from typing import Iterator

import pygame

from .config import LIME_GREEN, SNAKE_GREEN, START_LENGTH
from .models import Color, Direction, Entity, Position, lighten


class SnakeSegment(Entity):
    def render(self, surface: pygame.Surface, cell_size: int) -> None:
        pygame.draw.rect(surface, self.color, self.cell_rect(cell_size, inset=1))
        # Small highlight in the top-left corner
        hl = max(2, cell_size // 5)
        pygame.draw.ellipse(
            surface,
            lighten(self.color, 90),
            pygame.Rect(self.position.x * cell_size + 2, self.position.y * cell_size + 2, hl, hl),
        )


class Snake:
    """The player's snake. Head is ``segments[0]``."""

    def __init__(self, start_x: int, start_y: int, *,
                 length: int = START_LENGTH,
                 body_color: Color = SNAKE_GREEN,
                 head_color: Color = LIME_GREEN):
        self.body_color = body_color
        self.head_color = head_color
        self.direction = Direction.RIGHT
        # Build initial snake heading right, body trailing to the left
        self.segments: list[SnakeSegment] = [
            SnakeSegment(Position(start_x - i, start_y), head_color if i == 0 else body_color)
            for i in range(max(1, length))
        ]

    @classmethod
    def from_positions(cls, positions: list[Position], direction: Direction = Direction.RIGHT, **kw) -> "Snake":
        snake = cls(0, 0, length=1, **kw)
        snake.segments = [
            SnakeSegment(p, snake.head_color if i == 0 else snake.body_color)
            for i, p in enumerate(positions)
        ]
        snake.direction = direction
        return snake

    @property
    def head(self) -> Position:
        return self.segments[0].position

    @property
    def length(self) -> int:
        return len(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def positions(self) -> Iterator[Position]:
        return (s.position for s in self.segments)

    def next_head(self, grid_width: int, grid_height: int) -> Position:
        return (self.head + self.direction.delta).wrapped(grid_width, grid_height)

    def move(self, grid_width: int, grid_height: int) -> bool:
        """Advance the head one cell. Returns False on self collision.

        The tail is not part of the collision check since it vacates its cell
        this tick; removing it (or keeping it when food was eaten) is left to
        the caller.
        """
        new_head = self.next_head(grid_width, grid_height)

        for seg in self.segments[1:-1]:
            if seg.position == new_head:
                return False

        self.segments.insert(0, SnakeSegment(new_head, self.head_color))
        self.segments[1].color = self.body_color
        return True

    def shrink_tail(self) -> None:
        if self.segments:
            self.segments.pop()

    def change_direction(self, d: Direction) -> None:
        if d == self.direction.opposite:
            return  # disallow 180 turns
        self.direction = d

    def contains(self, position: Position) -> bool:
        return any(s.position == position for s in self.segments)

    def recolor(self, body_color: Color, head_color: Color) -> None:
        self.body_color = body_color
        self.head_color = head_color
        for i, seg in enumerate(self.segments):
            seg.color = head_color if i == 0 else body_color

    def render(self, surface: pygame.Surface, cell_size: int) -> None:
        for seg in self.segments:
            seg.render(surface, cell_size)
