from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pygame

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def wrapped(self, width: int, height: int) -> "Position":
        """Fold an off-grid coordinate back onto the opposite edge."""
        x, y = self.x, self.y
        if x < 0:
            x = width - 1
        elif x >= width:
            x = 0
        if y < 0:
            y = height - 1
        elif y >= height:
            y = 0
        return Position(x, y)


class Direction(Enum):
    RIGHT = Position(1, 0)
    DOWN = Position(0, 1)
    LEFT = Position(-1, 0)
    UP = Position(0, -1)

    @property
    def delta(self) -> Position:
        return self.value

    @property
    def opposite(self) -> "Direction":
        return OPPOSITE[self]


OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameover"


def lighten(color: Color, amount: int = 50) -> Color:
    return tuple(min(255, c + amount) for c in color)


# ---------------------------- Entities --------------------------------

class Entity:
    """Anything that sits on one grid cell and can draw itself."""

    def __init__(self, position: Position, color: Color):
        self.position = position
        self.color = color

    def cell_rect(self, cell_size: int, inset: int = 0) -> pygame.Rect:
        return pygame.Rect(
            self.position.x * cell_size + inset,
            self.position.y * cell_size + inset,
            cell_size - inset * 2,
            cell_size - inset * 2,
        )

    def render(self, surface: pygame.Surface, cell_size: int) -> None:
        raise NotImplementedError
