from __future__ import annotations

import logging
import random

import pygame

from .config import (
    FOOD_GOLD,
    FOOD_MAX_ATTEMPTS,
    FOOD_RED,
    FOOD_VALUE,
    SPECIAL_FOOD_ODDS,
    SPECIAL_FOOD_VALUE,
)
from .models import Color, Entity, Position, lighten
from .snake import Snake

logger = logging.getLogger(__name__)


class Food(Entity):
    def __init__(self, position: Position, color: Color = FOOD_RED, value: int = FOOD_VALUE):
        super().__init__(position, color)
        self.value = value

    @property
    def special(self) -> bool:
        return self.value == SPECIAL_FOOD_VALUE

    @classmethod
    def spawn(cls, grid_width: int, grid_height: int, snake: Snake,
              rng: random.Random | None = None) -> "Food | None":
        """Place food on a free cell, or return None when the grid is full.

        Cells are drawn from the grid inset by one cell so food is never
        flush against an edge; grids of 3 cells or fewer on a side use the
        whole area instead.
        """
        rng = rng or random
        position = _pick_cell(grid_width, grid_height, snake, rng)
        if position is None:
            logger.info("No free cell left for food (%dx%d grid)", grid_width, grid_height)
            return None

        # Kind is drawn independently of the position
        if rng.randrange(SPECIAL_FOOD_ODDS) == 0:
            return cls(position, FOOD_GOLD, SPECIAL_FOOD_VALUE)
        return cls(position, FOOD_RED, FOOD_VALUE)

    def render(self, surface: pygame.Surface, cell_size: int) -> None:
        pygame.draw.ellipse(surface, self.color, self.cell_rect(cell_size, inset=2))
        hl = max(2, cell_size // 5)
        pygame.draw.ellipse(
            surface,
            lighten(self.color, 120),
            pygame.Rect(self.position.x * cell_size + cell_size // 4,
                        self.position.y * cell_size + cell_size // 4, hl, hl),
        )


def _pick_cell(grid_width: int, grid_height: int, snake: Snake, rng) -> Position | None:
    if grid_width <= 0 or grid_height <= 0:
        return None

    if grid_width <= 3 or grid_height <= 3:
        min_x, min_y = 0, 0
        max_x, max_y = grid_width - 1, grid_height - 1
    else:
        min_x, min_y = 1, 1
        max_x, max_y = grid_width - 2, grid_height - 2

    for _ in range(FOOD_MAX_ATTEMPTS):
        candidate = Position(rng.randint(min_x, max_x), rng.randint(min_y, max_y))
        if not snake.contains(candidate):
            return candidate

    # Last resort: first free cell, row by row
    for y in range(grid_height):
        for x in range(grid_width):
            candidate = Position(x, y)
            if not snake.contains(candidate):
                return candidate
    return None
