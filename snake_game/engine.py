from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum

import pygame

from . import config
from .food import Food
from .models import Color, Direction, GameState, lighten
from .snake import Snake

logger = logging.getLogger(__name__)


class EventKind(Enum):
    SCORE_CHANGED = "score_changed"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    value: int = 0


DIRECTION_KEYS = {
    pygame.K_UP: Direction.UP, pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN, pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT, pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT, pygame.K_d: Direction.RIGHT,
}
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
PAUSE_KEYS = (pygame.K_p, pygame.K_ESCAPE)
RESUME_KEYS = (pygame.K_p, pygame.K_ESCAPE, pygame.K_SPACE)


class GameEngine:
    """Snake simulation: state machine, scoring and per-tick update.

    The engine never talks to the window or the mixer. Everything the host
    needs to react to (score changes, game over) comes back as a list of
    ``GameEvent`` from ``start_new_game``, ``update`` and ``handle_key``.
    """

    def __init__(self, width: int, height: int, cell_size: int = config.CELL_SIZE,
                 rng: random.Random | None = None):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self.rng = rng or random.Random()

        self.state = GameState.MENU
        self.score = 0
        self.high_score = 0
        self.level = 1
        self.snake: Snake | None = None
        self.food: Food | None = None

        self.base_speed = config.BASE_SPEED
        self.grid_enabled = True
        self._difficulty = config.DIFFICULTY_MEDIUM
        self._snake_color: Color = config.SNAKE_GREEN

        self.grid_width = 0
        self.grid_height = 0
        self.resize(width, height)

    # ------------------------ Settings -------------------------------

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: int) -> None:
        self._difficulty = max(config.DIFFICULTY_EASY, min(config.DIFFICULTY_HARD, int(value)))

    @property
    def snake_color(self) -> Color:
        return self._snake_color

    @snake_color.setter
    def snake_color(self, color: Color) -> None:
        self._snake_color = tuple(color)
        if self.snake is not None:
            self.snake.recolor(self._snake_color, lighten(self._snake_color))

    @property
    def speed(self) -> int:
        """Tick interval in ms. Unclamped; can go to zero or below at high levels."""
        modifier = config.DIFFICULTY_MODIFIERS.get(self._difficulty, 0)
        return self.base_speed - self.level * config.LEVEL_STEP_MS + modifier

    @property
    def tick_interval(self) -> int:
        return max(config.MIN_TICK_MS, self.speed)

    def resize(self, width: int, height: int) -> None:
        # Entities are left where they are, even if now off-grid
        self.grid_width = max(0, width) // self.cell_size
        self.grid_height = max(0, height) // self.cell_size
        logger.debug("Grid resized to %dx%d", self.grid_width, self.grid_height)

    # ------------------------ State machine --------------------------

    def start_new_game(self) -> list[GameEvent]:
        self.score = 0
        self.level = 1
        self.snake = Snake(
            self.grid_width // 2, self.grid_height // 2,
            body_color=self._snake_color, head_color=lighten(self._snake_color),
        )
        self.food = Food.spawn(self.grid_width, self.grid_height, self.snake, self.rng)
        self.state = GameState.PLAYING
        logger.info("New game on %dx%d grid (difficulty %d)",
                    self.grid_width, self.grid_height, self._difficulty)
        return [GameEvent(EventKind.SCORE_CHANGED, 0)]

    def pause_game(self) -> None:
        if self.state == GameState.PLAYING:
            self.state = GameState.PAUSED

    def resume_game(self) -> None:
        if self.state == GameState.PAUSED:
            self.state = GameState.PLAYING

    def toggle_pause(self) -> None:
        if self.state == GameState.PLAYING:
            self.pause_game()
        elif self.state == GameState.PAUSED:
            self.resume_game()

    def update(self) -> list[GameEvent]:
        """Advance one tick. Does nothing unless a game is being played."""
        if self.state != GameState.PLAYING or self.snake is None:
            return []

        if not self.snake.move(self.grid_width, self.grid_height):
            return self._game_over()

        if self.food is not None and self.snake.head == self.food.position:
            # Tail stays: the snake grows by one
            self.score += self.food.value
            if self.score > self.high_score:
                self.high_score = self.score
            self.food = Food.spawn(self.grid_width, self.grid_height, self.snake, self.rng)
            if self.score % config.LEVEL_POINTS == 0:
                level = self.score // config.LEVEL_POINTS + 1
                if level != self.level:
                    logger.info("Level %d reached at score %d", level, self.score)
                self.level = level
            return [GameEvent(EventKind.SCORE_CHANGED, self.score)]

        self.snake.shrink_tail()
        return []

    def _game_over(self) -> list[GameEvent]:
        self.state = GameState.GAME_OVER
        logger.info("Game over: score %d, length %d", self.score, len(self.snake))
        return [GameEvent(EventKind.GAME_OVER, self.score)]

    def handle_key(self, key: int) -> list[GameEvent]:
        if self.state in (GameState.MENU, GameState.GAME_OVER):
            if key in START_KEYS:
                return self.start_new_game()
        elif self.state == GameState.PLAYING:
            if key in DIRECTION_KEYS and self.snake is not None:
                self.snake.change_direction(DIRECTION_KEYS[key])
            elif key in PAUSE_KEYS:
                self.pause_game()
        elif self.state == GameState.PAUSED:
            if key in RESUME_KEYS:
                self.resume_game()
        return []

    # --------------------------- Draw --------------------------------

    @property
    def play_size(self) -> tuple[int, int]:
        return self.grid_width * self.cell_size, self.grid_height * self.cell_size

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(config.BG_COLOR)
        if self.grid_enabled:
            self._draw_grid(surface)

        if self.state == GameState.MENU:
            self._draw_menu(surface)
            return

        if self.snake is not None:
            self.snake.render(surface, self.cell_size)
        if self.food is not None:
            self.food.render(surface, self.cell_size)
        self._draw_hud(surface)

        if self.state == GameState.PAUSED:
            self.draw_overlay(surface, 150, [
                ("PAUSED", "big", config.WHITE),
                ("Press P or ESC to Resume", "small", config.WHITE),
            ])
        elif self.state == GameState.GAME_OVER:
            self.draw_overlay(surface, 180, [
                ("GAME OVER", "big", config.GAME_OVER_RED),
                (f"Your Score: {self.score}", "mid", config.WHITE),
                ("Press ENTER to Play Again", "small", config.WHITE),
            ])

    def _draw_grid(self, surface: pygame.Surface) -> None:
        pw, ph = self.play_size
        for x in range(self.grid_width + 1):
            px = x * self.cell_size
            pygame.draw.line(surface, config.GRID_COLOR, (px, 0), (px, ph))
        for y in range(self.grid_height + 1):
            py = y * self.cell_size
            pygame.draw.line(surface, config.GRID_COLOR, (0, py), (pw, py))

    def _draw_hud(self, surface: pygame.Surface) -> None:
        font = _font("hud")
        lines = [
            f"Score: {self.score}",
            f"High Score: {self.high_score}",
            f"Level: {self.level}",
        ]
        for i, text in enumerate(lines):
            y = 10 + i * 30
            # Drop shadow
            surface.blit(font.render(text, True, config.BLACK), (12, y + 2))
            surface.blit(font.render(text, True, config.WHITE), (10, y))

    def _draw_menu(self, surface: pygame.Surface) -> None:
        pw, ph = self.play_size
        self._draw_silhouette(surface)

        title = _font("big").render("SNAKE GAME", True, config.TITLE_GREEN)
        shadow = _font("big").render("SNAKE GAME", True, config.BLACK)
        tx = (pw - title.get_width()) // 2
        ty = (ph - title.get_height()) // 2 - 50
        surface.blit(shadow, (tx + 3, ty + 3))
        surface.blit(title, (tx, ty))

        for i, text in enumerate(("Press ENTER to Start", "Use Arrow Keys to Move")):
            s = _font("small").render(text, True, config.WHITE)
            surface.blit(s, ((pw - s.get_width()) // 2, ty + 80 + i * 40))

    def _draw_silhouette(self, surface: pygame.Surface) -> None:
        pw, ph = self.play_size
        cx, cy = pw // 2, ph // 2
        color = (20, 60, 30)
        for i in range(20):
            angle = (i * 0.5) % (2 * math.pi)
            radius = 150 - i * 5
            size = 30 - i // 2
            px = int(cx + math.cos(angle) * radius)
            py = int(cy + math.sin(angle) * radius)
            pygame.draw.ellipse(surface, color,
                                pygame.Rect(px - size // 2, py - size // 2, size, size))

    def draw_overlay(self, surface: pygame.Surface, alpha: int, lines) -> None:
        pw, ph = self.play_size
        overlay = pygame.Surface((max(1, pw), max(1, ph)), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        surface.blit(overlay, (0, 0))

        y = ph // 2 - 60
        for text, size, color in lines:
            s = _font(size).render(text, True, color)
            surface.blit(s, ((pw - s.get_width()) // 2, y))
            y += s.get_height() + 20


# ---------------------------- Fonts -----------------------------------

_FONT_SIZES = {"big": 42, "mid": 28, "small": 22, "hud": 22}
_fonts: dict[str, pygame.font.Font] = {}


def _font(name: str) -> pygame.font.Font:
    if name not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        _fonts[name] = pygame.font.SysFont("consolas", _FONT_SIZES[name], bold=name in ("big", "hud"))
    return _fonts[name]
