from __future__ import annotations

import logging
from dataclasses import dataclass, replace

import pygame

from . import config
from .models import Color

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    show_grid: bool = True
    sound_enabled: bool = True
    difficulty: int = config.DIFFICULTY_MEDIUM
    snake_color: Color = config.SNAKE_GREEN

    @classmethod
    def capture(cls, engine, sound) -> "Settings":
        return cls(
            show_grid=engine.grid_enabled,
            sound_enabled=sound.enabled,
            difficulty=engine.difficulty,
            snake_color=engine.snake_color,
        )

    def apply(self, engine, sound) -> None:
        engine.grid_enabled = self.show_grid
        engine.difficulty = self.difficulty
        engine.snake_color = self.snake_color
        sound.enabled = self.sound_enabled
        logger.info("Settings applied: %s", self)

    def color_name(self) -> str:
        for name, color in config.SNAKE_PALETTE:
            if tuple(color) == tuple(self.snake_color):
                return name
        return "Custom"

    def next_color(self) -> Color:
        colors = [c for _, c in config.SNAKE_PALETTE]
        try:
            i = colors.index(tuple(self.snake_color))
        except ValueError:
            return colors[0]
        return colors[(i + 1) % len(colors)]


# Panel results
OK = "ok"
CANCEL = "cancel"


class SettingsPanel:
    """Modal settings dialog drawn over the game.

    Edits a draft copy; the caller applies it only when the panel closes
    with ``OK``.
    """

    PANEL_W = 360
    PANEL_H = 330

    def __init__(self, current: Settings):
        self.draft = replace(current)
        self.font = None
        self.mouse_pos = None

    # ------------------------ Input ----------------------------------

    def handle_key(self, key: int) -> str | None:
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return OK
        if key == pygame.K_ESCAPE:
            return CANCEL
        if key == pygame.K_g:
            self.draft.show_grid = not self.draft.show_grid
        elif key == pygame.K_m:
            self.draft.sound_enabled = not self.draft.sound_enabled
        elif key in (pygame.K_1, pygame.K_2, pygame.K_3):
            self.draft.difficulty = {pygame.K_1: 1, pygame.K_2: 2, pygame.K_3: 3}[key]
        elif key == pygame.K_c:
            self.draft.snake_color = self.draft.next_color()
        return None

    def handle_click(self, pos, area: pygame.Rect) -> str | None:
        layout = self.get_layout(area)
        if layout["grid"].collidepoint(pos):
            self.draft.show_grid = not self.draft.show_grid
        elif layout["sound"].collidepoint(pos):
            self.draft.sound_enabled = not self.draft.sound_enabled
        elif layout["color"].collidepoint(pos):
            self.draft.snake_color = self.draft.next_color()
        elif layout["ok"].collidepoint(pos):
            return OK
        elif layout["cancel"].collidepoint(pos):
            return CANCEL
        else:
            for level in (1, 2, 3):
                if layout[f"difficulty{level}"].collidepoint(pos):
                    self.draft.difficulty = level
        return None

    # --------------------------- Draw --------------------------------

    def get_layout(self, area: pygame.Rect) -> dict[str, pygame.Rect]:
        # Compute and return rects for panel UI elements
        panel = pygame.Rect(0, 0, self.PANEL_W, self.PANEL_H)
        panel.center = area.center
        left = panel.x + 24
        width = panel.w - 48
        layout = {
            "panel": panel,
            "grid": pygame.Rect(left, panel.y + 60, width, 36),
            "sound": pygame.Rect(left, panel.y + 104, width, 36),
            "color": pygame.Rect(left, panel.y + 200, width, 36),
            "ok": pygame.Rect(panel.centerx - 130, panel.bottom - 60, 120, 40),
            "cancel": pygame.Rect(panel.centerx + 10, panel.bottom - 60, 120, 40),
        }
        third = width // 3
        for i, level in enumerate((1, 2, 3)):
            layout[f"difficulty{level}"] = pygame.Rect(left + i * third, panel.y + 152, third - 6, 36)
        return layout

    def draw_button(self, surface: pygame.Surface, rect: pygame.Rect, label: str, *,
                    primary=False, swatch: Color | None = None):
        hovered = self.mouse_pos is not None and rect.collidepoint(self.mouse_pos)
        base = (60, 65, 72) if not primary else (70, 130, 70)
        base_hover = (80, 86, 94) if not primary else (56, 142, 60)
        pygame.draw.rect(surface, base_hover if hovered else base, rect, border_radius=8)
        pygame.draw.rect(surface, (30, 33, 38), rect, width=2, border_radius=8)
        if swatch is not None:
            pygame.draw.rect(surface, swatch, pygame.Rect(rect.x + 8, rect.y + 8, rect.h - 16, rect.h - 16))
        surf = self.font.render(label, True, config.WHITE)
        surface.blit(surf, (rect.centerx - surf.get_width() // 2,
                            rect.centery - surf.get_height() // 2))

    def draw(self, surface: pygame.Surface, mouse_pos=None) -> None:
        self.mouse_pos = mouse_pos
        if self.font is None:
            self.font = pygame.font.SysFont("consolas", 20)
        area = surface.get_rect()
        layout = self.get_layout(area)

        shade = pygame.Surface(area.size, pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        surface.blit(shade, (0, 0))

        panel = layout["panel"]
        pygame.draw.rect(surface, (30, 30, 70), panel, border_radius=12)
        title = self.font.render("Game Settings", True, config.WHITE)
        surface.blit(title, (panel.centerx - title.get_width() // 2, panel.y + 20))

        d = self.draft
        self.draw_button(surface, layout["grid"], f"[{'x' if d.show_grid else ' '}] Show Grid (G)")
        self.draw_button(surface, layout["sound"], f"[{'x' if d.sound_enabled else ' '}] Enable Sound (M)")
        for level in (1, 2, 3):
            self.draw_button(surface, layout[f"difficulty{level}"], config.DIFFICULTY_NAMES[level],
                             primary=d.difficulty == level)
        self.draw_button(surface, layout["color"], f"Snake Color: {d.color_name()} (C)", swatch=d.snake_color)
        self.draw_button(surface, layout["ok"], "OK", primary=True)
        self.draw_button(surface, layout["cancel"], "Cancel")
