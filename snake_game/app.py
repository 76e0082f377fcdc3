from __future__ import annotations

import logging
import time

import pygame

from . import config
from .engine import DIRECTION_KEYS, EventKind, GameEngine, GameEvent
from .models import GameState
from .settings import OK, Settings, SettingsPanel
from .sound import SoundService

logger = logging.getLogger(__name__)

HELP_LINES = [
    "Arrow keys / WASD  move",
    "P / ESC  pause and resume",
    "Enter / Space  start",
    "N new game   O settings",
    "G grid   M sound   Q quit",
    "Press any key to close",
]


class InputDebouncer:
    """Drops direction keys that arrive too soon after the previous one."""

    def __init__(self, window_ms: int = config.DEBOUNCE_MS, clock=time.monotonic):
        self.window = window_ms / 1000.0
        self.clock = clock
        self._last = None

    def accept(self) -> bool:
        now = self.clock()
        if self._last is not None and now - self._last < self.window:
            return False
        self._last = now
        return True


class SnakeApp:
    """pygame host: owns the window, the tick timer, sound and settings."""

    def __init__(self, width: int = config.WINDOW_W, height: int = config.WINDOW_H, *,
                 settings: Settings | None = None, sound: SoundService | None = None):
        pygame.init()
        pygame.display.set_caption("Snake Game")
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("consolas", 18)

        self.sound = sound or SoundService()
        self.sound.load()

        self.engine = GameEngine(width, height - config.MENU_BAR_H)
        (settings or Settings()).apply(self.engine, self.sound)

        self.debouncer = InputDebouncer()
        self.settings_panel: SettingsPanel | None = None
        self.help_visible = False
        self._resume_after_modal = False
        self.running = True
        self.step_timer = 0.0

    @property
    def game_area(self) -> pygame.Rect:
        w, h = self.screen.get_size()
        return pygame.Rect(0, config.MENU_BAR_H, w, max(0, h - config.MENU_BAR_H))

    # ------------------------ Events ---------------------------------

    def dispatch(self, events: list[GameEvent]) -> None:
        for ev in events:
            if ev.kind == EventKind.SCORE_CHANGED and ev.value > 0:
                self.sound.play_eat()
            elif ev.kind == EventKind.GAME_OVER:
                self.sound.play_game_over()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                self.on_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self.settings_panel is not None:
                    result = self.settings_panel.handle_click(self._to_game(event.pos), self._panel_area())
                    if result is not None:
                        self.close_settings(result == OK)

    def on_key(self, key: int) -> None:
        if self.settings_panel is not None:
            result = self.settings_panel.handle_key(key)
            if result is not None:
                self.close_settings(result == OK)
            return
        if self.help_visible:
            # Any key dismisses help
            self.close_help()
            return

        state = self.engine.state

        # Menu bar shortcuts
        if key == pygame.K_n:
            self.dispatch(self.engine.start_new_game())
            return
        if key == pygame.K_o:
            self.open_settings()
            return
        if key in (pygame.K_h, pygame.K_F1):
            self.open_help()
            return
        if key == pygame.K_g:
            self.toggle_grid()
            return
        if key == pygame.K_m:
            logger.info("Sound %s", "on" if self.sound.toggle() else "off")
            return
        if key == pygame.K_q and state != GameState.PLAYING:
            self.running = False
            return

        if state == GameState.PLAYING and key in DIRECTION_KEYS:
            if not self.debouncer.accept():
                return
        self.dispatch(self.engine.handle_key(key))

    def on_resize(self, width: int, height: int) -> None:
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.engine.resize(width, height - config.MENU_BAR_H)
        logger.info("Window resized to %dx%d", width, height)

    def _pause_for_modal(self) -> None:
        # A game paused by a dialog resumes when the dialog closes
        self._resume_after_modal = self.engine.state == GameState.PLAYING
        self.engine.pause_game()

    def _resume_from_modal(self) -> None:
        if self._resume_after_modal:
            self.engine.resume_game()
        self._resume_after_modal = False

    def open_settings(self) -> None:
        self._pause_for_modal()
        self.settings_panel = SettingsPanel(Settings.capture(self.engine, self.sound))

    def close_settings(self, accept: bool) -> None:
        if accept:
            self.settings_panel.draft.apply(self.engine, self.sound)
        self.settings_panel = None
        self._resume_from_modal()

    def open_help(self) -> None:
        self._pause_for_modal()
        self.help_visible = True

    def close_help(self) -> None:
        self.help_visible = False
        self._resume_from_modal()

    def toggle_grid(self) -> None:
        self.engine.grid_enabled = not self.engine.grid_enabled
        logger.info("Grid %s", "on" if self.engine.grid_enabled else "off")

    def _to_game(self, pos):
        return pos[0], pos[1] - config.MENU_BAR_H

    def _panel_area(self) -> pygame.Rect:
        area = self.game_area
        return pygame.Rect(0, 0, area.w, area.h)

    # --------------------------- Loop ---------------------------------

    def tick(self, dt: float) -> None:
        if self.engine.state != GameState.PLAYING:
            self.step_timer = 0.0
            return
        self.step_timer += dt
        # Interval is re-read every step since it shrinks as levels go up
        while self.engine.state == GameState.PLAYING:
            step_len = self.engine.tick_interval / 1000.0
            if self.step_timer < step_len:
                break
            self.step_timer -= step_len
            self.dispatch(self.engine.update())

    def run(self):
        while self.running:
            dt = self.clock.tick(config.FPS) / 1000.0  # seconds since last frame
            self.handle_input()
            self.tick(dt)
            self.draw()

    # --------------------------- Draw --------------------------------

    def draw(self):
        self.screen.fill(config.BG_COLOR)
        self._draw_menu_bar()
        area = self.game_area
        if area.w > 0 and area.h > 0:
            game_surface = self.screen.subsurface(area)
            self.engine.render(game_surface)
            if self.settings_panel is not None:
                self.settings_panel.draw(game_surface, self._to_game(pygame.mouse.get_pos()))
            elif self.help_visible:
                self.engine.draw_overlay(game_surface, 200, [
                    ("CONTROLS", "big", config.TITLE_GREEN)]
                    + [(line, "small", config.WHITE) for line in HELP_LINES])
        pygame.display.flip()

    def _draw_menu_bar(self):
        w = self.screen.get_width()
        pygame.draw.rect(self.screen, config.MENU_BAR_BG, pygame.Rect(0, 0, w, config.MENU_BAR_H))
        sound = "on" if self.sound.enabled else "off"
        help_line = f"N new game  P pause  O settings  G grid  M sound ({sound})  H help  Q quit"
        surf = self.font.render(help_line, True, config.WHITE)
        self.screen.blit(surf, (8, (config.MENU_BAR_H - surf.get_height()) // 2))


def run(width: int = config.WINDOW_W, height: int = config.WINDOW_H, **kw) -> None:
    app = SnakeApp(width, height, **kw)
    try:
        app.run()
    except Exception:
        logger.exception("Unhandled error, shutting down")
        raise
    finally:
        pygame.quit()
