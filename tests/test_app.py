import pygame
import pytest

from snake_game import config
from snake_game.app import InputDebouncer, SnakeApp
from snake_game.engine import EventKind, GameEvent
from snake_game.food import Food
from snake_game.models import Direction, GameState, Position
from snake_game.settings import Settings


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_debouncer_drops_fast_repeats():
    clock = FakeClock()
    d = InputDebouncer(window_ms=100, clock=clock)
    assert d.accept()
    clock.now = 0.05
    assert not d.accept()
    clock.now = 0.101
    assert d.accept()
    clock.now = 0.15
    assert not d.accept()


@pytest.fixture
def app(fake_sound):
    app = SnakeApp(400, 328, sound=fake_sound)
    yield app
    pygame.display.quit()


def test_engine_fills_area_below_menu_bar(app):
    assert (app.engine.grid_width, app.engine.grid_height) == (16, 12)
    assert app.game_area == pygame.Rect(0, config.MENU_BAR_H, 400, 300)


def test_new_game_shortcut(app):
    app.on_key(pygame.K_n)
    assert app.engine.state == GameState.PLAYING
    # Starting a game is not an "eat"
    assert app.sound.played == []


def test_direction_keys_are_debounced(app):
    clock = FakeClock()
    app.debouncer = InputDebouncer(clock=clock)
    app.on_key(pygame.K_RETURN)

    app.on_key(pygame.K_UP)
    assert app.engine.snake.direction == Direction.UP
    clock.now = 0.02
    app.on_key(pygame.K_RIGHT)
    assert app.engine.snake.direction == Direction.UP
    clock.now = 0.5
    app.on_key(pygame.K_RIGHT)
    assert app.engine.snake.direction == Direction.RIGHT


def test_tick_runs_one_update_per_interval(app):
    app.on_key(pygame.K_RETURN)
    app.engine.food = Food(Position(0, 0))
    start = app.engine.snake.head
    interval = app.engine.tick_interval / 1000.0

    app.tick(interval * 0.5)
    assert app.engine.snake.head == start
    app.tick(interval * 2)
    assert app.engine.snake.head == Position(start.x + 2, start.y)


def test_tick_does_nothing_when_paused(app):
    app.on_key(pygame.K_RETURN)
    app.on_key(pygame.K_p)
    head = app.engine.snake.head
    app.tick(5.0)
    assert app.engine.snake.head == head
    assert app.step_timer == 0.0


def test_dispatch_plays_sounds(app):
    app.dispatch([GameEvent(EventKind.SCORE_CHANGED, 0)])
    app.dispatch([GameEvent(EventKind.SCORE_CHANGED, 10), GameEvent(EventKind.GAME_OVER, 10)])
    assert app.sound.played == ["eat", "gameover"]


def test_settings_panel_pauses_applies_and_resumes(app):
    app.on_key(pygame.K_RETURN)
    app.on_key(pygame.K_o)
    assert app.engine.state == GameState.PAUSED
    assert app.settings_panel is not None

    app.on_key(pygame.K_3)
    app.on_key(pygame.K_g)
    # Keys go to the panel, not the game
    app.on_key(pygame.K_n)
    app.on_key(pygame.K_RETURN)

    assert app.settings_panel is None
    assert app.engine.difficulty == 3
    assert app.engine.grid_enabled is False
    assert app.engine.state == GameState.PLAYING


def test_settings_cancel_discards(app):
    app.on_key(pygame.K_o)
    app.on_key(pygame.K_1)
    app.on_key(pygame.K_ESCAPE)
    assert app.engine.difficulty == config.DIFFICULTY_MEDIUM


def test_initial_settings_are_applied(fake_sound):
    app = SnakeApp(400, 328, settings=Settings(show_grid=False, difficulty=1), sound=fake_sound)
    assert app.engine.grid_enabled is False
    assert app.engine.difficulty == 1


def test_quit_only_outside_a_game(app):
    app.on_key(pygame.K_RETURN)
    app.on_key(pygame.K_q)
    assert app.running
    app.on_key(pygame.K_p)
    app.on_key(pygame.K_q)
    assert not app.running


def test_sound_toggle_shortcut(app):
    app.on_key(pygame.K_m)
    assert app.sound.enabled is False


def test_resize(app):
    app.on_resize(500, 528)
    assert (app.engine.grid_width, app.engine.grid_height) == (20, 20)


def test_draw_every_state(app):
    app.draw()
    app.on_key(pygame.K_RETURN)
    app.draw()
    app.on_key(pygame.K_o)
    app.draw()


def test_settings_cancel_resumes_a_running_game(app):
    app.on_key(pygame.K_RETURN)
    app.on_key(pygame.K_o)
    app.on_key(pygame.K_ESCAPE)
    assert app.engine.state == GameState.PLAYING

    app.on_key(pygame.K_o)
    app.on_key(pygame.K_RETURN)
    assert app.engine.state == GameState.PLAYING


def test_settings_leave_a_paused_game_paused(app):
    app.on_key(pygame.K_RETURN)
    app.on_key(pygame.K_p)
    app.on_key(pygame.K_o)
    app.on_key(pygame.K_RETURN)
    assert app.engine.state == GameState.PAUSED

    app.on_key(pygame.K_o)
    app.on_key(pygame.K_ESCAPE)
    assert app.engine.state == GameState.PAUSED


def test_settings_from_menu_stay_in_menu(app):
    app.on_key(pygame.K_o)
    app.on_key(pygame.K_RETURN)
    assert app.engine.state == GameState.MENU


def test_grid_shortcut(app):
    app.on_key(pygame.K_g)
    assert app.engine.grid_enabled is False
    app.on_key(pygame.K_g)
    assert app.engine.grid_enabled is True


def test_help_pauses_until_any_key(app):
    app.on_key(pygame.K_RETURN)
    app.on_key(pygame.K_F1)
    assert app.help_visible
    assert app.engine.state == GameState.PAUSED
    app.draw()

    # The dismissing key does nothing else
    app.on_key(pygame.K_n)
    assert not app.help_visible
    assert app.engine.state == GameState.PLAYING
    assert app.engine.score == 0


def test_help_while_paused_stays_paused(app):
    app.on_key(pygame.K_RETURN)
    app.on_key(pygame.K_p)
    app.on_key(pygame.K_h)
    app.on_key(pygame.K_SPACE)
    assert not app.help_visible
    assert app.engine.state == GameState.PAUSED
