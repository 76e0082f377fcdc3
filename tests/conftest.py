import os
import random

# Headless pygame: must be set before pygame opens a display or the mixer
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from snake_game.engine import GameEngine
from snake_game.food import Food
from snake_game.models import Position


class FakeSound:
    def __init__(self):
        self.enabled = True
        self.played = []

    def load(self):
        pass

    def play_eat(self):
        self.played.append("eat")

    def play_game_over(self):
        self.played.append("gameover")

    def toggle(self):
        self.enabled = not self.enabled
        return self.enabled


@pytest.fixture
def engine():
    # 10x10 grid
    return GameEngine(250, 250, cell_size=25, rng=random.Random(7))


@pytest.fixture
def playing(engine):
    engine.start_new_game()
    # Park the food where the snake will not reach it during a test
    engine.food = Food(Position(0, 0))
    return engine


@pytest.fixture
def fake_sound():
    return FakeSound()


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.font.init()
    yield
    pygame.quit()
