"""
conftest.py
-----------
Shared pytest configuration and fixtures for sgc tests.

Contains:
- SDL dummy drivers so pygame runs without a window or sound card
- HeadlessEngine: the real Engine with rendering and alerts recorded
- Common fixtures (engine, game, booted game) and input helpers
- Pytest configuration and hooks
"""

import os

# Must be set before pygame initializes any subsystem
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from sgc.core.debug.debug_logger import LoggerConfig
from sgc.core.runtime.game_context import Game
from sgc.core.services.engine import Engine


class HeadlessEngine(Engine):
    """Engine that never opens a window; alerts and frames are recorded."""

    def __init__(self, width=800, height=600):
        super().__init__(width, height)
        self.alerts = []
        self.frames_rendered = 0

    def _open_display(self):
        pass

    def alert(self, message):
        self.alerts.append(message)

    def render(self, scoreboard=None):
        self.frames_rendered += 1


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output readable; errors still print."""
    previous = LoggerConfig.LOG_LEVEL
    LoggerConfig.LOG_LEVEL = "ERROR"
    yield
    LoggerConfig.LOG_LEVEL = previous


@pytest.fixture
def engine():
    """Headless engine with a few named test images."""
    engine = HeadlessEngine()
    engine.assets.add_surface("ball.png", create_surface(20, 20))
    engine.assets.add_surface("box.png", create_surface(40, 30))
    # 4 x 3 sheet of 16 x 16 frames
    engine.assets.add_surface("walker.png", create_surface(64, 48), 16, 16)
    return engine


@pytest.fixture
def game(engine):
    """Game that has not booted yet."""
    return Game(engine=engine)


@pytest.fixture
def booted_game(game):
    """Game that has booted and entered play."""
    game.boot()
    return game


# Test utilities
def create_surface(width=16, height=16, color=(255, 255, 255, 255)):
    """Create a plain RGBA surface; works without a display."""
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    surface.fill(color)
    return surface


class InputDriver:
    """Feeds synthetic pygame events into an engine's InputManager."""

    def __init__(self, engine):
        self.input = engine.input

    def press(self, key):
        self.input.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))

    def release(self, key):
        self.input.handle_event(pygame.event.Event(pygame.KEYUP, key=key))

    def move(self, x, y):
        self.input.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y), rel=(0, 0), buttons=(0, 0, 0)))

    def mouse_down(self, x, y):
        self.input.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(x, y), button=1))

    def mouse_up(self, x, y):
        self.input.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(x, y), button=1))

    def click(self, x, y):
        self.move(x, y)
        self.mouse_down(x, y)
        self.mouse_up(x, y)


@pytest.fixture
def inputs(engine):
    """Synthetic keyboard and mouse input for the engine fixture."""
    return InputDriver(engine)


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark every test not under an integration module as a unit test."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
