"""Shared fixtures. pygame runs headless for the whole test session."""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from starfall.entities import Enemy, Formation
from starfall.simulation import GameState, new_game_state, start_session


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def state() -> GameState:
    """A freshly started session with a fixed seed."""
    game_state = new_game_state(seed=42)
    start_session(game_state)
    return game_state


@pytest.fixture
def make_formation():
    """Build a formation from (x, y) pairs."""

    def _make(positions, direction=2):
        enemies = [Enemy(x=x, y=y, row=0, col=i) for i, (x, y) in enumerate(positions)]
        return Formation(enemies=enemies, direction=direction)

    return _make


@pytest.fixture
def display():
    """Initialized pygame with a dummy display surface."""
    pygame.init()
    surface = pygame.display.set_mode((800, 800))
    yield surface
    pygame.quit()
