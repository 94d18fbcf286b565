import os

# Headless SDL so pygame windows and input work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from sand_world import World  # noqa: E402


@pytest.fixture
def world():
    """A 10x10 world with the default brush radius."""
    return World(width=10, height=10)


@pytest.fixture
def display():
    """Initialised pygame with a small dummy window."""
    pygame.init()
    screen = pygame.display.set_mode((30, 30), 0, 32)
    yield screen
    pygame.quit()
