import os
import random
from collections import defaultdict

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

SCREEN = (1280, 900)


@pytest.fixture(scope="session", autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def keys():
    """Held-key state standing in for pygame.key.get_pressed()."""
    return defaultdict(bool)


@pytest.fixture
def screen_size():
    return SCREEN
