# tests/conftest.py

import pytest

from pixel_planet import Palette, SeededRandom

RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREY = (128, 128, 128)


class RecordingSink:
    """Remembers every plot call, in order."""

    def __init__(self):
        self.calls = []

    def plot(self, x, y, color):
        self.calls.append((x, y, color))

    def pixels(self) -> dict:
        """Last color written at each (x, y)."""
        return {(x, y): color for x, y, color in self.calls}


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def two_color_palette():
    return Palette([RED, BLUE], [1, 1])


@pytest.fixture
def rng():
    return SeededRandom(0.25)
