# pixel_planet/runtime/sinks.py

"""
================================================================================
PIXEL SINKS
================================================================================
Bodies never touch a display directly; they call plot() on a sink. This
module defines that interface and two implementations: an in-memory NumPy
canvas (used by the baker and the tests) and a Pygame surface adapter (used
by the viewer).

Both sinks floor fractional coordinates, silently clip writes that fall off
the canvas and ignore None colors. Later writes to the same pixel win.
================================================================================
"""

import math
from typing import Protocol

import numpy as np
import pygame
from PIL import Image

from .. import config as DEFAULTS


class PixelSink(Protocol):
    """
    A protocol defining the interface the bodies expect for drawing.
    Any object with a compatible plot() method can be rendered into.
    """

    def plot(self, x: float, y: float, color) -> None: ...


class CanvasSink:
    """An RGB canvas backed by a (height, width, 3) uint8 NumPy array."""

    def __init__(self, width: int, height: int, background=DEFAULTS.DEFAULT_BACKGROUND):
        self.width = width
        self.height = height
        self.background = background
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self.clear()

    def clear(self):
        self.pixels[:, :] = self.background

    def plot(self, x: float, y: float, color):
        if color is None:
            return
        px = math.floor(x)
        py = math.floor(y)
        if 0 <= px < self.width and 0 <= py < self.height:
            self.pixels[py, px] = color[:3]

    def get(self, x: int, y: int) -> tuple:
        return tuple(int(c) for c in self.pixels[y, x])

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)


class SurfaceSink:
    """Plots onto a pygame.Surface."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._rect = surface.get_rect()

    def plot(self, x: float, y: float, color):
        if color is None:
            return
        px = math.floor(x)
        py = math.floor(y)
        if self._rect.collidepoint(px, py):
            self.surface.set_at((px, py), color)
