# pixel_planet/planet.py

"""
================================================================================
PLANET BODY
================================================================================
This module contains the Planet class: a rotating pixel sphere whose texture
is baked once from seeded noise and then scrolled horizontally every frame.

Data Contract:
---------------
- Inputs (on initialization):
    - diameter (int), noise_mode (NoiseMode), palette (Palette).
    - rng (SeededRandom): Source of the planet's noise seed.
    - lap_time (float): Seconds per revolution at TARGET_FPS.
    - plane_offset, offset: Pixel translations of the flat strip (top-left
      anchor) and of the sphere (centre anchor).
    - logger: Optional logging.Logger.
- Outputs (from methods):
    - Calls to sink.plot(x, y, color) for every visible pixel.
- Side Effects: Logs messages using the logger.
- Invariants: The texture grid is (2 * diameter) x diameter, filled once and
  read-only afterwards. Given the same seed the texture is identical.
================================================================================
"""

import logging
import math
import time
from enum import IntEnum
from typing import TYPE_CHECKING

import numpy as np

from . import config as DEFAULTS
from .errors import InvalidConfigurationError
from .grid import ToroidalGrid
from .noise import NoiseGenerator
from .sphere import SphereGeometry
from .weighted import select_indices

if TYPE_CHECKING:
    from .palette import Palette
    from .rng import SeededRandom
    from .runtime.sinks import PixelSink

TAU = 2 * math.pi


class NoiseMode(IntEnum):
    """Texture patterns. The values are stored in scene configs; keep them stable."""
    SIMPLEX = 0
    RIDGED = 1
    DOMAIN_WARPING = 2
    V_STRIPE = 3
    H_STRIPE = 4
    GRADATION = 5

    @classmethod
    def parse(cls, value) -> "NoiseMode":
        """Accepts a NoiseMode, its integer value or its name (case-insensitive)."""
        try:
            if isinstance(value, str):
                return cls[value.strip().upper()]
            return cls(value)
        except (KeyError, ValueError) as e:
            raise InvalidConfigurationError(f"Unknown noise mode {value!r}.") from e


def remap(value, start1, stop1, start2, stop2):
    """Linearly maps value from [start1, stop1] onto [start2, stop2]."""
    return start2 + (value - start1) * (stop2 - start2) / (stop1 - start1)


class Planet:
    """A procedurally textured, rotating pixel sphere."""

    def __init__(
        self,
        diameter: int,
        noise_mode,
        palette: 'Palette',
        rng: 'SeededRandom',
        lap_time: float = DEFAULTS.DEFAULT_LAP_TIME_S,
        plane_offset=(0, 0),
        offset=(0, 0),
        octaves: int = DEFAULTS.DEFAULT_OCTAVES,
        logger: logging.Logger = None,
    ):
        self.logger = logger or logging.getLogger(__name__)

        self.geometry = SphereGeometry.for_diameter(diameter)
        self.diameter = self.geometry.diameter
        self.noise_mode = NoiseMode.parse(noise_mode)
        self.palette = palette
        if len(self.palette.colors) != len(self.palette.weights):
            raise InvalidConfigurationError("The colors and weights must be the same length.")
        if lap_time <= 0:
            raise InvalidConfigurationError(f"lap_time must be positive, got {lap_time}.")
        self.lap_time = lap_time
        self.plane_offset = tuple(plane_offset)
        self.offset = tuple(offset)
        self.octaves = octaves

        self.noise = NoiseGenerator(rng.random())
        self.grid = ToroidalGrid(self.diameter * 2, self.diameter, 0)

        # The grid is two diameters wide, so one lap at TARGET_FPS shifts it
        # diameter / (TARGET_FPS / 2) columns per frame.
        self.speed = self.diameter / (DEFAULTS.TARGET_FPS / 2) / self.lap_time
        # Cosmetic alignment between the flat strip and the sphere.
        self.plane_alignment = self.grid.width * DEFAULTS.PLANE_ALIGNMENT_FACTOR

        self._sample_values = self._resolve_noise_mode()
        self._fill_texture()

        self.logger.info(
            f"Planet initialized: diameter={self.diameter}, mode={self.noise_mode.name}, "
            f"noise seed={self.noise.seed}"
        )

    @property
    def has_back(self) -> bool:
        return self.palette.has_back

    # --- Texture Generation ---
    def _sphere_points(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Maps every grid cell onto the surface of a unit sphere shifted into the
        positive octant. Returns the cell coordinate grids and the 3D points.
        """
        xs, ys = np.meshgrid(np.arange(self.grid.width), np.arange(self.grid.height))
        phi = xs / self.grid.width * TAU
        theta = ys / self.grid.height * math.pi
        nx = np.sin(theta) * np.cos(phi) + 1
        ny = np.sin(theta) * np.sin(phi) + 1
        nz = np.cos(theta) + 1
        return xs, ys, nx, ny, nz

    def _resolve_noise_mode(self):
        """Picks the per-cell value function once, instead of branching per cell."""
        width = self.grid.width
        height = self.grid.height
        octaves = self.octaves
        noise = self.noise
        margin = DEFAULTS.GRADATION_NOISE_ROWS
        # cos(2 * TAU * ...) yields 2 * STRIPE_COUNT bands across the axis.
        stripes = DEFAULTS.STRIPE_COUNT

        def h_stripe(xs, ys, nx, ny, nz):
            off = noise.simplex_fbm(nx, ny, nz, octaves)
            return (np.cos((stripes * ys / height + off) * 2 * TAU) + 1) * 0.5

        def v_stripe(xs, ys, nx, ny, nz):
            off = noise.simplex_fbm(nx, ny, nz, octaves)
            return (np.cos((stripes * xs / width + off) * 2 * TAU) + 1) * 0.5

        def gradation(xs, ys, nx, ny, nz):
            off = noise.simplex_fbm(nx, ny, nz, octaves)
            return remap(ys + off * margin, -margin, height + margin, 0, 1)

        modes = {
            NoiseMode.SIMPLEX: lambda xs, ys, nx, ny, nz: noise.simplex_fbm(nx, ny, nz, octaves),
            NoiseMode.RIDGED: lambda xs, ys, nx, ny, nz: noise.ridged_fbm(nx, ny, nz, octaves),
            NoiseMode.DOMAIN_WARPING: lambda xs, ys, nx, ny, nz: noise.domain_warping(nx, ny, nz, octaves),
            NoiseMode.H_STRIPE: h_stripe,
            NoiseMode.V_STRIPE: v_stripe,
            NoiseMode.GRADATION: gradation,
        }
        return modes[self.noise_mode]

    def _fill_texture(self):
        start_time = time.perf_counter()
        values = self._sample_values(*self._sphere_points())
        self.grid.load(select_indices(self.palette.weights, values))
        self.grid.freeze()
        self.logger.debug(
            f"Filled {self.grid.width}x{self.grid.height} texture in "
            f"{time.perf_counter() - start_time:.3f}s."
        )

    # --- Sampling ---
    def plane_column(self, x: int, frame: int) -> int:
        """Grid column shown at column x of the flat strip."""
        return math.floor(x + self.plane_alignment - frame * self.speed)

    def sphere_column(self, x: int, span_width: int, frame: int, is_back: bool) -> int:
        """
        Grid column shown at pixel x of a scanline span_width pixels wide.
        Each hemisphere covers half the grid; the back starts one diameter on.
        """
        return math.floor((x / span_width + (1 if is_back else 0)) * self.diameter - frame * self.speed)

    # --- Rendering ---
    def draw_plane(self, sink: 'PixelSink', frame: int):
        """Renders the texture as a flat, scrolling strip anchored at plane_offset."""
        colors = self.palette.colors
        ox, oy = self.plane_offset
        for x in range(self.grid.width):
            gx = self.plane_column(x, frame)
            for y in range(self.grid.height):
                color = colors[self.grid.get(gx, y)]
                if color is not None:
                    sink.plot(x + ox, y + oy, color)

    def draw(self, sink: 'PixelSink', frame: int, is_back: bool = False):
        """
        Renders one hemisphere centred on offset.
        The back pass is mirrored horizontally and paints non-zero cells in
        the palette's back color.
        """
        colors = self.palette.colors
        back_color = self.palette.back_color
        ox, oy = self.offset
        sign = -1 if is_back else 1
        half = self.diameter / 2
        for y, sw in self.geometry.rows():
            for x in range(sw):
                val = self.grid.get(self.sphere_column(x, sw, frame, is_back), y)
                color = back_color if (is_back and val) else colors[val]
                if color is not None:
                    sink.plot(sign * (x - sw / 2 + 0.5) + ox, y + oy - half, color)

    def __repr__(self):
        return f"Planet(diameter={self.diameter}, noise_mode={self.noise_mode.name})"
