# pixel_planet/runtime/scene.py

"""
================================================================================
SCENE RUNTIME
================================================================================
This module provides the user-facing `Scene` class: the set of planets and
satellites drawn together each frame, plus the config loader that builds one
from a plain dictionary (usually read from JSON).

Data Contract:
---------------
- Inputs (on initialization):
    - config (dict): Scene parameters which can override the internal
      defaults. Keys: 'seed', 'canvas', 'planets', 'satellites'.
    - logger: A Python logging object for runtime messages.
- Outputs:
    - draw(sink, frame) / draw_planes(sink, frame) plot into a PixelSink.
- Side Effects: Logs messages using the provided logger.
- Invariants: Given the same seed and configuration, every frame is
  identical. Body order in the config is draw order within a pass.
================================================================================
"""

import json
import logging
from typing import Protocol

from .. import config as DEFAULTS
from ..errors import InvalidConfigurationError
from ..palette import Palette, parse_color
from ..planet import Planet
from ..rng import SeededRandom
from ..satellite import Satellite
from .sinks import PixelSink


class Renderable(Protocol):
    """Anything that can draw one hemisphere pass of itself."""

    def draw(self, sink: PixelSink, frame: int, is_back: bool = False) -> None: ...


class Scene:
    """Planets and satellites rendered back pass first, then front pass."""

    def __init__(self, planets=None, satellites=None, width: int = DEFAULTS.DEFAULT_CANVAS_WIDTH,
                 height: int = DEFAULTS.DEFAULT_CANVAS_HEIGHT, background=DEFAULTS.DEFAULT_BACKGROUND,
                 logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(__name__)
        self.planets = list(planets or [])
        self.satellites = list(satellites or [])
        self.width = width
        self.height = height
        self.background = background
        self.logger.info(
            f"Scene ready: {len(self.planets)} planet(s), {len(self.satellites)} satellite(s) "
            f"on a {self.width}x{self.height} canvas."
        )

    def back_pass(self) -> list:
        """Bodies drawn behind everything else: satellites, then planets with a back color."""
        return self.satellites + [p for p in self.planets if p.has_back]

    def front_pass(self) -> list:
        return self.planets + self.satellites

    def draw(self, sink: PixelSink, frame: int):
        for body in self.back_pass():
            body.draw(sink, frame, True)
        for body in self.front_pass():
            body.draw(sink, frame, False)

    def draw_planes(self, sink: PixelSink, frame: int):
        for planet in self.planets:
            planet.draw_plane(sink, frame)

    # --- Construction from configuration ---
    @classmethod
    def from_config(cls, config: dict, logger: logging.Logger = None) -> "Scene":
        """
        Builds a scene from a config dictionary. Missing keys fall back to
        the defaults in pixel_planet.config.
        """
        logger = logger or logging.getLogger(__name__)
        canvas = config.get('canvas', {})
        settings = {
            'seed': config.get('seed', DEFAULTS.DEFAULT_SEED),
            'width': canvas.get('width', DEFAULTS.DEFAULT_CANVAS_WIDTH),
            'height': canvas.get('height', DEFAULTS.DEFAULT_CANVAS_HEIGHT),
            'background': parse_color(canvas.get('background', DEFAULTS.DEFAULT_BACKGROUND)),
        }
        logger.info(f"Building scene with seed: {settings['seed']}")

        # One random source for the whole scene; planets draw their noise seeds
        # from it in config order.
        rng = SeededRandom(settings['seed'])
        center = (settings['width'] / 2, settings['height'] / 2)

        planets = [
            cls._planet_from_config(entry, rng, center, logger)
            for entry in config.get('planets', [])
        ]
        satellites = [
            cls._satellite_from_config(entry, center, settings['width'])
            for entry in config.get('satellites', [])
        ]
        return cls(planets, satellites, settings['width'], settings['height'],
                   settings['background'], logger)

    @staticmethod
    def _planet_from_config(entry: dict, rng: SeededRandom, center, logger) -> Planet:
        if 'diameter' not in entry or 'palette' not in entry:
            raise InvalidConfigurationError("A planet config needs 'diameter' and 'palette'.")
        return Planet(
            diameter=entry['diameter'],
            noise_mode=entry.get('noise_mode', 'SIMPLEX'),
            palette=Palette.from_config(entry['palette']),
            rng=rng,
            lap_time=entry.get('lap_time', DEFAULTS.DEFAULT_LAP_TIME_S),
            plane_offset=tuple(entry.get('plane_offset', (0, 0))),
            offset=tuple(entry.get('offset', center)),
            octaves=entry.get('octaves', DEFAULTS.DEFAULT_OCTAVES),
            logger=logger,
        )

    @staticmethod
    def _satellite_from_config(entry: dict, center, canvas_width) -> Satellite:
        if 'diameter' not in entry or 'color' not in entry:
            raise InvalidConfigurationError("A satellite config needs 'diameter' and 'color'.")
        return Satellite(
            diameter=entry['diameter'],
            color=parse_color(entry['color']),
            a=entry.get('a', canvas_width * DEFAULTS.DEFAULT_SATELLITE_SEMI_MAJOR_FACTOR),
            b=entry.get('b', DEFAULTS.DEFAULT_SATELLITE_SEMI_MINOR),
            speed=entry.get('speed', DEFAULTS.DEFAULT_SATELLITE_SPEED),
            init_angle=entry.get('init_angle', DEFAULTS.DEFAULT_SATELLITE_INIT_ANGLE),
            rotate=entry.get('rotate', DEFAULTS.DEFAULT_SATELLITE_ROTATE_DEG),
            offset=tuple(entry.get('offset', center)),
        )


def load_scene_config(path: str) -> dict:
    """Reads a scene config from a JSON file."""
    with open(path, 'r') as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfigurationError(f"Error decoding JSON from {path}: {e}") from e
