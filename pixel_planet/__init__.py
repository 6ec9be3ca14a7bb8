# pixel_planet/__init__.py

from .errors import InvalidConfigurationError, OutOfRangeError, PixelPlanetError
from .grid import ToroidalGrid
from .noise import NoiseGenerator
from .palette import Palette
from .planet import NoiseMode, Planet
from .rng import SeededRandom
from .satellite import Satellite
from .sphere import SphereGeometry, sphere_widths
from .weighted import select_index, select_indices, weighted_choice

__all__ = [
    "InvalidConfigurationError", "OutOfRangeError", "PixelPlanetError",
    "ToroidalGrid", "NoiseGenerator", "Palette", "NoiseMode", "Planet",
    "SeededRandom", "Satellite", "SphereGeometry", "sphere_widths",
    "select_index", "select_indices", "weighted_choice",
]
