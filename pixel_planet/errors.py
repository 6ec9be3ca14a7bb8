# pixel_planet/errors.py

"""Exception types raised by the planet generator."""


class PixelPlanetError(Exception):
    """Base class for all errors raised by pixel_planet."""


class OutOfRangeError(PixelPlanetError, IndexError):
    """A grid write or weighted selection fell outside its valid range."""


class InvalidConfigurationError(PixelPlanetError, ValueError):
    """A body, palette or scene was configured with inconsistent values."""
