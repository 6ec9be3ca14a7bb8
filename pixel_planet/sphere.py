# pixel_planet/sphere.py

"""
================================================================================
SPHERE SILHOUETTE GEOMETRY
================================================================================
Computes the per-scanline span widths of a filled pixel circle. The table is
the shared geometric primitive for planets and satellites: row y of a
D-pixel-tall body emits widths[y] pixels centred on the vertical axis.

Data Contract:
---------------
- Inputs: diameter (positive int).
- Outputs: A tuple of `diameter` widths, top row first.
- Side Effects: None. Tables are memoized per diameter.
- Invariants: widths[y] == widths[diameter - 1 - y]; widths grow towards the
  equator; every width lies in [1, diameter] and has the parity of diameter.
================================================================================
"""

from functools import lru_cache

from .errors import InvalidConfigurationError


def _validate_diameter(diameter):
    if isinstance(diameter, bool) or int(diameter) != diameter or diameter <= 0:
        raise InvalidConfigurationError(f"Diameter must be a positive integer, got {diameter!r}.")
    return int(diameter)


@lru_cache(maxsize=None)
def _compute_widths(diameter: int) -> tuple:
    # Filled-circle variant of Bresenham's algorithm, after TIC-80's circle fill:
    # https://github.com/nesbox/TIC-80/blob/master/src/tic.c#L948-L961
    # Even diameters use a radius one smaller and widen every row by one.
    parity = 1 - diameter % 2
    r = diameter // 2 - parity
    widths = [0] * diameter
    y = -r
    x = 0
    d = 2 - 2 * r
    i = r

    while True:
        r = d
        if r > y or d > x:
            w = x * 2 + 1 + parity
            widths[y + i] = w
            widths[diameter - y - i - 1] = w
            y += 1
            d += y * 2 + 1
        if r <= x:
            x += 1
            d += x * 2 + 1
        if y > 0:
            break

    return tuple(widths)


def sphere_widths(diameter: int) -> tuple:
    """Returns the scanline width table for a circle of the given diameter."""
    return _compute_widths(_validate_diameter(diameter))


class SphereGeometry:
    """Immutable width table for one diameter, shared between bodies."""

    __slots__ = ("diameter", "widths")

    def __init__(self, diameter: int):
        diameter = _validate_diameter(diameter)
        object.__setattr__(self, "diameter", diameter)
        object.__setattr__(self, "widths", _compute_widths(diameter))

    def __setattr__(self, name, value):
        raise AttributeError("SphereGeometry is immutable.")

    @classmethod
    @lru_cache(maxsize=None)
    def for_diameter(cls, diameter: int) -> "SphereGeometry":
        """Returns a cached instance, shared by every body of this diameter."""
        return cls(diameter)

    def rows(self):
        """Yields (y, span_width) for every scanline, top to bottom."""
        return enumerate(self.widths)

    @property
    def area(self) -> int:
        return sum(self.widths)

    def __len__(self):
        return self.diameter

    def __repr__(self):
        return f"SphereGeometry(diameter={self.diameter})"
