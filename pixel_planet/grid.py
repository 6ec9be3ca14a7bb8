# pixel_planet/grid.py

"""
================================================================================
TOROIDAL GRID
================================================================================
A fixed-size 2D container of small integer palette indices.

Data Contract:
---------------
- Inputs (on initialization):
    - width, height: Positive integers.
    - fill: The initial value of every cell.
- Public Methods:
    - set(x, y, value): Bounds-checked write.
    - get(x, y): Read with wraparound on both axes.
    - load(values): Bulk write of a full (height, width) array.
    - freeze(): Makes the grid read-only.
- Side Effects: None.
- Invariants: Reads never fail; get(x, y) == get(x % width, y % height).
  Writes outside [0, width) x [0, height) raise OutOfRangeError.
================================================================================
"""

import numpy as np

from .errors import InvalidConfigurationError, OutOfRangeError


class ToroidalGrid:
    """A 2D integer grid whose reads wrap around both axes."""

    def __init__(self, width: int, height: int, fill: int = 0):
        if int(width) != width or int(height) != height or width <= 0 or height <= 0:
            raise InvalidConfigurationError(
                f"Grid dimensions must be positive integers, got {width}x{height}."
            )
        self.width = int(width)
        self.height = int(height)
        # Row-major like every other array in the project: table[y, x].
        self._table = np.full((self.height, self.width), fill, dtype=np.int32)

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    def set(self, x: int, y: int, value: int):
        if x < 0 or self.width <= x:
            raise OutOfRangeError(f"x must be between 0 and {self.width - 1}, got {x}.")
        if y < 0 or self.height <= y:
            raise OutOfRangeError(f"y must be between 0 and {self.height - 1}, got {y}.")
        self._table[y, x] = value

    def get(self, x: int, y: int) -> int:
        # Python's % is already the non-negative modulo we need.
        return int(self._table[y % self.height, x % self.width])

    def load(self, values: np.ndarray):
        """Replaces every cell at once. `values` must have shape (height, width)."""
        values = np.asarray(values)
        if values.shape != self.shape:
            raise OutOfRangeError(
                f"Expected an array of shape {self.shape}, got {values.shape}."
            )
        self._table[:, :] = values

    def freeze(self):
        """Marks the backing array read-only; later writes raise ValueError."""
        self._table.flags.writeable = False

    def to_array(self) -> np.ndarray:
        """Returns a copy of the cells as a (height, width) array."""
        return self._table.copy()

    def __repr__(self):
        return f"ToroidalGrid(width={self.width}, height={self.height})"
