# pixel_planet/noise.py

"""
================================================================================
NOISE GENERATION UTILITIES
================================================================================
This module provides 3D simplex noise and the fractal compositions built on
it. The low-level kernel is a pure, stateless function; NoiseGenerator binds
it to a seeded permutation table.

Data Contract:
---------------
- Inputs:
    - p: A pre-shuffled, doubled NumPy permutation table (512 ints).
    - x, y, z: Scalars or NumPy arrays of coordinates (broadcastable).
    - octaves: Number of fractal octaves (frequency doubles, amplitude halves).
- Outputs:
    - Noise values in [0, 1] (raw kernel output is in [-1, 1]).
- Side Effects: None.
- Invariants: Given the same seed, every method is a pure function of its
  coordinates. The output shape matches the broadcast shape of x, y and z.
================================================================================
"""

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .errors import InvalidConfigurationError
from .rng import seed_entropy

# Skewing and unskewing factors for three dimensions.
_F3 = 1.0 / 3.0
_G3 = 1.0 / 6.0

# Midpoints of the 12 edges of a cube.
_GRADIENT_VECTORS = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
], dtype=np.float64)

# Scales the summed corner contributions to roughly [-1, 1].
_OUTPUT_SCALE = 32.0


@njit
def _corner(gi, x, y, z):
    """Contribution of a single simplex corner."""
    t = 0.6 - x * x - y * y - z * z
    if t < 0.0:
        return 0.0
    g = _GRADIENT_VECTORS[gi]
    t *= t
    return t * t * (g[0] * x + g[1] * y + g[2] * z)


@njit
def _simplex_3d(p, x, y, z):
    # Skew the input space to find the containing simplex cell.
    s = (x + y + z) * _F3
    i = int(np.floor(x + s))
    j = int(np.floor(y + s))
    k = int(np.floor(z + s))

    t = (i + j + k) * _G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    # Determine which of the six tetrahedra we are in.
    if x0 >= y0:
        if y0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0
        elif x0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1
    else:
        if y0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1
        elif x0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0

    x1 = x0 - i1 + _G3
    y1 = y0 - j1 + _G3
    z1 = z0 - k1 + _G3
    x2 = x0 - i2 + 2.0 * _G3
    y2 = y0 - j2 + 2.0 * _G3
    z2 = z0 - k2 + 2.0 * _G3
    x3 = x0 - 1.0 + 3.0 * _G3
    y3 = y0 - 1.0 + 3.0 * _G3
    z3 = z0 - 1.0 + 3.0 * _G3

    ii = i & 255
    jj = j & 255
    kk = k & 255
    gi0 = p[ii + p[jj + p[kk]]] % 12
    gi1 = p[ii + i1 + p[jj + j1 + p[kk + k1]]] % 12
    gi2 = p[ii + i2 + p[jj + j2 + p[kk + k2]]] % 12
    gi3 = p[ii + 1 + p[jj + 1 + p[kk + 1]]] % 12

    n = (_corner(gi0, x0, y0, z0) + _corner(gi1, x1, y1, z1)
         + _corner(gi2, x2, y2, z2) + _corner(gi3, x3, y3, z3))
    return _OUTPUT_SCALE * n


@njit
def simplex_noise_3d(p, xs, ys, zs):
    """
    Generate 3D simplex noise for flat coordinate arrays using a pre-computed
    permutation table. Values are clamped to [-1, 1].
    This function is JIT-compiled with Numba for maximum performance.
    """
    count = xs.shape[0]
    out = np.empty(count)
    for n in range(count):
        value = _simplex_3d(p, xs[n], ys[n], zs[n])
        out[n] = min(1.0, max(-1.0, value))
    return out


def build_permutation_table(seed) -> np.ndarray:
    """Shuffles 0..255 deterministically from the seed and doubles it."""
    p = np.arange(DEFAULTS.PERMUTATION_SIZE, dtype=np.int64)
    rng = np.random.default_rng(seed_entropy(seed))
    rng.shuffle(p)
    return np.concatenate([p, p])


class NoiseGenerator:
    """
    Seeded continuous noise source with fractal compositions.

    Every public method accepts scalars (and returns a float) or NumPy arrays
    (and returns an array of the broadcast shape).
    """

    def __init__(self, seed=None):
        if seed is None:
            seed = float(np.random.default_rng().random())
        self.seed = seed
        self._p = build_permutation_table(seed)

    @property
    def permutation_table(self) -> np.ndarray:
        return self._p

    def _raw(self, x, y, z, noise_scale=1.0):
        xs, ys, zs = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64) * noise_scale,
            np.asarray(y, dtype=np.float64) * noise_scale,
            np.asarray(z, dtype=np.float64) * noise_scale,
        )
        shape = xs.shape
        values = simplex_noise_3d(
            self._p,
            np.ascontiguousarray(xs).ravel(),
            np.ascontiguousarray(ys).ravel(),
            np.ascontiguousarray(zs).ravel(),
        ).reshape(shape)
        if values.ndim == 0:
            return float(values)
        return values

    def noise_3d(self, x, y, z, noise_scale=1.0):
        """Simplex noise rescaled to [0, 1]."""
        return self._raw(x, y, z, noise_scale) * 0.5 + 0.5

    def ridged_3d(self, x, y, z, noise_scale=1.0):
        """Absolute simplex noise in [0, 1]; negative lobes fold into ridges."""
        return abs(self._raw(x, y, z, noise_scale))

    def fractal_sum(self, func, x, y, z, octaves=DEFAULTS.DEFAULT_OCTAVES):
        """
        Fractal Brownian motion over `func`.

        Octave o samples at frequency 2**o with weight 0.5**o; the sum is
        divided by the total weight so it stays in the range of one octave.
        """
        if octaves < 1:
            raise InvalidConfigurationError(f"octaves must be at least 1, got {octaves}.")
        result = 0
        denom = 0
        for o in range(octaves):
            ampl = 0.5 ** o
            result += ampl * func(x, y, z, 2 ** o)
            denom += ampl
        return result / denom

    def simplex_fbm(self, x, y, z, octaves=DEFAULTS.DEFAULT_OCTAVES):
        return self.fractal_sum(self.noise_3d, x, y, z, octaves)

    def ridged_fbm(self, x, y, z, octaves=DEFAULTS.DEFAULT_OCTAVES):
        # Inverted so the ridges read as low values.
        return 1 - self.fractal_sum(self.ridged_3d, x, y, z, octaves)

    def domain_warping(self, x, y, z, octaves=DEFAULTS.DEFAULT_OCTAVES):
        """Single-pass domain warp: offset the coordinates by one octave of noise."""
        n = self.noise_3d(x, y, z)
        return self.simplex_fbm(x + n, y + n, z + n, octaves)
