# pixel_planet/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the planet
generator. These values are used if they are not explicitly provided by the
user's scene configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC SCENE.
Instead, pass a configuration dictionary to Scene.from_config.
================================================================================
"""

# --- Random Generation ---
DEFAULT_SEED = 0
# A real-valued seed in [0, 1) is scaled by this factor to obtain the integer
# entropy NumPy expects. 2**53 keeps every bit of a double's mantissa.
SEED_RESOLUTION = 2 ** 53

# --- Noise Generation ---
DEFAULT_OCTAVES = 6
# Size of the simplex permutation table before it is doubled.
PERMUTATION_SIZE = 256

# --- Animation ---
# The frame rate the rotation speeds are tuned for.
TARGET_FPS = 60
# Seconds for one full revolution of a planet.
DEFAULT_LAP_TIME_S = 1.0
# Cosmetic column offset (as a fraction of the grid width) that lines the
# flat strip up with the sphere. Safe to change.
PLANE_ALIGNMENT_FACTOR = 0.75

# --- Texture Patterns ---
# Number of bands produced by the stripe noise modes.
STRIPE_COUNT = 4
# How far (in rows) noise may push the gradation bands up or down.
GRADATION_NOISE_ROWS = 10

# --- Satellites ---
DEFAULT_SATELLITE_SPEED = 1.0
DEFAULT_SATELLITE_SEMI_MINOR = 0.0
DEFAULT_SATELLITE_INIT_ANGLE = 0.0
DEFAULT_SATELLITE_ROTATE_DEG = 0.0
# The default semi-major axis is this fraction of the canvas width.
DEFAULT_SATELLITE_SEMI_MAJOR_FACTOR = 1 / 3

# --- Canvas ---
DEFAULT_CANVAS_WIDTH = 200
DEFAULT_CANVAS_HEIGHT = 200
DEFAULT_BACKGROUND = (10, 10, 20)
# Integer upscale factor used by the viewer window.
DEFAULT_VIEWER_SCALE = 4

# --- Baking ---
DEFAULT_BAKE_DIRECTORY = "baked_frames"
FRAME_FILENAME_TEMPLATE = "frame_{:05d}.png"
