# pixel_planet/palette.py

"""
================================================================================
PALETTES
================================================================================
This module contains the built-in palettes and the Palette class that pairs
colors with the weights the texture generator selects them by.

It is designed to be a pure utility with no dependencies on Pygame, so the
same palette can drive the live viewer and the offline baker.

Data Contract:
---------------
- Inputs: colors (RGB tuples or None for transparent), weights (same length,
  non-negative), optional back_color.
- Side Effects: None.
- Invariants: len(colors) == len(weights); validated at construction.
================================================================================
"""

from PIL import ImageColor

from .errors import InvalidConfigurationError

# --- Built-in Palettes ---
# Each entry is (colors, weights, back_color). A None color leaves the cell
# transparent, which lets a back pass or the background show through.
BUILTIN_PALETTES = {
    "terran": (
        [(0, 105, 148), (26, 102, 255), (240, 230, 140), (34, 139, 34), (0, 100, 0), (112, 128, 144)],
        [4, 1, 0.5, 2, 1, 0.5],
        None,
    ),
    "desert": (
        [(139, 90, 43), (205, 133, 63), (101, 67, 33), (169, 169, 169)],
        [3, 2, 1, 1],
        None,
    ),
    "gas_giant": (
        [(201, 144, 57), (166, 124, 82), (234, 214, 183), (139, 90, 43)],
        [1, 1, 1, 1],
        None,
    ),
    "ice": (
        [(100, 149, 237), (72, 209, 204), (176, 224, 230), (255, 255, 255)],
        [2, 1, 1, 1],
        None,
    ),
    "lava": (
        [(30, 30, 30), (50, 40, 35), (255, 69, 0), (255, 140, 0), (255, 215, 0)],
        [4, 2, 1, 0.5, 0.25],
        None,
    ),
    # Transparent cloud layer; the back pass tints the far side of the clouds.
    "clouds": (
        [None, (255, 255, 255)],
        [3, 1],
        (160, 160, 170),
    ),
}


def parse_color(value):
    """
    Converts a config color into an RGB tuple.
    Accepts None (transparent), an [r, g, b] sequence, or any string Pillow's
    ImageColor understands ("#ff8800", "white", ...).
    """
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return ImageColor.getrgb(value)[:3]
        except ValueError as e:
            raise InvalidConfigurationError(f"Unknown color {value!r}.") from e
    color = tuple(int(c) for c in value)
    if len(color) not in (3, 4) or any(c < 0 or c > 255 for c in color):
        raise InvalidConfigurationError(f"Invalid RGB color {value!r}.")
    return color[:3]


class Palette:
    """An ordered set of colors, their selection weights and an optional back color."""

    def __init__(self, colors, weights, back_color=None):
        if len(colors) != len(weights):
            raise InvalidConfigurationError("The colors and weights must be the same length.")
        if not colors:
            raise InvalidConfigurationError("A palette needs at least one color.")
        if any(w < 0 for w in weights):
            raise InvalidConfigurationError(f"Weights must be non-negative, got {list(weights)}.")
        if sum(weights) <= 0:
            raise InvalidConfigurationError("At least one weight must be positive.")
        self.colors = colors
        self.weights = weights
        self.back_color = back_color

    @property
    def has_back(self) -> bool:
        return self.back_color is not None

    def __len__(self):
        return len(self.colors)

    def __repr__(self):
        return f"Palette(colors={self.colors!r}, weights={self.weights!r}, back_color={self.back_color!r})"

    @classmethod
    def builtin(cls, name: str) -> "Palette":
        try:
            colors, weights, back_color = BUILTIN_PALETTES[name]
        except KeyError as e:
            raise InvalidConfigurationError(
                f"Unknown palette '{name}'. Available: {sorted(BUILTIN_PALETTES)}"
            ) from e
        return cls(list(colors), list(weights), back_color)

    @classmethod
    def from_config(cls, config) -> "Palette":
        """Builds a palette from a built-in name or a dict with colors/weights/back_color."""
        if isinstance(config, str):
            return cls.builtin(config)
        if "colors" not in config or "weights" not in config:
            raise InvalidConfigurationError("A palette config needs 'colors' and 'weights'.")
        colors = [parse_color(c) for c in config["colors"]]
        return cls(colors, list(config["weights"]), parse_color(config.get("back_color")))
