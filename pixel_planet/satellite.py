# pixel_planet/satellite.py

"""
A single-colored moon on a rotated elliptical orbit. Depth is faked from the
orbital phase: for half of each orbit the satellite is drawn in the back pass
(behind the planet), for the other half in the front pass.
"""

import math
from typing import TYPE_CHECKING

from . import config as DEFAULTS
from .sphere import SphereGeometry

if TYPE_CHECKING:
    from .runtime.sinks import PixelSink


class Satellite:
    """A filled, unshaded disk moving along an ellipse."""

    def __init__(
        self,
        diameter: int,
        color,
        a: float,
        b: float = DEFAULTS.DEFAULT_SATELLITE_SEMI_MINOR,
        speed: float = DEFAULTS.DEFAULT_SATELLITE_SPEED,
        init_angle: float = DEFAULTS.DEFAULT_SATELLITE_INIT_ANGLE,
        rotate: float = DEFAULTS.DEFAULT_SATELLITE_ROTATE_DEG,
        offset=(0, 0),
    ):
        """
        Args:
            diameter (int): Size of the disk in pixels.
            color: RGB tuple of the disk.
            a (float): Horizontal semi-axis of the orbit.
            b (float): Vertical semi-axis of the orbit.
            speed (float): Degrees of orbit per frame.
            init_angle (float): Phase offset, in frames.
            rotate (float): Tilt of the orbit in degrees, typically -90..90.
            offset: Centre of the orbit in pixels.
        """
        self.geometry = SphereGeometry.for_diameter(diameter)
        self.diameter = self.geometry.diameter
        self.color = color
        self.a = a
        self.b = b
        self.speed = speed
        self.init_angle = init_angle
        self.offset = tuple(offset)

        rotate_rad = math.radians(math.fmod(rotate, 360))
        self._sin = math.sin(rotate_rad)
        self._cos = math.cos(rotate_rad)

    def orbit_angle(self, frame: int) -> float:
        """Orbital phase in radians, in (-2*pi, 2*pi); the sign follows the dividend."""
        return math.radians(math.fmod((-frame - self.init_angle) * self.speed, 360))

    def is_behind(self, frame: int) -> bool:
        return abs(self.orbit_angle(frame)) < math.pi

    def position(self, frame: int) -> tuple[float, float]:
        """Centre of the disk for the given frame, orbit tilt and offset applied."""
        rad = self.orbit_angle(frame)
        ex = self.a * math.cos(rad)
        ey = self.b * math.sin(rad)
        px = ex * self._cos - ey * self._sin
        py = ex * self._sin + ey * self._cos
        return px + self.offset[0], py + self.offset[1]

    def draw(self, sink: 'PixelSink', frame: int, is_back: bool = False):
        if is_back != self.is_behind(frame) or self.color is None:
            return
        cx, cy = self.position(frame)
        half = self.diameter / 2
        for y, sw in self.geometry.rows():
            for x in range(sw):
                sink.plot(cx + x - sw / 2 + 0.5, cy + y - half, self.color)

    def __repr__(self):
        return f"Satellite(diameter={self.diameter}, a={self.a}, b={self.b})"
