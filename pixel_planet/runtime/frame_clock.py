# pixel_planet/runtime/frame_clock.py

"""
================================================================================
FRAME COUNTER
================================================================================
This module provides a self-contained, data-only class for tracking the
animation frame. Every time-dependent quantity in the renderer is a pure
function of this counter; there are no internal timers.

Data Contract:
---------------
- Inputs (on initialization):
    - start (int): The initial frame, non-negative.
- Public Methods:
    - tick(): Advances the counter by one frame.
    - reset(): Returns to frame 0.
- Public Properties:
    - frame (read-only int), seconds (elapsed time at TARGET_FPS).
- Side Effects: None.
- Invariants: The frame number never decreases except through reset().
================================================================================
"""

from .. import config as DEFAULTS
from ..errors import InvalidConfigurationError


class FrameCounter:
    """A monotonically increasing, non-negative frame number."""

    def __init__(self, start: int = 0, fps: int = DEFAULTS.TARGET_FPS):
        if start < 0:
            raise InvalidConfigurationError(f"The start frame must be non-negative, got {start}.")
        self._frame = int(start)
        self.fps = fps

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def seconds(self) -> float:
        """Animation time elapsed at the nominal frame rate."""
        return self._frame / self.fps

    def tick(self) -> int:
        """Advances one frame and returns the new frame number."""
        self._frame += 1
        return self._frame

    def reset(self):
        self._frame = 0

    def __int__(self):
        return self._frame
