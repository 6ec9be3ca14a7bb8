# pixel_planet/runtime/__init__.py

# The runtime package holds everything that drives bodies frame by frame:
# the frame counter, the pixel sinks and the scene.

from .frame_clock import FrameCounter
from .scene import Renderable, Scene, load_scene_config
from .sinks import CanvasSink, PixelSink, SurfaceSink

__all__ = [
    "FrameCounter", "Renderable", "Scene", "load_scene_config",
    "CanvasSink", "PixelSink", "SurfaceSink",
]
