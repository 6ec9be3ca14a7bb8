# pixel_planet/baker.py

"""
================================================================================
OFFLINE FRAME BAKER
================================================================================
Pre-renders planet textures and animation frames to PNG files ("baking").
Baked frames can be played back or assembled into a sprite sheet without
running the generator again.
================================================================================
"""

import logging
import os
import time

import numpy as np
from PIL import Image
from tqdm import tqdm

from . import config as DEFAULTS
from .runtime.sinks import CanvasSink

logger = logging.getLogger(__name__)


def texture_to_image(planet) -> Image.Image:
    """
    Converts a planet's unrolled texture into an RGBA image.
    Transparent palette slots become fully transparent pixels.
    """
    indices = planet.grid.to_array()
    lut = np.zeros((len(planet.palette.colors), 4), dtype=np.uint8)
    for i, color in enumerate(planet.palette.colors):
        if color is not None:
            lut[i, :3] = color[:3]
            lut[i, 3] = 255
    return Image.fromarray(lut[indices])


def save_texture(planet, file_path: str) -> str:
    """Saves the planet's texture as a PNG and returns the path."""
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    texture_to_image(planet).save(file_path, 'PNG')
    logger.info(f"Saved {planet.grid.width}x{planet.grid.height} texture to '{file_path}'.")
    return file_path


def bake_frames(scene, frame_count: int, directory: str = DEFAULTS.DEFAULT_BAKE_DIRECTORY,
                start_frame: int = 0, show_progress: bool = True) -> list[str]:
    """
    Renders `frame_count` consecutive frames of the scene to PNG files.

    Returns:
        list[str]: The written file paths, in frame order.
    """
    os.makedirs(directory, exist_ok=True)
    sink = CanvasSink(scene.width, scene.height, scene.background)
    paths = []

    logger.info(f"Baking {frame_count} frames to '{directory}'...")
    start_time = time.time()
    frames = range(start_frame, start_frame + frame_count)
    for frame in tqdm(frames, desc="Baking Frames", disable=not show_progress):
        sink.clear()
        scene.draw(sink, frame)
        file_path = os.path.join(directory, DEFAULTS.FRAME_FILENAME_TEMPLATE.format(frame))
        sink.to_image().save(file_path, 'PNG')
        paths.append(file_path)

    logger.info(f"Baking complete in {time.time() - start_time:.2f} seconds.")
    return paths
