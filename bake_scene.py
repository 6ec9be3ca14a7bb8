# bake_scene.py

"""
================================================================================
OFFLINE SCENE BAKER SCRIPT
================================================================================
Renders the default scene config to a directory of PNG frames
("baking"), plus one unrolled texture image per planet. Baked frames can be
played back or packed into a sprite sheet without running the generator.

Usage:
    python bake_scene.py
================================================================================
"""
import logging
import os
import sys

from pixel_planet import config as DEFAULTS
from pixel_planet.baker import bake_frames, save_texture
from pixel_planet.errors import InvalidConfigurationError
from pixel_planet.runtime import Scene, load_scene_config

# --- Script Constants ---
SCENE_CONFIG_PATH = os.path.join("scenes", "default_scene.json")
BAKE_FRAME_COUNT = DEFAULTS.TARGET_FPS


def bake_scene(config_path: str, frame_count: int = DEFAULTS.TARGET_FPS,
               output_dir: str = DEFAULTS.DEFAULT_BAKE_DIRECTORY, show_progress: bool = True):
    """
    Loads a scene config, saves every planet's texture and renders
    `frame_count` frames to `output_dir`.

    Returns:
        list[str] | None: The frame paths, or None if the config could not be loaded.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )
    logger = logging.getLogger("Baker")

    logger.info(f"Loading scene configuration from: {config_path}")
    try:
        scene = Scene.from_config(load_scene_config(config_path), logger)
    except (FileNotFoundError, InvalidConfigurationError) as e:
        logger.critical(f"Failed to load scene config: {e}")
        return None

    texture_dir = os.path.join(output_dir, "textures")
    for i, planet in enumerate(scene.planets):
        save_texture(planet, os.path.join(texture_dir, f"planet_{i}.png"))

    return bake_frames(scene, frame_count, output_dir, show_progress=show_progress)


if __name__ == "__main__":
    if not os.path.isfile(SCENE_CONFIG_PATH):
        print(f"Error: Scene config not found at '{SCENE_CONFIG_PATH}'")
    else:
        bake_scene(SCENE_CONFIG_PATH, BAKE_FRAME_COUNT)
