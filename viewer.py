# viewer.py

"""
================================================================================
PIXEL PLANET VIEWER
================================================================================
Opens a window and animates the scene described by a JSON config. The scene
is rendered at its native pixel size and scaled up to the window.

Controls:
- Toggle flat texture strips: P
- Pause / resume rotation: SPACE
- Quit: ESC or close window
================================================================================
"""

import logging
import os
import sys

import pygame

from pixel_planet import config as DEFAULTS
from pixel_planet.runtime import FrameCounter, Scene, SurfaceSink, load_scene_config

# --- Application Constants ---
SCENE_CONFIG_PATH = os.path.join("scenes", "default_scene.json")


class ViewerApp:
    """The main application class for the planet viewer."""
    def __init__(self, config_path: str):
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        self.logger = logging.getLogger(__name__)

        self.scene = Scene.from_config(load_scene_config(config_path), self.logger)
        self.frames = FrameCounter()
        self.scale = DEFAULTS.DEFAULT_VIEWER_SCALE
        self.show_planes = False
        self.is_paused = False

        self.logger.info("Initializing Pygame...")
        pygame.init()
        self.screen = pygame.display.set_mode((self.scene.width * self.scale, self.scene.height * self.scale))
        pygame.display.set_caption("Pixel Planet Viewer")
        self.canvas = pygame.Surface((self.scene.width, self.scene.height))
        self.sink = SurfaceSink(self.canvas)

        self.clock = pygame.time.Clock()
        self.is_running = True

    def run(self):
        """The main application loop."""
        while self.is_running:
            self.handle_events()
            self.draw()
            if not self.is_paused:
                self.frames.tick()
            self.clock.tick(DEFAULTS.TARGET_FPS)

        self.logger.info("Exiting viewer.")
        pygame.quit()
        sys.exit()

    def handle_events(self):
        """Processes user input and other events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.is_running = False
                elif event.key == pygame.K_p:
                    self.show_planes = not self.show_planes
                elif event.key == pygame.K_SPACE:
                    self.is_paused = not self.is_paused

    def draw(self):
        """Handles all rendering for the application."""
        self.canvas.fill(self.scene.background)
        frame = self.frames.frame
        self.scene.draw(self.sink, frame)
        if self.show_planes:
            self.scene.draw_planes(self.sink, frame)

        pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
        pygame.display.set_caption(f"Pixel Planet Viewer | Frame {frame} | FPS: {self.clock.get_fps():.0f}")
        pygame.display.flip()


if __name__ == '__main__':
    if not os.path.isfile(SCENE_CONFIG_PATH):
        print(f"Error: Scene config not found at '{SCENE_CONFIG_PATH}'")
    else:
        app = ViewerApp(config_path=SCENE_CONFIG_PATH)
        app.run()
