"""pygame renderer for a running simulation.

Bodies are drawn with the image named by their label when it exists in the
images directory, otherwise as a small filled circle.
"""
import logging
from pathlib import Path

import numpy as np
import pygame
import pygame.gfxdraw

from . import constants as C
from .camera import Camera
from .utils import frame_caption

logger = logging.getLogger(__name__)


class Renderer:
    """Draws the universe into a pygame window."""

    def __init__(
        self,
        universe,
        images_dir=C.IMAGES_DIR,
        size=(C.WIDTH, C.HEIGHT),
        frame_delay_ms=C.FRAME_DELAY_MS,
    ):
        self.universe = universe
        self.camera = Camera(universe.radius, size)
        self.images_dir = Path(images_dir)
        self.frame_delay_ms = frame_delay_ms
        self._images = {}
        self.caption = ""

        pygame.init()
        try:
            self.screen = pygame.display.set_mode(size)
            pygame.display.set_caption("N-Body Simulation")
            self.background = self._load_image(C.BACKGROUND_IMAGE)
            if self.background is not None:
                self.background = pygame.transform.smoothscale(self.background, size)
        except pygame.error:
            pygame.quit()
            raise

    def _load_image(self, name):
        if name in self._images:
            return self._images[name]
        path = self.images_dir / name
        image = None
        if path.is_file():
            try:
                image = pygame.image.load(str(path)).convert_alpha()
            except pygame.error as exc:
                logger.warning("Cannot load image %s: %s", path, exc)
        self._images[name] = image
        return image

    def draw_body(self, body):
        if not np.all(np.isfinite(body.pos)):
            return
        x, y = self.camera.world_to_screen(body.pos)
        width, height = self.screen.get_size()
        # gfxdraw takes 16-bit coordinates; skip anything far off screen.
        if not (-width <= x <= 2 * width and -height <= y <= 2 * height):
            return
        image = self._load_image(body.label) if body.label else None
        if image is not None:
            rect = image.get_rect(center=(x, y))
            self.screen.blit(image, rect)
        else:
            radius = C.DEFAULT_BODY_RADIUS_PIXELS
            pygame.gfxdraw.filled_circle(self.screen, x, y, radius, C.WHITE)
            pygame.gfxdraw.aacircle(self.screen, x, y, radius, C.WHITE)

    def draw(self, elapsed=0.0, steps=0):
        """Render one frame and pause for the frame delay."""
        pygame.event.pump()
        if self.background is not None:
            self.screen.blit(self.background, (0, 0))
        else:
            self.screen.fill(C.BLACK)
        for body in self.universe.bodies:
            self.draw_body(body)
        self.caption = frame_caption(elapsed, steps)
        pygame.display.set_caption(self.caption)
        pygame.display.flip()
        if self.frame_delay_ms > 0:
            pygame.time.wait(self.frame_delay_ms)

    def on_frame(self, simulator):
        """Frame hook for :class:`~nbodies.simulation.Simulator`."""
        self.draw(simulator.elapsed, simulator.steps)

    def close(self):
        pygame.quit()
