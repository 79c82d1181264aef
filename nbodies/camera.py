import numpy as np

from . import constants as C


class Camera:
    """Map universe coordinates onto a square-scaled window.

    The visible range is ``[-radius, +radius]`` on both axes with the origin
    in the middle of the window and y pointing up.
    """

    def __init__(self, radius, size=(C.WIDTH, C.HEIGHT)):
        self.radius = float(radius)
        self.size = np.array(size, dtype=float)
        self.pan_offset = self.size / 2.0
        # A zero radius would collapse everything onto the centre.
        span = 2.0 * self.radius if self.radius > 0 else 1.0
        self.zoom = self.size / span

    def world_to_screen(self, pos):
        """Convert a world position to integer pixel coordinates."""
        pos = np.asarray(pos, dtype=float)
        x = pos[0] * self.zoom[0] + self.pan_offset[0]
        y = self.pan_offset[1] - pos[1] * self.zoom[1]
        return int(round(x)), int(round(y))
