"""Turn the grid into pixels.

render_frame() produces the engine's output contract: WIDTH * HEIGHT * 4
bytes, row-major, [R, G, B, 255] per cell. to_rgb() and draw() are built on
it and serve the offline PNG writer and the pygame window.
"""

import numpy as np

import pygame

from sand_config import PIXEL_SCALE
from sand_particle import PALETTE_RGBA


def render_frame(grid, frame=None):
    """Fill frame with the RGBA colors of every grid cell and return it.

    frame may be any writable buffer of exactly width * height * 4 bytes
    (bytearray, numpy array, pixel surface view). A new numpy buffer is
    allocated when frame is None.
    """
    size = grid.width * grid.height * 4
    if frame is None:
        frame = np.empty(size, dtype=np.uint8)

    out = as_array(frame)
    if out.size != size:
        raise ValueError(f"frame buffer has {out.size} bytes, expected {size}")

    out.reshape(-1, 4)[:] = PALETTE_RGBA[grid.cells]
    return frame


def as_array(frame):
    if isinstance(frame, np.ndarray):
        return frame
    return np.frombuffer(frame, dtype=np.uint8)


def to_rgb(grid, frame=None):
    """(height, width, 3) uint8 image of the grid, rendered through frame."""
    rgba = as_array(render_frame(grid, frame)).reshape(grid.height, grid.width, 4)
    return np.ascontiguousarray(rgba[:, :, :3])


def draw(screen, grid, frame=None):
    """Render the grid into frame and blit it, upscaled, onto screen."""
    rgb = to_rgb(grid, frame)
    scaled = np.repeat(np.repeat(rgb, PIXEL_SCALE, axis=0), PIXEL_SCALE, axis=1)
    # pygame surfaces are indexed (x, y)
    pygame.surfarray.blit_array(screen, scaled.transpose(1, 0, 2))
