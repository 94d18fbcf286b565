"""Headless falling sand run that saves the final frame as a PNG.

No window: pours sand from the top centre onto two static shelves for a
number of ticks, then writes the grid upscaled by PIXEL_SCALE.

    python src/sand_offline.py [--ticks 400] [--radius 3] [--output sand.png]
"""

import argparse
import logging
import sys
import time

import numpy as np
from PIL import Image

from sand_config import PIXEL_SCALE
from sand_logging import setup_logging
from sand_particle import Particle
from sand_render import to_rgb
from sand_world import World

logger = logging.getLogger("sand.offline")

PROGRESS_EVERY = 100
SHELF_RADIUS = 4


def build_shelves(world):
    """Two static shelves under the pour point, offset left and right."""
    width, height = world.grid.width, world.grid.height
    radius = world.radius
    world.radius = SHELF_RADIUS
    for cx, cy in ((width // 2 - 30, height // 2), (width // 2 + 30, height * 3 // 4)):
        for x in range(cx - 40, cx + 40, SHELF_RADIUS):
            world.paint(x, cy, Particle.STATIC)
    world.radius = radius


def pour(world, ticks):
    source_x = world.grid.width // 2
    source_y = world.radius
    for tick in range(ticks):
        world.paint(source_x, source_y, Particle.SAND)
        world.tick()
        if (tick + 1) % PROGRESS_EVERY == 0:
            logger.info(
                "tick %d/%d  active=%d  sand=%d",
                tick + 1,
                ticks,
                len(world.active),
                world.grid.count(Particle.SAND),
            )


def save_png(grid, path):
    rgb = to_rgb(grid)
    scaled = np.repeat(np.repeat(rgb, PIXEL_SCALE, axis=0), PIXEL_SCALE, axis=1)
    Image.fromarray(scaled).save(path)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Falling sand offline renderer")
    parser.add_argument(
        "--ticks", type=int, default=400, help="Simulation steps (default: 400)"
    )
    parser.add_argument(
        "--radius", type=int, default=3, help="Pour brush radius (default: 3)"
    )
    parser.add_argument(
        "--output", default="sand.png", help="Output file (default: sand.png)"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    world = World(radius=max(args.radius, 0))
    build_shelves(world)

    start = time.time()
    pour(world, args.ticks)
    logger.info("Simulation complete: %.1fs", time.time() - start)

    save_png(world.grid, args.output)
    logger.info("Saved: %s (%dx%d)", args.output, world.grid.width, world.grid.height)
    return 0


if __name__ == "__main__":
    sys.exit(main())
