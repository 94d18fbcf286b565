"""Realtime falling sand in a pygame window.

Each frame: read input -> paint -> draw -> tick.

    python src/sand_app.py
    python src/sand_app.py --save-gif sand.gif
    python src/sand_app.py --log-level DEBUG

Left mouse paints sand, right mouse paints static walls, middle mouse erases.
Scroll resizes the brush, R clears the world, Escape quits.
"""

import argparse
from collections import deque
import logging
import sys
import time

import imageio

import numpy as np

import pygame

from sand_config import (
    FPS,
    GIF_FPS,
    GIF_FRAMES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
)
from sand_input import apply_input, read_input
from sand_logging import setup_logging
from sand_render import draw
from sand_world import World

logger = logging.getLogger("sand.app")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Falling sand simulation")
    parser.add_argument(
        "--save-gif", metavar="PATH", help="Write the last frames to a GIF on exit"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Also log to this file")
    return parser.parse_args(argv)


def capture(screen):
    frame = pygame.surfarray.array3d(screen)
    # pygame uses (width, height), images need (height, width)
    return np.transpose(frame, (1, 0, 2))


def run(screen, world, frames=None):
    """Drive the simulation until exit. Returns False if presentation failed."""
    clock = pygame.time.Clock()
    # RGBA frame buffer, rewritten completely every frame
    frame = bytearray(world.grid.width * world.grid.height * 4)

    tick = 0
    while True:
        snapshot = read_input(pygame.event.get())
        if snapshot.exit_requested:
            return True
        if snapshot.clear_requested:
            world.clear()

        start = time.time()

        apply_input(world, snapshot)

        try:
            draw(screen, world.grid, frame)
            pygame.display.flip()
        except pygame.error as exc:
            logger.error("Failed to present frame %d: %s", tick, exc)
            return False

        if frames is not None:
            frames.append(capture(screen))

        moved = world.tick()

        elapsed = (time.time() - start) * 1000
        pygame.display.set_caption(
            f"{WINDOW_TITLE}  |  tick={tick}  active={len(world.active)}  "
            f"moved={moved}  radius={world.radius}  {elapsed:.0f}ms"
        )

        clock.tick(FPS)
        tick += 1


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)

    world = World()
    frames = deque(maxlen=GIF_FRAMES) if args.save_gif else None
    logger.info(
        "Started %dx%d grid, brush radius %d",
        world.grid.width,
        world.grid.height,
        world.radius,
    )

    ok = run(screen, world, frames)
    pygame.quit()

    if frames:
        # duration is per frame, in milliseconds
        imageio.mimsave(args.save_gif, list(frames), duration=1000 / GIF_FPS)
        logger.info("Saved %d frames to %s", len(frames), args.save_gif)

    logger.info("Stopped")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
