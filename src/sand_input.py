"""Input snapshot for one frame, and how it changes the world.

Controls:
  left mouse    paint sand
  right mouse   paint static
  middle mouse  erase
  scroll        grow / shrink the brush
  R             clear the world
  Escape        quit
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from sand_particle import Particle


@dataclass
class InputSnapshot:
    pointer: Optional[Tuple[float, float]] = None  # pixels, None outside window
    sand_held: bool = False
    static_held: bool = False
    erase_held: bool = False
    scroll: float = 0.0
    exit_requested: bool = False
    clear_requested: bool = False


def apply_input(world, snapshot):
    """Paint with the first held button (sand, static, erase), then resize the brush."""
    if snapshot.pointer is not None:
        px, py = snapshot.pointer
        if snapshot.sand_held:
            world.paint_at_pixel(px, py, Particle.SAND)
        elif snapshot.static_held:
            world.paint_at_pixel(px, py, Particle.STATIC)
        elif snapshot.erase_held:
            world.paint_at_pixel(px, py, Particle.EMPTY)

    world.adjust_radius(snapshot.scroll)


def read_input(events):
    """Fold one frame of pygame events and the mouse state into a snapshot."""
    snapshot = InputSnapshot()

    for event in events:
        if event.type == pygame.QUIT:
            snapshot.exit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                snapshot.exit_requested = True
            elif event.key == pygame.K_r:
                snapshot.clear_requested = True
        elif event.type == pygame.MOUSEWHEEL:
            snapshot.scroll += event.y

    if pygame.mouse.get_focused():
        snapshot.pointer = pygame.mouse.get_pos()

    left, middle, right = pygame.mouse.get_pressed()
    snapshot.sand_held = bool(left)
    snapshot.static_held = bool(right)
    snapshot.erase_held = bool(middle)

    return snapshot
