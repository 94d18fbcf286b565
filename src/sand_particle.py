"""Particle kinds and their display colors."""

from enum import IntEnum

import numpy as np


class Particle(IntEnum):
    """Kind of matter in one grid cell. Values are the uint8 cell codes."""

    EMPTY = 0
    STATIC = 1
    SAND = 2

    @property
    def color(self):
        return COLORS[self]


COLORS = {
    Particle.EMPTY: (92, 208, 224),
    Particle.STATIC: (99, 78, 28),
    Particle.SAND: (234, 195, 103),
}

# Lookup table indexed by cell code: one RGBA row per particle kind
PALETTE_RGBA = np.array(
    [COLORS[p] + (255,) for p in sorted(Particle)],
    dtype=np.uint8,
)
