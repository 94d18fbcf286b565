"""Falling sand engine: grid, active set and the per-frame update.

The grid is a dense uint8 buffer addressed as y * width + x. Only cells in
the active set are considered for movement, so settled sand piles and empty
space cost nothing beyond the snapshot.

Each tick, every active grain tries, in order:
  1. straight down
  2. down-left
  3. down-right
and moves into the first empty cell it finds. The leftmost column, the
rightmost column and the bottom row never move.
"""

import logging

import numpy as np

from sand_config import HEIGHT, INITIAL_RADIUS, PIXEL_SCALE, WIDTH
from sand_particle import Particle

logger = logging.getLogger("sand.world")


# --- Grid ---


class Grid:
    """Fixed-size dense store of particle codes, all EMPTY on creation."""

    def __init__(self, width=WIDTH, height=HEIGHT):
        self.width = width
        self.height = height
        self.cells = np.full(width * height, Particle.EMPTY, dtype=np.uint8)
        # (height, width) view sharing memory with cells
        self.rows = self.cells.reshape(height, width)

    def index(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"cell ({x}, {y}) outside {self.width}x{self.height} grid"
            )
        return y * self.width + x

    def get(self, x, y):
        return Particle(int(self.cells[self.index(x, y)]))

    def set(self, x, y, particle):
        self.cells[self.index(x, y)] = particle

    def fill(self, x0, x1, y0, y1, particle):
        """Write particle into the half-open rectangle [x0, x1) x [y0, y1)."""
        if x0 < 0 or y0 < 0 or x1 > self.width or y1 > self.height:
            raise IndexError(
                f"region [{x0}, {x1}) x [{y0}, {y1}) outside "
                f"{self.width}x{self.height} grid"
            )
        self.rows[y0:y1, x0:x1] = particle

    def count(self, particle):
        return int(np.count_nonzero(self.cells == particle))

    def clear(self):
        self.cells.fill(Particle.EMPTY)


# --- Active set ---


class ActiveSet:
    """Coordinates of sand grains that are evaluated on the next tick."""

    def __init__(self):
        self._members = set()

    def __contains__(self, coord):
        return coord in self._members

    def __len__(self):
        return len(self._members)

    def __iter__(self):
        return iter(self._members)

    def insert(self, coord):
        self._members.add(coord)

    def remove(self, coord):
        self._members.discard(coord)

    def insert_region(self, x0, x1, y0, y1):
        self._members.update(
            (x, y) for x in range(x0, x1) for y in range(y0, y1)
        )

    def remove_region(self, x0, x1, y0, y1):
        self._members.difference_update(
            (x, y) for x in range(x0, x1) for y in range(y0, y1)
        )

    def snapshot(self):
        """Immutable copy of the members, bottom row first, then left to right.

        Insertions and removals made while iterating the snapshot only take
        effect on the next snapshot.
        """
        return tuple(sorted(self._members, key=lambda c: (-c[1], c[0])))

    def clear(self):
        self._members.clear()


# --- Simulation state ---


class World:
    """One running simulation: grid, active set and brush radius."""

    def __init__(self, width=WIDTH, height=HEIGHT, radius=INITIAL_RADIUS):
        self.grid = Grid(width, height)
        self.active = ActiveSet()
        self.radius = radius

    @staticmethod
    def pixel_to_grid(px, py):
        return max(int(px), 0) // PIXEL_SCALE, max(int(py), 0) // PIXEL_SCALE

    def tick(self):
        """Advance the simulation by one step. Returns how many grains moved."""
        grid = self.grid
        cells = grid.cells
        w = grid.width
        empty, sand = Particle.EMPTY.value, Particle.SAND.value
        moved = 0

        for x, y in self.active.snapshot():
            if x == 0 or x >= w - 1 or y >= grid.height - 1:
                continue

            # Guard above keeps every probed index inside the grid
            below = (y + 1) * w + x
            if cells[below] == empty:
                target, dest = (x, y + 1), below
            elif cells[below - 1] == empty:
                target, dest = (x - 1, y + 1), below - 1
            elif cells[below + 1] == empty:
                target, dest = (x + 1, y + 1), below + 1
            else:
                continue

            cells[y * w + x] = empty
            cells[dest] = sand
            self.active.remove((x, y))
            self.active.insert(target)
            moved += 1

        return moved

    def paint(self, mx, my, particle):
        """Stamp a square of particle around grid cell (mx, my).

        The region is [mx - radius, mx + radius) on each axis, clamped to the
        grid with the upper bound capped at the last index, so radius 0
        paints nothing.
        """
        r = self.radius
        lower_x = max(0, mx - r)
        upper_x = min(self.grid.width - 1, mx + r)
        lower_y = max(0, my - r)
        upper_y = min(self.grid.height - 1, my + r)
        if lower_x >= upper_x or lower_y >= upper_y:
            return

        self.grid.fill(lower_x, upper_x, lower_y, upper_y, particle)
        if particle == Particle.SAND:
            self.active.insert_region(lower_x, upper_x, lower_y, upper_y)
        else:
            # Keep active set members in sync with the sand on the grid
            self.active.remove_region(lower_x, upper_x, lower_y, upper_y)

    def paint_at_pixel(self, px, py, particle):
        mx, my = self.pixel_to_grid(px, py)
        self.paint(mx, my, particle)

    def adjust_radius(self, delta):
        self.radius = int(max(self.radius + delta, 0))

    def clear(self):
        self.grid.clear()
        self.active.clear()
        logger.debug("World cleared")
