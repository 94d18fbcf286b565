import pytest

from sand_config import PIXEL_SCALE
from sand_particle import Particle
from sand_world import World


def region(x0, x1, y0, y1):
    return {(x, y) for x in range(x0, x1) for y in range(y0, y1)}


def test_paint_sand_square_is_half_open():
    world = World(width=20, height=20, radius=3)
    world.paint(10, 10, Particle.SAND)

    assert set(world.active) == region(7, 13, 7, 13)
    assert world.grid.count(Particle.SAND) == 36
    assert world.grid.get(7, 7) is Particle.SAND
    assert world.grid.get(13, 10) is Particle.EMPTY


def test_radius_zero_paints_nothing():
    world = World(width=20, height=20, radius=0)
    world.paint(10, 10, Particle.SAND)

    assert len(world.active) == 0
    assert world.grid.count(Particle.EMPTY) == 400


@pytest.mark.parametrize(
    "mx, my, expected",
    [
        (0, 0, region(0, 3, 0, 3)),
        (19, 19, region(16, 19, 16, 19)),
        (1, 18, region(0, 4, 15, 19)),
    ],
)
def test_paint_clamps_to_grid(mx, my, expected):
    world = World(width=20, height=20, radius=3)
    world.paint(mx, my, Particle.SAND)
    assert set(world.active) == expected


def test_huge_brush_never_reaches_last_row_or_column():
    world = World(width=20, height=20, radius=1000)
    world.paint(10, 10, Particle.STATIC)

    assert world.grid.count(Particle.STATIC) == 19 * 19
    assert world.grid.get(19, 5) is Particle.EMPTY
    assert world.grid.get(5, 19) is Particle.EMPTY


def test_pointer_past_grid_paints_nothing():
    world = World(width=20, height=20, radius=3)
    world.paint(40, 10, Particle.SAND)
    assert len(world.active) == 0


def test_paint_static_and_empty_leave_active_set_alone():
    world = World(width=20, height=20, radius=2)
    world.paint(5, 5, Particle.STATIC)
    world.paint(12, 12, Particle.EMPTY)
    assert len(world.active) == 0
    assert world.grid.count(Particle.STATIC) == 16


def test_erasing_sand_drops_it_from_active_set():
    world = World(width=20, height=20, radius=3)
    world.paint(10, 10, Particle.SAND)
    world.radius = 1
    world.paint(10, 10, Particle.EMPTY)

    assert (9, 9) not in world.active
    assert world.grid.get(9, 9) is Particle.EMPTY
    assert set(world.active) == region(7, 13, 7, 13) - region(9, 11, 9, 11)


def test_erased_cells_do_not_create_sand_on_tick():
    world = World(width=20, height=20, radius=3)
    world.paint(10, 5, Particle.SAND)
    world.paint(10, 5, Particle.EMPTY)

    world.tick()

    assert world.grid.count(Particle.SAND) == 0
    assert len(world.active) == 0


def test_static_over_sand_drops_it_from_active_set():
    world = World(width=20, height=20, radius=3)
    world.paint(10, 10, Particle.SAND)
    world.paint(10, 10, Particle.STATIC)

    assert len(world.active) == 0
    assert world.grid.count(Particle.SAND) == 0


def test_paint_at_pixel_divides_by_scale():
    world = World(width=60, height=60, radius=1)
    px = 30 * PIXEL_SCALE + PIXEL_SCALE - 1
    py = 40 * PIXEL_SCALE
    world.paint_at_pixel(px, py, Particle.SAND)
    assert set(world.active) == region(29, 31, 39, 41)


def test_pixel_to_grid():
    assert World.pixel_to_grid(0.0, 0.0) == (0, 0)
    assert World.pixel_to_grid(PIXEL_SCALE * 7 + 0.9, PIXEL_SCALE * 3) == (7, 3)


@pytest.mark.parametrize(
    "delta, expected",
    [(1, 11), (-3, 7), (-0.5, 9), (1.5, 11), (-100, 0)],
)
def test_adjust_radius(delta, expected):
    world = World(width=20, height=20, radius=10)
    world.adjust_radius(delta)
    assert world.radius == expected
    assert isinstance(world.radius, int)


def test_radius_has_no_ceiling():
    world = World(width=20, height=20, radius=0)
    for _ in range(500):
        world.adjust_radius(1)
    assert world.radius == 500


def test_clear_keeps_radius():
    world = World(width=20, height=20, radius=4)
    world.paint(10, 10, Particle.SAND)
    world.clear()

    assert world.grid.count(Particle.EMPTY) == 400
    assert len(world.active) == 0
    assert world.radius == 4
