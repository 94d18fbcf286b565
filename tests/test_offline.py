from PIL import Image

from sand_config import HEIGHT, PIXEL_SCALE, WIDTH
from sand_offline import build_shelves, main, pour, save_png
from sand_particle import Particle
from sand_world import World


def test_pour_adds_sand_every_tick():
    world = World(width=60, height=40, radius=2)
    pour(world, 3)

    assert world.grid.count(Particle.SAND) > 0
    assert world.grid.get(30, 2) is Particle.SAND


def test_shelves_restore_brush_radius():
    world = World(radius=3)
    build_shelves(world)

    assert world.radius == 3
    assert world.grid.count(Particle.STATIC) > 0
    assert len(world.active) == 0


def test_save_png_is_upscaled(tmp_path):
    world = World(width=20, height=10, radius=2)
    world.paint(5, 5, Particle.SAND)
    path = tmp_path / "out.png"

    save_png(world.grid, path)

    with Image.open(path) as image:
        assert image.size == (20 * PIXEL_SCALE, 10 * PIXEL_SCALE)
        assert image.getpixel((5 * PIXEL_SCALE, 5 * PIXEL_SCALE)) == Particle.SAND.color


def test_main_writes_image(tmp_path):
    path = tmp_path / "sand.png"
    assert main(["--ticks", "5", "--output", str(path)]) == 0

    with Image.open(path) as image:
        assert image.size == (WIDTH * PIXEL_SCALE, HEIGHT * PIXEL_SCALE)
