import pytest

from fdfview.image import (
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RED,
    COLOR_WHITE,
    Image,
    draw_test_pattern,
)
from fdfview.projection import WINDOW_HEIGHT, WINDOW_WIDTH


@pytest.fixture
def pattern():
    return draw_test_pattern(Image(800, 600))


def test_pattern_squares(pattern):
    assert pattern.get_pixel(150, 150) == 0xFF0000
    assert pattern.get_pixel(350, 150) == 0x00FF00
    assert pattern.get_pixel(550, 150) == 0x0000FF
    assert pattern.get_pixel(100, 100) == COLOR_RED
    assert pattern.get_pixel(199, 199) == COLOR_RED
    assert pattern.get_pixel(399, 100) == COLOR_GREEN
    assert pattern.get_pixel(599, 199) == COLOR_BLUE


def test_pattern_square_edges_are_black(pattern):
    assert pattern.get_pixel(99, 150) == 0x000000
    assert pattern.get_pixel(200, 150) == 0x000000
    assert pattern.get_pixel(150, 200) == 0x000000


def test_pattern_cross(pattern):
    assert pattern.get_pixel(400, 300) == 0xFFFFFF
    assert pattern.get_pixel(350, 300) == COLOR_WHITE
    assert pattern.get_pixel(450, 300) == COLOR_WHITE
    assert pattern.get_pixel(400, 250) == COLOR_WHITE
    assert pattern.get_pixel(400, 350) == COLOR_WHITE
    assert pattern.get_pixel(349, 300) == 0x000000
    assert pattern.get_pixel(401, 301) == 0x000000


def test_pattern_background_black(pattern):
    assert pattern.get_pixel(0, 0) == 0x000000
    assert pattern.get_pixel(799, 599) == 0x000000


def test_default_size_and_layout():
    image = Image()
    assert (image.width, image.height) == (WINDOW_WIDTH, WINDOW_HEIGHT)
    assert image.bpp == 32
    assert image.size_line == image.width * image.bpp // 8
    assert len(image.data) == image.size_line * image.height


def test_put_get_round_trip():
    image = Image(4, 3)
    image.put_pixel(2, 1, 0x123456)
    assert image.get_pixel(2, 1) == 0x123456
    assert image.get_pixel(1, 2) == 0


def test_put_pixel_stores_little_endian():
    image = Image(2, 1)
    image.put_pixel(1, 0, 0x00AABBCC)
    assert bytes(image.data[4:8]) == b"\xcc\xbb\xaa\x00"


def test_put_pixel_off_image_is_ignored():
    image = Image(3, 3)
    before = bytes(image.data)
    for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3)]:
        image.put_pixel(x, y, COLOR_WHITE)
    assert bytes(image.data) == before


def test_get_pixel_off_image_raises():
    with pytest.raises(IndexError):
        Image(2, 2).get_pixel(2, 0)


def test_clear_fills_every_pixel():
    image = Image(3, 2)
    image.clear(COLOR_BLUE)
    assert {image.get_pixel(x, y) for x in range(3) for y in range(2)} == {COLOR_BLUE}


def test_to_ppm():
    image = Image(2, 1)
    image.put_pixel(0, 0, 0x112233)
    image.put_pixel(1, 0, 0xFF000000 | 0x445566)
    assert image.to_ppm() == b"P6\n2 1\n255\n" + bytes([0x11, 0x22, 0x33, 0x44, 0x55, 0x66])


def test_invalid_size():
    with pytest.raises(ValueError):
        Image(0, 5)