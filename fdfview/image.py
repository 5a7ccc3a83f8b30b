"""A 32-bit pixel image buffer and a colour test pattern."""

from __future__ import annotations

from fdfview.projection import WINDOW_HEIGHT, WINDOW_WIDTH

COLOR_BLACK = 0x000000
COLOR_WHITE = 0xFFFFFF
COLOR_RED = 0xFF0000
COLOR_GREEN = 0x00FF00
COLOR_BLUE = 0x0000FF
COLOR_YELLOW = 0xFFFF00
COLOR_PURPLE = 0xFF00FF
COLOR_CYAN = 0x00FFFF


class Image:
    """Packed rows of little-endian 0xAARRGGBB pixels."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.bpp = 32
        self.size_line = width * (self.bpp // 8)
        self.endian = 0
        self.data = bytearray(self.size_line * height)

    def _offset(self, x: int, y: int) -> int:
        return y * self.size_line + x * (self.bpp // 8)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set pixel ``(x, y)`` to ``color``; positions off the image are ignored."""
        if not self._contains(x, y):
            return
        offset = self._offset(x, y)
        self.data[offset:offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, "little")

    def get_pixel(self, x: int, y: int) -> int:
        """The colour stored at ``(x, y)``."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + 4], "little")

    def clear(self, color: int = COLOR_BLACK) -> None:
        """Fill every pixel with ``color``."""
        self.data[:] = (color & 0xFFFFFFFF).to_bytes(4, "little") * (self.width * self.height)

    def to_ppm(self) -> bytes:
        """The image as a binary PPM (P6) file, alpha dropped."""
        rgb = bytearray(self.width * self.height * 3)
        rgb[0::3] = self.data[2::4]
        rgb[1::3] = self.data[1::4]
        rgb[2::3] = self.data[0::4]
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + bytes(rgb)


def _fill_rect(image: Image, xs: range, ys: range, color: int) -> None:
    for y in ys:
        for x in xs:
            image.put_pixel(x, y, color)


def draw_test_pattern(image: Image) -> Image:
    """Draw three coloured squares and a white cross on a black background."""
    image.clear(COLOR_BLACK)
    rows = range(100, 200)
    _fill_rect(image, range(100, 200), rows, COLOR_RED)
    _fill_rect(image, range(300, 400), rows, COLOR_GREEN)
    _fill_rect(image, range(500, 600), rows, COLOR_BLUE)
    center_x = image.width // 2
    center_y = image.height // 2
    for i in range(-50, 51):
        image.put_pixel(center_x + i, center_y, COLOR_WHITE)
        image.put_pixel(center_x, center_y + i, COLOR_WHITE)
    return image