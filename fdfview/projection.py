"""Isometric projection of map points onto the window."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from fdfview.heightmap import HeightMap

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
WINDOW_TITLE = "FDF - Wireframe Viewer"

DEFAULT_ZOOM = 20
DEFAULT_Z_SCALE = 1

# About 30 degrees, in radians.
ISO_ANGLE = 0.523599


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Point:
    """A projected screen position and the height it came from."""

    x: int
    y: int
    z: int


def isometric_projection(x: float, y: float, height_map: HeightMap) -> Point:
    """Project map cell ``(x, y)`` isometrically, zoomed and centred on the window.

    Coordinates are truncated to pick the cell whose height is used.
    """
    fx, fy = _f32(x), _f32(y)
    col, row = int(fx), int(fy)
    if col < 0 or row < 0:
        raise IndexError(f"cell ({col}, {row}) is outside the map")
    z = height_map.z_matrix[row][col]

    iso_x = _f32(_f32(fx - fy) * math.cos(ISO_ANGLE))
    iso_y = _f32(_f32(fx + fy) * math.sin(ISO_ANGLE) - z)

    iso_x = _f32(iso_x * DEFAULT_ZOOM)
    iso_y = _f32(iso_y * DEFAULT_ZOOM)

    return Point(
        x=int(_f32(iso_x + WINDOW_WIDTH // 2)),
        y=int(_f32(iso_y + WINDOW_HEIGHT // 2)),
        z=z,
    )