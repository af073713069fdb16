from __future__ import annotations

from .conversions import spiral_to_cube
from .coords import Axial, Cube, Pos


def hex_distance_cube(a: Cube, b: Cube) -> int:
    return max(abs(a.q - b.q), abs(a.r - b.r), abs(a.s - b.s))


def hex_distance_axial(a: Axial, b: Axial) -> int:
    return max(abs(a.q - b.q), abs(a.r - b.r), abs(a.s - b.s))


def hex_distance(a: Pos, b: Pos) -> int:
    """Number of steps between two spiral positions."""
    return hex_distance_cube(spiral_to_cube(a), spiral_to_cube(b))
