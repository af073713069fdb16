"""Projection of spiral positions onto a 2D plane of flat-topped hexes.

``r`` is the hex radius (centre to corner) and ``y`` grows downwards, as in
most windowing systems.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import cos, pi, sin, sqrt

from .conversions import cube_to_spiral
from .coords import Cube, Point, Pos
from .rings import is_at_ring_tip, ring, ring_edge_index, ring_offset

logger = logging.getLogger(__name__)

A = 2.0 * pi / 6.0

# Offset of the tip starting each edge, in units of (r * cos A, r * sin A).
_TIP_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, -2),
    (3, -1),
    (3, 1),
    (0, 2),
    (-3, 1),
    (-3, -1),
)


@dataclass(frozen=True)
class Orientation:
    b0: float
    b1: float
    b2: float
    b3: float  # pixel -> axial
    start_angle: float  # for polygon corners, in turns


layout_flat = Orientation(
    b0=2.0 / 3.0,
    b1=0.0,
    b2=-1.0 / 3.0,
    b3=sqrt(3.0) / 3.0,
    start_angle=0.0,
)


def _tip_delta(edge_idx: int, magnitude: float, r: float) -> Point:
    xm, ym = _TIP_OFFSETS[edge_idx % 6]
    return xm * magnitude * (r * cos(A)), ym * magnitude * (r * sin(A))


def pos_to_point(pos: Pos, r: float, window_center: Point) -> Point:
    """Centre of the hex at ``pos`` for hexes of radius ``r``."""

    if pos == 0:
        return window_center

    ring_idx = ring(pos)
    edge_idx = ring_edge_index(pos)

    if is_at_ring_tip(pos):
        dx, dy = _tip_delta(edge_idx, ring_idx, r)
        return window_center[0] + dx, window_center[1] + dy

    # walk along the edge from the tip it starts at
    tip_pos = ring_offset(ring_idx) + edge_idx * ring_idx
    tip_offset = pos - tip_pos
    tip_x, tip_y = pos_to_point(tip_pos, r, window_center)
    dx, dy = _tip_delta(edge_idx + 2, tip_offset, r)
    return tip_x + dx, tip_y + dy


def cube_round(qf: float, rf: float, sf: float) -> tuple[int, int, int]:
    qi, ri, si = round(qf), round(rf), round(sf)
    dq, dr, ds = abs(qi - qf), abs(ri - rf), abs(si - sf)
    if dq > dr and dq > ds:
        qi = -ri - si
    elif dr > ds:
        ri = -qi - si
    else:
        si = -qi - ri
    return qi, ri, si


def pixel_to_cube_fractional(point: Point, r: float, window_center: Point) -> tuple[float, float, float]:
    M = layout_flat
    px = (point[0] - window_center[0]) / r
    py = (point[1] - window_center[1]) / r
    q = M.b0 * px + M.b1 * py
    rr = M.b2 * px + M.b3 * py
    return q, rr, -q - rr


def point_to_pos(point: Point, r: float, window_center: Point) -> Pos:
    """Spiral position of the hex containing ``point``."""

    if r <= 0:
        raise ValueError(f"hex radius must be positive, got {r}")
    q, rr, s = cube_round(*pixel_to_cube_fractional(point, r, window_center))
    logger.debug("Point %r rounds to cube (%d, %d, %d)", point, q, rr, s)
    return cube_to_spiral(Cube(q, rr, s))


def hex_corners(pos: Pos, r: float, window_center: Point) -> list[Point]:
    """Polygon corners of the hex at ``pos``, clockwise from the right."""

    cx, cy = pos_to_point(pos, r, window_center)
    corners: list[Point] = []
    for i in range(6):
        angle = 2.0 * pi * (layout_flat.start_angle + i) / 6.0
        corners.append((cx + r * cos(angle), cy + r * sin(angle)))
    return corners


__all__ = [
    "A",
    "cube_round",
    "hex_corners",
    "pixel_to_cube_fractional",
    "point_to_pos",
    "pos_to_point",
]
