from __future__ import annotations

import logging
import operator
from typing import Sequence

from .coords import Axial, Cube, Pos
from .errors import CubeNotFoundError
from .rings import ring, ring_offset

logger = logging.getLogger(__name__)

# Base period of the triangle wave on the first ring, one step per hexagon side.
_PERIOD = 6.0
_Q_PHASE = 0.0
_R_PHASE = 4.0


def _growing_trunc_tri(x: int, cycle: int, cycle_start: int, phase: float) -> int:
    """Truncated triangle wave whose period and amplitude grow with ``cycle``.

    The period is ``6 * cycle`` and the amplitude ``1.5 * cycle`` before the
    wave is clipped to ``[-cycle, cycle]``. Every intermediate value is a
    multiple of 0.5, so the float arithmetic is exact.
    """

    c = float(cycle)
    shifted = (x - cycle_start) - (c / 4.0) * (2.0 * phase + _PERIOD)
    period = c * _PERIOD
    # Python's float ``%`` already takes the sign of the divisor.
    y = 6.0 / _PERIOD * abs(shifted % period - c * _PERIOD / 2.0) - 1.5 * c
    if abs(y) > c:
        return int(c) if y > 0 else -int(c)
    return int(y)


def spiral_to_cube(pos: Pos) -> Cube:
    """Convert a spiral position to cube coordinates ``(q, r, s)``."""

    if pos == 0:
        return Cube.ORIGIN
    ring_idx = ring(pos)
    start = ring_offset(ring_idx)
    q = _growing_trunc_tri(pos, ring_idx, start, _Q_PHASE)
    r = _growing_trunc_tri(pos, ring_idx, start, _R_PHASE)
    return Cube(q, r, -q - r)


def _integral_component(value: object) -> int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(f"cube components must be integers, got {value!r}") from None


def _coerce_cube(value: Cube | Sequence[int]) -> Cube:
    if isinstance(value, Cube):
        return value
    if len(value) != 3:
        raise ValueError(f"cube coordinates need three components, got {len(value)}")
    q, r, s = (_integral_component(v) for v in value)
    return Cube(q, r, s)


def cube_to_spiral(cube: Cube | Sequence[int]) -> Pos:
    """Find the spiral position of a cube coordinate.

    Accepts a :class:`Cube` or a plain ``(q, r, s)`` triple. Raises
    :class:`InvalidCubeError` if the components do not sum to zero.
    """

    try:
        coord = _coerce_cube(cube)
    except ValueError:
        logger.debug("Rejected cube coordinate %r", cube)
        raise
    if coord == Cube.ORIGIN:
        return 0

    ring_idx = coord.abs_largest()
    start = ring_offset(ring_idx)
    for candidate in range(start, start + 6 * ring_idx):
        if spiral_to_cube(candidate) == coord:
            return candidate

    logger.debug("No spiral position on ring %d matches %r", ring_idx, coord)
    raise CubeNotFoundError(f"no spiral position matches {coord}")


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.q, c.r)


def axial_to_cube(a: Axial) -> Cube:
    return Cube(a.q, a.r, -a.q - a.r)


def spiral_to_axial(pos: Pos) -> Axial:
    return cube_to_axial(spiral_to_cube(pos))


def axial_to_spiral(a: Axial) -> Pos:
    return cube_to_spiral(axial_to_cube(a))


__all__ = [
    "axial_to_cube",
    "axial_to_spiral",
    "cube_to_axial",
    "cube_to_spiral",
    "spiral_to_axial",
    "spiral_to_cube",
]
