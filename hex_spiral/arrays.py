"""Vectorised conversions for converting many spiral positions at once."""

from __future__ import annotations

from typing import Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _as_positions(positions: ArrayLike | Iterable[int]) -> NDArray[np.int64]:
    arr = np.asarray(positions, dtype=np.int64)
    if arr.ndim != 1:
        arr = arr.reshape(-1)
    if arr.size and int(arr.min()) < 0:
        raise ValueError("spiral positions are non-negative")
    return arr


def _ring_offsets(rings: NDArray[np.int64]) -> NDArray[np.int64]:
    return np.where(rings == 0, 0, 3 * rings * (rings - 1) + 1)


def rings_array(positions: ArrayLike | Iterable[int]) -> NDArray[np.int64]:
    """Ring index of every position, as :func:`hex_spiral.rings.ring`."""

    pos = _as_positions(positions)
    radicand = np.maximum(12 * pos - 3, 0).astype(np.float64)
    rings = ((3 + np.floor(np.sqrt(radicand))) // 6).astype(np.int64)
    rings = np.where(pos == 0, 0, rings)
    # float sqrt can land one ring off for very large positions
    rings = np.where(_ring_offsets(rings + 1) <= pos, rings + 1, rings)
    rings = np.where((rings > 0) & (_ring_offsets(rings) > pos), rings - 1, rings)
    return rings


def _growing_trunc_tri(
    offset: NDArray[np.float32], cycle: NDArray[np.float32], phase: float
) -> NDArray[np.int32]:
    period = np.float32(6.0)
    shifted = offset - (cycle / np.float32(4.0)) * (np.float32(2.0 * phase) + period)
    y = np.float32(6.0) / period * np.abs(
        np.mod(shifted, cycle * period) - cycle * period / np.float32(2.0)
    ) - np.float32(1.5) * cycle
    y = np.where(np.abs(y) > cycle, np.sign(y) * cycle, y)
    return np.trunc(y).astype(np.int32)


def spiral_to_cube_array(positions: ArrayLike | Iterable[int]) -> NDArray[np.int32]:
    """Cube coordinates for many positions, one ``(q, r, s)`` row each.

    The triangle wave is evaluated in single precision.
    """

    pos = _as_positions(positions)
    rings = rings_array(pos)
    center = rings == 0
    # a unit cycle keeps the centre rows finite; they are zeroed below
    cycle = np.where(center, 1, rings).astype(np.float32)
    offset = (pos - _ring_offsets(rings)).astype(np.float32)

    q = _growing_trunc_tri(offset, cycle, 0.0)
    r = _growing_trunc_tri(offset, cycle, 4.0)
    q = np.where(center, 0, q).astype(np.int32)
    r = np.where(center, 0, r).astype(np.int32)
    return np.stack([q, r, -q - r], axis=1)


__all__ = ["rings_array", "spiral_to_cube_array"]
