"""Decomposition of spiral positions into rings, tips and edges.

Ring ``k > 0`` holds ``6k`` hexes starting at :func:`ring_offset`. Each ring
has six corners ("tips"), one at the start of every edge, and its edges are
numbered clockwise from the top.
"""

from __future__ import annotations

from math import isqrt

from .coords import EdgeIdx, Pos, RingIdx


def _check_position(pos: Pos) -> None:
    if pos < 0:
        raise ValueError(f"spiral positions are non-negative, got {pos}")


def ring_offset(ring_idx: RingIdx) -> Pos:
    """First position on the ring with index ``ring_idx``."""

    if ring_idx < 0:
        raise ValueError(f"ring indices are non-negative, got {ring_idx}")
    if ring_idx == 0:
        return 0
    return 3 * ring_idx * (ring_idx - 1) + 1


def ring_size(ring_idx: RingIdx) -> int:
    if ring_idx < 0:
        raise ValueError(f"ring indices are non-negative, got {ring_idx}")
    return 6 * ring_idx if ring_idx else 1


def ring(pos: Pos) -> RingIdx:
    """Index of the ring containing ``pos``.

    ``12 * ring_offset(k) - 3 == (6k - 3) ** 2``, so the integer square root
    lands exactly on ring boundaries.
    """

    _check_position(pos)
    if pos == 0:
        return 0
    return (3 + isqrt(12 * pos - 3)) // 6


def ring_positions(ring_idx: RingIdx) -> range:
    start = ring_offset(ring_idx)
    return range(start, start + ring_size(ring_idx))


def ring_tips(ring_idx: RingIdx) -> tuple[Pos, ...]:
    if ring_idx == 0:
        return (0,)
    start = ring_offset(ring_idx)
    return tuple(start + n * ring_idx for n in range(6))


def is_at_ring_tip(pos: Pos) -> bool:
    """Return ``True`` if ``pos`` is one of the six corners of its ring.

    The centre counts as its own degenerate tip.
    """

    ring_idx = ring(pos)
    if ring_idx == 0:
        return True
    return (pos - ring_offset(ring_idx)) % ring_idx == 0


def ring_edge_index(pos: Pos) -> EdgeIdx:
    """Index of the ring edge ``pos`` belongs to, ``0`` being the top edge."""

    ring_idx = ring(pos)
    if ring_idx == 0:
        raise ValueError("the centre hex does not belong to a ring edge")
    return (pos - ring_offset(ring_idx)) // ring_idx


def is_last_on_ring(pos: Pos) -> bool:
    ring_idx = ring(pos)
    return ring_idx > 0 and pos == ring_offset(ring_idx + 1) - 1


__all__ = [
    "is_at_ring_tip",
    "is_last_on_ring",
    "ring",
    "ring_edge_index",
    "ring_offset",
    "ring_positions",
    "ring_size",
    "ring_tips",
]
