from __future__ import annotations

from typing import Iterator

from .coords import Pos
from .rings import is_at_ring_tip, is_last_on_ring, ring, ring_edge_index, ring_offset

_CENTER_NEIGHBORS: tuple[Pos, ...] = (1, 2, 3, 4, 5, 6)


def _rotate_right(values: list[Pos], steps: int) -> tuple[Pos, ...]:
    steps %= len(values)
    if steps == 0:
        return tuple(values)
    return tuple(values[-steps:] + values[:-steps])


def ring_neighboring_positions(pos: Pos) -> tuple[Pos, Pos]:
    """Previous and next position on the same ring, wrapping at the ring ends."""

    if pos == 0:
        raise ValueError("the centre hex has no ring neighbours")
    ring_idx = ring(pos)
    first = ring_offset(ring_idx)
    last = ring_offset(ring_idx + 1) - 1
    if pos == first:
        return last, pos + 1
    if pos == last:
        return pos - 1, first
    return pos - 1, pos + 1


def _tip_neighbors(pos: Pos, ring_idx: int, edge_idx: int) -> list[Pos]:
    # one neighbour on the inner ring, two on this ring, three on the outer one
    inner = ring_offset(ring_idx - 1) + (ring_idx - 1) * edge_idx
    pred, succ = ring_neighboring_positions(pos)
    if is_last_on_ring(pos):
        upper_tip = ring_offset(ring_idx + 2) - 2
    else:
        upper_tip = ring_offset(ring_idx + 1) + (ring_idx + 1) * edge_idx
    upper_pred, upper_succ = ring_neighboring_positions(upper_tip)
    return [upper_tip, upper_succ, succ, inner, pred, upper_pred]


def _edge_neighbors(pos: Pos, ring_idx: int, edge_idx: int) -> list[Pos]:
    ring_pos = pos - ring_offset(ring_idx)
    tip_offset = ring_pos - edge_idx * ring_idx
    if is_last_on_ring(pos):
        lower1, lower2 = ring_offset(ring_idx) - 1, ring_offset(ring_idx - 1)
    else:
        lower1 = ring_offset(ring_idx - 1) + edge_idx * (ring_idx - 1) + tip_offset - 1
        lower2 = lower1 + 1
    pred, succ = ring_neighboring_positions(pos)
    upper1 = ring_offset(ring_idx + 1) + edge_idx * (ring_idx + 1) + tip_offset
    return [upper1, upper1 + 1, succ, lower2, lower1, pred]


def neighboring_positions(pos: Pos) -> tuple[Pos, ...]:
    """The six neighbours of ``pos`` clockwise, starting with the top one.

    Neighbours are first collected in the order they have relative to the
    top edge of a ring, then rotated right by the edge index so that index
    ``0`` always points up.
    """

    ring_idx = ring(pos)
    if ring_idx == 0:
        return _CENTER_NEIGHBORS
    edge_idx = ring_edge_index(pos)
    if is_at_ring_tip(pos):
        base = _tip_neighbors(pos, ring_idx, edge_idx)
    else:
        base = _edge_neighbors(pos, ring_idx, edge_idx)
    return _rotate_right(base, edge_idx)


def are_neighbors(pos1: Pos, pos2: Pos) -> bool:
    return pos2 in neighboring_positions(pos1)


class DirectionalNeighborIter(Iterator[Pos]):
    """Walk from a position in a straight line.

    Direction ``0`` is up and increases clockwise to ``5``. The walk is
    infinite and does not yield the starting position itself.
    """

    __slots__ = ("_curr_pos", "_direction")

    def __init__(self, pos: Pos, direction: int) -> None:
        if not 0 <= direction <= 5:
            raise ValueError(f"direction must be in 0..5, got {direction}")
        if pos < 0:
            raise ValueError(f"spiral positions are non-negative, got {pos}")
        self._curr_pos = pos
        self._direction = direction

    @property
    def curr_pos(self) -> Pos:
        return self._curr_pos

    @property
    def direction(self) -> int:
        return self._direction

    def __iter__(self) -> "DirectionalNeighborIter":
        return self

    def __next__(self) -> Pos:
        self._curr_pos = neighboring_positions(self._curr_pos)[self._direction]
        return self._curr_pos


__all__ = [
    "DirectionalNeighborIter",
    "are_neighbors",
    "neighboring_positions",
    "ring_neighboring_positions",
]
