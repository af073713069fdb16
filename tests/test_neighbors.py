import pytest

from hex_spiral import (
    are_neighbors,
    is_at_ring_tip,
    neighboring_positions,
    ring,
    ring_edge_index,
    ring_neighboring_positions,
)
from hex_spiral.heuristics import hex_distance


@pytest.mark.parametrize(
    ("pos", "expected"),
    [
        (1, (6, 2)),
        (2, (1, 3)),
        (3, (2, 4)),
        (4, (3, 5)),
        (5, (4, 6)),
        (6, (5, 1)),
        (18, (17, 7)),
        (58, (57, 59)),
    ],
)
def test_ring_neighbors(pos, expected):
    assert ring_neighboring_positions(pos) == expected


def test_ring_neighbors_of_center_is_an_error():
    with pytest.raises(ValueError):
        ring_neighboring_positions(0)


@pytest.mark.parametrize(
    ("pos", "expected"),
    [
        (0, (1, 2, 3, 4, 5, 6)),
        (1, (7, 8, 2, 0, 6, 18)),
        (2, (8, 9, 10, 3, 0, 1)),
        (3, (2, 10, 11, 12, 4, 0)),
        (4, (0, 3, 12, 13, 14, 5)),
        (5, (6, 0, 4, 14, 15, 16)),
        (6, (18, 1, 0, 5, 16, 17)),
        (7, (19, 20, 8, 1, 18, 36)),
        (9, (21, 22, 23, 10, 2, 8)),
        (11, (10, 24, 25, 26, 12, 3)),
        (13, (4, 12, 27, 28, 29, 14)),
        (15, (16, 5, 14, 30, 31, 32)),
        (17, (35, 18, 6, 16, 33, 34)),
        (28, (13, 27, 48, 49, 50, 29)),
        (53, (54, 31, 52, 80, 81, 82)),
        (57, (87, 58, 34, 56, 85, 86)),
    ],
)
def test_ring_tip_neighbors(pos, expected):
    assert neighboring_positions(pos) == expected


@pytest.mark.parametrize(
    ("pos", "expected"),
    [
        (8, (20, 21, 9, 2, 1, 7)),
        (10, (9, 23, 24, 11, 3, 2)),
        (12, (3, 11, 26, 27, 13, 4)),
        (14, (5, 4, 13, 29, 30, 15)),
        (16, (17, 6, 5, 15, 32, 33)),
        (18, (36, 7, 1, 6, 17, 35)),
        (38, (62, 63, 39, 20, 19, 37)),
        (40, (64, 65, 41, 22, 21, 39)),
        (42, (41, 67, 68, 43, 23, 22)),
        (44, (43, 69, 70, 45, 25, 24)),
        (46, (25, 45, 72, 73, 47, 26)),
        (48, (27, 47, 74, 75, 49, 28)),
        (50, (29, 28, 49, 77, 78, 51)),
        (52, (31, 30, 51, 79, 80, 53)),
        (54, (55, 32, 31, 53, 82, 83)),
        (56, (57, 34, 33, 55, 84, 85)),
        (58, (88, 59, 35, 34, 57, 87)),
        (60, (90, 37, 19, 36, 59, 89)),
    ],
)
def test_ring_edge_neighbors(pos, expected):
    assert neighboring_positions(pos) == expected


def test_six_distinct_neighbors():
    for pos in range(2000):
        neighbors = neighboring_positions(pos)
        assert len(neighbors) == 6
        assert len(set(neighbors)) == 6
        assert pos not in neighbors


def test_neighbor_symmetry():
    for pos in range(2000):
        for neighbor in neighboring_positions(pos):
            assert are_neighbors(neighbor, pos), (pos, neighbor)


def test_neighbors_are_one_step_apart():
    for pos in range(1000):
        for neighbor in neighboring_positions(pos):
            assert hex_distance(pos, neighbor) == 1, (pos, neighbor)


def test_neighbors_stay_within_adjacent_rings():
    for pos in range(1, 1000):
        k = ring(pos)
        for neighbor in neighboring_positions(pos):
            assert abs(ring(neighbor) - k) <= 1


def test_top_neighbor_of_top_edge_is_outward():
    # on the top edge the first neighbour always lies on the next ring
    for pos in range(1, 1000):
        if ring_edge_index(pos) == 0 and not is_at_ring_tip(pos):
            assert ring(neighboring_positions(pos)[0]) == ring(pos) + 1


def test_are_neighbors():
    assert are_neighbors(0, 3)
    assert are_neighbors(18, 7)
    assert not are_neighbors(1, 4)
    assert not are_neighbors(5, 5)
