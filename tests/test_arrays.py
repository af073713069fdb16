import numpy as np
import pytest

from hex_spiral import ring, ring_offset, rings_array, spiral_to_cube, spiral_to_cube_array


def test_rings_array_matches_scalar():
    positions = np.arange(5000)
    expected = [ring(int(p)) for p in positions]
    assert rings_array(positions).tolist() == expected


def test_spiral_to_cube_array_scenarios():
    result = spiral_to_cube_array([0, 1, 4, 7, 8, 45])
    assert result.dtype == np.int32
    assert result.tolist() == [
        [0, 0, 0],
        [0, -1, 1],
        [0, 1, -1],
        [0, -2, 2],
        [1, -2, 1],
        [4, 0, -4],
    ]


def test_spiral_to_cube_array_matches_scalar_to_ring_1000():
    positions = np.arange(ring_offset(1001))
    table = spiral_to_cube_array(positions)
    assert table.shape == (len(positions), 3)
    assert np.all(table.sum(axis=1) == 0)
    for pos in list(range(0, 2000)) + list(range(ring_offset(1000), ring_offset(1001), 97)):
        assert tuple(table[pos]) == spiral_to_cube(pos).as_tuple()


def test_empty_input():
    assert spiral_to_cube_array([]).shape == (0, 3)


def test_negative_positions_are_rejected():
    with pytest.raises(ValueError):
        spiral_to_cube_array([3, -1])
