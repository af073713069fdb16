"""Single-integer spiral coordinates for flat-topped hexagonal grids."""

from .coords import Axial, Cube, EdgeIdx, Point, Pos, RingIdx
from .errors import CubeNotFoundError, InvalidCubeError, SpiralError
from .rings import (
    is_at_ring_tip,
    is_last_on_ring,
    ring,
    ring_edge_index,
    ring_offset,
    ring_positions,
    ring_size,
    ring_tips,
)
from .neighbors import (
    DirectionalNeighborIter,
    are_neighbors,
    neighboring_positions,
    ring_neighboring_positions,
)
from .conversions import (
    axial_to_cube,
    axial_to_spiral,
    cube_to_axial,
    cube_to_spiral,
    spiral_to_axial,
    spiral_to_cube,
)
from .heuristics import hex_distance, hex_distance_axial, hex_distance_cube
from .groups import are_grouped, groups, is_path_consistent, neighbor_graph
from .projection import hex_corners, point_to_pos, pos_to_point
from .config import SpiralLayout
from .arrays import rings_array, spiral_to_cube_array

__version__ = "0.1.0"

__all__ = [
    "Axial",
    "Cube",
    "CubeNotFoundError",
    "DirectionalNeighborIter",
    "EdgeIdx",
    "InvalidCubeError",
    "Point",
    "Pos",
    "RingIdx",
    "SpiralError",
    "SpiralLayout",
    "are_grouped",
    "are_neighbors",
    "axial_to_cube",
    "axial_to_spiral",
    "cube_to_axial",
    "cube_to_spiral",
    "groups",
    "hex_corners",
    "hex_distance",
    "hex_distance_axial",
    "hex_distance_cube",
    "is_at_ring_tip",
    "is_last_on_ring",
    "is_path_consistent",
    "neighbor_graph",
    "neighboring_positions",
    "point_to_pos",
    "pos_to_point",
    "ring",
    "ring_edge_index",
    "ring_neighboring_positions",
    "ring_offset",
    "ring_positions",
    "ring_size",
    "ring_tips",
    "rings_array",
    "spiral_to_axial",
    "spiral_to_cube",
    "spiral_to_cube_array",
]
