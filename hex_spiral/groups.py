"""Adjacency predicates over collections of spiral positions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence, TypeAlias

import networkx as nx

from .coords import Pos
from .neighbors import are_neighbors, neighboring_positions

if TYPE_CHECKING:  # pragma: no cover - typing only
    NeighborGraph: TypeAlias = nx.Graph[Pos]
else:  # pragma: no cover - runtime alias without subscripting
    NeighborGraph: TypeAlias = nx.Graph


def neighbor_graph(positions: Iterable[Pos]) -> NeighborGraph:
    """Return the graph induced on ``positions`` by the neighbour relation."""

    graph: NeighborGraph = nx.Graph()
    graph.add_nodes_from(positions)
    for pos in list(graph.nodes):
        for neighbor in neighboring_positions(pos):
            if neighbor in graph:
                graph.add_edge(pos, neighbor)
    return graph


def is_path_consistent(positions: Sequence[Pos]) -> bool:
    """Return ``True`` if every consecutive pair of ``positions`` are neighbours."""

    if len(positions) < 2:
        raise ValueError("a path needs at least two positions")
    return all(are_neighbors(a, b) for a, b in zip(positions, positions[1:]))


def are_grouped(positions: Iterable[Pos]) -> bool:
    """Return ``True`` if ``positions`` form a single connected group.

    Repeated positions count once; zero or one distinct position is trivially
    grouped.
    """

    graph = neighbor_graph(positions)
    if len(graph) < 2:
        return True
    return nx.is_connected(graph)


def groups(positions: Iterable[Pos]) -> list[set[Pos]]:
    """Split ``positions`` into connected groups, largest first."""

    components = nx.connected_components(neighbor_graph(positions))
    return sorted((set(c) for c in components), key=lambda c: (-len(c), min(c)))


__all__ = ["are_grouped", "groups", "is_path_consistent", "neighbor_graph"]
