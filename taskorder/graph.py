from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List

logger = logging.getLogger(__name__)


class StructuralError(LookupError):
    """Raised when an operation names a vertex the graph does not hold."""

    def __init__(self, vertex: int) -> None:
        super().__init__(f"Vertex {vertex} is not in the graph.")
        self.vertex = vertex


@dataclass(frozen=True)
class Edge:
    start: int
    end: int
    weight: float = 1.0


class DirectedGraph:
    """
    Adjacency-list directed graph over integer vertex ids.

    _adj[v] = [Edge(v, w1), Edge(v, w2), ...] in insertion order.
    Duplicate edges are allowed.
    """

    def __init__(self) -> None:
        self._adj: Dict[int, List[Edge]] = {}
        self._num_edges = 0

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.count_vertices()}, edges={self.count_edges()})"

    def _edges_of(self, vertex: int) -> List[Edge]:
        try:
            return self._adj[vertex]
        except KeyError:
            raise StructuralError(vertex) from None

    def count_vertices(self) -> int:
        return len(self._adj)

    def count_edges(self) -> int:
        return self._num_edges

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._adj

    def vertices(self) -> List[int]:
        return sorted(self._adj)

    def edges(self) -> Iterator[Edge]:
        for vertex in self.vertices():
            yield from self._adj[vertex]

    def add_vertex(self, vertex: int) -> None:
        """
        Re-adding an existing vertex replaces it with an empty edge list.
        """
        old = self._adj.get(vertex)
        if old:
            self._num_edges -= len(old)
        self._adj[vertex] = []

    def add_edge(self, start: int, end: int, weight: float = 1.0) -> Edge:
        return self.add_edge_from(Edge(start, end, weight))

    def add_edge_from(self, edge: Edge) -> Edge:
        if edge.end not in self._adj:
            raise StructuralError(edge.end)
        self._edges_of(edge.start).append(edge)
        self._num_edges += 1
        return edge

    def delete_edge(self, start: int, end: int) -> bool:
        """
        Remove the first edge start -> end. Returns False if there was none.
        """
        edges = self._edges_of(start)
        for i, edge in enumerate(edges):
            if edge.end == end:
                del edges[i]
                self._num_edges -= 1
                return True
        return False

    def delete_vertex(self, vertex: int) -> None:
        """
        Remove a vertex together with its outgoing edges and every edge
        pointing at it, so no traversal ever meets a dangling id.
        """
        removed = len(self._edges_of(vertex))
        del self._adj[vertex]
        for other, edges in self._adj.items():
            kept = [e for e in edges if e.end != vertex]
            removed += len(edges) - len(kept)
            self._adj[other] = kept
        self._num_edges -= removed
        logger.debug("Deleted vertex %d and %d edge(s)", vertex, removed)

    def are_adjacent(self, v1: int, v2: int) -> bool:
        return any(e.end == v2 for e in self._edges_of(v1))

    def get_adjacency_list(self, vertex: int) -> List[int]:
        return [e.end for e in self._edges_of(vertex)]

    def reverse(self) -> DirectedGraph:
        """
        New graph with the same vertices and every edge flipped (weights kept).
        """
        rev = DirectedGraph()
        for vertex in self.vertices():
            rev.add_vertex(vertex)
        for edge in self.edges():
            rev.add_edge(edge.end, edge.start, edge.weight)
        return rev
