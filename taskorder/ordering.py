from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Set, Tuple

from .graph import DirectedGraph

logger = logging.getLogger(__name__)

# (vertex, iterator over the vertex's remaining neighbours)
Frame = Tuple[int, Iterator[int]]


def _frame(graph: DirectedGraph, vertex: int) -> Frame:
    return vertex, iter(graph.get_adjacency_list(vertex))


def contains_cycle(graph: DirectedGraph) -> bool:
    """
    DFS with a visited set and an on-stack set; an edge into a vertex that is
    still on the stack is a back edge, i.e. a cycle.
    """
    visited: Set[int] = set()
    on_stack: Set[int] = set()

    for root in graph.vertices():
        if root in visited:
            continue
        visited.add(root)
        on_stack.add(root)
        stack: List[Frame] = [_frame(graph, root)]
        while stack:
            vertex, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt in on_stack:
                    logger.debug("Back edge %d -> %d", vertex, nxt)
                    return True
                if nxt not in visited:
                    visited.add(nxt)
                    on_stack.add(nxt)
                    stack.append(_frame(graph, nxt))
                    break
            else:
                # dead end below this vertex
                on_stack.discard(vertex)
                stack.pop()
    return False


def sort_topologically(graph: DirectedGraph) -> List[int]:
    """
    Reverse postorder of a DFS started from each unvisited vertex, lowest id
    first. Only a valid topological order when the graph is acyclic, but it
    terminates (and visits every vertex once) on any graph.
    """
    order: List[int] = [0] * graph.count_vertices()
    index = len(order) - 1
    visited: Set[int] = set()

    for root in graph.vertices():
        if root in visited:
            continue
        visited.add(root)
        stack: List[Frame] = [_frame(graph, root)]
        while stack:
            vertex, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append(_frame(graph, nxt))
                    break
            else:
                stack.pop()
                order[index] = vertex
                index -= 1
    return order


def _collect_component(graph: DirectedGraph, seed: int, marked: Set[int]) -> List[int]:
    marked.add(seed)
    component = [seed]
    stack: List[Frame] = [_frame(graph, seed)]
    while stack:
        _, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt not in marked:
                marked.add(nxt)
                component.append(nxt)
                stack.append(_frame(graph, nxt))
                break
        else:
            stack.pop()
    return component


def strongly_connected_components(graph: DirectedGraph) -> List[List[int]]:
    """
    Kosaraju: visit seeds in the reverse postorder of the reversed graph and
    grow each component along the original edges.

    Components come back in discovery order, each in DFS visit order. A
    component may depend on an earlier one, never on a later one.
    """
    seeds = sort_topologically(graph.reverse())
    marked: Set[int] = set()
    components: List[List[int]] = []
    for seed in seeds:
        if seed not in marked:
            components.append(_collect_component(graph, seed, marked))
    logger.debug("Found %d strongly connected component(s)", len(components))
    return components


def grouped_order(graph: DirectedGraph) -> List[List[int]]:
    """Components in printing order: reverse of discovery order."""
    return list(reversed(strongly_connected_components(graph)))


@dataclass(frozen=True)
class Resolution:
    cyclic: bool
    groups: List[List[int]]  # one vertex per group when not cyclic


def resolve(graph: DirectedGraph) -> Resolution:
    if contains_cycle(graph):
        groups = grouped_order(graph)
        logger.info("Graph has a cycle; grouped %d vertices into %d steps",
                    graph.count_vertices(), len(groups))
        return Resolution(cyclic=True, groups=groups)

    order = sort_topologically(graph)
    logger.info("Graph is acyclic; ordered %d vertices", len(order))
    return Resolution(cyclic=False, groups=[[v] for v in order])
