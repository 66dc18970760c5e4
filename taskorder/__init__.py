from .graph import DirectedGraph, Edge, StructuralError
from .ordering import contains_cycle, grouped_order, resolve, sort_topologically, strongly_connected_components

__all__ = [
    "DirectedGraph",
    "Edge",
    "StructuralError",
    "contains_cycle",
    "grouped_order",
    "resolve",
    "sort_topologically",
    "strongly_connected_components",
]
