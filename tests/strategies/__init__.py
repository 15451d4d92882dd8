"""Hypothesis strategies for ordergraph property-based testing.

Usage:
    from tests.strategies import labeled_digraphs
    from tests.strategies.graph import edge_lists, build_graph
"""

from .graph import build_graph, edge_lists, labeled_digraphs, vertex_labels

__all__ = [
    "build_graph",
    "edge_lists",
    "labeled_digraphs",
    "vertex_labels",
]
