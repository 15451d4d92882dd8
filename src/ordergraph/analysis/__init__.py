"""Graph analysis for dependency ordering.

Provides cycle detection, topological sorting and strongly connected
component decomposition over LabeledDigraph instances.

Python 3.13+.
"""

from .graph import (
    has_cycle,
    reverse_postorder,
    strongly_connected_component_lists,
    strongly_connected_components,
    topological_order,
)

__all__ = [
    "has_cycle",
    "reverse_postorder",
    "strongly_connected_component_lists",
    "strongly_connected_components",
    "topological_order",
]
