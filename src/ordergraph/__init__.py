"""ordergraph - dependency ordering over labeled directed graphs.

Builds a mutable directed graph of named tasks and orders it: a plain
topological sort when the tasks are acyclic, or a topologically ordered list
of strongly connected components (Kosaraju) when some tasks depend on each
other.

Public API:
    LabeledDigraph - Mutable directed graph keyed by string labels
    has_cycle - Directed cycle detection
    reverse_postorder - Vertices in reverse DFS finishing order
    topological_order - Reverse-postorder topological sort
    strongly_connected_components - SCCs in topological order of the condensation
    strongly_connected_component_lists - Same SCCs as lists in discovery order

Exceptions:
    OrderGraphError - Base exception class
    GraphError - Base for graph engine failures
    InvalidArgumentError - Missing, empty or non-string labels
    DuplicateVertexError - Vertex inserted twice
    UnknownVertexError - Reference to a vertex not in the graph
    SelfLoopError - Edge from a vertex to itself
    FileAccessError - Task file missing or unreadable

Submodules:
    ordergraph.analysis - Graph algorithms
    ordergraph.diagnostics - Diagnostic codes, templates and formatting
    ordergraph.tasks - Task file loading and report rendering
    ordergraph.cli - Command line entry point
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .analysis import (
    has_cycle,
    reverse_postorder,
    strongly_connected_component_lists,
    strongly_connected_components,
    topological_order,
)
from .diagnostics import (
    DuplicateVertexError,
    FileAccessError,
    GraphError,
    InvalidArgumentError,
    OrderGraphError,
    SelfLoopError,
    UnknownVertexError,
)
from .digraph import LabeledDigraph

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("ordergraph")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DuplicateVertexError",
    "FileAccessError",
    "GraphError",
    "InvalidArgumentError",
    "LabeledDigraph",
    "OrderGraphError",
    "SelfLoopError",
    "UnknownVertexError",
    "__version__",
    "has_cycle",
    "reverse_postorder",
    "strongly_connected_component_lists",
    "strongly_connected_components",
    "topological_order",
]
