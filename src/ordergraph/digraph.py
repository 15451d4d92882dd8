"""Mutable directed graph keyed by string labels.

Vertices are identified by label in the public API and by a dense integer
index internally. Indices are assigned in insertion order starting at 0 and
are never reused; vertex removal is not supported. Adjacency is stored per
index slot as a list, so duplicate edges are kept (multiset semantics) and
each duplicate needs its own delete_edge() call.

Every mutating operation validates all of its arguments before touching any
state: a rejected call leaves the vertex map, the slot array and the edge
count exactly as they were.

Thread Safety:
    Not synchronized. Concurrent readers are safe only while no thread
    mutates the graph; the analyzer relies on the graph staying unchanged for
    the duration of a call.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator

from ordergraph.constants import CAPACITY_GROWTH_FACTOR, INITIAL_VERTEX_CAPACITY
from ordergraph.core.label_validation import is_valid_label, require_label
from ordergraph.diagnostics import (
    DuplicateVertexError,
    ErrorTemplate,
    SelfLoopError,
    UnknownVertexError,
)

__all__ = ["LabeledDigraph"]


class LabeledDigraph:
    """Directed graph whose vertices are non-empty string labels.

    Example:
        >>> graph = LabeledDigraph()
        >>> for name in ("fetch", "build", "test"):
        ...     graph.add_vertex(name)
        >>> graph.add_edge("fetch", "build")
        >>> graph.add_edge("build", "test")
        >>> graph.neighbors("fetch")
        ('build',)
        >>> graph.edge_count
        2
    """

    __slots__ = ("_adjacency", "_edge_count", "_index", "_labels")

    def __init__(self) -> None:
        self._index: dict[str, int] = {}
        self._labels: list[str] = []
        # One slot per potential vertex; slots past size() are unassigned.
        self._adjacency: list[list[str] | None] = [None] * INITIAL_VERTEX_CAPACITY
        self._edge_count = 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, name: str) -> None:
        """Insert a new vertex and assign it the next sequential index.

        Args:
            name: Vertex label

        Raises:
            InvalidArgumentError: If name is None, empty, or not a string
            DuplicateVertexError: If name is already present
        """
        name = require_label(name)
        if name in self._index:
            raise DuplicateVertexError(ErrorTemplate.duplicate_vertex(name))

        index = len(self._labels)
        if index == len(self._adjacency):
            self._grow()
        self._index[name] = index
        self._labels.append(name)
        self._adjacency[index] = []

    def add_edge(self, source: str, target: str) -> None:
        """Insert a directed edge from source to target.

        Duplicate edges are allowed and counted separately.

        Raises:
            InvalidArgumentError: If either label is None, empty, or not a string
            SelfLoopError: If source == target
            UnknownVertexError: If either vertex is not in the graph
        """
        source_index = self._edge_endpoints(source, target)
        self._slot(source_index).append(target)
        self._edge_count += 1

    def delete_edge(self, source: str, target: str) -> bool:
        """Remove one occurrence of the edge from source to target.

        An edge in the opposite direction is not affected.

        Returns:
            True if an edge was found and removed, False if none existed

        Raises:
            InvalidArgumentError: If either label is None, empty, or not a string
            SelfLoopError: If source == target
            UnknownVertexError: If either vertex is not in the graph
        """
        source_index = self._edge_endpoints(source, target)
        targets = self._slot(source_index)
        try:
            targets.remove(target)
        except ValueError:
            return False
        self._edge_count -= 1
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        """Return the number of vertices."""
        return len(self._labels)

    @property
    def edge_count(self) -> int:
        """Total number of edges, duplicates included."""
        return self._edge_count

    @property
    def capacity(self) -> int:
        """Number of allocated adjacency slots (always >= size())."""
        return len(self._adjacency)

    def has_vertex(self, name: str) -> bool:
        """Return True if a vertex with this label exists.

        Raises:
            InvalidArgumentError: If name is None, empty, or not a string.
                A valid label that is simply absent returns False.
        """
        return require_label(name) in self._index

    def neighbors(self, name: str) -> tuple[str, ...]:
        """Return the labels this vertex has out-edges to.

        The tuple is a snapshot: it repeats a label once per duplicate edge
        and does not change if the graph is mutated later.

        Raises:
            InvalidArgumentError: If name is None, empty, or not a string
            UnknownVertexError: If the vertex is not in the graph
        """
        return tuple(self._slot(self.index_of(name)))

    def vertices(self) -> tuple[str, ...]:
        """Return all vertex labels in insertion order."""
        return tuple(self._labels)

    def index_of(self, name: str) -> int:
        """Return the dense index assigned to a vertex label.

        Raises:
            InvalidArgumentError: If name is None, empty, or not a string
            UnknownVertexError: If the vertex is not in the graph
        """
        name = require_label(name)
        try:
            return self._index[name]
        except KeyError:
            raise UnknownVertexError(ErrorTemplate.unknown_vertex(name)) from None

    def label_at(self, index: int) -> str:
        """Return the label assigned to a dense index.

        Raises:
            IndexError: If no vertex holds this index
        """
        if not 0 <= index < len(self._labels):
            msg = f"vertex index {index} out of range for graph of size {len(self._labels)}"
            raise IndexError(msg)
        return self._labels[index]

    def successor_indices(self, index: int) -> list[int]:
        """Return the target indices of a vertex's out-edges, in storage order."""
        return [self._index[target] for target in self._slot(index)]

    def reversed(self) -> LabeledDigraph:
        """Return a new graph with the same vertices and every edge flipped.

        Vertices keep their insertion order, so each vertex has the same
        index in both graphs. Edge multiplicity is preserved.
        """
        reverse = LabeledDigraph()
        for label in self._labels:
            reverse.add_vertex(label)
        for index, label in enumerate(self._labels):
            for target in self._slot(index):
                reverse.add_edge(target, label)
        return reverse

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, name: object) -> bool:
        return is_valid_label(name) and name in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._labels))

    def __repr__(self) -> str:
        return f"LabeledDigraph(vertices={len(self._labels)}, edges={self._edge_count})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _edge_endpoints(self, source: str, target: str) -> int:
        """Validate an edge's endpoints and return the source index.

        Order of checks: labels, self-loop, existence (source first).
        """
        source = require_label(source)
        target = require_label(target)
        if source == target:
            raise SelfLoopError(ErrorTemplate.self_loop(source))
        source_index = self.index_of(source)
        self.index_of(target)
        return source_index

    def _slot(self, index: int) -> list[str]:
        targets = self._adjacency[index]
        if targets is None:  # pragma: no cover - indices come from _index
            msg = f"adjacency slot {index} is unassigned"
            raise AssertionError(msg)
        return targets

    def _grow(self) -> None:
        new_capacity = len(self._adjacency) * CAPACITY_GROWTH_FACTOR
        self._adjacency.extend([None] * (new_capacity - len(self._adjacency)))
