"""Graph algorithms for dependency ordering.

Provides cycle detection, topological sorting and strongly connected
component decomposition (Kosaraju) over a LabeledDigraph.

All functions are pure: they never mutate the graph they are given. They
work on the graph's dense vertex indices with list-based mark arrays and
translate back to labels only when building results.

Every traversal is an iterative DFS with an explicit stack of
(vertex, next-neighbor-position) frames, so depth is bounded by memory
rather than by the interpreter's recursion limit.

Python 3.13+.
"""

from collections.abc import Iterator, Sequence
from enum import Enum, auto

from ordergraph.diagnostics import ErrorTemplate, InvalidArgumentError
from ordergraph.digraph import LabeledDigraph

__all__ = [
    "has_cycle",
    "reverse_postorder",
    "strongly_connected_component_lists",
    "strongly_connected_components",
    "topological_order",
]


class _NodeState(Enum):
    """DFS traversal event kinds."""

    ENTER = auto()  # First visit to node (pre-order)
    SEEN = auto()  # Edge into a node that was already visited
    EXIT = auto()  # All neighbors processed (post-order)


def _require_graph(graph: object) -> LabeledDigraph:
    if not isinstance(graph, LabeledDigraph):
        raise InvalidArgumentError(ErrorTemplate.invalid_graph(graph))
    return graph


def _successor_table(graph: LabeledDigraph) -> list[list[int]]:
    """Snapshot of every vertex's out-edges as target indices.

    Taken once per call so neighbor order is stable for the whole traversal.
    """
    return [graph.successor_indices(index) for index in range(graph.size())]


def _walk(
    successors: Sequence[Sequence[int]],
    root: int,
    visited: list[bool],
) -> Iterator[tuple[_NodeState, int]]:
    """Depth-first traversal from root, skipping vertices already visited.

    Yields the same event sequence a recursive DFS would produce:
    ENTER when a vertex is marked, SEEN for each edge into an already
    marked vertex, and EXIT once every neighbor has been processed.

    Args:
        successors: Target indices per vertex index
        root: Unvisited start vertex
        visited: Shared mark array, updated in place
    """
    visited[root] = True
    yield _NodeState.ENTER, root

    # Frame: [vertex, position of the next neighbor to examine]
    stack: list[list[int]] = [[root, 0]]
    while stack:
        frame = stack[-1]
        node, position = frame
        targets = successors[node]

        if position < len(targets):
            frame[1] = position + 1
            target = targets[position]
            if visited[target]:
                yield _NodeState.SEEN, target
            else:
                visited[target] = True
                yield _NodeState.ENTER, target
                stack.append([target, 0])
        else:
            stack.pop()
            yield _NodeState.EXIT, node


def _postorder(graph: LabeledDigraph) -> list[int]:
    """Finishing order of a DFS seeded over all vertices in insertion order."""
    successors = _successor_table(graph)
    visited = [False] * graph.size()
    finished: list[int] = []

    for root in range(graph.size()):
        if visited[root]:
            continue
        finished.extend(
            node for state, node in _walk(successors, root, visited)
            if state is _NodeState.EXIT
        )

    return finished


def has_cycle(graph: LabeledDigraph) -> bool:
    """Return True if any vertex is reachable from itself.

    Three-color DFS: a vertex stays on the active path from ENTER until
    EXIT, and an edge into a vertex on the active path closes a cycle.
    Stops at the first cycle found.

    Args:
        graph: Graph to inspect

    Returns:
        True if the graph contains at least one directed cycle

    Raises:
        InvalidArgumentError: If graph is not a LabeledDigraph

    Example:
        >>> graph = LabeledDigraph()
        >>> for name in ("a", "b"):
        ...     graph.add_vertex(name)
        >>> graph.add_edge("a", "b")
        >>> has_cycle(graph)
        False
        >>> graph.add_edge("b", "a")
        >>> has_cycle(graph)
        True

    Complexity:
        Time: O(V + E)
        Space: O(V) for mark arrays and the traversal stack
    """
    graph = _require_graph(graph)
    successors = _successor_table(graph)
    visited = [False] * graph.size()
    on_active_path = [False] * graph.size()

    for root in range(graph.size()):
        if visited[root]:
            continue
        for state, node in _walk(successors, root, visited):
            match state:
                case _NodeState.ENTER:
                    on_active_path[node] = True
                case _NodeState.EXIT:
                    on_active_path[node] = False
                case _NodeState.SEEN:
                    if on_active_path[node]:
                        return True

    return False


def reverse_postorder(graph: LabeledDigraph) -> list[str]:
    """Return vertex labels in reverse DFS finishing order.

    DFS starts from every unvisited vertex in insertion order; each vertex
    is recorded after all of its neighbors are finished, and the record is
    then read back to front.

    Raises:
        InvalidArgumentError: If graph is not a LabeledDigraph
    """
    graph = _require_graph(graph)
    return [graph.label_at(index) for index in reversed(_postorder(graph))]


def topological_order(graph: LabeledDigraph) -> list[str]:
    """Return every vertex ordered so that each edge points forward.

    For an edge (source, target), source is listed before target. Among
    several valid orders, the one produced by reverse-postorder DFS in
    insertion order is returned.

    Precondition:
        The graph is acyclic. Check has_cycle() first; on a cyclic graph the
        result is still a permutation of the vertices but not a valid order.

    Args:
        graph: Acyclic graph to sort

    Returns:
        All vertex labels, each exactly once

    Raises:
        InvalidArgumentError: If graph is not a LabeledDigraph

    Example:
        >>> graph = LabeledDigraph()
        >>> for name in ("a", "b", "c"):
        ...     graph.add_vertex(name)
        >>> graph.add_edge("a", "b")
        >>> graph.add_edge("b", "c")
        >>> topological_order(graph)
        ['a', 'b', 'c']
    """
    return reverse_postorder(graph)


def strongly_connected_component_lists(graph: LabeledDigraph) -> list[list[str]]:
    """Partition vertices into strongly connected components (Kosaraju).

    1. Take the finishing order of a DFS over the reversed graph.
    2. Walk that order from the last-finished vertex; each unvisited vertex
       starts a forward DFS on the original graph, and everything that DFS
       reaches forms one component.
    3. Step 2 discovers sink components first, so the discovered list is
       returned back to front.

    The returned components are in topological order of the condensation:
    no edge runs from a later component to an earlier one. Members are
    listed in the order the forward DFS reached them.

    Raises:
        InvalidArgumentError: If graph is not a LabeledDigraph
    """
    graph = _require_graph(graph)
    reverse = graph.reversed()
    finishing = [reverse.label_at(index) for index in reversed(_postorder(reverse))]

    successors = _successor_table(graph)
    visited = [False] * graph.size()
    discovered: list[list[str]] = []

    for label in finishing:
        root = graph.index_of(label)
        if visited[root]:
            continue
        discovered.append([
            graph.label_at(node)
            for state, node in _walk(successors, root, visited)
            if state is _NodeState.ENTER
        ])

    discovered.reverse()
    return discovered


def strongly_connected_components(graph: LabeledDigraph) -> list[frozenset[str]]:
    """Return the strongly connected components in topological order.

    Same partition and order as strongly_connected_component_lists(), with
    each component as an unordered set.

    Args:
        graph: Graph to decompose

    Returns:
        Components, each a frozenset of vertex labels. Every vertex belongs
        to exactly one component; an empty graph yields an empty list.

    Raises:
        InvalidArgumentError: If graph is not a LabeledDigraph

    Example:
        >>> graph = LabeledDigraph()
        >>> for name in ("a", "b", "c", "d"):
        ...     graph.add_vertex(name)
        >>> for source, target in [("a", "b"), ("b", "c"), ("c", "a"), ("c", "d")]:
        ...     graph.add_edge(source, target)
        >>> [sorted(component) for component in strongly_connected_components(graph)]
        [['a', 'b', 'c'], ['d']]

    Complexity:
        Time: O(V + E), including construction of the reversed graph
        Space: O(V + E) for the reversed graph
    """
    return [frozenset(component) for component in strongly_connected_component_lists(graph)]
