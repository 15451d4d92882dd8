"""Tests for LabeledDigraph construction, mutation and queries.

Covers label validation, duplicate/unknown/self-loop rejection, multiset
edge semantics, slot growth and graph reversal.
"""

from collections import Counter

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from ordergraph import (
    DuplicateVertexError,
    InvalidArgumentError,
    LabeledDigraph,
    SelfLoopError,
    UnknownVertexError,
)
from ordergraph.constants import INITIAL_VERTEX_CAPACITY
from ordergraph.diagnostics import DiagnosticCode
from tests.strategies import build_graph, labeled_digraphs


def edge_multiset(graph: LabeledDigraph) -> Counter[tuple[str, str]]:
    """Count every (source, target) pair, duplicates included."""
    return Counter(
        (source, target) for source in graph.vertices() for target in graph.neighbors(source)
    )


@pytest.fixture
def abc_graph() -> LabeledDigraph:
    """Vertices a, b, c with no edges."""
    return build_graph(["a", "b", "c"], [])


# ============================================================================
# UNIT TESTS - VERTICES
# ============================================================================


class TestAddVertex:
    """Vertex insertion and index assignment."""

    def test_empty_graph(self) -> None:
        """New graph has no vertices and no edges."""
        graph = LabeledDigraph()
        assert graph.size() == 0
        assert graph.edge_count == 0
        assert graph.vertices() == ()
        assert len(graph) == 0

    def test_indices_follow_insertion_order(self) -> None:
        """Indices are assigned sequentially from 0."""
        graph = build_graph(["x", "y", "z"], [])
        assert [graph.index_of(name) for name in ("x", "y", "z")] == [0, 1, 2]
        assert graph.label_at(1) == "y"
        assert graph.vertices() == ("x", "y", "z")

    def test_duplicate_vertex_rejected(self) -> None:
        """Second insertion of the same label fails and leaves one vertex."""
        graph = LabeledDigraph()
        graph.add_vertex("A")
        with pytest.raises(DuplicateVertexError) as exc_info:
            graph.add_vertex("A")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.DUPLICATE_VERTEX
        assert exc_info.value.diagnostic.vertex == "A"
        assert graph.size() == 1
        assert graph.vertices() == ("A",)

    @pytest.mark.parametrize("bad", [None, "", 42, b"a"])
    def test_invalid_label_rejected(self, bad: object) -> None:
        """None, empty and non-string labels are invalid arguments."""
        graph = LabeledDigraph()
        with pytest.raises(InvalidArgumentError):
            graph.add_vertex(bad)  # type: ignore[arg-type]
        assert graph.size() == 0

    def test_whitespace_label_accepted(self) -> None:
        """Whitespace is a valid label; trimming is the loader's job."""
        graph = LabeledDigraph()
        graph.add_vertex(" ")
        assert graph.has_vertex(" ")

    def test_capacity_doubles_when_exhausted(self) -> None:
        """Slot array grows past the initial allocation."""
        graph = LabeledDigraph()
        assert graph.capacity == INITIAL_VERTEX_CAPACITY
        for i in range(INITIAL_VERTEX_CAPACITY + 1):
            graph.add_vertex(f"v{i}")
        assert graph.size() == INITIAL_VERTEX_CAPACITY + 1
        assert graph.capacity == INITIAL_VERTEX_CAPACITY * 2
        assert graph.neighbors(f"v{INITIAL_VERTEX_CAPACITY}") == ()


class TestHasVertex:
    """Membership checks."""

    def test_present_and_absent(self, abc_graph: LabeledDigraph) -> None:
        """Valid labels return True or False."""
        assert abc_graph.has_vertex("a")
        assert not abc_graph.has_vertex("zzz")

    @pytest.mark.parametrize("bad", [None, ""])
    def test_invalid_label_raises(self, abc_graph: LabeledDigraph, bad: object) -> None:
        """Checking an invalid name differs from checking an absent one."""
        with pytest.raises(InvalidArgumentError):
            abc_graph.has_vertex(bad)  # type: ignore[arg-type]

    def test_contains_never_raises(self, abc_graph: LabeledDigraph) -> None:
        """The ``in`` operator treats invalid labels as absent."""
        assert "a" in abc_graph
        assert "" not in abc_graph
        assert None not in abc_graph
        assert 3 not in abc_graph


# ============================================================================
# UNIT TESTS - EDGES
# ============================================================================


class TestAddEdge:
    """Edge insertion and validation."""

    def test_edge_recorded(self, abc_graph: LabeledDigraph) -> None:
        """Edge appears in the source's neighbors only."""
        abc_graph.add_edge("a", "b")
        assert abc_graph.neighbors("a") == ("b",)
        assert abc_graph.neighbors("b") == ()
        assert abc_graph.edge_count == 1

    def test_duplicate_edges_counted(self, abc_graph: LabeledDigraph) -> None:
        """Adjacency is a multiset."""
        abc_graph.add_edge("a", "b")
        abc_graph.add_edge("a", "b")
        assert abc_graph.edge_count == 2
        assert abc_graph.neighbors("a") == ("b", "b")

    def test_self_loop_rejected(self) -> None:
        """Edge X -> X fails and the edge count is unchanged."""
        graph = build_graph(["X", "Y"], [("Y", "X")])
        with pytest.raises(SelfLoopError) as exc_info:
            graph.add_edge("X", "X")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.SELF_LOOP
        assert graph.edge_count == 1
        assert graph.neighbors("X") == ()

    def test_self_loop_checked_before_existence(self, abc_graph: LabeledDigraph) -> None:
        """An unknown label used as both endpoints is reported as a self-loop."""
        with pytest.raises(SelfLoopError):
            abc_graph.add_edge("ghost", "ghost")

    @pytest.mark.parametrize(("source", "target"), [("a", "ghost"), ("ghost", "a")])
    def test_unknown_vertex_rejected(
        self, abc_graph: LabeledDigraph, source: str, target: str
    ) -> None:
        """Both endpoints must already exist; nothing is recorded on failure."""
        with pytest.raises(UnknownVertexError) as exc_info:
            abc_graph.add_edge(source, target)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.vertex == "ghost"
        assert abc_graph.edge_count == 0
        assert abc_graph.neighbors("a") == ()

    @pytest.mark.parametrize(("source", "target"), [(None, "a"), ("a", ""), ("", "")])
    def test_invalid_labels_rejected(
        self, abc_graph: LabeledDigraph, source: object, target: object
    ) -> None:
        """Invalid labels are reported before self-loop or existence checks."""
        with pytest.raises(InvalidArgumentError):
            abc_graph.add_edge(source, target)  # type: ignore[arg-type]
        assert abc_graph.edge_count == 0


class TestDeleteEdge:
    """Edge removal."""

    def test_delete_existing(self, abc_graph: LabeledDigraph) -> None:
        """Removing an edge returns True and decrements the count."""
        abc_graph.add_edge("a", "b")
        assert abc_graph.delete_edge("a", "b") is True
        assert abc_graph.edge_count == 0
        assert abc_graph.neighbors("a") == ()

    def test_delete_missing_returns_false(self, abc_graph: LabeledDigraph) -> None:
        """No edge means False and no change."""
        abc_graph.add_edge("a", "b")
        assert abc_graph.delete_edge("a", "c") is False
        assert abc_graph.delete_edge("b", "a") is False
        assert abc_graph.edge_count == 1
        assert abc_graph.neighbors("a") == ("b",)

    def test_duplicates_need_two_deletions(self, abc_graph: LabeledDigraph) -> None:
        """Each call removes exactly one occurrence."""
        abc_graph.add_edge("a", "b")
        abc_graph.add_edge("a", "b")
        assert abc_graph.delete_edge("a", "b") is True
        assert abc_graph.neighbors("a") == ("b",)
        assert abc_graph.delete_edge("a", "b") is True
        assert abc_graph.delete_edge("a", "b") is False
        assert abc_graph.edge_count == 0

    def test_same_validation_as_add_edge(self, abc_graph: LabeledDigraph) -> None:
        """delete_edge raises the add_edge error kinds."""
        with pytest.raises(InvalidArgumentError):
            abc_graph.delete_edge("", "a")
        with pytest.raises(SelfLoopError):
            abc_graph.delete_edge("a", "a")
        with pytest.raises(UnknownVertexError):
            abc_graph.delete_edge("a", "ghost")


# ============================================================================
# UNIT TESTS - QUERIES AND REVERSAL
# ============================================================================


class TestNeighbors:
    """Adjacency queries."""

    def test_unknown_vertex(self, abc_graph: LabeledDigraph) -> None:
        """Asking for an absent vertex's neighbors fails."""
        with pytest.raises(UnknownVertexError):
            abc_graph.neighbors("ghost")

    def test_snapshot_is_detached(self, abc_graph: LabeledDigraph) -> None:
        """A returned tuple does not change when the graph does."""
        abc_graph.add_edge("a", "b")
        before = abc_graph.neighbors("a")
        abc_graph.add_edge("a", "c")
        assert before == ("b",)
        assert abc_graph.neighbors("a") == ("b", "c")

    def test_successor_indices(self, abc_graph: LabeledDigraph) -> None:
        """Index view mirrors the label view."""
        abc_graph.add_edge("a", "c")
        abc_graph.add_edge("a", "b")
        assert abc_graph.successor_indices(0) == [2, 1]

    def test_label_at_out_of_range(self, abc_graph: LabeledDigraph) -> None:
        """Reverse lookup only covers assigned indices."""
        with pytest.raises(IndexError):
            abc_graph.label_at(3)

    def test_repr(self, abc_graph: LabeledDigraph) -> None:
        """repr reports vertex and edge counts."""
        abc_graph.add_edge("a", "b")
        assert repr(abc_graph) == "LabeledDigraph(vertices=3, edges=1)"


class TestReversed:
    """Graph reversal."""

    def test_edges_flipped(self) -> None:
        """Every edge changes direction; vertices keep their indices."""
        graph = build_graph(["a", "b", "c"], [("a", "b"), ("a", "c"), ("b", "c")])
        reverse = graph.reversed()
        assert reverse.vertices() == graph.vertices()
        assert edge_multiset(reverse) == Counter({("b", "a"): 1, ("c", "a"): 1, ("c", "b"): 1})

    def test_multiplicity_preserved(self) -> None:
        """Duplicate edges stay duplicated."""
        graph = build_graph(["a", "b"], [("a", "b"), ("a", "b")])
        reverse = graph.reversed()
        assert reverse.edge_count == 2
        assert reverse.neighbors("b") == ("a", "a")

    def test_original_untouched(self) -> None:
        """Reversal builds an independent graph."""
        graph = build_graph(["a", "b"], [("a", "b")])
        reverse = graph.reversed()
        reverse.add_edge("a", "b")
        assert graph.edge_count == 1
        assert graph.neighbors("b") == ()


# ============================================================================
# PROPERTY TESTS
# ============================================================================


class TestDigraphProperties:
    """Invariants over generated graphs."""

    @given(graph=labeled_digraphs())
    def test_edge_count_is_sum_of_adjacency(self, graph: LabeledDigraph) -> None:
        """PROPERTY: edge_count equals the total adjacency size."""
        event(f"edges={min(graph.edge_count, 5)}")
        assert graph.edge_count == sum(len(graph.neighbors(v)) for v in graph.vertices())
        assert graph.capacity >= graph.size()

    @given(graph=labeled_digraphs(min_vertices=2), data=st.data())
    def test_add_then_delete_restores(self, graph: LabeledDigraph, data: st.DataObject) -> None:
        """PROPERTY: add_edge followed by delete_edge restores count and contents."""
        source, target = data.draw(
            st.lists(st.sampled_from(graph.vertices()), min_size=2, max_size=2, unique=True)
        )
        count_before = graph.edge_count
        edges_before = edge_multiset(graph)

        graph.add_edge(source, target)
        assert graph.delete_edge(source, target) is True

        assert graph.edge_count == count_before
        assert edge_multiset(graph) == edges_before

    @given(graph=labeled_digraphs(min_vertices=2), data=st.data())
    def test_delete_absent_edge_is_noop(self, graph: LabeledDigraph, data: st.DataObject) -> None:
        """PROPERTY: deleting a non-existent edge returns False and changes nothing."""
        source, target = data.draw(
            st.lists(st.sampled_from(graph.vertices()), min_size=2, max_size=2, unique=True)
        )
        while graph.delete_edge(source, target):
            pass
        edges_before = edge_multiset(graph)
        assert graph.delete_edge(source, target) is False
        assert edge_multiset(graph) == edges_before

    @given(graph=labeled_digraphs())
    def test_double_reversal_is_identity(self, graph: LabeledDigraph) -> None:
        """PROPERTY: reversing twice gives the same vertex set and edge multiset."""
        twice = graph.reversed().reversed()
        assert set(twice.vertices()) == set(graph.vertices())
        assert edge_multiset(twice) == edge_multiset(graph)
        assert twice.edge_count == graph.edge_count
