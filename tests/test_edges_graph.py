import pytest
from digraph_lib import Edge, EdgesGraph, rep_checks


class TestEdge:
    def test_edge_fields(self):
        e = Edge("A", "B", 3)
        assert e.source == "A"
        assert e.target == "B"
        assert e.weight == 3

    def test_endpoints_are_read_only(self):
        e = Edge("A", "B", 3)
        with pytest.raises(AttributeError):
            e.source = "C"
        with pytest.raises(AttributeError):
            e.target = "C"

    def test_weight_update_in_place(self):
        e = Edge("A", "B", 3)
        e.weight = 8
        assert e.weight == 8

    def test_zero_weight_is_invariant_violation(self):
        with pytest.raises(AssertionError, match="not positive"):
            Edge("A", "B", 0)

    @pytest.mark.parametrize("weight", [0, -3])
    def test_weight_setter_rejects_non_positive(self, weight):
        e = Edge("A", "B", 1)
        with pytest.raises(ValueError, match=f"Edge weight {weight} must be positive."):
            e.weight = weight
        assert e.weight == 1

    def test_weight_setter_rejects_non_positive_without_rep_checks(self):
        e = Edge("A", "B", 1)
        with rep_checks(False):
            with pytest.raises(ValueError):
                e.weight = -3
        assert e.weight == 1

    def test_connects_and_touches(self):
        e = Edge("A", "B", 1)
        assert e.connects("A", "B")
        assert not e.connects("B", "A")
        assert e.touches("A")
        assert e.touches("B")
        assert not e.touches("C")

    def test_repr(self):
        assert repr(Edge("A", "B", 3)) == "Edge('A' -> 'B', weight=3)"


class TestEdgesGraph:
    def test_update_keeps_single_edge_object(self):
        g = EdgesGraph()
        g.set("A", "B", 1)
        edge = g._edges[0]
        g.set("A", "B", 9)
        assert g._edges == [edge]
        assert edge.weight == 9

    def test_zero_weight_on_missing_edge_stores_nothing(self):
        g = EdgesGraph()
        g.set("A", "B", 0)
        assert g._edges == []

    def test_describe(self):
        g = EdgesGraph()
        g.set("B", "A", 2)
        g.add("C")
        assert g.describe() == (
            "EdgesGraph:\n"
            "  Vertices: ['A', 'B', 'C']\n"
            "  Edges:\n"
            "    Edge('B' -> 'A', weight=2)"
        )

    def test_dangling_edge_is_detected(self):
        g = EdgesGraph()
        g.add("A")
        g._edges.append(Edge("A", "ghost", 1))
        with pytest.raises(AssertionError, match="'ghost' is not a vertex"):
            g._check_rep()

    def test_duplicate_edge_is_detected(self):
        g = EdgesGraph()
        g.set("A", "B", 1)
        g._edges.append(Edge("A", "B", 2))
        with pytest.raises(AssertionError, match="Duplicate edge"):
            g._check_rep()

    def test_checks_skipped_when_disabled(self):
        g = EdgesGraph()
        g.add("A")
        with rep_checks(False):
            g._edges.append(Edge("A", "ghost", 1))
            g._check_rep()
            assert g.add("B") is True

    def test_describe_with_unorderable_labels(self):
        g = EdgesGraph()
        g.add("A")
        g.set(1, "A", 2)
        text = g.describe()
        assert "Vertices: ['A', 1]" in text
        assert "Edge(1 -> 'A', weight=2)" in text


class CountingList(list):
    """List that counts how many items have been iterated over."""

    def __init__(self, items):
        super().__init__(items)
        self.visited = 0

    def __iter__(self):
        for item in super().__iter__():
            self.visited += 1
            yield item


class TestEdgesGraphCost:
    def build(self):
        g = EdgesGraph()
        g.set("A", "B", 1)
        g.set("B", "C", 2)
        g.set("C", "A", 3)
        g.set("D", "E", 4)
        g._edges = CountingList(g._edges)
        return g

    def test_sources_scans_every_edge(self):
        g = self.build()
        assert g.sources("B") == {"A": 1}
        assert g._edges.visited == 4

    def test_targets_scans_every_edge(self):
        g = self.build()
        assert g.targets("A") == {"B": 1}
        assert g._edges.visited == 4

    def test_missing_vertex_still_scans_every_edge(self):
        g = self.build()
        assert g.targets("Z") == {}
        assert g.sources("Z") == {}
        assert g._edges.visited == 8
