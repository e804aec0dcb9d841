"""
Unit tests for the implication graph builder.
"""

import unittest

from twosat.graph import ImplicationGraph
from twosat.utils.exceptions import InvalidClauseError


class TestImplicationGraph(unittest.TestCase):
    """Test cases for ImplicationGraph."""

    def test_clause_adds_two_edges(self):
        """(u OR v) becomes -u -> v and -v -> u."""
        graph = ImplicationGraph()
        graph.add_clause(1, -2)

        self.assertEqual(len(graph.edges), 2)
        self.assertEqual(
            [(e.source.label, e.destination.label) for e in graph.edges],
            [(-1, -2), (2, 1)],
        )

    def test_every_variable_has_two_vertices(self):
        """Each variable appears as a complementary vertex pair."""
        graph = ImplicationGraph.from_clauses([(1, 2), (-1, 3), (-2, -3)])

        self.assertEqual(len(graph), 6)
        self.assertEqual(graph.num_variables, 3)
        for label in (1, 2, 3):
            self.assertIn(label, graph)
            self.assertIn(-label, graph)
            self.assertEqual(graph.vertex(label).complement_label, -label)

    def test_vertices_are_shared(self):
        """Repeated literals reuse the same vertex."""
        graph = ImplicationGraph.from_clauses([(1, 2), (1, -2)])

        self.assertEqual(len(graph), 4)
        self.assertEqual(len(graph.edges), 4)
        vertex = graph.vertex(1)
        self.assertEqual([e.source.label for e in vertex.incoming], [-2, 2])

    def test_edge_lists(self):
        """Edges are recorded on both endpoints in insertion order."""
        graph = ImplicationGraph.from_clauses([(1, 2), (1, 3)])
        not_one = graph.vertex(-1)

        self.assertEqual([v.label for v in not_one.children()], [2, 3])
        self.assertEqual([v.label for v in graph.vertex(2).parents()], [-1])

    def test_label_bounds(self):
        """Bounds track the largest variable index seen so far."""
        graph = ImplicationGraph()
        graph.add_clause(3, -7)
        self.assertEqual((graph.max_label, graph.min_label), (7, -7))
        graph.add_clause(-2, 5)
        self.assertEqual((graph.max_label, graph.min_label), (7, -7))
        self.assertEqual(graph.labels_descending(), [7, 5, 3, 2, -2, -3, -5, -7])

    def test_non_contiguous_labels(self):
        """Variable indices need not start at 1 or be contiguous."""
        graph = ImplicationGraph.from_clauses([(-16808, 75250)])
        self.assertEqual(graph.max_label, 75250)
        self.assertEqual(len(graph), 4)

    def test_same_literal_clause(self):
        """(x OR x) yields a self implication -x -> x twice."""
        graph = ImplicationGraph.from_clauses([(1, 1)])

        self.assertEqual(len(graph), 2)
        self.assertEqual(
            [(e.source.label, e.destination.label) for e in graph.edges],
            [(-1, 1), (-1, 1)],
        )

    def test_zero_literal_rejected(self):
        """A zero literal is not a vertex."""
        graph = ImplicationGraph()
        with self.assertRaises(InvalidClauseError):
            graph.add_clause(0, 1)
        self.assertEqual(len(graph), 0)

    def test_reachable(self):
        """Reachability follows implications forwards or backwards."""
        graph = ImplicationGraph.from_clauses([(1, 2), (-2, 3)])
        # -1 -> 2 -> 3
        self.assertEqual(graph.reachable(-1), {-1, 2, 3})
        self.assertEqual(graph.reachable(3, reverse=True), {3, 2, -1})

    def test_working_label_starts_as_label(self):
        """Vertices start with their own label as working label."""
        graph = ImplicationGraph.from_clauses([(4, -5)])
        for vertex in graph.vertices:
            self.assertEqual(vertex.working_label, vertex.label)
            self.assertEqual(vertex.finishing_time, -1)

    def test_describe(self):
        """Debug description lists each vertex and the bounds."""
        graph = ImplicationGraph.from_clauses([(1, 2)])
        lines = list(graph.describe())

        self.assertIn("vertex #-1, outgoing arrows: [-1->2]", lines)
        self.assertEqual(lines[-2:], ["Biggest labeled vertex: 2", "Smallest labeled vertex: -2"])


if __name__ == "__main__":
    unittest.main()
