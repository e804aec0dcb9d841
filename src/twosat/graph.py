"""
Implication graph for 2-CNF formulas.

Every literal of the formula becomes a vertex labelled by its signed integer,
and its complement is the vertex with the opposite sign. A clause (u OR v) is
equivalent to the implications (NOT u -> v) and (NOT v -> u), so each clause
contributes exactly two directed edges.
"""

import logging
from collections.abc import Iterable, Iterator

from .utils.cnf import validate_clause

logger = logging.getLogger(__name__)


class Vertex:
    """
    A literal in the implication graph.

    ``label`` is the stable identity of the vertex. ``working_label`` is the
    label used to order the second DFS pass of Kosaraju's algorithm; it equals
    ``label`` outside of that pass.
    """

    __slots__ = ("label", "working_label", "finishing_time", "outgoing", "incoming")

    def __init__(self, label: int):
        self.label = label
        self.working_label = label
        self.finishing_time = -1
        self.outgoing: list[Edge] = []
        self.incoming: list[Edge] = []

    @property
    def complement_label(self) -> int:
        return -self.label

    def children(self) -> list["Vertex"]:
        """Vertices this vertex points to, in edge insertion order."""
        return [edge.destination for edge in self.outgoing]

    def parents(self) -> list["Vertex"]:
        """Vertices pointing to this vertex, in edge insertion order."""
        return [edge.source for edge in self.incoming]

    def __repr__(self) -> str:
        return str(self.label)


class Edge:
    """A directed, unweighted implication source -> destination."""

    __slots__ = ("source", "destination")

    def __init__(self, source: Vertex, destination: Vertex):
        self.source = source
        self.destination = destination

    def __repr__(self) -> str:
        return f"{self.source.label}->{self.destination.label}"


class ImplicationGraph:
    """
    Directed implication graph built clause by clause.

    The graph keeps a label -> vertex lookup table and the running bounds of
    the labels seen so far: ``max_label`` is the largest variable index and
    ``min_label`` its negation.
    """

    def __init__(self):
        self._vertices: dict[int, Vertex] = {}
        self.edges: list[Edge] = []
        self.max_label = 0
        self.min_label = 0
        self.num_clauses = 0

    @classmethod
    def from_clauses(cls, clauses: Iterable) -> "ImplicationGraph":
        """
        Build a graph from a sequence of clauses.

        Args:
            clauses: Iterable of (u, v) literal pairs

        Returns:
            The populated graph
        """
        graph = cls()
        for clause in clauses:
            graph.add_clause(*clause)
        return graph

    def get_or_create_vertex(self, label: int) -> Vertex:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices[label] = vertex
        return vertex

    def add_edge(self, source: Vertex, destination: Vertex) -> Edge:
        edge = Edge(source, destination)
        self.edges.append(edge)
        source.outgoing.append(edge)
        destination.incoming.append(edge)
        return edge

    def add_clause(self, u: int, v: int) -> None:
        """
        Add the clause (u OR v) as the edges (-u -> v) and (-v -> u).

        Args:
            u: First literal
            v: Second literal

        Raises:
            InvalidClauseError: If either literal is zero or not an integer
        """
        u, v = validate_clause((u, v))

        self.max_label = max(self.max_label, abs(u), abs(v))
        self.min_label = -self.max_label

        vertex_u = self.get_or_create_vertex(u)
        vertex_v = self.get_or_create_vertex(v)
        not_u = self.get_or_create_vertex(-u)
        not_v = self.get_or_create_vertex(-v)

        self.add_edge(not_u, vertex_v)
        self.add_edge(not_v, vertex_u)
        self.num_clauses += 1

    def vertex(self, label: int) -> Vertex | None:
        """Return the vertex with the given label, or None."""
        return self._vertices.get(label)

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._vertices.values())

    @property
    def num_variables(self) -> int:
        return len(self._vertices) // 2

    def labels_descending(self) -> list[int]:
        """Vertex labels from max_label down to min_label."""
        return sorted(self._vertices, reverse=True)

    def reachable(self, label: int, reverse: bool = False) -> set[int]:
        """
        Collect the labels of every vertex reachable from a vertex.

        Args:
            label: Label of the start vertex
            reverse: Follow incoming edges instead of outgoing ones

        Returns:
            Set of reachable labels, including the start label
        """
        start = self._vertices[label]
        seen = {start.label}
        stack = [start]
        while stack:
            vertex = stack.pop()
            neighbors = vertex.parents() if reverse else vertex.children()
            for neighbor in neighbors:
                if neighbor.label not in seen:
                    seen.add(neighbor.label)
                    stack.append(neighbor)
        return seen

    def describe(self) -> Iterator[str]:
        """Yield one human readable line per vertex, then the label bounds."""
        for vertex in self._vertices.values():
            yield f"vertex #{vertex.label}, outgoing arrows: {vertex.outgoing}"
        yield f"Biggest labeled vertex: {self.max_label}"
        yield f"Smallest labeled vertex: {self.min_label}"

    def __contains__(self, label: int) -> bool:
        return label in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)
