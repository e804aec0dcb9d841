"""
Kosaraju's two-pass strongly connected component algorithm on an implication graph.

Aspvall, Plass & Tarjan (1979): a 2-CNF formula is satisfiable if and only if
no strongly connected component of its implication graph contains both a
literal and its complement.

The first DFS pass runs on the transpose graph and numbers vertices by
post-order finishing time. The second pass runs on the original graph in
decreasing finishing time; every DFS tree it grows is one component.
"""

import logging

from .graph import ImplicationGraph, Vertex

logger = logging.getLogger(__name__)


class TraversalContext:
    """
    State shared by every DFS call of one pass: the explored set and the
    finishing time counter.
    """

    def __init__(self):
        self.explored: set[int] = set()
        self.finishing_time = 0

    def is_explored(self, vertex: Vertex) -> bool:
        return vertex.label in self.explored

    def mark_explored(self, vertex: Vertex) -> None:
        self.explored.add(vertex.label)

    def next_finishing_time(self) -> int:
        self.finishing_time += 1
        return self.finishing_time


class StronglyConnectedComponent:
    """An unordered group of mutually reachable vertices."""

    def __init__(self):
        self._members: dict[int, Vertex] = {}

    def add(self, vertex: Vertex) -> None:
        self._members[vertex.label] = vertex

    def contains(self, label: int) -> bool:
        return label in self._members

    @property
    def labels(self) -> set[int]:
        return set(self._members)

    @property
    def vertices(self) -> list[Vertex]:
        return list(self._members.values())

    def find_conflict(self) -> tuple[int, int] | None:
        """
        Return a (literal, complement) pair that are both members, or None.
        """
        for label in self._members:
            if -label in self._members:
                return label, -label
        return None

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self):
        return iter(self._members.values())

    def __repr__(self) -> str:
        return str(sorted(self._members))


def depth_first_search(
    start: Vertex,
    context: TraversalContext,
    reverse: bool,
    component: StronglyConnectedComponent | None = None,
) -> None:
    """
    Explore every unexplored vertex reachable from ``start``.

    A vertex gets its finishing time only after all of its neighbors have been
    fully processed. The traversal uses an explicit stack, so its depth is not
    bounded by the interpreter's recursion limit.

    Args:
        start: Vertex to start from; must be unexplored
        context: Traversal state of the current pass
        reverse: Follow incoming edges (transpose graph) instead of outgoing ones
        component: Optional component collecting every vertex touched
    """
    context.mark_explored(start)
    if component is not None:
        component.add(start)

    neighbors = start.parents() if reverse else start.children()
    stack = [(start, iter(neighbors))]

    while stack:
        vertex, pending = stack[-1]
        for neighbor in pending:
            if not context.is_explored(neighbor):
                context.mark_explored(neighbor)
                if component is not None:
                    component.add(neighbor)
                next_neighbors = neighbor.parents() if reverse else neighbor.children()
                stack.append((neighbor, iter(next_neighbors)))
                break
        else:
            stack.pop()
            vertex.finishing_time = context.next_finishing_time()


class Kosaraju:
    """
    Decide satisfiability of the formula behind an implication graph.

    Args:
        graph: The implication graph to analyse
        debug: Emit a DEBUG trace of vertices, finishing times and components
    """

    def __init__(self, graph: ImplicationGraph, debug: bool = False):
        self.graph = graph
        self.debug = debug
        self.components: list[StronglyConnectedComponent] = []
        self.conflict: tuple[int, int] | None = None
        self._lookup: dict[int, Vertex] = {}

    def _rebuild_lookup(self) -> None:
        self._lookup = {vertex.working_label: vertex for vertex in self.graph.vertices}

    def first_pass(self) -> int:
        """
        Run DFS on the transpose graph from the largest label down to the smallest.

        Returns:
            The number of vertices assigned a finishing time
        """
        context = TraversalContext()
        for label in self.graph.labels_descending():
            vertex = self.graph.vertex(label)
            if not context.is_explored(vertex):
                depth_first_search(vertex, context, reverse=True)

        if self.debug:
            for vertex in self.graph.vertices:
                logger.debug(f"f({vertex.label}): {vertex.finishing_time}")

        return context.finishing_time

    def relabel(self) -> None:
        """Replace every working label with the vertex's finishing time."""
        for vertex in self.graph.vertices:
            vertex.working_label = vertex.finishing_time
        self._rebuild_lookup()

        if self.debug:
            for vertex in self.graph.vertices:
                logger.debug(
                    f"{vertex.label}'s label has been changed to {vertex.working_label}"
                )

    def second_pass(self, upper_bound: int) -> list[StronglyConnectedComponent]:
        """
        Run DFS on the original graph in decreasing finishing time.

        Args:
            upper_bound: Largest working label to visit

        Returns:
            One component per DFS tree
        """
        context = TraversalContext()
        components = []
        for working_label in range(upper_bound, 0, -1):
            vertex = self._lookup.get(working_label)
            if vertex is None or context.is_explored(vertex):
                continue
            component = StronglyConnectedComponent()
            depth_first_search(vertex, context, reverse=False, component=component)
            components.append(component)
        return components

    def restore_labels(self) -> None:
        """Set every working label back to the vertex's own label."""
        for vertex in self.graph.vertices:
            vertex.working_label = vertex.label
        self._rebuild_lookup()

    def find_components(self) -> list[StronglyConnectedComponent]:
        """
        Partition the graph into strongly connected components.

        Returns:
            Components in the order pass 2 produced them
        """
        upper_bound = self.first_pass()
        self.relabel()
        try:
            self.components = self.second_pass(upper_bound)
        finally:
            self.restore_labels()

        logger.debug(f"Found {len(self.components)} strongly connected components")
        return self.components

    def solve(self) -> bool:
        """
        Decide whether the formula is satisfiable.

        Returns:
            True if no component holds a literal together with its complement
        """
        self.conflict = None
        if len(self.graph) == 0:
            self.components = []
            return True

        for component in self.find_components():
            if self.debug:
                logger.debug(f"SCC: {component}")
            conflict = component.find_conflict()
            if conflict is not None:
                self.conflict = conflict
                logger.debug(
                    f"Unsatisfiable SCC found: {component} "
                    f"({conflict[0]} and {conflict[1]} conflict)"
                )
                return False

        return True
