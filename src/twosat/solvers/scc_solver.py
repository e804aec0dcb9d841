"""
2-SAT solver based on strongly connected components of the implication graph.
"""

import logging
import time
from typing import Any

from ..graph import ImplicationGraph
from ..kosaraju import Kosaraju
from ..utils.cnf import validate_clause
from .base import SolverBase, SolverResult, SolverStatus
from .config import get_config
from .registry import register_solver

# Set up logging
logger = logging.getLogger(__name__)


@register_solver("scc")
class SCCSolver(SolverBase):
    """
    Deterministic linear-time 2-SAT solver (Aspvall, Plass & Tarjan) using
    Kosaraju's algorithm. Decides satisfiability; it does not build a model.
    """

    def __init__(self, debug: bool | None = None, **kwargs):
        """
        Initialize the SCC solver.

        Args:
            debug: Log vertex, edge and component state at DEBUG level
            **kwargs: Additional configuration parameters
        """
        config = get_config()
        self.debug = config.get("solver.debug", False) if debug is None else debug

        for key, value in kwargs.items():
            setattr(self, key, value)

        self.clauses: list[tuple[int, int]] = []
        self.stats: dict[str, Any] = {"solver_name": "scc", "total_clauses": 0}

    def add_clause(self, clause) -> None:
        """
        Add a single clause to the solver.

        Args:
            clause: A (u, v) pair of non-zero literals
        """
        self.clauses.append(validate_clause(clause))
        self.stats["total_clauses"] = len(self.clauses)

    def add_clauses(self, clauses) -> None:
        """
        Add multiple clauses to the solver.

        Args:
            clauses: An iterable of (u, v) pairs
        """
        for clause in clauses:
            self.add_clause(clause)

    def solve(self) -> SolverResult:
        """
        Build the implication graph and check its components for conflicts.

        Returns:
            SolverResult with a SATISFIABLE or UNSATISFIABLE status
        """
        start_time = time.time()

        graph = ImplicationGraph.from_clauses(self.clauses)
        if self.debug:
            logger.debug("All vertices in this graph and their directed arrows:")
            for line in graph.describe():
                logger.debug(line)

        kosaraju = Kosaraju(graph, debug=self.debug)
        satisfiable = kosaraju.solve()
        runtime = time.time() - start_time

        self.stats.update(
            {
                "num_vertices": len(graph),
                "num_edges": len(graph.edges),
                "num_variables": graph.num_variables,
                "num_components": len(kosaraju.components),
                "largest_component": max(
                    (len(component) for component in kosaraju.components), default=0
                ),
                "conflict": list(kosaraju.conflict) if kosaraju.conflict else None,
                "runtime": runtime,
            }
        )

        status = SolverStatus.SATISFIABLE if satisfiable else SolverStatus.UNSATISFIABLE
        logger.info(f"SCC solver: {status.value.upper()} in {runtime:.4f}s")

        return SolverResult(
            status=status,
            runtime=runtime,
            total_clauses=len(self.clauses),
            statistics=dict(self.stats),
        )

    def get_statistics(self) -> dict[str, Any]:
        """
        Get solver statistics.

        Returns:
            Dictionary of statistics
        """
        return self.stats

    def configure(self, config: dict[str, Any]) -> None:
        """
        Configure the solver with the given parameters.

        Args:
            config: Dictionary of configuration parameters
        """
        for key, value in config.items():
            if hasattr(self, key):
                setattr(self, key, value)
                logger.debug(f"Set {key}={value} for SCC solver")
            else:
                logger.warning(f"Unknown configuration parameter: {key}")
