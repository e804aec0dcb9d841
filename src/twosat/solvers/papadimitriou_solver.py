"""
Papadimitriou's randomized 2-SAT solver using the unified solver interface.
"""

import logging
import random
import time
from typing import Any

from ..pruning import build_clauses, prune_clauses
from ..random_walk import RandomWalkSearch
from ..utils.cnf import validate_clause
from .base import SolverBase, SolverResult, SolverStatus
from .config import get_config
from .registry import register_solver

# Set up logging
logger = logging.getLogger(__name__)


@register_solver("papadimitriou")
class PapadimitriouSolver(SolverBase):
    """
    Randomized local search for 2-SAT, preceded by pure-literal pruning.

    A SATISFIABLE verdict is always correct. An UNSATISFIABLE verdict is
    probabilistic: a satisfiable formula is missed with small probability.
    """

    def __init__(self, seed: int | None = None, debug: bool | None = None, **kwargs):
        """
        Initialize the solver.

        Args:
            seed: Seed of the random source (None for a nondeterministic run)
            debug: Log clause state and search progress at DEBUG level
            **kwargs: Additional configuration parameters
        """
        config = get_config()
        self.seed = config.get("solver.seed") if seed is None else seed
        self.debug = config.get("solver.debug", False) if debug is None else debug

        for key, value in kwargs.items():
            setattr(self, key, value)

        self.clauses: list[tuple[int, int]] = []
        self.stats: dict[str, Any] = {
            "solver_name": "papadimitriou",
            "total_clauses": 0,
        }

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
        Prune pure literals, then run the random walk on what is left.

        Returns:
            SolverResult; an UNSATISFIABLE status is marked probabilistic
        """
        start_time = time.time()
        rng = random.Random(self.seed)

        clauses, variables = build_clauses(self.clauses, rng)
        logger.info(
            f"No. of clauses BEFORE pruning: {len(clauses)}, "
            f"no. of variables BEFORE pruning: {len(variables)}"
        )
        if self.debug:
            logger.debug(f"All clauses BEFORE pruning: {clauses}")

        pruned = prune_clauses(clauses)
        logger.info(
            f"No. of clauses AFTER pruning: {len(pruned.clauses)}, "
            f"no. of variables AFTER pruning: {len(pruned.variables)}"
        )
        if self.debug:
            logger.debug(f"All clauses AFTER pruning: {pruned.clauses}")

        search = RandomWalkSearch(
            pruned.clauses, pruned.variables, rng, debug=self.debug
        )
        satisfiable = search.search()
        runtime = time.time() - start_time

        self.stats.update(
            {
                "clauses_before_pruning": len(clauses),
                "variables_before_pruning": len(variables),
                "clauses_after_pruning": len(pruned.clauses),
                "variables_after_pruning": len(pruned.variables),
                "pruning_sweeps": pruned.sweeps,
                "rounds": search.rounds,
                "flips": search.flips,
                "seed": self.seed,
                "runtime": runtime,
            }
        )

        status = SolverStatus.SATISFIABLE if satisfiable else SolverStatus.UNSATISFIABLE
        logger.info(
            f"Papadimitriou solver: {status.value.upper()} after {search.rounds} "
            f"rounds and {search.flips} flips ({runtime:.4f}s)"
        )

        return SolverResult(
            status=status,
            runtime=runtime,
            total_clauses=len(self.clauses),
            statistics=dict(self.stats),
            probabilistic=not satisfiable,
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
                logger.debug(f"Set {key}={value} for Papadimitriou solver")
            else:
                logger.warning(f"Unknown configuration parameter: {key}")
