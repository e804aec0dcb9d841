"""
Base interface for all 2-SAT solvers in the package.
Defines the standardized solver interface that all solver implementations must follow.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class SolverStatus(Enum):
    """Enum representing the status of a solver run."""

    SATISFIABLE = "satisfiable"
    UNSATISFIABLE = "unsatisfiable"
    ERROR = "error"


class SolverResult:
    """
    Standardized result object returned by all solvers.

    ``probabilistic`` marks an UNSATISFIABLE verdict that was not proved, as
    returned by a randomized solver that ran out of attempts. An ERROR result
    stands for an input that never reached a solver and carries its
    ``error_message``.
    """

    def __init__(
        self,
        status: SolverStatus,
        runtime: float = 0.0,
        total_clauses: int = 0,
        statistics: dict[str, Any] | None = None,
        error_message: str | None = None,
        probabilistic: bool = False,
    ):
        self.status = status
        self.runtime = runtime
        self.total_clauses = total_clauses
        self.statistics = statistics or {}
        self.error_message = error_message
        self.probabilistic = probabilistic

    @property
    def is_sat(self) -> bool:
        """Returns True if the problem is satisfiable."""
        return self.status == SolverStatus.SATISFIABLE

    @property
    def is_unsat(self) -> bool:
        """Returns True if the problem is (probably) unsatisfiable."""
        return self.status == SolverStatus.UNSATISFIABLE

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a JSON serializable dictionary."""
        return {
            "status": self.status.value,
            "runtime": self.runtime,
            "total_clauses": self.total_clauses,
            "probabilistic": self.probabilistic,
            "statistics": dict(self.statistics),
            "error_message": self.error_message,
        }

    def __str__(self) -> str:
        """String representation of the result."""
        status_str = str(self.status.value).upper()
        if self.status == SolverStatus.SATISFIABLE:
            return f"{status_str} ({self.total_clauses} clauses, {self.runtime:.4f}s)"
        elif self.status == SolverStatus.UNSATISFIABLE:
            if self.probabilistic:
                return f"{status_str} (probabilistic, {self.runtime:.4f}s)"
            return f"{status_str} (proved in {self.runtime:.4f}s)"
        return f"ERROR ({self.error_message})"


class SolverBase(ABC):
    """
    Abstract base class for 2-SAT solver implementations.
    All solver implementations must inherit from this class.
    """

    @abstractmethod
    def add_clause(self, clause) -> None:
        """
        Add a single clause to the solver.

        Args:
            clause: A pair of integers (u, v) representing the clause u OR v.
                   Positive integers represent positive literals, negative integers
                   represent negative literals.
        """

    @abstractmethod
    def add_clauses(self, clauses) -> None:
        """
        Add multiple clauses to the solver.

        Args:
            clauses: An iterable of (u, v) literal pairs.
        """

    @abstractmethod
    def solve(self) -> SolverResult:
        """
        Decide satisfiability of the clauses added so far.

        Returns:
            SolverResult containing the verdict and statistics
        """

    @abstractmethod
    def get_statistics(self) -> dict[str, Any]:
        """
        Get solver statistics.

        Returns:
            Dictionary of statistics
        """

    @abstractmethod
    def configure(self, config: dict[str, Any]) -> None:
        """
        Configure the solver with the given parameters.

        Args:
            config: Dictionary of configuration parameters
        """
