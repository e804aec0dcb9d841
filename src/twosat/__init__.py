"""
twosat: 2-SAT satisfiability by strongly connected components and by
Papadimitriou's random walk.
"""

from twosat import solvers, utils
from twosat.graph import ImplicationGraph
from twosat.kosaraju import Kosaraju
from twosat.pruning import prune_clauses
from twosat.random_walk import RandomWalkSearch
from twosat.solvers import (
    PapadimitriouSolver,
    SCCSolver,
    SolverRegistry,
    SolverResult,
    SolverStatus,
)

__version__ = "0.1.0"

__all__ = [
    "ImplicationGraph",
    "Kosaraju",
    "prune_clauses",
    "RandomWalkSearch",
    "SCCSolver",
    "PapadimitriouSolver",
    "SolverRegistry",
    "SolverResult",
    "SolverStatus",
    "solvers",
    "utils",
]
