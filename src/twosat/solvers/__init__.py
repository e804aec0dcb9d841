"""
2-SAT solver package with unified interface.
"""

from .base import SolverBase, SolverResult, SolverStatus
from .config import SolverConfig, get_config, load_config, reset_config
from .registry import SolverRegistry, register_solver

# Importing the solver modules registers them
from .scc_solver import SCCSolver
from .papadimitriou_solver import PapadimitriouSolver

__all__ = [
    "SolverBase",
    "SolverResult",
    "SolverStatus",
    "SolverRegistry",
    "register_solver",
    "get_config",
    "load_config",
    "reset_config",
    "SolverConfig",
    "SCCSolver",
    "PapadimitriouSolver",
]
