"""
Registry for 2-SAT solvers.
Implements a simple registry pattern for registering solvers by name
and creating them later.
"""

import logging
from collections.abc import Callable

from .base import SolverBase

# Set up logging
logger = logging.getLogger(__name__)


class SolverRegistry:
    """
    Registry for 2-SAT solvers.
    Enables registering solvers by name and retrieving them later.
    """

    _registry: dict[str, type[SolverBase]] = {}

    @classmethod
    def register(cls, name: str, solver_cls: type[SolverBase]) -> None:
        """
        Register a solver with the given name.

        Args:
            name: Name of the solver
            solver_cls: Solver class (must inherit from SolverBase)
        """
        if not issubclass(solver_cls, SolverBase):
            raise TypeError(
                f"Solver class {solver_cls.__name__} must inherit from SolverBase"
            )

        if name in cls._registry:
            logger.warning(f"Overriding existing solver registration for '{name}'")

        cls._registry[name] = solver_cls
        solver_cls.solver_name = name

    @classmethod
    def register_as(cls, name: str) -> Callable[[type[SolverBase]], type[SolverBase]]:
        """
        Decorator to register a solver with the given name.

        Args:
            name: Name of the solver

        Returns:
            Decorator function that registers the solver
        """

        def decorator(solver_cls: type[SolverBase]) -> type[SolverBase]:
            cls.register(name, solver_cls)
            return solver_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[SolverBase]:
        """
        Get a solver by name.

        Args:
            name: Name of the solver

        Returns:
            Solver class

        Raises:
            ValueError: If no solver is registered under the name
        """
        if name not in cls._registry:
            raise ValueError(f"No solver registered with name '{name}'")

        return cls._registry[name]

    @classmethod
    def list_solvers(cls) -> list[str]:
        """
        List all registered solvers.

        Returns:
            List of solver names
        """
        return list(cls._registry.keys())

    @classmethod
    def resolve(cls, name: str) -> list[str]:
        """
        Expand a solver selection into registered solver names.

        Args:
            name: Name of a solver, or "all" for every registered solver

        Returns:
            List of solver names, in registration order for "all"

        Raises:
            ValueError: If no solver is registered under the name
        """
        if name == "all":
            return cls.list_solvers()
        cls.get(name)
        return [name]

    @classmethod
    def create(cls, name: str, **kwargs) -> SolverBase:
        """
        Create a new instance of the specified solver.

        Args:
            name: Name of the solver
            **kwargs: Arguments to pass to the solver constructor

        Returns:
            Instance of the solver
        """
        solver_cls = cls.get(name)
        return solver_cls(**kwargs)


# Register common decorator for more concise solver registration
register_solver = SolverRegistry.register_as
