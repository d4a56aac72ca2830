"""Registry of LP/MIP backends, keyed by the names used in config and on the CLI."""

from typing import Any, ClassVar

from .base import BaseSolver
from .pulp_solver import PulpCBCSolver
from .scip_solver import SCIPSolver


class SolverFactory:
    """Looks up a backend by name and builds it from solver options."""

    _SOLVER_REGISTRY: ClassVar[dict[str, type[BaseSolver]]] = {
        "cbc": PulpCBCSolver,
        "scip": SCIPSolver,
    }

    @classmethod
    def get_available_solvers(cls) -> list[str]:
        """Backend names accepted by ``create_solver``, in registry order."""
        return list(cls._SOLVER_REGISTRY.keys())

    @classmethod
    def create_solver(cls, solver_name: str, config: dict[str, Any]) -> BaseSolver:
        """Build the backend registered under ``solver_name``.

        Args:
            solver_name: Backend name, case insensitive ("cbc", "scip")
            config: Solver options, as produced by ``Config.solver_options()``

        Returns:
            A ready backend

        Raises:
            ValueError: If no backend is registered under the name
            SolverError: If the backend's library cannot be loaded
        """
        solver_name = solver_name.lower()

        if solver_name not in cls._SOLVER_REGISTRY:
            available = ", ".join(cls.get_available_solvers())
            raise ValueError(
                f"Unsupported solver: {solver_name}. Available solvers: {available}"
            )

        return cls._SOLVER_REGISTRY[solver_name](config)

    @classmethod
    def is_solver_available(cls, solver_name: str) -> bool:
        """Whether a backend is registered under the name.

        Registration says nothing about whether its library is installed;
        ``get_solver_info()`` on an instance reports that.
        """
        return solver_name.lower() in cls._SOLVER_REGISTRY
