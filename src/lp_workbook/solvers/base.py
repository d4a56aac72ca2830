"""Base solver abstraction layer."""

from abc import ABC, abstractmethod
from typing import Any

from ..models.lp_model import LinearModel
from ..models.solution import Solution, SolutionStatus


class SolverError(Exception):
    """Base class for solver-related errors."""
    pass


class BaseSolver(ABC):
    """Abstract base class for LP/MIP solver backends.

    A backend receives an immutable :class:`LinearModel`, declares it in the
    backend's own modeling API, solves it once and returns a
    :class:`Solution`. Infeasible and unbounded outcomes are statuses, not
    exceptions; only internal backend failures raise :class:`SolverError`.
    """

    name = "base"

    def __init__(self, config: dict[str, Any]):
        """Initialize the solver.

        Args:
            config: Solver configuration dictionary
        """
        self.config = config
        self.timeout = config.get("timeout", 60)
        self.msg = bool(config.get("msg", False))
        self.parameters = dict(config.get("parameters", {}))

    @abstractmethod
    def solve(self, model: LinearModel) -> Solution:
        """Solve a linear model.

        Args:
            model: Model to solve

        Returns:
            Solution with a standardized status

        Raises:
            SolverError: If the backend fails internally
        """
        pass

    @abstractmethod
    def get_solver_info(self) -> dict[str, Any]:
        """Get solver information.

        Returns:
            Dictionary with solver name, version, capabilities
        """
        pass

    def set_parameters(self, params: dict[str, Any]) -> None:
        """Set backend specific parameters.

        Args:
            params: Parameter dictionary
        """
        self.parameters.update(params)

    def _build_solution(
        self,
        model: LinearModel,
        status: SolutionStatus,
        values: list[float] | None,
        solve_time: float | None,
        message: str | None = None,
    ) -> Solution:
        """Assemble a Solution, dropping values for non-feasible outcomes."""
        objective_value = None
        if values is not None and self._has_values(status):
            values = [float(v) for v in values]
            objective_value = float(sum(c * v for c, v in zip(model.objective, values)))
        else:
            values = []

        return Solution(
            status=status,
            objective_value=objective_value,
            activity_names=tuple(model.activity_names),
            values=tuple(values),
            solver_name=self.name,
            solve_time=solve_time,
            message=message,
        )

    def _violated_empty_rows(self, model: LinearModel) -> list[str]:
        """Names of all-zero rows whose bound cannot hold (e.g. ``0 >= 5``)."""
        return [
            c.name for c in model.constraints
            if not any(c.coefficients) and not c.relation.holds(0.0, c.bound)
        ]

    def _has_values(self, status: SolutionStatus) -> bool:
        """Check if a status carries a usable assignment."""
        return status is SolutionStatus.OPTIMAL
