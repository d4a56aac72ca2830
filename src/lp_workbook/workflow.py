"""Solve and report helpers tying the pipeline together.

Each call is one independent solve-report cycle over an immutable model;
nothing is cached between calls.
"""

from typing import Optional, Union

from .models.lp_model import LinearModel
from .models.solution import Solution
from .reporting import SolutionReport, SolutionReporter
from .solvers import BaseSolver, SolverFactory
from .utils.config_manager import ConfigManager
from .utils.logger import get_logger

logger = get_logger(__name__)

SolverLike = Union[BaseSolver, str, None]


def create_solver(solver: SolverLike = None,
                  config_manager: Optional[ConfigManager] = None) -> BaseSolver:
    """Resolve a solver instance.

    Args:
        solver: Solver instance, registry name, or None for the configured default
        config_manager: Configuration source; defaults to the packaged config
    """
    if isinstance(solver, BaseSolver):
        return solver

    if config_manager is None:
        config_manager = ConfigManager()
    config = config_manager.get_config()

    solver_name = solver or config.solvers.default
    return SolverFactory.create_solver(solver_name, config.solver_options())


def solve(model: LinearModel, solver: SolverLike = None,
          config_manager: Optional[ConfigManager] = None) -> Solution:
    """Solve a model once.

    Callers must check ``solution.status`` before reading values.

    Raises:
        SolverError: If the backend fails internally
    """
    backend = create_solver(solver, config_manager)
    return backend.solve(model)


def run(model: LinearModel, solver: SolverLike = None,
        config_manager: Optional[ConfigManager] = None) -> tuple[Solution, SolutionReport]:
    """Solve a model and report the result."""
    if config_manager is None:
        config_manager = ConfigManager()

    solution = solve(model, solver, config_manager)
    reporter = SolutionReporter(config_manager.get_config().reporting.tolerance)
    return solution, reporter.report(model, solution)
