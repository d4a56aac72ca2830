"""SCIP solver implementation using pyscipopt."""

from typing import Any

try:
    import pyscipopt
except ImportError:
    pyscipopt = None

from .base import BaseSolver, SolverError
from ..models.lp_model import Direction, LinearModel, Relation
from ..models.solution import Solution, SolutionStatus
from ..utils.logger import get_logger

logger = get_logger(__name__)


class SCIPSolver(BaseSolver):
    """SCIP solver implementation using pyscipopt."""

    name = "scip"

    def __init__(self, config: dict[str, Any]):
        """Initialize SCIP solver.

        Args:
            config: Solver configuration
        """
        super().__init__(config)

        if pyscipopt is None:
            raise SolverError("pyscipopt is not available")

    def solve(self, model: LinearModel) -> Solution:
        """Declare the model in SCIP, optimize and read the result back."""
        empty = self._violated_empty_rows(model)
        if empty:
            return self._build_solution(
                model, SolutionStatus.INFEASIBLE, None, 0.0,
                message=f"Empty rows cannot hold: {', '.join(empty)}",
            )

        try:
            scip_model, variables = self._declare(model)
            logger.info(
                f"Problem loaded: {scip_model.getNVars()} variables, "
                f"{scip_model.getNConss()} constraints"
            )
            scip_model.optimize()

            status = self._extract_solution_status(scip_model.getStatus())
            values = None
            if self._has_values(status):
                values = [scip_model.getVal(v) for v in variables]
            solve_time = scip_model.getSolvingTime()

        except Exception as e:
            logger.error(f"SCIP solver failed: {e}")
            raise SolverError(f"SCIP solving failed: {e}") from e

        logger.info(f"Optimization completed with status: {status.value}")
        return self._build_solution(model, status, values, solve_time, message=status.value)

    def _declare(self, model: LinearModel):
        scip_model = pyscipopt.Model(model.name)
        if not self.msg:
            scip_model.hideOutput()
        self._apply_parameters(scip_model)

        variables = [
            scip_model.addVar(
                name=f"x{i}",
                vtype="I" if activity.integer else "C",
                lb=activity.lower,
                ub=activity.upper,
            )
            for i, activity in enumerate(model.activities)
        ]

        scip_model.setObjective(
            pyscipopt.quicksum(c * x for c, x in zip(model.objective, variables)),
            sense="maximize" if model.direction is Direction.MAXIMIZE else "minimize",
        )

        for j, constraint in enumerate(model.constraints):
            if not any(constraint.coefficients):
                continue
            lhs = pyscipopt.quicksum(
                a * x for a, x in zip(constraint.coefficients, variables) if a != 0
            )
            if constraint.relation is Relation.LE:
                scip_model.addCons(lhs <= constraint.bound, name=f"c{j}")
            elif constraint.relation is Relation.GE:
                scip_model.addCons(lhs >= constraint.bound, name=f"c{j}")
            else:
                scip_model.addCons(lhs == constraint.bound, name=f"c{j}")

        return scip_model, variables

    def _apply_parameters(self, scip_model) -> None:
        """Apply solver parameters to SCIP model."""
        for param_name, param_value in self.parameters.items():
            try:
                scip_model.setParam(param_name, param_value)
                logger.debug(f"Set SCIP parameter {param_name} = {param_value}")
            except Exception as e:
                logger.warning(f"Failed to set SCIP parameter {param_name}: {e}")

        # Set timeout
        if self.timeout > 0:
            scip_model.setParam("limits/time", self.timeout)

    def _extract_solution_status(self, scip_status) -> SolutionStatus:
        """Convert SCIP status to standardized status.

        Args:
            scip_status: SCIP status string

        Returns:
            Standardized status
        """
        status_map = {
            "optimal": SolutionStatus.OPTIMAL,
            "infeasible": SolutionStatus.INFEASIBLE,
            "unbounded": SolutionStatus.UNBOUNDED,
            "inforunbd": SolutionStatus.UNDEFINED,
            "timelimit": SolutionStatus.NOT_SOLVED,
            "userinterrupt": SolutionStatus.NOT_SOLVED,
        }

        return status_map.get(str(scip_status).lower(), SolutionStatus.UNDEFINED)

    def get_solver_info(self) -> dict[str, Any]:
        """Get SCIP solver information.

        Returns:
            Solver information dictionary
        """
        try:
            # Create temporary model to get version info
            temp_model = pyscipopt.Model("temp")
            version = temp_model.version()

            return {
                "name": "SCIP",
                "available": True,
                "version": version,
                "description": "Solving Constraint Integer Programs",
                "capabilities": ["LP", "MIP"],
            }
        except Exception as e:
            return {
                "name": "SCIP",
                "available": False,
                "error": str(e)
            }
