"""CBC solver implementation using PuLP."""

import time
from importlib.metadata import version
from typing import Any

import pulp

from .base import BaseSolver, SolverError
from ..models.lp_model import Direction, LinearModel, Relation
from ..models.solution import Solution, SolutionStatus
from ..utils.logger import get_logger

logger = get_logger(__name__)


class PulpCBCSolver(BaseSolver):
    """Solves models with the CBC binary bundled with PuLP."""

    name = "cbc"

    _STATUS_MAP = {
        pulp.LpStatusOptimal: SolutionStatus.OPTIMAL,
        pulp.LpStatusInfeasible: SolutionStatus.INFEASIBLE,
        pulp.LpStatusUnbounded: SolutionStatus.UNBOUNDED,
        pulp.LpStatusNotSolved: SolutionStatus.NOT_SOLVED,
        pulp.LpStatusUndefined: SolutionStatus.UNDEFINED,
    }

    def solve(self, model: LinearModel) -> Solution:
        """Declare the model in PuLP, run CBC and read the result back."""
        empty = self._violated_empty_rows(model)
        if empty:
            logger.info(f"Rows with no coefficients cannot hold: {empty}")
            return self._build_solution(
                model, SolutionStatus.INFEASIBLE, None, 0.0,
                message=f"Empty rows cannot hold: {', '.join(empty)}",
            )

        problem, variables = self._declare(model)
        command = self._command()

        logger.info(
            f"Solving {model.name!r} with CBC: "
            f"{model.n_activities} variables, {model.n_constraints} constraints"
        )

        start = time.perf_counter()
        try:
            problem.solve(command)
        except pulp.PulpSolverError as e:
            logger.error(f"CBC solver failed: {e}")
            raise SolverError(f"CBC solving failed: {e}") from e
        solve_time = time.perf_counter() - start

        status = self._extract_solution_status(problem.status, problem.sol_status)
        values = None
        if self._has_values(status):
            values = [v.varValue if v.varValue is not None else 0.0 for v in variables]

        message = pulp.LpStatus.get(problem.status)
        if problem.sol_status == pulp.LpSolutionIntegerFeasible:
            message = "Stopped on time limit with an unproven incumbent"

        logger.info(f"Optimization completed with status: {status.value}")
        return self._build_solution(
            model, status, values, solve_time, message=message
        )

    def _declare(self, model: LinearModel) -> tuple[pulp.LpProblem, list[pulp.LpVariable]]:
        """Translate a LinearModel into a PuLP problem.

        Variables and rows get positional names; labels stay on the model.
        """
        sense = pulp.LpMaximize if model.direction is Direction.MAXIMIZE else pulp.LpMinimize
        problem = pulp.LpProblem(_safe_name(model.name), sense)

        variables = [
            pulp.LpVariable(
                f"x{i}",
                lowBound=activity.lower,
                upBound=activity.upper,
                cat=pulp.LpInteger if activity.integer else pulp.LpContinuous,
            )
            for i, activity in enumerate(model.activities)
        ]

        problem += pulp.lpSum(c * x for c, x in zip(model.objective, variables)), "objective"

        for j, constraint in enumerate(model.constraints):
            if not any(constraint.coefficients):
                continue
            lhs = pulp.lpSum(
                a * x for a, x in zip(constraint.coefficients, variables) if a != 0
            )
            if constraint.relation is Relation.LE:
                problem += lhs <= constraint.bound, f"c{j}"
            elif constraint.relation is Relation.GE:
                problem += lhs >= constraint.bound, f"c{j}"
            else:
                problem += lhs == constraint.bound, f"c{j}"

        return problem, variables

    def _command(self) -> pulp.PULP_CBC_CMD:
        options = {"msg": self.msg}
        if self.timeout and self.timeout > 0:
            options["timeLimit"] = self.timeout
        options.update(self.parameters)
        return pulp.PULP_CBC_CMD(**options)

    def _extract_solution_status(self, pulp_status: int,
                                 sol_status: int | None = None) -> SolutionStatus:
        """Convert PuLP status codes to standardized status.

        CBC stopped by the time limit with an incumbent comes back from PuLP as
        ``LpStatusOptimal`` with ``LpSolutionIntegerFeasible``; that is not a
        proven optimum.
        """
        status = self._STATUS_MAP.get(pulp_status, SolutionStatus.UNDEFINED)
        if status is SolutionStatus.OPTIMAL and sol_status == pulp.LpSolutionIntegerFeasible:
            return SolutionStatus.NOT_SOLVED
        return status

    def get_solver_info(self) -> dict[str, Any]:
        """Get CBC solver information."""
        try:
            available = bool(pulp.PULP_CBC_CMD(msg=False).available())
        except pulp.PulpSolverError as e:
            return {"name": "CBC", "available": False, "error": str(e)}

        return {
            "name": "CBC",
            "available": available,
            "version": version("pulp"),
            "description": "COIN-OR Branch and Cut, bundled with PuLP",
            "capabilities": ["LP", "MIP"],
        }


def _safe_name(name: str) -> str:
    return "".join(ch if ch.isalnum() else "_" for ch in name) or "model"
