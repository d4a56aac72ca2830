"""Solution reporting: decision values, resource usage and consistency checks."""

from typing import Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import DimensionMismatch
from .models.lp_model import LinearModel, Relation
from .models.solution import Solution, SolutionStatus
from .utils.logger import get_logger

logger = get_logger(__name__)


class SolutionReport(BaseModel):
    """Labelled tables derived from one model and its solution."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    status: SolutionStatus
    objective_value: float | None = None
    activities: Optional[pd.DataFrame] = Field(
        None, description="value, objective coefficient and contribution per activity"
    )
    constraints: Optional[pd.DataFrame] = Field(
        None, description="usage, relation, bound, slack and satisfied per row"
    )
    warnings: list[str] = Field(default_factory=list)
    message: str | None = None
    tolerance_used: float = 1e-6

    @property
    def is_consistent(self) -> bool:
        """True when an optimal solution satisfies every row and bound."""
        return self.status is SolutionStatus.OPTIMAL and not self.warnings

    def to_text(self, precision: int = 2) -> str:
        """Render the report as plain text tables."""
        float_format = f"{{:,.{precision}f}}".format
        lines = [
            f"Model: {self.name}",
            "=" * 50,
            f"Status: {self.status.value}",
        ]
        if self.objective_value is not None:
            lines.append(f"Objective Value: {float_format(self.objective_value)}")
        if self.message:
            lines.append(self.message)

        if self.activities is not None:
            lines += ["", "Activities", "-" * 50,
                      self.activities.to_string(float_format=float_format)]
        if self.constraints is not None:
            lines += ["", "Constraints", "-" * 50,
                      self.constraints.to_string(float_format=float_format)]
        if self.warnings:
            lines += ["", "Consistency warnings", "-" * 50]
            lines += [f"  ! {w}" for w in self.warnings]

        lines.append("=" * 50)
        return "\n".join(lines)


class SolutionReporter:
    """Builds reports and validates solutions against their model."""

    def __init__(self, tolerance: float = 1e-6):
        """Initialize the reporter.

        Args:
            tolerance: Relative tolerance, scaled per row by
                ``max(1, |bound|, sum(|a_i * x_i|))``
        """
        self.tolerance = tolerance

    def report(self, model: LinearModel, solution: Solution) -> SolutionReport:
        """Compute resource usage and label the solution.

        Non-optimal solutions produce a report without tables; the caller
        decides how to present the status.

        Raises:
            DimensionMismatch: If the solution does not belong to the model
        """
        if not solution.is_optimal or not solution.values:
            logger.warning(
                f"No solution to report for {model.name!r} "
                f"(status: {solution.status.value})"
            )
            return SolutionReport(
                name=model.name,
                status=solution.status,
                message=f"No solution available: {solution.status.value}",
                tolerance_used=self.tolerance,
            )

        if len(solution.values) != model.n_activities:
            raise DimensionMismatch(
                f"Solution has {len(solution.values)} values, "
                f"model {model.name!r} has {model.n_activities} activities"
            )

        x = np.asarray(solution.values, dtype=float)
        c = model.objective_vector

        activities = pd.DataFrame(
            {
                "value": x,
                "objective_coef": c,
                "contribution": c * x,
            },
            index=pd.Index(model.activity_names, name="activity"),
        )

        warnings = self._check_activity_bounds(model, x)

        constraints = None
        if model.n_constraints:
            constraints, row_warnings = self._constraint_usage(model, x)
            warnings += row_warnings

        objective = float(c @ x)
        if solution.objective_value is not None and not np.isclose(
            objective, solution.objective_value,
            rtol=self.tolerance, atol=self.tolerance,
        ):
            warnings.append(
                f"Objective {solution.objective_value:g} differs from "
                f"recomputed value {objective:g}"
            )

        for warning in warnings:
            logger.warning(f"Consistency warning in {model.name!r}: {warning}")

        return SolutionReport(
            name=model.name,
            status=solution.status,
            objective_value=solution.objective_value,
            activities=activities,
            constraints=constraints,
            warnings=warnings,
            tolerance_used=self.tolerance,
        )

    def _constraint_usage(self, model: LinearModel,
                          x: np.ndarray) -> tuple[pd.DataFrame, list[str]]:
        terms = model.matrix * x
        usage = terms.sum(axis=1)
        magnitudes = np.abs(terms).sum(axis=1)
        bounds = model.bounds
        rows = []
        warnings = []

        for constraint, used, bound, magnitude in zip(
            model.constraints, usage, bounds, magnitudes
        ):
            relation = constraint.relation
            if relation is Relation.GE:
                slack = used - bound
            else:
                slack = bound - used

            satisfied = bool(relation.holds(used, bound, self._row_tolerance(bound, magnitude)))
            if not satisfied:
                warnings.append(
                    f"{constraint.name}: usage {used:g} {relation.symbol} {bound:g} does not hold"
                )
            rows.append({
                "usage": float(used),
                "relation": relation.symbol,
                "bound": float(bound),
                "slack": float(slack),
                "satisfied": satisfied,
            })

        frame = pd.DataFrame(rows, index=pd.Index(model.constraint_names, name="constraint"))
        return frame, warnings

    def _check_activity_bounds(self, model: LinearModel, x: np.ndarray) -> list[str]:
        warnings = []
        for activity, value in zip(model.activities, x):
            if value < activity.lower - self._row_tolerance(activity.lower):
                warnings.append(
                    f"{activity.name}: value {value:g} below lower bound {activity.lower:g}"
                )
            if activity.upper is not None and value > activity.upper + self._row_tolerance(activity.upper):
                warnings.append(
                    f"{activity.name}: value {value:g} above upper bound {activity.upper:g}"
                )
            if activity.integer and abs(value - round(value)) > self.tolerance:
                warnings.append(f"{activity.name}: value {value:g} is not integral")
        return warnings

    def _row_tolerance(self, bound: float, magnitude: float = 0.0) -> float:
        # Zero-bound rows (linearized ratios) scale with the size of their terms
        return self.tolerance * max(1.0, abs(bound), magnitude)


def report(model: LinearModel, solution: Solution, tolerance: float = 1e-6) -> SolutionReport:
    """Report a solution with a default reporter."""
    return SolutionReporter(tolerance).report(model, solution)
