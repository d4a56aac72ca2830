"""Data models for optimization solutions."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SolutionStatus(str, Enum):
    """Standardized solve outcome."""

    OPTIMAL = "optimal"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    NOT_SOLVED = "not_solved"
    UNDEFINED = "undefined"
    ERROR = "error"


class Solution(BaseModel):
    """Represents the outcome of a single solve.

    ``values`` is index-aligned with the model's activities and is empty
    unless a solution was found.
    """

    model_config = ConfigDict(frozen=True)

    status: SolutionStatus = Field(
        description="Solution status (optimal, infeasible, unbounded, error, etc.)"
    )
    objective_value: float | None = Field(
        None, description="Optimal objective function value"
    )
    activity_names: tuple[str, ...] = Field(
        default_factory=tuple, description="Activity names in model order"
    )
    values: tuple[float, ...] = Field(
        default_factory=tuple, description="Activity values in model order"
    )
    solver_name: str | None = Field(None, description="Backend that produced it")
    solve_time: float | None = Field(None, description="Time taken to solve in seconds")
    message: str | None = Field(None, description="Additional solver message")

    @property
    def is_optimal(self) -> bool:
        """Check if the solution is optimal."""
        return self.status is SolutionStatus.OPTIMAL

    @property
    def is_feasible(self) -> bool:
        """Check if the solution is feasible."""
        return self.status not in (
            SolutionStatus.INFEASIBLE,
            SolutionStatus.UNBOUNDED,
            SolutionStatus.ERROR,
        )

    def value(self, activity: str) -> float:
        """Value of a single activity by name."""
        if not self.values:
            raise ValueError(f"No activity values available (status: {self.status.value})")
        try:
            return self.values[self.activity_names.index(activity)]
        except ValueError:
            raise KeyError(f"Unknown activity: {activity!r}") from None

    def as_dict(self) -> dict[str, float]:
        return dict(zip(self.activity_names, self.values))

    def summary(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "objective_value": self.objective_value,
            "variables": self.as_dict(),
            "solver": self.solver_name,
            "solve_time": self.solve_time,
        }
