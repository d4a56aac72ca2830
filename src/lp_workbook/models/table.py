"""Labelled coefficient data for a linear program."""

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field


class CoefficientTable(BaseModel):
    """Objective vector, consumption matrix and bounds with row/column labels.

    Rows are resources (or requirements), columns are activities. The table is
    plain data: shapes are checked when a model is built from it.
    """

    model_config = ConfigDict(frozen=True)

    name: str = "data"
    activities: tuple[str, ...]
    resources: tuple[str, ...]
    objective: tuple[float, ...]
    matrix: tuple[tuple[float, ...], ...]
    bounds: tuple[float, ...]
    objective_label: str = Field("Profit", description="Row label of the objective")
    bound_label: str = Field("Available", description="Column label of the bounds")

    def coefficient(self, resource: str, activity: str) -> float:
        return self.matrix[self._row(resource)][self._column(activity)]

    def with_coefficient(self, resource: str, activity: str, value: float) -> "CoefficientTable":
        """Return a copy with one consumption rate replaced."""
        j = self._row(resource)
        i = self._column(activity)
        rows = [list(row) for row in self.matrix]
        rows[j][i] = float(value)
        return self.model_copy(update={"matrix": tuple(tuple(row) for row in rows)})

    def with_bound(self, resource: str, value: float) -> "CoefficientTable":
        j = self._row(resource)
        bounds = list(self.bounds)
        bounds[j] = float(value)
        return self.model_copy(update={"bounds": tuple(bounds)})

    def to_frame(self) -> pd.DataFrame:
        """Render as a DataFrame: one row per resource plus the objective row."""
        frame = pd.DataFrame(
            [list(row) for row in self.matrix],
            index=list(self.resources),
            columns=list(self.activities),
        )
        frame[self.bound_label] = list(self.bounds)
        objective = pd.DataFrame(
            [list(self.objective) + [float("nan")]],
            index=[self.objective_label],
            columns=frame.columns,
        )
        return pd.concat([objective, frame])

    def _row(self, resource: str) -> int:
        try:
            return self.resources.index(resource)
        except ValueError:
            raise KeyError(f"Unknown resource: {resource!r}") from None

    def _column(self, activity: str) -> int:
        try:
            return self.activities.index(activity)
        except ValueError:
            raise KeyError(f"Unknown activity: {activity!r}") from None
