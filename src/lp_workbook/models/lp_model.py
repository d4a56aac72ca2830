"""Data models for linear programs."""

from enum import Enum
from typing import Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import DimensionMismatch, InvalidDirection, InvalidRelation


class Relation(str, Enum):
    """Relational operator of a constraint row."""

    LE = "<="
    GE = ">="
    EQ = "=="

    @classmethod
    def parse(cls, value: Union["Relation", str]) -> "Relation":
        """Convert a user supplied operator to a Relation.

        Raises:
            InvalidRelation: If the operator is not recognized
        """
        if isinstance(value, Relation):
            return value
        key = str(value).strip().lower()
        relation = _RELATION_ALIASES.get(key)
        if relation is None:
            raise InvalidRelation(f"Unrecognized relation: {value!r}")
        return relation

    def holds(self, lhs: float, rhs: float, tolerance: float = 0.0) -> bool:
        """Check ``lhs <relation> rhs`` within an absolute tolerance."""
        if self is Relation.LE:
            return lhs <= rhs + tolerance
        if self is Relation.GE:
            return lhs >= rhs - tolerance
        return abs(lhs - rhs) <= tolerance

    @property
    def symbol(self) -> str:
        return {"<=": "≤", ">=": "≥", "==": "="}[self.value]


_RELATION_ALIASES = {
    "<=": Relation.LE, "≤": Relation.LE, "le": Relation.LE,
    ">=": Relation.GE, "≥": Relation.GE, "ge": Relation.GE,
    "=": Relation.EQ, "==": Relation.EQ, "eq": Relation.EQ,
}


class Direction(str, Enum):
    """Objective direction."""

    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        if isinstance(value, Direction):
            return value
        key = str(value).strip().lower()
        if key in ("max", "maximize", "maximise"):
            return Direction.MAXIMIZE
        if key in ("min", "minimize", "minimise"):
            return Direction.MINIMIZE
        raise InvalidDirection(f"Unrecognized objective direction: {value!r}")


class Activity(BaseModel):
    """A decision variable: something to produce, ship or select."""

    model_config = ConfigDict(frozen=True)

    name: str
    lower: float = 0.0
    upper: float | None = None
    integer: bool = False


class Constraint(BaseModel):
    """A resource or requirement row ``sum(a_i * x_i) <relation> bound``."""

    model_config = ConfigDict(frozen=True)

    name: str
    coefficients: tuple[float, ...]
    relation: Relation
    bound: float


class LinearModel(BaseModel):
    """Solver-agnostic linear program.

    Instances are immutable. Scenario variants (a changed coefficient, a new
    bound, an extra blending row) are derived with the ``with_*`` methods,
    each of which returns a new model and leaves the original untouched.
    """

    model_config = ConfigDict(frozen=True)

    name: str = "model"
    direction: Direction
    activities: tuple[Activity, ...]
    objective: tuple[float, ...]
    constraints: tuple[Constraint, ...] = Field(default_factory=tuple)

    @property
    def n_activities(self) -> int:
        return len(self.activities)

    @property
    def n_constraints(self) -> int:
        return len(self.constraints)

    @property
    def activity_names(self) -> list[str]:
        return [a.name for a in self.activities]

    @property
    def constraint_names(self) -> list[str]:
        return [c.name for c in self.constraints]

    @property
    def relations(self) -> list[Relation]:
        return [c.relation for c in self.constraints]

    @property
    def bounds(self) -> np.ndarray:
        return np.array([c.bound for c in self.constraints], dtype=float)

    @property
    def matrix(self) -> np.ndarray:
        """Coefficient matrix with shape (M, N)."""
        if not self.constraints:
            return np.zeros((0, self.n_activities))
        return np.array([c.coefficients for c in self.constraints], dtype=float)

    @property
    def objective_vector(self) -> np.ndarray:
        return np.array(self.objective, dtype=float)

    @property
    def is_mip(self) -> bool:
        return any(a.integer for a in self.activities)

    def activity_index(self, key: int | str) -> int:
        return _resolve_index(key, self.activity_names, "activity")

    def constraint_index(self, key: int | str) -> int:
        return _resolve_index(key, self.constraint_names, "constraint")

    def with_coefficient(self, constraint: int | str, activity: int | str,
                         value: float) -> "LinearModel":
        """Return a copy with one constraint coefficient replaced."""
        j = self.constraint_index(constraint)
        i = self.activity_index(activity)
        row = list(self.constraints[j].coefficients)
        row[i] = float(value)
        updated = self.constraints[j].model_copy(update={"coefficients": tuple(row)})
        return self._replace_constraint(j, updated)

    def with_bound(self, constraint: int | str, value: float) -> "LinearModel":
        """Return a copy with one right-hand side replaced."""
        j = self.constraint_index(constraint)
        updated = self.constraints[j].model_copy(update={"bound": float(value)})
        return self._replace_constraint(j, updated)

    def with_objective_coefficient(self, activity: int | str, value: float) -> "LinearModel":
        i = self.activity_index(activity)
        objective = list(self.objective)
        objective[i] = float(value)
        return self.model_copy(update={"objective": tuple(objective)})

    def with_constraint(self, name: str, coefficients, relation: Relation | str,
                        bound: float) -> "LinearModel":
        """Return a copy with an extra constraint row appended.

        Raises:
            DimensionMismatch: If the row length differs from the activity count
            InvalidRelation: If the relation is not recognized
        """
        row = tuple(float(a) for a in coefficients)
        if len(row) != self.n_activities:
            raise DimensionMismatch(
                f"Constraint {name!r} has {len(row)} coefficients, "
                f"expected {self.n_activities}"
            )
        constraint = Constraint(
            name=name,
            coefficients=row,
            relation=Relation.parse(relation),
            bound=float(bound),
        )
        return self.model_copy(update={"constraints": self.constraints + (constraint,)})

    def _replace_constraint(self, index: int, constraint: Constraint) -> "LinearModel":
        constraints = list(self.constraints)
        constraints[index] = constraint
        return self.model_copy(update={"constraints": tuple(constraints)})


def _resolve_index(key: int | str, names: list[str], kind: str) -> int:
    if isinstance(key, str):
        try:
            return names.index(key)
        except ValueError:
            raise KeyError(f"Unknown {kind}: {key!r}") from None
    if not 0 <= key < len(names):
        raise IndexError(f"{kind.capitalize()} index out of range: {key}")
    return key
