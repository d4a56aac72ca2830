"""Generic linear program builder.

One builder covers every archetype used in the workbook: allocation
(maximize, all rows ``<=``), covering (minimize, all rows ``>=``), blending
and transportation. Archetypes differ only in direction and per-row relation.
"""

from collections.abc import Sequence
from typing import Optional, Union

from .exceptions import DimensionMismatch
from .models.lp_model import Activity, Constraint, Direction, LinearModel, Relation
from .models.table import CoefficientTable
from .utils.logger import get_logger

logger = get_logger(__name__)

RelationLike = Union[Relation, str]
VarBound = tuple[float, Optional[float]]


def build(
    direction: Direction | str,
    objective: Sequence[float],
    matrix: Sequence[Sequence[float]],
    relations: Sequence[RelationLike],
    bounds: Sequence[float],
    var_bounds: Optional[Sequence[VarBound]] = None,
    *,
    activity_names: Optional[Sequence[str]] = None,
    constraint_names: Optional[Sequence[str]] = None,
    integer: Optional[Sequence[bool]] = None,
    name: str = "model",
) -> LinearModel:
    """Build ``direction sum(c_i x_i)`` s.t. ``sum(a_ji x_i) <rel_j> b_j``, ``lb_i <= x_i <= ub_i``.

    Args:
        direction: "max"/"maximize" or "min"/"minimize"
        objective: Objective coefficients, length N
        matrix: Constraint coefficients, M rows of length N
        relations: One relation per row ("<=", ">=", "==" and aliases)
        bounds: Right-hand sides, length M
        var_bounds: ``(lower, upper)`` per activity, upper may be None.
            Defaults to ``(0, None)`` for every activity.
        activity_names: Labels for the activities, defaults to x1..xN
        constraint_names: Labels for the rows, defaults to c1..cM
        integer: Per-activity integrality flags
        name: Model name

    Returns:
        Immutable linear model

    Raises:
        DimensionMismatch: If any vector or matrix length disagrees
        InvalidRelation: If a relation is not recognized
        InvalidDirection: If the direction is not recognized
    """
    sense = Direction.parse(direction)
    n = len(objective)
    m = len(matrix)

    _check_length("relations", relations, m)
    _check_length("bounds", bounds, m)
    for j, row in enumerate(matrix):
        if len(row) != n:
            raise DimensionMismatch(
                f"Constraint row {j} has {len(row)} coefficients, expected {n}"
            )

    if var_bounds is None:
        var_bounds = [(0.0, None)] * n
    _check_length("var_bounds", var_bounds, n)

    if integer is None:
        integer = [False] * n
    _check_length("integer", integer, n)

    if activity_names is None:
        activity_names = [f"x{i + 1}" for i in range(n)]
    _check_length("activity_names", activity_names, n)

    if constraint_names is None:
        constraint_names = [f"c{j + 1}" for j in range(m)]
    _check_length("constraint_names", constraint_names, m)

    parsed = [Relation.parse(r) for r in relations]

    activities = tuple(
        Activity(
            name=str(label),
            lower=float(lb) if lb is not None else 0.0,
            upper=float(ub) if ub is not None else None,
            integer=bool(flag),
        )
        for label, (lb, ub), flag in zip(activity_names, var_bounds, integer)
    )
    constraints = tuple(
        Constraint(
            name=str(label),
            coefficients=tuple(float(a) for a in row),
            relation=relation,
            bound=float(b),
        )
        for label, row, relation, b in zip(constraint_names, matrix, parsed, bounds)
    )

    model = LinearModel(
        name=name,
        direction=sense,
        activities=activities,
        objective=tuple(float(c) for c in objective),
        constraints=constraints,
    )
    logger.debug(
        f"Built model {name!r}: {sense.value}, "
        f"{model.n_activities} activities, {model.n_constraints} constraints"
    )
    return model


def build_from_table(
    table: CoefficientTable,
    direction: Direction | str,
    relations: RelationLike | Sequence[RelationLike],
    var_bounds: Optional[Sequence[VarBound]] = None,
    *,
    integer: Optional[Sequence[bool]] = None,
    name: Optional[str] = None,
) -> LinearModel:
    """Build a model from labelled coefficient data.

    A single relation applies to every row of the table.
    """
    if isinstance(relations, (Relation, str)):
        relations = [relations] * len(table.matrix)

    return build(
        direction,
        table.objective,
        table.matrix,
        relations,
        table.bounds,
        var_bounds,
        activity_names=table.activities,
        constraint_names=table.resources,
        integer=integer,
        name=name or table.name,
    )


def linearize_ratio(
    n: int,
    target: int,
    ratio: float,
    members: Optional[Sequence[int]] = None,
) -> list[float]:
    """Coefficient row for ``x_target / sum(x_members) <= ratio``.

    Clearing the denominator gives ``x_target - ratio * sum(x_members) <= 0``;
    pair the returned row with relation ``<=`` and bound 0.

    Args:
        n: Number of activities
        target: Index of the activity in the numerator
        ratio: Maximum share of ``target`` in the total
        members: Indices summed in the denominator, defaults to all activities
    """
    if not 0 <= target < n:
        raise DimensionMismatch(f"Target index {target} outside 0..{n - 1}")
    if members is None:
        members = range(n)

    row = [0.0] * n
    for i in members:
        if not 0 <= i < n:
            raise DimensionMismatch(f"Member index {i} outside 0..{n - 1}")
        row[i] -= ratio
    row[target] += 1.0
    return row


def _check_length(label: str, values: Sequence, expected: int) -> None:
    if len(values) != expected:
        raise DimensionMismatch(f"{label} has length {len(values)}, expected {expected}")
