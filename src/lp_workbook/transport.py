"""Transportation models over a bipartite source/destination network."""

import math
from enum import Enum

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict

from .builder import build
from .exceptions import DimensionMismatch
from .models.lp_model import LinearModel, Relation
from .models.solution import Solution
from .utils.logger import get_logger

logger = get_logger(__name__)


class Balance(str, Enum):
    """Relationship between total supply and total demand."""

    SUPPLY_CONSTRAINED = "supply_constrained"
    DEMAND_CONSTRAINED = "demand_constrained"
    BALANCED = "balanced"


class TransportationProblem(BaseModel):
    """Sources with supply, destinations with demand, and a unit cost per route.

    ``costs[i][j]`` is the cost of shipping one unit from ``sources[i]`` to
    ``destinations[j]``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = "transportation"
    sources: tuple[str, ...]
    destinations: tuple[str, ...]
    supply: tuple[float, ...]
    demand: tuple[float, ...]
    costs: tuple[tuple[float, ...], ...]

    @property
    def total_supply(self) -> float:
        return float(sum(self.supply))

    @property
    def total_demand(self) -> float:
        return float(sum(self.demand))

    @property
    def balance(self) -> Balance:
        if math.isclose(self.total_supply, self.total_demand, rel_tol=1e-9, abs_tol=1e-9):
            return Balance.BALANCED
        if self.total_supply < self.total_demand:
            return Balance.SUPPLY_CONSTRAINED
        return Balance.DEMAND_CONSTRAINED

    def relations(self) -> tuple[Relation, Relation]:
        """(supply relation, demand relation) implied by the balance.

        The scarce side ships or receives everything, so it gets equality;
        the other side is capped with ``<=``. Balanced problems use equality
        on both sides.
        """
        balance = self.balance
        if balance is Balance.SUPPLY_CONSTRAINED:
            return Relation.EQ, Relation.LE
        if balance is Balance.DEMAND_CONSTRAINED:
            return Relation.LE, Relation.EQ
        return Relation.EQ, Relation.EQ

    def route_names(self) -> list[str]:
        return [f"{s} -> {d}" for s in self.sources for d in self.destinations]


def build_transportation(problem: TransportationProblem,
                         force_equality: bool = False) -> LinearModel:
    """Build the minimum cost transportation model.

    Variables ``x_{i,j}`` are flattened row-major (all routes of the first
    source, then the second, ...). Supply rows come first, then demand rows.

    Args:
        problem: Transportation data
        force_equality: Use ``==`` for every supply and demand row regardless
            of balance. Unbalanced problems built this way are infeasible.

    Raises:
        DimensionMismatch: If supply, demand and cost shapes disagree
    """
    n_src = len(problem.sources)
    n_dst = len(problem.destinations)

    if len(problem.supply) != n_src:
        raise DimensionMismatch(
            f"supply has length {len(problem.supply)}, expected {n_src}"
        )
    if len(problem.demand) != n_dst:
        raise DimensionMismatch(
            f"demand has length {len(problem.demand)}, expected {n_dst}"
        )
    if len(problem.costs) != n_src or any(len(row) != n_dst for row in problem.costs):
        raise DimensionMismatch(f"costs must be a {n_src}x{n_dst} matrix")

    if force_equality:
        supply_rel, demand_rel = Relation.EQ, Relation.EQ
    else:
        supply_rel, demand_rel = problem.relations()

    logger.info(
        f"Transportation {problem.name!r} is {problem.balance.value} "
        f"(supply {problem.total_supply:g}, demand {problem.total_demand:g}); "
        f"supply rows {supply_rel.value}, demand rows {demand_rel.value}"
    )

    matrix = []
    for i in range(n_src):
        row = np.zeros((n_src, n_dst))
        row[i, :] = 1.0
        matrix.append(row.ravel().tolist())
    for j in range(n_dst):
        row = np.zeros((n_src, n_dst))
        row[:, j] = 1.0
        matrix.append(row.ravel().tolist())

    return build(
        "minimize",
        np.asarray(problem.costs, dtype=float).ravel().tolist(),
        matrix,
        [supply_rel] * n_src + [demand_rel] * n_dst,
        list(problem.supply) + list(problem.demand),
        activity_names=problem.route_names(),
        constraint_names=[f"supply[{s}]" for s in problem.sources]
        + [f"demand[{d}]" for d in problem.destinations],
        name=problem.name,
    )


def shipment_frame(problem: TransportationProblem, solution: Solution) -> pd.DataFrame:
    """Reshape a solution into a source x destination shipment table."""
    if not solution.values:
        raise ValueError(f"No shipments available (status: {solution.status.value})")
    shipments = np.asarray(solution.values, dtype=float).reshape(
        len(problem.sources), len(problem.destinations)
    )
    return pd.DataFrame(
        shipments,
        index=list(problem.sources),
        columns=list(problem.destinations),
    )
