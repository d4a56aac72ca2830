"""Worked examples for each linear programming archetype.

* allocation: maximize profit, every resource row ``<=``
* covering: minimize cost, every requirement row ``>=``
* blending: allocation plus a linearized share row
* transportation: minimize shipping cost over source/destination routes

Every factory returns a fresh immutable model.
"""

from typing import Callable

import pandas as pd
from pydantic import BaseModel, ConfigDict

from .builder import build_from_table, linearize_ratio
from .models.lp_model import LinearModel, Relation
from .models.table import CoefficientTable
from .transport import TransportationProblem, build_transportation

FURNITURE = CoefficientTable(
    name="furniture",
    activities=("Chairs", "Desks", "Tables"),
    resources=("Fabrication", "Assembly", "Machining", "Wood"),
    objective=(20, 14, 16),
    matrix=(
        (6, 2, 4),
        (8, 6, 4),
        (6, 4, 8),
        (40, 25, 25),
    ),
    bounds=(2000, 2000, 1440, 9600),
)

FOUR_PRODUCTS = CoefficientTable(
    name="four_products",
    activities=("Chairs", "Desks", "Stools", "Tables"),
    resources=("Machining", "Sanding", "Assembly", "Painting", "Wood"),
    objective=(20, 14, 3, 16),
    matrix=(
        (6, 4, 2, 8),
        (4, 3, 1, 4),
        (8, 6, 2, 4),
        (4, 2, 1, 4),
        (40, 25, 10, 25),
    ),
    bounds=(1440, 1440, 2000, 1000, 9600),
)

DIET = CoefficientTable(
    name="diet",
    activities=("Oats", "Beans"),
    resources=("Protein", "Fiber", "Iron"),
    objective=(3, 2),
    matrix=(
        (1, 1),
        (1, 3),
        (1, 0.5),
    ),
    bounds=(4, 6, 1.5),
    objective_label="Cost",
    bound_label="Required",
)

SHIPPING_COSTS = ((2, 4, 5), (3, 1, 7))


def furniture() -> LinearModel:
    """Three product allocation model."""
    return build_from_table(FURNITURE, "max", Relation.LE)


def furniture_blended(max_chair_share: float = 0.4) -> LinearModel:
    """Furniture model where chairs are at most a share of total output."""
    row = linearize_ratio(len(FURNITURE.activities), 0, max_chair_share)
    return furniture().model_copy(update={"name": "furniture_blended"}).with_constraint(
        "Chair share", row, Relation.LE, 0
    )


def four_products(chair_paint_time: float = 4, name: str = "four_products") -> LinearModel:
    """Four product allocation model with adjustable chair paint time."""
    table = FOUR_PRODUCTS.with_coefficient("Painting", "Chairs", chair_paint_time)
    return build_from_table(table, "max", Relation.LE, name=name)


def diet() -> LinearModel:
    """Least cost diet covering nutrient requirements."""
    return build_from_table(DIET, "min", Relation.GE)


def shipping(supply=(20, 30), demand=(10, 25, 15),
             name: str = "shipping_balanced") -> TransportationProblem:
    return TransportationProblem(
        name=name,
        sources=("Plant A", "Plant B"),
        destinations=("North", "Central", "South"),
        supply=tuple(supply),
        demand=tuple(demand),
        costs=SHIPPING_COSTS,
    )


def transport_frame(problem: TransportationProblem) -> pd.DataFrame:
    """Cost matrix with supply column and demand row."""
    frame = pd.DataFrame(
        [list(row) for row in problem.costs],
        index=list(problem.sources),
        columns=list(problem.destinations),
    )
    frame["Supply"] = list(problem.supply)
    demand = pd.DataFrame(
        [list(problem.demand) + [float("nan")]],
        index=["Demand"],
        columns=frame.columns,
    )
    return pd.concat([frame, demand])


class Example(BaseModel):
    """A named, buildable worked example."""

    model_config = ConfigDict(frozen=True)

    name: str
    archetype: str
    description: str
    build: Callable[[], LinearModel]
    data: Callable[[], pd.DataFrame]
    problem: TransportationProblem | None = None


def _transport_example(name: str, description: str, supply, demand) -> Example:
    problem = shipping(supply, demand, name=name)
    return Example(
        name=name,
        archetype="transportation",
        description=description,
        build=lambda: build_transportation(problem),
        data=lambda: transport_frame(problem),
        problem=problem,
    )


EXAMPLES: dict[str, Example] = {
    example.name: example
    for example in [
        Example(
            name="furniture",
            archetype="allocation",
            description="Chairs, desks and tables competing for four resources",
            build=furniture,
            data=FURNITURE.to_frame,
        ),
        Example(
            name="furniture_blended",
            archetype="blending",
            description="Furniture model with chairs limited to 40% of output",
            build=furniture_blended,
            data=FURNITURE.to_frame,
        ),
        Example(
            name="four_products",
            archetype="allocation",
            description="Four products over five resources",
            build=four_products,
            data=FOUR_PRODUCTS.to_frame,
        ),
        Example(
            name="four_products_slow_paint",
            archetype="allocation",
            description="Four products with chair paint time raised to 20",
            build=lambda: four_products(20, name="four_products_slow_paint"),
            data=FOUR_PRODUCTS.with_coefficient("Painting", "Chairs", 20).to_frame,
        ),
        Example(
            name="diet",
            archetype="covering",
            description="Cheapest mix of foods meeting nutrient requirements",
            build=diet,
            data=DIET.to_frame,
        ),
        _transport_example(
            "shipping_balanced", "Supply equals demand", (20, 30), (10, 25, 15)
        ),
        _transport_example(
            "shipping_supply_constrained", "Demand exceeds supply", (20, 30), (10, 25, 25)
        ),
        _transport_example(
            "shipping_demand_constrained", "Supply exceeds demand", (30, 30), (10, 25, 15)
        ),
    ]
}


def get_example(name: str) -> Example:
    try:
        return EXAMPLES[name]
    except KeyError:
        available = ", ".join(EXAMPLES)
        raise KeyError(f"Unknown example: {name}. Available examples: {available}") from None
