"""lp-workbook - declare, solve and report textbook linear programs."""

__version__ = "0.1.0"

from .builder import build, build_from_table, linearize_ratio
from .exceptions import DimensionMismatch, InvalidDirection, InvalidRelation, ModelError
from .models.lp_model import Activity, Constraint, Direction, LinearModel, Relation
from .models.solution import Solution, SolutionStatus
from .models.table import CoefficientTable
from .reporting import SolutionReport, SolutionReporter, report
from .solvers import SolverError
from .transport import Balance, TransportationProblem, build_transportation
from .workflow import run, solve

__all__ = [
    "Activity",
    "Balance",
    "CoefficientTable",
    "Constraint",
    "DimensionMismatch",
    "Direction",
    "InvalidDirection",
    "InvalidRelation",
    "LinearModel",
    "ModelError",
    "Relation",
    "Solution",
    "SolutionReport",
    "SolutionReporter",
    "SolutionStatus",
    "SolverError",
    "TransportationProblem",
    "build",
    "build_from_table",
    "build_transportation",
    "linearize_ratio",
    "report",
    "run",
    "solve",
]
