"""Solver abstraction layer."""

from .base import BaseSolver, SolverError
from .factory import SolverFactory
from .pulp_solver import PulpCBCSolver
from .scip_solver import SCIPSolver

__all__ = ["BaseSolver", "PulpCBCSolver", "SCIPSolver", "SolverError", "SolverFactory"]
