"""Tests for model classes."""

import numpy as np
import pytest
from pydantic import ValidationError

from lp_workbook.exceptions import DimensionMismatch, InvalidDirection, InvalidRelation
from lp_workbook.models.config import Config, LoggingConfig, ReportingConfig, SolverConfig
from lp_workbook.models.lp_model import Direction, Relation
from lp_workbook.models.solution import Solution, SolutionStatus
from lp_workbook.models.table import CoefficientTable


class TestConfigModels:
    """Test cases for configuration models."""

    def test_logging_config_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert "%(asctime)s" in config.format

    def test_solver_config_defaults(self):
        config = SolverConfig()
        assert config.default == "cbc"
        assert config.timeout == 60
        assert config.msg is False
        assert config.parameters == {}

    def test_reporting_config_defaults(self):
        config = ReportingConfig()
        assert config.tolerance == 1e-6
        assert config.precision == 2

    def test_config_from_dict(self):
        data = {
            "logging": {"level": "DEBUG"},
            "solvers": {"default": "scip", "timeout": 10},
        }

        config = Config.from_dict(data)
        assert config.logging.level == "DEBUG"
        assert config.solvers.default == "scip"
        assert config.solvers.timeout == 10
        assert config.reporting.precision == 2

    def test_solver_options(self):
        config = Config.from_dict({"solvers": {"timeout": 5, "parameters": {"threads": 2}}})
        assert config.solver_options() == {
            "timeout": 5,
            "msg": False,
            "parameters": {"threads": 2},
        }


class TestRelationAndDirection:
    """Test cases for relation and direction parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("<=", Relation.LE), ("≤", Relation.LE), ("LE", Relation.LE),
        (">=", Relation.GE), ("≥", Relation.GE), ("ge", Relation.GE),
        ("=", Relation.EQ), ("==", Relation.EQ), (" eq ", Relation.EQ),
    ])
    def test_parse_relation(self, text, expected):
        assert Relation.parse(text) is expected

    def test_parse_relation_passthrough(self):
        assert Relation.parse(Relation.GE) is Relation.GE

    @pytest.mark.parametrize("text", ["<", "=>", "less", ""])
    def test_parse_invalid_relation(self, text):
        with pytest.raises(InvalidRelation):
            Relation.parse(text)

    def test_relation_holds(self):
        assert Relation.LE.holds(1.0, 1.0)
        assert not Relation.LE.holds(1.1, 1.0)
        assert Relation.LE.holds(1.0000001, 1.0, tolerance=1e-6)
        assert Relation.GE.holds(2.0, 1.0)
        assert not Relation.GE.holds(0.5, 1.0)
        assert Relation.EQ.holds(1.0, 1.0)
        assert not Relation.EQ.holds(1.1, 1.0, tolerance=1e-6)

    def test_parse_direction(self):
        assert Direction.parse("max") is Direction.MAXIMIZE
        assert Direction.parse("Maximize") is Direction.MAXIMIZE
        assert Direction.parse("min") is Direction.MINIMIZE
        assert Direction.parse(Direction.MINIMIZE) is Direction.MINIMIZE

    def test_parse_invalid_direction(self):
        with pytest.raises(InvalidDirection):
            Direction.parse("sideways")


class TestLinearModel:
    """Test cases for LinearModel."""

    def test_shapes(self, furniture_model):
        assert furniture_model.n_activities == 3
        assert furniture_model.n_constraints == 4
        assert furniture_model.matrix.shape == (4, 3)
        assert furniture_model.activity_names == ["Chairs", "Desks", "Tables"]
        np.testing.assert_array_equal(furniture_model.bounds, [2000, 2000, 1440, 9600])
        np.testing.assert_array_equal(furniture_model.objective_vector, [20, 14, 16])

    def test_model_is_immutable(self, furniture_model):
        with pytest.raises(ValidationError):
            furniture_model.name = "changed"

    def test_with_coefficient_returns_new_model(self, furniture_model):
        changed = furniture_model.with_coefficient("Assembly", "Chairs", 10)

        assert changed.matrix[1, 0] == 10
        assert furniture_model.matrix[1, 0] == 8
        assert changed.n_activities == furniture_model.n_activities
        assert changed.n_constraints == furniture_model.n_constraints

    def test_with_coefficient_by_index(self, furniture_model):
        changed = furniture_model.with_coefficient(0, 2, 5)
        assert changed.constraints[0].coefficients == (6.0, 2.0, 5.0)

    def test_with_bound(self, furniture_model):
        changed = furniture_model.with_bound("Wood", 10000)
        assert changed.bounds[3] == 10000
        assert furniture_model.bounds[3] == 9600

    def test_with_objective_coefficient(self, furniture_model):
        changed = furniture_model.with_objective_coefficient("Tables", 30)
        assert changed.objective == (20.0, 14.0, 30.0)

    def test_with_constraint(self, furniture_model):
        changed = furniture_model.with_constraint("Desk cap", [0, 1, 0], "<=", 50)

        assert changed.n_constraints == 5
        assert furniture_model.n_constraints == 4
        assert changed.constraints[-1].relation is Relation.LE

    def test_with_constraint_wrong_length(self, furniture_model):
        with pytest.raises(DimensionMismatch):
            furniture_model.with_constraint("bad", [1, 2], "<=", 5)

    def test_with_constraint_invalid_relation(self, furniture_model):
        with pytest.raises(InvalidRelation):
            furniture_model.with_constraint("bad", [1, 2, 3], "<>", 5)

    def test_unknown_labels(self, furniture_model):
        with pytest.raises(KeyError):
            furniture_model.with_bound("Paint", 10)
        with pytest.raises(IndexError):
            furniture_model.with_coefficient(0, 7, 1.0)


class TestSolutionModel:
    """Test cases for Solution."""

    def test_optimal_solution(self):
        solution = Solution(
            status=SolutionStatus.OPTIMAL,
            objective_value=100.0,
            activity_names=("x", "y"),
            values=(5.0, 10.0),
        )

        assert solution.is_optimal is True
        assert solution.is_feasible is True
        assert solution.value("y") == 10.0
        assert solution.as_dict() == {"x": 5.0, "y": 10.0}
        assert solution.summary()["status"] == "optimal"

    def test_status_properties(self):
        infeasible = Solution(status="infeasible")
        assert infeasible.is_optimal is False
        assert infeasible.is_feasible is False

        unbounded = Solution(status=SolutionStatus.UNBOUNDED)
        assert unbounded.is_optimal is False
        assert unbounded.is_feasible is False

    def test_value_without_values(self):
        with pytest.raises(ValueError):
            Solution(status="infeasible").value("x")

    def test_value_unknown_activity(self):
        solution = Solution(status="optimal", activity_names=("x",), values=(1.0,))
        with pytest.raises(KeyError):
            solution.value("z")


class TestCoefficientTable:
    """Test cases for CoefficientTable."""

    @pytest.fixture
    def table(self):
        return CoefficientTable(
            activities=("A", "B"),
            resources=("R1", "R2"),
            objective=(3, 5),
            matrix=((1, 0), (3, 2)),
            bounds=(4, 18),
        )

    def test_coefficient_lookup(self, table):
        assert table.coefficient("R2", "A") == 3.0

    def test_with_coefficient(self, table):
        changed = table.with_coefficient("R2", "B", 7)
        assert changed.coefficient("R2", "B") == 7.0
        assert table.coefficient("R2", "B") == 2.0

    def test_with_bound(self, table):
        assert table.with_bound("R1", 6).bounds == (6.0, 18.0)

    def test_unknown_labels(self, table):
        with pytest.raises(KeyError):
            table.with_coefficient("R9", "A", 1)
        with pytest.raises(KeyError):
            table.with_coefficient("R1", "Z", 1)

    def test_to_frame(self, table):
        frame = table.to_frame()

        assert list(frame.index) == ["Profit", "R1", "R2"]
        assert list(frame.columns) == ["A", "B", "Available"]
        assert frame.loc["R2", "A"] == 3.0
        assert frame.loc["R1", "Available"] == 4.0
        assert frame.loc["Profit", "B"] == 5.0
