"""Tests for utility modules."""

import logging
import tempfile
from pathlib import Path

import pytest
import yaml

from lp_workbook.utils.config_manager import ConfigManager
from lp_workbook.utils.logger import get_logger, setup_logging


class TestConfigManager:
    """Test cases for ConfigManager."""

    def test_packaged_default_config(self):
        """Test ConfigManager with the packaged default.yaml."""
        manager = ConfigManager()
        config = manager.get_config()

        assert config.solvers.default == "cbc"
        assert config.solvers.timeout == 60
        assert config.reporting.tolerance == 1e-6
        assert config.logging.level == "INFO"

    def test_config_manager_with_directory(self, config_manager):
        """Test ConfigManager loading default.yaml from a directory."""
        config = config_manager.config

        assert config.logging.level == "DEBUG"
        assert config.solvers.timeout == 30
        assert config.reporting.precision == 3

    def test_config_manager_with_file(self):
        """Test ConfigManager loading an explicit YAML file."""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / "workbook.yaml"
            with config_file.open("w") as f:
                yaml.dump({"solvers": {"default": "scip"}}, f)

            manager = ConfigManager(str(config_file))

            assert manager.config_dir == Path(temp_dir)
            assert manager.config.solvers.default == "scip"
            assert manager.config.solvers.timeout == 60

    def test_config_manager_missing_default_config(self):
        """Test ConfigManager when default config is missing."""
        with (
            tempfile.TemporaryDirectory() as temp_dir,
            pytest.raises(FileNotFoundError),
        ):
            # Try to create ConfigManager with empty directory
            ConfigManager(str(temp_dir))

    def test_invalid_yaml(self, temp_config_dir):
        (temp_config_dir / "default.yaml").write_text("solvers: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigManager(str(temp_config_dir))

    def test_environment_overlay(self, temp_config_dir, mock_config, monkeypatch):
        with open(temp_config_dir / "default.yaml", "w") as f:
            yaml.dump(mock_config, f)
        with open(temp_config_dir / "classroom.yaml", "w") as f:
            yaml.dump({"reporting": {"precision": 0}}, f)
        monkeypatch.setenv("ENVIRONMENT", "classroom")

        manager = ConfigManager(str(temp_config_dir))

        assert manager.config.reporting.precision == 0
        assert manager.config.reporting.tolerance == 1e-6

    def test_missing_environment_overlay_is_ignored(self, config_manager, temp_config_dir, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "nowhere")
        manager = ConfigManager(str(temp_config_dir))
        assert manager.config.solvers.timeout == 30

    def test_env_var_overrides(self, temp_config_dir, mock_config, monkeypatch):
        with open(temp_config_dir / "default.yaml", "w") as f:
            yaml.dump(mock_config, f)
        monkeypatch.setenv("LP_WORKBOOK_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LP_WORKBOOK_SOLVER_DEFAULT", "scip")
        monkeypatch.setenv("LP_WORKBOOK_SOLVER_TIMEOUT", "5")
        monkeypatch.setenv("LP_WORKBOOK_TOLERANCE", "1e-4")

        config = ConfigManager(str(temp_config_dir)).config

        assert config.logging.level == "WARNING"
        assert config.solvers.default == "scip"
        assert config.solvers.timeout == 5
        assert config.reporting.tolerance == 1e-4

    def test_bad_env_var_keeps_file_value(self, temp_config_dir, mock_config, monkeypatch):
        with open(temp_config_dir / "default.yaml", "w") as f:
            yaml.dump(mock_config, f)
        monkeypatch.setenv("LP_WORKBOOK_SOLVER_TIMEOUT", "soon")

        config = ConfigManager(str(temp_config_dir)).config

        assert config.solvers.timeout == 30

    def test_get_dot_notation(self, config_manager):
        assert config_manager.get("solvers.default") == "cbc"
        assert config_manager.get("reporting.precision") == 3
        assert config_manager.get("solvers.missing", "fallback") == "fallback"
        assert config_manager.get("nowhere.at.all") is None

    def test_merge_dict(self, config_manager):
        merged = config_manager._merge_dict(
            {"a": {"b": 1, "c": 2}, "d": 3},
            {"a": {"c": 4}, "e": 5},
        )
        assert merged == {"a": {"b": 1, "c": 4}, "d": 3, "e": 5}


class TestLogger:
    """Test cases for logging helpers."""

    def test_get_logger(self):
        logger = get_logger("lp_workbook.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "lp_workbook.test"

    def test_setup_logging(self, config_manager):
        setup_logging(config_manager)

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("pulp").level == logging.WARNING
        assert logging.getLogger("pyscipopt").level == logging.WARNING

    def test_setup_logging_defaults(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO
