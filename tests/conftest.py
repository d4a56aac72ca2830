"""pytest configuration and shared fixtures."""

import os
import tempfile
from pathlib import Path

import pytest
import yaml

# Add src directory to Python path for testing
import sys
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from lp_workbook import catalog
from lp_workbook.solvers import PulpCBCSolver
from lp_workbook.utils.config_manager import ConfigManager


@pytest.fixture
def temp_config_dir():
    """Create temporary configuration directory."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def mock_config():
    """Configuration dictionary for testing."""
    return {
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
        },
        "solvers": {
            "default": "cbc",
            "timeout": 30,
            "msg": False,
            "parameters": {},
        },
        "reporting": {
            "tolerance": 1e-6,
            "precision": 3,
        },
    }


@pytest.fixture
def config_manager(temp_config_dir, mock_config):
    """Create ConfigManager instance backed by a temporary default.yaml."""
    config_file = temp_config_dir / "default.yaml"
    with open(config_file, "w") as f:
        yaml.dump(mock_config, f)

    return ConfigManager(str(temp_config_dir))


@pytest.fixture
def cbc_solver():
    """CBC solver with test settings."""
    return PulpCBCSolver({"timeout": 30, "msg": False})


@pytest.fixture
def furniture_model():
    return catalog.furniture()


@pytest.fixture
def four_product_model():
    return catalog.four_products()


@pytest.fixture
def diet_model():
    return catalog.diet()


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Keep environment overrides from leaking into tests."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    os.environ["TESTING"] = "1"

    yield

    os.environ.pop("TESTING", None)
