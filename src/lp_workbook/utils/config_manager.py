"""Configuration management utilities."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml

from ..models.config import Config


class ConfigManager:
    """Manages application configuration from files and environment variables."""

    # Environment variable -> (section, key, converter)
    ENV_MAPPINGS = {
        "LP_WORKBOOK_LOG_LEVEL": ("logging", "level", str),
        "LP_WORKBOOK_SOLVER_DEFAULT": ("solvers", "default", str),
        "LP_WORKBOOK_SOLVER_TIMEOUT": ("solvers", "timeout", int),
        "LP_WORKBOOK_TOLERANCE": ("reporting", "tolerance", float),
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to config directory or file. If None, uses default.
        """
        self.config_file = None
        if config_path and Path(config_path).is_file():
            self.config_file = Path(config_path)
        self.config_dir = self._resolve_config_path(config_path)
        self.config = self._load_config()

    def _resolve_config_path(self, config_path: Optional[str]) -> Path:
        """Resolve configuration directory path."""
        if config_path:
            path = Path(config_path)
            if path.is_file():
                return path.parent
            return path

        # Default: use config directory relative to this module
        return Path(__file__).parent.parent / "config"

    def _load_config(self) -> Config:
        """Load configuration from files and environment variables."""
        # An explicit file replaces default.yaml as the base layer
        if self.config_file is not None:
            config_data = self._load_yaml(self.config_file.name, required=True)
        else:
            config_data = self._load_yaml("default.yaml", required=True)

        # Override with environment-specific config if exists
        env = os.getenv("ENVIRONMENT", "").lower()
        if env and env != "default":
            env_config = self._load_yaml(f"{env}.yaml")
            config_data = self._merge_dict(config_data, env_config)

        # Override with environment variables
        self._apply_env_vars(config_data)

        return Config.from_dict(config_data)

    def _load_yaml(self, filename: str, required: bool = False) -> dict[str, Any]:
        """Load YAML configuration file."""
        config_path = self.config_dir / filename
        if not config_path.exists():
            if required:
                raise FileNotFoundError(f"Config file not found: {config_path}")
            return {}

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    def _merge_dict(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge configuration dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dict(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_vars(self, config_data: dict[str, Any]) -> None:
        """Apply environment variable overrides."""
        for env_var, (section, key, convert) in self.ENV_MAPPINGS.items():
            value = os.getenv(env_var)
            if value is None:
                continue

            try:
                converted = convert(value)
            except ValueError:
                continue  # Keep original value if conversion fails

            config_data.setdefault(section, {})[key] = converted

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., "logging.level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self.config.model_dump()

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_config(self) -> Config:
        """Get the complete configuration object."""
        return self.config
