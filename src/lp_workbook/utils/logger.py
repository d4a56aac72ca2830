"""Logging setup for lp-workbook."""

import logging

from .config_manager import ConfigManager


def setup_logging(config_manager: ConfigManager | None = None) -> None:
    """Configure the root logger from the ``logging`` config section.

    Solver libraries log their own chatter; only their warnings get through.

    Args:
        config_manager: Loaded configuration. The packaged defaults are used when None.
    """
    if config_manager is None:
        config_manager = ConfigManager()

    logging_config = config_manager.config.logging

    logging.basicConfig(
        level=getattr(logging, logging_config.level.upper()),
        format=logging_config.format,
        force=True,
    )

    for backend in ("pulp", "pyscipopt"):
        logging.getLogger(backend).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Module logger, e.g. ``get_logger(__name__)`` for ``lp_workbook.reporting``."""
    return logging.getLogger(name)
