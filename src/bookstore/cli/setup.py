"""
CLI setup and initialization functions.

Loads configuration and sets up logging before any command runs.
"""

import logging
from pathlib import Path
from typing import Optional

from bookstore.core.config import BookstoreConfig, ConfigManager, LogLevel
from bookstore.exceptions import ConfigurationError
from bookstore.logging_integration import configure_logging_from_config, get_logger

from . import __version__


def _level_for_verbosity(verbose: int) -> Optional[LogLevel]:
    if verbose > 1:
        return LogLevel.DEBUG
    if verbose == 1:
        return LogLevel.INFO
    return None


def setup_logging(config_file: Optional[Path] = None, verbose: int = 0) -> BookstoreConfig:
    """Load configuration, configure logging from it, and return the configuration.

    An explicit ``config_file`` must load cleanly. Problems with the default
    per-user file fall back to built-in defaults.
    """
    try:
        config = ConfigManager(config_file).load_config()
    except ConfigurationError as e:
        if config_file is not None:
            raise
        logging.getLogger("bookstore.cli").warning(
            "Using default configuration (%s)", e.message
        )
        config = BookstoreConfig()

    level = _level_for_verbosity(verbose)
    if level is not None:
        config.general.logging.level = level

    configure_logging_from_config(config, service_name="bookstore-cli", version=__version__)

    logger = get_logger("bookstore.cli")
    logger.info("Bookstore CLI started", version=__version__, verbose_level=verbose)
    return config
