"""
Configuration management for Bookstore.

Usage:
    from bookstore.core.config import ConfigManager

    config = ConfigManager().load_config()
    level = config.general.logging.level
"""

from bookstore.exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .manager import ConfigManager, default_config_file
from .models import (
    BookstoreConfig,
    BookstoreSettings,
    GeneralConfig,
    LoggingConfig,
    LogLevel,
    ShellConfig,
)

__all__ = [
    "BookstoreConfig",
    "BookstoreSettings",
    "GeneralConfig",
    "LoggingConfig",
    "LogLevel",
    "ShellConfig",
    "ConfigManager",
    "default_config_file",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
