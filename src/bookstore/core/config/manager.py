"""
Configuration manager for Bookstore.

Loads the TOML configuration file, applies environment overrides, validates
the result and can write a default file back out.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

import tomli_w

from bookstore.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from bookstore.exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .models import BookstoreConfig, BookstoreSettings


def default_config_file() -> Path:
    """Standard per-user configuration file location."""
    return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class ConfigManager:
    """Configuration manager with file loading, env overrides and validation."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses default location.
        """
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[BookstoreConfig] = None

    def load_config(self) -> BookstoreConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        try:
            config_data = self._apply_env_overrides(config_data)
            self._config = BookstoreConfig(**config_data)
        except (ValueError, TypeError) as e:
            raise ConfigurationValidationError(
                [f"Configuration validation failed: {e}"]
            ) from e

        return self._config

    def _load_toml_file(self) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {self.config_file}",
                help_text="Check file permissions and path",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = BookstoreSettings()

        general = config_data.setdefault("general", {})
        logging_config = general.setdefault("logging", {})
        shell_config = general.setdefault("shell", {})

        if settings.bookstore_logging_level:
            logging_config["level"] = settings.bookstore_logging_level
        if settings.bookstore_logging_format:
            logging_config["format"] = settings.bookstore_logging_format
        if settings.bookstore_logging_output:
            outputs = [o.strip() for o in settings.bookstore_logging_output.split(",")]
            logging_config["output"] = outputs
        if settings.bookstore_logging_file_path:
            logging_config["file_path"] = settings.bookstore_logging_file_path
        if settings.bookstore_show_welcome is not None:
            shell_config["show_welcome"] = settings.bookstore_show_welcome

        return config_data

    def _remove_none_values(self, data):
        """Recursively remove None values, which TOML cannot represent."""
        if isinstance(data, dict):
            return {k: self._remove_none_values(v) for k, v in data.items() if v is not None}
        elif isinstance(data, list):
            return [self._remove_none_values(item) for item in data if item is not None]
        else:
            return data

    def save_config(self, config: Optional[BookstoreConfig] = None) -> Path:
        """Save configuration to the TOML file and return its path."""
        if config is None:
            config = self.load_config()

        config_dict = self._remove_none_values(config.model_dump(mode="json"))

        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "wb") as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration file: {self.config_file}",
                help_text="Check file permissions and path",
            ) from e

        self._config = config
        return self.config_file

    def reset_config(self) -> Path:
        """Write a default configuration file."""
        return self.save_config(BookstoreConfig())
