"""
Integration between the Bookstore configuration system and logging.

Configures the logging package from a BookstoreConfig and gives modules easy
access to loggers.
"""

import inspect
from typing import Optional

from .core.config import BookstoreConfig
from .logging import BookstoreLogger, configure_logging
from .logging import LoggingConfig as LogConfig
from .logging import create_default_config
from .logging import get_logger as _get_logger

_logging_configured = False


def configure_logging_from_config(
    config: BookstoreConfig, service_name: str = "bookstore", version: str = "unknown"
):
    """Configure logging system from Bookstore configuration."""
    global _logging_configured

    logging_config = config.general.logging
    log_config = LogConfig(
        level=logging_config.level.value,
        format_type=logging_config.format,
        output=logging_config.output,
        file_path=logging_config.file_path,
        max_file_size=logging_config.max_file_size,
        backup_count=logging_config.backup_count,
        service_name=service_name,
        version=version,
    )

    configure_logging(log_config)
    _logging_configured = True


def ensure_logging_configured():
    """Ensure logging is configured with defaults if not already done."""
    global _logging_configured

    if not _logging_configured:
        configure_logging(create_default_config())
        _logging_configured = True


def get_logger(name: str, correlation_id: Optional[str] = None) -> BookstoreLogger:
    """Get a Bookstore logger instance, ensuring logging is configured."""
    ensure_logging_configured()
    return _get_logger(name, correlation_id)


def get_module_logger(module_name: Optional[str] = None) -> BookstoreLogger:
    """Get a logger named after the calling module."""
    if module_name is None:
        frame = inspect.currentframe().f_back
        module_name = frame.f_globals.get("__name__", "bookstore")
    return get_logger(module_name)
