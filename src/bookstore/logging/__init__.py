"""
Bookstore Logging Package

Structured logging with configurable outputs:
- formatters: Log formatting (JSON, console, rich)
- loggers: Logger wrapper with correlation IDs and keyword context
- config: Logging configuration
- manager: Centralized logging setup and management
"""

from .config import LoggingConfig, create_default_config
from .formatters import StructuredFormatter
from .loggers import BookstoreLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "create_default_config",
    "LoggingManager",
    "configure_logging",
    "logging_manager",
    "BookstoreLogger",
    "get_logger",
    "StructuredFormatter",
]
