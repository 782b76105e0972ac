"""
Process-wide logging setup.

LoggingManager installs Bookstore's handlers on the root logger and removes
exactly those handlers when it is reconfigured.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from bookstore.constants import APP_NAME, DEFAULT_LOG_FILE

from .config import LoggingConfig
from .formatters import StructuredFormatter, plain_formatter, rich_handler
from .loggers import BookstoreLogger


class LoggingManager:
    """Singleton owning the handlers Bookstore adds to the root logger."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.config = None
            instance.handlers = []
            cls._instance = instance
        return cls._instance

    def configure(self, config: LoggingConfig):
        root = logging.getLogger()
        self._remove_handlers(root)
        self.config = config
        root.setLevel(config.level)

        builders = {"console": self._console_handler, "file": self._file_handler}
        for output in config.output:
            if output not in builders:
                raise ValueError(f"Unknown log output: {output}")
            handler = builders[output](config)
            handler.setLevel(config.level)
            root.addHandler(handler)
            self.handlers.append(handler)

        # Loggers created at import time may carry an older level
        for name in list(logging.Logger.manager.loggerDict):
            if name == APP_NAME or name.startswith(f"{APP_NAME}."):
                logging.getLogger(name).setLevel(config.level)

    def _remove_handlers(self, root: logging.Logger):
        while self.handlers:
            handler = self.handlers.pop()
            root.removeHandler(handler)
            handler.close()

    def _formatter(self, config: LoggingConfig) -> logging.Formatter:
        if config.format_type == "json":
            return StructuredFormatter(config.service_name, config.version)
        return plain_formatter()

    def _console_handler(self, config: LoggingConfig) -> logging.Handler:
        if config.format_type == "rich":
            return rich_handler()
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._formatter(config))
        return handler

    def _file_handler(self, config: LoggingConfig) -> logging.Handler:
        path = Path(config.file_path or DEFAULT_LOG_FILE)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(self._formatter(config))
        return handler

    def get_logger(self, name: str, correlation_id: Optional[str] = None) -> BookstoreLogger:
        return BookstoreLogger(name, correlation_id)


logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
