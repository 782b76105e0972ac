"""
Logger wrapper used throughout Bookstore.

Every record carries the logger's correlation ID, and keyword arguments become
structured fields (``logger.info("Book added", isbn=isbn)``).
"""

import logging
from typing import Optional
from uuid import uuid4


class BookstoreLogger:
    """Thin wrapper over ``logging.Logger`` that accepts keyword context."""

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())

    def _log(self, level: int, msg: str, exc_info: bool = False, **fields):
        if not self.logger.isEnabledFor(level):
            return
        extra = {"correlation_id": self.correlation_id}
        if fields:
            extra["extra_context"] = fields
        self.logger.log(level, msg, extra=extra, exc_info=exc_info)

    def debug(self, msg: str, **fields):
        self._log(logging.DEBUG, msg, **fields)

    def info(self, msg: str, **fields):
        self._log(logging.INFO, msg, **fields)

    def warning(self, msg: str, **fields):
        self._log(logging.WARNING, msg, **fields)

    def error(self, msg: str, **fields):
        self._log(logging.ERROR, msg, **fields)

    def exception(self, msg: str, **fields):
        """Log at ERROR with the active exception's traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **fields)
