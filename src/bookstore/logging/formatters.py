"""
Formatters and handlers for log output.

Console output always goes to stderr; stdout belongs to the shell transcript.
"""

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """One JSON object per line.

    Keyword fields passed to BookstoreLogger are merged into the top level of
    the object, so ``logger.info("Book added", isbn="978-1")`` yields an
    ``"isbn"`` key.
    """

    def __init__(self, service_name: str = "bookstore", version: str = "unknown"):
        super().__init__()
        self.static_fields = {"service": service_name, "version": version}

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **self.static_fields,
        }
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            entry["correlation_id"] = correlation_id
        entry.update(getattr(record, "extra_context", {}))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def plain_formatter() -> logging.Formatter:
    return logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT)


def rich_handler() -> logging.Handler:
    """Colourised stderr handler; markup is off so ISBNs and titles print literally."""
    return RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
