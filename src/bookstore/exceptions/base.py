"""
Root of the Bookstore exception hierarchy.

``message`` is the line the operator sees. Recoverable errors print it as-is;
fatal ones are reported together with the optional help, action and context.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Optional details attached to a BookstoreError."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    user_action: Optional[str] = None


def new_error_id() -> str:
    """Short identifier that ties a printed error to its log entry."""
    return uuid.uuid4().hex[:8]


class BookstoreError(Exception):
    """Base exception for all Bookstore errors.

    Attributes:
        message: Operator-facing text
        help_text: Guidance shown with fatal reports
        error_code: Stable code for logs and tests
        user_action: Suggested next step
        context: Values involved in the failure (ISBN, field, ...)
        correlation_id: Error ID printed to the operator and logged
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        details = context or ExceptionContext()
        self.message = message
        self.help_text = details.help_text
        self.error_code = details.error_code
        self.user_action = details.user_action
        self.context = dict(details.context)
        self.correlation_id = new_error_id()
        self.timestamp = datetime.now()
        super().__init__(message)

    def context_summary(self) -> str:
        return ", ".join(f"{k}: {v}" for k, v in self.context.items() if v is not None)

    def __str__(self) -> str:
        sections = [self.message]
        if self.help_text:
            sections.append(f"💡 Help: {self.help_text}")
        if self.user_action:
            sections.append(f"🔧 Action: {self.user_action}")
        summary = self.context_summary()
        if summary:
            sections.append(f"📋 Context: {summary}")
        sections.append(f"🔍 Error ID: {self.correlation_id}")
        return "\n\n".join(sections)

    def to_dict(self) -> Dict[str, Any]:
        """Log-friendly view of the error."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "correlation_id": self.correlation_id,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context,
        }
