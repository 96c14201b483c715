"""Error Hierarchy: typed, categorized exceptions for all Bookshelf failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the REST envelope {"error": {"message", "status"}}
    - StoreError never leaks driver details in its public message

Design Decisions:
    - Single hierarchy with BookshelfError base: one FastAPI handler catches all
    - ValidationError carries the full violation list as its public message
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for log records."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    isbn: str | None = None
    debug_info: dict[str, Any] | None = None


class BookshelfError(Exception):
    """Base exception for all Bookshelf errors."""

    def __init__(
        self,
        message: str | list[str],
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def public_message(self) -> str | list[str]:
        """Message safe to return to API clients."""
        return self.message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "message": self.public_message,
                "status": self.http_status,
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(BookshelfError):
    """Payload rejected by a declared book shape."""
    def __init__(self, violations: list[str], context: ErrorContext | None = None):
        super().__init__(
            list(violations), "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.violations = list(violations)


class NotFoundError(BookshelfError):
    """No book row matches the given isbn."""
    def __init__(self, isbn: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.isbn = isbn
        super().__init__(
            f"There is no book with an isbn '{isbn}'",
            "BOOK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.isbn = isbn


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(BookshelfError):
    """Database operation failed (connectivity, constraint, driver)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    @property
    def public_message(self) -> str:
        return "Internal Server Error"
