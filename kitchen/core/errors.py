"""Error Hierarchy — typed, categorized exceptions for all Kitchen API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the HTTP status the API layer should answer with
    - to_response() produces the REST envelope used by the global handlers
    - Stores raise these errors only; mapping to a response happens in api/

Design Decisions:
    - Single hierarchy with KitchenError base: one FastAPI handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: resource/record identity travels with the error, not the log call
"""

from dataclasses import dataclass, field
from enum import Enum
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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for the response envelope and logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    record_id: str | None = None


class KitchenError(Exception):
    """Base exception for all Kitchen API errors."""

    def __init__(
        self,
        message: str,
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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource": self.context.resource,
                    "record_id": self.context.record_id,
                },
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class InvalidInputError(KitchenError):
    """Record fields missing or of the wrong type."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class IdMismatchError(KitchenError):
    """Update body carries an id different from the one in the path."""
    def __init__(
        self, path_id: str, body_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Request path id ({path_id}) and request body id ({body_id}) must match",
            "ID_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.path_id = path_id
        self.body_id = body_id


# ─── Lookup Errors (404) ────────────────────────────────────────

class RecordNotFoundError(KitchenError):
    """No live record with the requested id."""
    def __init__(
        self, resource_type: str, record_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource = ctx.resource or resource_type
        ctx.record_id = record_id
        super().__init__(
            f"{resource_type} '{record_id}' not found",
            "RECORD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.record_id = record_id
