"""Error Hierarchy — typed, categorized exceptions for every match pipeline failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MagitrakError base: FastAPI global handler catches all (ADR: uniform error shape)
    - OwnershipMismatchError answers 400, not 403/404: existing clients expect 400
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    MALFORMED_INPUT = "malformed_input"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORE = "store"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    owner_id: int | None = None
    match_id: str | None = None


class MagitrakError(Exception):
    """Base exception for all Magitrak errors."""

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
                    "match_id": self.context.match_id,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class MatchValidationError(MagitrakError):
    """One or more required match fields are missing or unset."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Invalid or missing match fields: {', '.join(fields)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["fields"] = self.fields
        return response


class UnauthenticatedError(MagitrakError):
    """Request carries no resolvable session."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "A valid session is required",
            "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class OwnershipMismatchError(MagitrakError):
    """Session identity does not own the target (or submitted) record."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Match does not belong to the current session",
            "OWNERSHIP_MISMATCH", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(MagitrakError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreFailureError(MagitrakError):
    """Record store operation failed. Not further distinguished to the caller."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Record store {operation} failed: {message}",
            "STORE_FAILURE", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
