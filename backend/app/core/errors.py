"""Error Hierarchy — typed, categorized exceptions for all Movie Magic failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Authentication and ownership errors are 4xx; lookup, store and upstream failures are 500
    - Unauthorized and Forbidden carry a fixed message — failure subtypes are never exposed
    - to_response() produces the REST envelope with a top-level "error" message

Design Decisions:
    - Single hierarchy with MovieMagicError base: FastAPI global handler catches all (ADR: uniform error shape)
    - RecordNotFoundError maps to 500, not 404: a missing record is a service error for callers
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
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Observability context attached to every error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    record_id: str | None = None
    upstream_status: int | None = None


class MovieMagicError(Exception):
    """Base exception for all Movie Magic errors."""

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
            "error": self.message,
            "code": self.code,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }


# ─── Access Errors (400-level) ──────────────────────────────────

class UnauthorizedError(MovieMagicError):
    """Missing, malformed or rejected bearer credential."""
    def __init__(self, reason: str = ""):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, http_status=401,
        )
        # logged only, never returned to the client
        self.reason = reason


class ForbiddenError(MovieMagicError):
    """Authenticated subject does not own the record."""
    def __init__(self, resource: str, record_id: object):
        super().__init__(
            "Forbidden", "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING,
            ErrorContext(resource=resource, record_id=str(record_id)), 403,
        )


# ─── Service Errors (500-level) ─────────────────────────────────

class RecordNotFoundError(MovieMagicError):
    """Referenced record does not exist in the store."""
    def __init__(self, resource: str, record_id: object):
        super().__init__(
            f"{resource} '{record_id}' not found",
            "RECORD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR,
            ErrorContext(resource=resource, record_id=str(record_id)), 500,
        )


class DatabaseError(MovieMagicError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, http_status=500,
        )
        self.operation = operation


class CatalogUpstreamError(MovieMagicError):
    """Catalog (TMDb) call failed, timed out, or returned an error status."""
    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(
            message, "CATALOG_UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL,
            ErrorContext(upstream_status=upstream_status), 500,
        )
