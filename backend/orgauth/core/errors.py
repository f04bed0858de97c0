"""Error Hierarchy — typed, categorized exceptions for all orgauth failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400-level) are recoverable; hashing/infrastructure errors are critical
    - to_response() produces a transport-neutral envelope for the boundary layer
    - Raw passwords never appear in messages or context

Design Decisions:
    - Single hierarchy with OrgAuthError base: callers catch one type at the boundary
    - Core returns violation dicts; EntityValidationError wraps them only when the
      shell (or Admission.unwrap) needs to raise
    - HashingError is distinct from validation so a system fault is never reported
      as a bad password
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
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    field_name: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class OrgAuthError(Exception):
    """Base exception for all orgauth errors."""

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
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "field": self.context.field_name,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EntityValidationError(OrgAuthError):
    """An entity failed one of its field rules."""
    def __init__(
        self,
        message: str,
        field: str,
        error_code: str = "VALIDATION_ERROR",
        entity: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or entity
        ctx.field_name = ctx.field_name or field
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field
        self.error_code = error_code
        self.entity = entity

    @classmethod
    def from_violation(
        cls, violation: dict, entity: str | None = None,
    ) -> "EntityValidationError":
        """Build from a core violation descriptor."""
        return cls(
            violation["message"],
            field=violation["field"],
            error_code=violation["error_code"],
            entity=entity,
        )


class DuplicateUsernameError(OrgAuthError):
    """Username already taken by another stored user."""
    def __init__(self, username: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entity = "user"
        ctx.field_name = "username"
        super().__init__(
            f"username '{username}' is already taken",
            "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.username = username


class ResourceNotFoundError(OrgAuthError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── System Errors (500-level) ──────────────────────────────────

class HashingError(OrgAuthError):
    """The bcrypt primitive failed internally. Not a validation rejection."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Password hashing failed: {message}",
            "HASHING_FAILURE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class DatabaseError(OrgAuthError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
