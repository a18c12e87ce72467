"""Error Hierarchy — typed, categorized exceptions for every wallet failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; PersistenceError (500) is critical
    - to_response() always carries message + code; details only when expose_details=True

Design Decisions:
    - Single hierarchy with WalletError base: one global handler catches all
    - Closed set of variants (authentication, ownership, not-found, conflict, upload,
      persistence) replaces catch-and-rethrow in every route
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    resource_type: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class WalletError(Exception):
    """Base exception for all wallet API errors."""

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

    def to_response(self, expose_details: bool = False) -> dict:
        """Convert to the JSON error body. Details stay empty outside development."""
        details: dict = {}
        if expose_details:
            details = {
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_id": self.context.user_id,
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                    "debug_info": self.context.debug_info,
                },
            }
        return {"message": self.message, "code": self.code, "error": details}


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthenticationError(WalletError):
    """Access token missing, malformed or expired."""
    def __init__(self, message: str = "Invalid or missing access token", context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidCredentialsError(WalletError):
    """Login attempted with an unknown email or a wrong password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 400,
        )


class OwnershipError(WalletError):
    """Caller is not the owner of the requested resource."""
    def __init__(self, resource_type: str, resource_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            "The record does not belong to you",
            "OWNERSHIP_MISMATCH", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, ctx, 403,
        )


class NotFoundError(WalletError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class EmailConflictError(WalletError):
    """Email already registered to another user."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            f"Email '{email}' is already registered",
            "EMAIL_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class UploadRejectedError(WalletError):
    """Uploaded file failed the type or size restriction."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UPLOAD_REJECTED", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class PersistenceError(WalletError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "PERSISTENCE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
