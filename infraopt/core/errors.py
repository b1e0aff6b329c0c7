"""Error Hierarchy — typed, categorized failures for every ledger operation.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every domain error carries the numeric ledger_code of the contract that defines it
    - Domain errors (400-level) never leave partial writes behind; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with InfraOptError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Errors are plain values until raised: enforce_* checks return them, registries raise them
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


# Numeric codes of the on-ledger contracts (infrastructure: 1xx, performance: 5xx)
ERR_OWNER_ONLY_INFRASTRUCTURE = 100
ERR_NOT_FOUND = 101
ERR_ALREADY_VERIFIED = 102
ERR_OWNER_ONLY_PERFORMANCE = 500
ERR_METRIC_NOT_FOUND = 501
ERR_INVALID_THRESHOLD = 502


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    caller: str | None = None
    operation: str | None = None
    entity_id: str | None = None
    block_height: int | None = None
    debug_info: dict[str, Any] | None = None


class InfraOptError(Exception):
    """Base exception for all ledger errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        ledger_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.ledger_code = ledger_code

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "ledger_code": self.ledger_code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "entity_id": self.context.entity_id,
                    "block_height": self.context.block_height,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UnauthorizedError(InfraOptError):
    """Caller is not the ledger owner."""
    def __init__(
        self, caller: str, ledger_code: int = ERR_OWNER_ONLY_INFRASTRUCTURE,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "Only the ledger owner may perform this operation.",
            "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403, ledger_code,
        )
        self.caller = caller


class InfrastructureNotFoundError(InfraOptError):
    """Referenced infrastructure id is not registered."""
    def __init__(self, infrastructure_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Infrastructure '{infrastructure_id}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404, ERR_NOT_FOUND,
        )
        self.infrastructure_id = infrastructure_id


class AlreadyVerifiedError(InfraOptError):
    """Infrastructure has already left the PENDING state."""
    def __init__(
        self, infrastructure_id: str, status: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Infrastructure '{infrastructure_id}' is {status}; only pending records can be verified.",
            "ALREADY_VERIFIED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409, ERR_ALREADY_VERIFIED,
        )
        self.infrastructure_id = infrastructure_id
        self.status = status


class MetricNotFoundError(InfraOptError):
    """Referenced metric id is not registered."""
    def __init__(self, metric_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"Metric '{metric_id}' not found",
            "METRIC_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404, ERR_METRIC_NOT_FOUND,
        )
        self.metric_id = metric_id


class InvalidThresholdError(InfraOptError):
    """Threshold band is empty, or an allocation exceeds its capacity."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_THRESHOLD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, ERR_INVALID_THRESHOLD,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(InfraOptError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
