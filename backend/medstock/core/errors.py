"""Error Hierarchy — typed, categorized exceptions for all MedStock failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors leave the store unchanged; persistence errors leave the
      in-memory mutation applied but unsynchronized with disk
    - to_response() produces a plain dict envelope for the calling shell

Design Decisions:
    - Single hierarchy with MedStockError base: the shell catches one type
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    batch_id: str | None = None
    operation: str | None = None
    line_number: int | None = None
    debug_info: dict[str, Any] | None = None


class MedStockError(Exception):
    """Base exception for all MedStock errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "batch_id": self.context.batch_id,
                    "operation": self.context.operation,
                    "line_number": self.context.line_number,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class RecordValidationError(MedStockError):
    """Record field violates a structural constraint."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.field = field


class DuplicateBatchError(MedStockError):
    """add() called with a batch id already in the store."""
    def __init__(self, batch_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(operation="add")
        ctx.batch_id = batch_id
        super().__init__(
            f"Batch '{batch_id}' already exists",
            "DUPLICATE_BATCH", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx,
        )
        self.batch_id = batch_id


class RecordNotFoundError(MedStockError):
    """update()/delete() called with an unknown batch id."""
    def __init__(self, batch_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.batch_id = batch_id
        super().__init__(
            f"Batch '{batch_id}' not found",
            "RECORD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.batch_id = batch_id


# ─── Codec Errors ───────────────────────────────────────────────

class RecordDecodeError(MedStockError):
    """Persisted line is malformed. load() recovers by truncating at it."""
    def __init__(
        self, message: str, line_number: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(operation="decode")
        ctx.line_number = line_number
        super().__init__(
            message, "DECODE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx,
        )
        self.line_number = line_number


# ─── Infrastructure Errors ──────────────────────────────────────

class PersistenceError(MedStockError):
    """Backing storage operation failed."""
    def __init__(
        self, message: str, operation: str, code: str = "PERSISTENCE_ERROR",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Storage {operation} failed: {message}",
            code, ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation


class PersistenceWriteError(PersistenceError):
    """Store file unwritable. In-memory state is ahead of disk."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "write", "PERSISTENCE_WRITE_FAILED", context)


class PersistenceReadError(PersistenceError):
    """Store file exists but could not be read."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "read", "PERSISTENCE_READ_FAILED", context)
