"""Error Hierarchy: typed, categorized exceptions for infrastructure failure modes.

Invariants:
    - Business rejections are AccountOutcome values, never exceptions
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Raised only by infrastructure; SessionManager resolves them to UNDEFINED_ERROR

Design Decisions:
    - Single hierarchy with AccountGateError base: one except clause covers every adapter failure
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None


class AccountGateError(Exception):
    """Base exception for all accountgate errors."""

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


# ─── Infrastructure Errors ───────────────────────────────────────

class AccountServerError(AccountGateError):
    """Remote account server could not be reached or answered with an HTTP error."""
    def __init__(
        self,
        message: str,
        failure_type: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Account server error ({failure_type}): {message}",
            "ACCOUNT_SERVER_ERROR",
            ErrorCategory.TIMEOUT if failure_type == "timeout" else ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context,
        )
        self.failure_type = failure_type


class MalformedResponseError(AccountServerError):
    """Account server answered, but the body is not a valid outcome."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "malformed_response", context)
        self.code = "MALFORMED_SERVER_RESPONSE"
