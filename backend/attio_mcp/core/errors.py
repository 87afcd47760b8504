"""Error Hierarchy: typed, categorized exceptions for every bridge failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable and become error envelopes
    - Startup errors (MissingCredential, TransportFailure) are critical and end the process
    - RemoteServiceError carries the remote status, headers and body untouched

Design Decisions:
    - Single hierarchy with AttioBridgeError base: the router catches one type
      and turns it into an envelope (ADR: uniform error shape)
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    operation_kind: str | None = None
    debug_info: dict[str, Any] | None = None


class AttioBridgeError(Exception):
    """Base exception for all bridge errors."""

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
        """Convert to the structured `error` block of an envelope."""
        return {
            "code": self.http_status,
            "message": self.message,
            "details": {
                "error_code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "tool_name": self.context.tool_name,
            },
        }


# ─── Startup Errors (fatal) ─────────────────────────────────────

class MissingCredentialError(AttioBridgeError):
    """Required API key absent from the environment."""
    def __init__(self, variable: str, context: ErrorContext | None = None):
        super().__init__(
            f"{variable} environment variable not found",
            "MISSING_CREDENTIAL", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.variable = variable


class TransportFailureError(AttioBridgeError):
    """The stdio transport could not be established."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Transport failure: {message}",
            "TRANSPORT_FAILURE", ErrorCategory.TRANSPORT,
            ErrorSeverity.CRITICAL, context, 500,
        )


# ─── Request Errors (400-level) ─────────────────────────────────

class UnknownToolError(AttioBridgeError):
    """Tool name not present in the tool table."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.tool_name = tool_name
        super().__init__(
            f"Unknown tool: {tool_name}",
            "UNKNOWN_TOOL", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.tool_name = tool_name


class UnknownOperationError(AttioBridgeError):
    """Request kind the router has no handler for."""
    def __init__(self, kind: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown operation: {kind}",
            "UNKNOWN_OPERATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.kind = kind


class MissingArgumentError(AttioBridgeError):
    """Required tool argument absent or empty."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            f"Missing required argument: {field}",
            "MISSING_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ToolValidationError(AttioBridgeError):
    """Tool argument present but of the wrong shape."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidResourceUriError(AttioBridgeError):
    """Resource URI does not use a recognized scheme/collection."""
    def __init__(self, uri: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unrecognized resource URI: {uri}",
            "INVALID_RESOURCE_URI", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.uri = uri


# ─── Remote Errors ──────────────────────────────────────────────

class RemoteServiceError(AttioBridgeError):
    """Attio API call failed: non-2xx status or network-level error.

    status is None when no response was received (connection refused, DNS, ...).
    """
    def __init__(
        self,
        message: str,
        status: int | None = None,
        headers: dict[str, str] | None = None,
        data: Any = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "REMOTE_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, status or 502,
        )
        self.status = status
        self.headers = headers or {}
        self.data = data
