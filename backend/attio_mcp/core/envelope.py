"""Envelope Builder: constructs the uniform success/error result for every request.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - build_error text always holds, in order: message, method, URL, status,
      headers, data, so a failure is diagnosable from the text block alone
    - error.code falls back to 500, error.details to UNKNOWN_ERROR_DETAILS
    - build_fault never inspects the exception beyond str(): it must not fail itself

Design Decisions:
    - Plain functions over a builder class: no state to hold (ADR: Functional Core)
    - JSON dumps use indent=2 and default=str so odd header/body values never raise
"""

import json
from typing import Any

from attio_mcp.core.errors import AttioBridgeError, RemoteServiceError
from attio_mcp.schemas.envelope import Envelope, ErrorInfo, TextBlock

UNKNOWN_ERROR_DETAILS = "Unknown error occurred"


def to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def build_success(text: str, data: Any = None) -> Envelope:
    return Envelope(content=[TextBlock(text=text)], is_error=False, data=data)


def build_error(
    error: Exception,
    url: str,
    method: str,
    response: RemoteServiceError | None = None,
) -> Envelope:
    """Full diagnostic envelope for a failed remote call.

    `response` is the structured remote failure; when the error itself is a
    RemoteServiceError it is used as its own response.
    """
    if response is None and isinstance(error, RemoteServiceError):
        response = error
    status = response.status if response else None
    headers = response.headers if response else {}
    data = response.data if response else None

    text = (
        f"ERROR: {error}\n\n"
        f"=== Request Details ===\n"
        f"- Method: {method}\n"
        f"- URL: {url}\n\n"
        f"=== Response Details ===\n"
        f"- Status: {status if status is not None else 'N/A'}\n"
        f"- Headers: {to_json(headers or {})}\n"
        f"- Data: {to_json(data if data is not None else {})}\n"
    )
    return Envelope(
        content=[TextBlock(text=text)],
        is_error=True,
        error=ErrorInfo(
            code=status or 500,
            message=str(error),
            details=_remote_details(data),
        ),
    )


def _remote_details(data: Any) -> Any:
    if isinstance(data, dict) and data.get("error"):
        return data["error"]
    return data or UNKNOWN_ERROR_DETAILS


def build_domain_error(error: AttioBridgeError) -> Envelope:
    """Envelope for local failures (validation, unknown tool, bad URI). No network involved."""
    return Envelope(
        content=[TextBlock(text=f"ERROR: {error.message}")],
        is_error=True,
        error=ErrorInfo(**error.to_response()),
    )


def build_fault(
    tool_name: str | None, error: Exception, kind: str | None = None,
) -> Envelope:
    """Minimal envelope for faults that escaped a handler.

    Tool calls name the tool; other request kinds name the kind instead.
    """
    message = str(error) or type(error).__name__
    if tool_name:
        text = f"Error executing tool '{tool_name}': {message}"
    else:
        text = f"Error handling {kind or 'request'}: {message}"
    return Envelope(
        content=[TextBlock(text=text)],
        is_error=True,
        error=ErrorInfo(code=500, message=message, details=UNKNOWN_ERROR_DETAILS),
    )
