"""JSON response envelopes shared by HTTP handlers.

Successful responses look like ``{"success": true, "data": ...}``; failures
look like ``{"success": false, "error": {"message", "details"?, "errors"?}}``.
"""

import re
from typing import Any, Optional

_CAUSE_ERROR_PATTERN = re.compile(r"error:\s*(.+?)(?:\s+at|$)", re.IGNORECASE)

Response = tuple[int, dict[str, Any]]


def extract_error_message(
    error: BaseException | str | None,
    default: str = "An unexpected error occurred",
) -> str:
    """Return the most useful human-readable message for an error.

    The chained cause wins over the error itself; when the cause text holds an
    ``error: <msg>`` fragment, only that fragment is returned.
    """
    if isinstance(error, str):
        return error
    if not isinstance(error, BaseException):
        return default

    cause = error.__cause__
    if cause is not None:
        cause_str = str(cause)
        if cause_str:
            match = _CAUSE_ERROR_PATTERN.search(cause_str)
            if match:
                return match.group(1).strip()
            return cause_str

    return str(error) or default


def create_error_response(
    message: str,
    details: Optional[str] = None,
    status: int = 500,
    errors: Optional[list[dict[str, Any]]] = None,
) -> Response:
    """Build a failure envelope and its status code."""
    error: dict[str, Any] = {"message": message}
    if details:
        error["details"] = details
    if errors:
        error["errors"] = errors
    return status, {"success": False, "error": error}


def create_success_response(data: Any, status: int = 200) -> Response:
    """Build a success envelope and its status code."""
    return status, {"success": True, "data": data}
