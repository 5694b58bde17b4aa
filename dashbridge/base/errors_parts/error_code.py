"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration used across the SDK and HTTP providers,
the comparator, and the service layer. Values are lowercase snake_case and are
rendered verbatim as the ``error`` kind of structured error payloads.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    DECODE = "decode"
    COMPARISON_FAILED = "comparison_failed"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
