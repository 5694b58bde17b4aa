"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``dashbridge.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import (
    ComparisonFailedError,
    ConfigurationError,
    DecodeError,
    ProviderError,
    TransportError,
)
from .errors_parts.classification import classify_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ComparisonFailedError",
    "classify_exception",
]
