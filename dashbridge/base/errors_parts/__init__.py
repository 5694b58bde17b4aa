"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `dashbridge.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    ComparisonFailedError,
    ConfigurationError,
    DecodeError,
    ProviderError,
    TransportError,
)
from .classification import classify_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ComparisonFailedError",
    "classify_exception",
]
