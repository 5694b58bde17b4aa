"""
Structured provider error exception types.

`ProviderError` wraps provider-specific failures with a normalized `ErrorCode`.
The subclasses pin the code for the three failure families a caller has to
tell apart: missing configuration, a failed remote call, and a response body
that does not match the expected shape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"dashscope"``).
        model: Optional model name associated with the failure.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Return the structured error payload (kind + message) for callers."""
        return {
            "error": self.code.value,
            "message": self.message,
            "provider": self.provider,
            "model": self.model,
        }


class ConfigurationError(ProviderError):
    """Missing credential, endpoint, or model selector."""

    def __init__(self, message: str, *, provider: str = "config", model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.CONFIGURATION, message=message, provider=provider, model=model)


class TransportError(ProviderError):
    """Non-success status or connection failure on the remote call.

    Attributes:
        status_code: HTTP status returned by the remote service, when one was
            received at all.
    """

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        model: Optional[str] = None,
        status_code: Optional[int] = None,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(code=ErrorCode.TRANSPORT, message=message, provider=provider, model=model, raw=raw)
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["status_code"] = self.status_code
        return payload


class DecodeError(ProviderError):
    """Response body could not be decoded into the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        model: Optional[str] = None,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(code=ErrorCode.DECODE, message=message, provider=provider, model=model, raw=raw)


class ComparisonFailedError(ProviderError):
    """Every provider in a comparison failed.

    Attributes:
        result: The :class:`~dashbridge.base.models.ComparisonResult` holding
            each provider's failure, so callers can still report them all.
    """

    def __init__(self, message: str, *, result: Any) -> None:
        super().__init__(code=ErrorCode.COMPARISON_FAILED, message=message, provider="comparator")
        self.result = result

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["outcomes"] = self.result.to_dict()
        return payload


__all__ = ["ProviderError", "ConfigurationError", "TransportError", "DecodeError", "ComparisonFailedError"]
