"""
dashbridge base package

Exports the provider-agnostic contract, DTOs, error taxonomy and shared
infrastructure (logging, timeouts) used by both provider variants:
- Interfaces: :class:`ChatEmbeddingProvider`
- Models (DTOs): chat messages, request parameters, results, comparisons
- Errors: :class:`ProviderError` and its configuration/transport/decode family
"""

from .errors import (
    ComparisonFailedError,
    ConfigurationError,
    DecodeError,
    ErrorCode,
    ProviderError,
    TransportError,
    classify_exception,
)
from .interfaces import ChatEmbeddingProvider
from .logging import LogContext, get_logger, log_event
from .models import (
    ChatMessage,
    ChatRequestParameters,
    ChatResult,
    ComparisonResult,
    EmbeddingResult,
    ProviderOutcome,
    TokenUsage,
    default_conversation,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "ChatEmbeddingProvider",
    "ChatMessage",
    "ChatRequestParameters",
    "ChatResult",
    "TokenUsage",
    "EmbeddingResult",
    "ComparisonResult",
    "ProviderOutcome",
    "default_conversation",
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ComparisonFailedError",
    "classify_exception",
    "LogContext",
    "get_logger",
    "log_event",
    "TimeoutConfig",
    "get_timeout_config",
]
