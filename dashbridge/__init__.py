"""dashbridge package

Chat completion and text embedding through two interchangeable providers:
the OpenAI SDK pointed at DashScope's compatible endpoint, and a direct
DashScope HTTP client with its own wire codec.

Public API (re-exported):
    - Version: ``__version__``
    - Contract: :class:`ChatEmbeddingProvider`
    - Providers: :class:`OpenAISdkProvider`, :class:`DashScopeHttpProvider`
    - Comparison: :class:`ProviderComparator`
    - Configuration: :class:`AIConfig`, :func:`load_ai_config`
    - Exceptions: :class:`ProviderError` and subclasses, :class:`ErrorCode`
"""

from .base.comparison import ProviderComparator
from .base.errors import (
    ComparisonFailedError,
    ConfigurationError,
    DecodeError,
    ErrorCode,
    ProviderError,
    TransportError,
)
from .base.interfaces import ChatEmbeddingProvider
from .base.models import ChatMessage, ChatRequestParameters, ChatResult, ComparisonResult
from .config import AIConfig, load_ai_config
from .dashscope import DashScopeHttpProvider
from .openai import OpenAISdkProvider

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChatEmbeddingProvider",
    "OpenAISdkProvider",
    "DashScopeHttpProvider",
    "ProviderComparator",
    "ChatMessage",
    "ChatRequestParameters",
    "ChatResult",
    "ComparisonResult",
    "AIConfig",
    "load_ai_config",
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ComparisonFailedError",
]
