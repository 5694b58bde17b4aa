"""One-class-per-file DTO implementations re-exported by ``base.models``."""

from .message import ChatMessage, DEFAULT_SYSTEM_PROMPT, Role, VALID_ROLES, default_conversation
from .chat_request import ChatRequestParameters, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .chat_result import ChatResult, TokenUsage
from .comparison_result import ComparisonResult, ProviderOutcome

__all__ = [
    "ChatMessage",
    "Role",
    "VALID_ROLES",
    "DEFAULT_SYSTEM_PROMPT",
    "default_conversation",
    "ChatRequestParameters",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "ChatResult",
    "TokenUsage",
    "ComparisonResult",
    "ProviderOutcome",
]
