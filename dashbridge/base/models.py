"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``dashbridge.base.models_parts`` so callers have one stable import path.
"""
from __future__ import annotations

from typing import List

from .models_parts.message import ChatMessage, DEFAULT_SYSTEM_PROMPT, Role, VALID_ROLES, default_conversation
from .models_parts.chat_request import ChatRequestParameters, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .models_parts.chat_result import ChatResult, TokenUsage
from .models_parts.comparison_result import ComparisonResult, ProviderOutcome

# Ordered embedding vector; its length is whatever the provider returns.
EmbeddingResult = List[float]

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
    "EmbeddingResult",
    "ComparisonResult",
    "ProviderOutcome",
]
