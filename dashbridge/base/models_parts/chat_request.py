"""
ChatRequestParameters DTO for provider-agnostic chat invocations.

Each provider maps these sampling controls onto its own wire or SDK names.
Temperature is passed through unvalidated; ``stream`` exists for wire
compatibility and is always False because streaming is not supported.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

DEFAULT_MAX_TOKENS = 1000
DEFAULT_TEMPERATURE = 0.7


@dataclass(frozen=True)
class ChatRequestParameters:
    """Sampling options for a chat completion.

    Attributes:
        max_tokens: Maximum completion tokens; omitted from the request when None.
        temperature: Sampling temperature (0.0-2.0 by convention); omitted when None.
        stream: Always False.
    """

    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    stream: bool = False

    @classmethod
    def defaults(cls) -> "ChatRequestParameters":
        """Parameters applied to single-prompt calls."""
        return cls(max_tokens=DEFAULT_MAX_TOKENS, temperature=DEFAULT_TEMPERATURE)

    def to_dict(self) -> Dict[str, Any]:
        return {"max_tokens": self.max_tokens, "temperature": self.temperature, "stream": self.stream}


__all__ = ["ChatRequestParameters", "DEFAULT_MAX_TOKENS", "DEFAULT_TEMPERATURE"]
