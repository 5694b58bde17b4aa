"""
ChatResult DTO representing a normalized chat completion.

Both providers return this shape: the SDK provider maps the SDK completion
object into it, the HTTP provider maps the decoded wire response. Results are
produced fresh per call and owned by the caller.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class TokenUsage:
    """Token accounting reported by the provider."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class ChatResult:
    """Provider-agnostic chat completion.

    Attributes:
        text: Completion text.
        finish_reason: Provider finish reason (``"stop"``, ``"length"``, ...).
        usage: Token usage.
        request_id: Upstream request/response identifier.
    """

    text: str
    finish_reason: str = ""
    usage: TokenUsage = field(default_factory=TokenUsage)
    request_id: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the result."""
        return asdict(self)


__all__ = ["ChatResult", "TokenUsage"]
