"""
Comparison result DTOs produced by the parallel comparator.

A `ComparisonResult` maps each provider name to a `ProviderOutcome`. An outcome
is either a success carrying the provider's value or a failure carrying the
error kind and message. The two outcomes are independent of each other.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ProviderOutcome:
    """Outcome of one provider call inside a comparison.

    Attributes:
        provider: Provider name the outcome belongs to.
        value: Success payload (text, embedding vector, ...) or None on failure.
        error: ``{"error": kind, "message": ...}`` on failure, else None.
        latency_ms: Wall-clock duration of the call.
    """

    provider: str
    value: Any = None
    error: Optional[Dict[str, Any]] = None
    latency_ms: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"ok": self.ok, "latency_ms": self.latency_ms}
        if self.ok:
            data["value"] = self.value
        else:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class ComparisonResult:
    """Per-provider outcomes keyed by provider name."""

    outcomes: Dict[str, ProviderOutcome] = field(default_factory=dict)

    def __getitem__(self, provider: str) -> ProviderOutcome:
        return self.outcomes[provider]

    @property
    def succeeded(self) -> List[str]:
        return [name for name, outcome in self.outcomes.items() if outcome.ok]

    @property
    def failed(self) -> List[str]:
        return [name for name, outcome in self.outcomes.items() if not outcome.ok]

    @property
    def all_failed(self) -> bool:
        return bool(self.outcomes) and not self.succeeded

    def to_dict(self) -> Dict[str, Any]:
        return {name: outcome.to_dict() for name, outcome in self.outcomes.items()}


__all__ = ["ProviderOutcome", "ComparisonResult"]
