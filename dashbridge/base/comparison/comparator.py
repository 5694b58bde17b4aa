"""ProviderComparator: run the same request against several providers at once.

Purpose:
- Issue one logical request (a prompt, or text to embed) to every configured
  provider concurrently and report each outcome side by side.

Semantics:
- All calls are started before any is awaited; the comparator waits for all
  of them and never short-circuits on the first failure.
- A failing provider is recorded as a failed :class:`ProviderOutcome` and does
  not hide another provider's success.
- The comparison as a whole fails (:class:`ComparisonFailedError`) only when
  every provider failed.

The comparator depends only on :class:`ChatEmbeddingProvider`.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Dict, Sequence, Tuple

from ..errors import ComparisonFailedError, ProviderError, classify_exception
from ..interfaces import ChatEmbeddingProvider
from ..logging import get_logger, log_event
from ..models import ComparisonResult, ProviderOutcome

Call = Callable[[ChatEmbeddingProvider], Awaitable[Any]]


def describe_failure(exc: BaseException) -> Dict[str, Any]:
    """Return the structured ``{"error": kind, "message": ...}`` for ``exc``."""
    if isinstance(exc, ProviderError):
        payload = exc.to_dict()
    else:
        payload = {"error": "unknown", "message": str(exc) or type(exc).__name__}
    if isinstance(exc, Exception):
        payload["category"] = classify_exception(exc).value
    return payload


class ProviderComparator:
    """Concurrent fan-out over a fixed set of providers.

    Args:
        providers: Providers to compare; names must be unique because results
            are keyed by ``provider_name``.
    """

    def __init__(self, providers: Sequence[ChatEmbeddingProvider]) -> None:
        names = [p.provider_name for p in providers]
        if len(set(names)) != len(names):
            raise ValueError(f"provider names must be unique, got {names}")
        if not providers:
            raise ValueError("at least one provider is required")
        self._providers = list(providers)
        self._logger = get_logger("dashbridge.comparator")

    @property
    def provider_names(self) -> list[str]:
        return [p.provider_name for p in self._providers]

    async def compare_chat(self, prompt: str) -> ComparisonResult:
        """Ask every provider to complete ``prompt``; values are response texts."""
        return await self._run("chat", lambda p: p.get_chat_completion(prompt))

    async def compare_embeddings(self, text: str) -> ComparisonResult:
        """Embed ``text`` with every provider; values are float vectors."""
        return await self._run("embeddings", lambda p: p.get_embeddings(text))

    async def _timed(self, provider: ChatEmbeddingProvider, call: Call) -> Tuple[Any, float]:
        started = time.perf_counter()
        try:
            value = await call(provider)
        except Exception as e:
            # latency rides on the exception so failures are timed too
            e.latency_ms = round((time.perf_counter() - started) * 1000, 2)  # type: ignore[attr-defined]
            raise
        return value, round((time.perf_counter() - started) * 1000, 2)

    async def _run(self, operation: str, call: Call) -> ComparisonResult:
        tasks = [asyncio.ensure_future(self._timed(p, call)) for p in self._providers]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        outcomes: Dict[str, ProviderOutcome] = {}
        for provider, result in zip(self._providers, results):
            name = provider.provider_name
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                outcomes[name] = ProviderOutcome(
                    provider=name,
                    error=describe_failure(result),
                    latency_ms=getattr(result, "latency_ms", None),
                )
            else:
                value, latency_ms = result
                outcomes[name] = ProviderOutcome(provider=name, value=value, latency_ms=latency_ms)

        comparison = ComparisonResult(outcomes=outcomes)
        log_event(
            self._logger,
            "compare.end",
            level=logging.WARNING if comparison.failed else logging.INFO,
            operation=operation,
            succeeded=comparison.succeeded,
            failed=comparison.failed,
        )
        if comparison.all_failed:
            raise ComparisonFailedError(f"all providers failed the {operation} comparison", result=comparison)
        return comparison


__all__ = ["ProviderComparator", "describe_failure"]
