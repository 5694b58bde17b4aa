"""Timeout configuration for outbound provider calls.

Centralizes the per-call deadline applied by both providers: the SDK client
and the pooled ``httpx.AsyncClient`` are constructed with
``get_timeout_config().http_timeout_seconds``. No other module introduces
numeric timeouts.

Supported environment variables (optional):
    DASHBRIDGE_HTTP_TIMEOUT_SECONDS
    DASHBRIDGE_CONNECT_TIMEOUT_SECONDS
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

HTTP_TIMEOUT_ENV = "DASHBRIDGE_HTTP_TIMEOUT_SECONDS"
CONNECT_TIMEOUT_ENV = "DASHBRIDGE_CONNECT_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write deadline for a single provider call.
        connect_timeout_seconds: Deadline for establishing the connection.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0


_CACHED: Optional[TimeoutConfig] = None
_ENV_GUARD: Optional[str] = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from ``name``; fall back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`.

    The cache is refreshed when the relevant environment variables change so
    tests can adjust values with ``monkeypatch.setenv``.
    """
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = f"{os.getenv(HTTP_TIMEOUT_ENV, '')}/{os.getenv(CONNECT_TIMEOUT_ENV, '')}"
    if _CACHED is not None and guard == _ENV_GUARD:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, defaults.http_timeout_seconds),
        connect_timeout_seconds=_parse_env_float(CONNECT_TIMEOUT_ENV, defaults.connect_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config", "HTTP_TIMEOUT_ENV", "CONNECT_TIMEOUT_ENV"]
