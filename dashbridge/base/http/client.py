"""Shared async HTTP client pool for providers.

Purpose:
    Keep one long-lived ``httpx.AsyncClient`` per ``(base_url, purpose)`` so
    the HTTP provider reuses pooled connections across requests. Timeouts
    derive exclusively from :func:`get_timeout_config`.

Headers:
    Default headers (authentication, ``Accept``) are fixed when the client is
    first created and are never mutated by later calls. Callers that need a
    different credential must use a different ``purpose``.

Lifecycle & cleanup:
    Async clients cannot be closed from an ``atexit`` hook, so the service
    awaits :func:`aclose_all_clients` from its shutdown handler. Tests may call
    it directly.
"""

from __future__ import annotations

import threading
from typing import Dict, Mapping, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.AsyncClient] = {}
_LOCK = threading.RLock()


def get_async_httpx_client(
    base_url: Optional[str],
    purpose: str,
    headers: Optional[Mapping[str, str]] = None,
) -> httpx.AsyncClient:
    """Return a pooled ``httpx.AsyncClient`` for the given base URL and purpose.

    Parameters:
        base_url: API base URL set on the client so callers can post relative
            paths. ``None`` groups clients under a shared key.
        purpose: Short string discriminating separate pools (e.g.
            ``"dashscope.default"``). Keep stable to maximize reuse.
        headers: Default headers applied on first creation only.

    Returns:
        A reusable ``httpx.AsyncClient`` instance.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        cfg = get_timeout_config()
        timeout = httpx.Timeout(cfg.http_timeout_seconds, connect=cfg.connect_timeout_seconds)
        kwargs = {"timeout": timeout, "headers": dict(headers or {})}
        if base_url:
            kwargs["base_url"] = base_url
        client = httpx.AsyncClient(**kwargs)
        _CLIENTS[key] = client
        return client


async def aclose_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        clients = list(_CLIENTS.values())
        _CLIENTS.clear()
    for c in clients:
        await c.aclose()


__all__ = ["get_async_httpx_client", "aclose_all_clients"]
