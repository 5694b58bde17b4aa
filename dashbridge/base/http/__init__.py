"""HTTP utilities for providers (shared async client pool)."""

from .client import aclose_all_clients, get_async_httpx_client

__all__ = ["get_async_httpx_client", "aclose_all_clients"]
