"""
Provider-agnostic interfaces (Protocols) for dashbridge.

Re-exports Protocols split into single-class modules under
``dashbridge.base.interfaces_parts`` while keeping imports stable.
"""

from __future__ import annotations

from .interfaces_parts import ChatEmbeddingProvider

__all__ = ["ChatEmbeddingProvider"]
