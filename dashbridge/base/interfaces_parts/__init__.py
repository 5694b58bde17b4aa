"""Single-class Protocol modules re-exported by ``base.interfaces``."""

from .chat_embedding_provider import ChatEmbeddingProvider

__all__ = ["ChatEmbeddingProvider"]
