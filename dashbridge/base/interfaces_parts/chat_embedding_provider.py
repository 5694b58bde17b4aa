"""ChatEmbeddingProvider Protocol (single-class module).

Defines the contract shared by the SDK-backed and HTTP-backed providers. The
comparator and the service layer depend only on this Protocol, never on a
concrete provider class.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, runtime_checkable

from ..models import ChatMessage, ChatRequestParameters, ChatResult


@runtime_checkable
class ChatEmbeddingProvider(Protocol):
    """Async chat-completion and text-embedding capability.

    Implementations raise :class:`~dashbridge.base.errors.ProviderError`
    subclasses on failure (configuration, transport, decode) and never return
    placeholder content.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"`` or ``"dashscope"``."""
        ...

    async def get_chat_completion(self, prompt: str) -> str:
        """Complete ``[system, user: prompt]`` and return the text."""
        ...

    async def get_chat_completions(
        self,
        parameters: Optional[ChatRequestParameters] = None,
        messages: Optional[Sequence[ChatMessage]] = None,
    ) -> ChatResult:
        """Complete an explicit conversation with caller-supplied options."""
        ...

    async def get_embeddings(self, text: str) -> List[float]:
        """Return the embedding vector for ``text``."""
        ...

    async def get_embedding(self, text: str) -> str:
        """Return the embedding rendered as comma-joined fixed-precision text."""
        ...
