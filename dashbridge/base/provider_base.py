"""BaseChatEmbeddingProvider: shared behaviour of the SDK and HTTP providers.

Purpose:
- Implement the parts of :class:`ChatEmbeddingProvider` that do not depend on
  the transport: the single-prompt convenience call, the embedding display
  string, and the configuration preconditions every call must pass.

Preconditions (checked before any network I/O):
- An API key is configured.
- At least one of ``deployment_name`` / ``model_name`` is configured.

Subclasses implement:
- ``provider_name``
- ``get_chat_completions(parameters, messages)``
- ``get_embeddings(text)``
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..config.ai_config import AIConfig
from .constants import MISSING_API_KEY_ERROR, NO_MODEL_SELECTOR_ERROR, STREAMING_UNSUPPORTED_ERROR
from .errors import ConfigurationError
from .logging import get_logger
from .models import ChatMessage, ChatRequestParameters, ChatResult, default_conversation
from .utils.embeddings import format_embedding

# Prompt used by get_chat_completions when no history is supplied.
FALLBACK_PROMPT = "Hello"


class BaseChatEmbeddingProvider:
    """Reusable base for providers sharing one immutable :class:`AIConfig`."""

    def __init__(self, config: AIConfig, *, logger_name: str) -> None:
        self._config = config
        self._logger = get_logger(logger_name)

    # ----- Abstract surface -----
    @property
    def provider_name(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    async def get_chat_completions(
        self,
        parameters: Optional[ChatRequestParameters] = None,
        messages: Optional[Sequence[ChatMessage]] = None,
    ) -> ChatResult:  # pragma: no cover - abstract
        raise NotImplementedError

    async def get_embeddings(self, text: str) -> List[float]:  # pragma: no cover - abstract
        raise NotImplementedError

    # ----- Shared operations -----
    @property
    def config(self) -> AIConfig:
        return self._config

    async def get_chat_completion(self, prompt: str) -> str:
        """Complete ``[system, user: prompt]`` with the default sampling options."""
        result = await self.get_chat_completions(ChatRequestParameters.defaults(), default_conversation(prompt))
        return result.text

    async def get_embedding(self, text: str) -> str:
        """Return the embedding as comma-joined 6-digit decimals."""
        return format_embedding(await self.get_embeddings(text))

    # ----- helpers -----
    def _require_credentials(self) -> None:
        if not self._config.api_key:
            raise ConfigurationError(MISSING_API_KEY_ERROR, provider=self.provider_name)

    def _resolve_target(self) -> str:
        """Return ``deployment_name``, else ``model_name``, else raise.

        Raises:
            ConfigurationError: When neither selector is configured.
        """
        if self._config.deployment_name:
            return self._config.deployment_name
        if self._config.model_name:
            return self._config.model_name
        raise ConfigurationError(NO_MODEL_SELECTOR_ERROR, provider=self.provider_name)

    def _check_preconditions(self) -> str:
        """Run every configuration check and return the resolved target name."""
        self._require_credentials()
        return self._resolve_target()

    def _normalize_chat_inputs(
        self,
        parameters: Optional[ChatRequestParameters],
        messages: Optional[Sequence[ChatMessage]],
    ) -> tuple[ChatRequestParameters, List[ChatMessage]]:
        params = parameters or ChatRequestParameters()
        if params.stream:
            raise ConfigurationError(STREAMING_UNSUPPORTED_ERROR, provider=self.provider_name)
        history = list(messages) if messages else default_conversation(FALLBACK_PROMPT)
        return params, history


__all__ = ["BaseChatEmbeddingProvider", "FALLBACK_PROMPT"]
