"""SDK-backed provider using the official ``openai`` client library.

The DashScope compatible-mode endpoint speaks the OpenAI chat/embeddings API,
so the vendor SDK is used as an opaque transport: this module only resolves
the target model, shapes messages, and maps SDK results and exceptions onto
dashbridge's DTOs and error taxonomy.

Target resolution: ``deployment_name`` first, else ``model_name``, else
:class:`ConfigurationError`. The SDK client is created lazily on first use
because it embeds the endpoint, which may legitimately be absent until a call
is actually made.
"""

from __future__ import annotations

import logging
import time
from typing import Any, List, Optional, Sequence

from openai import APIConnectionError, APIStatusError, APITimeoutError, AsyncOpenAI

from ..base.constants import MISSING_ENDPOINT_ERROR
from ..base.errors import ConfigurationError, DecodeError, TransportError
from ..base.logging import LogContext, log_event
from ..base.models import ChatMessage, ChatRequestParameters, ChatResult, TokenUsage
from ..base.provider_base import BaseChatEmbeddingProvider
from ..base.timeouts import get_timeout_config
from ..config.ai_config import AIConfig

__all__ = ["OpenAISdkProvider"]


class OpenAISdkProvider(BaseChatEmbeddingProvider):
    """Chat/embedding provider wrapping :class:`openai.AsyncOpenAI`.

    Args:
        config: Shared immutable configuration snapshot.
        client: Optional pre-built SDK client; tests pass a fake exposing
            ``chat.completions.create`` and ``embeddings.create``.
    """

    def __init__(self, config: AIConfig, *, client: Optional[Any] = None) -> None:
        super().__init__(config, logger_name="dashbridge.openai")
        self._client = client

    @property
    def provider_name(self) -> str:
        return "openai"

    # SDK client factory -------------------------------------------------
    def _sdk(self) -> Any:
        if self._client is None:
            if not self._config.endpoint:
                raise ConfigurationError(MISSING_ENDPOINT_ERROR, provider=self.provider_name)
            self._client = AsyncOpenAI(
                api_key=self._config.api_key,
                base_url=self._config.endpoint,
                timeout=get_timeout_config().http_timeout_seconds,
                max_retries=0,
            )
        return self._client

    def _translate(self, exc: Exception, model: str) -> Exception:
        """Map SDK exceptions onto :class:`TransportError`; leave others untouched."""
        if isinstance(exc, APIStatusError):
            return TransportError(
                f"HTTP {exc.status_code}: {exc.message}",
                provider=self.provider_name,
                model=model,
                status_code=exc.status_code,
                raw=exc,
            )
        if isinstance(exc, (APIConnectionError, APITimeoutError)):
            return TransportError(str(exc) or type(exc).__name__, provider=self.provider_name, model=model, raw=exc)
        return exc

    # ----- chat -----
    async def get_chat_completions(
        self,
        parameters: Optional[ChatRequestParameters] = None,
        messages: Optional[Sequence[ChatMessage]] = None,
    ) -> ChatResult:
        target = self._check_preconditions()
        params, history = self._normalize_chat_inputs(parameters, messages)
        ctx = LogContext(provider=self.provider_name, model=target)
        kwargs: dict = {"model": target, "messages": [m.to_dict() for m in history]}
        if params.max_tokens is not None:
            kwargs["max_tokens"] = params.max_tokens
        if params.temperature is not None:
            kwargs["temperature"] = params.temperature

        log_event(self._logger, "chat.start", ctx, messages=len(history))
        started = time.perf_counter()
        try:
            completion = await self._sdk().chat.completions.create(**kwargs)
        except Exception as e:
            err = self._translate(e, target)
            log_event(self._logger, "chat.error", ctx, level=logging.ERROR, error=str(err), error_type=type(err).__name__)
            if err is e:
                raise
            raise err from e

        result = self._to_chat_result(completion, target)
        log_event(
            self._logger,
            "chat.end",
            ctx,
            request_id=result.request_id or None,
            finish_reason=result.finish_reason or None,
            total_tokens=result.usage.total_tokens,
            latency_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return result

    def _to_chat_result(self, completion: Any, model: str) -> ChatResult:
        choices = getattr(completion, "choices", None) or []
        if not choices:
            raise DecodeError("chat completion returned no choices", provider=self.provider_name, model=model)
        choice = choices[0]
        message = getattr(choice, "message", None)
        text = getattr(message, "content", None)
        if text is None:
            raise DecodeError("chat completion returned no message content", provider=self.provider_name, model=model)
        usage = getattr(completion, "usage", None)
        return ChatResult(
            text=text,
            finish_reason=getattr(choice, "finish_reason", None) or "",
            usage=TokenUsage(
                input_tokens=getattr(usage, "prompt_tokens", None) or 0,
                output_tokens=getattr(usage, "completion_tokens", None) or 0,
                total_tokens=getattr(usage, "total_tokens", None) or 0,
            ),
            request_id=getattr(completion, "id", None) or "",
        )

    # ----- embeddings -----
    async def get_embeddings(self, text: str) -> List[float]:
        target = self._check_preconditions()
        ctx = LogContext(provider=self.provider_name, model=target)
        log_event(self._logger, "embeddings.start", ctx, chars=len(text))
        try:
            response = await self._sdk().embeddings.create(model=target, input=text)
        except Exception as e:
            err = self._translate(e, target)
            log_event(self._logger, "embeddings.error", ctx, level=logging.ERROR, error=str(err), error_type=type(err).__name__)
            if err is e:
                raise
            raise err from e

        data = getattr(response, "data", None) or []
        vector = list(getattr(data[0], "embedding", None) or []) if data else []
        if not vector:
            raise DecodeError("could not extract embeddings from SDK response", provider=self.provider_name, model=target)
        log_event(self._logger, "embeddings.end", ctx, dimensions=len(vector))
        return [float(v) for v in vector]
