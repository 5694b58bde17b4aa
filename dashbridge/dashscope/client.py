"""DashScope provider speaking the REST API directly over httpx.

Purpose:
- Implement :class:`ChatEmbeddingProvider` without a vendor SDK. Requests are
  built and responses parsed by :mod:`dashbridge.dashscope.codec`.

Wire:
- ``POST {base_url}/chat/completions`` and ``POST {base_url}/embeddings``.
- ``Authorization: Bearer <api_key>`` and ``Accept: application/json`` are set
  once when the pooled client is created, never per request.

Model selection:
- Preconditions match the SDK provider (API key plus one of
  ``deployment_name`` / ``model_name``), but the wire ``model`` comes from
  ``model_name`` only, falling back to ``qwen-plus`` for chat and
  ``text-embedding-v1`` for embeddings.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

import httpx

from ..base.errors import TransportError
from ..base.http import get_async_httpx_client
from ..base.logging import LogContext, log_event
from ..base.models import ChatMessage, ChatRequestParameters, ChatResult
from ..base.provider_base import BaseChatEmbeddingProvider
from ..config.ai_config import AIConfig
from ..config.defaults import DASHSCOPE_BASE_URL, DASHSCOPE_CHAT_PATH, DASHSCOPE_EMBEDDINGS_PATH
from . import codec
from .wire_models import DashScopeChatRequest, DashScopeChatResponse

__all__ = ["DashScopeHttpProvider"]


class DashScopeHttpProvider(BaseChatEmbeddingProvider):
    """HTTP-backed provider for the DashScope API.

    Parameters:
        config: Shared immutable configuration snapshot.
        base_url: API root; chat and embedding paths are posted relative to it.
        client: Optional pre-built ``httpx.AsyncClient`` (tests pass one backed
            by ``httpx.MockTransport``). When omitted, a pooled client keyed by
            base URL is used.
    """

    def __init__(
        self,
        config: AIConfig,
        *,
        base_url: str = DASHSCOPE_BASE_URL,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(config, logger_name="dashbridge.dashscope")
        self._base_url = base_url.rstrip("/") + "/"
        self._client = client

    @property
    def provider_name(self) -> str:
        return codec.PROVIDER

    def _http(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client
        headers = {
            "Authorization": f"Bearer {self._config.api_key or ''}",
            "Accept": "application/json",
        }
        return get_async_httpx_client(self._base_url, "dashscope.default", headers=headers)

    async def _post(self, path: str, payload: dict, *, model: str) -> httpx.Response:
        """POST ``payload`` and return the response once it is known to be 2xx."""
        try:
            response = await self._http().post(path, json=payload)
        except httpx.HTTPError as e:
            raise TransportError(
                f"request to {path} failed: {e}",
                provider=self.provider_name,
                model=model,
                raw=e,
            ) from e
        codec.ensure_success(response, model=model)
        return response

    # ----- chat -----
    async def get_raw_response(self, request: DashScopeChatRequest) -> DashScopeChatResponse:
        """Send a prepared wire request and return the typed wire response."""
        response = await self._post(DASHSCOPE_CHAT_PATH, codec.encode_chat_request(request), model=request.model)
        return codec.decode_chat_response(response.content, model=request.model)

    async def get_chat_completions(
        self,
        parameters: Optional[ChatRequestParameters] = None,
        messages: Optional[Sequence[ChatMessage]] = None,
    ) -> ChatResult:
        self._check_preconditions()
        params, history = self._normalize_chat_inputs(parameters, messages)
        model = codec.chat_model(self._config.model_name)
        ctx = LogContext(provider=self.provider_name, model=model)
        log_event(self._logger, "chat.start", ctx, messages=len(history))
        started = time.perf_counter()
        try:
            raw = await self.get_raw_response(codec.build_chat_request(model, history, params))
        except Exception as e:
            log_event(self._logger, "chat.error", ctx, level=logging.ERROR, error=str(e), error_type=type(e).__name__)
            raise
        result = codec.to_chat_result(raw)
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

    # ----- embeddings -----
    async def get_embeddings(self, text: str) -> List[float]:
        self._check_preconditions()
        model = codec.embedding_model(self._config.model_name)
        ctx = LogContext(provider=self.provider_name, model=model)
        request = codec.build_embedding_request(model, text)
        log_event(self._logger, "embeddings.start", ctx, chars=len(text))
        try:
            response = await self._post(DASHSCOPE_EMBEDDINGS_PATH, codec.encode_embedding_request(request), model=model)
            vector = codec.extract_embeddings(response.content, model=model)
        except Exception as e:
            log_event(self._logger, "embeddings.error", ctx, level=logging.ERROR, error=str(e), error_type=type(e).__name__)
            raise
        log_event(self._logger, "embeddings.end", ctx, dimensions=len(vector))
        return vector
