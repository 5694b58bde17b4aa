"""Pytest configuration for the dashbridge test suite.

Every test runs with the dashbridge environment variables cleared and the
static config file pointed at a path that does not exist, so a developer's
local ``dashbridge.json`` or exported API key never leaks into assertions.
"""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, Callable, Iterator, List, Optional, Sequence

import httpx
import pytest

from dashbridge.base.models import ChatMessage, ChatRequestParameters, ChatResult
from dashbridge.config import AIConfig
from dashbridge.dashscope import DashScopeHttpProvider

_ENV_VARS = (
    "DASHSCOPE_API_KEY",
    "DASHBRIDGE_ENV",
    "DASHBRIDGE_GATE_POLICY",
    "DASHBRIDGE_LOG_LEVEL",
    "DASHBRIDGE_LOG_FORMAT",
    "DASHBRIDGE_SERVICE_HOST",
    "DASHBRIDGE_SERVICE_PORT",
    "DASHBRIDGE_SERVICE_RELOAD",
    "DASHBRIDGE_HTTP_TIMEOUT_SECONDS",
    "DASHBRIDGE_CONNECT_TIMEOUT_SECONDS",
)

TEST_BASE_URL = "https://dashscope.test/api/v1/"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DASHBRIDGE_CONFIG_FILE", str(tmp_path / "absent.json"))
    yield


@pytest.fixture()
def valid_config() -> AIConfig:
    return AIConfig(
        endpoint="https://dashscope.test/compatible-mode/v1",
        api_key="sk-test-1234567890",
        deployment_name=None,
        model_name="qwen-max",
    )


class FakeProvider:
    """In-memory :class:`ChatEmbeddingProvider` recording every call.

    ``reply`` / ``vector`` are returned on success; ``error`` is raised from
    every operation instead when set.
    """

    def __init__(
        self,
        name: str,
        reply: str = "hello",
        vector: Optional[List[float]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._name = name
        self.reply = reply
        self.vector = vector if vector is not None else [0.1, 0.2, 0.3]
        self.error = error
        self.calls: List[str] = []

    @property
    def provider_name(self) -> str:
        return self._name

    async def get_chat_completion(self, prompt: str) -> str:
        self.calls.append(f"chat:{prompt}")
        if self.error is not None:
            raise self.error
        return self.reply

    async def get_chat_completions(
        self,
        parameters: Optional[ChatRequestParameters] = None,
        messages: Optional[Sequence[ChatMessage]] = None,
    ) -> ChatResult:
        self.calls.append("chat_completions")
        if self.error is not None:
            raise self.error
        return ChatResult(text=self.reply)

    async def get_embeddings(self, text: str) -> List[float]:
        self.calls.append(f"embeddings:{text}")
        if self.error is not None:
            raise self.error
        return list(self.vector)

    async def get_embedding(self, text: str) -> str:
        return ",".join(f"{v:.6f}" for v in await self.get_embeddings(text))


@pytest.fixture()
def fake_provider() -> Callable[..., FakeProvider]:
    """Factory fixture building :class:`FakeProvider` instances."""
    return FakeProvider


class RecordingHandler:
    """``httpx.MockTransport`` handler returning canned responses in order."""

    def __init__(self, *responses: httpx.Response) -> None:
        self._responses = list(responses)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) == 1:
            return self._responses[0]
        return self._responses.pop(0)

    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture()
def http_provider_factory() -> Callable[..., Any]:
    """Build a ``DashScopeHttpProvider`` backed by ``httpx.MockTransport``.

    Returns ``(provider, handler)``; ``handler.requests`` holds what was sent.
    """

    def _build(config: AIConfig, *responses: httpx.Response, headers: Optional[dict] = None):
        handler = RecordingHandler(*responses)
        client = httpx.AsyncClient(
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(handler),
            headers=headers or {},
        )
        return DashScopeHttpProvider(config, base_url=TEST_BASE_URL, client=client), handler

    return _build


@pytest.fixture()
def fake_sdk() -> Callable[..., SimpleNamespace]:
    """Build an object shaped like ``openai.AsyncOpenAI`` for the SDK provider.

    ``chat_result`` / ``embedding_result`` are returned as-is, or raised when
    they are exceptions. Keyword arguments of every call land in ``calls``.
    """

    def _build(chat_result: Any = None, embedding_result: Any = None) -> SimpleNamespace:
        calls: List[dict] = []

        async def _chat_create(**kwargs):
            calls.append({"op": "chat", **kwargs})
            if isinstance(chat_result, Exception):
                raise chat_result
            return chat_result

        async def _embeddings_create(**kwargs):
            calls.append({"op": "embeddings", **kwargs})
            if isinstance(embedding_result, Exception):
                raise embedding_result
            return embedding_result

        return SimpleNamespace(
            chat=SimpleNamespace(completions=SimpleNamespace(create=_chat_create)),
            embeddings=SimpleNamespace(create=_embeddings_create),
            calls=calls,
        )

    return _build
