"""DashScopeHttpProvider over ``httpx.MockTransport``."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from dashbridge.base.errors import ConfigurationError, DecodeError, TransportError
from dashbridge.base.http.client import aclose_all_clients
from dashbridge.base.interfaces import ChatEmbeddingProvider
from dashbridge.base.models import ChatMessage, ChatRequestParameters
from dashbridge.config import AIConfig
from dashbridge.dashscope import DashScopeHttpProvider

_CHAT_OK = {
    "output": {"text": "Hi there", "finish_reason": "stop"},
    "usage": {"input_tokens": 5, "output_tokens": 2, "total_tokens": 7},
    "request_id": "req-42",
}


def test_satisfies_protocol(valid_config):
    assert isinstance(DashScopeHttpProvider(valid_config), ChatEmbeddingProvider)  # nosec B101


def test_chat_posts_expected_payload(valid_config, http_provider_factory):
    provider, handler = http_provider_factory(valid_config, httpx.Response(200, json=_CHAT_OK))
    text = asyncio.run(provider.get_chat_completion("hello"))

    assert text == "Hi there"  # nosec B101 - asserts are appropriate in unit tests
    sent = handler.requests[-1]
    assert sent.method == "POST"  # nosec B101
    assert sent.url.path == "/api/v1/chat/completions"  # nosec B101
    assert handler.last_json() == {  # nosec B101
        "model": "qwen-max",
        "input": {
            "messages": [
                {"role": "system", "content": "You are a helpful assistant."},
                {"role": "user", "content": "hello"},
            ]
        },
        "parameters": {"max_tokens": 1000, "temperature": 0.7, "stream": False},
    }


def test_chat_completions_maps_metadata(valid_config, http_provider_factory):
    provider, handler = http_provider_factory(valid_config, httpx.Response(200, json=_CHAT_OK))
    messages = [ChatMessage("user", "a"), ChatMessage("assistant", "b"), ChatMessage("user", "c")]
    result = asyncio.run(provider.get_chat_completions(ChatRequestParameters(max_tokens=10), messages))

    assert result.finish_reason == "stop"  # nosec B101
    assert result.usage.total_tokens == 7  # nosec B101
    assert result.request_id == "req-42"  # nosec B101
    sent = handler.last_json()
    assert [m["content"] for m in sent["input"]["messages"]] == ["a", "b", "c"]  # nosec B101
    assert sent["parameters"] == {"max_tokens": 10, "stream": False}  # nosec B101


def test_missing_history_defaults_to_hello(valid_config, http_provider_factory):
    provider, handler = http_provider_factory(valid_config, httpx.Response(200, json=_CHAT_OK))
    asyncio.run(provider.get_chat_completions())
    assert handler.last_json()["input"]["messages"][-1] == {"role": "user", "content": "Hello"}  # nosec B101


def test_empty_model_name_uses_defaults(http_provider_factory):
    cfg = AIConfig(api_key="sk-1", deployment_name="dep-only")
    provider, handler = http_provider_factory(
        cfg,
        httpx.Response(200, json=_CHAT_OK),
        httpx.Response(200, json={"data": [{"embedding": [0.5]}]}),
    )
    asyncio.run(provider.get_chat_completion("x"))
    assert handler.last_json()["model"] == "qwen-plus"  # nosec B101
    asyncio.run(provider.get_embeddings("x"))
    assert handler.last_json()["model"] == "text-embedding-v1"  # nosec B101


def test_embeddings_and_display_string(valid_config, http_provider_factory):
    provider, handler = http_provider_factory(
        valid_config, httpx.Response(200, json={"data": [{"embedding": [0.1, 0.2, 0.3]}]})
    )
    assert asyncio.run(provider.get_embeddings("abc")) == [0.1, 0.2, 0.3]  # nosec B101
    assert handler.requests[-1].url.path == "/api/v1/embeddings"  # nosec B101
    assert handler.last_json() == {"model": "qwen-max", "input": {"text": "abc"}}  # nosec B101
    assert asyncio.run(provider.get_embedding("abc")) == "0.100000,0.200000,0.300000"  # nosec B101


def test_empty_embedding_data_is_decode_error(valid_config, http_provider_factory):
    provider, _ = http_provider_factory(valid_config, httpx.Response(200, json={"data": []}))
    with pytest.raises(DecodeError, match="could not extract embeddings"):
        asyncio.run(provider.get_embeddings("abc"))


def test_non_success_status_raises_before_decode(valid_config, http_provider_factory):
    # The body is valid chat JSON; a decode attempt would succeed if it ran.
    provider, _ = http_provider_factory(valid_config, httpx.Response(500, json=_CHAT_OK))
    with pytest.raises(TransportError) as info:
        asyncio.run(provider.get_chat_completion("hi"))
    assert info.value.status_code == 500  # nosec B101
    assert info.value.provider == "dashscope"  # nosec B101


def test_connection_failure_is_transport_error(valid_config):
    def _boom(request):
        raise httpx.ConnectError("refused", request=request)

    client = httpx.AsyncClient(base_url="https://dashscope.test/", transport=httpx.MockTransport(_boom))
    provider = DashScopeHttpProvider(valid_config, base_url="https://dashscope.test/", client=client)
    with pytest.raises(TransportError) as info:
        asyncio.run(provider.get_embeddings("x"))
    assert info.value.status_code is None  # nosec B101
    assert isinstance(info.value.raw, httpx.ConnectError)  # nosec B101


def test_missing_key_fails_before_any_request(http_provider_factory):
    provider, handler = http_provider_factory(AIConfig(model_name="qwen-plus"), httpx.Response(200, json=_CHAT_OK))
    with pytest.raises(ConfigurationError):
        asyncio.run(provider.get_chat_completion("hi"))
    assert handler.requests == []  # nosec B101


def test_no_model_selector_fails_before_any_request(http_provider_factory):
    provider, handler = http_provider_factory(AIConfig(api_key="sk-1"), httpx.Response(200, json=_CHAT_OK))
    with pytest.raises(ConfigurationError, match="neither deployment name nor model name configured"):
        asyncio.run(provider.get_embeddings("hi"))
    assert handler.requests == []  # nosec B101


def test_streaming_is_rejected(valid_config, http_provider_factory):
    provider, handler = http_provider_factory(valid_config, httpx.Response(200, json=_CHAT_OK))
    with pytest.raises(ConfigurationError):
        asyncio.run(provider.get_chat_completions(ChatRequestParameters(stream=True)))
    assert handler.requests == []  # nosec B101


def test_pooled_client_carries_auth_headers(valid_config):
    provider = DashScopeHttpProvider(valid_config, base_url="https://headers.test/v1")
    client = provider._http()
    try:
        assert client.headers["Authorization"] == "Bearer sk-test-1234567890"  # nosec B101
        assert client.headers["Accept"] == "application/json"  # nosec B101
        assert provider._http() is client  # nosec B101
    finally:
        asyncio.run(aclose_all_clients())
    assert client.is_closed  # nosec B101
