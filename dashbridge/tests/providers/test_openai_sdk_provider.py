"""OpenAISdkProvider against a fake ``AsyncOpenAI``-shaped client."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import httpx
import openai
import pytest

from dashbridge.base.errors import ConfigurationError, DecodeError, TransportError
from dashbridge.base.interfaces import ChatEmbeddingProvider
from dashbridge.base.models import ChatMessage, ChatRequestParameters
from dashbridge.config import AIConfig
from dashbridge.openai import OpenAISdkProvider


def _completion(text="pong", finish_reason="stop", usage=(3, 1, 4), completion_id="chatcmpl-1"):
    return SimpleNamespace(
        id=completion_id,
        choices=[SimpleNamespace(message=SimpleNamespace(role="assistant", content=text), finish_reason=finish_reason)],
        usage=SimpleNamespace(prompt_tokens=usage[0], completion_tokens=usage[1], total_tokens=usage[2]),
    )


def _embedding(vector):
    return SimpleNamespace(data=[SimpleNamespace(embedding=vector, index=0)])


def test_satisfies_protocol(valid_config):
    assert isinstance(OpenAISdkProvider(valid_config), ChatEmbeddingProvider)  # nosec B101


def test_single_prompt_builds_two_message_conversation(valid_config, fake_sdk):
    sdk = fake_sdk(chat_result=_completion())
    provider = OpenAISdkProvider(valid_config, client=sdk)
    assert asyncio.run(provider.get_chat_completion("ping")) == "pong"  # nosec B101 - asserts are appropriate in unit tests
    (call,) = sdk.calls
    assert call["model"] == "qwen-max"  # nosec B101
    assert call["messages"] == [  # nosec B101
        {"role": "system", "content": "You are a helpful assistant."},
        {"role": "user", "content": "ping"},
    ]
    assert call["max_tokens"] == 1000 and call["temperature"] == 0.7  # nosec B101


def test_deployment_name_preferred_over_model_name(fake_sdk):
    cfg = AIConfig(endpoint="https://e", api_key="sk-1", deployment_name="dep", model_name="qwen-max")
    sdk = fake_sdk(chat_result=_completion(), embedding_result=_embedding([0.1]))
    provider = OpenAISdkProvider(cfg, client=sdk)
    asyncio.run(provider.get_chat_completion("x"))
    asyncio.run(provider.get_embeddings("x"))
    assert [c["model"] for c in sdk.calls] == ["dep", "dep"]  # nosec B101


def test_neither_selector_is_configuration_error(fake_sdk):
    sdk = fake_sdk(chat_result=_completion())
    provider = OpenAISdkProvider(AIConfig(endpoint="https://e", api_key="sk-1"), client=sdk)
    with pytest.raises(ConfigurationError, match="neither deployment name nor model name configured"):
        asyncio.run(provider.get_chat_completion("x"))
    assert sdk.calls == []  # nosec B101


def test_missing_key_is_configuration_error(fake_sdk):
    sdk = fake_sdk(embedding_result=_embedding([0.1]))
    provider = OpenAISdkProvider(AIConfig(endpoint="https://e", model_name="m"), client=sdk)
    with pytest.raises(ConfigurationError):
        asyncio.run(provider.get_embeddings("x"))
    assert sdk.calls == []  # nosec B101


def test_missing_endpoint_fails_when_client_is_built():
    provider = OpenAISdkProvider(AIConfig(api_key="sk-1", model_name="m"))
    with pytest.raises(ConfigurationError, match="endpoint"):
        asyncio.run(provider.get_chat_completion("x"))


def test_chat_completions_maps_metadata_and_options(valid_config, fake_sdk):
    sdk = fake_sdk(chat_result=_completion(text="done", finish_reason="length", usage=(10, 20, 30), completion_id="id-9"))
    provider = OpenAISdkProvider(valid_config, client=sdk)
    messages = [ChatMessage("system", "s"), ChatMessage("user", "u")]
    result = asyncio.run(provider.get_chat_completions(ChatRequestParameters(temperature=0.0), messages))

    assert result.text == "done"  # nosec B101
    assert result.finish_reason == "length"  # nosec B101
    assert (result.usage.input_tokens, result.usage.output_tokens, result.usage.total_tokens) == (10, 20, 30)  # nosec B101
    assert result.request_id == "id-9"  # nosec B101
    (call,) = sdk.calls
    assert "max_tokens" not in call  # nosec B101
    assert call["temperature"] == 0.0  # nosec B101


def test_missing_usage_defaults_to_zero(valid_config, fake_sdk):
    completion = _completion()
    completion.usage = None
    provider = OpenAISdkProvider(valid_config, client=fake_sdk(chat_result=completion))
    result = asyncio.run(provider.get_chat_completions())
    assert result.usage.total_tokens == 0  # nosec B101


def test_empty_choices_is_decode_error(valid_config, fake_sdk):
    provider = OpenAISdkProvider(valid_config, client=fake_sdk(chat_result=SimpleNamespace(id="x", choices=[], usage=None)))
    with pytest.raises(DecodeError):
        asyncio.run(provider.get_chat_completion("x"))


def test_embeddings_returned_in_order(valid_config, fake_sdk):
    sdk = fake_sdk(embedding_result=_embedding([0.25, -0.5, 1.0]))
    provider = OpenAISdkProvider(valid_config, client=sdk)
    assert asyncio.run(provider.get_embeddings("abc")) == [0.25, -0.5, 1.0]  # nosec B101
    assert sdk.calls[0]["input"] == "abc"  # nosec B101
    assert asyncio.run(provider.get_embedding("abc")) == "0.250000,-0.500000,1.000000"  # nosec B101


def test_empty_embedding_is_decode_error(valid_config, fake_sdk):
    provider = OpenAISdkProvider(valid_config, client=fake_sdk(embedding_result=SimpleNamespace(data=[])))
    with pytest.raises(DecodeError, match="could not extract embeddings"):
        asyncio.run(provider.get_embeddings("abc"))


def test_sdk_status_error_becomes_transport_error(valid_config, fake_sdk):
    request = httpx.Request("POST", "https://e/chat/completions")
    response = httpx.Response(429, request=request, json={"error": {"message": "slow down"}})
    sdk_error = openai.RateLimitError("slow down", response=response, body=None)
    provider = OpenAISdkProvider(valid_config, client=fake_sdk(chat_result=sdk_error))

    with pytest.raises(TransportError) as info:
        asyncio.run(provider.get_chat_completion("x"))
    assert info.value.status_code == 429  # nosec B101
    assert info.value.raw is sdk_error  # nosec B101
    assert info.value.__cause__ is sdk_error  # nosec B101


def test_sdk_connection_error_becomes_transport_error(valid_config, fake_sdk):
    sdk_error = openai.APIConnectionError(request=httpx.Request("POST", "https://e/embeddings"))
    provider = OpenAISdkProvider(valid_config, client=fake_sdk(embedding_result=sdk_error))
    with pytest.raises(TransportError) as info:
        asyncio.run(provider.get_embeddings("x"))
    assert info.value.status_code is None  # nosec B101


def test_lazy_client_uses_endpoint_and_key(valid_config):
    provider = OpenAISdkProvider(valid_config)
    client = provider._sdk()
    assert isinstance(client, openai.AsyncOpenAI)  # nosec B101
    assert str(client.base_url).startswith("https://dashscope.test/compatible-mode/v1")  # nosec B101
    assert client.api_key == "sk-test-1234567890"  # nosec B101
    assert provider._sdk() is client  # nosec B101
