from __future__ import annotations

import pytest

from dashbridge.base.models import (
    DEFAULT_SYSTEM_PROMPT,
    ChatMessage,
    ChatRequestParameters,
    ChatResult,
    ComparisonResult,
    ProviderOutcome,
    TokenUsage,
    default_conversation,
)
from dashbridge.base.utils import format_embedding, snake_case_keys, to_snake_case


def test_default_conversation_is_system_then_user():
    convo = default_conversation("What is 2+2?")
    assert [m.role for m in convo] == ["system", "user"]  # nosec B101
    assert convo[0].content == DEFAULT_SYSTEM_PROMPT == "You are a helpful assistant."  # nosec B101
    assert convo[1].content == "What is 2+2?"  # nosec B101


def test_chat_message_rejects_unknown_role():
    with pytest.raises(ValueError):
        ChatMessage(role="tool", content="x")  # type: ignore[arg-type]


def test_parameters_defaults():
    assert ChatRequestParameters().to_dict() == {"max_tokens": None, "temperature": None, "stream": False}  # nosec B101
    d = ChatRequestParameters.defaults()
    assert (d.max_tokens, d.temperature, d.stream) == (1000, 0.7, False)  # nosec B101


def test_chat_result_to_dict():
    result = ChatResult(text="hi", finish_reason="stop", usage=TokenUsage(1, 2, 3), request_id="r1")
    assert result.to_dict() == {  # nosec B101
        "text": "hi",
        "finish_reason": "stop",
        "usage": {"input_tokens": 1, "output_tokens": 2, "total_tokens": 3},
        "request_id": "r1",
    }


def test_comparison_result_views():
    result = ComparisonResult(
        outcomes={
            "openai": ProviderOutcome(provider="openai", value="hello", latency_ms=1.5),
            "dashscope": ProviderOutcome(provider="dashscope", error={"error": "transport", "message": "503"}),
        }
    )
    assert result.succeeded == ["openai"]  # nosec B101
    assert result.failed == ["dashscope"]  # nosec B101
    assert result.all_failed is False  # nosec B101
    assert result.to_dict()["openai"] == {"ok": True, "latency_ms": 1.5, "value": "hello"}  # nosec B101
    assert result.to_dict()["dashscope"]["error"]["error"] == "transport"  # nosec B101


def test_format_embedding_six_decimals():
    assert format_embedding([0.1, -0.25, 1]) == "0.100000,-0.250000,1.000000"  # nosec B101
    assert format_embedding([]) == ""  # nosec B101


@pytest.mark.parametrize(
    "name,expected",
    [
        ("requestId", "request_id"),
        ("FinishReason", "finish_reason"),
        ("input_tokens", "input_tokens"),
        ("DashScopeAI", "dash_scope_ai"),
        ("Request_Id", "request_id"),
        ("total-Tokens", "total_tokens"),
    ],
)
def test_to_snake_case(name, expected):
    assert to_snake_case(name) == expected  # nosec B101


def test_snake_case_keys_recurses_into_lists():
    data = {"Data": [{"Embedding": [1, 2]}], "requestId": "x"}
    assert snake_case_keys(data) == {"data": [{"embedding": [1, 2]}], "request_id": "x"}  # nosec B101
