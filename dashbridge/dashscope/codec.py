"""DashScope request/response codec.

Purpose:
- Translate abstract chat/embedding requests into DashScope wire JSON and
  parse the service's responses back into typed results.

Two response shapes, kept distinct:
- Chat responses have a stable envelope and are validated into
  :class:`DashScopeChatResponse`. Incoming keys are folded to snake case
  first, so ``requestId`` and ``request_id`` parse the same way.
- Embedding responses are not guaranteed a stable top-level object, so they
  are walked as a loose JSON document through optional lookups
  (``data`` -> ``[0]`` -> ``embedding``). Every missing step is a
  :class:`DecodeError`; an empty vector is never returned.

Transport mapping:
- :func:`ensure_success` must run before any decode; non-2xx responses raise
  :class:`TransportError` with the status code and a body excerpt.
"""

from __future__ import annotations

import json
from numbers import Real
from typing import Any, Dict, List, Optional, Sequence, Union

import httpx
from pydantic import ValidationError

from ..base.constants import ERROR_BODY_EXCERPT_CHARS
from ..base.errors import DecodeError, TransportError
from ..base.models import ChatMessage, ChatRequestParameters, ChatResult, TokenUsage
from ..base.utils.naming import snake_case_keys
from ..config.defaults import DASHSCOPE_DEFAULT_CHAT_MODEL, DASHSCOPE_DEFAULT_EMBEDDING_MODEL
from .wire_models import (
    DashScopeChatRequest,
    DashScopeChatResponse,
    DashScopeEmbeddingInput,
    DashScopeEmbeddingRequest,
    DashScopeInput,
    DashScopeMessage,
    DashScopeParameters,
    DashScopeUsage,
)

PROVIDER = "dashscope"

Body = Union[str, bytes]


# ---------------------------------------------------------------------------
# Model selection
# ---------------------------------------------------------------------------


def resolve_wire_model(model_name: Optional[str], default: str) -> str:
    """Return ``model_name`` when set, else the documented ``default``."""
    if model_name and model_name.strip():
        return model_name.strip()
    return default


def chat_model(model_name: Optional[str]) -> str:
    return resolve_wire_model(model_name, DASHSCOPE_DEFAULT_CHAT_MODEL)


def embedding_model(model_name: Optional[str]) -> str:
    return resolve_wire_model(model_name, DASHSCOPE_DEFAULT_EMBEDDING_MODEL)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


def build_chat_request(
    model: str,
    messages: Sequence[ChatMessage],
    parameters: ChatRequestParameters,
) -> DashScopeChatRequest:
    """Build the typed chat request for ``messages`` in order."""
    return DashScopeChatRequest(
        model=model,
        input=DashScopeInput(messages=[DashScopeMessage(role=m.role, content=m.content) for m in messages]),
        parameters=DashScopeParameters(
            max_tokens=parameters.max_tokens,
            temperature=parameters.temperature,
            stream=False,
        ),
    )


def encode_chat_request(request: DashScopeChatRequest) -> Dict[str, Any]:
    """Return the JSON body; unset optional parameters are omitted."""
    return request.model_dump(exclude_none=True)


def build_embedding_request(model: str, text: str) -> DashScopeEmbeddingRequest:
    return DashScopeEmbeddingRequest(model=model, input=DashScopeEmbeddingInput(text=text))


def encode_embedding_request(request: DashScopeEmbeddingRequest) -> Dict[str, Any]:
    return request.model_dump(exclude_none=True)


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


def ensure_success(response: httpx.Response, *, model: Optional[str] = None) -> None:
    """Raise :class:`TransportError` for any non-2xx response.

    Runs before decoding so an error page is never mistaken for a payload.
    """
    if response.is_success:
        return
    excerpt = response.text[:ERROR_BODY_EXCERPT_CHARS]
    raise TransportError(
        f"HTTP {response.status_code} from {response.request.url}: {excerpt}",
        provider=PROVIDER,
        model=model,
        status_code=response.status_code,
    )


# ---------------------------------------------------------------------------
# Chat responses (typed)
# ---------------------------------------------------------------------------


def _load_json(body: Body, *, model: Optional[str], what: str) -> Any:
    try:
        return json.loads(body)
    except ValueError as e:
        raise DecodeError(f"{what} response is not valid JSON: {e}", provider=PROVIDER, model=model, raw=e) from e


def decode_chat_response(body: Body, *, model: Optional[str] = None) -> DashScopeChatResponse:
    """Parse a chat response body into :class:`DashScopeChatResponse`.

    Raises:
        DecodeError: When the body is not JSON, not an object, or does not
            match the chat response shape.
    """
    data = _load_json(body, model=model, what="chat")
    if not isinstance(data, dict):
        raise DecodeError(
            f"chat response must be a JSON object, got {type(data).__name__}",
            provider=PROVIDER,
            model=model,
        )
    try:
        return DashScopeChatResponse.model_validate(snake_case_keys(data))
    except ValidationError as e:
        raise DecodeError(f"chat response does not match the expected shape: {e}", provider=PROVIDER, model=model, raw=e) from e


def to_chat_result(response: DashScopeChatResponse) -> ChatResult:
    """Map the wire response onto the provider-agnostic :class:`ChatResult`."""
    usage = response.usage or DashScopeUsage()
    return ChatResult(
        text=response.output.text,
        finish_reason=response.output.finish_reason or "",
        usage=TokenUsage(
            input_tokens=usage.input_tokens or 0,
            output_tokens=usage.output_tokens or 0,
            total_tokens=usage.total_tokens or 0,
        ),
        request_id=response.request_id or "",
    )


# ---------------------------------------------------------------------------
# Embedding responses (loose document)
# ---------------------------------------------------------------------------


def _field(node: Any, name: str) -> Optional[Any]:
    """Return ``node[name]`` when ``node`` is an object holding ``name``."""
    if isinstance(node, dict):
        return node.get(name)
    return None


def _item(node: Any, index: int) -> Optional[Any]:
    """Return ``node[index]`` when ``node`` is an array long enough."""
    if isinstance(node, list) and 0 <= index < len(node):
        return node[index]
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def extract_embeddings(body: Body, *, model: Optional[str] = None) -> List[float]:
    """Return ``data[0].embedding`` from an embedding response body.

    Raises:
        DecodeError: When the body is not JSON, any step of the lookup chain
            is absent, the vector is empty, or it holds non-numeric entries.
    """
    doc = _load_json(body, model=model, what="embedding")
    vector = _field(_item(_field(doc, "data"), 0), "embedding")
    if not isinstance(vector, list) or not vector:
        raise DecodeError(
            "could not extract embeddings: expected a non-empty data[0].embedding array",
            provider=PROVIDER,
            model=model,
        )
    if not all(_is_number(v) for v in vector):
        raise DecodeError(
            "could not extract embeddings: data[0].embedding contains non-numeric values",
            provider=PROVIDER,
            model=model,
        )
    return [float(v) for v in vector]


__all__ = [
    "PROVIDER",
    "resolve_wire_model",
    "chat_model",
    "embedding_model",
    "build_chat_request",
    "encode_chat_request",
    "build_embedding_request",
    "encode_embedding_request",
    "ensure_success",
    "decode_chat_response",
    "to_chat_result",
    "extract_embeddings",
]
