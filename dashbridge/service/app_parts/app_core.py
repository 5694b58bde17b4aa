from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from dashbridge.base.errors import ErrorCode, ProviderError
from dashbridge.base.interfaces import ChatEmbeddingProvider
from dashbridge.base.utils import format_embedding
from dashbridge.config.defaults import DEFAULT_TEST_PROMPT
from dashbridge.di import ProvidersContainer


class PromptBody(BaseModel):
    """Body of the chat and chat-comparison routes."""

    prompt: str


class TextBody(BaseModel):
    """Body of the embedding and embedding-comparison routes."""

    text: str


class ConfigTestBody(BaseModel):
    """Optional prompt for the config test routes; defaults to ``"Hello"``."""

    prompt: Optional[str] = None


def get_container(request: Request) -> ProvidersContainer:
    """FastAPI dependency returning the container bound to the app."""
    return request.app.state.container


# Configuration failures are the service's fault; remote failures are a bad gateway.
_STATUS_BY_CODE: Dict[ErrorCode, int] = {
    ErrorCode.CONFIGURATION: 500,
    ErrorCode.TRANSPORT: 502,
    ErrorCode.DECODE: 502,
    ErrorCode.COMPARISON_FAILED: 502,
}


def status_for_error(exc: ProviderError) -> int:
    return _STATUS_BY_CODE.get(exc.code, 500)


def provider_error_response(exc: ProviderError) -> JSONResponse:
    """Render a :class:`ProviderError` as ``{"error", "message", "provider", ...}``."""
    return JSONResponse(status_code=status_for_error(exc), content=exc.to_dict())


async def _handle_chat(provider: ChatEmbeddingProvider, prompt: str) -> Dict[str, Any]:
    text = await provider.get_chat_completion(prompt)
    return {"provider": provider.provider_name, "prompt": prompt, "response": text}


async def _handle_embeddings(provider: ChatEmbeddingProvider, text: str) -> Dict[str, Any]:
    vector = await provider.get_embeddings(text)
    return {
        "provider": provider.provider_name,
        "text": text,
        "dimensions": len(vector),
        "embedding": format_embedding(vector),
    }


async def _handle_compare_chat(container: ProvidersContainer, prompt: str) -> Dict[str, Any]:
    result = await container.comparator.compare_chat(prompt)
    return {"prompt": prompt, "results": result.to_dict()}


async def _handle_compare_embeddings(container: ProvidersContainer, text: str) -> Dict[str, Any]:
    result = await container.comparator.compare_embeddings(text)
    return {"text": text, "results": result.to_dict()}


async def _handle_config_test(provider: ChatEmbeddingProvider, container: ProvidersContainer, prompt: Optional[str]):
    """Run one prompt through ``provider`` after checking the config snapshot.

    Returns a 400 response listing the validation errors when the config is
    invalid, without calling the provider.
    """
    config = container.config
    if not config.is_valid():
        return JSONResponse(
            status_code=400,
            content={
                "ok": False,
                "provider": provider.provider_name,
                "error": "configuration invalid",
                "details": config.get_validation_errors(),
            },
        )
    effective = prompt or DEFAULT_TEST_PROMPT
    text = await provider.get_chat_completion(effective)
    return {"ok": True, "provider": provider.provider_name, "prompt": effective, "response": text}


def _build_config_summary(container: ProvidersContainer) -> Dict[str, Any]:
    settings = container.settings
    return {
        "config": container.config.describe(),
        "environment": settings.environment,
        "gate_policy": settings.gate_policy.value,
        "providers": container.comparator.provider_names,
    }


__all__ = [
    "PromptBody",
    "TextBody",
    "ConfigTestBody",
    "get_container",
    "status_for_error",
    "provider_error_response",
    "_handle_chat",
    "_handle_embeddings",
    "_handle_compare_chat",
    "_handle_compare_embeddings",
    "_handle_config_test",
    "_build_config_summary",
]
