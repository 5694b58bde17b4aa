from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from dashbridge.base.errors import ProviderError
from dashbridge.base.http import aclose_all_clients
from dashbridge.base.logging import get_logger, log_event
from dashbridge.config.defaults import WELCOME_MESSAGE
from dashbridge.config.env import key_like_environment
from dashbridge.di import ProvidersContainer, build_container

from .app_parts.app_core import (
    ConfigTestBody,
    PromptBody,
    TextBody,
    _build_config_summary,
    _handle_chat,
    _handle_compare_chat,
    _handle_compare_embeddings,
    _handle_config_test,
    _handle_embeddings,
    get_container,
    provider_error_response,
)
from .validation_gate import ConfigValidationMiddleware

_logger = get_logger("dashbridge.service")


@asynccontextmanager
async def _lifespan(app: FastAPI):
    log_event(_logger, "service.start", environment=app.state.container.settings.environment)
    yield
    # Pooled httpx clients are async and must be closed inside the loop.
    await aclose_all_clients()
    log_event(_logger, "service.stop")


def create_app(container: Optional[ProvidersContainer] = None) -> FastAPI:
    """Build the dashbridge FastAPI app around ``container``.

    The container (config snapshot plus one instance of each provider) is
    stored on ``app.state`` and shared by every request. When omitted, it is
    resolved from the environment.
    """
    app = FastAPI(title="dashbridge", version="0.1.0", lifespan=_lifespan)
    app.state.container = container or build_container()
    app.add_middleware(ConfigValidationMiddleware)

    @app.exception_handler(ProviderError)
    async def _provider_error(request: Request, exc: ProviderError) -> JSONResponse:
        log_event(_logger, "request.error", path=request.url.path, **exc.to_dict())
        return provider_error_response(exc)

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return WELCOME_MESSAGE

    @app.get("/api/health")
    def health() -> Dict[str, Any]:
        """Check the health status of the service."""
        return {"ok": True}

    # -----------------------------------------------------------------------
    # Provider test endpoints
    # -----------------------------------------------------------------------

    @app.get("/test/hello", response_class=PlainTextResponse)
    def hello() -> str:
        return "Hello World!"

    @app.post("/test/chat")
    async def chat_sdk(body: PromptBody, c: ProvidersContainer = Depends(get_container)) -> Dict[str, Any]:
        """Complete ``prompt`` through the SDK provider."""
        return await _handle_chat(c.sdk_provider, body.prompt)

    @app.post("/test/chat/dashscope")
    async def chat_http(body: PromptBody, c: ProvidersContainer = Depends(get_container)) -> Dict[str, Any]:
        """Complete ``prompt`` through the HTTP provider."""
        return await _handle_chat(c.http_provider, body.prompt)

    @app.post("/test/embeddings")
    async def embeddings_sdk(body: TextBody, c: ProvidersContainer = Depends(get_container)) -> Dict[str, Any]:
        return await _handle_embeddings(c.sdk_provider, body.text)

    @app.post("/test/embeddings/dashscope")
    async def embeddings_http(body: TextBody, c: ProvidersContainer = Depends(get_container)) -> Dict[str, Any]:
        return await _handle_embeddings(c.http_provider, body.text)

    @app.post("/test/compare")
    async def compare_chat(body: PromptBody, c: ProvidersContainer = Depends(get_container)) -> Dict[str, Any]:
        """Run ``prompt`` through both providers concurrently.

        One provider failing is reported in its outcome; the route only
        fails (502) when every provider failed.
        """
        return await _handle_compare_chat(c, body.prompt)

    @app.post("/test/compare/embeddings")
    async def compare_embeddings(body: TextBody, c: ProvidersContainer = Depends(get_container)) -> Dict[str, Any]:
        return await _handle_compare_embeddings(c, body.text)

    # -----------------------------------------------------------------------
    # Config inspection
    # -----------------------------------------------------------------------

    @app.get("/api/config")
    def config_summary(c: ProvidersContainer = Depends(get_container)) -> Dict[str, Any]:
        """Return the non-secret config summary and its validation errors."""
        return _build_config_summary(c)

    @app.post("/api/config/test-sdk")
    async def config_test_sdk(body: Optional[ConfigTestBody] = None, c: ProvidersContainer = Depends(get_container)):
        return await _handle_config_test(c.sdk_provider, c, body.prompt if body else None)

    @app.post("/api/config/test-dashscope")
    async def config_test_dashscope(body: Optional[ConfigTestBody] = None, c: ProvidersContainer = Depends(get_container)):
        return await _handle_config_test(c.http_provider, c, body.prompt if body else None)

    @app.get("/api/config/environment")
    def config_environment(c: ProvidersContainer = Depends(get_container)):
        """List masked ``*KEY*`` environment variables; development only."""
        if c.settings.is_production:
            return JSONResponse(
                status_code=403,
                content={"error": "forbidden", "message": "only available outside production"},
            )
        return {"environment": c.settings.environment, "variables": key_like_environment()}

    return app


app = create_app()
