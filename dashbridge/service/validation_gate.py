"""Config validation gate for the dashbridge service.

Purpose:
    Check the :class:`~dashbridge.config.AIConfig` snapshot once per inbound
    request, before any provider is reached.

Behaviour:
    - Valid config: the request proceeds untouched.
    - Invalid config and the policy rejects (``reject``, or ``auto`` outside
      production): respond ``500`` with
      ``{"error": "AI configuration invalid", "details": [...], "timestamp": ...}``
      and never dispatch to a provider.
    - Invalid config and the policy warns (``warn``, or ``auto`` in
      production): log ``gate.invalid`` and let the request through, so the
      provider's own :class:`ConfigurationError` reaches the caller.

Exempt paths (health, config inspection, OpenAPI docs) always pass through so
a misconfigured service can still be diagnosed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ..base.logging import get_logger, log_event

GATE_ERROR = "AI configuration invalid"

# Read-only inspection paths; /api/config/test-* still pass through the gate.
EXEMPT_PATHS = frozenset(
    {"/", "/api/health", "/api/config", "/api/config/environment", "/docs", "/redoc", "/openapi.json"}
)
EXEMPT_PREFIXES = ("/docs/",)

_logger = get_logger("dashbridge.gate")


def gate_error_body(details: List[str]) -> Dict[str, Any]:
    """Return the structured rejection payload with a UTC ISO-8601 timestamp."""
    return {
        "error": GATE_ERROR,
        "details": list(details),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def is_exempt(path: str) -> bool:
    return path in EXEMPT_PATHS or path.startswith(EXEMPT_PREFIXES)


class ConfigValidationMiddleware(BaseHTTPMiddleware):
    """Short-circuit requests while the AI configuration is invalid.

    The config and service settings are read from the
    :class:`~dashbridge.di.ProvidersContainer` stored on ``app.state``.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if is_exempt(path):
            return await call_next(request)

        container = request.app.state.container
        config = container.config
        if config.is_valid():
            log_event(_logger, "gate.valid", level=logging.DEBUG, path=path)
            return await call_next(request)

        errors = config.get_validation_errors()
        settings = container.settings
        rejected = settings.gate_rejects()
        log_event(
            _logger,
            "gate.invalid",
            level=logging.WARNING,
            path=path,
            environment=settings.environment,
            policy=settings.gate_policy.value,
            rejected=rejected,
            details=errors,
        )
        if rejected:
            return JSONResponse(status_code=500, content=gate_error_body(errors))
        return await call_next(request)


__all__ = ["ConfigValidationMiddleware", "EXEMPT_PATHS", "GATE_ERROR", "gate_error_body", "is_exempt"]
