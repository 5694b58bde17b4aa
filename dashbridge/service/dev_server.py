from __future__ import annotations

import logging
import os

import uvicorn

from dashbridge.base.logging import LOG_LEVEL_ENV, configure_logger
from dashbridge.config.defaults import SERVICE_DEFAULT_HOST, SERVICE_DEFAULT_PORT
from dashbridge.config.env import LOG_FORMAT_ENV, SERVICE_HOST_ENV, SERVICE_PORT_ENV, SERVICE_RELOAD_ENV


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to a sane default."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _configure_logging() -> logging.Logger:
    json_mode = os.getenv(LOG_FORMAT_ENV, "json").strip().lower() != "plain"
    return configure_logger(level=os.getenv(LOG_LEVEL_ENV) or None, json_mode=json_mode)


def main() -> None:
    """Start the development server for the dashbridge FastAPI app.

    Controlled via environment variables:

    - DASHBRIDGE_SERVICE_HOST: interface to bind (default "127.0.0.1")
    - DASHBRIDGE_SERVICE_PORT: port to bind (default 8091)
    - DASHBRIDGE_SERVICE_RELOAD: "true"/"false" to toggle auto-reload
      (default True).
    - DASHBRIDGE_LOG_LEVEL: shared logger level (default INFO)
    - DASHBRIDGE_LOG_FORMAT: "json" (default) or "plain"
    """
    _configure_logging()
    host = os.getenv(SERVICE_HOST_ENV, SERVICE_DEFAULT_HOST)
    port = _parse_port(os.getenv(SERVICE_PORT_ENV), SERVICE_DEFAULT_PORT)

    reload_env = os.getenv(SERVICE_RELOAD_ENV)
    reload_enabled = True if reload_env is None else reload_env.lower() == "true"

    uvicorn.run(
        "dashbridge.service.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
