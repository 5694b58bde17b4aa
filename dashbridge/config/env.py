"""dashbridge.config.env
=====================

Environment variable names and small lookup helpers.

Purpose
-------
- Single source of truth for every environment variable the package reads.
- Credential lookup used by the layered config loader, which lets
  ``DASHSCOPE_API_KEY`` override any statically configured key.

Failure Modes
-------------
Helpers never raise on unset variables; they return ``None`` (or a default)
and let callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

# Credential override; the only AIConfig field read from the environment.
API_KEY_ENV = "DASHSCOPE_API_KEY"
CONFIG_FILE_ENV = "DASHBRIDGE_CONFIG_FILE"
ENVIRONMENT_ENV = "DASHBRIDGE_ENV"
GATE_POLICY_ENV = "DASHBRIDGE_GATE_POLICY"
SERVICE_HOST_ENV = "DASHBRIDGE_SERVICE_HOST"
SERVICE_PORT_ENV = "DASHBRIDGE_SERVICE_PORT"
SERVICE_RELOAD_ENV = "DASHBRIDGE_SERVICE_RELOAD"
LOG_FORMAT_ENV = "DASHBRIDGE_LOG_FORMAT"


def resolve_api_key() -> Optional[str]:
    """Return the credential from ``DASHSCOPE_API_KEY`` or None.

    Any non-empty value wins over the static config file; blank values are
    treated as unset.
    """
    val = os.environ.get(API_KEY_ENV)
    if not val or not val.strip():
        return None
    return val.strip()


def mask_secret(value: Optional[str], visible: int = 10) -> str:
    """Return the first ``visible`` characters of ``value`` followed by ``...``."""
    if not value:
        return ""
    return value[:visible] + "..."


def key_like_environment(environ: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Return masked values for every env var whose name contains ``KEY``."""
    source = os.environ if environ is None else environ
    return {name: mask_secret(value) for name, value in source.items() if "KEY" in name.upper()}


__all__ = [
    "API_KEY_ENV",
    "CONFIG_FILE_ENV",
    "ENVIRONMENT_ENV",
    "GATE_POLICY_ENV",
    "LOG_FORMAT_ENV",
    "SERVICE_HOST_ENV",
    "SERVICE_PORT_ENV",
    "SERVICE_RELOAD_ENV",
    "resolve_api_key",
    "mask_secret",
    "key_like_environment",
]
