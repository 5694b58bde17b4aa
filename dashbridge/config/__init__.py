"""Layered configuration for dashbridge.

Merge order (later wins)
------------------------
1. Built-in defaults (every AIConfig field unset)
2. Static config file pointed to by ``DASHBRIDGE_CONFIG_FILE`` (default
   ``dashbridge.json`` in the working directory; a missing file is ignored)
3. ``DASHSCOPE_API_KEY`` environment variable, which overrides the API key
   only
4. In-code overrides passed to :func:`load_ai_config`

The result is an immutable :class:`AIConfig` snapshot. Callers resolve it
once at startup and inject it; nothing re-reads configuration per request.

Static Config File
------------------
JSON is tried first, then YAML (PyYAML). Structure::

    dashscope_ai:
      endpoint: https://dashscope.aliyuncs.com/compatible-mode/v1
      deployment_name: qwen-plus
      model_name: qwen-plus
      api_key: sk-...   # optional; DASHSCOPE_API_KEY wins when set

Keys may also use PascalCase (``DashScopeAI`` / ``ApiKey``); they are folded
to snake case before lookup.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.logging import get_logger, log_event
from ..base.utils.naming import snake_case_keys
from .ai_config import AIConfig, MISSING_API_KEY_MESSAGE, MISSING_ENDPOINT_MESSAGE
from .defaults import CONFIG_SECTION, DEFAULT_CONFIG_FILE
from .env import CONFIG_FILE_ENV, resolve_api_key
from .settings import GatePolicy, ServiceSettings, load_service_settings

_FIELDS = ("endpoint", "api_key", "deployment_name", "model_name")

_logger = get_logger("dashbridge.config")


def _parse_text(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return yaml.safe_load(text)


def load_config_file(path: Optional[str] = None) -> Dict[str, Any]:
    """Return the ``dashscope_ai`` section of the static config file.

    Parameters:
        path: Explicit path; defaults to ``DASHBRIDGE_CONFIG_FILE`` or
            ``dashbridge.json``.

    Returns:
        A dict with snake-case keys, empty when the file or section is absent.

    Raises:
        yaml.YAMLError: When the file exists but is neither JSON nor YAML.
    """
    candidate = Path(path or os.getenv(CONFIG_FILE_ENV) or DEFAULT_CONFIG_FILE)
    if not candidate.is_file():
        return {}
    data = snake_case_keys(_parse_text(candidate.read_text(encoding="utf-8")))
    if not isinstance(data, dict):
        return {}
    section = data.get(CONFIG_SECTION)
    if section is None:
        # "DashScopeAI" folds to "dash_scope_ai"
        section = data.get("dash_scope_ai")
    return dict(section) if isinstance(section, dict) else {}


def load_ai_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> AIConfig:
    """Resolve the layered configuration into an immutable :class:`AIConfig`."""
    cfg: Dict[str, Any] = {name: None for name in _FIELDS}

    file_cfg = load_config_file(path)
    cfg |= {k: v for k, v in file_cfg.items() if k in _FIELDS}

    if env_key := resolve_api_key():
        cfg["api_key"] = env_key

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if k in _FIELDS and v is not None}

    config = AIConfig(**{k: (str(v).strip() or None) if v is not None else None for k, v in cfg.items()})
    log_event(
        _logger,
        "config.loaded",
        None,
        source_file=bool(file_cfg),
        has_api_key=bool(config.api_key),
        endpoint=config.endpoint,
        deployment_name=config.deployment_name,
        model_name=config.model_name,
    )
    return config


__all__ = [
    "AIConfig",
    "MISSING_API_KEY_MESSAGE",
    "MISSING_ENDPOINT_MESSAGE",
    "GatePolicy",
    "ServiceSettings",
    "load_ai_config",
    "load_config_file",
    "load_service_settings",
]
