"""Service-level settings (deployment environment and validation gate policy).

Kept apart from :class:`~dashbridge.config.ai_config.AIConfig`: these values
shape how the HTTP service behaves, not how providers are reached.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from .defaults import DEFAULT_ENVIRONMENT, DEFAULT_GATE_POLICY
from .env import ENVIRONMENT_ENV, GATE_POLICY_ENV


class GatePolicy(str, Enum):
    """How the config validation gate reacts to an invalid config.

    ``AUTO`` rejects outside production and only warns in production.
    """

    AUTO = "auto"
    REJECT = "reject"
    WARN = "warn"


@dataclass(frozen=True)
class ServiceSettings:
    """Environment name plus gate policy."""

    environment: str = DEFAULT_ENVIRONMENT
    gate_policy: GatePolicy = GatePolicy.AUTO

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in ("production", "prod")

    def gate_rejects(self) -> bool:
        """Return True when an invalid config must short-circuit the request."""
        if self.gate_policy is GatePolicy.REJECT:
            return True
        if self.gate_policy is GatePolicy.WARN:
            return False
        return not self.is_production


def _parse_policy(raw: str | None) -> GatePolicy:
    if not raw:
        return GatePolicy(DEFAULT_GATE_POLICY)
    try:
        return GatePolicy(raw.strip().lower())
    except ValueError:
        return GatePolicy(DEFAULT_GATE_POLICY)


def load_service_settings() -> ServiceSettings:
    """Read service settings from ``DASHBRIDGE_ENV`` and ``DASHBRIDGE_GATE_POLICY``."""
    environment = (os.getenv(ENVIRONMENT_ENV) or DEFAULT_ENVIRONMENT).strip().lower()
    return ServiceSettings(environment=environment, gate_policy=_parse_policy(os.getenv(GATE_POLICY_ENV)))


__all__ = ["GatePolicy", "ServiceSettings", "load_service_settings"]
