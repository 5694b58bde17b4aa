"""AIConfig: the immutable provider configuration snapshot.

Resolved once at startup by :func:`dashbridge.config.load_ai_config` and
shared read-only by every provider, the validation gate, and the config
inspection routes.

Validity rule: the config is valid iff an API key is present. A missing
endpoint is reported by :meth:`AIConfig.get_validation_errors` but does not
make the config invalid, because the HTTP provider talks to a fixed base URL.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .env import API_KEY_ENV

MISSING_API_KEY_MESSAGE = f"API key is not configured; set the {API_KEY_ENV} environment variable"
MISSING_ENDPOINT_MESSAGE = "Endpoint URL is not configured"


@dataclass(frozen=True)
class AIConfig:
    """Endpoint, credential and model selectors for both providers.

    Attributes:
        endpoint: Base URL handed to the SDK client.
        api_key: Bearer credential shared by both providers.
        deployment_name: Deployment identifier; preferred by the SDK provider.
        model_name: Model identifier; the only selector the HTTP provider reads.
    """

    endpoint: Optional[str] = None
    api_key: Optional[str] = None
    deployment_name: Optional[str] = None
    model_name: Optional[str] = None

    def is_valid(self) -> bool:
        """Return True iff the credential is present."""
        return bool(self.api_key)

    def get_validation_errors(self) -> List[str]:
        """Return one message per failed precondition (both may fire)."""
        errors: List[str] = []
        if not self.api_key:
            errors.append(MISSING_API_KEY_MESSAGE)
        if not self.endpoint:
            errors.append(MISSING_ENDPOINT_MESSAGE)
        return errors

    def describe(self) -> Dict[str, Any]:
        """Return a non-secret summary for diagnostics; the key itself is never included."""
        return {
            "has_api_key": bool(self.api_key),
            "api_key_length": len(self.api_key or ""),
            "endpoint": self.endpoint,
            "deployment_name": self.deployment_name,
            "model_name": self.model_name,
            "is_valid": self.is_valid(),
            "validation_errors": self.get_validation_errors(),
        }


__all__ = ["AIConfig", "MISSING_API_KEY_MESSAGE", "MISSING_ENDPOINT_MESSAGE"]
