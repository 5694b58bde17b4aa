"""Base shared constants for providers.

Central location to avoid scattering magic strings and default numbers.
"""
from __future__ import annotations

# Error messages shared by both providers
NO_MODEL_SELECTOR_ERROR = "neither deployment name nor model name configured"
MISSING_API_KEY_ERROR = "API key is not configured"  # pragma: allowlist secret - message text, not a secret
MISSING_ENDPOINT_ERROR = "endpoint is not configured"
STREAMING_UNSUPPORTED_ERROR = "streaming responses are not supported"

# Embedding rendering for display
EMBEDDING_DISPLAY_PRECISION = 6

# Upper bound on response body text copied into transport error messages
ERROR_BODY_EXCERPT_CHARS = 500

__all__ = [
    "NO_MODEL_SELECTOR_ERROR",
    "MISSING_API_KEY_ERROR",
    "MISSING_ENDPOINT_ERROR",
    "STREAMING_UNSUPPORTED_ERROR",
    "EMBEDDING_DISPLAY_PRECISION",
    "ERROR_BODY_EXCERPT_CHARS",
]
