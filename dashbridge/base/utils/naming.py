"""Key-naming helpers shared by the wire codec and the config loader.

The DashScope wire format and the static config file both use lower snake
case. Input produced by other tooling sometimes arrives as camelCase or
PascalCase (``requestId``, ``FinishReason``, ``ApiKey``); these helpers fold
such keys onto the snake-case names before validation.
"""
from __future__ import annotations

import re
from typing import Any

_BOUNDARY_1 = re.compile(r"(.)([A-Z][a-z]+)")
_BOUNDARY_2 = re.compile(r"([a-z0-9])([A-Z])")
_UNDERSCORE_RUN = re.compile(r"_{2,}")


def to_snake_case(name: str) -> str:
    """Return ``name`` in lower snake case (``FinishReason`` -> ``finish_reason``)."""
    s = _BOUNDARY_1.sub(r"\1_\2", name)
    s = _BOUNDARY_2.sub(r"\1_\2", s)
    return _UNDERSCORE_RUN.sub("_", s.replace("-", "_")).lower()


def snake_case_keys(value: Any) -> Any:
    """Recursively rewrite mapping keys to snake case; values are untouched."""
    if isinstance(value, dict):
        return {
            (to_snake_case(k) if isinstance(k, str) else k): snake_case_keys(v)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [snake_case_keys(v) for v in value]
    return value


__all__ = ["to_snake_case", "snake_case_keys"]
