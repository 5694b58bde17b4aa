"""Embedding display helpers."""
from __future__ import annotations

from typing import Iterable

from ..constants import EMBEDDING_DISPLAY_PRECISION


def format_embedding(values: Iterable[float], precision: int = EMBEDDING_DISPLAY_PRECISION) -> str:
    """Render ``values`` as ``"0.100000,0.200000,..."``."""
    return ",".join(f"{v:.{precision}f}" for v in values)


__all__ = ["format_embedding"]
