"""Small pure helpers shared by providers and configuration."""

from .embeddings import format_embedding
from .naming import snake_case_keys, to_snake_case

__all__ = ["format_embedding", "snake_case_keys", "to_snake_case"]
