"""
Pydantic wire models for the DashScope HTTP API.

Field names are the exact lower-snake-case JSON keys the remote service
expects; the service rejects other casings, so these names are part of the
wire contract and must not be aliased.

Chat request::

    {"model": ..., "input": {"messages": [{"role", "content"}]},
     "parameters": {"max_tokens"?, "temperature"?, "stream"}}

Chat response::

    {"output": {"text", "finish_reason"},
     "usage": {"input_tokens", "output_tokens", "total_tokens"},
     "request_id": ...}

Embedding request::

    {"model": ..., "input": {"text": ...}}

The embedding response has no typed model here; it is walked as a loose JSON
document by :func:`dashbridge.dashscope.codec.extract_embeddings`.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    """Ignore unknown keys so additive upstream changes do not break parsing."""

    model_config = ConfigDict(extra="ignore")


class DashScopeMessage(_WireModel):
    role: str
    content: str


class DashScopeInput(_WireModel):
    messages: List[DashScopeMessage] = Field(default_factory=list)


class DashScopeParameters(_WireModel):
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    stream: bool = False


class DashScopeChatRequest(_WireModel):
    """Chat completion request envelope."""

    model: str
    input: DashScopeInput = Field(default_factory=DashScopeInput)
    parameters: DashScopeParameters = Field(default_factory=DashScopeParameters)


class DashScopeOutput(_WireModel):
    text: str
    finish_reason: Optional[str] = None


class DashScopeUsage(_WireModel):
    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class DashScopeChatResponse(_WireModel):
    """Chat completion response envelope.

    ``output`` (with its ``text``) is required; the remaining fields may be
    absent or null and map to empty values.
    """

    output: DashScopeOutput
    usage: Optional[DashScopeUsage] = None
    request_id: Optional[str] = None


class DashScopeEmbeddingInput(_WireModel):
    text: str


class DashScopeEmbeddingRequest(_WireModel):
    """Embedding request envelope; deliberately separate from the chat ``input``."""

    model: str
    input: DashScopeEmbeddingInput


__all__ = [
    "DashScopeMessage",
    "DashScopeInput",
    "DashScopeParameters",
    "DashScopeChatRequest",
    "DashScopeOutput",
    "DashScopeUsage",
    "DashScopeChatResponse",
    "DashScopeEmbeddingInput",
    "DashScopeEmbeddingRequest",
]
