"""
Message DTO used across providers.

Defines the `ChatMessage` dataclass and the `Role` literal. An ordered list of
messages forms a conversation; order is significant because it is the model's
context. Helpers build the default two-message conversation used when a caller
supplies only a prompt.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal

# Message roles accepted by both providers.
Role = Literal["system", "user", "assistant"]

VALID_ROLES = ("system", "user", "assistant")

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."


@dataclass(frozen=True)
class ChatMessage:
    """A single chat message.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Plain text content.

    Raises:
        ValueError: When ``role`` is not one of the supported roles.
    """

    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in VALID_ROLES:
            raise ValueError(f"unsupported chat role: {self.role!r}")

    def to_dict(self) -> Dict[str, str]:
        """Return the ``{role, content}`` mapping shared by both wire formats."""
        return {"role": self.role, "content": self.content}


def default_conversation(prompt: str, system_prompt: str = DEFAULT_SYSTEM_PROMPT) -> List[ChatMessage]:
    """Return ``[system, user]`` for a bare prompt."""
    return [
        ChatMessage(role="system", content=system_prompt),
        ChatMessage(role="user", content=prompt),
    ]


__all__ = [
    "ChatMessage",
    "Role",
    "VALID_ROLES",
    "DEFAULT_SYSTEM_PROMPT",
    "default_conversation",
]
