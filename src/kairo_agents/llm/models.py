"""Data models for provider interactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Provider(str, Enum):
    """Hosted model providers."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"
    AZURE = "azure"


class MessageRole(str, Enum):
    """Role of a message in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class Message:
    """A plain-text chat message."""

    role: MessageRole
    content: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to the OpenAI-style wire format."""
        return {"role": self.role.value, "content": self.content}

    @classmethod
    def system(cls, content: str) -> Message:
        """Create a system message."""
        return cls(role=MessageRole.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> Message:
        """Create a user message."""
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> Message:
        """Create an assistant message."""
        return cls(role=MessageRole.ASSISTANT, content=content)


@dataclass
class CompletionRequest:
    """Provider-neutral chat completion request."""

    model: str
    messages: list[Message]
    temperature: float = 0.7
    max_tokens: int | None = None
    stop: list[str] | None = None
    stream: bool = False

    @property
    def system_prompt(self) -> str | None:
        """Concatenated text of all system messages, or None."""
        parts = [m.content for m in self.messages if m.role == MessageRole.SYSTEM]
        return "\n\n".join(parts) if parts else None

    @property
    def conversation(self) -> list[Message]:
        """Messages excluding system messages."""
        return [m for m in self.messages if m.role != MessageRole.SYSTEM]


@dataclass
class TokenUsage:
    """Token usage statistics."""

    prompt_tokens: int = 0
    completion_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.prompt_tokens + self.completion_tokens


@dataclass
class CompletionResponse:
    """Provider-neutral completion result."""

    text: str
    model: str
    provider: Provider
    usage: TokenUsage = field(default_factory=TokenUsage)
    finish_reason: str | None = None
    id: str | None = None
