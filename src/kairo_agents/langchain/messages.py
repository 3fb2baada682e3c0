"""Message conversion between LangChain and Kairo formats."""

from __future__ import annotations

from typing import Any

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from kairo_agents.llm.models import Message, MessageRole


def content_text(content: str | list[Any] | None) -> str:
    """Flatten LangChain message content to plain text."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    # Content blocks: keep text parts only
    return "".join(
        part.get("text", "") if isinstance(part, dict) else str(part) for part in content
    )


def langchain_to_kairo(message: BaseMessage) -> Message:
    """
    Convert a LangChain message to a Kairo message.

    Args:
        message: LangChain message to convert

    Returns:
        Equivalent Kairo Message

    Raises:
        ValueError: If message type is not supported
    """
    if isinstance(message, SystemMessage):
        return Message.system(content_text(message.content))
    elif isinstance(message, HumanMessage):
        return Message.user(content_text(message.content))
    elif isinstance(message, AIMessage):
        return Message.assistant(content_text(message.content))
    else:
        raise ValueError(f"Unsupported message type: {type(message).__name__}")


def kairo_to_langchain(message: Message) -> BaseMessage:
    """
    Convert a Kairo message to a LangChain message.

    Raises:
        ValueError: If message role is not supported
    """
    if message.role == MessageRole.SYSTEM:
        return SystemMessage(content=message.content)
    elif message.role == MessageRole.USER:
        return HumanMessage(content=message.content)
    elif message.role == MessageRole.ASSISTANT:
        return AIMessage(content=message.content)
    else:
        raise ValueError(f"Unsupported message role: {message.role}")


def langchain_messages_to_kairo(messages: list[BaseMessage]) -> list[Message]:
    return [langchain_to_kairo(m) for m in messages]


def kairo_messages_to_langchain(messages: list[Message]) -> list[BaseMessage]:
    return [kairo_to_langchain(m) for m in messages]
