"""LangChain integration: model handles and text generation."""

from kairo_agents.langchain.generation import build_messages, generate_text, stream_text
from kairo_agents.langchain.llm import ProviderChatModel
from kairo_agents.langchain.messages import (
    content_text,
    kairo_messages_to_langchain,
    kairo_to_langchain,
    langchain_messages_to_kairo,
    langchain_to_kairo,
)

__all__ = [
    "ProviderChatModel",
    "build_messages",
    "content_text",
    "generate_text",
    "kairo_messages_to_langchain",
    "kairo_to_langchain",
    "langchain_messages_to_kairo",
    "langchain_to_kairo",
    "stream_text",
]
