"""Single-call text generation over any LangChain chat model."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from kairo_agents.langchain.messages import content_text

DEFAULT_TEMPERATURE = 0.7


def build_messages(
    system: str | None, prompt: str | Sequence[BaseMessage]
) -> list[BaseMessage]:
    """Prepend the system prompt to a prompt string or message history."""
    messages: list[BaseMessage] = []
    if system:
        messages.append(SystemMessage(content=system))
    if isinstance(prompt, str):
        messages.append(HumanMessage(content=prompt))
    else:
        messages.extend(prompt)
    return messages


async def generate_text(
    model: BaseChatModel,
    system: str | None,
    prompt: str | Sequence[BaseMessage],
    temperature: float = DEFAULT_TEMPERATURE,
    max_tokens: int | None = None,
) -> str:
    """
    Run one non-streaming generation and return the text.

    Args:
        model: Model handle
        system: System prompt, omitted when empty
        prompt: User message, or a full message history
        temperature: Sampling temperature
        max_tokens: Output token cap

    Returns:
        Generated text
    """
    result = await model.ainvoke(
        build_messages(system, prompt),
        temperature=temperature,
        max_tokens=max_tokens,
    )
    return content_text(result.content)


async def stream_text(
    model: BaseChatModel,
    system: str | None,
    prompt: str | Sequence[BaseMessage],
    temperature: float = DEFAULT_TEMPERATURE,
    max_tokens: int | None = None,
) -> AsyncIterator[str]:
    """Stream a generation, yielding non-empty text chunks in order."""
    async for chunk in model.astream(
        build_messages(system, prompt),
        temperature=temperature,
        max_tokens=max_tokens,
    ):
        text = content_text(chunk.content)
        if text:
            yield text
