"""LangChain chat model wrapper around the provider clients."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

from langchain_core.callbacks import (
    AsyncCallbackManagerForLLMRun,
    CallbackManagerForLLMRun,
)
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, AIMessageChunk, BaseMessage
from langchain_core.outputs import ChatGeneration, ChatGenerationChunk, ChatResult
from pydantic import ConfigDict

from kairo_agents.langchain.messages import langchain_messages_to_kairo
from kairo_agents.llm.models import CompletionRequest, Provider


class ProviderChatModel(BaseChatModel):
    """
    LangChain chat model bound to one provider, model and credential.

    This is the model handle produced by ProviderResolver. It forwards
    LangChain calls to a ProviderClient, so it works anywhere LangChain
    expects a chat model.

    Example:
        ```python
        from kairo_agents.llm import AnthropicClient
        from kairo_agents.langchain import ProviderChatModel

        llm = ProviderChatModel(
            client=AnthropicClient(api_key="sk-ant-xxx"),
            provider=Provider.ANTHROPIC,
            model="claude-3-5-sonnet-20241022",
        )
        response = await llm.ainvoke([HumanMessage(content="Hello!")])
        ```
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    client: Any  # ProviderClient
    provider: Provider
    model: str
    temperature: float = 0.7
    max_tokens: int | None = None
    stop: list[str] | None = None

    @property
    def _llm_type(self) -> str:
        """Return identifier for this LLM type."""
        return f"kairo-{self.provider.value}"

    @property
    def _identifying_params(self) -> dict[str, Any]:
        """Return parameters that identify this LLM configuration."""
        return {
            "provider": self.provider.value,
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def _build_request(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        stream: bool = False,
        **kwargs: Any,
    ) -> CompletionRequest:
        """Build a CompletionRequest from LangChain messages."""
        all_stops = list(self.stop or []) + list(stop or [])
        temperature = kwargs.get("temperature")
        max_tokens = kwargs.get("max_tokens")

        return CompletionRequest(
            model=self.model,
            messages=langchain_messages_to_kairo(messages),
            temperature=self.temperature if temperature is None else temperature,
            max_tokens=self.max_tokens if max_tokens is None else max_tokens,
            stop=all_stops if all_stops else None,
            stream=stream,
        )

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: CallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        """
        Generate a response synchronously.

        Note:
            Runs the async path in a fresh event loop, so it cannot be
            called from inside a running loop. Use ``ainvoke`` there.
        """
        return asyncio.run(self._agenerate(messages, stop, None, **kwargs))

    async def _agenerate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: AsyncCallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        """
        Generate a response asynchronously.

        Args:
            messages: List of messages to send
            stop: Optional stop sequences
            run_manager: Callback manager
            **kwargs: ``temperature`` and ``max_tokens`` overrides

        Returns:
            ChatResult with a single generation
        """
        request = self._build_request(messages, stop, stream=False, **kwargs)
        response = await self.client.complete(request)

        usage = {
            "input_tokens": response.usage.prompt_tokens,
            "output_tokens": response.usage.completion_tokens,
            "total_tokens": response.usage.total_tokens,
        }
        message = AIMessage(content=response.text, usage_metadata=usage)  # type: ignore[arg-type]

        return ChatResult(
            generations=[
                ChatGeneration(
                    message=message,
                    generation_info={"finish_reason": response.finish_reason},
                )
            ],
            llm_output={
                "model": response.model,
                "provider": response.provider.value,
                "usage": {
                    "prompt_tokens": response.usage.prompt_tokens,
                    "completion_tokens": response.usage.completion_tokens,
                    "total_tokens": response.usage.total_tokens,
                },
            },
        )

    async def _astream(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: AsyncCallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> AsyncIterator[ChatGenerationChunk]:
        """
        Stream response asynchronously.

        Yields:
            ChatGenerationChunk for each text fragment
        """
        request = self._build_request(messages, stop, stream=True, **kwargs)

        async for text in self.client.stream(request):
            yield ChatGenerationChunk(message=AIMessageChunk(content=text))
            if run_manager:
                await run_manager.on_llm_new_token(text)
