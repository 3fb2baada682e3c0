"""Provider resolution for model identifiers and agent tasks."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

from kairo_agents.config.loader import load_provider_config
from kairo_agents.config.models import REASONING_TASKS, ModelRole, ProviderConfig
from kairo_agents.core.errors import UnknownAgentError
from kairo_agents.core.logging import get_logger
from kairo_agents.llm.client import (
    AnthropicClient,
    AzureOpenAIClient,
    GoogleClient,
    OpenAIClient,
    ProviderClient,
)
from kairo_agents.llm.models import Provider

if TYPE_CHECKING:
    from kairo_agents.core.types import ApiKeys
    from kairo_agents.langchain.llm import ProviderChatModel

logger = get_logger("llm.routing")


def detect_provider(model_id: str) -> Provider | None:
    """
    Detect the provider family of a free-text model identifier.

    Matching is case-insensitive substring search in fixed precedence
    order: ``claude``, then ``gpt`` or ``4o``, then ``gemini``.

    Args:
        model_id: Model identifier as configured by the caller

    Returns:
        The matching provider, or None if no family matches

    Example:
        detect_provider("claude-4o-hypothetical")
        # Returns: Provider.ANTHROPIC
    """
    lowered = model_id.lower()
    if "claude" in lowered:
        return Provider.ANTHROPIC
    if "gpt" in lowered or "4o" in lowered:
        return Provider.OPENAI
    if "gemini" in lowered:
        return Provider.GOOGLE
    return None


class ProviderResolver:
    """
    Maps model identifiers and agent tasks to model handles.

    The resolver holds only the immutable ProviderConfig it was built with.
    Credentials are never validated here; a handle without a usable key
    fails with ProviderAuthError when it is called.

    Example:
        ```python
        resolver = ProviderResolver.from_environment()
        handle = resolver.resolve("claude-3-5-sonnet-20241022", settings.api_keys)
        text = await generate_text(handle, system_prompt, message)
        ```
    """

    def __init__(
        self,
        config: ProviderConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize resolver.

        Args:
            config: Provider configuration. Defaults to built-in defaults
                with no process-wide credentials.
            transport: Custom httpx transport handed to every client
                (mainly for tests)
        """
        self.config = config or ProviderConfig()
        self._transport = transport

    @classmethod
    def from_environment(
        cls,
        settings_file: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> ProviderResolver:
        """Build a resolver from an optional settings file and the environment."""
        return cls(load_provider_config(settings_file, environ))

    detect_provider = staticmethod(detect_provider)

    def resolve(
        self, model_id: str, api_keys: ApiKeys | None = None
    ) -> ProviderChatModel:
        """
        Resolve a model identifier to a provider-bound handle.

        Unrecognized identifiers fall through to the Anthropic coding model.

        Args:
            model_id: Model identifier
            api_keys: Caller-supplied credentials

        Returns:
            Model handle for the detected provider
        """
        provider = detect_provider(model_id)
        if provider is None:
            default_model = self.config.anthropic.coding
            logger.debug(
                "No provider matches model %r, defaulting to %s", model_id, default_model
            )
            return self._build_handle(Provider.ANTHROPIC, default_model, api_keys)
        return self._build_handle(provider, model_id, api_keys)

    def resolve_for_agent_task(
        self,
        agent_id: str,
        task: str,
        api_keys: ApiKeys | None = None,
    ) -> ProviderChatModel:
        """
        Resolve the handle designated for an agent's task.

        Tasks without an explicit route use the Google reasoning model when
        they are reasoning-flavored and the Anthropic coding model otherwise.

        Args:
            agent_id: Agent identifier
            task: Task name, e.g. ``planning`` or ``primary``
            api_keys: Caller-supplied credentials

        Returns:
            Model handle for the routed model

        Raises:
            UnknownAgentError: If the agent has no routing table entry
        """
        agent_key = agent_id.value if isinstance(agent_id, Enum) else str(agent_id)
        routes = self.config.agent_task_routes.get(agent_key)
        if routes is None:
            raise UnknownAgentError(agent_key)

        role = routes.get(task)
        if role is None:
            role = ModelRole.REASONING if task in REASONING_TASKS else ModelRole.CODING

        if role == ModelRole.REASONING:
            return self._build_handle(Provider.GOOGLE, self.config.google.reasoning, api_keys)
        return self._build_handle(Provider.ANTHROPIC, self.config.anthropic.coding, api_keys)

    def fallback_provider(self, api_keys: ApiKeys | None = None) -> ProviderChatModel:
        """Return the Azure-hosted fallback model handle."""
        return self._build_handle(Provider.AZURE, self.config.azure.fallback, api_keys)

    def health_check(self, api_keys: ApiKeys | None = None) -> dict[str, bool]:
        """
        Report which providers can currently produce a usable handle.

        A provider is healthy when its handle can be constructed and a
        credential is available for it. No network request is made, and a
        failing provider never prevents reporting on the others.

        Args:
            api_keys: Caller-supplied credentials

        Returns:
            Provider name to health flag, for every provider
        """
        checks: dict[Provider, Callable[[], ProviderChatModel]] = {
            Provider.ANTHROPIC: lambda: self._build_handle(
                Provider.ANTHROPIC, self.config.anthropic.coding, api_keys
            ),
            Provider.GOOGLE: lambda: self._build_handle(
                Provider.GOOGLE, self.config.google.reasoning, api_keys
            ),
            Provider.OPENAI: lambda: self._build_handle(
                Provider.OPENAI, self.config.openai.default, api_keys
            ),
            Provider.AZURE: lambda: self.fallback_provider(api_keys),
        }

        results: dict[str, bool] = {}
        for provider, check in checks.items():
            try:
                handle = check()
            except Exception as e:
                logger.warning("Health check failed for %s: %s", provider.value, e)
                results[provider.value] = False
                continue
            healthy = handle.client.has_credentials
            if not healthy:
                logger.warning("Health check: no credential for %s", provider.value)
            results[provider.value] = healthy
        return results

    def _credential(self, provider: Provider, api_keys: ApiKeys | None) -> str | None:
        """Caller-supplied key for the provider, else the process-wide default."""
        if api_keys is not None:
            key = api_keys.get(provider.value)
            if key:
                return key
        return self.config.default_key(provider.value)

    def _build_client(self, provider: Provider, api_keys: ApiKeys | None) -> ProviderClient:
        api_key = self._credential(provider, api_keys)
        timeout = self.config.request_timeout

        if provider == Provider.ANTHROPIC:
            return AnthropicClient(api_key, timeout=timeout, transport=self._transport)
        if provider == Provider.OPENAI:
            return OpenAIClient(api_key, timeout=timeout, transport=self._transport)
        if provider == Provider.GOOGLE:
            return GoogleClient(api_key, timeout=timeout, transport=self._transport)
        return AzureOpenAIClient(
            api_key,
            endpoint=self.config.azure_endpoint,
            api_version=self.config.azure_api_version,
            timeout=timeout,
            transport=self._transport,
        )

    def _build_handle(
        self, provider: Provider, model_id: str, api_keys: ApiKeys | None
    ) -> ProviderChatModel:
        from kairo_agents.langchain.llm import ProviderChatModel

        logger.debug("Resolved model %s to provider %s", model_id, provider.value)
        return ProviderChatModel(
            client=self._build_client(provider, api_keys),
            provider=provider,
            model=model_id,
        )
