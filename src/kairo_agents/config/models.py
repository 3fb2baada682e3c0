"""Configuration models for the provider layer.

The configuration is validated once at process start and handed to the
provider resolver. API keys are held as SecretStr so they never end up in
logs or reprs.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


class ModelRole(str, Enum):
    """Which catalog model an agent task is routed to."""

    CODING = "coding"  # Anthropic coding model
    REASONING = "reasoning"  # Google reasoning model


# Tasks that fall back to the reasoning model when an agent has no explicit route
REASONING_TASKS: frozenset[str] = frozenset({"reasoning", "strategy", "planning", "analysis"})

DEFAULT_AGENT_TASK_ROUTES: dict[str, dict[str, ModelRole]] = {
    "design-agent": {"reasoning": ModelRole.REASONING, "coding": ModelRole.CODING},
    "frontend-agent": {"primary": ModelRole.CODING, "planning": ModelRole.REASONING},
    "content-agent": {"strategy": ModelRole.REASONING, "implementation": ModelRole.CODING},
    "testing-agent": {"generation": ModelRole.CODING, "strategy": ModelRole.REASONING},
    "performance-agent": {"analysis": ModelRole.REASONING, "optimization": ModelRole.CODING},
    "security-agent": {"code": ModelRole.CODING, "analysis": ModelRole.REASONING},
    "responsive-agent": {"code": ModelRole.CODING, "planning": ModelRole.REASONING},
    "deployment-agent": {"planning": ModelRole.REASONING, "scripts": ModelRole.CODING},
    # Known agents without dedicated routes. Every task uses the fallback rules
    # instead of raising UnknownAgentError, which is kept for ids missing here.
    "translation-agent": {},
    "pr-agent": {},
}


def _default_task_routes() -> dict[str, dict[str, ModelRole]]:
    return {agent: dict(routes) for agent, routes in DEFAULT_AGENT_TASK_ROUTES.items()}


class AnthropicModels(BaseModel):
    """Anthropic model catalog."""

    model_config = ConfigDict(frozen=True)

    coding: str = "claude-3-5-sonnet-20241022"
    reasoning: str = "claude-3-7-sonnet-20250219"
    fast: str = "claude-3-5-haiku-20241022"


class GoogleModels(BaseModel):
    """Google Gemini model catalog."""

    model_config = ConfigDict(frozen=True)

    reasoning: str = "gemini-2.0-flash-exp"
    multimodal: str = "gemini-1.5-pro"
    fast: str = "gemini-1.5-flash"


class OpenAIModels(BaseModel):
    """OpenAI model catalog."""

    model_config = ConfigDict(frozen=True)

    default: str = "gpt-4o"
    fast: str = "gpt-4o-mini"


class AzureModels(BaseModel):
    """Azure OpenAI deployment catalog."""

    model_config = ConfigDict(frozen=True)

    fallback: str = "gpt-4o"
    fast: str = "gpt-4o-mini"


class ProviderConfig(BaseModel):
    """Root provider configuration.

    Attributes:
        anthropic_api_key: Process-wide default Anthropic key.
        openai_api_key: Process-wide default OpenAI key.
        google_api_key: Process-wide default Google key.
        azure_api_key: Process-wide default Azure OpenAI key.
        azure_endpoint: Azure OpenAI resource endpoint.
        azure_api_version: Azure OpenAI REST API version.
        request_timeout: Per-request timeout in seconds (1-600).
        anthropic: Anthropic model catalog.
        google: Google model catalog.
        openai: OpenAI model catalog.
        azure: Azure deployment catalog.
        agent_task_routes: Agent id to {task: model role}.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    anthropic_api_key: SecretStr | None = None
    openai_api_key: SecretStr | None = None
    google_api_key: SecretStr | None = None
    azure_api_key: SecretStr | None = None
    azure_endpoint: str | None = None
    azure_api_version: str = "2024-06-01"
    request_timeout: float = Field(default=120.0, ge=1.0, le=600.0)

    anthropic: AnthropicModels = Field(default_factory=AnthropicModels)
    google: GoogleModels = Field(default_factory=GoogleModels)
    openai: OpenAIModels = Field(default_factory=OpenAIModels)
    azure: AzureModels = Field(default_factory=AzureModels)

    agent_task_routes: dict[str, dict[str, ModelRole]] = Field(
        default_factory=_default_task_routes
    )

    @field_validator("azure_endpoint")
    @classmethod
    def normalize_endpoint(cls, v: str | None) -> str | None:
        """Strip whitespace and trailing slashes from the endpoint."""
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    def default_key(self, provider: str) -> str | None:
        """Get the process-wide default key for a provider name.

        Args:
            provider: One of ``anthropic``, ``openai``, ``google``, ``azure``.

        Returns:
            The key string, or None if not configured.
        """
        secret: SecretStr | None = getattr(self, f"{provider}_api_key", None)
        if secret is None:
            return None
        return secret.get_secret_value() or None
