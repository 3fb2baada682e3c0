"""Errors raised by the provider-call layer."""

from __future__ import annotations

from kairo_agents.core.errors import KairoError


class LLMError(KairoError):
    """Base class for provider-call failures."""


class ProviderAuthError(LLMError):
    """No usable credential for the resolved provider, or it was rejected."""

    def __init__(self, message: str = "Invalid or missing API key", provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider


class RateLimitError(LLMError):
    """The provider throttled the request."""

    def __init__(self, message: str = "Rate limit exceeded", retry_after: float | None = None) -> None:
        super().__init__(message)
        self.retry_after = retry_after


class ModelNotFoundError(LLMError):
    """The provider does not know the requested model."""

    def __init__(self, model_id: str) -> None:
        super().__init__(f"Model not found: {model_id}")
        self.model_id = model_id


class ContextLengthError(LLMError):
    """The request exceeded the model's context window."""

    def __init__(
        self,
        message: str = "Context length exceeded",
        max_tokens: int | None = None,
        requested_tokens: int | None = None,
    ) -> None:
        super().__init__(message)
        self.max_tokens = max_tokens
        self.requested_tokens = requested_tokens


class ContentPolicyError(LLMError):
    """The provider refused the content."""

    def __init__(self, message: str = "Content violates policy") -> None:
        super().__init__(message)


class ProviderError(LLMError):
    """Any other provider-side failure."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider = provider
