"""Provider-call layer: HTTP clients, request models and provider resolution."""

from kairo_agents.llm.client import (
    AnthropicClient,
    AzureOpenAIClient,
    GoogleClient,
    OpenAIClient,
    ProviderClient,
)
from kairo_agents.llm.errors import (
    ContentPolicyError,
    ContextLengthError,
    LLMError,
    ModelNotFoundError,
    ProviderAuthError,
    ProviderError,
    RateLimitError,
)
from kairo_agents.llm.models import (
    CompletionRequest,
    CompletionResponse,
    Message,
    MessageRole,
    Provider,
    TokenUsage,
)
from kairo_agents.llm.routing import ProviderResolver, detect_provider

__all__ = [
    "AnthropicClient",
    "AzureOpenAIClient",
    "CompletionRequest",
    "CompletionResponse",
    "ContentPolicyError",
    "ContextLengthError",
    "GoogleClient",
    "LLMError",
    "Message",
    "MessageRole",
    "ModelNotFoundError",
    "OpenAIClient",
    "Provider",
    "ProviderAuthError",
    "ProviderClient",
    "ProviderError",
    "ProviderResolver",
    "RateLimitError",
    "TokenUsage",
    "detect_provider",
]
