"""Provider configuration: models, sources and loader."""

from kairo_agents.config.loader import ConfigLoader, load_provider_config
from kairo_agents.config.models import (
    DEFAULT_AGENT_TASK_ROUTES,
    REASONING_TASKS,
    AnthropicModels,
    AzureModels,
    GoogleModels,
    ModelRole,
    OpenAIModels,
    ProviderConfig,
)
from kairo_agents.config.sources import (
    EnvironmentSource,
    IConfigSource,
    JsonFileSource,
    YamlFileSource,
)

__all__ = [
    "DEFAULT_AGENT_TASK_ROUTES",
    "REASONING_TASKS",
    "AnthropicModels",
    "AzureModels",
    "ConfigLoader",
    "EnvironmentSource",
    "GoogleModels",
    "IConfigSource",
    "JsonFileSource",
    "ModelRole",
    "OpenAIModels",
    "ProviderConfig",
    "YamlFileSource",
    "load_provider_config",
]
