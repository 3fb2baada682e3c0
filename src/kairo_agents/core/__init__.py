"""Core package containing types, errors, and logging."""

from kairo_agents.core.errors import (
    AgentDisabledError,
    AgentError,
    AgentExecutionError,
    AgentNotEnabledError,
    AgentNotPermittedError,
    ConfigError,
    KairoError,
    UnknownAgentError,
)
from kairo_agents.core.logging import get_agent_logger, get_logger, setup_logging
from kairo_agents.core.types import (
    AgentId,
    ApiKeys,
    Environment,
    EnvironmentType,
    MCPServer,
    OrchestrationMode,
    ProjectSettings,
    ProjectType,
)

__all__ = [
    "AgentDisabledError",
    "AgentError",
    "AgentExecutionError",
    "AgentId",
    "AgentNotEnabledError",
    "AgentNotPermittedError",
    "ApiKeys",
    "ConfigError",
    "Environment",
    "EnvironmentType",
    "KairoError",
    "MCPServer",
    "OrchestrationMode",
    "ProjectSettings",
    "ProjectType",
    "UnknownAgentError",
    "get_agent_logger",
    "get_logger",
    "setup_logging",
]
