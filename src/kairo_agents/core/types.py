"""Core value objects shared by the agent and provider layers.

Project settings arrive from the web app as camelCase JSON; every model here
accepts either that form or snake_case field names.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic.alias_generators import to_camel


class AgentId(str, Enum):
    """Identifiers of the ten built-in specialized agents."""

    DESIGN = "design-agent"
    FRONTEND = "frontend-agent"
    CONTENT = "content-agent"
    TESTING = "testing-agent"
    PERFORMANCE = "performance-agent"
    SECURITY = "security-agent"
    RESPONSIVE = "responsive-agent"
    DEPLOYMENT = "deployment-agent"
    TRANSLATION = "translation-agent"
    PR = "pr-agent"


class ProjectType(str, Enum):
    """Kind of project the agents are working on."""

    WEB_APP = "web-app"
    MOBILE_APP = "mobile-app"


class OrchestrationMode(str, Enum):
    """How a higher-level caller picks agents. Not interpreted here."""

    INTELLIGENT = "intelligent"
    MANUAL = "manual"
    SEQUENTIAL = "sequential"


class EnvironmentType(str, Enum):
    """Deployment environment category."""

    LOCAL = "local"
    STAGING = "staging"
    PRODUCTION = "production"
    CUSTOM = "custom"


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Environment(_CamelModel):
    """A deployment target configured for the project."""

    id: str
    name: str
    url: str
    type: EnvironmentType = EnvironmentType.CUSTOM


class MCPServer(_CamelModel):
    """An MCP server descriptor. Only MCP clients interpret these."""

    id: str
    name: str
    command: str
    args: list[str] = Field(default_factory=list)
    enabled: bool = True
    description: str | None = None


class ApiKeys(_CamelModel):
    """Caller-supplied provider credentials, one optional key per provider."""

    openai: SecretStr | None = None
    anthropic: SecretStr | None = None
    google: SecretStr | None = None
    azure: SecretStr | None = None

    def get(self, provider: str) -> str | None:
        """Return the plain key for a provider name, or None if unset or blank."""
        secret: SecretStr | None = getattr(self, str(provider), None)
        if secret is None:
            return None
        value = secret.get_secret_value()
        return value or None


class ProjectSettings(_CamelModel):
    """Project-wide configuration owned by the caller.

    Attributes:
        agility_guid: Optional CMS instance identifier.
        environments: Deployment environments.
        enabled_agents: Agent ids permitted to run for this project.
        orchestration_mode: Caller-level agent selection policy.
        project_type: ``web-app`` or ``mobile-app``; other strings are
            accepted and simply receive no type-specific guidance.
        agent_models: Agent id to model identifier.
        reasoning_model: Model identifier used for reasoning tasks.
        agent_prompts: Agent id to custom prompt override.
        api_keys: Optional provider credentials.
        mcp_servers: MCP server descriptors.
        sdk_rules: SDK name to free-text rule, rendered into prompts.
    """

    agility_guid: str | None = None
    environments: list[Environment] = Field(default_factory=list)
    enabled_agents: list[str] = Field(default_factory=list)
    orchestration_mode: OrchestrationMode = OrchestrationMode.INTELLIGENT
    project_type: str = ProjectType.WEB_APP.value
    agent_models: dict[str, str] = Field(default_factory=dict)
    reasoning_model: str = "gemini-2.0-flash-exp"
    agent_prompts: dict[str, str] = Field(default_factory=dict)
    api_keys: ApiKeys = Field(default_factory=ApiKeys)
    mcp_servers: list[MCPServer] = Field(default_factory=list)
    sdk_rules: dict[str, str | None] = Field(default_factory=dict)

    @field_validator("project_type", mode="before")
    @classmethod
    def normalize_project_type(cls, v: object) -> object:
        """Accept ProjectType members as well as plain strings."""
        if isinstance(v, Enum):
            return v.value
        return v
