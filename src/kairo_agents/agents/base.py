"""
Agent contract for the specialized agents.

An agent is described entirely by an AgentSpec value: its identity, base
system prompt, project-type guidance and request-enhancement policy. The
Agent class is a thin stateless wrapper that applies one spec, and
``run_agent`` (see executor.py) performs the actual provider call.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from kairo_agents.core.errors import AgentDisabledError, AgentNotEnabledError
from kairo_agents.core.types import ProjectSettings

if TYPE_CHECKING:
    from kairo_agents.llm.routing import ProviderResolver

# Model used when a project has no model configured for an agent
DEFAULT_AGENT_MODEL = "claude-3-5-sonnet-20241022"


class TaskType(str, Enum):
    """Kind of invocation an agent is handling."""

    INITIAL = "initial"
    FOLLOWUP = "followup"
    COLLABORATION = "collaboration"


class ActionType(str, Enum):
    """Known action item types."""

    CODE_CHANGE = "code_change"
    FILE_CREATE = "file_create"
    DEPENDENCY_ADD = "dependency_add"
    COLLABORATION_REQUEST = "collaboration_request"


class Priority(str, Enum):
    """Collaboration request priority."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class _ContextModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ChatMessage(_ContextModel):
    """A prior message in the conversation."""

    role: Literal["user", "assistant"]
    content: str


class TaskContext(_ContextModel):
    """Optional description of where this invocation sits in a conversation."""

    type: TaskType = TaskType.INITIAL
    previous_messages: list[ChatMessage] | None = None
    collaborating_agents: list[str] | None = None


class AgentConfig(_ContextModel):
    """Per-invocation agent configuration.

    Attributes:
        id: Agent identifier.
        model: Model identifier to resolve a provider from.
        custom_prompt: Extra instructions appended to the system prompt.
        enabled: Whether the agent may run for this invocation.
    """

    id: str
    model: str
    custom_prompt: str | None = None
    enabled: bool = True

    @classmethod
    def from_settings(cls, agent_id: str, settings: ProjectSettings) -> AgentConfig:
        """Derive the config for an agent from project settings.

        Args:
            agent_id: Agent identifier.
            settings: Project settings.

        Returns:
            AgentConfig using the project's model and prompt overrides.
        """
        agent_key = agent_id.value if isinstance(agent_id, Enum) else str(agent_id)
        return cls(
            id=agent_key,
            model=settings.agent_models.get(agent_key) or DEFAULT_AGENT_MODEL,
            custom_prompt=settings.agent_prompts.get(agent_key) or None,
            enabled=agent_key in settings.enabled_agents,
        )


class AgentContext(_ContextModel):
    """Everything an agent execution needs besides the user message."""

    project_settings: ProjectSettings
    agent_config: AgentConfig
    task_context: TaskContext | None = None


@dataclass(frozen=True)
class ActionItem:
    """A directive extracted from an ``[ACTION:type]`` tag.

    ``type`` is an ActionType for known types and the normalized tag text
    otherwise.
    """

    type: ActionType | str
    description: str
    details: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": str(getattr(self.type, "value", self.type)),
            "description": self.description,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class CollaborationRequest:
    """A hand-off extracted from a ``[COLLABORATE:agent-id]`` tag."""

    target_agent: str
    context: str
    priority: Priority = Priority.MEDIUM

    def to_dict(self) -> dict[str, Any]:
        return {
            "targetAgent": self.target_agent,
            "context": self.context,
            "priority": self.priority.value,
        }


@dataclass(frozen=True)
class AgentResponse:
    """Result of one agent execution.

    The structured fields are None, not empty, when the response text
    contained nothing to extract.

    Attributes:
        agent_id: Agent that produced the response.
        response: Raw model output.
        action_items: Extracted action items.
        next_steps: Extracted next-step lines.
        collaboration_requests: Extracted collaboration requests.
    """

    agent_id: str
    response: str
    action_items: tuple[ActionItem, ...] | None = None
    next_steps: tuple[str, ...] | None = None
    collaboration_requests: tuple[CollaborationRequest, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the web app, omitting absent fields.

        Returns:
            camelCase dictionary.
        """
        data: dict[str, Any] = {"agentId": self.agent_id, "response": self.response}
        if self.action_items is not None:
            data["actionItems"] = [item.to_dict() for item in self.action_items]
        if self.next_steps is not None:
            data["nextSteps"] = list(self.next_steps)
        if self.collaboration_requests is not None:
            data["collaborationRequests"] = [
                request.to_dict() for request in self.collaboration_requests
            ]
        return data


ContextualPrompt = Callable[[ProjectSettings], str]


def by_project_type(web_app: str, mobile_app: str) -> ContextualPrompt:
    """Build a contextual prompt that picks a block by project type.

    Unrecognized project types get no agent-specific guidance.
    """
    blocks = {"web-app": web_app, "mobile-app": mobile_app}

    def contextual_prompt(settings: ProjectSettings) -> str:
        return blocks.get(settings.project_type, "")

    return contextual_prompt


@dataclass(frozen=True)
class AgentSpec:
    """Static definition of a specialized agent.

    Attributes:
        id: Agent identifier.
        description: Human-readable description, for display only.
        base_prompt: Fixed system prompt.
        contextual_prompt: Agent-specific guidance derived from settings,
            appended after the generic project context.
        keywords: Lower-case vocabulary that marks a message as on-topic.
        enhancement_suffix: Sentence appended to off-topic messages. Must
            contain one of ``keywords`` so enhancement is idempotent.
    """

    id: str
    description: str
    base_prompt: str
    contextual_prompt: ContextualPrompt
    keywords: tuple[str, ...]
    enhancement_suffix: str


def default_contextual_prompt(settings: ProjectSettings) -> str:
    """Render the generic project context and SDK guideline blocks."""
    prompt = "## Project Context\n"
    prompt += f"- Project Type: {settings.project_type}\n"

    if settings.agility_guid:
        prompt += f"- Agility CMS GUID: {settings.agility_guid}\n"

    rules = [(sdk, rule) for sdk, rule in settings.sdk_rules.items() if rule]
    if rules:
        prompt += "\n## SDK Guidelines\n"
        for sdk, rule in rules:
            prompt += f"### {sdk.upper()}\n{rule}\n\n"

    return prompt


def contextual_prompt_for(spec: AgentSpec, settings: ProjectSettings) -> str:
    return default_contextual_prompt(settings) + spec.contextual_prompt(settings)


def build_system_prompt(spec: AgentSpec, context: AgentContext) -> str:
    """
    Compose the system prompt for an invocation.

    Base prompt, contextual prompt and custom instructions are joined by a
    blank line; empty parts are left out entirely.

    Args:
        spec: Agent definition
        context: Invocation context

    Returns:
        The full system prompt
    """
    custom = context.agent_config.custom_prompt
    parts = [
        spec.base_prompt,
        contextual_prompt_for(spec, context.project_settings),
        f"## Custom Instructions\n{custom}" if custom else "",
    ]
    return "\n\n".join(part for part in parts if part)


def enhance_request(spec: AgentSpec, message: str) -> str:
    """Append the agent's suggestion when the message has none of its keywords."""
    lowered = message.lower()
    if any(keyword in lowered for keyword in spec.keywords):
        return message
    return f"{message}\n\n{spec.enhancement_suffix}"


def validate_context(spec: AgentSpec, context: AgentContext) -> None:
    """
    Check that the agent may run for this context.

    The enabled flag is checked first.

    Raises:
        AgentDisabledError: If ``agent_config.enabled`` is False
        AgentNotEnabledError: If the agent is not in the project's
            enabled agents
    """
    if not context.agent_config.enabled:
        raise AgentDisabledError(spec.id)
    if spec.id not in context.project_settings.enabled_agents:
        raise AgentNotEnabledError(spec.id)


class Agent:
    """A specialized agent.

    Holds only its immutable spec, so one instance may serve any number of
    concurrent executions.
    """

    def __init__(self, spec: AgentSpec) -> None:
        self._spec = spec

    @property
    def spec(self) -> AgentSpec:
        return self._spec

    @property
    def agent_id(self) -> str:
        return self._spec.id

    @property
    def description(self) -> str:
        return self._spec.description

    def build_system_prompt(self, context: AgentContext) -> str:
        return build_system_prompt(self._spec, context)

    def get_contextual_prompt(self, settings: ProjectSettings) -> str:
        return contextual_prompt_for(self._spec, settings)

    def enhance_request(self, message: str) -> str:
        return enhance_request(self._spec, message)

    def validate_context(self, context: AgentContext) -> None:
        validate_context(self._spec, context)

    async def execute(
        self,
        context: AgentContext,
        message: str,
        resolver: ProviderResolver | None = None,
    ) -> AgentResponse:
        """Run the agent. See ``run_agent``."""
        from kairo_agents.agents.executor import run_agent

        return await run_agent(self._spec, context, message, resolver=resolver)

    def __repr__(self) -> str:
        return f"Agent(id={self._spec.id!r})"
