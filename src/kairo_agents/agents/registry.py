"""
Agent registry and factory.

The registry is a fixed table built at import time; it cannot be extended
at runtime.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from kairo_agents.core.errors import UnknownAgentError
from kairo_agents.core.logging import get_logger

from .base import Agent, AgentContext, AgentResponse
from .builtin import AGENT_SPECS

if TYPE_CHECKING:
    from kairo_agents.core.types import ProjectSettings
    from kairo_agents.llm.routing import ProviderResolver

logger = get_logger("agents.registry")


def _key(agent_id: str) -> str:
    return agent_id.value if isinstance(agent_id, Enum) else str(agent_id)


def create_agent(agent_id: str) -> Agent:
    """Create an agent by identifier.

    Args:
        agent_id: Registered agent identifier.

    Returns:
        Agent instance.

    Raises:
        UnknownAgentError: If no agent is registered under ``agent_id``.
    """
    spec = AGENT_SPECS.get(_key(agent_id))
    if spec is None:
        raise UnknownAgentError(_key(agent_id))
    return Agent(spec)


async def execute_agent(
    agent_id: str,
    context: AgentContext,
    message: str,
    resolver: ProviderResolver | None = None,
) -> AgentResponse:
    """Create an agent and execute it once.

    Raises:
        UnknownAgentError: If no agent is registered under ``agent_id``.
    """
    agent = create_agent(agent_id)
    logger.debug("Dispatching message to %s", agent.agent_id)
    return await agent.execute(context, message, resolver=resolver)


def list_available_agents() -> list[str]:
    """List registered agent ids in registration order."""
    return list(AGENT_SPECS.keys())


def is_agent_available(agent_id: object) -> bool:
    """Check whether an agent id is registered. Accepts any value."""
    if isinstance(agent_id, Enum):
        agent_id = agent_id.value
    return isinstance(agent_id, str) and agent_id in AGENT_SPECS


def list_enabled_agents(settings: ProjectSettings) -> list[str]:
    """List registered agents enabled for a project.

    Unknown ids in ``settings.enabled_agents`` are ignored.

    Returns:
        Agent ids in registration order.
    """
    enabled = set(settings.enabled_agents)
    return [agent_id for agent_id in AGENT_SPECS if agent_id in enabled]


def describe_agents() -> dict[str, str]:
    """Map each registered agent id to its description."""
    return {agent_id: spec.description for agent_id, spec in AGENT_SPECS.items()}
