"""Specialized agents: contract, built-in definitions, execution and registry."""

from kairo_agents.agents.base import (
    ActionItem,
    ActionType,
    Agent,
    AgentConfig,
    AgentContext,
    AgentResponse,
    AgentSpec,
    ChatMessage,
    CollaborationRequest,
    Priority,
    TaskContext,
    TaskType,
    build_system_prompt,
    by_project_type,
    default_contextual_prompt,
    enhance_request,
    validate_context,
)
from kairo_agents.agents.builtin import AGENT_SPECS
from kairo_agents.agents.executor import run_agent
from kairo_agents.agents.extraction import (
    extract_action_items,
    extract_collaboration_requests,
    extract_next_steps,
)
from kairo_agents.agents.registry import (
    create_agent,
    describe_agents,
    execute_agent,
    is_agent_available,
    list_available_agents,
    list_enabled_agents,
)

__all__ = [
    "AGENT_SPECS",
    "ActionItem",
    "ActionType",
    "Agent",
    "AgentConfig",
    "AgentContext",
    "AgentResponse",
    "AgentSpec",
    "ChatMessage",
    "CollaborationRequest",
    "Priority",
    "TaskContext",
    "TaskType",
    "build_system_prompt",
    "by_project_type",
    "create_agent",
    "default_contextual_prompt",
    "describe_agents",
    "enhance_request",
    "execute_agent",
    "extract_action_items",
    "extract_collaboration_requests",
    "extract_next_steps",
    "is_agent_available",
    "list_available_agents",
    "list_enabled_agents",
    "run_agent",
    "validate_context",
]
