"""
Main orchestration chat stream.

The orchestration agent is a single streamed model call with a system
prompt describing the project's enabled agents. It does not invoke the
specialized agents itself; it tells the user which ones it would involve.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping, Sequence
from typing import Any

from kairo_agents.core.logging import get_logger
from kairo_agents.core.types import ProjectSettings
from kairo_agents.langchain.generation import stream_text
from kairo_agents.langchain.messages import kairo_messages_to_langchain
from kairo_agents.llm.models import Message, MessageRole
from kairo_agents.llm.routing import ProviderResolver

logger = get_logger("orchestration")

DEFAULT_ORCHESTRATION_AGENTS = ("frontend-agent", "design-agent", "performance-agent")
ORCHESTRATION_TEMPERATURE = 0.7
ORCHESTRATION_MAX_TOKENS = 4096


def build_orchestration_prompt(settings: ProjectSettings | None = None) -> str:
    """Build the Main Orchestration Agent system prompt.

    Args:
        settings: Project settings. Without settings, or with no enabled
            agents, a default set of three agents is listed.

    Returns:
        System prompt text.
    """
    enabled = list(settings.enabled_agents) if settings else []
    agents = enabled or list(DEFAULT_ORCHESTRATION_AGENTS)
    project_type = (settings.project_type if settings else None) or "web-app"
    mode = settings.orchestration_mode.value if settings else "intelligent"
    agent_lines = "\n".join(f"- {agent_id}" for agent_id in agents)

    return f"""You are the Main Orchestration Agent for Kairo, a multi-agent development platform.

Your role is to coordinate specialized agents to help users build and improve their projects. You have access to these agents:
{agent_lines}

Project Configuration:
- Type: {project_type}
- Orchestration Mode: {mode}
- Enabled Agents: {len(enabled) or len(DEFAULT_ORCHESTRATION_AGENTS)} agents

When responding:
1. Analyze the user's request
2. Determine which agents should handle different aspects
3. Provide a coordinated response that mentions which agents you're leveraging
4. Use this format when delegating: [agent-name] for specific tasks

Example: "I'll coordinate with [design-agent] for the UI layout and [performance-agent] for optimization."

Be helpful, professional, and always explain your orchestration decisions."""


def parse_messages(messages: Any) -> list[Message]:
    """Validate an inbound chat message list.

    Raises:
        ValueError: If ``messages`` is not a non-empty list of
            ``{role, content}`` items with a known role.
    """
    if not isinstance(messages, Sequence) or isinstance(messages, str) or not messages:
        raise ValueError("Invalid messages format")

    parsed: list[Message] = []
    for item in messages:
        if not isinstance(item, Mapping):
            raise ValueError("Invalid messages format")
        content = item.get("content")
        if not isinstance(content, str):
            raise ValueError("Invalid messages format")
        try:
            role = MessageRole(item.get("role"))
        except ValueError as e:
            raise ValueError(f"Invalid message role: {item.get('role')!r}") from e
        parsed.append(Message(role=role, content=content))
    return parsed


async def stream_orchestration(
    messages: Any,
    settings: ProjectSettings | None = None,
    resolver: ProviderResolver | None = None,
) -> AsyncIterator[str]:
    """
    Stream the orchestration agent's reply to a conversation.

    Args:
        messages: Conversation as a list of ``{"role", "content"}`` dicts
        settings: Project settings
        resolver: Provider resolver. Defaults to one built from the
            environment.

    Yields:
        Response text chunks

    Raises:
        ValueError: If ``messages`` is malformed
    """
    history = kairo_messages_to_langchain(parse_messages(messages))
    system_prompt = build_orchestration_prompt(settings)

    if resolver is None:
        resolver = ProviderResolver.from_environment()
    model = resolver.resolve_for_agent_task(
        "frontend-agent", "primary", settings.api_keys if settings else None
    )

    logger.debug("Streaming orchestration reply for %d message(s)", len(history))
    async for text in stream_text(
        model,
        system_prompt,
        history,
        temperature=ORCHESTRATION_TEMPERATURE,
        max_tokens=ORCHESTRATION_MAX_TOKENS,
    ):
        yield text
