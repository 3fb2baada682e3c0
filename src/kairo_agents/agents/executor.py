"""
Agent execution.

``run_agent`` is the single code path every specialized agent runs
through: validate, enhance, resolve, generate, extract.
"""

from __future__ import annotations

from kairo_agents.agents.base import (
    AgentContext,
    AgentResponse,
    AgentSpec,
    build_system_prompt,
    enhance_request,
    validate_context,
)
from kairo_agents.agents.extraction import (
    extract_action_items,
    extract_collaboration_requests,
    extract_next_steps,
)
from kairo_agents.core.errors import AgentExecutionError
from kairo_agents.core.logging import get_agent_logger
from kairo_agents.langchain.generation import generate_text
from kairo_agents.llm.routing import ProviderResolver

LOGGER_NAME = "agents.executor"

AGENT_TEMPERATURE = 0.7
AGENT_MAX_TOKENS = 2000


async def run_agent(
    spec: AgentSpec,
    context: AgentContext,
    message: str,
    resolver: ProviderResolver | None = None,
) -> AgentResponse:
    """
    Execute an agent for one user message.

    Validation happens before any provider work. After that, every failure
    surfaces as AgentExecutionError; cancellation propagates unchanged.
    There are no retries.

    Args:
        spec: Agent definition
        context: Invocation context
        message: Raw user message
        resolver: Provider resolver. Defaults to one built from the
            environment.

    Returns:
        Complete AgentResponse

    Raises:
        AgentDisabledError: If the agent config is disabled
        AgentNotEnabledError: If the project does not enable the agent
        AgentExecutionError: If provider resolution or generation fails
    """
    log = get_agent_logger(LOGGER_NAME, spec.id)
    validate_context(spec, context)
    enhanced = enhance_request(spec, message)

    log.debug("Executing with model %s", context.agent_config.model)

    try:
        if resolver is None:
            resolver = ProviderResolver.from_environment()
        model = resolver.resolve(
            context.agent_config.model, context.project_settings.api_keys
        )
        system_prompt = build_system_prompt(spec, context)
        text = await generate_text(
            model,
            system_prompt,
            enhanced,
            temperature=AGENT_TEMPERATURE,
            max_tokens=AGENT_MAX_TOKENS,
        )
    except Exception as e:
        cause = str(e) or type(e).__name__
        log.error("Execution failed: %s", cause)
        raise AgentExecutionError(spec.id, cause) from e

    response = AgentResponse(
        agent_id=spec.id,
        response=text,
        action_items=extract_action_items(text),
        next_steps=extract_next_steps(text),
        collaboration_requests=extract_collaboration_requests(text),
    )
    log.debug(
        "Extracted %d action item(s), %d next step(s), %d collaboration request(s)",
        len(response.action_items or ()),
        len(response.next_steps or ()),
        len(response.collaboration_requests or ()),
    )
    return response
