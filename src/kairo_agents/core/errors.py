"""Exception hierarchy for Kairo agents."""

from __future__ import annotations


class KairoError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(KairoError):
    """Configuration could not be loaded or validated."""


class AgentError(KairoError):
    """Base class for errors tied to a specific agent.

    Attributes:
        agent_id: Identifier of the agent that raised the error.
    """

    def __init__(self, agent_id: str, message: str) -> None:
        super().__init__(message)
        self.agent_id = agent_id


class AgentDisabledError(AgentError):
    """The agent config for this invocation has ``enabled`` set to False."""

    def __init__(self, agent_id: str) -> None:
        super().__init__(agent_id, f"Agent {agent_id} is not enabled")


class AgentNotEnabledError(AgentError):
    """The agent is missing from the project's enabled agents list."""

    def __init__(self, agent_id: str) -> None:
        super().__init__(agent_id, f"Agent {agent_id} is not in enabled agents list")


AgentNotPermittedError = AgentNotEnabledError


class UnknownAgentError(AgentError):
    """No agent is registered under the requested identifier."""

    def __init__(self, agent_id: str) -> None:
        super().__init__(agent_id, f"Unknown agent: {agent_id}")


class AgentExecutionError(AgentError):
    """An agent failed after validation passed.

    Attributes:
        agent_id: Identifier of the failing agent.
        cause_message: Message of the underlying error.
    """

    def __init__(self, agent_id: str, cause_message: str) -> None:
        super().__init__(agent_id, f"Agent execution failed: {cause_message}")
        self.cause_message = cause_message
