"""Tests for the exception hierarchy."""

from __future__ import annotations

from kairo_agents.core.errors import (
    AgentDisabledError,
    AgentError,
    AgentExecutionError,
    AgentNotEnabledError,
    ConfigError,
    KairoError,
    UnknownAgentError,
)


class TestAgentErrors:
    """Tests for agent error messages and attributes."""

    def test_disabled(self) -> None:
        """Test disabled error message and agent id."""
        error = AgentDisabledError("design-agent")
        assert str(error) == "Agent design-agent is not enabled"
        assert error.agent_id == "design-agent"

    def test_not_enabled(self) -> None:
        """Test not-enabled error message."""
        error = AgentNotEnabledError("pr-agent")
        assert str(error) == "Agent pr-agent is not in enabled agents list"

    def test_unknown(self) -> None:
        """Test unknown agent error message."""
        assert str(UnknownAgentError("ghost")) == "Unknown agent: ghost"

    def test_execution(self) -> None:
        """Test execution error message and cause."""
        error = AgentExecutionError("design-agent", "timeout")
        assert str(error) == "Agent execution failed: timeout"
        assert error.cause_message == "timeout"

    def test_hierarchy(self) -> None:
        """Test agent errors share the KairoError root."""
        for error in (
            AgentDisabledError("a"),
            AgentNotEnabledError("a"),
            UnknownAgentError("a"),
            AgentExecutionError("a", "b"),
        ):
            assert isinstance(error, AgentError)
            assert isinstance(error, KairoError)
        assert issubclass(ConfigError, KairoError)
        assert not issubclass(ConfigError, AgentError)
