"""Tests for core value objects."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

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


class TestProjectSettings:
    """Tests for ProjectSettings parsing."""

    def test_defaults(self) -> None:
        """Test default settings values."""
        settings = ProjectSettings()
        assert settings.project_type == "web-app"
        assert settings.enabled_agents == []
        assert settings.orchestration_mode == OrchestrationMode.INTELLIGENT
        assert settings.reasoning_model == "gemini-2.0-flash-exp"
        assert settings.api_keys.get("anthropic") is None

    def test_camel_case_payload(self) -> None:
        """Test a camelCase web app payload parses."""
        settings = ProjectSettings.model_validate(
            {
                "agilityGuid": "guid",
                "projectType": "mobile-app",
                "orchestrationMode": "sequential",
                "enabledAgents": ["design-agent"],
                "agentModels": {"design-agent": "gpt-4o"},
                "agentPrompts": {"design-agent": "Be bold"},
                "environments": [
                    {"id": "e1", "name": "Prod", "url": "https://x", "type": "production"}
                ],
                "mcpServers": [{"id": "m", "name": "fs", "command": "npx"}],
                "sdkRules": {"fetch": "rule", "sync": None},
            }
        )
        assert settings.agility_guid == "guid"
        assert settings.orchestration_mode == OrchestrationMode.SEQUENTIAL
        assert settings.environments[0].type == EnvironmentType.PRODUCTION
        assert settings.mcp_servers[0].args == []
        assert settings.sdk_rules == {"fetch": "rule", "sync": None}

    def test_snake_case_names(self) -> None:
        """Test snake_case field names are accepted."""
        settings = ProjectSettings(project_type="mobile-app", agility_guid="g")
        assert settings.project_type == "mobile-app"

    def test_project_type_enum_member(self) -> None:
        """Test project type accepts a ProjectType member."""
        assert ProjectSettings(project_type=ProjectType.MOBILE_APP).project_type == "mobile-app"

    def test_other_project_type_accepted(self) -> None:
        """Test unlisted project types are kept."""
        assert ProjectSettings(project_type="cli-tool").project_type == "cli-tool"

    def test_invalid_orchestration_mode(self) -> None:
        """Test unknown orchestration mode is rejected."""
        with pytest.raises(ValidationError):
            ProjectSettings(orchestration_mode="random")

    def test_frozen(self) -> None:
        """Test settings are immutable."""
        settings = ProjectSettings()
        with pytest.raises(ValidationError):
            settings.project_type = "mobile-app"  # type: ignore[misc]


class TestApiKeys:
    """Tests for caller credentials."""

    def test_get(self) -> None:
        """Test key lookup by provider name."""
        keys = ApiKeys(openai="sk")
        assert keys.get("openai") == "sk"
        assert keys.get("google") is None

    def test_blank_is_none(self) -> None:
        """Test blank keys read as missing."""
        assert ApiKeys(azure="").get("azure") is None

    def test_unknown_provider(self) -> None:
        """Test unknown providers have no key."""
        assert ApiKeys().get("mistral") is None

    def test_secret_not_in_repr(self) -> None:
        """Test keys are hidden from repr."""
        assert "sk-secret" not in repr(ApiKeys(anthropic="sk-secret"))


class TestSmallModels:
    """Tests for descriptor models."""

    def test_environment_default_type(self) -> None:
        """Test environment type defaults to custom."""
        env = Environment(id="e", name="Local", url="http://localhost")
        assert env.type == EnvironmentType.CUSTOM

    def test_mcp_server_defaults(self) -> None:
        """Test MCP server defaults."""
        server = MCPServer(id="m", name="n", command="c")
        assert server.enabled is True
        assert server.description is None

    def test_agent_ids(self) -> None:
        """Test there are ten agent ids."""
        assert len(AgentId) == 10
        assert AgentId.PR.value == "pr-agent"
